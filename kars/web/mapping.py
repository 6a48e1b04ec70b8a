"""
Conversion bidirectionnelle MediaRecord <-> ApiMediaItem.

Decomposition : le media_type presente depend de la variante ET, pour une
serie, de la source ("anilist" -> "anime", sinon "series"). Cette distinction
est purement presentationnelle : elle n'est pas conservee au retour et se
re-derive de la source a la sortie suivante.

Recomposition : id vide -> nouvel UUID ; id invalide -> InvalidIdentifier ;
type inconnu -> UnknownMediaType. Un statut inconnu se replie sur l'etat
"plan" du type (tolerance voulue, pas une erreur).
"""

from typing import Iterable, Optional
from uuid import UUID, uuid4

from loguru import logger

from kars.core.entities.media import (
    FAVORITE_TAG,
    MediaKind,
    MediaRecord,
    Movie,
    Readable,
    Series,
)
from kars.core.errors import InvalidIdentifier, UnknownMediaType
from kars.core.ports.api_clients import SearchResult
from kars.core.value_objects import (
    Progress,
    ReadableKind,
    ReadStatus,
    WatchStatus,
    decode_score,
    parse_read_status,
    parse_watch_status,
)
from kars.web.schemas import U32_MAX, ApiExploreResult, ApiMediaItem, ApiStats

ANIME_SOURCE = "anilist"
SERIES_TYPES = ("series", "anime")

_KNOWN_STATUSES = {s.value for s in WatchStatus} | {s.value for s in ReadStatus}


def presented_media_type(kind: MediaKind, source: Optional[str]) -> str:
    """Retourne le media_type affiche pour une variante et une source."""
    if isinstance(kind, Movie):
        return "movie"
    if isinstance(kind, Series):
        return "anime" if source == ANIME_SOURCE else "series"
    return kind.readable_kind.value


def to_api_item(record: MediaRecord) -> ApiMediaItem:
    """
    Decompose un MediaRecord en representation API.

    Un film expose progress=0 et aucun total. favorite est calcule depuis
    les tags, jamais stocke a part.
    """
    kind = record.kind
    progress = record.progress or Progress()

    return ApiMediaItem(
        id=str(record.id),
        title=record.title,
        media_type=presented_media_type(kind, record.source),
        status=kind.status.value,
        score=record.score_display,
        global_score=record.global_score_display,
        progress=progress.current,
        total_episodes=progress.total,
        poster_url=record.poster_url,
        source=record.source,
        external_id=str(record.external_id) if record.external_id is not None else None,
        tags=sorted(record.tags),
        favorite=record.is_favorite,
    )


def from_api_item(item: ApiMediaItem) -> MediaRecord:
    """
    Recompose un MediaRecord depuis la representation API.

    Raises:
        InvalidIdentifier: id non vide qui n'est pas un UUID
        UnknownMediaType: media_type non reconnu
    """
    record_id = _parse_id(item.id)
    progress = Progress(current=item.progress, total=item.total_episodes)
    kind = _parse_kind(item.media_type, item.status, progress)

    tags = set(item.tags)
    if item.favorite:
        tags.add(FAVORITE_TAG)

    record = MediaRecord(
        id=record_id,
        title=item.title,
        kind=kind,
        external_id=_parse_external_id(item.external_id),
        poster_url=item.poster_url,
        source=item.source,
        tags=tags,
    )
    if item.score is not None:
        record.set_score(item.score)
    if item.global_score is not None:
        record.set_global_score(item.global_score)
    return record


def to_explore_result(result: SearchResult) -> ApiExploreResult:
    """Aplatit un resultat de catalogue pour l'API d'exploration."""
    kind = result.kind
    total = None if isinstance(kind, Movie) else kind.progress.total
    return ApiExploreResult(
        title=result.title,
        media_type=presented_media_type(kind, result.source),
        global_score=decode_score(result.global_score) if result.global_score is not None else None,
        external_id=str(result.external_id) if result.external_id is not None else None,
        poster_url=result.poster_url,
        source=result.source,
        total_episodes=total,
        format_label=result.format_label,
    )


def compute_stats(items: Iterable[ApiMediaItem]) -> ApiStats:
    """
    Compte les medias par statut et par type presente.

    watching et reading partagent un compteur, comme plan_to_watch et
    plan_to_read. Tout sous-type de lecture compte dans "readable".
    """
    stats = ApiStats()
    for item in items:
        stats.total += 1

        if item.status in ("watching", "reading"):
            stats.watching += 1
        elif item.status == "completed":
            stats.completed += 1
        elif item.status in ("plan_to_watch", "plan_to_read"):
            stats.plan_to_watch += 1
        elif item.status == "on_hold":
            stats.on_hold += 1
        elif item.status == "dropped":
            stats.dropped += 1

        if item.media_type == "movie":
            stats.movies += 1
        elif item.media_type == "series":
            stats.series += 1
        elif item.media_type == "anime":
            stats.anime += 1
        else:
            stats.readable += 1
    return stats


def _parse_id(raw: str) -> UUID:
    if not raw:
        return uuid4()
    try:
        return UUID(raw)
    except ValueError as exc:
        raise InvalidIdentifier(raw) from exc


def _parse_kind(media_type: str, status: str, progress: Progress) -> MediaKind:
    if status not in _KNOWN_STATUSES:
        logger.debug(f"Statut inconnu {status!r}, repli sur l'etat 'plan'")

    if media_type == "movie":
        return Movie(status=parse_watch_status(status))
    if media_type in SERIES_TYPES:
        return Series(progress=progress, status=parse_watch_status(status))
    try:
        readable_kind = ReadableKind(media_type)
    except ValueError:
        raise UnknownMediaType(media_type) from None
    return Readable(
        readable_kind=readable_kind,
        progress=progress,
        status=parse_read_status(status),
    )


def _parse_external_id(raw: Optional[str]) -> Optional[int]:
    """ID numerique du catalogue ; hors chiffres ASCII ou hors u32, il est ignore."""
    if raw is None or not (raw.isascii() and raw.isdigit()):
        return None
    value = int(raw)
    return value if value <= U32_MAX else None
