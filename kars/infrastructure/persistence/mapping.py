"""
Conversion bidirectionnelle MediaRecord <-> MediaItemModel.

Decomposition : une seule des colonnes watch_status / read_status est ecrite
selon la variante, readable_kind uniquement pour les lectures ; les colonnes
inutilisees restent NULL.

Recomposition : dispatch sur media_type. Politique d'erreurs :
- media_type inconnu ou id invalide -> DataCorruption (arret net)
- tags JSON absents ou illisibles -> ensemble vide (cosmetique)
- statut ou readable_kind inconnu -> valeur par defaut
"""

import json
from enum import Enum
from typing import Optional, TypeVar
from uuid import UUID

from loguru import logger

from kars.core.entities.media import MediaRecord, Movie, Readable, Series
from kars.core.errors import DataCorruption
from kars.core.value_objects import Progress, ReadableKind, ReadStatus, WatchStatus
from kars.infrastructure.persistence.models import MediaItemModel

E = TypeVar("E", bound=Enum)


def to_row(record: MediaRecord) -> MediaItemModel:
    """
    Decompose un MediaRecord en ligne plate.

    Args :
        record : L'entite du domaine

    Retourne :
        Le modele MediaItemModel pret a etre persiste
    """
    kind = record.kind
    readable_kind = None
    watch_status = None
    read_status = None
    progress_cur = 0
    progress_tot = None

    if isinstance(kind, Movie):
        watch_status = kind.status.value
    elif isinstance(kind, Series):
        watch_status = kind.status.value
        progress_cur, progress_tot = kind.progress.current, kind.progress.total
    else:
        readable_kind = kind.readable_kind.value
        read_status = kind.status.value
        progress_cur, progress_tot = kind.progress.current, kind.progress.total

    return MediaItemModel(
        id=str(record.id),
        title=record.title,
        media_type=kind.media_type,
        readable_kind=readable_kind,
        watch_status=watch_status,
        read_status=read_status,
        progress_cur=progress_cur,
        progress_tot=progress_tot,
        score=record.score,
        global_score=record.global_score,
        external_id=record.external_id,
        poster_url=record.poster_url,
        source=record.source,
        tags=json.dumps(sorted(record.tags)),
    )


def from_row(model: MediaItemModel) -> MediaRecord:
    """
    Recompose un MediaRecord depuis une ligne plate.

    Args :
        model : Le modele MediaItemModel lu en base

    Retourne :
        L'entite MediaRecord correspondante

    Raises :
        DataCorruption : id invalide, media_type inconnu ou progression negative
    """
    try:
        record_id = UUID(model.id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise DataCorruption(f"invalid id {model.id!r}") from exc

    try:
        progress = Progress(current=model.progress_cur or 0, total=model.progress_tot)
    except ValueError as exc:
        raise DataCorruption(f"invalid progress for {model.id}: {exc}") from exc

    if model.media_type == Movie.media_type:
        kind = Movie(status=_stored_enum(WatchStatus, model.watch_status, WatchStatus.PLAN_TO_WATCH))
    elif model.media_type == Series.media_type:
        kind = Series(
            progress=progress,
            status=_stored_enum(WatchStatus, model.watch_status, WatchStatus.PLAN_TO_WATCH),
        )
    elif model.media_type == Readable.media_type:
        kind = Readable(
            readable_kind=_stored_enum(ReadableKind, model.readable_kind, ReadableKind.BOOK),
            progress=progress,
            status=_stored_enum(ReadStatus, model.read_status, ReadStatus.PLAN_TO_READ),
        )
    else:
        raise DataCorruption(f"unknown media_type {model.media_type!r}")

    return MediaRecord(
        id=record_id,
        title=model.title,
        kind=kind,
        score=model.score,
        global_score=model.global_score,
        external_id=model.external_id,
        poster_url=model.poster_url,
        source=model.source,
        tags=_load_tags(model.tags, model.id),
    )


def _stored_enum(enum_cls: type[E], value: Optional[str], default: E) -> E:
    """Lit une valeur d'enumeration stockee, avec repli sur la valeur par defaut."""
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        logger.debug(f"Valeur {enum_cls.__name__} inconnue en base: {value!r}")
        return default


def _load_tags(raw: Optional[str], record_id: str) -> set[str]:
    """Deserialise la colonne tags. Tout contenu invalide donne un ensemble vide."""
    if not raw:
        return set()
    try:
        tags = json.loads(raw)
    except ValueError:
        logger.warning(f"Tags JSON illisibles pour {record_id}, ignores")
        return set()
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        logger.warning(f"Tags JSON inattendus pour {record_id}, ignores")
        return set()
    return set(tags)
