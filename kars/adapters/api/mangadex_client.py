"""
Client MangaDex pour la recherche de mangas, manhwas et webtoons.

MangaDex identifie ses oeuvres par UUID : les resultats n'ont donc pas
d'external_id numerique. Les notes proviennent d'un second appel groupe
a /statistics/manga.
"""

from typing import Any, Optional

import httpx
from loguru import logger

from kars.adapters.api.base import MAX_RESULTS, CatalogClient
from kars.adapters.api.retry import (
    RateLimitError,
    ServiceUnavailableError,
    request_with_retry,
)
from kars.core.entities.media import Readable
from kars.core.ports.api_clients import MediaSearchType, SearchResult
from kars.core.value_objects import Progress, ReadableKind, encode_score

USER_AGENT = "kars-archive/0.1"


class MangaDexClient(CatalogClient):
    """
    Client MangaDex.

    Sous-type deduit de la langue originale : coreen + tag "Long Strip"
    -> webtoon, coreen -> manhwa, sinon manga.
    """

    BASE_URL = "https://api.mangadex.org"
    COVER_BASE_URL = "https://uploads.mangadex.org/covers"

    def _headers(self) -> dict[str, str]:
        headers = super()._headers()
        headers["User-Agent"] = USER_AGENT
        return headers

    @property
    def name(self) -> str:
        return "MangaDex"

    @property
    def source(self) -> str:
        return "mangadex"

    @property
    def supported_types(self) -> tuple[MediaSearchType, ...]:
        return (MediaSearchType.MANGA,)

    async def _fetch(
        self, query: str, search_type: MediaSearchType
    ) -> list[SearchResult]:
        response = await request_with_retry(
            self._get_client(),
            "GET",
            "/manga",
            params=[
                ("title", query),
                ("limit", str(MAX_RESULTS)),
                ("includes[]", "cover_art"),
                ("includes[]", "author"),
                ("order[relevance]", "desc"),
                ("contentRating[]", "safe"),
                ("contentRating[]", "suggestive"),
            ],
        )
        mangas = response.json()["data"]
        stats = await self._fetch_stats([m["id"] for m in mangas])
        return [self._map_manga(manga, stats) for manga in mangas]

    async def _fetch_stats(self, ids: list[str]) -> dict[str, Any]:
        """
        Recupere les statistiques (notes) des mangas en un appel.

        Un echec est non bloquant : les resultats sont retournes sans note.
        """
        if not ids:
            return {}
        try:
            response = await request_with_retry(
                self._get_client(),
                "GET",
                "/statistics/manga",
                params=[("manga[]", manga_id) for manga_id in ids],
            )
            return response.json().get("statistics") or {}
        except (httpx.HTTPError, RateLimitError, ServiceUnavailableError, ValueError) as exc:
            logger.warning(f"MangaDex: statistiques indisponibles ({exc})")
            return {}

    def _map_manga(self, manga: dict, stats: dict[str, Any]) -> SearchResult:
        attributes = manga["attributes"]
        relationships = manga.get("relationships", [])
        readable_kind, kind_label = determine_kind(attributes)

        year = attributes.get("year") or "?"
        status = attributes.get("status") or "unknown"
        author = _relationship_attr(relationships, "author", "name") or "Unknown"

        cover_file = _relationship_attr(relationships, "cover_art", "fileName")
        poster_url = (
            f"{self.COVER_BASE_URL}/{manga['id']}/{cover_file}.256.jpg" if cover_file else None
        )

        bayesian = ((stats.get(manga["id"]) or {}).get("rating") or {}).get("bayesian")

        return SearchResult(
            title=extract_title(attributes.get("title") or {}),
            kind=Readable(
                readable_kind=readable_kind,
                progress=Progress(current=0, total=_parse_chapter(attributes.get("lastChapter"))),
            ),
            source=self.source,
            format_label=f"{kind_label} · {author} ({year}, {status})",
            global_score=encode_score(bayesian) if bayesian is not None else None,
            external_id=None,
            poster_url=poster_url,
        )


def extract_title(titles: dict[str, str]) -> str:
    """Titre anglais, puis japonais romanise, puis japonais, puis le premier disponible."""
    for lang in ("en", "ja-ro", "ja"):
        if titles.get(lang):
            return titles[lang]
    return next(iter(titles.values()), "Unknown")


def determine_kind(attributes: dict) -> tuple[ReadableKind, str]:
    """Deduit le sous-type et son libelle depuis la langue et les tags."""
    if (attributes.get("originalLanguage") or "ja") != "ko":
        return ReadableKind.MANGA, "Manga"
    long_strip = any(
        (tag.get("attributes", {}).get("name", {}).get("en") or "").lower() == "long strip"
        for tag in attributes.get("tags", [])
    )
    if long_strip:
        return ReadableKind.WEBTOON, "Webtoon"
    return ReadableKind.MANHWA, "Manhwa"


def _relationship_attr(relationships: list[dict], rel_type: str, attr: str) -> Optional[str]:
    for rel in relationships:
        if rel.get("type") == rel_type:
            return (rel.get("attributes") or {}).get(attr)
    return None


def _parse_chapter(value: Optional[str]) -> Optional[int]:
    """lastChapter est une chaine ("108", "10.5", "") : partie entiere ou None."""
    if not value:
        return None
    try:
        return int(float(value))
    except ValueError:
        return None
