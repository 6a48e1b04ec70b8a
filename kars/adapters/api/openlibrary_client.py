"""
Client Open Library pour la recherche de livres.
"""

from typing import Optional

from kars.adapters.api.base import MAX_RESULTS, CatalogClient
from kars.adapters.api.retry import request_with_retry
from kars.core.entities.media import Readable
from kars.core.ports.api_clients import MediaSearchType, SearchResult
from kars.core.value_objects import Progress, ReadableKind

SEARCH_FIELDS = (
    "key,title,author_name,first_publish_year,cover_i,"
    "number_of_pages_median,ratings_average"
)


def rating_to_score(rating: Optional[float]) -> Optional[int]:
    """Convertit ratings_average (1.0-5.0) en note globale 0-100."""
    if rating is None:
        return None
    clamped = min(max(rating, 0.0), 5.0)
    return int(clamped / 5.0 * 100 + 0.5)


def parse_work_id(key: Optional[str]) -> Optional[int]:
    """Extrait l'ID numerique d'une cle d'oeuvre ("/works/OL27448W" -> 27448)."""
    if not key:
        return None
    digits = key.removeprefix("/works/OL").removesuffix("W")
    return int(digits) if digits.isdigit() else None


class OpenLibraryClient(CatalogClient):
    """Client Open Library (/search.json). Total = nombre median de pages."""

    BASE_URL = "https://openlibrary.org"
    COVER_BASE_URL = "https://covers.openlibrary.org/b/id"

    @property
    def name(self) -> str:
        return "Open Library"

    @property
    def source(self) -> str:
        return "openlibrary"

    @property
    def supported_types(self) -> tuple[MediaSearchType, ...]:
        return (MediaSearchType.BOOK,)

    async def _fetch(
        self, query: str, search_type: MediaSearchType
    ) -> list[SearchResult]:
        response = await request_with_retry(
            self._get_client(),
            "GET",
            "/search.json",
            params={"q": query, "fields": SEARCH_FIELDS, "limit": str(MAX_RESULTS)},
        )

        results = []
        for doc in response.json().get("docs", []):
            title = doc.get("title")
            if not title:
                continue
            authors = doc.get("author_name") or ["Unknown"]
            year = doc.get("first_publish_year") or "?"
            cover_id = doc.get("cover_i")
            results.append(
                SearchResult(
                    title=title,
                    kind=Readable(
                        readable_kind=ReadableKind.BOOK,
                        progress=Progress(current=0, total=doc.get("number_of_pages_median")),
                    ),
                    source=self.source,
                    format_label=f"{authors[0]} ({year})",
                    global_score=rating_to_score(doc.get("ratings_average")),
                    external_id=parse_work_id(doc.get("key")),
                    poster_url=f"{self.COVER_BASE_URL}/{cover_id}-M.jpg" if cover_id else None,
                )
            )
        return results
