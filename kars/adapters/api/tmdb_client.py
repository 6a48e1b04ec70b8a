"""
Client TMDB pour la recherche de films et de series TV.

Supporte les deux modes d'authentification TMDB :
- API Key v3 (32 caracteres hex) : passee en parametre api_key
- Read Access Token v4 (long JWT) : passe en header Bearer

Usage:
    client = TMDBClient(api_key="xxx", cache=APICache())
    results = await client.search("Inception", MediaSearchType.MOVIE)
    await client.close()
"""

from typing import Optional

import httpx

from kars.adapters.api.base import MAX_RESULTS, CatalogClient
from kars.adapters.api.cache import APICache
from kars.adapters.api.retry import request_with_retry
from kars.core.entities.media import Movie, Series
from kars.core.ports.api_clients import MediaSearchType, SearchResult
from kars.core.value_objects import Progress, encode_score


def vote_to_score(vote: Optional[float]) -> Optional[int]:
    """Convertit vote_average TMDB (0.0-10.0) en note globale 0-100. 0 = pas de note."""
    if vote is None or vote <= 0:
        return None
    return encode_score(vote)


def _year(date: Optional[str]) -> str:
    return date[:4] if date and len(date) >= 4 else "?"


class TMDBClient(CatalogClient):
    """
    Client API TMDB pour les films (/search/movie) et series (/search/tv).

    Les series TMDB n'exposent pas de nombre d'episodes dans la recherche :
    le total reste inconnu.
    """

    BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

    def __init__(self, api_key: str, cache: Optional[APICache] = None) -> None:
        """
        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4)
            cache: Cache des recherches
        """
        super().__init__(cache=cache)
        self._api_key = api_key

    def _is_v4_token(self) -> bool:
        return len(self._api_key) > 40

    def _headers(self) -> dict[str, str]:
        headers = super()._headers()
        if self._is_v4_token():
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            params = {} if self._is_v4_token() else {"api_key": self._api_key}
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers=self._headers(),
                params=params,
                timeout=self.TIMEOUT,
            )
        return self._client

    @property
    def name(self) -> str:
        return "TMDB"

    @property
    def source(self) -> str:
        return "tmdb"

    @property
    def supported_types(self) -> tuple[MediaSearchType, ...]:
        return (MediaSearchType.MOVIE, MediaSearchType.SERIES)

    def _poster_url(self, poster_path: Optional[str]) -> Optional[str]:
        return f"{self.TMDB_IMAGE_BASE_URL}{poster_path}" if poster_path else None

    async def _fetch(
        self, query: str, search_type: MediaSearchType
    ) -> list[SearchResult]:
        path = "/search/movie" if search_type is MediaSearchType.MOVIE else "/search/tv"
        response = await request_with_retry(
            self._get_client(),
            "GET",
            path,
            params={
                "query": query,
                "include_adult": "false",
                "language": "en-US",
                "page": "1",
            },
        )
        items = response.json().get("results", [])[:MAX_RESULTS]

        if search_type is MediaSearchType.MOVIE:
            return [
                SearchResult(
                    title=item["title"],
                    kind=Movie(),
                    source=self.source,
                    format_label=f"Movie ({_year(item.get('release_date'))})",
                    global_score=vote_to_score(item.get("vote_average")),
                    external_id=item["id"],
                    poster_url=self._poster_url(item.get("poster_path")),
                )
                for item in items
            ]
        return [
            SearchResult(
                title=item["name"],
                kind=Series(progress=Progress(current=0, total=None)),
                source=self.source,
                format_label=f"TV Series ({_year(item.get('first_air_date'))})",
                global_score=vote_to_score(item.get("vote_average")),
                external_id=item["id"],
                poster_url=self._poster_url(item.get("poster_path")),
            )
            for item in items
        ]
