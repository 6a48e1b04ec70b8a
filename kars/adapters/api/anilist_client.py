"""
Client AniList (GraphQL) pour la recherche d'animes, mangas et light novels.

Usage:
    client = AniListClient(cache=APICache())
    results = await client.search("Frieren", MediaSearchType.ANIME)
    await client.close()
"""

from typing import Any, Optional

from kars.adapters.api.base import CatalogClient
from kars.adapters.api.retry import request_with_retry
from kars.core.entities.media import MediaKind, Movie, Readable, Series
from kars.core.ports.api_clients import MediaSearchType, SearchError, SearchResult
from kars.core.value_objects import Progress, ReadableKind

SEARCH_QUERY = """
query ($search: String, $type: MediaType, $format: MediaFormat) {
  Page(perPage: 10) {
    media(search: $search, type: $type, format: $format, sort: SEARCH_MATCH) {
      id
      title {
        romaji
        english
      }
      episodes
      chapters
      meanScore
      coverImage {
        large
      }
      format
      countryOfOrigin
    }
  }
}
"""

# Libelles des formats AniList pour les animes
ANIME_FORMAT_LABELS = {
    "TV": "TV",
    "TV_SHORT": "TV Short",
    "OVA": "OVA",
    "ONA": "ONA",
    "SPECIAL": "Special",
    "MUSIC": "Music",
}


class AniListClient(CatalogClient):
    """
    Client AniList.

    - ANIME : format MOVIE -> Movie, sinon Series (total = episodes)
    - MANGA / LIGHT_NOVEL : format NOVEL -> light novel, pays KR -> manhwa,
      sinon manga (total = chapitres)
    - meanScore (0-100) borne a 100 et utilise tel quel comme note globale
    """

    BASE_URL = "https://graphql.anilist.co"

    @property
    def name(self) -> str:
        return "AniList"

    @property
    def source(self) -> str:
        return "anilist"

    @property
    def supported_types(self) -> tuple[MediaSearchType, ...]:
        return (MediaSearchType.ANIME, MediaSearchType.MANGA, MediaSearchType.LIGHT_NOVEL)

    async def _fetch(
        self, query: str, search_type: MediaSearchType
    ) -> list[SearchResult]:
        if search_type is MediaSearchType.ANIME:
            api_type, format_filter = "ANIME", None
        elif search_type is MediaSearchType.MANGA:
            api_type, format_filter = "MANGA", None
        else:
            api_type, format_filter = "MANGA", "NOVEL"

        variables: dict[str, Any] = {"search": query, "type": api_type}
        if format_filter:
            variables["format"] = format_filter

        response = await request_with_retry(
            self._get_client(),
            "POST",
            "/",
            json={"query": SEARCH_QUERY, "variables": variables},
        )
        payload = response.json()

        errors = payload.get("errors")
        if errors:
            raise SearchError(self.name, ", ".join(e.get("message", "") for e in errors))
        data = payload.get("data")
        if not data:
            raise SearchError(self.name, "No data in response")

        return [
            self._map_media(media, search_type)
            for media in data["Page"]["media"]
        ]

    def _map_media(self, media: dict, search_type: MediaSearchType) -> SearchResult:
        """Normalise un media AniList en SearchResult."""
        titles = media.get("title") or {}
        title = titles.get("english") or titles.get("romaji") or "Unknown"
        format_str = media.get("format") or "UNKNOWN"
        country = media.get("countryOfOrigin") or "JP"

        kind: MediaKind
        if search_type is MediaSearchType.ANIME:
            if format_str == "MOVIE":
                kind, label = Movie(), "Movie"
            else:
                kind = Series(progress=Progress(current=0, total=media.get("episodes")))
                label = ANIME_FORMAT_LABELS.get(format_str, format_str)
        else:
            if format_str == "NOVEL":
                readable_kind, label = ReadableKind.LIGHT_NOVEL, "Light Novel"
            elif country == "KR":
                readable_kind, label = ReadableKind.MANHWA, "Manhwa"
            else:
                readable_kind, label = ReadableKind.MANGA, "Manga"
            kind = Readable(
                readable_kind=readable_kind,
                progress=Progress(current=0, total=media.get("chapters")),
            )

        mean_score: Optional[int] = media.get("meanScore")
        cover = media.get("coverImage") or {}

        return SearchResult(
            title=title,
            kind=kind,
            source=self.source,
            format_label=label,
            global_score=min(mean_score, 100) if mean_score is not None else None,
            external_id=media["id"],
            poster_url=cover.get("large"),
        )
