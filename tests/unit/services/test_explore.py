"""
Tests pour ExploreService - recherche multi-catalogues.

Les fournisseurs sont simules : seul l'aiguillage par categorie, la
concatenation ordonnee et la tolerance aux echecs sont verifies ici.
"""

from typing import Optional

import pytest

from kars.core.entities.media import Movie, Series
from kars.core.ports.api_clients import (
    ISearchProvider,
    MediaSearchType,
    SearchError,
    SearchResult,
)
from kars.core.value_objects import Progress
from kars.services.explore import ExploreService


class FakeProvider(ISearchProvider):
    """Fournisseur en memoire qui retourne des resultats fixes."""

    def __init__(
        self,
        name: str,
        types: tuple[MediaSearchType, ...],
        results: Optional[list[SearchResult]] = None,
        error: Optional[str] = None,
    ) -> None:
        self._name = name
        self._types = types
        self._results = results or []
        self._error = error
        self.calls: list[tuple[str, MediaSearchType]] = []
        self.closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> str:
        return self._name.lower()

    @property
    def supported_types(self) -> tuple[MediaSearchType, ...]:
        return self._types

    async def search(self, query: str, search_type: MediaSearchType) -> list[SearchResult]:
        self.calls.append((query, search_type))
        if self._error:
            raise SearchError(self._name, self._error)
        return list(self._results)

    async def close(self) -> None:
        self.closed = True


def _result(title: str, source: str) -> SearchResult:
    return SearchResult(
        title=title, kind=Series(progress=Progress(0, 12)), source=source
    )


@pytest.fixture
def anilist() -> FakeProvider:
    return FakeProvider(
        "AniList",
        (MediaSearchType.ANIME, MediaSearchType.MANGA),
        results=[_result("Frieren", "anilist")],
    )


@pytest.fixture
def mangadex() -> FakeProvider:
    return FakeProvider(
        "MangaDex", (MediaSearchType.MANGA,), results=[_result("Frieren (manga)", "mangadex")]
    )


class TestExplore:
    """Tests pour ExploreService.explore()."""

    @pytest.mark.asyncio
    async def test_concatenates_in_provider_order(self, anilist, mangadex) -> None:
        service = ExploreService(providers=[anilist, mangadex])

        results = await service.explore("Frieren", "manga")

        assert [r.source for r in results] == ["anilist", "mangadex"]
        assert anilist.calls == [("Frieren", MediaSearchType.MANGA)]

    @pytest.mark.asyncio
    async def test_only_matching_providers_are_queried(self, anilist, mangadex) -> None:
        service = ExploreService(providers=[anilist, mangadex])

        await service.explore("Frieren", "anime")

        assert mangadex.calls == []

    @pytest.mark.asyncio
    async def test_failing_provider_is_skipped(self, mangadex) -> None:
        broken = FakeProvider("AniList", (MediaSearchType.MANGA,), error="network error")
        service = ExploreService(providers=[broken, mangadex])

        results = await service.explore("Frieren", "manga")

        assert [r.title for r in results] == ["Frieren (manga)"]

    @pytest.mark.asyncio
    async def test_short_query_returns_empty(self, anilist) -> None:
        service = ExploreService(providers=[anilist])

        assert await service.explore(" a ", "anime") == []
        assert anilist.calls == []

    @pytest.mark.asyncio
    async def test_query_is_stripped(self, anilist) -> None:
        service = ExploreService(providers=[anilist])
        await service.explore("  Frieren  ", "anime")
        assert anilist.calls == [("Frieren", MediaSearchType.ANIME)]

    @pytest.mark.asyncio
    async def test_unknown_type_defaults_to_anime(self, anilist) -> None:
        service = ExploreService(providers=[anilist])

        await service.explore("Frieren", "podcast")
        await service.explore("Frieren", None)

        assert [c[1] for c in anilist.calls] == [MediaSearchType.ANIME, MediaSearchType.ANIME]

    @pytest.mark.asyncio
    async def test_no_provider_for_type(self, anilist) -> None:
        service = ExploreService(providers=[anilist])
        assert await service.explore("Dune", "book") == []


class TestProviders:
    def test_none_entries_are_ignored(self, anilist) -> None:
        """Un catalogue non configure (ex: TMDB sans cle) est None dans la liste."""
        service = ExploreService(providers=[anilist, None])
        assert service.providers == [anilist]

    def test_providers_for(self, anilist, mangadex) -> None:
        service = ExploreService(providers=[anilist, mangadex])
        assert service.providers_for(MediaSearchType.MANGA) == [anilist, mangadex]
        assert service.providers_for(MediaSearchType.MOVIE) == []

    @pytest.mark.asyncio
    async def test_close_closes_every_provider(self, anilist, mangadex) -> None:
        service = ExploreService(providers=[anilist, mangadex])
        await service.close()
        assert anilist.closed and mangadex.closed

    @pytest.mark.asyncio
    async def test_movie_results_pass_through(self) -> None:
        tmdb = FakeProvider(
            "TMDB",
            (MediaSearchType.MOVIE,),
            results=[SearchResult(title="Dune", kind=Movie(), source="tmdb")],
        )
        service = ExploreService(providers=[tmdb])
        (dune,) = await service.explore("Dune", "movie")
        assert dune.kind == Movie()
