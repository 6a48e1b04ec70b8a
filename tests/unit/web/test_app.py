"""
Tests de l'API JSON via TestClient.

Chaque test demarre l'application sur un Container dont la configuration
pointe vers une base temporaire, et dont le service d'exploration utilise
un fournisseur simule (aucun appel reseau).
"""

from typing import Iterator
from uuid import uuid4

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from kars.config import Settings
from kars.container import Container
from kars.core.entities.media import Movie, Series
from kars.core.ports.api_clients import ISearchProvider, MediaSearchType, SearchResult
from kars.core.value_objects import Progress
from kars.infrastructure.persistence.models import MediaItemModel
from kars.services.explore import ExploreService
from kars.web.app import create_app


class StubCatalog(ISearchProvider):
    """Catalogue simule : un anime et un film, quelle que soit la requete."""

    closed = False

    @property
    def name(self) -> str:
        return "Stub"

    @property
    def source(self) -> str:
        return "anilist"

    @property
    def supported_types(self) -> tuple[MediaSearchType, ...]:
        return (MediaSearchType.ANIME, MediaSearchType.MOVIE)

    async def search(self, query: str, search_type: MediaSearchType) -> list[SearchResult]:
        if search_type is MediaSearchType.MOVIE:
            return [SearchResult(title=query, kind=Movie(), source="tmdb", format_label="Movie (?)")]
        return [
            SearchResult(
                title="Sousou no Frieren",
                kind=Series(progress=Progress(0, 28)),
                source=self.source,
                format_label="TV",
                global_score=91,
                external_id=154587,
            )
        ]

    async def close(self) -> None:
        StubCatalog.closed = True


@pytest.fixture
def container(test_settings: Settings) -> Iterator[Container]:
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.explore_service.override(
        providers.Object(ExploreService(providers=[StubCatalog()]))
    )
    yield container
    container.explore_service.reset_override()
    container.config.reset_override()


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    with TestClient(create_app(container)) as client:
        yield client


FRIEREN = {
    "title": "Frieren",
    "media_type": "anime",
    "status": "watching",
    "progress": 3,
    "total_episodes": 28,
    "source": "anilist",
    "tags": ["fantasy"],
}


class TestItemsCrud:
    """Tests pour /api/items."""

    def test_empty_archive(self, client: TestClient) -> None:
        response = client.get("/api/items")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_generates_id(self, client: TestClient) -> None:
        response = client.post("/api/items", json=FRIEREN)

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["media_type"] == "anime"
        assert body["progress"] == 3
        assert body["total_episodes"] == 28
        assert body["tags"] == ["fantasy"]
        assert body["favorite"] is False
        # Les champs optionnels absents sont omis, pas emis a null
        assert "score" not in body
        assert "global_score" not in body
        assert "poster_url" not in body

    def test_create_then_get(self, client: TestClient) -> None:
        created = client.post("/api/items", json=FRIEREN).json()

        response = client.get(f"/api/items/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_series_without_anilist_source_is_presented_as_series(
        self, client: TestClient
    ) -> None:
        payload = {**FRIEREN, "source": None}
        body = client.post("/api/items", json=payload).json()
        assert body["media_type"] == "series"

    def test_favorite_flag_becomes_tag(self, client: TestClient) -> None:
        payload = {"title": "Dune", "media_type": "movie", "favorite": True, "score": 8.5}
        body = client.post("/api/items", json=payload).json()

        assert body["favorite"] is True
        assert body["tags"] == ["favorite"]
        assert body["score"] == 8.5
        assert body["progress"] == 0
        assert "total_episodes" not in body

    def test_unknown_status_falls_back_to_plan(self, client: TestClient) -> None:
        payload = {"title": "Dune", "media_type": "book", "status": "reading-ish"}
        body = client.post("/api/items", json=payload).json()
        assert body["status"] == "plan_to_read"

    def test_put_uses_path_id(self, client: TestClient) -> None:
        created = client.post("/api/items", json=FRIEREN).json()

        updated = {**created, "id": "ignored", "progress": 28, "score": 9.5}
        response = client.put(f"/api/items/{created['id']}", json=updated)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["progress"] == 28
        assert body["score"] == 9.5
        assert len(client.get("/api/items").json()) == 1

    def test_put_unknown_id_creates(self, client: TestClient) -> None:
        new_id = str(uuid4())
        response = client.put(f"/api/items/{new_id}", json=FRIEREN)
        assert response.status_code == 200
        assert client.get(f"/api/items/{new_id}").status_code == 200

    def test_delete(self, client: TestClient) -> None:
        created = client.post("/api/items", json=FRIEREN).json()

        response = client.delete(f"/api/items/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/items/{created['id']}").status_code == 404

    def test_search(self, client: TestClient) -> None:
        client.post("/api/items", json=FRIEREN)
        client.post("/api/items", json={"title": "Dune", "media_type": "movie"})

        titles = [item["title"] for item in client.get("/api/search?q=FRIE").json()]

        assert titles == ["Frieren"]
        assert client.get("/api/search").json() == []


class TestErrors:
    """Traduction des erreurs du domaine en codes HTTP."""

    def test_invalid_id_is_400(self, client: TestClient) -> None:
        response = client.get("/api/items/not-a-uuid")
        assert response.status_code == 400
        assert "not-a-uuid" in response.json()["detail"]

    def test_invalid_body_id_is_400(self, client: TestClient) -> None:
        response = client.post("/api/items", json={**FRIEREN, "id": "xyz"})
        assert response.status_code == 400

    def test_unknown_media_type_is_400(self, client: TestClient) -> None:
        response = client.post("/api/items", json={"title": "Matrix", "media_type": "dvd"})
        assert response.status_code == 400
        assert "dvd" in response.json()["detail"]

    def test_blank_title_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/items", json={"title": "   ", "media_type": "movie"})
        assert response.status_code == 422

    @pytest.mark.parametrize(
        "field, value", [("progress", 10**20), ("total_episodes", 4294967296)]
    )
    def test_counter_beyond_u32_is_422(self, client: TestClient, field: str, value: int) -> None:
        response = client.post("/api/items", json={**FRIEREN, field: value})
        assert response.status_code == 422
        assert client.get("/api/items").json() == []

    def test_oversized_external_id_is_dropped(self, client: TestClient) -> None:
        response = client.post(
            "/api/items", json={**FRIEREN, "external_id": "99999999999999999999"}
        )
        assert response.status_code == 201
        assert "external_id" not in response.json()

    def test_missing_item_is_404(self, client: TestClient) -> None:
        assert client.get(f"/api/items/{uuid4()}").status_code == 404
        assert client.delete(f"/api/items/{uuid4()}").status_code == 404

    def test_corrupted_row_is_500(self, client: TestClient, container: Container) -> None:
        with container.session() as session:
            session.add(MediaItemModel(id=str(uuid4()), title="Broken", media_type="laserdisc"))
            session.commit()

        response = client.get("/api/items")

        assert response.status_code == 500
        assert "laserdisc" in response.json()["detail"]


class TestStats:
    def test_counts(self, client: TestClient) -> None:
        client.post("/api/items", json=FRIEREN)
        client.post("/api/items", json={"title": "Dune", "media_type": "movie", "status": "completed"})
        client.post("/api/items", json={"title": "Berserk", "media_type": "manga", "status": "reading"})

        stats = client.get("/api/stats").json()

        assert stats["total"] == 3
        assert stats["watching"] == 2
        assert stats["completed"] == 1
        assert stats["anime"] == 1
        assert stats["movies"] == 1
        assert stats["readable"] == 1
        assert stats["series"] == 0


class TestExplore:
    def test_explore_defaults_to_anime(self, client: TestClient) -> None:
        response = client.get("/api/explore", params={"q": "Frieren"})

        assert response.status_code == 200
        (result,) = response.json()
        assert result == {
            "title": "Sousou no Frieren",
            "media_type": "anime",
            "global_score": 9.1,
            "external_id": "154587",
            "source": "anilist",
            "total_episodes": 28,
            "format_label": "TV",
        }

    def test_explore_movie_type(self, client: TestClient) -> None:
        (result,) = client.get("/api/explore", params={"q": "Dune", "type": "movie"}).json()
        assert result["media_type"] == "movie"
        assert "total_episodes" not in result

    def test_short_query(self, client: TestClient) -> None:
        assert client.get("/api/explore", params={"q": "a"}).json() == []


class TestApp:
    def test_cors_allows_any_origin(self, client: TestClient) -> None:
        response = client.get("/api/items", headers={"Origin": "http://localhost:5173"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_shutdown_closes_catalogs(self, container: Container) -> None:
        StubCatalog.closed = False
        with TestClient(create_app(container)):
            pass
        assert StubCatalog.closed is True
