"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
engine SQLite, sessions, repository des medias, clients de catalogues et services.
"""

from typing import Optional

from dependency_injector import containers, providers
from sqlmodel import Session

from .adapters.api.anilist_client import AniListClient
from .adapters.api.cache import APICache
from .adapters.api.mangadex_client import MangaDexClient
from .adapters.api.openlibrary_client import OpenLibraryClient
from .adapters.api.tmdb_client import TMDBClient
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import SQLModelMediaRepository
from .services.explore import ExploreService
from .services.library import LibraryService


def _tmdb_client(settings: Settings, cache: APICache) -> Optional[TMDBClient]:
    """Client TMDB, ou None si aucune cle API n'est configuree."""
    if not settings.tmdb_enabled:
        return None
    return TMDBClient(api_key=settings.tmdb_api_key, cache=cache)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        library = container.library_service()
        explore = container.explore_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine SQLite partage
    engine = providers.Singleton(
        create_db_engine,
        db_url=config.provided.database_url,
    )

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(Session, engine)

    # Repository - Factory pour nouvelle instance avec session fraiche
    media_repository = providers.Factory(
        SQLModelMediaRepository,
        session=session,
    )

    # Cache API - Singleton pour partage entre clients
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.cache_dir,
    )

    # Clients de catalogues - Singleton (un client httpx par catalogue)
    anilist_client = providers.Singleton(AniListClient, cache=api_cache)
    tmdb_client = providers.Singleton(_tmdb_client, settings=config, cache=api_cache)
    mangadex_client = providers.Singleton(MangaDexClient, cache=api_cache)
    openlibrary_client = providers.Singleton(OpenLibraryClient, cache=api_cache)

    # Services
    library_service = providers.Factory(
        LibraryService,
        media_repo=media_repository,
    )
    explore_service = providers.Singleton(
        ExploreService,
        providers=providers.List(
            anilist_client,
            tmdb_client,
            mangadex_client,
            openlibrary_client,
        ),
    )
