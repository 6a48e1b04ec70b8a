"""Clients des catalogues externes (AniList, TMDB, MangaDex, Open Library)."""

from kars.adapters.api.anilist_client import AniListClient
from kars.adapters.api.cache import APICache
from kars.adapters.api.mangadex_client import MangaDexClient
from kars.adapters.api.openlibrary_client import OpenLibraryClient
from kars.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "AniListClient",
    "APICache",
    "MangaDexClient",
    "OpenLibraryClient",
    "TMDBClient",
]
