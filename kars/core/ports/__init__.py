"""
Ports (interfaces abstraites) du domaine.

- repositories : IMediaRepository
- api_clients : ISearchProvider, SearchResult, MediaSearchType, SearchError
"""

from kars.core.ports.api_clients import (
    ISearchProvider,
    MediaSearchType,
    SearchError,
    SearchResult,
)
from kars.core.ports.repositories import IMediaRepository

__all__ = [
    "IMediaRepository",
    "ISearchProvider",
    "MediaSearchType",
    "SearchError",
    "SearchResult",
]
