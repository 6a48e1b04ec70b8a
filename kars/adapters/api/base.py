"""
Socle commun des clients de catalogues externes.

Gere le client httpx paresseux, le cache cache-first et la conversion des
echecs reseau ou de parsing en SearchError. Chaque catalogue n'implemente
que _fetch() : la requete HTTP et la normalisation en SearchResult.
"""

from abc import abstractmethod
from typing import Optional

import httpx
from loguru import logger

from kars.adapters.api.cache import APICache
from kars.adapters.api.retry import RateLimitError, ServiceUnavailableError
from kars.core.ports.api_clients import (
    ISearchProvider,
    MediaSearchType,
    SearchError,
    SearchResult,
)

MAX_RESULTS = 10


class CatalogClient(ISearchProvider):
    """
    Client de catalogue avec cache et gestion d'erreurs.

    Attributes:
        BASE_URL: URL de base passee a httpx.AsyncClient
        TIMEOUT: Timeout des requetes en secondes
    """

    BASE_URL = ""
    TIMEOUT = 20.0

    def __init__(self, cache: Optional[APICache] = None) -> None:
        """
        Args:
            cache: Cache des recherches (optionnel, desactive si None)
        """
        self._cache = cache
        self._client: Optional[httpx.AsyncClient] = None

    def _headers(self) -> dict[str, str]:
        """En-tetes HTTP du client (surcharge par les catalogues authentifies)."""
        return {"Accept": "application/json"}

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers=self._headers(),
                timeout=self.TIMEOUT,
            )
        return self._client

    async def search(
        self, query: str, search_type: MediaSearchType
    ) -> list[SearchResult]:
        """
        Recherche dans le catalogue (cache-first).

        Une categorie non supportee retourne une liste vide.

        Raises:
            SearchError: Echec reseau, HTTP ou reponse inattendue
        """
        if search_type not in self.supported_types:
            return []

        cache_key = APICache.search_key(self.source, search_type.value, query)
        if self._cache is not None:
            cached = await self._cache.get(cache_key)
            if cached is not None:
                return cached

        try:
            results = await self._fetch(query, search_type)
        except (httpx.HTTPError, RateLimitError, ServiceUnavailableError) as exc:
            raise SearchError(self.name, f"network error: {exc}") from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise SearchError(self.name, f"unexpected response: {exc}") from exc

        logger.debug(f"{self.name}: {len(results)} resultats pour {query!r} ({search_type.value})")
        if self._cache is not None:
            await self._cache.set_search(cache_key, results)
        return results

    @abstractmethod
    async def _fetch(
        self, query: str, search_type: MediaSearchType
    ) -> list[SearchResult]:
        """Execute la requete et normalise la reponse."""
        ...

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
