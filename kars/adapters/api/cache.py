"""
Cache persistant des recherches dans les catalogues externes.

Le cache utilise diskcache pour la persistance sur disque : une meme
recherche repetee (meme catalogue, meme categorie, meme requete) ne
rappelle pas l'API pendant SEARCH_TTL.
"""

import asyncio
from functools import partial
from typing import Any, Optional

from diskcache import Cache


class APICache:
    """
    Cache asynchrone avec TTL pour les appels aux catalogues.

    Les operations diskcache sont executees via run_in_executor pour ne pas
    bloquer la boucle asyncio.

    Example:
        cache = APICache(cache_dir=".cache/api")
        key = APICache.search_key("anilist", "anime", "Frieren")
        await cache.set_search(key, results)
        data = await cache.get(key)
    """

    SEARCH_TTL = 24 * 60 * 60  # 24 heures en secondes

    def __init__(self, cache_dir: str = ".cache/api") -> None:
        """
        Args:
            cache_dir: Repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    @staticmethod
    def search_key(source: str, search_type: str, query: str) -> str:
        """Construit la cle d'une recherche (requete normalisee en minuscules)."""
        return f"{source}:search:{search_type}:{query.strip().lower()}"

    async def get(self, key: str) -> Optional[Any]:
        """Retourne la valeur stockee, ou None si absente ou expiree."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Stocke une valeur avec une duree de vie en secondes."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=ttl)
        )

    async def set_search(self, key: str, value: Any) -> None:
        """Stocke un resultat de recherche (TTL de 24h)."""
        await self.set(key, value, self.SEARCH_TTL)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme le cache (a appeler a l'arret)."""
        self._cache.close()
