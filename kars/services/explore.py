"""
Service d'exploration des catalogues externes.

Interroge en sequence les fournisseurs qui supportent la categorie
demandee et concatene leurs resultats. Un fournisseur en echec est
journalise et ignore : les autres resultats restent disponibles.
"""

from typing import Optional, Sequence

from loguru import logger

from kars.core.ports.api_clients import (
    ISearchProvider,
    MediaSearchType,
    SearchError,
    SearchResult,
)

MIN_QUERY_LENGTH = 2


class ExploreService:
    """
    Recherche multi-catalogues.

    Example:
        service = ExploreService(providers=[anilist, tmdb])
        results = await service.explore("Frieren", "anime")
    """

    def __init__(self, providers: Sequence[Optional[ISearchProvider]]) -> None:
        """
        Args:
            providers: Clients de catalogue, dans l'ordre d'affichage.
                Les entrees None (catalogue non configure) sont ignorees.
        """
        self._providers = [p for p in providers if p is not None]

    @property
    def providers(self) -> list[ISearchProvider]:
        return list(self._providers)

    def providers_for(self, search_type: MediaSearchType) -> list[ISearchProvider]:
        return [p for p in self._providers if search_type in p.supported_types]

    async def explore(
        self, query: str, search_type: Optional[str] = None
    ) -> list[SearchResult]:
        """
        Recherche `query` dans la categorie `search_type`.

        Une requete de moins de 2 caracteres retourne une liste vide ; une
        categorie inconnue est traitee comme "anime".
        """
        query = query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        parsed_type = MediaSearchType.parse(search_type)
        results: list[SearchResult] = []
        for provider in self.providers_for(parsed_type):
            try:
                results.extend(await provider.search(query, parsed_type))
            except SearchError as exc:
                logger.warning(f"Recherche {provider.name} ignoree: {exc}")
        return results

    async def close(self) -> None:
        """Ferme les clients HTTP des fournisseurs."""
        for provider in self._providers:
            await provider.close()
