"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour la persistance
des MediaRecord. L'implementation SQLite via SQLModel vit dans
kars/infrastructure/persistence/repositories/.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from kars.core.entities.media import MediaRecord


class IMediaRepository(ABC):
    """
    Interface de stockage des medias suivis.

    L'ordre des listes retournees n'est pas garanti identique a l'ordre
    d'insertion (l'implementation SQL trie par titre).
    """

    @abstractmethod
    def load_all(self) -> list[MediaRecord]:
        """
        Charge toute l'archive.

        Raises:
            DataCorruption: Si une ligne est irrecuperable (chargement interrompu)
        """
        ...

    @abstractmethod
    def save_all(self, records: list[MediaRecord]) -> None:
        """Remplace atomiquement toute l'archive par les enregistrements donnes."""
        ...

    @abstractmethod
    def get(self, record_id: UUID) -> Optional[MediaRecord]:
        """Recupere un media par son identifiant."""
        ...

    @abstractmethod
    def upsert(self, record: MediaRecord) -> MediaRecord:
        """Insere ou remplace un media (idempotent a entree identique)."""
        ...

    @abstractmethod
    def delete(self, record_id: UUID) -> bool:
        """Supprime un media. Retourne True si une ligne a ete supprimee."""
        ...

    @abstractmethod
    def search(self, query: str) -> list[MediaRecord]:
        """Recherche les medias dont le titre contient la requete."""
        ...
