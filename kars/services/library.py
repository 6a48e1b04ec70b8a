"""
Service de gestion de l'archive personnelle.

Centralise les operations sur les MediaRecord pour le CLI et le Web :
lecture, creation, mise a jour (statut, note, progression, tags),
suppression et import depuis un resultat de catalogue.
"""

from typing import Optional
from uuid import UUID

from loguru import logger

from kars.core.entities.media import MediaRecord
from kars.core.ports.api_clients import SearchResult
from kars.core.ports.repositories import IMediaRepository
from kars.core.value_objects import Progress


class ItemNotFoundError(LookupError):
    """Aucun media ne correspond a l'identifiant demande."""

    def __init__(self, record_id: UUID) -> None:
        self.record_id = record_id
        super().__init__(f"Media introuvable: {record_id}")


class LibraryService:
    """
    Service de l'archive.

    Example:
        service = LibraryService(media_repo=repo)
        record, already = service.complete_item(record_id)
    """

    def __init__(self, media_repo: IMediaRepository) -> None:
        """
        Args:
            media_repo: Repository de persistance des medias
        """
        self._repo = media_repo

    def list_items(self) -> list[MediaRecord]:
        """Retourne toute l'archive, triee par titre."""
        return self._repo.load_all()

    def get_item(self, record_id: UUID) -> MediaRecord:
        """
        Raises:
            ItemNotFoundError: Aucun media avec cet identifiant
        """
        record = self._repo.get(record_id)
        if record is None:
            raise ItemNotFoundError(record_id)
        return record

    def create_item(self, record: MediaRecord) -> MediaRecord:
        saved = self._repo.upsert(record)
        logger.info(f"Media ajoute: {record.title} ({record.id})")
        return saved

    def save_item(self, record: MediaRecord) -> MediaRecord:
        """Insere ou remplace un media (le meme id n'est jamais duplique)."""
        return self._repo.upsert(record)

    def delete_item(self, record_id: UUID) -> None:
        """
        Raises:
            ItemNotFoundError: Aucun media avec cet identifiant
        """
        if not self._repo.delete(record_id):
            raise ItemNotFoundError(record_id)
        logger.info(f"Media supprime: {record_id}")

    def search_items(self, query: str) -> list[MediaRecord]:
        """Recherche par titre (insensible a la casse). Requete vide -> aucun resultat."""
        if not query:
            return []
        return self._repo.search(query)

    def complete_item(self, record_id: UUID) -> tuple[MediaRecord, bool]:
        """
        Marque un media comme termine.

        Returns:
            Tuple (media, deja_termine). Un media deja termine est retourne
            tel quel, sans ecriture.
        """
        record = self.get_item(record_id)
        if record.is_completed():
            return record, True
        record.force_complete()
        self._repo.upsert(record)
        return record, False

    def set_score(self, record_id: UUID, value: float) -> MediaRecord:
        """Enregistre la note personnelle (0.0-10.0, bornee)."""
        record = self.get_item(record_id)
        record.set_score(value)
        return self._repo.upsert(record)

    def update_progress(
        self, record_id: UUID, current: int, total: Optional[int] = None
    ) -> Progress:
        """
        Met a jour la progression d'une serie ou d'une lecture.

        Raises:
            ItemNotFoundError: Aucun media avec cet identifiant
            NoProgressError: Le media est un film
        """
        record = self.get_item(record_id)
        progress = record.update_progress(current, total)
        self._repo.upsert(record)
        return progress

    def add_tag(self, record_id: UUID, tag: str) -> bool:
        """Ajoute un tag. Retourne False s'il etait deja present."""
        record = self.get_item(record_id)
        added = record.add_tag(tag)
        if added:
            self._repo.upsert(record)
        return added

    def remove_tag(self, record_id: UUID, tag: str) -> bool:
        """Retire un tag. Retourne False s'il etait absent."""
        record = self.get_item(record_id)
        removed = record.remove_tag(tag)
        if removed:
            self._repo.upsert(record)
        return removed

    def import_result(self, result: SearchResult) -> MediaRecord:
        """Ajoute a l'archive un resultat de catalogue (identifiant frais)."""
        return self.create_item(result.to_record())

    def has_duplicate(self, title: str) -> bool:
        """True si un media de meme titre (casse ignoree) existe deja."""
        wanted = title.strip().lower()
        return any(r.title.strip().lower() == wanted for r in self._repo.search(title.strip()))
