"""
Implementation SQLModel du repository des medias.

Implemente l'interface IMediaRepository pour la persistance des MediaRecord
dans la base de donnees SQLite via SQLModel.
"""

from typing import Optional
from uuid import UUID

from loguru import logger
from sqlmodel import Session, select

from kars.core.entities.media import MediaRecord
from kars.core.errors import DataCorruption
from kars.core.ports.repositories import IMediaRepository
from kars.infrastructure.persistence.mapping import from_row, to_row
from kars.infrastructure.persistence.models import MediaItemModel


class SQLModelMediaRepository(IMediaRepository):
    """
    Repository SQLModel pour les medias suivis.

    Implemente IMediaRepository avec conversion bidirectionnelle
    entre l'entite MediaRecord (domaine) et MediaItemModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entities(self, models: list[MediaItemModel]) -> list[MediaRecord]:
        """Recompose une liste de lignes. Une ligne corrompue invalide tout le lot."""
        records = []
        for model in models:
            try:
                records.append(from_row(model))
            except DataCorruption as exc:
                logger.error(f"Ligne media_items corrompue ({model.id}): {exc.detail}")
                raise
        return records

    def load_all(self) -> list[MediaRecord]:
        """Charge toute l'archive, triee par titre."""
        statement = select(MediaItemModel).order_by(MediaItemModel.title)
        models = self._session.exec(statement).all()
        return self._to_entities(list(models))

    def save_all(self, records: list[MediaRecord]) -> None:
        """
        Remplace toute l'archive dans une seule transaction.

        Vide la table puis reinsere chaque enregistrement : soit tout le
        nouvel instantane est visible, soit rien ne change.
        """
        try:
            for existing in self._session.exec(select(MediaItemModel)).all():
                self._session.delete(existing)
            self._session.flush()
            for record in records:
                self._session.add(to_row(record))
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        logger.debug(f"Archive sauvegardee ({len(records)} medias)")

    def get(self, record_id: UUID) -> Optional[MediaRecord]:
        """Recupere un media par son identifiant."""
        model = self._session.get(MediaItemModel, str(record_id))
        if model:
            return from_row(model)
        return None

    def upsert(self, record: MediaRecord) -> MediaRecord:
        """Insere ou remplace un media (remplacement, jamais d'ajout en double)."""
        try:
            self._session.merge(to_row(record))
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return record

    def delete(self, record_id: UUID) -> bool:
        """Supprime un media par ID. Retourne True si supprime."""
        model = self._session.get(MediaItemModel, str(record_id))
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        return True

    def search(self, query: str) -> list[MediaRecord]:
        """Recherche litterale insensible a la casse sur le titre, triee par titre."""
        statement = (
            select(MediaItemModel)
            .where(MediaItemModel.title.icontains(query, autoescape=True))
            .order_by(MediaItemModel.title)
        )
        models = self._session.exec(statement).all()
        return self._to_entities(list(models))
