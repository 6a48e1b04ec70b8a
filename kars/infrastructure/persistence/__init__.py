"""
Module de persistance SQLite pour KARS.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, initialisation
- models.py : Modele SQLModel de la table media_items
- mapping.py : Conversion MediaRecord <-> MediaItemModel

Usage:
    from kars.infrastructure.persistence import create_db_engine, init_db

    engine = init_db(create_db_engine("sqlite:///data/kars.db"))
    session = Session(engine)
"""

from kars.infrastructure.persistence.database import create_db_engine, init_db
from kars.infrastructure.persistence.mapping import from_row, to_row
from kars.infrastructure.persistence.models import MediaItemModel

__all__ = [
    "create_db_engine",
    "init_db",
    "from_row",
    "to_row",
    "MediaItemModel",
]
