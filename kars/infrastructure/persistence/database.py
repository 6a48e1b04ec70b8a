"""
Configuration de la base de donnees SQLite pour KARS.

Ce module fournit :
- Engine SQLite avec configuration multi-thread
- Fonction d'initialisation des tables

L'URL est configuree via KARS_DATABASE_URL (defaut: sqlite:///data/kars.db).
L'engine est un singleton du container DI, les sessions sont creees par requete.
"""

from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(db_url: str) -> Engine:
    """
    Cree un engine SQLite.

    Cree le repertoire parent pour une base fichier. Une base en memoire
    partage une connexion unique (StaticPool) pour rester visible entre sessions.
    """
    if db_url in IN_MEMORY_URLS:
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if db_url.startswith("sqlite:///"):
        db_path = Path(db_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)
    return create_engine(
        db_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de donnees en creant la table media_items.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import du modele pour enregistrer ses metadonnees
    from kars.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    return engine
