"""
Modele SQLModel pour la base de donnees KARS.

Ce modele represente la table SQLite des medias suivis.
Il est distinct de l'entite de domaine (MediaRecord, dataclass dans core/entities/)
selon l'architecture hexagonale : la conversion se fait dans mapping.py.

Table:
- media_items: une ligne plate par media. L'union de types du domaine est
  decomposee en colonnes discriminantes (media_type, readable_kind) et en
  colonnes de statut exclusives (watch_status OU read_status).

Le champ tags stocke un tableau JSON serialise.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class MediaItemModel(SQLModel, table=True):
    """
    Modele representant un media dans la base de donnees.

    Colonnes non nulles : id, title, media_type, progress_cur, tags.
    """

    __tablename__ = "media_items"

    id: str = Field(primary_key=True)  # UUID en texte
    title: str = Field(index=True)
    media_type: str  # "movie" | "series" | "readable"
    readable_kind: Optional[str] = None  # Uniquement pour "readable"
    watch_status: Optional[str] = None  # Films et series
    read_status: Optional[str] = None  # Lectures
    progress_cur: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    progress_tot: Optional[int] = None
    score: Optional[int] = None  # 0-100
    global_score: Optional[int] = None  # 0-100
    external_id: Optional[int] = None
    poster_url: Optional[str] = None
    source: Optional[str] = None
    tags: str = Field(default="[]", sa_column_kwargs={"server_default": "[]"})  # JSON: ["favorite", "isekai"]

