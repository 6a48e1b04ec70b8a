"""
Schemas pydantic de l'API JSON.

Representation plate envoyee et recue par les clients. Les champs
optionnels absents sont omis de la sortie (jamais emis a null).
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Borne des compteurs et identifiants numeriques (entier non signe 32 bits)
U32_MAX = 2**32 - 1


class ApiMediaItem(BaseModel):
    """
    Media a plat pour l'API REST.

    Un id vide a la creation signifie "generer un nouvel identifiant".
    media_type vaut "movie", "series", "anime" ou un sous-type de lecture
    ("manga", "manhwa", "webtoon", "book", "light_novel", "web_novel").
    """

    id: str = ""
    title: str = Field(min_length=1)
    media_type: str
    status: str = ""
    score: Optional[float] = None
    global_score: Optional[float] = None
    progress: int = Field(default=0, ge=0, le=U32_MAX)
    total_episodes: Optional[int] = Field(default=None, ge=0, le=U32_MAX)
    poster_url: Optional[str] = None
    source: Optional[str] = None
    external_id: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    favorite: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        """Refuse un titre compose uniquement d'espaces."""
        if not v.strip():
            raise ValueError("title must not be empty")
        return v


class ApiExploreResult(BaseModel):
    """Resultat de recherche dans un catalogue externe, a plat."""

    title: str
    media_type: str
    global_score: Optional[float] = None
    external_id: Optional[str] = None
    poster_url: Optional[str] = None
    source: str
    total_episodes: Optional[int] = None
    format_label: str = ""


class ApiStats(BaseModel):
    """Compteurs de l'archive par statut et par type presente."""

    total: int = 0
    watching: int = 0
    completed: int = 0
    plan_to_watch: int = 0
    on_hold: int = 0
    dropped: int = 0
    movies: int = 0
    series: int = 0
    anime: int = 0
    readable: int = 0
