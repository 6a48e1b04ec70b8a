"""
Interfaces ports pour les catalogues externes.

Chaque fournisseur (AniList, TMDB, MangaDex, Open Library) produit des
SearchResult normalises : le domaine les consomme de la meme facon quelle
que soit leur origine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from kars.core.entities.media import MediaKind, MediaRecord, Movie, Series


class MediaSearchType(Enum):
    """Categorie demandee lors d'une recherche dans les catalogues."""

    ANIME = "anime"
    MANGA = "manga"
    LIGHT_NOVEL = "light_novel"
    MOVIE = "movie"
    SERIES = "series"
    BOOK = "book"

    @classmethod
    def parse(cls, value: Optional[str]) -> "MediaSearchType":
        """Interprete le parametre de requete, ANIME par defaut."""
        try:
            return cls(value)
        except ValueError:
            return cls.ANIME


class SearchError(Exception):
    """Echec d'un fournisseur de recherche (reseau, API ou parsing)."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        super().__init__(f"{provider}: {message}")


@dataclass
class SearchResult:
    """
    Resultat normalise d'un catalogue externe.

    Attributs :
        title : Titre affiche
        kind : Variante du media, progression courante a zero et statut "plan"
        global_score : Note du catalogue encodee 0-100
        external_id : ID numerique dans le catalogue (None si non numerique)
        poster_url : URL de la couverture
        source : Identifiant fixe du catalogue ("anilist", "tmdb"...)
        format_label : Libelle libre pour l'affichage ("TV", "Movie (2010)"...)
    """

    title: str
    kind: MediaKind
    source: str
    format_label: str = ""
    global_score: Optional[int] = None
    external_id: Optional[int] = None
    poster_url: Optional[str] = None

    def to_record(self) -> MediaRecord:
        """Cree un nouveau MediaRecord (identifiant frais) depuis ce resultat."""
        record = MediaRecord.new(self.title, self.kind)
        record.global_score = self.global_score
        record.external_id = self.external_id
        record.poster_url = self.poster_url
        record.source = self.source
        return record

    def display_line(self, index: int) -> str:
        """Ligne d'affichage terminal : titre, nombre d'unites, note, format."""
        count = ""
        if not isinstance(self.kind, Movie) and self.kind.progress.total is not None:
            unit = "ep" if isinstance(self.kind, Series) else "ch"
            count = f" [{self.kind.progress.total} {unit}]"
        score = f" * {self.global_score / 10:.1f}" if self.global_score is not None else ""
        return f"  {index}. {self.title}{count}{score} - {self.format_label}"


class ISearchProvider(ABC):
    """
    Interface d'un catalogue externe interrogeable.

    Les implementations sont asynchrones (httpx.AsyncClient).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Nom lisible du catalogue (ex: "AniList")."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Identifiant de source ecrit dans les MediaRecord importes."""
        ...

    @property
    @abstractmethod
    def supported_types(self) -> tuple[MediaSearchType, ...]:
        """Categories que ce catalogue sait rechercher."""
        ...

    @abstractmethod
    async def search(
        self, query: str, search_type: MediaSearchType
    ) -> list[SearchResult]:
        """
        Recherche dans le catalogue.

        Raises:
            SearchError: En cas d'echec reseau ou de reponse illisible
        """
        ...

    async def close(self) -> None:
        """Ferme les ressources HTTP du client."""
        return None
