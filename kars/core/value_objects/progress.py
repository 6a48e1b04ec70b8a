"""
Objet valeur pour la progression des medias episodiques et des lectures.

Une progression est un couple (courant, total). Le total est optionnel :
une serie en cours de diffusion ou un manga non termine n'en a pas.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Progress:
    """
    Compteur de progression (episodes vus, chapitres ou pages lus).

    Attributs :
        current : Nombre d'unites consommees (>= 0)
        total : Nombre total d'unites, None si inconnu

    Le pourcentage n'est pas borne : un courant superieur au total
    donne un pourcentage superieur a 100.
    """

    current: int = 0
    total: Optional[int] = None

    def __post_init__(self) -> None:
        if self.current < 0:
            raise ValueError(f"Progression negative: {self.current}")
        if self.total is not None and self.total < 0:
            raise ValueError(f"Total negatif: {self.total}")

    def percent(self) -> Optional[float]:
        """
        Retourne le pourcentage de progression.

        Retourne :
            None si le total est inconnu, 0.0 si le total vaut 0,
            sinon 100 * current / total (non borne)
        """
        if self.total is None:
            return None
        if self.total == 0:
            return 0.0
        return 100.0 * self.current / self.total

    def is_finished(self) -> bool:
        """Vrai si le total est connu, positif, et atteint ou depasse."""
        return self.total is not None and self.total > 0 and self.current >= self.total

    def force_complete(self) -> "Progress":
        """
        Retourne une progression terminee.

        Si le total est inconnu, le courant devient le total.
        Le courant est ensuite aligne sur le total. Idempotent.
        """
        total = self.total if self.total is not None else self.current
        return Progress(current=total, total=total)

    def advance_to(self, current: int) -> "Progress":
        """Retourne une copie avec un nouveau compteur courant."""
        return replace(self, current=current)

    def __str__(self) -> str:
        total = "?" if self.total is None else str(self.total)
        return f"{self.current}/{total}"
