"""
Implementations SQLModel des repositories.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from kars.infrastructure.persistence.repositories.media_repository import (
    SQLModelMediaRepository,
)

__all__ = [
    "SQLModelMediaRepository",
]
