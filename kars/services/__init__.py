"""Services applicatifs de KARS."""

from kars.services.explore import ExploreService
from kars.services.library import ItemNotFoundError, LibraryService

__all__ = ["ExploreService", "ItemNotFoundError", "LibraryService"]
