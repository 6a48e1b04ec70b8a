"""
Route des statistiques de l'archive : /api/stats.
"""

from fastapi import APIRouter, Depends

from ...services.library import LibraryService
from ..deps import get_library
from ..mapping import compute_stats, to_api_item
from ..schemas import ApiStats

router = APIRouter(prefix="/api")


@router.get("/stats", response_model=ApiStats)
def stats(library: LibraryService = Depends(get_library)):
    """Compteurs par statut et par type presente."""
    return compute_stats(to_api_item(record) for record in library.list_items())
