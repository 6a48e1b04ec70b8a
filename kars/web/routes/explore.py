"""
Route d'exploration des catalogues externes : /api/explore.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...services.explore import ExploreService
from ..deps import get_explore
from ..mapping import to_explore_result
from ..schemas import ApiExploreResult

router = APIRouter(prefix="/api")


@router.get(
    "/explore",
    response_model=list[ApiExploreResult],
    response_model_exclude_none=True,
)
async def explore(
    q: str = "",
    media_type: Optional[str] = Query(default=None, alias="type"),
    explore_service: ExploreService = Depends(get_explore),
):
    """Recherche dans les catalogues (anime par defaut)."""
    results = await explore_service.explore(q, media_type)
    return [to_explore_result(result) for result in results]
