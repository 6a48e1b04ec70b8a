"""
Routes CRUD de l'archive : /api/items et /api/search.

Les champs optionnels absents sont omis des reponses JSON.
"""

from fastapi import APIRouter, Depends, Response, status

from ...services.library import LibraryService
from ..deps import get_library, parse_item_id
from ..mapping import from_api_item, to_api_item
from ..schemas import ApiMediaItem

router = APIRouter(prefix="/api")


@router.get(
    "/items",
    response_model=list[ApiMediaItem],
    response_model_exclude_none=True,
)
def list_items(library: LibraryService = Depends(get_library)):
    """Liste toute l'archive, triee par titre."""
    return [to_api_item(record) for record in library.list_items()]


@router.post(
    "/items",
    response_model=ApiMediaItem,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_item(item: ApiMediaItem, library: LibraryService = Depends(get_library)):
    """Ajoute un media. Un id vide genere un nouvel identifiant."""
    record = from_api_item(item)
    return to_api_item(library.create_item(record))


@router.get(
    "/items/{item_id}",
    response_model=ApiMediaItem,
    response_model_exclude_none=True,
)
def get_item(item_id: str, library: LibraryService = Depends(get_library)):
    return to_api_item(library.get_item(parse_item_id(item_id)))


@router.put(
    "/items/{item_id}",
    response_model=ApiMediaItem,
    response_model_exclude_none=True,
)
def update_item(
    item_id: str,
    item: ApiMediaItem,
    library: LibraryService = Depends(get_library),
):
    """Remplace un media. L'id du chemin prime sur celui du corps."""
    item.id = str(parse_item_id(item_id))
    record = from_api_item(item)
    return to_api_item(library.save_item(record))


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(item_id: str, library: LibraryService = Depends(get_library)):
    library.delete_item(parse_item_id(item_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/search",
    response_model=list[ApiMediaItem],
    response_model_exclude_none=True,
)
def search_items(q: str = "", library: LibraryService = Depends(get_library)):
    """Recherche par titre dans l'archive."""
    return [to_api_item(record) for record in library.search_items(q)]
