"""
Dependances partagees de l'application web.

Les services sont construits depuis le Container DI stocke dans app.state ;
chaque requete ouvre sa propre session SQLModel, fermee a la fin de la requete.
"""

from collections.abc import Iterator
from uuid import UUID

from fastapi import Request

from ..container import Container
from ..core.errors import InvalidIdentifier
from ..services.explore import ExploreService
from ..services.library import LibraryService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_library(request: Request) -> Iterator[LibraryService]:
    """Service de l'archive lie a une session propre a la requete."""
    container = get_container(request)
    with container.session() as session:
        yield container.library_service(
            media_repo=container.media_repository(session=session)
        )


def get_explore(request: Request) -> ExploreService:
    return get_container(request).explore_service()


def parse_item_id(item_id: str) -> UUID:
    """
    Interprete l'identifiant du chemin.

    Raises:
        InvalidIdentifier: Ce n'est pas un UUID
    """
    try:
        return UUID(item_id)
    except ValueError as exc:
        raise InvalidIdentifier(item_id) from exc
