"""
Utilitaires partages pour les commandes CLI de KARS.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- open_library : context manager fournissant un LibraryService et sa session
- resolve_item : selection d'un media par numero de liste ou UUID
- build_kind : construction d'une variante depuis un nom de type
"""

from collections.abc import Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Optional
from uuid import UUID

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from kars.container import Container
from kars.core.entities.media import MediaKind, MediaRecord, Movie, Readable, Series
from kars.core.errors import DataCorruption, UnknownMediaType
from kars.core.value_objects import Progress, ReadableKind
from kars.services.library import ItemNotFoundError, LibraryService

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("kars")
    try:
        yield
    finally:
        loguru_logger.enable("kars")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


@contextmanager
def open_library(container: Optional[Container] = None) -> Iterator[LibraryService]:
    """
    Fournit un LibraryService lie a une session fermee en sortie.

    Un container neuf (base initialisee) est cree si aucun n'est fourni.
    Une archive corrompue est signalee et termine la commande (code 1).
    """
    if container is None:
        container = Container()
        container.database.init()
    try:
        with container.session() as session:
            yield container.library_service(
                media_repo=container.media_repository(session=session)
            )
    except DataCorruption as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)


def resolve_item(library: LibraryService, ref: str) -> MediaRecord:
    """
    Retrouve un media par son numero dans `kars list` (1-based) ou son UUID.

    Affiche l'erreur et quitte avec le code 1 si rien ne correspond.
    """
    ref = ref.strip()
    if ref.isdigit():
        items = library.list_items()
        index = int(ref)
        if 1 <= index <= len(items):
            return items[index - 1]
        console.print(f"[red]Numero invalide: {ref} (archive de {len(items)} medias)[/red]")
        raise typer.Exit(code=1)

    try:
        return library.get_item(UUID(ref))
    except ValueError:
        console.print(f"[red]Reference invalide: {ref!r} (numero ou UUID attendu)[/red]")
        raise typer.Exit(code=1)
    except ItemNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)


def build_kind(media_type: str, total: Optional[int] = None) -> MediaKind:
    """
    Construit une variante "a commencer" depuis un nom de type.

    Raises:
        UnknownMediaType: Type non reconnu
    """
    media_type = media_type.strip().lower()
    if media_type == "movie":
        return Movie()
    if media_type in ("series", "anime"):
        return Series(progress=Progress(current=0, total=total))
    try:
        readable_kind = ReadableKind(media_type)
    except ValueError:
        raise UnknownMediaType(media_type) from None
    return Readable(readable_kind=readable_kind, progress=Progress(current=0, total=total))
