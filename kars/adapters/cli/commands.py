"""
Commandes CLI de l'archive (list, show, add, explore, score, complete, progress, tag, delete, stats).

Les medias sont designes par leur numero dans `kars list` ou par leur UUID.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from kars.container import Container
from kars.core.entities.media import MediaRecord, NoProgressError, format_progress
from kars.core.errors import UnknownMediaType
from kars.core.ports.api_clients import MediaSearchType
from kars.adapters.cli.helpers import (
    build_kind,
    console,
    open_library,
    resolve_item,
    suppress_loguru,
    with_container,
)
from kars.web.mapping import compute_stats, to_api_item
from kars.web.schemas import U32_MAX


def _score_text(value: Optional[float]) -> str:
    return f"{value:.1f}" if value is not None else "-"


def list_items() -> None:
    """Liste l'archive, triee par titre."""
    with open_library() as library:
        items = library.list_items()

    if not items:
        console.print("Archive vide.")
        return

    table = Table(title=f"Archive ({len(items)} medias)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Statut")
    table.add_column("Note", justify="right")
    table.add_column("", justify="center")
    for index, record in enumerate(items, start=1):
        table.add_row(
            str(index),
            record.title,
            record.format_status(),
            _score_text(record.score_display),
            "[green]✓[/green]" if record.is_completed() else "",
        )
    console.print(table)


def show(
    ref: Annotated[str, typer.Argument(help="Numero (kars list) ou UUID du media")],
) -> None:
    """Affiche le detail d'un media."""
    with open_library() as library:
        record = resolve_item(library, ref)

    console.print(f"\n[bold]--- {record.title} ---[/bold]")
    console.print(f"  ID:       {record.id}")
    console.print(f"  Type:     {record.format_status()}")
    if record.score is not None:
        console.print(f"  Note:     {record.score_display:.1f}")
    if record.global_score is not None:
        console.print(f"  Globale:  {record.global_score_display:.1f}")
    progress = record.progress
    if progress is not None and progress.percent() is not None:
        console.print(f"  Progression: {progress.percent():.1f}%")
    if record.is_completed():
        console.print("  Statut:   [green]Termine ✓[/green]")
    if record.poster_url:
        console.print(f"  Affiche:  {record.poster_url}")
    if record.external_id is not None:
        console.print(f"  ID ext.:  {record.external_id}")
    if record.source:
        console.print(f"  Source:   {record.source}")
    if record.tags:
        console.print(f"  Tags:     {', '.join(sorted(record.tags))}")


def _confirm_duplicate(library, title: str, yes: bool) -> None:
    if library.has_duplicate(title) and not yes:
        console.print(f"[yellow]Attention: '{title}' existe deja dans l'archive.[/yellow]")
        if not typer.confirm("Ajouter quand meme ?", default=False):
            console.print("Annule.")
            raise typer.Exit()


def add(
    title: Annotated[str, typer.Argument(help="Titre du media")],
    media_type: Annotated[
        str,
        typer.Option(
            "--type", "-t",
            help="movie, series, anime, book, web_novel, light_novel, manga, manhwa, webtoon",
        ),
    ] = "movie",
    total: Annotated[
        Optional[int],
        typer.Option(
            "--total", min=0, max=U32_MAX, help="Nombre total d'episodes, chapitres ou pages"
        ),
    ] = None,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Ne pas demander de confirmation")
    ] = False,
) -> None:
    """Ajoute un media saisi a la main."""
    title = title.strip()
    if not title:
        console.print("[red]Le titre ne peut pas etre vide.[/red]")
        raise typer.Exit(code=1)
    try:
        kind = build_kind(media_type, total)
    except UnknownMediaType as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    with open_library() as library:
        _confirm_duplicate(library, title, yes)
        record = library.create_item(MediaRecord.new(title, kind))
    console.print(f"[green]Ajoute:[/green] {record.title}")


def explore(
    query: Annotated[str, typer.Argument(help="Texte recherche")],
    media_type: Annotated[
        str,
        typer.Option(
            "--type", "-t",
            help="anime, manga, light_novel, movie, series, book",
        ),
    ] = "anime",
    pick: Annotated[
        Optional[int],
        typer.Option("--add", "-a", min=1, help="Ajoute le resultat numero N a l'archive"),
    ] = None,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Ne pas demander de confirmation")
    ] = False,
) -> None:
    """Recherche dans les catalogues externes (AniList, TMDB, MangaDex, Open Library)."""
    asyncio.run(_explore_async(query, MediaSearchType.parse(media_type), pick, yes))


@with_container()
async def _explore_async(
    container: Container,
    query: str,
    search_type: MediaSearchType,
    pick: Optional[int],
    yes: bool,
) -> None:
    """Implementation async de la commande explore."""
    explore_service = container.explore_service()
    if not explore_service.providers_for(search_type):
        console.print("Aucun catalogue disponible pour cette categorie.")
        return

    try:
        with suppress_loguru():
            with console.status(f"Recherche de '{query}'..."):
                results = await explore_service.explore(query, search_type.value)
    finally:
        await explore_service.close()

    if not results:
        console.print("Aucun resultat.")
        return

    console.print("\n[bold]Resultats :[/bold]")
    for index, result in enumerate(results, start=1):
        console.print(result.display_line(index), markup=False, highlight=False)

    if pick is None:
        return
    if pick > len(results):
        console.print(f"[red]Numero invalide: {pick}[/red]")
        raise typer.Exit(code=1)

    chosen = results[pick - 1]
    with open_library(container) as library:
        _confirm_duplicate(library, chosen.title, yes)
        library.import_result(chosen)
    console.print(f"[green]Ajoute:[/green] {chosen.title}")


def score(
    ref: Annotated[str, typer.Argument(help="Numero (kars list) ou UUID du media")],
    value: Annotated[float, typer.Argument(help="Note de 0.0 a 10.0 (bornee)")],
) -> None:
    """Attribue une note personnelle."""
    with open_library() as library:
        record = resolve_item(library, ref)
        record = library.set_score(record.id, value)
    console.print(f"Note fixee a {record.score_display:.1f} pour '{record.title}'")


def complete(
    ref: Annotated[str, typer.Argument(help="Numero (kars list) ou UUID du media")],
) -> None:
    """Marque un media comme termine (progression remplie)."""
    with open_library() as library:
        record = resolve_item(library, ref)
        record, already = library.complete_item(record.id)
    if already:
        console.print(f"'{record.title}' est deja termine.")
    else:
        console.print(f"[green]'{record.title}' marque comme termine ✓[/green]")


def progress(
    ref: Annotated[str, typer.Argument(help="Numero (kars list) ou UUID du media")],
    current: Annotated[
        int, typer.Argument(min=0, max=U32_MAX, help="Episodes, chapitres ou pages faits")
    ],
    total: Annotated[
        Optional[int],
        typer.Option("--total", min=0, max=U32_MAX, help="Nouveau total (inchange si absent)"),
    ] = None,
) -> None:
    """Met a jour la progression d'une serie ou d'une lecture."""
    with open_library() as library:
        record = resolve_item(library, ref)
        try:
            updated = library.update_progress(record.id, current, total)
        except NoProgressError:
            console.print("[red]Les films n'ont pas de progression.[/red]")
            raise typer.Exit(code=1)
    console.print(f"{record.title} {format_progress(updated)}")


def tag(
    ref: Annotated[str, typer.Argument(help="Numero (kars list) ou UUID du media")],
    name: Annotated[str, typer.Argument(help="Tag (\"favorite\" marque un favori)")],
    remove: Annotated[
        bool, typer.Option("--remove", "-r", help="Retire le tag au lieu de l'ajouter")
    ] = False,
) -> None:
    """Ajoute ou retire un tag."""
    name = name.strip()
    if not name:
        console.print("[red]Le tag ne peut pas etre vide.[/red]")
        raise typer.Exit(code=1)

    with open_library() as library:
        record = resolve_item(library, ref)
        if remove:
            changed = library.remove_tag(record.id, name)
            message = f"Tag '{name}' retire." if changed else f"Tag '{name}' introuvable."
        else:
            changed = library.add_tag(record.id, name)
            message = f"Tag '{name}' ajoute." if changed else f"Tag '{name}' deja present."
    console.print(message)


def delete(
    ref: Annotated[str, typer.Argument(help="Numero (kars list) ou UUID du media")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Ne pas demander de confirmation")
    ] = False,
) -> None:
    """Supprime un media de l'archive."""
    with open_library() as library:
        record = resolve_item(library, ref)
        if not yes and not typer.confirm(f"Supprimer '{record.title}' ?", default=False):
            console.print("Annule.")
            raise typer.Exit()
        library.delete_item(record.id)
    console.print(f"Supprime: {record.title}")


def stats() -> None:
    """Affiche les compteurs de l'archive."""
    with open_library() as library:
        counters = compute_stats(to_api_item(record) for record in library.list_items())

    table = Table(title="Statistiques")
    table.add_column("Compteur")
    table.add_column("Valeur", justify="right")
    for name, value in counters.model_dump().items():
        table.add_row(name, str(value))
    console.print(table)
