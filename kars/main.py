"""
Point d'entree CLI de KARS.

Configure le logging, initialise la base et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from .adapters.cli.commands import (
    add,
    complete,
    delete,
    explore,
    list_items,
    progress,
    score,
    show,
    stats,
    tag,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

VERSION = "0.1.0"

app = typer.Typer(
    name="kars",
    help="Archive personnelle de films, series et lectures",
    no_args_is_help=True,
)
container = Container()


# Commandes de l'archive
app.command(name="list")(list_items)
app.command()(show)
app.command()(add)
app.command()(explore)
app.command()(score)
app.command()(complete)
app.command()(progress)
app.command()(tag)
app.command()(delete)
app.command()(stats)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"Cache API : {config.cache_dir}")
    typer.echo(f"API TMDB : {'activee' if config.tmdb_enabled else 'desactivee'}")
    typer.echo(f"Serveur : {config.host}:{config.port}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"KARS v{VERSION}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'ecoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'ecoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur de l'API JSON."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Demarrage du serveur sur {host}:{port}")
    uvicorn.run("kars.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entree de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Demarrage de KARS", version=VERSION)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
