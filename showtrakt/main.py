"""
Point d'entree CLI de ShowTrakt.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import asyncio
import sys
from typing import Annotated, Optional

import httpx
import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .adapters.imdb import IMDbShowImporter
from .config import Settings
from .container import Container
from .core.entities.media import UserStatusShow
from .core.errors import ShowTraktError
from .infrastructure.persistence import dispose_engine
from .interface.events import EventHandler
from .interface.tui import Tui, run
from .logging_config import configure_logging

app = typer.Typer(
    name="showtrakt",
    help="Suivi de la progression de visionnage des series TV",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


def _configure(console_logs: bool) -> Settings:
    settings = get_config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        console=console_logs,
    )
    container.database.init()
    return settings


@app.command()
def tui() -> None:
    """Lance l'interface terminal."""
    settings = _configure(console_logs=False)
    logger.info("Demarrage de ShowTrakt", version=__version__)

    try:
        asyncio.run(_run_tui(settings))
    except ShowTraktError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)


async def _run_tui(settings: Settings) -> None:
    application = container.app()
    fd = sys.stdin.fileno() if sys.stdin.isatty() else None
    events = EventHandler(tick_rate=settings.tick_rate_ms / 1000, fd=fd)
    try:
        await run(application, Tui(events, console, fd=fd), page_step=settings.page_step)
    finally:
        application.data_manager.close()
        application.store.close()
        await application.client.close()
        dispose_engine()
        logger.info("Arret de ShowTrakt")


@app.command(name="list")
def list_shows(
    status: Annotated[
        Optional[UserStatusShow],
        typer.Option("--status", "-s", help="Filtrer par statut"),
    ] = None,
    limit: Annotated[
        int,
        typer.Option("--limit", "-l", help="Nombre maximum de series (0 = illimite)"),
    ] = 50,
) -> None:
    """Affiche les series suivies."""
    _configure(console_logs=True)
    manager = container.data_manager()
    try:
        shows = manager.query("")
    finally:
        manager.close()
        dispose_engine()

    if shows is None:
        console.print("[red]Erreur:[/red] le gestionnaire de donnees ne repond plus")
        raise typer.Exit(code=1)

    if status is not None:
        shows = [s for s in shows if s.user_status == status]
    if limit > 0:
        shows = shows[:limit]

    table = Table(title=f"{len(shows)} serie(s)")
    table.add_column("IMDb")
    table.add_column("Titre")
    table.add_column("Annee")
    table.add_column("Statut")
    for show in shows:
        table.add_row(show.imdb_id, show.title, str(show.year or ""), show.user_status.value)
    console.print(table)


@app.command(name="import-imdb")
def import_imdb(
    refresh: Annotated[
        bool,
        typer.Option("--refresh", help="Retelecharger le dataset meme s'il est en cache"),
    ] = False,
) -> None:
    """Importe les series du dataset IMDb title.basics."""
    settings = _configure(console_logs=True)
    repository = container.show_repository()
    importer = IMDbShowImporter(settings.imdb_cache_dir, repository)

    max_age = 0 if refresh else settings.imdb_max_age_days
    try:
        dataset = asyncio.run(importer.ensure_dataset(max_age_days=max_age))
        with console.status("[cyan]Import des series..."):
            stats = importer.import_shows(dataset)
    except httpx.HTTPError as e:
        console.print(f"[red]Erreur:[/red] telechargement du dataset impossible: {e}")
        raise typer.Exit(code=1)
    except ShowTraktError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)
    finally:
        repository.close()
        dispose_engine()

    console.print(
        f"[green]{stats.imported}[/green] serie(s) importee(s), "
        f"[dim]{stats.skipped} deja connue(s)[/dim] sur {stats.total}"
    )


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"API Trakt : {'activee' if config.trakt_enabled else 'desactivee'}")
    typer.echo(f"Cache IMDb : {config.imdb_cache_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"ShowTrakt v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
