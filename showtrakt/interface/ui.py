"""
Rendu Rich de l'etat de l'App.

Ne fait que lire les champs publics de l'App; aucune mutation ici.
"""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from showtrakt.core.entities.media import UserStatusSeason, UserStatusShow
from showtrakt.interface.app import App, AppMode

SHOW_STATUS_STYLES = {
    UserStatusShow.TODO: "yellow",
    UserStatusShow.WATCHED: "green",
    UserStatusShow.UNWATCHED: "red",
}

SEASON_STATUS_STYLES = {
    UserStatusSeason.UNFILLED: "dim",
    UserStatusSeason.ON_RELEASE: "cyan",
    UserStatusSeason.OTHER_DATE: "magenta",
}

# Hauteur de la barre de recherche (cadre compris), en haut de l'ecran
QUERY_BAR_HEIGHT = 3

HELP_LINES = [
    ("j / Bas, k / Haut", "Deplacer la selection"),
    ("Ctrl-D / Ctrl-U", "Page suivante / precedente"),
    ("g / G", "Premiere / derniere serie"),
    ("Espace / w", "Changer le statut"),
    ("Entree / l", "Voir les saisons (consulte Trakt)"),
    ("Echap / h", "Revenir a la liste des series"),
    ("Tab / /", "Barre de recherche"),
    ("?", "Afficher / masquer l'aide"),
    ("Molette / clic", "Deplacer la selection / ouvrir la recherche"),
    ("q", "Quitter"),
]


def visible_window(position: int, length: int, height: int) -> tuple[int, int]:
    """Bornes [debut, fin) des lignes affichees, centrees sur la position."""
    if length <= height:
        return 0, length
    start = min(max(position - height // 2, 0), length - height)
    return start, start + height


def render(app: App, height: int = 20) -> RenderableType:
    """Construit l'ecran complet pour le mode courant."""
    if app.mode == AppMode.INITIALIZING:
        return Panel(Text("Chargement des series...", style="bold cyan"), title="ShowTrakt")
    if app.mode == AppMode.SEASON_VIEW:
        return render_season_view(app, height)

    body: list[RenderableType] = [render_query_bar(app), render_show_table(app, height)]
    if app.mode == AppMode.HELP_WINDOW:
        body.append(render_help())
    return Group(*body)


def render_query_bar(app: App) -> RenderableType:
    style = "bold yellow" if app.mode == AppMode.QUERYING else "dim"
    return Panel(Text(app.input or " "), title="Recherche", border_style=style)


def render_show_table(app: App, height: int) -> RenderableType:
    table = Table(expand=True, title=f"{len(app.shows)} serie(s)")
    table.add_column("Statut", width=10)
    table.add_column("Titre", ratio=3)
    table.add_column("Annee", width=6)
    table.add_column("Chaine", ratio=1)
    table.add_column("Episodes", width=9, justify="right")

    start, end = visible_window(app.scroll_state.position, len(app.shows), height)
    for index in range(start, end):
        show = app.shows[index]
        table.add_row(
            Text(show.user_status.value, style=SHOW_STATUS_STYLES[show.user_status]),
            show.title,
            str(show.year or ""),
            show.network or "",
            str(show.no_episodes or ""),
            style="reverse" if index == app.table_state.selected else None,
        )
    return table


def render_season_view(app: App, height: int) -> RenderableType:
    show = app.selected_show
    header = Text(show.title if show else "", style="bold")
    if show and show.network:
        header.append(f"  ({show.network})", style="dim")

    table = Table(expand=True)
    table.add_column("Saison", width=8)
    table.add_column("Titre", ratio=2)
    table.add_column("Episodes", width=9, justify="right")
    table.add_column("Premiere diffusion", width=20)
    table.add_column("Statut", width=12)

    view = app.show_view
    start, end = visible_window(view.scroll_state.position, len(view.seasons), height)
    for index in range(start, end):
        season = view.seasons[index]
        table.add_row(
            str(season.number),
            season.title or "",
            f"{season.aired_episodes or 0}/{season.episode_count or 0}",
            (season.first_aired or "")[:10],
            Text(season.user_status.value, style=SEASON_STATUS_STYLES[season.user_status]),
            style="reverse" if index == view.season_table_state.selected else None,
        )

    overview = Text(show.overview or "", style="italic") if show else Text("")
    return Group(Panel(overview, title=header), table)


def render_help() -> RenderableType:
    table = Table.grid(padding=(0, 2))
    for keys, action in HELP_LINES:
        table.add_row(Text(keys, style="bold"), action)
    return Panel(table, title="Aide", border_style="cyan")
