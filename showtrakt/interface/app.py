"""
Machine d'etat de l'application.

L'App possede le mode courant, les curseurs de selection et les listes
en memoire (series, saisons de la serie consultee). Le rendu et le clavier
ne font que lire ses champs publics et appeler ses methodes.

    INITIALIZING -> MAIN_VIEW <-> SEASON_VIEW
                    MAIN_VIEW <-> QUERYING / HELP_WINDOW
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from loguru import logger

from showtrakt.core.entities.media import Season, Show
from showtrakt.core.errors import ApiError, DataManagerUnavailable, StoreError
from showtrakt.core.ports.api_clients import IShowDetailsClient
from showtrakt.core.ports.repositories import IShowRepository
from showtrakt.services.data_manager import DataManager

# Texte envoye au DataManager au demarrage (pas encore de filtrage)
INITIAL_QUERY = "spurious"


class AppMode(Enum):
    """Modes de l'application."""

    # Chargement initial des series
    INITIALIZING = "initializing"
    # Liste de toutes les series connues
    MAIN_VIEW = "main_view"
    # Saisie dans la barre de recherche
    QUERYING = "querying"
    # Aide des raccourcis clavier
    HELP_WINDOW = "help_window"
    # Saisons de la serie selectionnee
    SEASON_VIEW = "season_view"


@dataclass
class TableState:
    """Index selectionne dans une table; None seulement si rien n'est choisi."""

    selected: Optional[int] = None

    def select(self, index: Optional[int]) -> None:
        self.selected = index


@dataclass
class ScrollState:
    """Indicateur de defilement : longueur du contenu et position."""

    content_length: int = 0
    position: int = 0


@dataclass
class AppShowView:
    """Etat de la vue detaillee d'une serie."""

    seasons: list[Season] = field(default_factory=list)
    season_table_state: TableState = field(default_factory=TableState)
    scroll_state: ScrollState = field(default_factory=ScrollState)


def _forward(selected: Optional[int], step: int, length: int) -> int:
    if selected is None:
        return 0
    return min(selected + step, length - 1)


def _backward(selected: Optional[int], step: int, default: int) -> int:
    if selected is None:
        return default
    return max(selected - step, 0)


class App:
    """
    Etat de l'application.

    Attributes:
        running: False une fois quit() appele
        mode: Mode courant
        input: Texte saisi dans la barre de recherche
        table_state: Selection dans la liste des series
        scroll_state: Defilement de la liste des series
        shows: Series chargees par le DataManager
        show_view: Saisons de la serie consultee et leur selection
    """

    def __init__(
        self,
        data_manager: DataManager,
        client: IShowDetailsClient,
        store: IShowRepository,
    ) -> None:
        self.running = True
        self.data_manager = data_manager
        self.client = client
        self.store = store

        self.mode = AppMode.INITIALIZING
        self.input = ""
        self.table_state = TableState()
        self.scroll_state = ScrollState()
        self.shows: list[Show] = []

        self.show_view = AppShowView()

    @property
    def selected_show(self) -> Optional[Show]:
        """Serie selectionnee dans la vue principale."""
        if self.table_state.selected is None:
            return None
        return self.shows[self.table_state.selected]

    @property
    def selected_season(self) -> Optional[Season]:
        """Saison selectionnee dans la vue detaillee."""
        selected = self.show_view.season_table_state.selected
        if selected is None:
            return None
        return self.show_view.seasons[selected]

    def tick(self) -> None:
        """
        Traite un tick de la boucle interactive.

        Tant qu'aucune serie n'est chargee, interroge le DataManager.

        Raises:
            DataManagerUnavailable: Si le worker ne repond plus
        """
        if self.shows:
            return

        items = self.data_manager.query(INITIAL_QUERY)
        if items is None:
            logger.error("Le worker du DataManager ne repond plus")
            raise DataManagerUnavailable("Le worker du DataManager ne repond plus")

        self.scroll_state.content_length = len(items)
        self.shows = items

        if self.mode == AppMode.INITIALIZING:
            self.mode = AppMode.MAIN_VIEW
            logger.info(f"{len(items)} serie(s) chargee(s)")

    def quit(self) -> None:
        """Arrete l'application."""
        self.running = False

    # Navigation dans la liste des series

    def next(self, step: int = 1) -> None:
        if not self.shows:
            return
        i = _forward(self.table_state.selected, step, len(self.shows))
        self.table_state.select(i)
        self.scroll_state.position = i

    def prev(self, step: int = 1) -> None:
        if not self.shows:
            return
        # Sans selection, on part de la fin de la liste
        i = _backward(self.table_state.selected, step, len(self.shows) - 1)
        self.table_state.select(i)
        self.scroll_state.position = i

    def select_first(self) -> None:
        if self.shows:
            self.table_state.select(0)
            self.scroll_state.position = 0

    def select_last(self) -> None:
        if self.shows:
            self.table_state.select(len(self.shows) - 1)
            self.scroll_state.position = len(self.shows) - 1

    # Navigation dans la liste des saisons

    def season_next(self, step: int = 1) -> None:
        seasons = self.show_view.seasons
        if not seasons:
            return
        i = _forward(self.show_view.season_table_state.selected, step, len(seasons))
        self.show_view.season_table_state.select(i)
        self.show_view.scroll_state.position = i

    def season_prev(self, step: int = 1) -> None:
        if not self.show_view.seasons:
            return
        # Contrairement aux series, on part du debut de la liste
        i = _backward(self.show_view.season_table_state.selected, step, 0)
        self.show_view.season_table_state.select(i)
        self.show_view.scroll_state.position = i

    # Statuts utilisateur

    def toggle_watch_status(self) -> None:
        """
        Fait tourner le statut de la serie selectionnee et l'enregistre.

        Raises:
            StoreError: Si l'enregistrement echoue
        """
        show = self.selected_show
        if show is None:
            return

        show.user_status = show.user_status.next()
        logger.info(f"Serie {show.imdb_id} ({show.title}) -> {show.user_status.value}")
        try:
            self.store.upsert_show(show)
        except StoreError as e:
            logger.error(f"Enregistrement du statut de {show.imdb_id} echoue: {e}")
            raise

    def toggle_season_watch_status(self) -> None:
        """
        Fait tourner le statut de la saison selectionnee et l'enregistre.

        Raises:
            StoreError: Si l'enregistrement echoue
        """
        season = self.selected_season
        if season is None:
            return

        season.user_status = season.user_status.next()
        logger.info(
            f"Saison {season.number} de {season.show_imdb_id} -> {season.user_status.value}"
        )
        try:
            self.store.upsert_season(season)
        except StoreError as e:
            logger.error(
                f"Enregistrement du statut de la saison {season.number} "
                f"de {season.show_imdb_id} echoue: {e}"
            )
            raise

    # Transitions de mode

    async def enter_show_details(self) -> None:
        """
        Consulte Trakt pour la serie selectionnee et ouvre la vue des saisons.

        Raises:
            ApiError: La consultation a echoue; l'application est arretee
            StoreError: La reconciliation des saisons a echoue
        """
        show = self.selected_show
        if self.mode != AppMode.MAIN_VIEW or show is None:
            return

        try:
            details, api_seasons = await self.client.get_show_details(show.imdb_id)
        except ApiError as e:
            logger.error(f"Consultation des details de {show.imdb_id} ({show.title}) echouee: {e}")
            self.quit()
            raise

        show.overview = details.overview
        show.network = details.network
        show.no_episodes = details.aired_episodes
        if show.trakt_id is None:
            show.trakt_id = details.trakt_id

        # TODO: harmoniser avec toggle_watch_status, qui propage StoreError
        try:
            self.store.upsert_show(show)
        except StoreError as e:
            logger.warning(f"Enregistrement des details de {show.imdb_id} ignore: {e}")

        try:
            seasons = self.store.reconcile_seasons(show, api_seasons)
        except StoreError as e:
            logger.error(f"Reconciliation des saisons de {show.imdb_id} echouee: {e}")
            raise

        self.show_view.seasons = seasons
        self.show_view.season_table_state.select(0 if seasons else None)
        self.show_view.scroll_state = ScrollState(content_length=len(seasons))
        self.mode = AppMode.SEASON_VIEW

    def leave_show_details(self) -> None:
        if self.mode == AppMode.SEASON_VIEW:
            self.mode = AppMode.MAIN_VIEW

    def enter_query_mode(self) -> None:
        if self.mode == AppMode.MAIN_VIEW:
            self.mode = AppMode.QUERYING

    def leave_query_mode(self) -> None:
        if self.mode == AppMode.QUERYING:
            self.mode = AppMode.MAIN_VIEW

    def toggle_help(self) -> None:
        if self.mode == AppMode.MAIN_VIEW:
            self.mode = AppMode.HELP_WINDOW
        elif self.mode == AppMode.HELP_WINDOW:
            self.mode = AppMode.MAIN_VIEW
