"""Raccourcis clavier : traduit une touche en appel de methode sur l'App."""

from showtrakt.interface.app import App, AppMode
from showtrakt.interface.events import CTRL_C, CTRL_D, Mouse
from showtrakt.interface.ui import QUERY_BAR_HEIGHT

UP = "\x1b[A"
DOWN = "\x1b[B"
RIGHT = "\x1b[C"
LEFT = "\x1b[D"
ESC = "\x1b"
ENTER = "\r"
TAB = "\t"
BACKSPACE = "\x7f"
CTRL_U = "\x15"

QUIT_KEYS = frozenset({"q", ESC, CTRL_C})


async def handle_key_events(key: str, app: App, page_step: int = 20) -> None:
    """Met a jour l'App selon la touche et le mode courant."""
    if app.mode == AppMode.QUERYING:
        _handle_query_input(key, app)
        return

    if app.mode == AppMode.HELP_WINDOW:
        if key == CTRL_C:
            app.quit()
        else:
            app.toggle_help()
        return

    if app.mode == AppMode.SEASON_VIEW:
        await _handle_season_view(key, app, page_step)
        return

    if key in QUIT_KEYS:
        app.quit()
        return

    if app.mode != AppMode.MAIN_VIEW:
        return

    if key in (UP, "k"):
        app.prev(1)
    elif key in (DOWN, "j"):
        app.next(1)
    elif key == CTRL_U:
        app.prev(page_step)
    elif key == CTRL_D:
        app.next(page_step)
    elif key == "g":
        app.select_first()
    elif key == "G":
        app.select_last()
    elif key in (" ", "w"):
        app.toggle_watch_status()
    elif key in (ENTER, RIGHT, "l"):
        await app.enter_show_details()
    elif key in (TAB, "/"):
        app.enter_query_mode()
    elif key == "?":
        app.toggle_help()


async def _handle_season_view(key: str, app: App, page_step: int) -> None:
    if key == CTRL_C or key == "q":
        app.quit()
    elif key in (ESC, LEFT, "h"):
        app.leave_show_details()
    elif key in (UP, "k"):
        app.season_prev(1)
    elif key in (DOWN, "j"):
        app.season_next(1)
    elif key == CTRL_U:
        app.season_prev(page_step)
    elif key == CTRL_D:
        app.season_next(page_step)
    elif key in (" ", "w"):
        app.toggle_season_watch_status()


def _handle_query_input(key: str, app: App) -> None:
    # TODO: filtrer les series sur app.input quand le DataManager saura le faire
    if key in (ENTER, TAB, ESC):
        app.leave_query_mode()
    elif key == CTRL_C:
        app.quit()
    elif key == BACKSPACE:
        app.input = app.input[:-1]
    elif key.isprintable() and not key.startswith(ESC):
        app.input += key


def handle_mouse_events(event: Mouse, app: App) -> None:
    """Molette : deplace la selection. Clic sur la barre de recherche : saisie."""
    if app.mode == AppMode.SEASON_VIEW:
        if event.kind == "scroll_down":
            app.season_next(1)
        elif event.kind == "scroll_up":
            app.season_prev(1)
        return

    if app.mode not in (AppMode.MAIN_VIEW, AppMode.QUERYING):
        return

    if event.kind in ("scroll_down", "scroll_up"):
        # La molette ramene sur la liste
        app.leave_query_mode()
        if event.kind == "scroll_down":
            app.next(1)
        else:
            app.prev(1)
    elif event.kind == "down" and event.row < QUERY_BAR_HEIGHT:
        app.enter_query_mode()
