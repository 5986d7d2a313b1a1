"""
Boucle interactive de l'interface terminal.

Chaque tour : dessin de l'etat, attente d'un evenement, application de
l'evenement a l'App via run_turn(). L'App est passee explicitement, il n'y
a pas d'etat global.
"""

import termios
import tty
from typing import Optional

from rich.console import Console
from rich.live import Live

from showtrakt.interface.app import App
from showtrakt.interface.events import Event, EventHandler, Key, Mouse, Tick
from showtrakt.interface.handler import handle_key_events, handle_mouse_events
from showtrakt.interface.ui import render

# Lignes reservees au cadre, a la barre de recherche et aux en-tetes
_CHROME_HEIGHT = 9

ENABLE_MOUSE = "\x1b[?1000h"
DISABLE_MOUSE = "\x1b[?1000l"


def enter_cbreak(fd: int) -> list:
    """
    Passe le terminal en lecture touche par touche, sans echo ni signaux.

    Ctrl-C arrive alors comme une touche. La sortie reste traitee (OPOST)
    pour le rendu Rich.

    Retourne :
        Les attributs d'origine, a rendre a restore_terminal()
    """
    saved = termios.tcgetattr(fd)
    mode = termios.tcgetattr(fd)
    mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
    mode[tty.CC][termios.VMIN] = 1
    mode[tty.CC][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSAFLUSH, mode)
    return saved


def restore_terminal(fd: int, saved: list) -> None:
    termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class Tui:
    """
    Ecran alternatif Rich + source d'evenements.

    Avec un descripteur de terminal, ses attributs sont sauvegardes a
    l'entree et restaures a la sortie, apres l'arret du lecteur de touches.
    """

    def __init__(
        self,
        events: EventHandler,
        console: Optional[Console] = None,
        fd: Optional[int] = None,
    ) -> None:
        self.events = events
        self.console = console or Console()
        self.fd = fd
        self._live: Optional[Live] = None
        self._saved_attrs: Optional[list] = None

    def __enter__(self) -> "Tui":
        if self.fd is not None:
            self._saved_attrs = enter_cbreak(self.fd)
        self._live = Live(console=self.console, screen=True, auto_refresh=False)
        self._live.start()
        self._set_mouse(ENABLE_MOUSE)
        self.events.start()
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            self.events.stop()
            self._set_mouse(DISABLE_MOUSE)
            if self._live is not None:
                self._live.stop()
                self._live = None
        finally:
            if self._saved_attrs is not None:
                restore_terminal(self.fd, self._saved_attrs)
                self._saved_attrs = None

    def draw(self, app: App) -> None:
        height = max(self.console.size.height - _CHROME_HEIGHT, 1)
        self._live.update(render(app, height), refresh=True)

    def _set_mouse(self, sequence: str) -> None:
        if self.console.is_terminal:
            self.console.file.write(sequence)
            self.console.file.flush()


async def run_turn(app: App, event: Event, page_step: int = 20) -> None:
    """Applique un evenement a l'App. Les erreurs remontent a l'appelant."""
    if isinstance(event, Tick):
        app.tick()
    elif isinstance(event, Key):
        await handle_key_events(event.code, app, page_step)
    elif isinstance(event, Mouse):
        handle_mouse_events(event, app)


async def run(app: App, tui: Tui, page_step: int = 20) -> None:
    """Boucle principale, jusqu'a app.quit()."""
    with tui:
        # Premier tick immediat pour ne pas attendre tick_rate au demarrage
        await run_turn(app, Tick(), page_step)
        while app.running:
            tui.draw(app)
            event = await tui.events.next()
            await run_turn(app, event, page_step)
