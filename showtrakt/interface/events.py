"""
Evenements de la boucle interactive.

Un thread lit le clavier (click.getchar) et pousse chaque touche dans une
file asyncio; la boucle interactive recoit un Tick quand aucune touche
n'arrive pendant tick_rate secondes.

Quand un descripteur de terminal est fourni, le thread attend qu'une entree
soit disponible (select) avant d'appeler read_key : il n'est jamais bloque
dans une lecture au moment de l'arret et peut etre rejoint.

Les rapports souris xterm (ESC [ M b x y) deviennent des evenements Mouse.
"""

import asyncio
import select
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, Union

import click

CTRL_C = "\x03"
CTRL_D = "\x04"

# Prefixe des rapports souris X10 / xterm
MOUSE_PREFIX = "\x1b[M"

# Codes bouton des rapports souris (valeur brute - 32)
_SCROLL_UP = 64
_SCROLL_DOWN = 65
_RELEASE = 3


@dataclass(frozen=True)
class Tick:
    """Pas de touche pendant un intervalle de tick."""


@dataclass(frozen=True)
class Key:
    """Touche ou sequence d'echappement lue sur le terminal."""

    code: str


@dataclass(frozen=True)
class Mouse:
    """
    Evenement souris.

    Attributes:
        kind: "scroll_up", "scroll_down", "down" ou "up"
        column: Colonne, 0 a gauche
        row: Ligne, 0 en haut de l'ecran
    """

    kind: str
    column: int
    row: int


Event = Union[Tick, Key, Mouse]


def parse_input(code: str) -> Union[Key, Mouse]:
    """Convertit une lecture brute en Key, ou en Mouse pour un rapport souris."""
    if not code.startswith(MOUSE_PREFIX) or len(code) < 6:
        return Key(code)

    button = ord(code[3]) - 32
    column = ord(code[4]) - 33
    row = ord(code[5]) - 33
    if button == _SCROLL_UP:
        kind = "scroll_up"
    elif button == _SCROLL_DOWN:
        kind = "scroll_down"
    elif button & 0b11 == _RELEASE:
        kind = "up"
    else:
        kind = "down"
    return Mouse(kind, column, row)


class EventHandler:
    """
    Source d'evenements pour la boucle interactive.

    Usage:
        events = EventHandler(tick_rate=0.25, fd=sys.stdin.fileno())
        events.start()
        event = await events.next()
        events.stop()
    """

    def __init__(
        self,
        tick_rate: float,
        read_key: Callable[[], str] = click.getchar,
        fd: Optional[int] = None,
        poll_interval: float = 0.05,
    ) -> None:
        """
        Args:
            tick_rate: Secondes sans touche avant un Tick
            read_key: Lecture bloquante d'une touche
            fd: Descripteur surveille avant chaque lecture; sans lui,
                read_key est appele en boucle
            poll_interval: Attente maximale de select entre deux verifications d'arret
        """
        self._tick_rate = tick_rate
        self._read_key = read_key
        self._fd = fd
        self._poll_interval = poll_interval
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_reading(self) -> bool:
        """Indique si le thread de lecture tourne encore."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Demarre la lecture du clavier. Doit etre appele depuis la boucle asyncio."""
        self._loop = asyncio.get_running_loop()
        self._thread = threading.Thread(target=self._read_keys, name="key-reader", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Arrete la lecture; attend le thread quand il surveille un descripteur."""
        self._stopped.set()
        # Sans descripteur, le thread reste bloque dans read_key jusqu'a la prochaine touche
        if self._fd is not None and self._thread is not None:
            self._thread.join(timeout=self._poll_interval * 10)

    def push(self, event: Event) -> None:
        """Ajoute un evenement depuis la boucle asyncio."""
        self._queue.put_nowait(event)

    async def next(self) -> Event:
        """Retourne la prochaine touche, ou un Tick apres tick_rate secondes."""
        try:
            return await asyncio.wait_for(self._queue.get(), self._tick_rate)
        except asyncio.TimeoutError:
            return Tick()

    def _input_ready(self) -> bool:
        if self._fd is None:
            return True
        ready, _, _ = select.select([self._fd], [], [], self._poll_interval)
        return bool(ready)

    def _read_keys(self) -> None:
        while not self._stopped.is_set():
            if not self._input_ready():
                continue
            try:
                code = self._read_key()
            except KeyboardInterrupt:
                code = CTRL_C
            except EOFError:
                code = CTRL_D
            if self._stopped.is_set():
                break
            self._loop.call_soon_threadsafe(self._queue.put_nowait, parse_input(code))
