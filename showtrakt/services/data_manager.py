"""
Gestionnaire de donnees en arriere-plan.

Un unique worker (thread) possede sa propre connexion a la base locale et
repond aux requetes de la boucle interactive via deux canaux :

    boucle interactive --(texte)--> requetes --> worker
    boucle interactive <--(series)-- reponses <-- worker

Une seule requete est traitee a la fois, dans l'ordre d'envoi. Il n'y a
pas de timeout : un worker bloque bloque l'appelant.
"""

import queue
import threading
from collections.abc import Callable
from typing import Optional

from loguru import logger

from showtrakt.core.entities.media import Show
from showtrakt.core.errors import InitError
from showtrakt.core.ports.repositories import IShowRepository

# Marqueur de fermeture du canal de requetes
_CLOSE = object()
# Marqueur poste par le worker quand il s'arrete sans repondre
_WORKER_LOST = object()


class DataManager:
    """
    Handle vers le worker de listing.

    Usage:
        manager = DataManager.init(store_factory)
        shows = manager.query("spurious")  # None si le worker a disparu
        manager.close()
    """

    def __init__(self, store_factory: Callable[[], IShowRepository]) -> None:
        """
        Prepare les canaux sans demarrer le worker (voir init()).

        Args:
            store_factory: Construit le store du worker, appele dans son thread
        """
        self._store_factory = store_factory
        self._requests: queue.Queue = queue.Queue()
        self._responses: queue.Queue = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._closed = False
        self._lost = False

    @classmethod
    def init(cls, store_factory: Callable[[], IShowRepository]) -> "DataManager":
        """
        Demarre le worker et attend que sa connexion a la base soit etablie.

        Raises:
            InitError: Si le thread ou le store du worker ne peut pas etre cree
        """
        manager = cls(store_factory)
        ready: queue.Queue = queue.Queue(maxsize=1)

        manager._thread = threading.Thread(
            target=manager._run,
            args=(ready,),
            name="data-manager",
            daemon=True,
        )
        try:
            manager._thread.start()
        except RuntimeError as e:
            raise InitError(f"Impossible de demarrer le worker du DataManager: {e}") from e

        error = ready.get()
        if error is not None:
            manager._thread.join()
            logger.error(f"Initialisation du DataManager echouee: {error!r}")
            raise InitError(f"Connexion du DataManager a la base impossible: {error}") from error

        logger.debug("DataManager demarre")
        return manager

    @property
    def is_alive(self) -> bool:
        """Indique si le worker tourne encore."""
        return self._thread is not None and self._thread.is_alive()

    def query(self, text: str) -> Optional[list[Show]]:
        """
        Envoie une requete au worker et attend sa reponse.

        Le texte n'est pas encore utilise pour filtrer : toutes les series
        sont retournees.

        Returns:
            Liste des series (vide si la base est vide), ou None si le
            worker s'est arrete au lieu de repondre
        """
        if self._closed or self._lost or not self.is_alive:
            return None

        self._requests.put(text)
        response = self._responses.get()
        if response is _WORKER_LOST:
            return None
        return response

    def close(self) -> None:
        """Ferme le canal de requetes et attend la fin du worker."""
        if self._closed:
            return
        self._closed = True
        self._requests.put(_CLOSE)
        if self._thread is not None:
            self._thread.join()
        logger.debug("DataManager arrete")

    def _run(self, ready: queue.Queue) -> None:
        """Boucle du worker : un texte recu, un listing renvoye."""
        try:
            store = self._store_factory()
        except Exception as e:
            ready.put(e)
            return
        ready.put(None)

        try:
            while True:
                text = self._requests.get()
                if text is _CLOSE:
                    break
                logger.debug(f"DataManager: requete {text!r}")
                self._responses.put(store.list_all())
        except Exception:
            logger.exception("Le worker du DataManager s'est arrete sur une erreur")
            # Avant le marqueur : le thread reste vivant pendant store.close()
            self._lost = True
            self._responses.put(_WORKER_LOST)
        finally:
            store.close()
