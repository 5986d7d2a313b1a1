"""
Tests pour DataManager - worker de listing en arriere-plan.

Couvre:
- Demarrage du worker et echec de connexion (InitError)
- Reponse vide distincte de l'absence de reponse (worker perdu)
- Traitement FIFO, une requete a la fois
- Fermeture du canal de requetes
"""

import threading
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from showtrakt.core.entities.media import Show
from showtrakt.core.errors import InitError
from showtrakt.core.ports.repositories import IShowRepository
from showtrakt.infrastructure.persistence.repositories import SQLModelShowRepository
from showtrakt.services.data_manager import DataManager


def _store_with(shows: list[Show]) -> MagicMock:
    store = MagicMock(spec=IShowRepository)
    store.list_all.return_value = shows
    return store


class TestDataManagerInit:
    """Tests du demarrage du worker."""

    def test_init_starts_one_worker(self) -> None:
        manager = DataManager.init(lambda: _store_with([]))
        try:
            assert manager.is_alive
        finally:
            manager.close()

    def test_store_factory_runs_in_worker_thread(self) -> None:
        threads: list[threading.Thread] = []

        def factory() -> MagicMock:
            threads.append(threading.current_thread())
            return _store_with([])

        manager = DataManager.init(factory)
        try:
            assert threads[0] is not threading.main_thread()
            assert threads[0].name == "data-manager"
        finally:
            manager.close()

    def test_init_fails_when_store_cannot_connect(self) -> None:
        def failing_factory() -> IShowRepository:
            raise OSError("unable to open database file")

        with pytest.raises(InitError, match="unable to open database file"):
            DataManager.init(failing_factory)


class TestDataManagerQuery:
    """Tests du protocole requete/reponse."""

    def test_empty_store_returns_empty_list_not_none(self) -> None:
        manager = DataManager.init(lambda: _store_with([]))
        try:
            assert manager.query("spurious") == []
        finally:
            manager.close()

    def test_query_returns_all_shows_regardless_of_text(self, sample_shows) -> None:
        manager = DataManager.init(lambda: _store_with(sample_shows))
        try:
            assert manager.query("spurious") == sample_shows
            assert manager.query("anything else") == sample_shows
        finally:
            manager.close()

    def test_each_query_hits_the_store_once(self) -> None:
        store = _store_with([])
        manager = DataManager.init(lambda: store)
        try:
            for _ in range(3):
                manager.query("spurious")
        finally:
            manager.close()
        assert store.list_all.call_count == 3

    def test_responses_follow_request_order(self) -> None:
        batches = [[Show(imdb_id=f"tt{i:07d}")] for i in range(5)]
        store = MagicMock(spec=IShowRepository)
        store.list_all.side_effect = batches
        manager = DataManager.init(lambda: store)
        try:
            results = [manager.query(str(i)) for i in range(5)]
        finally:
            manager.close()
        assert results == batches

    def test_query_returns_none_when_worker_dies(self) -> None:
        store = MagicMock(spec=IShowRepository)
        store.list_all.side_effect = RuntimeError("disk I/O error")
        manager = DataManager.init(lambda: store)

        assert manager.query("spurious") is None
        # Le worker est mort : les requetes suivantes echouent aussi
        assert manager.query("spurious") is None
        manager.close()

    def test_query_does_not_block_while_dead_worker_closes_store(self) -> None:
        closing = threading.Event()
        release = threading.Event()

        def slow_close() -> None:
            closing.set()
            release.wait(timeout=5)

        store = MagicMock(spec=IShowRepository)
        store.list_all.side_effect = RuntimeError("disk I/O error")
        store.close.side_effect = slow_close
        manager = DataManager.init(lambda: store)

        assert manager.query("spurious") is None
        assert closing.wait(timeout=5)
        # Le thread est encore vivant, bloque dans store.close()
        assert manager.is_alive

        results: list = []
        caller = threading.Thread(
            target=lambda: results.append(manager.query("spurious")), daemon=True
        )
        caller.start()
        caller.join(timeout=2)
        try:
            assert not caller.is_alive()
            assert results == [None]
        finally:
            release.set()
            manager.close()

    def test_query_after_close_returns_none(self) -> None:
        manager = DataManager.init(lambda: _store_with([]))
        manager.close()
        assert not manager.is_alive
        assert manager.query("spurious") is None

    def test_close_releases_worker_store(self) -> None:
        store = _store_with([])
        manager = DataManager.init(lambda: store)
        manager.close()
        store.close.assert_called_once()

    def test_close_is_idempotent(self) -> None:
        manager = DataManager.init(lambda: _store_with([]))
        manager.close()
        manager.close()


class TestDataManagerWithDatabase:
    """Le worker lit une vraie base SQLite depuis son propre thread."""

    def test_worker_sees_rows_written_by_interactive_session(self, engine: Engine) -> None:
        manager = DataManager.init(lambda: SQLModelShowRepository(Session(engine)))
        try:
            assert manager.query("spurious") == []

            with Session(engine) as session:
                SQLModelShowRepository(session).add_shows(
                    [Show(imdb_id="tt0903747", title="Breaking Bad", year=2008)]
                )

            shows = manager.query("spurious")
        finally:
            manager.close()

        assert [s.imdb_id for s in shows] == ["tt0903747"]

    def test_worker_sees_status_updates(self, engine: Engine) -> None:
        with Session(engine) as session:
            SQLModelShowRepository(session).add_shows([Show(imdb_id="tt0903747", title="Breaking Bad")])

        manager = DataManager.init(lambda: SQLModelShowRepository(Session(engine)))
        try:
            first = manager.query("spurious")
            updated = first[0]
            updated.user_status = updated.user_status.next()
            with Session(engine) as session:
                SQLModelShowRepository(session).upsert_show(updated)

            second = manager.query("spurious")
        finally:
            manager.close()

        assert second[0].user_status == updated.user_status
