"""
Fixtures pytest partagees pour les tests ShowTrakt.

Ce module contient les fixtures communes utilisees dans les tests:
- Base SQLite temporaire et repository
- Mocks des ports (IShowRepository, IShowDetailsClient)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

from showtrakt.config import Settings
from showtrakt.core.entities.media import Show
from showtrakt.core.ports.api_clients import IShowDetailsClient
from showtrakt.core.ports.repositories import IShowRepository
from showtrakt.infrastructure.persistence import models  # noqa: F401
from showtrakt.infrastructure.persistence.repositories import SQLModelShowRepository


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite sur fichier temporaire, tables creees."""
    engine = create_engine(
        f"sqlite:///{tmp_path}/test.db",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel de test."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def repository(session: Session) -> SQLModelShowRepository:
    """Repository branche sur la base temporaire."""
    return SQLModelShowRepository(session)


@pytest.fixture
def sample_shows() -> list[Show]:
    """Deux series telles que chargees depuis la base."""
    return [
        Show(imdb_id="tt0903747", title="Breaking Bad", year=2008),
        Show(imdb_id="tt0386676", title="The Office", year=2005),
    ]


@pytest.fixture
def mock_store() -> MagicMock:
    """
    Mock de IShowRepository pour les tests.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    store = MagicMock(spec=IShowRepository)
    store.list_all.return_value = []
    store.reconcile_seasons.return_value = []
    return store


@pytest.fixture
def mock_client() -> MagicMock:
    """Mock de IShowDetailsClient (methodes async)."""
    client = MagicMock(spec=IShowDetailsClient)
    client.get_show_details = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec chemins temporaires."""
    return Settings(
        database_url=f"sqlite:///{tmp_path}/test.db",
        trakt_client_id="test-client-id",
        imdb_cache_dir=tmp_path / "imdb",
        log_file=tmp_path / "test.log",
    )

