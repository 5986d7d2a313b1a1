"""
Tests pour la configuration de l'engine SQLite.
"""

from pathlib import Path

import pytest
from sqlalchemy import inspect

from showtrakt.infrastructure.persistence.database import (
    create_session,
    dispose_engine,
    get_engine,
    init_db,
)


@pytest.fixture(autouse=True)
def fresh_engine():
    dispose_engine()
    yield
    dispose_engine()


class TestEngine:
    """Tests de l'engine global."""

    def test_engine_is_shared(self, tmp_path: Path) -> None:
        engine = get_engine(f"sqlite:///{tmp_path}/app.db")
        assert get_engine() is engine

    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        get_engine(f"sqlite:///{tmp_path}/nested/dir/app.db")
        assert (tmp_path / "nested" / "dir").is_dir()

    def test_dispose_forgets_engine(self, tmp_path: Path) -> None:
        first = get_engine(f"sqlite:///{tmp_path}/first.db")
        dispose_engine()
        second = get_engine(f"sqlite:///{tmp_path}/second.db")
        assert second is not first
        assert str(second.url).endswith("second.db")

    def test_dispose_without_engine_is_noop(self) -> None:
        dispose_engine()

    def test_init_db_creates_tables(self, tmp_path: Path) -> None:
        init_db(f"sqlite:///{tmp_path}/app.db")
        tables = inspect(get_engine()).get_table_names()
        assert {"shows", "seasons"} <= set(tables)

    def test_create_session_uses_global_engine(self, tmp_path: Path) -> None:
        engine = get_engine(f"sqlite:///{tmp_path}/app.db")
        with create_session() as session:
            assert session.get_bind() is engine
