"""
Test d'integration du parcours complet :
base SQLite -> DataManager -> App -> consultation Trakt mockee -> base SQLite.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from showtrakt.core.entities.media import UserStatusSeason, UserStatusShow
from showtrakt.core.ports.api_clients import IShowDetailsClient, SeasonInfo, ShowDetails
from showtrakt.infrastructure.persistence.repositories import SQLModelShowRepository
from showtrakt.interface.app import App, AppMode
from showtrakt.services.data_manager import DataManager


@pytest.fixture
def seeded_engine(engine: Engine, sample_shows) -> Engine:
    with Session(engine) as session:
        SQLModelShowRepository(session).add_shows(sample_shows)
    return engine


@pytest.fixture
def trakt() -> MagicMock:
    client = MagicMock(spec=IShowDetailsClient)
    client.get_show_details = AsyncMock(
        return_value=(
            ShowDetails(trakt_id=1388, title="Breaking Bad", overview="Walter White...", network="AMC", aired_episodes=62),
            [SeasonInfo(number=1, episode_count=7), SeasonInfo(number=2, episode_count=13)],
        )
    )
    client.close = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_full_tracking_flow(seeded_engine: Engine, trakt: MagicMock) -> None:
    manager = DataManager.init(lambda: SQLModelShowRepository(Session(seeded_engine)))
    session = Session(seeded_engine)
    store = SQLModelShowRepository(session)
    app = App(data_manager=manager, client=trakt, store=store)

    try:
        app.tick()
        assert app.mode == AppMode.MAIN_VIEW
        assert len(app.shows) == 2
        assert app.table_state.selected is None

        app.next(1)
        statuses = []
        for _ in range(3):
            app.toggle_watch_status()
            statuses.append(store.get_by_imdb_id("tt0903747").user_status)
        assert statuses == [UserStatusShow.WATCHED, UserStatusShow.UNWATCHED, UserStatusShow.TODO]

        assert app.shows[0].trakt_id is None
        await app.enter_show_details()

        assert app.mode == AppMode.SEASON_VIEW
        assert app.shows[0].trakt_id == 1388
        assert store.get_by_imdb_id("tt0903747").trakt_id == 1388
        assert [s.number for s in app.show_view.seasons] == [1, 2]
        assert app.show_view.season_table_state.selected == 0

        app.season_next(1)
        app.toggle_season_watch_status()
        assert store.get_seasons("tt0903747")[1].user_status == UserStatusSeason.ON_RELEASE
    finally:
        manager.close()
        session.close()
