"""
Tests pour les raccourcis clavier.

L'App est mockee : on verifie seulement quelle methode chaque touche appelle
selon le mode courant.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from showtrakt.interface.app import App, AppMode
from showtrakt.interface.events import CTRL_C, CTRL_D, Mouse
from showtrakt.interface.handler import (
    BACKSPACE,
    CTRL_U,
    DOWN,
    ENTER,
    ESC,
    TAB,
    UP,
    handle_key_events,
    handle_mouse_events,
)


@pytest.fixture
def app() -> MagicMock:
    app = MagicMock(spec=App)
    app.mode = AppMode.MAIN_VIEW
    app.input = ""
    app.enter_show_details = AsyncMock()
    return app


class TestMainView:
    """Touches de la vue principale."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["q", ESC, CTRL_C])
    async def test_quit_keys(self, app, key) -> None:
        await handle_key_events(key, app)
        app.quit.assert_called_once()

    @pytest.mark.asyncio
    async def test_arrows_move_by_one(self, app) -> None:
        await handle_key_events(DOWN, app)
        await handle_key_events(UP, app)
        app.next.assert_called_once_with(1)
        app.prev.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_paging_uses_page_step(self, app) -> None:
        await handle_key_events(CTRL_D, app, page_step=15)
        await handle_key_events(CTRL_U, app, page_step=15)
        app.next.assert_called_once_with(15)
        app.prev.assert_called_once_with(15)

    @pytest.mark.asyncio
    async def test_jump_keys(self, app) -> None:
        await handle_key_events("g", app)
        await handle_key_events("G", app)
        app.select_first.assert_called_once()
        app.select_last.assert_called_once()

    @pytest.mark.asyncio
    async def test_space_cycles_show_status(self, app) -> None:
        await handle_key_events(" ", app)
        app.toggle_watch_status.assert_called_once()

    @pytest.mark.asyncio
    async def test_enter_opens_details(self, app) -> None:
        await handle_key_events(ENTER, app)
        app.enter_show_details.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_tab_enters_query_mode(self, app) -> None:
        await handle_key_events(TAB, app)
        app.enter_query_mode.assert_called_once()

    @pytest.mark.asyncio
    async def test_question_mark_toggles_help(self, app) -> None:
        await handle_key_events("?", app)
        app.toggle_help.assert_called_once()

    @pytest.mark.asyncio
    async def test_initializing_only_accepts_quit(self, app) -> None:
        app.mode = AppMode.INITIALIZING
        await handle_key_events(DOWN, app)
        app.next.assert_not_called()
        await handle_key_events("q", app)
        app.quit.assert_called_once()


class TestSeasonView:
    """Touches de la vue des saisons."""

    @pytest.mark.asyncio
    async def test_escape_returns_to_main_view(self, app) -> None:
        app.mode = AppMode.SEASON_VIEW
        await handle_key_events(ESC, app)
        app.leave_show_details.assert_called_once()
        app.quit.assert_not_called()

    @pytest.mark.asyncio
    async def test_navigation_targets_seasons(self, app) -> None:
        app.mode = AppMode.SEASON_VIEW
        await handle_key_events(DOWN, app)
        await handle_key_events(UP, app)
        await handle_key_events(CTRL_D, app, page_step=5)
        app.season_next.assert_any_call(1)
        app.season_next.assert_any_call(5)
        app.season_prev.assert_called_once_with(1)
        app.next.assert_not_called()

    @pytest.mark.asyncio
    async def test_space_cycles_season_status(self, app) -> None:
        app.mode = AppMode.SEASON_VIEW
        await handle_key_events("w", app)
        app.toggle_season_watch_status.assert_called_once()
        app.toggle_watch_status.assert_not_called()


class TestQueryingAndHelp:
    """Saisie de la barre de recherche et fenetre d'aide."""

    @pytest.mark.asyncio
    async def test_typed_characters_go_to_input(self, app) -> None:
        app.mode = AppMode.QUERYING
        for key in "bad":
            await handle_key_events(key, app)
        assert app.input == "bad"
        app.quit.assert_not_called()

    @pytest.mark.asyncio
    async def test_q_is_text_while_querying(self, app) -> None:
        app.mode = AppMode.QUERYING
        await handle_key_events("q", app)
        assert app.input == "q"
        app.quit.assert_not_called()

    @pytest.mark.asyncio
    async def test_backspace_removes_last_character(self, app) -> None:
        app.mode = AppMode.QUERYING
        app.input = "bad"
        await handle_key_events(BACKSPACE, app)
        assert app.input == "ba"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", [ENTER, TAB, ESC])
    async def test_leave_query_mode(self, app, key) -> None:
        app.mode = AppMode.QUERYING
        await handle_key_events(key, app)
        app.leave_query_mode.assert_called_once()

    @pytest.mark.asyncio
    async def test_any_key_closes_help(self, app) -> None:
        app.mode = AppMode.HELP_WINDOW
        await handle_key_events("x", app)
        app.toggle_help.assert_called_once()


class TestMouse:
    """Molette et clics."""

    def test_scroll_moves_show_selection(self, app) -> None:
        handle_mouse_events(Mouse("scroll_down", 10, 8), app)
        handle_mouse_events(Mouse("scroll_up", 10, 8), app)
        app.next.assert_called_once_with(1)
        app.prev.assert_called_once_with(1)

    def test_scroll_leaves_query_mode(self, app) -> None:
        app.mode = AppMode.QUERYING
        handle_mouse_events(Mouse("scroll_down", 10, 8), app)
        app.leave_query_mode.assert_called_once()
        app.next.assert_called_once_with(1)

    def test_click_on_search_bar_enters_query_mode(self, app) -> None:
        handle_mouse_events(Mouse("down", 5, 1), app)
        app.enter_query_mode.assert_called_once()

    def test_click_on_table_does_not_enter_query_mode(self, app) -> None:
        handle_mouse_events(Mouse("down", 5, 10), app)
        app.enter_query_mode.assert_not_called()

    def test_scroll_moves_season_selection(self, app) -> None:
        app.mode = AppMode.SEASON_VIEW
        handle_mouse_events(Mouse("scroll_down", 0, 5), app)
        handle_mouse_events(Mouse("scroll_up", 0, 5), app)
        app.season_next.assert_called_once_with(1)
        app.season_prev.assert_called_once_with(1)
        app.next.assert_not_called()

    def test_mouse_ignored_in_help(self, app) -> None:
        app.mode = AppMode.HELP_WINDOW
        handle_mouse_events(Mouse("scroll_down", 0, 5), app)
        handle_mouse_events(Mouse("down", 0, 0), app)
        app.next.assert_not_called()
        app.enter_query_mode.assert_not_called()
