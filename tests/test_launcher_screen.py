"""Pilot-based tests for the launcher overlay."""

from __future__ import annotations

import pytest

from quickrun.launcher.controller import KeyKind
from quickrun.launcher.dispatch import LaunchRequest
from quickrun.launcher.models import Catalog
from quickrun.ui.launcher_screen import LauncherApp, LauncherScreen, key_event_from_textual


@pytest.fixture
def catalog():
    return Catalog.from_mapping(
        {f"cmd{i:02d}": f"echo {i}" for i in range(30)} | {"list": "ls -la"}
    )


class TestKeyTranslation:
    @pytest.mark.parametrize(
        "key,kind",
        [
            ("escape", KeyKind.CANCEL),
            ("ctrl+c", KeyKind.CANCEL),
            ("enter", KeyKind.ENTER),
            ("backspace", KeyKind.BACKSPACE),
            ("up", KeyKind.UP),
            ("down", KeyKind.DOWN),
        ],
    )
    def test_named_keys(self, key, kind):
        assert key_event_from_textual(key, None).kind is kind

    def test_printable_character(self):
        event = key_event_from_textual("a", "a")
        assert event.kind is KeyKind.CHAR
        assert event.char == "a"

    def test_space(self):
        assert key_event_from_textual("space", " ").char == " "

    def test_unprintable_keys_are_other(self):
        assert key_event_from_textual("f1", None).kind is KeyKind.OTHER
        assert key_event_from_textual("ctrl+a", "\x01").kind is KeyKind.OTHER


class TestLauncherApp:
    @pytest.mark.asyncio
    async def test_mounts_overlay(self, catalog):
        app = LauncherApp(catalog)
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            assert isinstance(app.screen, LauncherScreen)
            viewport = app.screen.last_viewport
            assert viewport is not None
            assert 0 < len(viewport.rows) <= 22
            assert viewport.rows[0].is_selected

    @pytest.mark.asyncio
    async def test_typing_filters(self, catalog):
        app = LauncherApp(catalog)
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.press("l", "s")
            await pilot.pause()
            assert app.controller.engine.search_filter == "ls"
            viewport = app.screen.last_viewport
            assert [row.command.title for row in viewport.rows] == ["list"]
            assert viewport.status == "Filter: ls"

    @pytest.mark.asyncio
    async def test_navigation_wraps(self, catalog):
        app = LauncherApp(catalog)
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.press("up")
            await pilot.pause()
            assert app.controller.engine.selected == len(catalog) - 1
            assert app.controller.engine.selected in app.screen.last_viewport.visible_indices

    @pytest.mark.asyncio
    async def test_enter_exits_with_request(self, catalog):
        app = LauncherApp(catalog)
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.press("l", "i", "s", "t", "enter")
        assert app.return_value == LaunchRequest(path="ls", args=("-la",))

    @pytest.mark.asyncio
    async def test_escape_exits_without_request(self, catalog):
        app = LauncherApp(catalog)
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.press("l", "escape")
        assert app.return_value is None
        assert app.deferred.request is None

    @pytest.mark.asyncio
    async def test_enter_without_match_exits_without_request(self, catalog):
        app = LauncherApp(catalog)
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.press("z", "z", "z", "down", "enter")
        assert app.return_value is None

    @pytest.mark.asyncio
    async def test_centered_mode_shows_all_rows(self, catalog):
        app = LauncherApp(catalog, render_mode="centered")
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            assert len(app.screen.last_viewport.rows) == len(catalog)
