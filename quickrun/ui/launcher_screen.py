"""
Launcher overlay - Textual host for the launcher controller.

Translates Textual key events into launcher key events, feeds the screen
size to the viewport layout and draws the result with Rich.
"""

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Static

from quickrun.config.constants import RENDER_MODE_WINDOWED
from quickrun.launcher.controller import KeyEvent, KeyKind, LauncherController
from quickrun.launcher.dispatch import DeferredLauncher, LaunchRequest
from quickrun.launcher.models import Catalog
from quickrun.launcher.viewport import Viewport, ViewportRenderer, render_viewport

logger = logging.getLogger(__name__)

_NAMED_KEYS = {
    "escape": KeyKind.CANCEL,
    "ctrl+c": KeyKind.CANCEL,
    "enter": KeyKind.ENTER,
    "backspace": KeyKind.BACKSPACE,
    "down": KeyKind.DOWN,
    "up": KeyKind.UP,
}


def key_event_from_textual(key: str, character: Optional[str]) -> KeyEvent:
    """Classify a Textual key into the keys the launcher understands."""
    if key in _NAMED_KEYS:
        return KeyEvent(_NAMED_KEYS[key])
    if character is not None and len(character) == 1 and (character.isprintable() or character.isspace()):
        return KeyEvent.of_char(character)
    return KeyEvent(KeyKind.OTHER)


class LauncherScreen(ModalScreen[Optional[LaunchRequest]]):
    """Full-size overlay showing the filtered command table."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False, priority=True),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
    ]

    DEFAULT_CSS = """
    LauncherScreen {
        align: center middle;
    }

    LauncherScreen #launcher-body {
        width: 100%;
        height: 100%;
        padding: 0 1;
        background: $surface;
    }
    """

    def __init__(self, controller: LauncherController, **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self.last_viewport: Optional[Viewport] = None

    def compose(self) -> ComposeResult:
        yield Static(id="launcher-body")

    def on_mount(self) -> None:
        self.controller.visibility = self
        self.controller.show()
        self.redraw()

    def on_resize(self, event: events.Resize) -> None:
        self.redraw()

    def redraw(self) -> None:
        body = self.query_one("#launcher-body", Static)
        size = body.content_size if body.content_size.height else self.size
        self.last_viewport = self.controller.render(size.height, size.width)
        body.update(render_viewport(self.last_viewport))

    def on_key(self, event: events.Key) -> None:
        key_event = key_event_from_textual(event.key, event.character)
        event.stop()
        event.prevent_default()
        if self.controller.handle(key_event):
            self.redraw()

    def action_cancel(self) -> None:
        self.controller.handle(KeyEvent(KeyKind.CANCEL))

    def hide(self) -> None:
        """Dismiss the overlay with whatever the controller launched."""
        self.dismiss(self.controller.last_request)


class LauncherApp(App[Optional[LaunchRequest]]):
    """
    Standalone launcher.

    Exits with the chosen LaunchRequest (or None when cancelled) so the
    caller can run it after the terminal has been restored.
    """

    TITLE = "quickrun"

    def __init__(self, catalog: Catalog, render_mode: str = RENDER_MODE_WINDOWED, **kwargs) -> None:
        super().__init__(**kwargs)
        self.deferred = DeferredLauncher()
        self.controller = LauncherController(
            catalog,
            launcher=self.deferred,
            renderer=ViewportRenderer(render_mode),
        )

    def on_mount(self) -> None:
        self.push_screen(LauncherScreen(self.controller), self._on_dismissed)

    def _on_dismissed(self, request: Optional[LaunchRequest]) -> None:
        logger.debug(f"Launcher dismissed with {request}")
        self.exit(request)
