"""
Event handling for the launcher overlay.

The controller owns the filter engine for the whole session and applies one
key event at a time. Hosts (the Textual screen, tests) translate their own
key representation into KeyEvent and redraw when ``handle`` says so.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from .dispatch import LaunchRequest, ProcessLauncher, build_request
from .filter_engine import FilterEngine
from .models import Catalog, Command
from .viewport import Viewport, ViewportRenderer

logger = logging.getLogger(__name__)


class KeyKind(Enum):
    """Key classes the overlay reacts to."""

    CANCEL = "cancel"  # Escape or Ctrl+C
    ENTER = "enter"
    BACKSPACE = "backspace"
    CHAR = "char"
    DOWN = "down"
    UP = "up"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    kind: KeyKind
    char: Optional[str] = None

    @classmethod
    def of_char(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, char)


class Visibility(Protocol):
    """Receives the hide signal when the overlay should go away."""

    def hide(self) -> None: ...


class LauncherController:
    """Applies key events to the launcher state."""

    def __init__(
        self,
        catalog: Catalog,
        launcher: ProcessLauncher,
        visibility: Optional[Visibility] = None,
        renderer: Optional[ViewportRenderer] = None,
    ):
        self.engine = FilterEngine(catalog)
        self.launcher = launcher
        self.visibility = visibility
        self.renderer = renderer or ViewportRenderer()
        self.visible = True
        self.last_request: Optional[LaunchRequest] = None

    def handle(self, event: KeyEvent) -> bool:
        """
        Apply one key event.

        Returns:
            True if the overlay needs to be redrawn
        """
        kind = event.kind

        if kind is KeyKind.CANCEL:
            self.cancel()
            return False
        if kind is KeyKind.ENTER:
            self.launch_selected()
            return False
        if kind is KeyKind.BACKSPACE:
            return self.engine.backspace()
        if kind is KeyKind.CHAR:
            return event.char is not None and self.engine.append_char(event.char)
        if kind is KeyKind.DOWN:
            return self.engine.move_down()
        if kind is KeyKind.UP:
            return self.engine.move_up()

        return False

    def launch_selected(self) -> Optional[LaunchRequest]:
        """Hand the selected command to the launcher, then hide.

        With nothing selected the overlay hides without launching.
        """
        command: Optional[Command] = self.engine.current_selection()
        request = None
        self.last_request = None
        if command is not None:
            request = build_request(command)
            logger.info(f"Launching '{command.title}': {request.argv}")
            self.last_request = request
            self.launcher.launch(request)
        else:
            logger.debug("Enter with no selection")

        self._hide()
        return request

    def cancel(self) -> None:
        logger.debug("Launcher cancelled")
        self.last_request = None
        self._hide()

    def show(self) -> None:
        self.visible = True

    def _hide(self) -> None:
        self.visible = False
        self.engine.reset()
        if self.visibility is not None:
            self.visibility.hide()

    def render(self, rows: int, cols: int) -> Viewport:
        return self.renderer.layout(
            self.engine.filtered,
            self.engine.selected,
            rows,
            cols,
            self.engine.search_filter,
        )
