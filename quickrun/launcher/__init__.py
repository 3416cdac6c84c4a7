"""
Launcher core: catalog, filter engine, viewport layout and launch dispatch.
"""

from .controller import KeyEvent, KeyKind, LauncherController
from .dispatch import DeferredLauncher, LaunchRequest, SubprocessLauncher, build_request
from .filter_engine import FilterEngine
from .models import Catalog, Command
from .viewport import Viewport, ViewportRenderer, render_viewport

__all__ = [
    "Catalog",
    "Command",
    "DeferredLauncher",
    "FilterEngine",
    "KeyEvent",
    "KeyKind",
    "LaunchRequest",
    "LauncherController",
    "SubprocessLauncher",
    "Viewport",
    "ViewportRenderer",
    "build_request",
    "render_viewport",
]
