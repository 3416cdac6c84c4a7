"""
Launch dispatch: turning the selected command into a running process.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from quickrun.exceptions import LaunchError

from .models import Command, split_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchRequest:
    """An executable plus its arguments. ``cwd`` is None to inherit ours."""

    path: str
    args: tuple[str, ...] = ()
    cwd: Optional[Path] = None

    @property
    def argv(self) -> list[str]:
        return [self.path, *self.args]


def build_request(command: Command) -> LaunchRequest:
    tokens = split_command(command.command_text)
    return LaunchRequest(path=tokens[0], args=tuple(tokens[1:]))


class ProcessLauncher(Protocol):
    """Anything that can start a launch request."""

    def launch(self, request: LaunchRequest) -> None: ...


class DeferredLauncher:
    """Records the request so it can be run once the overlay has exited."""

    def __init__(self) -> None:
        self.request: Optional[LaunchRequest] = None

    def launch(self, request: LaunchRequest) -> None:
        logger.debug(f"Deferring launch of {request.argv}")
        self.request = request


class SubprocessLauncher:
    """Runs the request in the foreground and keeps its exit code."""

    def __init__(self) -> None:
        self.returncode: Optional[int] = None

    def launch(self, request: LaunchRequest) -> None:
        logger.info(f"Launching {request.argv}")
        try:
            completed = subprocess.run(request.argv, cwd=request.cwd, check=False)
        except FileNotFoundError as e:
            raise LaunchError("Executable not found", path=request.path) from e
        except PermissionError as e:
            raise LaunchError("Executable is not runnable", path=request.path) from e
        except OSError as e:
            raise LaunchError(f"Could not start command: {e.strerror}", path=request.path) from e

        self.returncode = completed.returncode
        logger.info(f"{request.path} exited with {completed.returncode}")
