"""Custom exception hierarchy for quickrun.

Exception Hierarchy:
    QuickrunError (base)
    ├── ConfigurationError - command table / environment problems
    ├── CatalogError - invalid catalog entries
    │   └── MalformedCommandError
    └── LaunchError - the chosen command could not be started

Empty selections and out-of-range cursors are not errors: the filter engine
corrects them in place and the overlay simply has nothing to launch.

Usage:
    from quickrun.exceptions import MalformedCommandError

    raise MalformedCommandError(title="broken", command_text="   ")
"""

from typing import Any, Optional


class QuickrunError(Exception):
    """Base exception for all quickrun errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., titles, paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(QuickrunError):
    """The command table or an environment variable is invalid."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class CatalogError(QuickrunError):
    """Base exception for catalog construction."""

    pass


class MalformedCommandError(CatalogError):
    """A command's text does not split into at least one token."""

    def __init__(
        self,
        message: str = "Command text is empty",
        *,
        title: Optional[str] = None,
        command_text: Optional[str] = None,
        **context: Any,
    ) -> None:
        if title is not None:
            context["title"] = title
        if command_text is not None:
            context["command_text"] = command_text
        super().__init__(message, **context)


class LaunchError(QuickrunError):
    """The selected command could not be started."""

    def __init__(
        self,
        message: str = "Failed to launch command",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)
