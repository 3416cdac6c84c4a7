"""
Data model for the launcher: commands and the catalog they live in.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

from quickrun.exceptions import MalformedCommandError

logger = logging.getLogger(__name__)


def split_command(command_text: str) -> list[str]:
    """
    Split command text on whitespace into executable and arguments.

    No quoting or escaping is understood.

    Raises:
        MalformedCommandError: If the text has no tokens
    """
    tokens = command_text.split()
    if not tokens:
        raise MalformedCommandError(command_text=command_text)
    return tokens


@dataclass(frozen=True)
class Command:
    """A named shell command."""

    title: str
    command_text: str

    def __str__(self) -> str:
        return f"{self.title} | {self.command_text}"

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on title or command text.

        ``needle`` must already be lower-cased.
        """
        return needle in self.title.lower() or needle in self.command_text.lower()


class Catalog(Sequence[Command]):
    """Immutable, title-ordered list of commands available to the launcher."""

    def __init__(self, commands: Sequence[Command] = ()):
        self._commands: tuple[Command, ...] = tuple(commands)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], strict: bool = False) -> "Catalog":
        """
        Build a catalog from a title -> command text mapping.

        Entries are ordered by title. Entries whose command text has no
        tokens cannot be launched: they are skipped with a warning, or
        rejected when ``strict`` is set.

        Raises:
            MalformedCommandError: In strict mode, for an empty command text
        """
        commands = []
        for title in sorted(mapping):
            command = Command(title=title, command_text=mapping[title])
            try:
                split_command(command.command_text)
            except MalformedCommandError as e:
                if strict:
                    raise MalformedCommandError(title=title, command_text=command.command_text) from e
                logger.warning(f"Skipping command '{title}': command text is empty")
                continue
            commands.append(command)

        logger.debug(f"Catalog built with {len(commands)} commands")
        return cls(commands)

    def __getitem__(self, index):
        return self._commands[index]

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __repr__(self) -> str:
        return f"Catalog({len(self._commands)} commands)"
