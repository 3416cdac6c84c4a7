"""
Filter engine for the launcher.

Holds the search string and the selection cursor, and keeps the filtered
list in sync with the search string. The cursor always indexes the filtered
list. ``None`` means there is nothing to select.
"""

import logging
from typing import Optional

from .models import Catalog, Command

logger = logging.getLogger(__name__)


def is_allowed_char(char: str) -> bool:
    """True for the characters that may be typed into the filter."""
    return len(char) == 1 and (
        (char.isascii() and char.isalnum()) or char.isspace()
    )


class FilterEngine:
    """Substring filter with a wraparound selection cursor."""

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self._search_filter = ""
        self._filtered: list[Command] = list(catalog)
        self._selected: Optional[int] = 0 if self._filtered else None

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def search_filter(self) -> str:
        return self._search_filter

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    @property
    def filtered(self) -> list[Command]:
        """The commands matching the current search string, in catalog order."""
        return list(self._filtered)

    # ------------------------------------------------------------------
    # Search string
    # ------------------------------------------------------------------

    def set_filter(self, text: str) -> None:
        """Replace the search string and re-derive the filtered list."""
        self._search_filter = text
        needle = text.lower()
        self._filtered = [c for c in self._catalog if c.matches(needle)]
        self._clamp_selection()
        logger.debug(
            f"Filter {text!r}: {len(self._filtered)}/{len(self._catalog)} match, "
            f"selected={self._selected}"
        )

    def append_char(self, char: str) -> bool:
        """Append a character to the search string.

        Returns:
            False if the character is not allowed in the filter
        """
        if not is_allowed_char(char):
            return False
        self.set_filter(self._search_filter + char)
        return True

    def backspace(self) -> bool:
        """Drop the last character of the search string.

        Returns:
            False if the search string was already empty
        """
        if not self._search_filter:
            return False
        self.set_filter(self._search_filter[:-1])
        return True

    def reset(self) -> None:
        """Clear the search string and put the cursor back on the first entry."""
        self._selected = 0
        self.set_filter("")

    def _clamp_selection(self) -> None:
        count = len(self._filtered)
        if count == 0:
            self._selected = None
        elif self._selected is None:
            self._selected = 0
        elif self._selected >= count:
            self._selected = count - 1

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def move_down(self) -> bool:
        """Advance the cursor, wrapping from the last entry to the first.

        Returns:
            False when there is nothing to select
        """
        if self._selected is None:
            return False
        self._selected = (self._selected + 1) % len(self._filtered)
        return True

    def move_up(self) -> bool:
        """Move the cursor back, wrapping from the first entry to the last."""
        if self._selected is None:
            return False
        if self._selected == 0:
            self._selected = len(self._filtered) - 1
        else:
            self._selected -= 1
        return True

    def current_selection(self) -> Optional[Command]:
        if self._selected is None:
            return None
        return self._filtered[self._selected]
