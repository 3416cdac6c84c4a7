"""
Viewport layout for the launcher table.

Decides which filtered rows fit into the available terminal rows and turns
the result into a Rich renderable. Layout is a pure function of the
filtered list, the selection, the search string and the surface size.

Two modes:
- windowed: at most ``rows - 2`` data rows, using half-window centering on
  the selection, anchored to the top near the start of the list. There is
  no matching anchor at the bottom: near the end of the list the window
  stays centered on the selection and the rows below it are left blank.
- centered: every row is drawn, with blank lines above the table so it
  sits in the vertical middle of the surface.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from quickrun.config.constants import (
    FILTER_PREFIX,
    FILTER_PREFIX_STYLE,
    FILTER_TEXT_STYLE,
    HEADER_COMMAND,
    HEADER_TITLE,
    RENDER_MODE_CENTERED,
    RENDER_MODE_WINDOWED,
    RENDER_MODES,
    RESERVED_ROWS,
    SELECTED_ROW_STYLE,
)

from .models import Command


@dataclass(frozen=True)
class ViewportRow:
    """One data row of the table."""

    index: int  # Position in the filtered list
    command: Command
    is_selected: bool = False


@dataclass(frozen=True)
class Viewport:
    """Everything needed to draw one frame of the overlay."""

    rows: tuple[ViewportRow, ...]
    search_filter: str
    column_width: int
    header: tuple[str, str] = (HEADER_TITLE, HEADER_COMMAND)
    padding_top: int = 0

    @property
    def status(self) -> str:
        return f"{FILTER_PREFIX}{self.search_filter}"

    @property
    def visible_indices(self) -> list[int]:
        return [row.index for row in self.rows]


def visible_window(count: int, selected: Optional[int], rows: int) -> list[int]:
    """
    Indices of the filtered rows that fit in ``rows`` terminal rows.

    With ``half = (rows - 2) // 2``, a row is visible when its distance from
    the selection is below ``half + offset``. ``offset`` is
    ``half - selected`` while the selection is within ``half`` of the top,
    which pulls the window down so it starts at row 0, and 0 otherwise. The
    selected row is always included while at least one data row fits.
    """
    budget = max(rows - RESERVED_ROWS, 0)
    if count == 0 or budget == 0:
        return []

    # Without a selection, show the top of the list
    anchor = selected if selected is not None else 0
    half = budget // 2
    offset = half - anchor if anchor <= half else 0

    return [
        idx
        for idx in range(count)
        if abs(idx - anchor) < half + offset or idx == selected
    ]


@dataclass
class ViewportRenderer:
    """Lays out the filtered list for a surface of ``rows`` x ``cols``."""

    mode: str = RENDER_MODE_WINDOWED

    def __post_init__(self) -> None:
        if self.mode not in RENDER_MODES:
            raise ValueError(f"Unknown render mode '{self.mode}'. Valid values: {list(RENDER_MODES)}")

    def layout(
        self,
        filtered: Sequence[Command],
        selected: Optional[int],
        rows: int,
        cols: int,
        search_filter: str = "",
    ) -> Viewport:
        count = len(filtered)

        if self.mode == RENDER_MODE_CENTERED:
            indices = list(range(count))
            padding_top = max((rows - count - RESERVED_ROWS) // 2, 0)
        else:
            indices = visible_window(count, selected, rows)
            padding_top = 0

        return Viewport(
            rows=tuple(
                ViewportRow(index=idx, command=filtered[idx], is_selected=idx == selected)
                for idx in indices
            ),
            search_filter=search_filter,
            column_width=max(cols // 2, 1),
            padding_top=padding_top,
        )


def render_filter_line(search_filter: str) -> Text:
    """The trailing status line: the filter prefix plus the search string."""
    line = Text()
    line.append(FILTER_PREFIX, style=FILTER_PREFIX_STYLE)
    line.append(search_filter, style=FILTER_TEXT_STYLE)
    return line


def render_viewport(viewport: Viewport) -> RenderableType:
    """Build the Rich table and filter line for a viewport."""
    table = Table(
        box=None,
        expand=True,
        pad_edge=False,
        show_edge=False,
        header_style="bold",
    )
    for heading in viewport.header:
        table.add_column(
            heading,
            ratio=1,
            min_width=1,
            max_width=viewport.column_width,
            no_wrap=True,
            overflow="ellipsis",
        )

    for row in viewport.rows:
        table.add_row(
            row.command.title,
            row.command.command_text,
            style=SELECTED_ROW_STYLE if row.is_selected else None,
        )

    parts: list[RenderableType] = [Text("")] * viewport.padding_top
    parts.extend([table, render_filter_line(viewport.search_filter)])
    return Group(*parts)
