"""Cursor and viewport coordinate model.

The cursor is relative to the top-left of the text area; the viewport holds
how far the document is scrolled. Their sum is the absolute position.
"""

from __future__ import annotations

from dataclasses import dataclass

from femto.lines import Position


@dataclass
class Cursor:
    """On-screen cursor position inside the text area."""

    row: int = 0
    col: int = 0

    def move(self, delta_row: int, delta_col: int) -> None:
        # Out-of-range results are left for the scroll reconciler.
        self.row += delta_row
        self.col += delta_col


@dataclass
class Viewport:
    """Number of lines and columns scrolled past the top-left corner."""

    row_offset: int = 0
    col_offset: int = 0

    def scroll(self, delta_row: int, delta_col: int) -> None:
        self.row_offset += delta_row
        self.col_offset += delta_col


def absolute_position(cursor: Cursor, viewport: Viewport) -> Position:
    return Position(
        line=cursor.row + viewport.row_offset,
        column=cursor.col + viewport.col_offset,
    )
