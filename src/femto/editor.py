"""Editor session: buffer, cursor, viewport and the two-mode input machine.

Navigation mode moves the cursor and runs whole-document commands; edit
mode inserts bytes, splits lines on Enter and deletes or joins on
Backspace. Every handled event ends with a scroll reconciliation so the
cursor is always on an existing line and column and inside the window.
"""

from __future__ import annotations

import logging
from typing import Iterable, Literal

from femto.errors import FileSaveError
from femto.fileio import save_lines
from femto.keys import InputEvent, Key, KeyPress, Unrecognized
from femto.lines import LineStore, Position
from femto.scroll import reconcile
from femto.viewport import Cursor, Viewport, absolute_position

logger = logging.getLogger(__name__)

Mode = Literal["navigation", "edit"]

# Navigation bindings that only move the cursor: byte -> (delta_row, delta_col)
_MOVES: dict[int, tuple[int, int]] = {
    Key.up: (-1, 0),
    Key.down: (1, 0),
    Key.left: (0, -1),
    Key.right: (0, 1),
}


class EditorSession:
    """The single owner of all mutable editor state.

    *rows* and *columns* are the terminal size; the last row is taken by
    the status line.
    """

    def __init__(
        self,
        path: str,
        lines: Iterable[bytes] = (),
        *,
        rows: int = 24,
        columns: int = 80,
    ) -> None:
        self.path = path
        self.store = LineStore(lines)
        if self.store.count == 0:
            self.store.append_line(b"")
        self.cursor = Cursor()
        self.viewport = Viewport()
        self.mode: Mode = "navigation"
        self.running = True
        self.rows = rows
        self.columns = columns
        self.reconcile()

    # -- geometry ------------------------------------------------------------

    @property
    def visible_rows(self) -> int:
        return max(1, self.rows - 1)

    @property
    def visible_cols(self) -> int:
        return max(1, self.columns)

    @property
    def has_status_line(self) -> bool:
        """A single-row terminal has no room below the text area."""
        return self.rows >= 2

    def resize(self, rows: int, columns: int) -> None:
        if (rows, columns) == (self.rows, self.columns):
            return
        self.rows = rows
        self.columns = columns
        self.reconcile()

    def position(self) -> Position:
        """Absolute position of the cursor in the buffer."""
        return absolute_position(self.cursor, self.viewport)

    def reconcile(self) -> None:
        reconcile(
            self.cursor,
            self.viewport,
            self.store,
            self.visible_rows,
            self.visible_cols,
        )

    # -- input dispatch ------------------------------------------------------

    def handle_input(self, event: InputEvent) -> None:
        """Handle one decoded input event according to the current mode."""
        if isinstance(event, Unrecognized):
            logger.debug("ignoring unrecognized sequence %r", event.raw)
            return

        if self.mode == "navigation":
            self._handle_navigation(event)
        else:
            self._handle_edit(event)
        self.reconcile()

    def set_mode(self, mode: Mode) -> None:
        if mode != self.mode:
            logger.debug("mode %s -> %s", self.mode, mode)
            self.mode = mode

    def quit(self) -> None:
        self.running = False

    def save(self) -> bool:
        """Write the buffer to its file. Failures are logged, not raised."""
        try:
            save_lines(self.store.lines(), self.path)
        except FileSaveError:
            logger.exception("save failed")
            return False
        return True

    # -- navigation mode -----------------------------------------------------

    def _handle_navigation(self, key: KeyPress) -> None:
        if key.byte in _MOVES:
            self.cursor.move(*_MOVES[key.byte])
        elif key.byte == Key.edit:
            self.set_mode("edit")
        elif key.byte == Key.save:
            self.save()
        elif key.byte == Key.quit:
            self.quit()

    # -- edit mode -----------------------------------------------------------

    def _handle_edit(self, key: KeyPress) -> None:
        if key.is_escape:
            self.set_mode("navigation")
        elif key.is_enter:
            self.insert_newline()
        elif key.is_backspace:
            self.delete_backward()
        elif key.is_printable:
            self.insert_byte(key.byte)

    def _edit_position(self) -> Position:
        # The viewport may sit past the last line; never edit a missing one.
        self.store.ensure_line(self.position().line)
        self.reconcile()
        return self.position()

    def insert_byte(self, value: int) -> None:
        pos = self._edit_position()
        self.store.insert_byte(pos, value)
        self.cursor.col += 1
        self.reconcile()

    def insert_newline(self) -> None:
        pos = self._edit_position()
        self.store.split_line(pos)
        self.cursor.row += 1
        self.cursor.col = -self.viewport.col_offset
        self.reconcile()

    def delete_backward(self) -> None:
        pos = self._edit_position()
        if pos.column > 0:
            self.store.remove_byte(pos)
            self.cursor.col -= 1
        elif pos.line > 0:
            previous_size = self.store.line_size(pos.line - 1)
            self.store.join_line(pos.line)
            self.cursor.row -= 1
            self.cursor.col = previous_size - self.viewport.col_offset
        self.reconcile()
