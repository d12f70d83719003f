"""Frame rendering.

Builds the complete output for one screen refresh as bytes: the visible
slice of every line, ``+`` filler rows past the end of the document, a
reverse-video status line when the terminal has room for one, and the
final hardware cursor position.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from femto.editor import EditorSession

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = b"\x1b[?25l"
_SHOW_CURSOR = b"\x1b[?25h"
_CLEAR_TO_EOL = b"\x1b[K"
_REVERSE_ON = b"\x1b[7m"
_REVERSE_OFF = b"\x1b[27m"
_MOVE_FMT = "\x1b[{};{}H"

FILLER = b"+"
ELLIPSIS = b"..."

# Control bytes would move the terminal cursor; show them as one cell each.
_CONTROL_TABLE = bytes(
    ord("?") if b < 0x20 or b == 0x7F else b for b in range(256)
)


def _move(row: int, col: int) -> bytes:
    """1-based cursor positioning sequence."""
    return _MOVE_FMT.format(row, col).encode("ascii")


def status_line(session: EditorSession) -> bytes:
    """Mode, 1-based absolute position and file path, exactly one row wide."""
    width = session.visible_cols
    pos = session.position()
    prefix = f"[[ {session.mode} ]] {pos.line + 1}:{pos.column + 1} ".encode("ascii")
    path = os.fsencode(session.path)

    text = prefix + path
    if len(text) > width:
        text = text[: max(0, width - len(ELLIPSIS))] + ELLIPSIS

    return text[:width].ljust(width)


def visible_line(line: bytes, col_offset: int, columns: int) -> bytes:
    return line[col_offset : col_offset + columns].translate(_CONTROL_TABLE)


def render_frame(session: EditorSession) -> bytes:
    rows = session.visible_rows
    cols = session.visible_cols
    store = session.store
    viewport = session.viewport

    out = [_HIDE_CURSOR]
    for screen_row in range(rows):
        out.append(_move(screen_row + 1, 1))
        out.append(_CLEAR_TO_EOL)
        index = viewport.row_offset + screen_row
        if index < store.count:
            out.append(visible_line(store[index], viewport.col_offset, cols))
        else:
            out.append(FILLER)

    if session.has_status_line:
        out.append(_move(rows + 1, 1))
        out.append(_REVERSE_ON)
        out.append(status_line(session))
        out.append(_REVERSE_OFF)

    out.append(_move(session.cursor.row + 1, session.cursor.col + 1))
    out.append(_SHOW_CURSOR)
    return b"".join(out)
