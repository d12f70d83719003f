"""Tests for femto.render -- frame and status line output."""

from __future__ import annotations

import re

from femto.editor import EditorSession
from femto.keys import KeyPress
from femto.render import FILLER, render_frame, status_line, visible_line

_MOVE_RE = re.compile(rb"\x1b\[(\d+);(\d+)H")


def screen_rows(frame: bytes) -> dict[int, bytes]:
    """Map 1-based screen row -> bytes first written after positioning there."""
    rows: dict[int, bytes] = {}
    parts = _MOVE_RE.split(frame)
    # split yields: prefix, row, col, text, row, col, text, ...
    for i in range(1, len(parts) - 2, 3):
        text = parts[i + 2].replace(b"\x1b[K", b"")
        rows.setdefault(int(parts[i]), text)
    return rows


class TestStatusLine:
    def test_contains_mode_position_and_path(self) -> None:
        session = EditorSession("notes.txt", [b"abc"], rows=5, columns=40)
        line = status_line(session)
        assert line.startswith(b"[[ navigation ]] 1:1 notes.txt")
        assert len(line) == 40

    def test_reports_one_based_absolute_position(self) -> None:
        session = EditorSession("f", [b"abc", b"defg"], rows=5, columns=40)
        for key in b"sdd":
            session.handle_input(KeyPress(key))
        assert status_line(session).startswith(b"[[ navigation ]] 2:3 ")

    def test_edit_mode_name(self) -> None:
        session = EditorSession("f", rows=5, columns=40)
        session.set_mode("edit")
        assert status_line(session).startswith(b"[[ edit ]]")

    def test_long_path_truncated_with_ellipsis(self) -> None:
        path = "/very/long/directory/name/that/does/not/fit.txt"
        session = EditorSession(path, rows=5, columns=30)
        line = status_line(session)
        assert len(line) == 30
        assert line.endswith(b"...")
        assert line.startswith(b"[[ navigation ]] 1:1 /very")

    def test_narrow_terminal_never_overflows(self) -> None:
        session = EditorSession("file.txt", rows=5, columns=8)
        assert status_line(session) == b"[[ na..."

    def test_ellipsis_kept_when_prefix_alone_overflows(self) -> None:
        session = EditorSession("f.txt", rows=5, columns=20)
        assert status_line(session) == b"[[ navigation ]] ..."

    def test_path_that_fits_exactly_is_not_cut(self) -> None:
        session = EditorSession("abc", rows=5, columns=24)
        assert status_line(session) == b"[[ navigation ]] 1:1 abc"


class TestVisibleLine:
    def test_clips_to_window(self) -> None:
        assert visible_line(b"abcdefgh", 2, 3) == b"cde"

    def test_offset_past_end_is_empty(self) -> None:
        assert visible_line(b"ab", 5, 3) == b""

    def test_control_bytes_shown_as_placeholder(self) -> None:
        assert visible_line(b"a\tb\x1bc", 0, 10) == b"a?b?c"

    def test_high_bytes_untouched(self) -> None:
        assert visible_line(b"\xc3\xa9", 0, 10) == b"\xc3\xa9"


class TestRenderFrame:
    def test_lines_filler_and_status(self) -> None:
        session = EditorSession("f.txt", [b"one", b"two"], rows=5, columns=40)
        rows = screen_rows(render_frame(session))
        assert rows[1] == b"one"
        assert rows[2] == b"two"
        assert rows[3] == FILLER
        assert rows[4] == FILLER
        assert b"\x1b[7m[[ navigation ]] 1:1 f.txt" in rows[5]

    def test_cursor_placed_last(self) -> None:
        session = EditorSession("f", [b"abc", b"def"], rows=5, columns=20)
        session.cursor.row, session.cursor.col = 1, 2
        frame = render_frame(session)
        moves = _MOVE_RE.findall(frame)
        assert moves[-1] == (b"2", b"3")
        assert frame.endswith(b"\x1b[?25h")

    def test_scrolled_viewport(self) -> None:
        session = EditorSession(
            "f", [b"line%d-abcdef" % i for i in range(10)], rows=4, columns=5
        )
        session.viewport.row_offset = 4
        session.viewport.col_offset = 2
        rows = screen_rows(render_frame(session))
        assert rows[1] == b"ne4-a"
        assert rows[2] == b"ne5-a"
        assert rows[3] == b"ne6-a"

    def test_each_row_cleared_before_its_text(self) -> None:
        session = EditorSession("f", [b"one"], rows=3, columns=20)
        frame = render_frame(session)
        assert b"\x1b[1;1H\x1b[Kone" in frame
        assert b"\x1b[2;1H\x1b[K+" in frame

    def test_single_row_terminal_has_no_status_line(self) -> None:
        session = EditorSession("f", [b"a"], rows=1, columns=20)
        frame = render_frame(session)
        assert b"[[ " not in frame
        assert set(screen_rows(frame)) == {1}
        assert screen_rows(frame)[1] == b"a"
