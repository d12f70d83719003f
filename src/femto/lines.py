"""Line store: an ordered, mutable sequence of byte lines.

Each line is an independently growable ``bytearray`` holding the line's
bytes without the trailing newline. Contents are never decoded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Position:
    """An absolute (line index, byte column) location inside the store."""

    line: int
    column: int


def _check_content(content: bytes) -> None:
    if b"\n" in content:
        raise ValueError("line content must not contain a newline byte")


class LineStore:
    """Ordered sequence of lines, mutated by the editing operations.

    The store itself allows zero lines; the editor session guarantees it is
    never empty while running.
    """

    def __init__(self, lines: Iterable[bytes] = ()) -> None:
        self._lines: list[bytearray] = []
        for line in lines:
            self.append_line(line)

    # -- accessors -----------------------------------------------------------

    @property
    def count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> bytes:
        return bytes(self._lines[index])

    def __iter__(self) -> Iterator[bytes]:
        return self.lines()

    def lines(self) -> Iterator[bytes]:
        """Iterate over read-only copies of every line, in document order."""
        for line in self._lines:
            yield bytes(line)

    def line_size(self, index: int) -> int:
        return len(self._lines[index])

    def to_list(self) -> list[bytes]:
        return [bytes(line) for line in self._lines]

    # -- line-level operations -----------------------------------------------

    def insert_line(self, index: int, content: bytes = b"") -> None:
        """Insert *content* as a new line at *index*, shifting later lines down."""
        if not 0 <= index <= len(self._lines):
            raise IndexError(f"line index {index} out of range for insert")
        _check_content(content)
        self._lines.insert(index, bytearray(content))

    def append_line(self, content: bytes = b"") -> None:
        self.insert_line(len(self._lines), content)

    def remove_line(self, index: int) -> None:
        self._check_index(index)
        del self._lines[index]

    def ensure_line(self, index: int) -> None:
        """Append empty lines until *index* is a valid line index."""
        while len(self._lines) <= index:
            self._lines.append(bytearray())

    # -- byte-level operations -----------------------------------------------

    def insert_byte(self, position: Position, value: int) -> None:
        """Insert a single byte at *position*, growing that line by one."""
        if value == 0x0A:
            raise ValueError("cannot insert a newline byte; use split_line")
        line = self._line_at(position)
        line.insert(position.column, value)

    def remove_byte(self, position: Position) -> None:
        """Remove the byte immediately before *position* (backspace)."""
        line = self._line_at(position)
        if position.column < 1:
            raise IndexError("no byte before column 0")
        del line[position.column - 1]

    def split_line(self, position: Position) -> None:
        """Break the line at *position*; the suffix becomes the next line."""
        line = self._line_at(position)
        suffix = line[position.column:]
        del line[position.column:]
        self._lines.insert(position.line + 1, suffix)

    def join_line(self, index: int) -> None:
        """Append line *index* onto line ``index - 1`` and remove it."""
        self._check_index(index)
        if index < 1:
            raise IndexError("cannot join the first line onto a previous one")
        self._lines[index - 1].extend(self._lines[index])
        del self._lines[index]

    # -- helpers -------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line index {index} out of range")

    def _line_at(self, position: Position) -> bytearray:
        self._check_index(position.line)
        line = self._lines[position.line]
        if not 0 <= position.column <= len(line):
            raise IndexError(
                f"column {position.column} out of range for line {position.line}"
            )
        return line
