"""Keyboard input decoding.

Input arrives as raw byte sequences. Only sequences of exactly one byte are
acted upon; anything longer (arrow keys, function keys, mouse reports) is
reported as unrecognized and ignored by the editor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ---------------------------------------------------------------------------
# Byte constants
# ---------------------------------------------------------------------------

ESC = 0x1B
LF = 0x0A
CR = 0x0D
BS = 0x08
DEL = 0x7F

ENTER_BYTES = frozenset({LF, CR})
BACKSPACE_BYTES = frozenset({DEL, BS})


class Key:
    """Navigation mode command bytes."""

    up = ord("w")
    down = ord("s")
    left = ord("a")
    right = ord("d")
    edit = ord("e")
    save = ord("f")
    quit = ord("q")


# ---------------------------------------------------------------------------
# Typed input events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyPress:
    """A single decoded command byte."""

    byte: int

    @property
    def is_escape(self) -> bool:
        return self.byte == ESC

    @property
    def is_enter(self) -> bool:
        return self.byte in ENTER_BYTES

    @property
    def is_backspace(self) -> bool:
        return self.byte in BACKSPACE_BYTES

    @property
    def is_printable(self) -> bool:
        return is_printable(self.byte)


@dataclass(frozen=True)
class Unrecognized:
    """A multi-byte (or empty) sequence the editor does not decode."""

    raw: bytes


InputEvent = Union[KeyPress, Unrecognized]


def is_printable(byte: int) -> bool:
    """Whether *byte* is inserted as content in edit mode.

    Printable ASCII plus every byte >= 0x80, so multi-byte UTF-8 text typed
    into the terminal is stored byte by byte.
    """
    return 0x20 <= byte <= 0x7E or byte >= 0x80


def decode_input(data: bytes) -> InputEvent:
    """Decode one input sequence into a typed event."""
    if len(data) == 1:
        return KeyPress(data[0])
    return Unrecognized(bytes(data))
