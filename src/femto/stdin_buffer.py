"""Splitting raw input chunks into complete key sequences.

A single read from the terminal may carry several keypresses (fast typing,
key repeat) or an escape sequence such as an arrow key. Splitting keeps an
arrow key's trailing ``[A`` from being inserted as text in edit mode.
"""

from __future__ import annotations

import re
from typing import Literal

ESC = 0x1B

SequenceStatus = Literal["complete", "incomplete", "not-escape"]

_SGR_MOUSE_RE = re.compile(rb"^<\d+;\d+;\d+[Mm]$")


def _is_complete_sequence(data: bytes) -> SequenceStatus:
    """Check if *data* is a complete escape sequence or needs more bytes."""
    if not data.startswith(b"\x1b"):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI sequences: ESC [
    if after_esc.startswith(b"["):
        if after_esc.startswith(b"[M"):
            return "complete" if len(data) >= 6 else "incomplete"
        return _is_complete_csi_sequence(data)

    # OSC sequences: ESC ]
    if after_esc.startswith(b"]"):
        return _is_complete_string_sequence(data, allow_bel=True)

    # DCS and APC sequences: ESC P / ESC _
    if after_esc.startswith((b"P", b"_")):
        return _is_complete_string_sequence(data, allow_bel=False)

    # SS3 sequences: ESC O
    if after_esc.startswith(b"O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key: ESC followed by a single byte
    return "complete"


def _is_complete_csi_sequence(data: bytes) -> SequenceStatus:
    if len(data) < 3:
        return "incomplete"

    payload = data[2:]
    final = payload[-1]

    if 0x40 <= final <= 0x7E:
        if payload.startswith(b"<"):
            return "complete" if _SGR_MOUSE_RE.match(payload) else "incomplete"
        return "complete"

    return "incomplete"


def _is_complete_string_sequence(data: bytes, *, allow_bel: bool) -> SequenceStatus:
    if data.endswith(b"\x1b\\"):
        return "complete"
    if allow_bel and data.endswith(b"\x07"):
        return "complete"
    return "incomplete"


def _extract_complete_sequences(buffer: bytes) -> tuple[list[bytes], bytes]:
    """Split accumulated input into complete sequences.

    Returns (sequences, remainder) where the remainder is an escape
    sequence still waiting for more bytes.
    """
    sequences: list[bytes] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if remaining[0] != ESC:
            sequences.append(remaining[:1])
            pos += 1
            continue

        seq_end = 1
        while seq_end <= len(remaining):
            candidate = remaining[:seq_end]
            if _is_complete_sequence(candidate) == "incomplete":
                seq_end += 1
                continue
            sequences.append(candidate)
            pos += seq_end
            break
        else:
            return sequences, remaining

    return sequences, b""


def split_sequences(data: bytes) -> list[bytes]:
    """Split one chunk of input into the sequences it carries.

    Reads are blocking and chunk-bounded, so an escape sequence still
    incomplete at the end of a chunk is emitted as-is rather than held back
    waiting for bytes that may never come. A lone ESC keypress is therefore
    delivered as the single byte ``b"\\x1b"``.
    """
    sequences, remainder = _extract_complete_sequences(data)
    if remainder:
        sequences.append(remainder)
    return sequences
