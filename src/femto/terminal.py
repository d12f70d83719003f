"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that switches the controlling terminal into raw mode, reads
input with bounded blocking reads, and writes rendered frames.
"""

from __future__ import annotations

import logging
import os
import sys
import termios
import tty
from types import TracebackType
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_SHOW_CURSOR = b"\x1b[?25h"
_CLEAR_SCREEN = b"\x1b[2J\x1b[H"

DEFAULT_ROWS = 24
DEFAULT_COLUMNS = 80


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def read(self, max_bytes: int = 32) -> bytes: ...

    def write(self, data: bytes) -> None: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def show_cursor(self) -> None: ...

    def clear_screen(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by a tty on stdin and stdout.

    The streams default to ``sys.stdin`` and ``sys.stdout`` as they are when
    the terminal is created; *stdout* must expose a binary ``buffer``.

    Raw mode is a scoped resource: ``start`` saves the current attributes,
    ``stop`` restores them. Use it as a context manager so the terminal is
    restored on every exit path.
    """

    def __init__(
        self,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        write_log: str = "",
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._original_termios: list | None = None
        self._write_log_path = write_log

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (ValueError, OSError):
            return DEFAULT_COLUMNS

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).lines
        except (ValueError, OSError):
            return DEFAULT_ROWS

    @property
    def active(self) -> bool:
        return self._original_termios is not None

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Enable raw mode: bytes are delivered immediately without echo."""
        if self.active:
            return
        fd = self._stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)
        logger.debug("raw mode enabled on fd %d", fd)

    def stop(self) -> None:
        """Restore the terminal attributes saved by :meth:`start`."""
        if self._original_termios is None:
            return
        self.show_cursor()
        fd = self._stdin.fileno()
        termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
        self._original_termios = None
        logger.debug("terminal attributes restored")

    def __enter__(self) -> ProcessTerminal:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    # -- input --------------------------------------------------------------

    def read(self, max_bytes: int = 32) -> bytes:
        """Block until input is available and return at most *max_bytes*.

        An empty result means end of input.
        """
        return os.read(self._stdin.fileno(), max_bytes)

    # -- output -------------------------------------------------------------

    def write(self, data: bytes) -> None:
        """Write data to stdout and optionally to the write log."""
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "ab") as f:
                    f.write(data)
            except OSError:
                logger.warning("could not append to write log %s", self._write_log_path)

    def show_cursor(self) -> None:
        self._raw_write(_SHOW_CURSOR)

    def clear_screen(self) -> None:
        self._raw_write(_CLEAR_SCREEN)

    def _raw_write(self, data: bytes) -> None:
        """Write directly to stdout, bypassing text buffering."""
        try:
            self._stdout.buffer.write(data)
            self._stdout.buffer.flush()
        except OSError:
            logger.warning("write to terminal failed", exc_info=True)

