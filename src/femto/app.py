"""Host run loop: read input, dispatch it to the session, render."""

from __future__ import annotations

import logging

from femto.config import Config
from femto.editor import EditorSession
from femto.fileio import load_lines
from femto.keys import decode_input
from femto.render import render_frame
from femto.stdin_buffer import split_sequences
from femto.terminal import Terminal

logger = logging.getLogger(__name__)


def open_session(path: str, terminal: Terminal) -> EditorSession:
    """Load *path* into a new session sized to *terminal*.

    Raises :class:`femto.errors.FileLoadError` for unreadable or
    non-regular files.
    """
    lines = load_lines(path)
    session = EditorSession(path, lines, rows=terminal.rows, columns=terminal.columns)
    logger.info("session started for %s with %d lines", path, session.store.count)
    return session


def run(session: EditorSession, terminal: Terminal, config: Config | None = None) -> None:
    """Run the editor until the session quits or input ends.

    Raw mode is held for the duration of the loop and released on every
    exit path.
    """
    read_size = (config or Config()).read_size

    terminal.start()
    try:
        while session.running:
            session.resize(terminal.rows, terminal.columns)
            terminal.write(render_frame(session))

            chunk = terminal.read(read_size)
            if not chunk:
                logger.info("end of input, quitting")
                session.quit()
                break

            for sequence in split_sequences(chunk):
                session.handle_input(decode_input(sequence))
                if not session.running:
                    break
        terminal.clear_screen()
    finally:
        terminal.stop()
