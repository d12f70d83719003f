"""Loading a file into lines and writing lines back out."""

from __future__ import annotations

import errno
import logging
import os
import stat
from typing import Iterable

from femto.errors import FileLoadError, FileSaveError, NotARegularFileError

logger = logging.getLogger(__name__)


def split_lines(data: bytes) -> list[bytes]:
    """Split file contents into newline-stripped lines.

    A trailing newline terminates the last line rather than starting a new
    one. Empty input yields a single empty line.
    """
    lines = data.split(b"\n")
    if len(lines) > 1 and lines[-1] == b"":
        lines.pop()
    return lines


def load_lines(path: str) -> list[bytes]:
    """Read *path* into lines.

    A missing file is a new document and yields one empty line.
    """
    try:
        st = os.stat(path)
    except FileNotFoundError:
        logger.info("%s does not exist, starting a new file", path)
        return [b""]
    except OSError as e:
        raise FileLoadError(path, e.strerror or str(e)) from e

    if not stat.S_ISREG(st.st_mode):
        raise NotARegularFileError(path)

    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileLoadError(path, e.strerror or str(e)) from e

    lines = split_lines(data)
    logger.info("loaded %s (%d lines, %d bytes)", path, len(lines), len(data))
    return lines


def save_lines(lines: Iterable[bytes], path: str) -> int:
    """Overwrite *path* with every line followed by a newline byte.

    Returns the number of bytes written. A failure part way through leaves
    the file truncated; there is no rollback.
    """
    written = 0
    try:
        with open(path, "wb") as f:
            for line in lines:
                written += f.write(line)
                written += f.write(b"\n")
    except OSError as e:
        if e.errno == errno.ENOENT:
            reason = "directory does not exist"
        else:
            reason = e.strerror or str(e)
        raise FileSaveError(path, reason) from e

    logger.info("wrote %d bytes to %s", written, path)
    return written
