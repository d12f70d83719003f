"""Exceptions raised by femto."""

from __future__ import annotations


class FemtoError(Exception):
    """Base class for all femto errors."""


class FileLoadError(FemtoError):
    """The input file exists but could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not open the file '{path}': {reason}")
        self.path = path
        self.reason = reason


class NotARegularFileError(FileLoadError):
    """The input path exists but is a directory, device, fifo, etc."""

    def __init__(self, path: str) -> None:
        super().__init__(path, "not a regular file")


class FileSaveError(FemtoError):
    """Writing the buffer back to disk failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not write the file '{path}': {reason}")
        self.path = path
        self.reason = reason
