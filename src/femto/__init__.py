"""femto: a minimal modal terminal text editor."""

from femto.editor import EditorSession, Mode
from femto.errors import FemtoError, FileLoadError, FileSaveError, NotARegularFileError
from femto.fileio import load_lines, save_lines
from femto.keys import InputEvent, Key, KeyPress, Unrecognized, decode_input
from femto.lines import LineStore, Position
from femto.scroll import reconcile
from femto.viewport import Cursor, Viewport, absolute_position

__all__ = [
    # Session
    "EditorSession",
    "Mode",
    # Errors
    "FemtoError",
    "FileLoadError",
    "FileSaveError",
    "NotARegularFileError",
    # File I/O
    "load_lines",
    "save_lines",
    # Keys
    "InputEvent",
    "Key",
    "KeyPress",
    "Unrecognized",
    "decode_input",
    # Buffer and coordinates
    "LineStore",
    "Position",
    "Cursor",
    "Viewport",
    "absolute_position",
    "reconcile",
]
