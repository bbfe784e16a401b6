"""Buffer abstractions: rows, the document, and cursor-relative edits."""

from .buffer import DOWN, LEFT, RIGHT, UP, Buffer, BufferDelta, Transaction
from .document import Document, LINE_TERMINATOR
from .row import Row, expand_tabs
from .state import Cursor, Position
from .validation import clamp_cursor, row_length

__all__ = [
    "Buffer",
    "BufferDelta",
    "Transaction",
    "Document",
    "Row",
    "Cursor",
    "Position",
    "LINE_TERMINATOR",
    "LEFT",
    "RIGHT",
    "UP",
    "DOWN",
    "clamp_cursor",
    "expand_tabs",
    "row_length",
]
