"""Clamping helpers shared across buffer services."""

from __future__ import annotations

from .document import Document
from .state import Cursor


def row_length(document: Document, cy: int) -> int:
    row = document.row(cy)
    return row.size if row is not None else 0


def clamp_cursor(document: Document, cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back inside the document, never raising."""

    cy = max(0, min(cursor.cy, document.numrows))
    cx = max(0, min(cursor.cx, row_length(document, cy)))
    cursor.set(cx, cy)
    return cursor
