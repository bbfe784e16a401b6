"""Scroll offsets mapping the document onto a fixed terminal grid."""

from __future__ import annotations

from dataclasses import dataclass

from smol_editor.buffer import Buffer

# Status bar plus message bar.
RESERVED_ROWS = 2


@dataclass(slots=True)
class Viewport:
    """Top-left visible buffer coordinate and the size of the text area.

    ``scroll`` only ever moves the offsets; the cursor is never clamped to
    fit the screen.
    """

    screenrows: int
    screencols: int
    rowoff: int = 0
    coloff: int = 0
    rx: int = 0

    def __post_init__(self) -> None:
        if self.screenrows < 1 or self.screencols < 1:
            raise ValueError("viewport needs at least one row and one column")

    @classmethod
    def from_terminal(cls, rows: int, cols: int) -> "Viewport":
        return cls(screenrows=max(1, rows - RESERVED_ROWS), screencols=max(1, cols))

    def scroll(self, buffer: Buffer) -> None:
        cursor = buffer.cursor
        row = buffer.document.row(cursor.cy)
        self.rx = row.cx_to_rx(cursor.cx) if row is not None else 0

        if cursor.cy < self.rowoff:
            self.rowoff = cursor.cy
        if cursor.cy >= self.rowoff + self.screenrows:
            self.rowoff = cursor.cy - self.screenrows + 1
        if self.rx < self.coloff:
            self.coloff = self.rx
        if self.rx >= self.coloff + self.screencols:
            self.coloff = self.rx - self.screencols + 1

    def cursor_on_screen(self, buffer: Buffer) -> tuple[int, int]:
        """1-based terminal ``(row, col)`` of the cursor after ``scroll``."""

        return (buffer.cursor.cy - self.rowoff + 1, self.rx - self.coloff + 1)
