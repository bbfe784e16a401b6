"""High-level buffer façade combining the document and its cursor."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional

from smol_editor.runtime import telemetry

from .document import Document
from .state import Cursor, Position
from .validation import clamp_cursor, row_length

LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"


@dataclass(slots=True)
class BufferDelta:
    label: str
    cursor: Position
    dirty: int
    numrows: int


class Buffer:
    """Cursor-relative editing operations over a ``Document``.

    Every edit runs inside a ``Transaction`` so it is traced by telemetry.
    Nothing here raises on out-of-range positions; requests outside the
    document are absorbed as no-ops.
    """

    def __init__(
        self,
        *,
        document: Optional[Document] = None,
        cursor: Optional[Cursor] = None,
    ) -> None:
        self.document = document or Document()
        self.cursor = cursor or Cursor()

    @classmethod
    def from_text(cls, text: str | bytes, *, tab_stop: int = 2) -> "Buffer":
        data = text.encode("utf-8") if isinstance(text, str) else text
        return cls(document=Document.from_bytes(data, tab_stop=tab_stop))

    @property
    def name(self) -> str:
        return self.document.filename or "[No Name]"

    @property
    def at_virtual_row(self) -> bool:
        return self.cursor.cy >= self.document.numrows

    def insert_char(self, byte: int) -> BufferDelta:
        with Transaction(self, "insert_char") as tx:
            document, cursor = self.document, self.cursor
            if cursor.cy == document.numrows:
                document.insert_row(document.numrows, b"")
            row = document.rows[cursor.cy]
            row.insert_char(cursor.cx, byte)
            document.touch()
            cursor.cx = min(cursor.cx, row.size - 1) + 1
        return tx.delta

    def delete_char(self) -> BufferDelta:
        with Transaction(self, "delete_char") as tx:
            document, cursor = self.document, self.cursor
            if self.at_virtual_row or (cursor.cx == 0 and cursor.cy == 0):
                return tx.delta
            row = document.rows[cursor.cy]
            if cursor.cx > 0:
                if row.delete_char(cursor.cx - 1):
                    document.touch()
                cursor.cx -= 1
            else:
                previous = document.rows[cursor.cy - 1]
                cursor.cx = previous.size
                previous.append(row.chars)
                document.touch()
                document.delete_row(cursor.cy)
                cursor.cy -= 1
        return tx.delta

    def split_line(self) -> BufferDelta:
        with Transaction(self, "split_line") as tx:
            document, cursor = self.document, self.cursor
            if self.at_virtual_row:
                document.insert_row(document.numrows, b"")
            else:
                row = document.rows[cursor.cy]
                tail = row.truncate(cursor.cx)
                document.insert_row(cursor.cy + 1, tail)
            cursor.set(0, cursor.cy + 1)
        return tx.delta

    def open_line(self) -> BufferDelta:
        with Transaction(self, "open_line") as tx:
            document, cursor = self.document, self.cursor
            at = min(cursor.cy + 1, document.numrows)
            document.insert_row(at, b"")
            cursor.set(0, at)
        return tx.delta

    def delete_current_row(self) -> BufferDelta:
        with Transaction(self, "delete_row") as tx:
            self.document.delete_row(self.cursor.cy)
            clamp_cursor(self.document, self.cursor)
        return tx.delta

    def move(self, direction: str, times: int = 1) -> Position:
        cursor = self.cursor
        for _ in range(times):
            if direction == LEFT:
                if cursor.cx > 0:
                    cursor.cx -= 1
            elif direction == RIGHT:
                if not self.at_virtual_row and cursor.cx < row_length(
                    self.document, cursor.cy
                ):
                    cursor.cx += 1
            elif direction == UP:
                if cursor.cy > 0:
                    cursor.cy -= 1
            elif direction == DOWN:
                if cursor.cy < self.document.numrows:
                    cursor.cy += 1
            else:
                raise ValueError(f"Unknown direction '{direction}'")
            clamp_cursor(self.document, cursor)
        return cursor.position

    def move_to_line_end(self) -> Position:
        self.cursor.cx = row_length(self.document, self.cursor.cy)
        return self.cursor.position

    def move_to_line_start(self) -> Position:
        self.cursor.cx = 0
        return self.cursor.position

    def move_to_row(self, cy: int) -> Position:
        self.cursor.cy = cy
        return clamp_cursor(self.document, self.cursor).position


class Transaction(AbstractContextManager["Transaction"]):
    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    @property
    def delta(self) -> BufferDelta:
        return BufferDelta(
            label=self.label,
            cursor=self.buffer.cursor.position,
            dirty=self.buffer.document.dirty,
            numrows=self.buffer.document.numrows,
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "BufferDelta", "Transaction", "LEFT", "RIGHT", "UP", "DOWN"]
