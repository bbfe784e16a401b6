"""Cursor position tracking for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Position = Tuple[int, int]  # (cx, cy)


@dataclass(slots=True)
class Cursor:
    """Byte column ``cx`` into row ``cy``.

    ``cx`` may sit one past the end of the row and ``cy`` may equal the row
    count, which addresses the virtual line after the last row.
    """

    cx: int = 0
    cy: int = 0

    @property
    def position(self) -> Position:
        return (self.cx, self.cy)

    def set(self, cx: int, cy: int) -> None:
        self.cx = cx
        self.cy = cy
