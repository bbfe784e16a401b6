"""Core document storage: an ordered list of rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .row import Row

LINE_TERMINATOR = b"\n"


def strip_line_ending(line: bytes) -> bytes:
    return line.rstrip(b"\r\n")


@dataclass(slots=True)
class Document:
    """Rows of the open file plus its dirty counter and filename.

    ``dirty`` counts mutations since the last load or save; zero means the
    document matches what is on disk. Out-of-range row indices are ignored
    rather than rejected.
    """

    rows: List[Row] = field(default_factory=list)
    filename: Optional[str] = None
    tab_stop: int = 2
    dirty: int = 0

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[bytes],
        *,
        filename: Optional[str] = None,
        tab_stop: int = 2,
    ) -> "Document":
        document = cls(filename=filename, tab_stop=tab_stop)
        for line in lines:
            document.insert_row(document.numrows, strip_line_ending(line))
        document.dirty = 0
        return document

    @classmethod
    def from_bytes(
        cls, data: bytes, *, filename: Optional[str] = None, tab_stop: int = 2
    ) -> "Document":
        lines = data.split(LINE_TERMINATOR)
        if lines and not lines[-1]:
            lines.pop()
        return cls.from_lines(lines, filename=filename, tab_stop=tab_stop)

    @property
    def numrows(self) -> int:
        return len(self.rows)

    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < self.numrows:
            return self.rows[index]
        return None

    def insert_row(self, at: int, text: bytes | bytearray = b"") -> Optional[Row]:
        if at < 0 or at > self.numrows:
            return None
        row = Row(bytearray(text), tab_stop=self.tab_stop)
        self.rows.insert(at, row)
        self.dirty += 1
        return row

    def delete_row(self, at: int) -> Optional[Row]:
        if at < 0 or at >= self.numrows:
            return None
        removed = self.rows.pop(at)
        self.dirty += 1
        return removed

    def touch(self) -> None:
        self.dirty += 1

    def mark_clean(self) -> None:
        self.dirty = 0

    def rows_to_string(self) -> bytes:
        return b"".join(bytes(row.chars) + LINE_TERMINATOR for row in self.rows)

    def lines(self) -> tuple[bytes, ...]:
        return tuple(bytes(row.chars) for row in self.rows)


__all__ = ["Document", "LINE_TERMINATOR", "strip_line_ending"]
