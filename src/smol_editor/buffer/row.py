"""A single line of text plus its tab-expanded render form."""

from __future__ import annotations

from dataclasses import dataclass, field

TAB = 0x09
SPACE = 0x20


def expand_tabs(chars: bytes | bytearray, tab_stop: int) -> bytes:
    """Return ``chars`` with every tab padded out to the next tab stop.

    A tab always emits at least one space, then pads until the render
    column is a multiple of ``tab_stop``.
    """

    render = bytearray()
    for byte in chars:
        if byte == TAB:
            render.append(SPACE)
            while len(render) % tab_stop:
                render.append(SPACE)
        else:
            render.append(byte)
    return bytes(render)


@dataclass(slots=True)
class Row:
    """Stored bytes of one line (no newline) with a derived render cache.

    Every mutating method rebuilds ``render`` before returning, so the two
    views never disagree.
    """

    chars: bytearray = field(default_factory=bytearray)
    tab_stop: int = 2
    render: bytes = field(init=False, default=b"")

    def __post_init__(self) -> None:
        self.chars = bytearray(self.chars)
        self.update()

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)

    def update(self) -> None:
        self.render = expand_tabs(self.chars, self.tab_stop)

    def cx_to_rx(self, cx: int) -> int:
        rx = 0
        for byte in self.chars[: max(0, cx)]:
            if byte == TAB:
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def insert_char(self, at: int, byte: int) -> None:
        if at < 0 or at > self.size:
            at = self.size
        self.chars.insert(at, byte)
        self.update()

    def delete_char(self, at: int) -> bool:
        if at < 0 or at >= self.size:
            return False
        del self.chars[at]
        self.update()
        return True

    def append(self, data: bytes | bytearray) -> None:
        self.chars.extend(data)
        self.update()

    def truncate(self, length: int) -> bytes:
        """Cut the row at ``length`` and return the removed tail."""

        length = max(0, min(length, self.size))
        tail = bytes(self.chars[length:])
        del self.chars[length:]
        self.update()
        return tail


__all__ = ["Row", "expand_tabs"]
