"""Assemble one complete terminal frame as a single byte string."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from smol_editor.config import mode_label

if TYPE_CHECKING:
    from smol_editor.state import EditorState

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
CLEAR_LINE = b"\x1b[K"
STATUS_STYLE = b"\x1b[48;5;240m"
RESET_STYLE = b"\x1b[m"
NEWLINE = b"\r\n"
FILLER = b"~"


def move_cursor(row: int, col: int) -> bytes:
    return f"\x1b[{row};{col}H".encode("ascii")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="replace")


class FrameRenderer:
    """Builds frames from an ``EditorState``.

    ``render`` scrolls the viewport first, so the cursor escape always lands
    inside the text area.
    """

    def __init__(self, state: "EditorState") -> None:
        self.state = state

    def render(self, *, now: Optional[float] = None) -> bytes:
        state = self.state
        state.viewport.scroll(state.buffer)

        frame = bytearray()
        frame += HIDE_CURSOR
        frame += CURSOR_HOME
        self._draw_rows(frame)
        self._draw_message_bar(frame, now)
        self._draw_status_bar(frame)
        frame += move_cursor(*state.viewport.cursor_on_screen(state.buffer))
        frame += SHOW_CURSOR
        return bytes(frame)

    def _draw_rows(self, frame: bytearray) -> None:
        state = self.state
        document, viewport = state.document, state.viewport
        banner_row = viewport.screenrows // 3
        for y in range(viewport.screenrows):
            filerow = y + viewport.rowoff
            row = document.row(filerow)
            if row is not None:
                start = viewport.coloff
                frame += row.render[start : start + viewport.screencols]
            elif document.numrows == 0 and y == banner_row:
                welcome = state.config.welcome.format(version=state.config.version)
                frame += self._centered(_encode(welcome), filler=True)
            elif document.numrows == 0 and y == banner_row + 1:
                frame += self._centered(_encode(state.config.tagline), filler=False)
            else:
                frame += FILLER
            frame += CLEAR_LINE
            frame += NEWLINE

    def _centered(self, text: bytes, *, filler: bool) -> bytes:
        width = self.state.viewport.screencols
        text = text[:width]
        padding = (width - len(text)) // 2
        line = bytearray()
        if filler and padding:
            line += FILLER
            padding -= 1
        line += b" " * padding
        line += text
        return bytes(line)

    def _draw_message_bar(self, frame: bytearray, now: Optional[float]) -> None:
        state = self.state
        frame += CLEAR_LINE
        message = state.status.visible(state.config.message_timeout, now=now)
        if message:
            frame += _encode(message)[: state.viewport.screencols]
        frame += NEWLINE

    def _draw_status_bar(self, frame: bytearray) -> None:
        state = self.state
        document = state.document
        width = state.viewport.screencols
        name = (document.filename or "[No Name]")[:20]
        modified = "(modified)" if document.dirty else ""
        left = _encode(
            f"   Mode: {mode_label(state.mode)} | {name} - "
            f"{document.numrows} lines {modified}"
        )[:width]
        right = _encode(f"{state.buffer.cursor.cy + 1}/{document.numrows}")

        frame += STATUS_STYLE
        frame += left
        length = len(left)
        while length < width:
            if width - length == len(right):
                frame += right
                break
            frame += b" "
            length += 1
        frame += RESET_STYLE


__all__ = ["FrameRenderer", "move_cursor", "CURSOR_HOME"]
