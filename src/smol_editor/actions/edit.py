"""Buffer-mutating actions."""

from __future__ import annotations

from smol_editor.buffer import BufferDelta
from smol_editor.modes.base_mode import ModeContext, ModeResult


def _edited(context: ModeContext, delta: BufferDelta) -> ModeResult:
    context.bus.emit("buffer.edit", delta)
    return ModeResult(consumed=True, status="edit", message=delta.label)


def insert_byte(context: ModeContext, byte: int) -> ModeResult:
    return _edited(context, context.buffer.insert_char(byte))


def delete_char(context: ModeContext, match) -> ModeResult:
    del match
    return _edited(context, context.buffer.delete_char())


def split_line(context: ModeContext, match) -> ModeResult:
    del match
    return _edited(context, context.buffer.split_line())


def open_line(context: ModeContext, match) -> ModeResult:
    del match
    return _edited(context, context.buffer.open_line())


def delete_row(context: ModeContext, match) -> ModeResult:
    del match
    return _edited(context, context.buffer.delete_current_row())


__all__ = [
    "insert_byte",
    "delete_char",
    "split_line",
    "open_line",
    "delete_row",
]
