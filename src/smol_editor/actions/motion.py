"""Cursor motions for normal mode."""

from __future__ import annotations

from smol_editor.buffer import DOWN, LEFT, RIGHT, UP
from smol_editor.modes.base_mode import ModeContext, ModeResult

# Word motions are approximated by a fixed cell count.
WORD_STEP = 10


def _moved(context: ModeContext) -> ModeResult:
    cx, cy = context.buffer.cursor.position
    return ModeResult(consumed=True, status="move", message=f"{cy}:{cx}")


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move(LEFT)
    return _moved(context)


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move(DOWN)
    return _moved(context)


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move(UP)
    return _moved(context)


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move(RIGHT)
    return _moved(context)


def line_end(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_to_line_end()
    return _moved(context)


def line_start(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_to_line_start()
    return _moved(context)


def word_forward(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move(RIGHT, WORD_STEP)
    return _moved(context)


def word_backward(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move(LEFT, WORD_STEP)
    return _moved(context)


def goto_last_row(context: ModeContext, match) -> ModeResult:
    del match
    buffer = context.buffer
    buffer.move_to_row(max(buffer.document.numrows - 1, 0))
    return _moved(context)


def goto_first_row(context: ModeContext, match) -> ModeResult:
    del match
    context.buffer.move_to_row(0)
    return _moved(context)


__all__ = [
    "move_left",
    "move_down",
    "move_up",
    "move_right",
    "line_end",
    "line_start",
    "word_forward",
    "word_backward",
    "goto_last_row",
    "goto_first_row",
]
