from __future__ import annotations

import pytest

from smol_editor.buffer import Buffer
from smol_editor.render import RESERVED_ROWS, Viewport


def make_buffer(lines: list[str], *, cx: int = 0, cy: int = 0) -> Buffer:
    buffer = Buffer.from_text("".join(f"{line}\n" for line in lines))
    buffer.cursor.set(cx, cy)
    return buffer


def test_from_terminal_reserves_bar_rows() -> None:
    viewport = Viewport.from_terminal(24, 80)

    assert viewport.screenrows == 24 - RESERVED_ROWS
    assert viewport.screencols == 80


def test_tiny_terminal_keeps_one_text_row() -> None:
    assert Viewport.from_terminal(1, 10).screenrows == 1


def test_invalid_viewport_rejected() -> None:
    with pytest.raises(ValueError):
        Viewport(screenrows=0, screencols=10)


def test_scroll_follows_cursor_down_then_up() -> None:
    buffer = make_buffer([str(n) for n in range(30)], cy=25)
    viewport = Viewport(screenrows=10, screencols=80)

    viewport.scroll(buffer)
    assert viewport.rowoff == 16
    assert viewport.cursor_on_screen(buffer) == (10, 1)

    buffer.cursor.set(0, 20)
    viewport.scroll(buffer)
    assert viewport.rowoff == 16

    buffer.cursor.set(0, 3)
    viewport.scroll(buffer)
    assert viewport.rowoff == 3
    assert viewport.cursor_on_screen(buffer) == (1, 1)


def test_scroll_follows_cursor_horizontally() -> None:
    buffer = make_buffer(["a" * 100], cx=90)
    viewport = Viewport(screenrows=5, screencols=20)

    viewport.scroll(buffer)
    assert viewport.coloff == 71
    assert viewport.cursor_on_screen(buffer) == (1, 20)

    buffer.cursor.set(10, 0)
    viewport.scroll(buffer)
    assert viewport.coloff == 10


def test_scroll_uses_render_column_for_tabs() -> None:
    buffer = make_buffer(["\tx"], cx=1)
    viewport = Viewport(screenrows=5, screencols=20)

    viewport.scroll(buffer)

    assert viewport.rx == 2
    assert viewport.cursor_on_screen(buffer) == (1, 3)


def test_virtual_row_has_render_column_zero() -> None:
    buffer = make_buffer(["abc"], cy=1)
    viewport = Viewport(screenrows=5, screencols=20, rx=7)

    viewport.scroll(buffer)

    assert viewport.rx == 0
    assert viewport.cursor_on_screen(buffer) == (2, 1)
