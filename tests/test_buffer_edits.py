from __future__ import annotations

import pytest

from smol_editor.buffer import DOWN, LEFT, RIGHT, UP, Buffer


def make_buffer(text: str, *, cx: int = 0, cy: int = 0) -> Buffer:
    buffer = Buffer.from_text(text)
    buffer.cursor.set(cx, cy)
    return buffer


def test_insert_on_empty_buffer_creates_first_row() -> None:
    buffer = Buffer()

    delta = buffer.insert_char(ord("a"))

    assert buffer.document.lines() == (b"a",)
    assert delta.cursor == (1, 0)
    assert delta.numrows == 1
    assert buffer.document.dirty > 0


def test_insert_then_delete_restores_row() -> None:
    buffer = make_buffer("abc\n", cx=2)
    before = buffer.document.rows_to_string()

    buffer.insert_char(ord("x"))
    assert buffer.document.lines() == (b"abxc",)
    buffer.delete_char()

    assert buffer.document.rows_to_string() == before
    assert buffer.cursor.position == (2, 0)


@pytest.mark.parametrize("cx", range(1, 6))
def test_delete_then_reinsert_restores_lower_row(cx: int) -> None:
    buffer = make_buffer("xx\nabcde\n", cx=cx, cy=1)
    before = buffer.document.lines()
    byte = buffer.document.rows[1].chars[cx - 1]

    buffer.delete_char()
    assert buffer.cursor.position == (cx - 1, 1)
    buffer.insert_char(byte)

    assert buffer.document.lines() == before
    assert buffer.cursor.position == (cx, 1)


def test_delete_then_reinsert_at_origin_only_inserts() -> None:
    buffer = make_buffer("abc\n")

    buffer.delete_char()
    assert buffer.document.lines() == (b"abc",)
    buffer.insert_char(ord("z"))

    assert buffer.document.lines() == (b"zabc",)
    assert buffer.cursor.position == (1, 0)


def test_split_then_delete_joins_rows() -> None:
    buffer = make_buffer("hello\nworld\n", cx=2)

    delta = buffer.split_line()
    assert buffer.document.lines() == (b"he", b"llo", b"world")
    assert delta.cursor == (0, 1)

    buffer.delete_char()
    assert buffer.document.lines() == (b"hello", b"world")
    assert buffer.cursor.position == (2, 0)


def test_delete_at_origin_is_noop() -> None:
    buffer = make_buffer("abc\n")
    dirty = buffer.document.dirty

    delta = buffer.delete_char()

    assert buffer.document.lines() == (b"abc",)
    assert delta.cursor == (0, 0)
    assert buffer.document.dirty == dirty


def test_delete_on_virtual_row_is_noop() -> None:
    buffer = make_buffer("abc\n", cy=1)

    buffer.delete_char()

    assert buffer.document.lines() == (b"abc",)
    assert buffer.cursor.position == (0, 1)


def test_split_on_virtual_row_appends_empty_row() -> None:
    buffer = make_buffer("a\n", cy=1)

    buffer.split_line()

    assert buffer.document.lines() == (b"a", b"")
    assert buffer.cursor.position == (0, 2)


def test_open_line_inserts_below_without_splitting() -> None:
    buffer = make_buffer("ab\ncd\n", cx=1)

    buffer.open_line()

    assert buffer.document.lines() == (b"ab", b"", b"cd")
    assert buffer.cursor.position == (0, 1)


def test_delete_current_row_clamps_cursor() -> None:
    buffer = make_buffer("a\nlong line\nc\n", cx=6, cy=1)

    delta = buffer.delete_current_row()

    assert buffer.document.lines() == (b"a", b"c")
    assert delta.cursor == (1, 1)


def test_delete_current_row_on_virtual_row_is_noop() -> None:
    buffer = make_buffer("a\n", cy=1)

    buffer.delete_current_row()

    assert buffer.document.lines() == (b"a",)


def test_vertical_moves_clamp_column() -> None:
    buffer = make_buffer("abcdef\nxy\n", cx=5)

    assert buffer.move(DOWN) == (2, 1)
    assert buffer.move(DOWN) == (0, 2)
    assert buffer.move(DOWN) == (0, 2)
    assert buffer.move(UP, times=5) == (0, 0)


def test_horizontal_moves_stay_inside_row() -> None:
    buffer = make_buffer("ab\n")

    assert buffer.move(LEFT) == (0, 0)
    assert buffer.move(RIGHT, times=10) == (2, 0)


def test_line_start_end_and_row_jumps() -> None:
    buffer = make_buffer("one\ntwo three\n", cy=1)

    assert buffer.move_to_line_end() == (9, 1)
    assert buffer.move_to_line_start() == (0, 1)
    assert buffer.move_to_row(0) == (0, 0)
    assert buffer.move_to_row(99) == (0, 2)


def test_unknown_direction_raises() -> None:
    with pytest.raises(ValueError):
        Buffer().move("sideways")


def test_buffer_name_defaults_to_placeholder() -> None:
    assert Buffer().name == "[No Name]"
