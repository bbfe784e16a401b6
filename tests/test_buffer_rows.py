from __future__ import annotations

import pytest

from smol_editor.buffer import Document, Row, expand_tabs


def make_row(text: bytes, tab_stop: int = 2) -> Row:
    return Row(bytearray(text), tab_stop=tab_stop)


def test_single_tab_renders_to_tab_stop() -> None:
    row = make_row(b"\t")

    assert row.render == b"  "
    assert row.rsize == 2
    assert row.cx_to_rx(1) == 2


@pytest.mark.parametrize(
    ("chars", "tab_stop", "expected"),
    [
        (b"a\tb", 2, b"a b"),
        (b"ab\tc", 2, b"ab  c"),
        (b"\t\t", 4, b"        "),
        (b"x\ty", 8, b"x       y"),
    ],
)
def test_expand_tabs_pads_to_next_stop(
    chars: bytes, tab_stop: int, expected: bytes
) -> None:
    assert expand_tabs(chars, tab_stop) == expected


def test_cx_to_rx_is_identity_without_tabs() -> None:
    row = make_row(b"hello")

    assert [row.cx_to_rx(cx) for cx in range(6)] == [0, 1, 2, 3, 4, 5]


def test_cx_to_rx_is_monotone_and_lands_on_render_glyph() -> None:
    row = make_row(b"a\tb\t\tc", tab_stop=4)
    positions = [row.cx_to_rx(cx) for cx in range(row.size + 1)]

    assert positions == sorted(positions)
    assert row.render[row.cx_to_rx(2) : row.cx_to_rx(2) + 1] == b"b"
    assert row.render[row.cx_to_rx(5) : row.cx_to_rx(5) + 1] == b"c"


def test_row_mutations_keep_render_in_sync() -> None:
    row = make_row(b"ab")

    row.insert_char(1, 0x09)
    assert row.render == b"a b"
    assert row.delete_char(1) is True
    assert row.render == b"ab"
    row.append(b"\tc")
    assert row.render == b"ab  c"
    assert row.truncate(2) == b"\tc"
    assert row.render == b"ab"


def test_row_out_of_range_edits() -> None:
    row = make_row(b"ab")

    row.insert_char(99, ord("c"))
    assert bytes(row.chars) == b"abc"
    assert row.delete_char(3) is False
    assert row.delete_char(-1) is False
    assert bytes(row.chars) == b"abc"


def test_document_from_lines_strips_line_endings() -> None:
    document = Document.from_lines([b"one\r\n", b"two\n", b"three"], filename="f")

    assert document.lines() == (b"one", b"two", b"three")
    assert document.filename == "f"
    assert document.dirty == 0


def test_document_from_bytes_round_trips() -> None:
    data = b"first\n\tsecond\n\nlast\n"
    document = Document.from_bytes(data)

    assert document.numrows == 4
    assert document.rows_to_string() == data


def test_empty_document_serializes_to_nothing() -> None:
    assert Document().rows_to_string() == b""
    assert Document.from_bytes(b"").numrows == 0


def test_document_ignores_out_of_range_rows() -> None:
    document = Document.from_lines([b"a"])

    assert document.insert_row(5, b"x") is None
    assert document.delete_row(1) is None
    assert document.delete_row(-1) is None
    assert document.row(1) is None
    assert document.dirty == 0


def test_document_row_changes_count_as_dirty() -> None:
    document = Document.from_lines([b"a"])

    document.insert_row(1, b"b")
    document.delete_row(0)

    assert document.dirty == 2
    assert document.lines() == (b"b",)
    document.mark_clean()
    assert document.dirty == 0


def test_rows_share_document_tab_stop() -> None:
    document = Document.from_lines([b"\tx"], tab_stop=4)

    assert document.rows[0].render == b"    x"
