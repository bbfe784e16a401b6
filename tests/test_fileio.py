from __future__ import annotations

from pathlib import Path

import pytest

from smol_editor import fileio
from smol_editor.errors import LoadError


def test_load_lines_strips_endings(tmp_path: Path) -> None:
    path = tmp_path / "in.txt"
    path.write_bytes(b"one\r\ntwo\n\nthree")

    assert fileio.load_lines(str(path)) == [b"one", b"two", b"", b"three"]


def test_load_missing_file_raises_load_error(tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"

    with pytest.raises(LoadError) as info:
        fileio.load_lines(str(missing))

    assert info.value.path == str(missing)
    assert info.value.reason


def test_open_document_is_clean_and_named(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"a\tb\n")

    document = fileio.open_document(str(path), tab_stop=4)

    assert document.filename == str(path)
    assert document.dirty == 0
    assert document.rows[0].render == b"a   b"


def test_save_truncates_existing_content(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_bytes(b"a much longer previous body\n")

    written = fileio.save(str(path), b"short\n")

    assert written == 6
    assert path.read_bytes() == b"short\n"


def test_save_creates_file(tmp_path: Path) -> None:
    path = tmp_path / "new.txt"

    assert fileio.save(str(path), b"") == 0
    assert path.exists()


def test_save_propagates_os_errors(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        fileio.save(str(tmp_path / "missing" / "out.txt"), b"x")
