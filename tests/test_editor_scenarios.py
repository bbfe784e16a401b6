from __future__ import annotations

from pathlib import Path

from smol_editor.actions.command import SAVE_AS_LABEL
from smol_editor.config import EditorConfig
from smol_editor.editor import Editor
from smol_editor.modes import KeyInput

ESC = KeyInput(key="ESC")
ENTER = KeyInput(key="ENTER")
BACKSPACE = KeyInput(key="BACKSPACE")


def open_file(tmp_path: Path, content: bytes = b"", **config: int) -> Editor:
    path = tmp_path / "note.txt"
    path.write_bytes(content)
    return Editor.open(str(path), config=EditorConfig(**config))


def message(editor: Editor) -> str:
    return editor.state.status.text


def test_insert_write_quit_writes_file(tmp_path: Path) -> None:
    editor = open_file(tmp_path)

    editor.feed("iab")
    editor.process_key(ESC)
    editor.feed(":w")
    assert message(editor) == "3 bytes written to disk"
    editor.feed(":q")

    assert (tmp_path / "note.txt").read_bytes() == b"ab\n"
    assert editor.quit_requested is True
    assert editor.state.document.dirty == 0


def test_gg_and_G_jump_between_first_and_last_row(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"one\ntwo\nthree\nfour\n")

    editor.feed("G")
    assert editor.state.buffer.cursor.position == (0, 3)
    editor.feed("gg")
    assert editor.state.buffer.cursor.position == (0, 0)


def test_dirty_quit_needs_confirmation(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"x\n")
    editor.feed("dd")

    editor.feed(":q")
    assert editor.quit_requested is False
    assert message(editor) == (
        "WARN! File has unsaved changes. Press :q 1 more times to quit"
    )

    editor.feed(":q")
    assert editor.quit_requested is True


def test_other_key_resets_quit_confirmation(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"x\ny\n", quit_times=1)
    editor.feed("dd")

    editor.feed(":q")
    editor.feed("j")
    editor.feed(":q")

    assert editor.quit_requested is False
    assert editor.state.quit_attempts_remaining == 0


def test_clean_document_quits_immediately(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"x\n")

    editor.feed(":q")

    assert editor.quit_requested is True


def test_enter_splits_in_normal_and_insert(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"abcd\n")
    editor.feed("ll")

    editor.process_key(ENTER)
    assert editor.state.document.lines() == (b"ab", b"cd")
    assert editor.state.mode == "normal"

    editor.feed("il")
    editor.process_key(ENTER)
    assert editor.state.document.lines() == (b"ab", b"l", b"cd")


def test_backspace_joins_rows_in_insert(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"ab\ncd\n")
    editor.feed("ji")

    editor.process_key(BACKSPACE)

    assert editor.state.document.lines() == (b"abcd",)
    assert editor.state.buffer.cursor.position == (2, 0)


def test_o_opens_line_and_stays_in_normal(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"ab\ncd\n")

    editor.feed("o")

    assert editor.state.document.lines() == (b"ab", b"", b"cd")
    assert editor.state.mode == "normal"
    assert editor.state.buffer.cursor.position == (0, 1)


def test_visual_mode_round_trip(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"abc\n")

    editor.feed("vdd")
    assert editor.state.mode == "visual"
    assert editor.state.document.lines() == (b"abc",)

    editor.process_key(ESC)
    assert editor.state.mode == "normal"


def test_line_motions(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"hello world and more\n")

    editor.feed("$")
    assert editor.state.buffer.cursor.position == (20, 0)
    editor.feed("b")
    assert editor.state.buffer.cursor.position == (10, 0)
    editor.feed("^")
    assert editor.state.buffer.cursor.position == (0, 0)
    editor.feed("w")
    assert editor.state.buffer.cursor.position == (10, 0)


def test_save_as_prompt_names_untitled_document(tmp_path: Path) -> None:
    editor = Editor.open()
    target = tmp_path / "fresh.txt"

    editor.feed("ihi")
    editor.process_key(ESC)
    editor.feed(":w")
    assert editor.state.mode == "prompt"
    assert message(editor) == SAVE_AS_LABEL

    editor.feed(str(target) + "x")
    editor.process_key(BACKSPACE)
    editor.process_key(ENTER)

    assert editor.state.mode == "normal"
    assert editor.state.document.filename == str(target)
    assert target.read_bytes() == b"hi\n"
    assert message(editor) == "3 bytes written to disk"


def test_save_as_prompt_ignores_empty_submit() -> None:
    editor = Editor.open()
    editor.feed(":w")

    editor.process_key(ENTER)

    assert editor.state.mode == "prompt"


def test_save_as_prompt_cancel(tmp_path: Path) -> None:
    editor = Editor.open()
    editor.feed("ix")
    editor.process_key(ESC)
    editor.feed(":w")

    editor.feed("abc")
    assert message(editor) == SAVE_AS_LABEL + "abc"
    editor.process_key(ESC)

    assert editor.state.mode == "normal"
    assert message(editor) == "Save aborted"
    assert editor.state.document.filename is None
    assert editor.state.document.dirty > 0


def test_failed_save_keeps_document_dirty(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"x\n")
    editor.state.document.filename = str(tmp_path / "missing" / "note.txt")
    editor.feed("dd")

    editor.feed(":w")

    assert message(editor).startswith("Can't save! I/O error: ")
    assert editor.state.document.dirty > 0


def test_bus_reports_edits_and_writes(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"x\n")
    events: list[str] = []
    for name in ("buffer.edit", "command.write"):
        editor.context.bus.subscribe(name, lambda payload, n=name: events.append(n))

    editor.feed("dd:w")

    assert events == ["buffer.edit", "command.write"]


def test_manager_publishes_default_keymaps() -> None:
    editor = Editor.open()
    extras = editor.context.extras

    assert extras["keymap_registry"] is editor.manager.keymap_registry
    assert extras["keymap_resolver"] is editor.manager.keymap_resolver
    binding = editor.manager.keymap_registry.get_binding("normal.dd")
    assert binding.action_id == "edit.delete_row"


def test_repeated_d_keeps_deleting_rows(tmp_path: Path) -> None:
    editor = open_file(tmp_path, b"a\nb\nc\nd\n")

    editor.feed("ddd")

    assert editor.state.document.lines() == (b"c", b"d")
