"""Editing verbs bound to keys by the default keymaps."""

from .core import enter_insert_mode, enter_visual_mode, exit_to_normal_mode
from .motion import (
    goto_first_row,
    goto_last_row,
    line_end,
    line_start,
    move_down,
    move_left,
    move_right,
    move_up,
    word_backward,
    word_forward,
)
from .edit import delete_char, delete_row, insert_byte, open_line, split_line
from .command import quit_editor, save_document, write_document
from .prompt import cancel_prompt, prompt_backspace, submit_prompt

__all__ = [
    "enter_insert_mode",
    "enter_visual_mode",
    "exit_to_normal_mode",
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
    "insert_byte",
    "delete_char",
    "split_line",
    "open_line",
    "delete_row",
    "write_document",
    "save_document",
    "quit_editor",
    "submit_prompt",
    "cancel_prompt",
    "prompt_backspace",
]
