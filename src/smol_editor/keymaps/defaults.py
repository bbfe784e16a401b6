"""Built-in keymaps that seed each mode with the editor's command set."""

from __future__ import annotations

from typing import Sequence

from smol_editor.actions import command as command_actions
from smol_editor.actions import core as core_actions
from smol_editor.actions import edit as edit_actions
from smol_editor.actions import motion as motion_actions
from smol_editor.actions import prompt as prompt_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry


def default_actions() -> tuple[ActionRef, ...]:
    """Every action the default bindings refer to.

    Built on demand so importing this module never touches half-loaded
    action modules.
    """

    return (
        ActionRef(
            "core.enter_insert", core_actions.enter_insert_mode, "Enter insert mode"
        ),
        ActionRef(
            "core.exit_to_normal", core_actions.exit_to_normal_mode, "Back to normal"
        ),
        ActionRef(
            "core.enter_visual", core_actions.enter_visual_mode, "Enter visual mode"
        ),
        ActionRef("motion.left", motion_actions.move_left, "Cursor left"),
        ActionRef("motion.down", motion_actions.move_down, "Cursor down"),
        ActionRef("motion.up", motion_actions.move_up, "Cursor up"),
        ActionRef("motion.right", motion_actions.move_right, "Cursor right"),
        ActionRef("motion.line_end", motion_actions.line_end, "End of line"),
        ActionRef("motion.line_start", motion_actions.line_start, "Start of line"),
        ActionRef("motion.word_forward", motion_actions.word_forward, "Skip right"),
        ActionRef("motion.word_backward", motion_actions.word_backward, "Skip left"),
        ActionRef("motion.last_row", motion_actions.goto_last_row, "Go to last row"),
        ActionRef("motion.first_row", motion_actions.goto_first_row, "Go to first row"),
        ActionRef("edit.delete_char", edit_actions.delete_char, "Delete before cursor"),
        ActionRef("edit.split_line", edit_actions.split_line, "Break line at cursor"),
        ActionRef("edit.open_line", edit_actions.open_line, "Open line below"),
        ActionRef("edit.delete_row", edit_actions.delete_row, "Delete current row"),
        ActionRef("command.write", command_actions.write_document, "Write to disk"),
        ActionRef("command.quit", command_actions.quit_editor, "Quit"),
        ActionRef("prompt.submit", prompt_actions.submit_prompt, "Accept prompt"),
        ActionRef("prompt.cancel", prompt_actions.cancel_prompt, "Cancel prompt"),
        ActionRef(
            "prompt.backspace", prompt_actions.prompt_backspace, "Erase prompt char"
        ),
    )


def _bind(
    mode: str, keys: Sequence[str], action_id: str, description: str = ""
) -> Binding:
    name = "".join(keys) if all(len(key) == 1 for key in keys) else "_".join(keys)
    return Binding(
        id=f"{mode}.{name}",
        mode=mode,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
        description=description,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("normal", ["h"], "motion.left"),
    _bind("normal", ["j"], "motion.down"),
    _bind("normal", ["k"], "motion.up"),
    _bind("normal", ["l"], "motion.right"),
    _bind("normal", ["$"], "motion.line_end"),
    _bind("normal", ["^"], "motion.line_start"),
    _bind("normal", ["w"], "motion.word_forward"),
    _bind("normal", ["b"], "motion.word_backward"),
    _bind("normal", ["G"], "motion.last_row"),
    _bind("normal", ["g", "g"], "motion.first_row"),
    _bind("normal", ["d", "d"], "edit.delete_row"),
    _bind("normal", [":", "w"], "command.write"),
    _bind("normal", [":", "q"], "command.quit"),
    _bind("normal", ["i"], "core.enter_insert"),
    _bind("normal", ["v"], "core.enter_visual"),
    _bind("normal", ["ESC"], "core.exit_to_normal", "Stay in normal mode"),
    _bind("normal", ["ENTER"], "edit.split_line"),
    _bind("normal", ["o"], "edit.open_line"),
    _bind("insert", ["ESC"], "core.exit_to_normal", "Leave insert mode"),
    _bind("insert", ["ENTER"], "edit.split_line"),
    _bind("insert", ["BACKSPACE"], "edit.delete_char"),
    _bind("visual", ["ESC"], "core.exit_to_normal", "Leave visual mode"),
    _bind("prompt", ["ESC"], "prompt.cancel"),
    _bind("prompt", ["ENTER"], "prompt.submit"),
    _bind("prompt", ["BACKSPACE"], "prompt.backspace"),
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register built-in actions and bindings for every mode."""

    for action in default_actions():
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "default_actions", "DEFAULT_BINDINGS"]
