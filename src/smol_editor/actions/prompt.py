"""Actions bound to the keys that drive prompt mode."""

from __future__ import annotations

from smol_editor.modes.base_mode import ModeContext, ModeResult


def _prompt_mode(context: ModeContext):
    manager = context.extras.get("mode_manager")
    if manager is None:
        raise RuntimeError("ModeContext.extras missing 'mode_manager'")
    return manager.get_mode("prompt")


def submit_prompt(context: ModeContext, match) -> ModeResult:
    del match
    return _prompt_mode(context).submit()


def cancel_prompt(context: ModeContext, match) -> ModeResult:
    del match
    return _prompt_mode(context).cancel()


def prompt_backspace(context: ModeContext, match) -> ModeResult:
    del match
    return _prompt_mode(context).backspace()


__all__ = ["submit_prompt", "cancel_prompt", "prompt_backspace"]
