"""Mode switching actions shared across modes."""

from __future__ import annotations

from smol_editor.modes.base_mode import ModeContext, ModeResult


def enter_insert_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def exit_to_normal_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="normal", message="exit_to_normal")


def enter_visual_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="visual", message="enter_visual")


__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_visual_mode",
]
