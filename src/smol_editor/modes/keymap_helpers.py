"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from smol_editor.keymaps.resolver import KeymapResolver, ResolutionMatch
from smol_editor.runtime import telemetry

from .base_mode import KeyInput, ModeContext, ModeResult


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        modifier = "+".join(key.modifiers)
        return f"{modifier}+{key.key}"
    return key.key


def require_keymap_resolver(context: ModeContext) -> KeymapResolver:
    resolver = context.extras.get("keymap_resolver")
    if not isinstance(resolver, KeymapResolver):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver


def execute_match(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    with telemetry.span(
        "keymaps::execute",
        component="keymaps",
        metadata={"binding_id": match.binding.id, "action": match.action.id},
    ):
        outcome = match.action(context, match)

    if isinstance(outcome, ModeResult):
        return outcome
    return ModeResult(consumed=True)


def text_byte(key: KeyInput) -> int | None:
    """The single byte a key types, or ``None`` for non-inserting keys.

    Printable ASCII and tab insert; every other control byte does not.
    """

    if key.modifiers or not key.text or len(key.text) != 1:
        return None
    code = ord(key.text)
    if code == 0x09 or 0x20 <= code < 0x7F:
        return code
    return None


__all__ = [
    "key_to_token",
    "require_keymap_resolver",
    "execute_match",
    "text_byte",
]
