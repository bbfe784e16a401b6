"""Translate raw input bytes into ``KeyInput`` events."""

from __future__ import annotations

from smol_editor.modes import KeyInput

ESC = 0x1B
ENTER = 0x0D
TAB = 0x09
BACKSPACE_CODES = frozenset({0x7F, 0x08})

_NAMED = {
    ESC: "ESC",
    ENTER: "ENTER",
}


def translate_byte(byte: int) -> KeyInput:
    """Map one byte read from the terminal to the key the modes understand.

    Printable ASCII is its own key. Control bytes without a name become
    ``ctrl`` chords on the matching lowercase letter, so ``0x11`` is
    ``ctrl+q``.
    """

    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte: {byte!r}")
    if byte in _NAMED:
        return KeyInput(key=_NAMED[byte])
    if byte in BACKSPACE_CODES:
        return KeyInput(key="BACKSPACE")
    if byte == TAB:
        return KeyInput(key="TAB", text="\t")
    if 0x20 <= byte < 0x7F:
        char = chr(byte)
        return KeyInput(key=char, text=char)
    if byte < 0x20:
        return KeyInput(key=chr(byte | 0x60), modifiers=("ctrl",))
    return KeyInput(key=f"0x{byte:02x}")


__all__ = ["translate_byte"]
