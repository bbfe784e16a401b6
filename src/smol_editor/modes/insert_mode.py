"""Insert mode: literal text entry."""

from __future__ import annotations

from smol_editor.actions import edit as edit_actions

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import (
    execute_match,
    key_to_token,
    require_keymap_resolver,
    text_byte,
)


class InsertMode(Mode):
    """Types printable bytes into the buffer.

    Only the insert keymap (``ESC``, ``ENTER``, ``BACKSPACE``) is consulted;
    normal-mode commands never fire here.
    """

    name = "insert"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, (key_to_token(key),))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)

        byte = text_byte(key)
        if byte is None:
            return ModeResult(consumed=False, status="miss", message=key.key)
        return edit_actions.insert_byte(self.context, byte)
