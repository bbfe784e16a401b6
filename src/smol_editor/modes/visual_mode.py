"""Visual mode: declared but without selection behaviour."""

from __future__ import annotations

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class VisualMode(Mode):
    """Only ``ESC`` does anything; every other key is absorbed."""

    name = "visual"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, (key_to_token(key),))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)
        return ModeResult(consumed=True, status="noop", message=key.key)
