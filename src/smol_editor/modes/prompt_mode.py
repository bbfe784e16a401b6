"""Prompt mode: a one-line text entry shown in the message bar."""

from __future__ import annotations

from typing import List, Optional

from .base_mode import (
    PROMPT_REQUEST,
    KeyInput,
    Mode,
    ModeContext,
    ModeResult,
    PromptRequest,
)
from .keymap_helpers import (
    execute_match,
    key_to_token,
    require_keymap_resolver,
    text_byte,
)


class PromptMode(Mode):
    """Collects text for the ``PromptRequest`` stored in the context extras.

    The label is echoed literally in front of the typed text on every key.
    ``ENTER`` with nothing typed is ignored.
    """

    name = "prompt"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)
        self._typed: List[str] = []

    @property
    def request(self) -> Optional[PromptRequest]:
        request = self.context.extras.get(PROMPT_REQUEST)
        return request if isinstance(request, PromptRequest) else None

    @property
    def current_text(self) -> str:
        return "".join(self._typed)

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._typed.clear()
        self._sync_message()

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._typed.clear()
        self.context.extras.pop(PROMPT_REQUEST, None)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, (key_to_token(key),))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)

        byte = text_byte(key)
        if byte is None:
            return ModeResult(consumed=False, status="miss", message=key.key)
        self._typed.append(chr(byte))
        self._sync_message()
        return ModeResult(consumed=True, status="editing")

    def backspace(self) -> ModeResult:
        if self._typed:
            self._typed.pop()
        self._sync_message()
        return ModeResult(consumed=True, status="editing")

    def submit(self) -> ModeResult:
        text = self.current_text
        request = self.request
        if request is None:
            return ModeResult(consumed=True, switch_to="normal", status="prompt_cancel")
        if not text:
            return ModeResult(consumed=True, status="editing")
        self.context.state.set_status_message("")
        return request.on_submit(self.context, text)

    def cancel(self) -> ModeResult:
        request = self.request
        self.context.state.set_status_message("")
        if request is not None and request.on_cancel is not None:
            return request.on_cancel(self.context)
        return ModeResult(consumed=True, switch_to="normal", status="prompt_cancel")

    def _sync_message(self) -> None:
        request = self.request
        if request is not None:
            self.context.state.set_status_message(request.label + self.current_text)
