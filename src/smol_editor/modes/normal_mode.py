"""Normal mode: motions, two-key commands and ``:`` prefixed commands."""

from __future__ import annotations

from smol_editor.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver
from .pending import Pending

# Keys that leave the quit confirmation counter alone.
QUIT_PREFIX = ":"
QUIT_BLOCKED = "quit_blocked"


class NormalMode(Mode):
    """Resolves each key against the normal-mode keymap.

    A key that only starts a two-key binding (``g``, ``d``, ``:``) is held as
    ``Pending.awaiting(key)``. The following key is first tried as the second
    half of that binding and otherwise resolved on its own. Only the last key
    is remembered: it stays pending whenever it is itself a prefix, even when
    it just completed a command, so ``ddd`` deletes two rows.
    """

    name = "normal"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)
        self.pending: Pending = Pending.NONE

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.pending = Pending.NONE

    def handle_key(self, key: KeyInput) -> ModeResult:
        token = key_to_token(key)
        previous, self.pending = self.pending, Pending.NONE

        single = self._resolver.resolve(self.name, (token,))
        result = single
        if previous.is_awaiting:
            paired = self._resolver.resolve(self.name, (previous.key, token))
            if paired.status == "match":
                result = paired

        if single.status == "pending":
            self.pending = Pending.awaiting(token)

        if result.status == "match" and result.match:
            outcome = execute_match(self.context, result.match)
        elif result.status == "pending":
            outcome = ModeResult(consumed=True, status="pending", message=token)
        else:
            telemetry.record_event(
                "keymaps.unbound", level="debug", data={"mode": self.name, "key": token}
            )
            outcome = ModeResult(consumed=False, status="miss", message=token)

        if token != QUIT_PREFIX and outcome.status != QUIT_BLOCKED:
            self.context.state.reset_quit_attempts()
        return outcome
