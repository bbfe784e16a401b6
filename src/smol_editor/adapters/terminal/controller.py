"""Blocking host loop that drives an ``Editor`` from a raw terminal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from smol_editor.editor import Editor
from smol_editor.modes import ModeResult
from smol_editor.runtime import telemetry

from .keys import translate_byte
from .transport import CLEAR_AND_HOME, TerminalTransport


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TerminalHooks:
    """Optional callbacks a host may use to observe the loop."""

    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TerminalHost:
    """Bridges terminal bytes to the editor and frames back to the terminal.

    Every iteration draws one frame, blocks for one byte, and dispatches it.
    The loop ends once a ``:q`` has been accepted; the screen is cleared on
    the way out.
    """

    EVENTS = ("buffer.edit", "command.write", "command.quit")

    def __init__(
        self,
        editor: Editor,
        transport: TerminalTransport,
        hooks: TerminalHooks | None = None,
    ) -> None:
        self.editor = editor
        self.transport = transport
        self.hooks = hooks or TerminalHooks()
        self._subscribe_events()

    def run(self) -> int:
        with telemetry.span("host::run", component="host"):
            while not self.editor.quit_requested:
                self.transport.write(self.editor.refresh())
                self.handle_byte(self.transport.read_byte())
            self.transport.write(CLEAR_AND_HOME)
        return 0

    def handle_byte(self, byte: int) -> ModeResult:
        key = translate_byte(byte)
        self._log_state("key ->", key=key.key, mods=key.modifiers or None)
        result = self.editor.process_key(key)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.editor.context.bus
        for event in self.EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        line = " ".join([prefix, *(f"{k}={v!r}" for k, v in snapshot.items())])
        self.hooks.log(line)
        telemetry.record_event("host.trace", level="debug", data={"line": line})

    def _state_metadata(self) -> Dict[str, object]:
        state = self.editor.state
        return {
            "mode": state.mode,
            "cursor": state.buffer.cursor.position,
            "buffer": state.buffer.name,
            "dirty": state.document.dirty,
        }


__all__ = ["TerminalHost", "TerminalHooks"]
