"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

if TYPE_CHECKING:
    from smol_editor.state import EditorState

# ModeContext.extras key holding the active PromptRequest.
PROMPT_REQUEST = "prompt_request"


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class PromptRequest:
    """A one-line question asked through the message bar.

    ``label`` is shown verbatim in front of the typed text.
    """

    label: str
    on_submit: Callable[["ModeContext", str], ModeResult]
    on_cancel: Optional[Callable[["ModeContext"], ModeResult]] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can access."""

    state: "EditorState"
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def buffer(self):
        return self.state.buffer


class ModeBus:
    """Minimal event bus letting modes exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError
