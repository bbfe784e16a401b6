"""Wiring of state, modes and renderer into one editor object."""

from __future__ import annotations

from typing import Optional

from smol_editor import fileio
from smol_editor.config import EditorConfig
from smol_editor.modes import (
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeResult,
    NormalMode,
    PromptMode,
    VisualMode,
)
from smol_editor.modes.mode_manager import ModeManager
from smol_editor.render import FrameRenderer
from smol_editor.state import DEFAULT_TERMINAL_SIZE, EditorState


def create_default_manager(context: ModeContext) -> ModeManager:
    """Build a ModeManager with the standard mode set + default keymaps."""

    manager = ModeManager(context)
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    manager.register_mode(VisualMode)
    manager.register_mode(PromptMode)
    return manager


class Editor:
    """One open document plus the machinery that edits and draws it."""

    def __init__(self, state: EditorState, *, bus: Optional[ModeBus] = None) -> None:
        self.state = state
        self.context = ModeContext(state=state, bus=bus or ModeBus(), extras={})
        self.manager = create_default_manager(self.context)
        self.renderer = FrameRenderer(state)

    @classmethod
    def open(
        cls,
        path: Optional[str] = None,
        *,
        config: Optional[EditorConfig] = None,
        terminal_size: tuple[int, int] = DEFAULT_TERMINAL_SIZE,
    ) -> "Editor":
        """Start on ``path`` if given, else on an empty untitled document.

        A path that cannot be read raises ``LoadError``.
        """

        config = config or EditorConfig()
        document = (
            fileio.open_document(path, tab_stop=config.tab_stop)
            if path is not None
            else None
        )
        state = EditorState.create(
            config=config, document=document, terminal_size=terminal_size
        )
        return cls(state)

    @property
    def quit_requested(self) -> bool:
        return self.state.quit_requested

    def process_key(self, key: KeyInput) -> ModeResult:
        return self.manager.handle_key(key)

    def feed(self, keys: str) -> list[ModeResult]:
        """Dispatch each character of ``keys`` as a plain key press."""

        return [self.process_key(KeyInput(key=char, text=char)) for char in keys]

    def refresh(self, *, now: Optional[float] = None) -> bytes:
        return self.renderer.render(now=now)


__all__ = ["Editor", "create_default_manager"]
