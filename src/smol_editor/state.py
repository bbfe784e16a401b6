"""The single owned object holding everything the editor knows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from smol_editor.buffer import Buffer, Document
from smol_editor.config import EditorConfig, EditorMode
from smol_editor.render.status import StatusMessage
from smol_editor.render.viewport import Viewport

DEFAULT_TERMINAL_SIZE = (24, 80)


@dataclass
class EditorState:
    """Document, cursor, viewport, mode and quit confirmation bookkeeping.

    Passed to every action by reference; there is no module-level editor.
    """

    config: EditorConfig
    buffer: Buffer
    viewport: Viewport
    status: StatusMessage = field(default_factory=StatusMessage)
    mode: str = EditorMode.NORMAL.value
    quit_attempts_remaining: int = 0
    quit_requested: bool = False

    def __post_init__(self) -> None:
        self.quit_attempts_remaining = self.config.quit_times

    @classmethod
    def create(
        cls,
        *,
        config: Optional[EditorConfig] = None,
        document: Optional[Document] = None,
        terminal_size: tuple[int, int] = DEFAULT_TERMINAL_SIZE,
    ) -> "EditorState":
        config = config or EditorConfig()
        document = document or Document(tab_stop=config.tab_stop)
        rows, cols = terminal_size
        return cls(
            config=config,
            buffer=Buffer(document=document),
            viewport=Viewport.from_terminal(rows, cols),
        )

    @property
    def document(self) -> Document:
        return self.buffer.document

    def set_status_message(self, text: str) -> None:
        self.status.set(text)

    def reset_quit_attempts(self) -> None:
        self.quit_attempts_remaining = self.config.quit_times

