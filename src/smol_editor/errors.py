"""Exception hierarchy for conditions the editor cannot recover from."""

from __future__ import annotations


class EditorError(RuntimeError):
    """Base class for fatal editor failures."""


class TerminalError(EditorError):
    """Raised when the controlling terminal cannot be configured or read."""

    def __init__(self, operation: str, *, errno: int | None = None) -> None:
        super().__init__(operation)
        self.operation = operation
        self.errno = errno


class LoadError(EditorError):
    """Raised when the file named on the command line cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = ["EditorError", "TerminalError", "LoadError"]
