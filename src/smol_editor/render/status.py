"""Transient message shown in the message bar."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass(slots=True)
class StatusMessage:
    """Text plus the wall-clock time it was set at."""

    text: str = ""
    set_at: float = 0.0
    clock: Callable[[], float] = field(default=time.time, repr=False)

    def set(self, text: str) -> None:
        self.text = text
        self.set_at = self.clock()

    def clear(self) -> None:
        self.set("")

    def visible(self, timeout: float, *, now: float | None = None) -> str:
        current = self.clock() if now is None else now
        if self.text and current - self.set_at < timeout:
            return self.text
        return ""
