"""Pending two-key command state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True, slots=True)
class Pending:
    """Either nothing pending, or the first key of a two-key command.

    Only the single previous key is ever remembered.
    """

    key: Optional[str] = None

    NONE: ClassVar["Pending"]

    @classmethod
    def awaiting(cls, key: str) -> "Pending":
        if not key:
            raise ValueError("pending key cannot be empty")
        return cls(key)

    @property
    def is_awaiting(self) -> bool:
        return self.key is not None

    def __str__(self) -> str:
        return f"awaiting({self.key})" if self.key else "none"


Pending.NONE = Pending()
