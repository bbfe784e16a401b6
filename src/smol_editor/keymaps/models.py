"""Dataclasses describing keymap bindings and the actions they run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press used by key sequences."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key


@dataclass(frozen=True, slots=True)
class KeySequence:
    """One or two keystrokes; longer sequences are not resolvable."""

    strokes: tuple[KeyStroke, ...]

    MAX_LENGTH = 2

    def __post_init__(self) -> None:
        if not self.strokes:
            raise ValueError("KeySequence requires at least one stroke")
        if len(self.strokes) > self.MAX_LENGTH:
            raise ValueError(
                f"KeySequence supports at most {self.MAX_LENGTH} strokes"
            )

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(stroke.token for stroke in self.strokes)

    @classmethod
    def from_strings(cls, *keys: str) -> "KeySequence":
        return cls(strokes=tuple(KeyStroke(key) for key in keys if key))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key sequence in one mode with an action."""

    id: str
    mode: str
    sequence: KeySequence
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return " ".join(self.sequence.tokens)


__all__ = [
    "KeyStroke",
    "KeySequence",
    "ActionRef",
    "Binding",
]
