"""Declarative keymap registry and default bindings."""

from .models import ActionRef, Binding, KeySequence, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeySequence",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
