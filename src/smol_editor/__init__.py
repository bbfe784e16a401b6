"""A small modal terminal text editor."""

from .config import VERSION

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "modes",
    "keymaps",
    "render",
    "runtime",
    "editor",
]

__version__ = VERSION
