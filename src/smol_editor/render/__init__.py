"""Viewport arithmetic and frame assembly."""

from .frame import FrameRenderer, move_cursor
from .status import StatusMessage
from .viewport import RESERVED_ROWS, Viewport

__all__ = ["FrameRenderer", "StatusMessage", "Viewport", "RESERVED_ROWS", "move_cursor"]
