"""Mode manager, pending-key state, and per-mode dispatch logic."""

from .base_mode import (
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
    PromptRequest,
)
from .pending import Pending
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .visual_mode import VisualMode
from .prompt_mode import PromptMode

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "PromptRequest",
    "Pending",
    "NormalMode",
    "InsertMode",
    "VisualMode",
    "PromptMode",
]
