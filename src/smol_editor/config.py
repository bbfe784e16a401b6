"""Editor modes and tunable constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

ENV_PREFIX = "SMOL_"
VERSION = "0.0.1"


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    PROMPT = "prompt"


@dataclass(frozen=True)
class ModeConfig:
    """How a mode presents itself in the status bar."""

    label: str


MODE_CONFIGS = {
    EditorMode.NORMAL: ModeConfig("N"),
    EditorMode.INSERT: ModeConfig("I"),
    EditorMode.VISUAL: ModeConfig("V"),
    EditorMode.PROMPT: ModeConfig("P"),
}


def mode_label(name: str) -> str:
    try:
        return MODE_CONFIGS[EditorMode(name)].label
    except ValueError:
        return "?"


@dataclass(frozen=True)
class EditorConfig:
    """Editor-wide settings.

    ``quit_times`` is how many extra ``:q`` presses a dirty document needs
    before the editor gives up on it.
    """

    tab_stop: int = 2
    quit_times: int = 1
    message_timeout: float = 5.0
    version: str = VERSION
    welcome: str = "Smol editor -- version {version}"
    tagline: str = "Simple, Fast AF, Nvim-like"

    def __post_init__(self) -> None:
        if self.tab_stop < 1:
            raise ValueError("tab_stop must be at least 1")
        if self.quit_times < 0:
            raise ValueError("quit_times cannot be negative")

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            tab_stop=_env_int("TAB_STOP", cls.tab_stop, minimum=1),
            quit_times=_env_int("QUIT_TIMES", cls.quit_times, minimum=0),
        )


def _env_int(key: str, fallback: int, *, minimum: int) -> int:
    """Integer from ``SMOL_<key>``, or ``fallback`` if unset or invalid."""

    value = os.environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= minimum else fallback


__all__ = ["EditorConfig", "EditorMode", "ModeConfig", "MODE_CONFIGS", "mode_label"]
