"""Mode manager coordinating Normal/Insert/Visual/Prompt dispatch."""

from __future__ import annotations

from typing import Dict, Optional, Type

from smol_editor.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from smol_editor.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Owns the active mode, handles transitions, and dispatches key events.

    The default keymaps are loaded into a fresh registry on construction.
    The active mode's name is mirrored onto ``EditorState.mode`` so the
    renderer can show it without knowing about mode objects.
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.keymap_registry = KeymapRegistry(logger_name="smol_editor.keymaps")
        load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = KeymapResolver(
            self.keymap_registry, logger_name="smol_editor.keymaps"
        )
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def get_mode(self, name: str) -> Mode:
        try:
            return self._modes[name]
        except KeyError as exc:
            raise KeyError(f"Unknown mode '{name}'") from exc

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            self.context.state.mode = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self.context.state.mode = name
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", data={"mode": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result
