"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator

from smol_editor.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a new binding conflicts with existing entries."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and binding metadata.

    A key that starts a two-key binding may not also be bound on its own in
    the same mode: it always waits for its second key.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action "
                    f"'{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding)
            if conflicts:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise KeymapConflictError(binding, conflicts)

            if binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._mode_index.setdefault(binding.mode, {})[
                binding.key_signature
            ] = binding.id
            self._revision += 1
            return binding

    def iter_bindings(self, mode: str) -> Iterator[Binding]:
        for binding_id in self._mode_index.get(mode, {}).values():
            yield self._bindings[binding_id]

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        """Bindings in the same mode that would shadow ``binding``.

        That is an identical sequence, a single key equal to the prefix of a
        two-key binding, or a two-key binding whose prefix is bound alone.
        """

        tokens = binding.sequence.tokens
        conflicts: list[Binding] = []
        for existing in self.iter_bindings(binding.mode):
            if existing.id == binding.id:
                continue
            other = existing.sequence.tokens
            shorter, longer = sorted((tokens, other), key=len)
            if longer[: len(shorter)] == shorter:
                conflicts.append(existing)
        return conflicts


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
]
