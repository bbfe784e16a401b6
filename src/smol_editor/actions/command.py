"""Actions behind the ``:`` prefixed commands (write and quit)."""

from __future__ import annotations

from smol_editor import fileio
from smol_editor.modes.base_mode import (
    PROMPT_REQUEST,
    ModeContext,
    ModeResult,
    PromptRequest,
)
from smol_editor.runtime import telemetry

SAVE_AS_LABEL = "Save as: "


def write_document(context: ModeContext, match) -> ModeResult:
    del match
    if context.state.document.filename is None:
        context.extras[PROMPT_REQUEST] = PromptRequest(
            label=SAVE_AS_LABEL,
            on_submit=_save_as,
            on_cancel=_save_aborted,
        )
        return ModeResult(consumed=True, switch_to="prompt", status="prompt")
    return save_document(context)


def save_document(context: ModeContext) -> ModeResult:
    state = context.state
    document = state.document
    path = document.filename
    if path is None:
        raise ValueError("save_document requires a filename")

    data = document.rows_to_string()
    try:
        written = fileio.save(path, data)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        state.set_status_message(f"Can't save! I/O error: {reason}")
        telemetry.record_event(
            "document.save_failed", level="error", data={"path": path, "reason": reason}
        )
        return ModeResult(consumed=True, status="write_failed", message=reason)

    document.mark_clean()
    state.set_status_message(f"{written} bytes written to disk")
    telemetry.record_event("document.save", data={"path": path, "bytes": written})
    context.bus.emit("command.write", {"path": path, "bytes": written})
    return ModeResult(consumed=True, status="write", message=path)


def quit_editor(context: ModeContext, match) -> ModeResult:
    del match
    state = context.state
    if state.document.dirty and state.quit_attempts_remaining > 0:
        state.set_status_message(
            "WARN! File has unsaved changes. "
            f"Press :q {state.quit_attempts_remaining} more times to quit"
        )
        state.quit_attempts_remaining -= 1
        return ModeResult(consumed=True, status="quit_blocked")

    state.quit_requested = True
    telemetry.record_event("editor.quit", data={"dirty": state.document.dirty})
    context.bus.emit("command.quit", {"dirty": state.document.dirty})
    return ModeResult(consumed=True, status="quit")


def _save_as(context: ModeContext, filename: str) -> ModeResult:
    context.state.document.filename = filename
    result = save_document(context)
    result.switch_to = "normal"
    return result


def _save_aborted(context: ModeContext) -> ModeResult:
    context.state.set_status_message("Save aborted")
    return ModeResult(consumed=True, switch_to="normal", status="write_aborted")


__all__ = ["write_document", "save_document", "quit_editor", "SAVE_AS_LABEL"]
