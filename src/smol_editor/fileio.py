"""Line-oriented load and whole-file save for documents."""

from __future__ import annotations

import os
from typing import List

from smol_editor.buffer import Document
from smol_editor.errors import LoadError
from smol_editor.runtime import telemetry


def load_lines(path: str) -> List[bytes]:
    """Read ``path`` as raw lines with their ``\\n``/``\\r`` endings stripped."""

    with telemetry.span("fileio::load", component="fileio", metadata={"path": path}):
        try:
            with open(path, "rb") as handle:
                return [line.rstrip(b"\r\n") for line in handle]
        except OSError as exc:
            raise LoadError(path, exc.strerror or str(exc)) from exc


def open_document(path: str, *, tab_stop: int = 2) -> Document:
    document = Document.from_lines(load_lines(path), filename=path, tab_stop=tab_stop)
    telemetry.record_event(
        "document.open", data={"path": path, "rows": document.numrows}
    )
    return document


def save(path: str, data: bytes) -> int:
    """Write ``data`` over ``path`` and return the byte count.

    Raises ``OSError`` untouched; callers decide how to surface it.
    """

    with telemetry.span("fileio::save", component="fileio", metadata={"path": path}):
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
        try:
            os.ftruncate(fd, len(data))
            written = 0
            view = memoryview(data)
            while written < len(data):
                written += os.write(fd, view[written:])
        finally:
            os.close(fd)
    return written


__all__ = ["load_lines", "open_document", "save"]
