"""Raw-mode terminal I/O over a pair of file descriptors."""

from __future__ import annotations

import errno
import os
import re
import sys
import termios
from typing import Optional, Protocol

from smol_editor.errors import TerminalError
from smol_editor.runtime import telemetry

CLEAR_AND_HOME = b"\x1b[2J\x1b[H"
CURSOR_FAR_CORNER = b"\x1b[999C\x1b[999B"
CURSOR_REPORT_QUERY = b"\x1b[6n"

_CURSOR_REPORT = re.compile(rb"\x1b\[(\d+);(\d+)R")
_REPORT_MAX_BYTES = 32


class TerminalTransport(Protocol):
    """What the host loop needs from a terminal."""

    def read_byte(self) -> int: ...

    def write(self, data: bytes) -> None: ...


def parse_cursor_report(data: bytes) -> tuple[int, int]:
    """Parse a ``ESC [ rows ; cols R`` cursor position report."""

    match = _CURSOR_REPORT.search(data)
    if match is None:
        raise TerminalError("cursor position report")
    return int(match.group(1)), int(match.group(2))


class RawTerminal:
    """Context manager owning raw mode on the controlling terminal.

    Reads are single bytes with a tenth-of-a-second timeout; ``read_byte``
    keeps polling until a byte arrives. The saved attributes are put back
    on every exit path. Leaving because of an exception also clears the
    screen so the diagnostic is printed onto a clean terminal.
    """

    def __init__(
        self, fd_in: Optional[int] = None, fd_out: Optional[int] = None
    ) -> None:
        self.fd_in = sys.stdin.fileno() if fd_in is None else fd_in
        self.fd_out = sys.stdout.fileno() if fd_out is None else fd_out
        self._saved: Optional[list] = None

    def __enter__(self) -> "RawTerminal":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is not None:
                self.write(CLEAR_AND_HOME)
        finally:
            self.restore()

    def enable(self) -> None:
        try:
            self._saved = termios.tcgetattr(self.fd_in)
        except termios.error as exc:
            raise TerminalError("tcgetattr", errno=exc.args[0]) from exc

        raw = termios.tcgetattr(self.fd_in)
        raw[0] &= ~(
            termios.BRKINT
            | termios.ICRNL
            | termios.INPCK
            | termios.ISTRIP
            | termios.IXON
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            self._saved = None
            raise TerminalError("tcsetattr", errno=exc.args[0]) from exc
        telemetry.record_event("terminal.raw", level="debug", data={"fd": self.fd_in})

    def restore(self) -> None:
        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, saved)
        except termios.error as exc:
            raise TerminalError("tcsetattr", errno=exc.args[0]) from exc
        telemetry.record_event("terminal.restore", level="debug")

    def read_byte(self) -> int:
        while True:
            data = self._read_once()
            if data:
                return data[0]

    def _read_once(self) -> bytes:
        try:
            return os.read(self.fd_in, 1)
        except InterruptedError:
            return b""
        except OSError as exc:
            if exc.errno == errno.EAGAIN:
                return b""
            raise TerminalError("read", errno=exc.errno) from exc

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            try:
                written = os.write(self.fd_out, view)
            except OSError as exc:
                raise TerminalError("write", errno=exc.errno) from exc
            view = view[written:]

    def window_size(self) -> tuple[int, int]:
        """Terminal ``(rows, cols)``, asking the cursor if the ioctl fails."""

        try:
            size = os.get_terminal_size(self.fd_out)
        except OSError:
            size = None
        if size is not None and size.columns > 0 and size.lines > 0:
            return size.lines, size.columns
        return self._query_cursor_size()

    def _query_cursor_size(self) -> tuple[int, int]:
        self.write(CURSOR_FAR_CORNER + CURSOR_REPORT_QUERY)
        reply = bytearray()
        while len(reply) < _REPORT_MAX_BYTES:
            chunk = self._read_once()
            if not chunk:
                break
            reply += chunk
            if chunk == b"R":
                break
        rows, cols = parse_cursor_report(bytes(reply))
        telemetry.record_event(
            "terminal.cursor_size", level="debug", data={"rows": rows, "cols": cols}
        )
        return rows, cols


__all__ = [
    "RawTerminal",
    "TerminalTransport",
    "parse_cursor_report",
    "CLEAR_AND_HOME",
]
