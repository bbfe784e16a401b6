"""Raw ANSI terminal host for the editor."""

from .controller import TerminalHooks, TerminalHost
from .keys import translate_byte
from .transport import RawTerminal, TerminalTransport, parse_cursor_report

__all__ = [
    "RawTerminal",
    "TerminalHooks",
    "TerminalHost",
    "TerminalTransport",
    "parse_cursor_report",
    "translate_byte",
]
