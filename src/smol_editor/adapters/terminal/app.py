"""Command-line entry point: ``smol [path]``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from smol_editor.config import VERSION, EditorConfig
from smol_editor.editor import Editor
from smol_editor.errors import EditorError
from smol_editor.runtime import telemetry

from .controller import TerminalHost
from .transport import RawTerminal


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="smol", description="A small modal text editor."
    )
    parser.add_argument("path", nargs="?", help="File to open")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--debug-log",
        action="store_true",
        help="Write debug telemetry to $SMOL_LOG_FILE (default: smol-debug.log)",
    )
    return parser.parse_args(argv)


def run(path: Optional[str], *, config: Optional[EditorConfig] = None) -> int:
    """Edit ``path`` on the controlling terminal until the user quits."""

    config = config or EditorConfig.from_env()
    with RawTerminal() as terminal:
        editor = Editor.open(path, config=config, terminal_size=terminal.window_size())
        return TerminalHost(editor, terminal).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.debug_log:
        telemetry.configure(preset="development")
    try:
        return run(args.path)
    except EditorError as exc:
        telemetry.record_event("editor.fatal", level="error", data={"error": str(exc)})
        print(f"smol: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
