"""Hecto CLI entry point.

Allows running via `python -m hecto` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import platformdirs

from .version import get_version_string

USAGE = "usage: hecto [--version | --keytest] [--debug] [FILE]"

logger = logging.getLogger(__name__)


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging() -> Path:
    """Send DEBUG logging to a file in the user log directory.

    Nothing is logged to the terminal; it is in raw mode while the
    editor runs.
    """
    log_dir = Path(platformdirs.user_log_dir("hecto", appauthor=False))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "hecto.log"
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return log_file


def run_keyboard_test() -> None:
    """Print the parsed event for every key press. Quit with ESC."""
    from .terminal import Terminal
    from .keyboard import KeyType, movement_for

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    with Terminal() as terminal:
        while True:
            ev = terminal.read_key()
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                terminal.write("Exiting keyboard test.\r\n")
                break
            parts = [f"type={ev.key_type.value}", f"value={ev.value}", f"raw='{_escape_bytes(ev.raw)}'"]
            movement = movement_for(ev)
            if movement is not None:
                parts.append(f"movement={movement.value}")
            terminal.write(' '.join(parts) + "\r\n")
            terminal.flush()


def main(argv: list[str] | None = None) -> int:
    # Very small arg parsing: flags first, then an optional filename
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ("--help", "-h"):
        print(USAGE)
        return 0
    if "--debug" in args:
        args.remove("--debug")
        log_file = configure_logging()
        logger.debug("Logging to %s", log_file)
    if args and args[0] in ('--keytest', '--keyboard-test'):
        try:
            run_keyboard_test()
        except OSError as e:
            print(f"hecto: {e}", file=sys.stderr)
            return 1
        return 0
    if len(args) > 1 or (args and args[0].startswith('-')):
        print(USAGE, file=sys.stderr)
        return 2

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    try:
        editor = Editor()
        if args:
            editor.load_file(args[0])
        editor.run()
    except OSError as e:
        print(f"hecto: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
