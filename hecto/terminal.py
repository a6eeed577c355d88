"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import termios
import weakref
from contextlib import ExitStack
from typing import Callable, Optional

import blessed
from curtsies import Input

from .constants import EditorConstants
from .geometry import Position, Size
from .keyboard import KeyEvent, parse_key

logger = logging.getLogger(__name__)


class DeviceError(OSError):
    """The terminal could not be measured or switched into raw mode."""


class InputClosedError(OSError):
    """The keyboard stream ended."""


def _release(stream, restore_sequence: str, modes: ExitStack) -> None:
    """Put the device back the way we found it.

    The tty modes are restored even when writing to the stream fails.
    """
    try:
        print(restore_sequence, end='', file=stream, flush=True)
    finally:
        modes.close()
        logger.debug("Terminal released")


class Terminal:
    """Exclusive owner of the terminal device.

    Creating a Terminal measures the screen and puts the keyboard into raw
    mode; the device is released by close(), by leaving a ``with`` block,
    when the object is garbage collected, or at interpreter exit,
    whichever happens first.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 input_factory: Optional[Callable[[], Input]] = None):
        """Acquire the device.

        Raises:
            DeviceError: the size query or the switch to raw mode failed.
        """
        self.term = terminal or blessed.Terminal()
        self.stream = self.term.stream
        self._size = self._query_size()
        self._modes = ExitStack()
        factory = input_factory or (lambda: Input(keynames='curtsies'))
        try:
            self._input = self._modes.enter_context(factory())
            self._modes.enter_context(self.term.raw())
        except (OSError, termios.error, ValueError) as e:
            self._modes.close()
            raise DeviceError(f"Could not enter raw mode: {e}") from e
        self._finalizer = weakref.finalize(
            self, _release, self.stream, str(self.term.normal_cursor), self._modes)
        logger.debug("Terminal acquired (%dx%d text area)", self._size.width, self._size.height)

    def _query_size(self) -> Size:
        try:
            width, height = self.term.width, self.term.height
        except (OSError, ValueError) as e:
            raise DeviceError(f"Could not query terminal size: {e}") from e
        if not width or not height:
            raise DeviceError("Could not query terminal size")
        # Keep the bottom rows for the status and message bars
        return Size(width=width, height=max(height - EditorConstants.STATUS_LINE_HEIGHT, 1))

    def __enter__(self) -> "Terminal":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Show the cursor and restore the original tty modes."""
        self._finalizer()

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def current_size(self) -> Size:
        """Size of the text area as measured at construction."""
        return self._size

    def write(self, text: str) -> None:
        print(text, end='', file=self.stream)

    def clear_screen(self) -> None:
        self.write(self.term.clear)

    def clear_current_line(self) -> None:
        self.write(self.term.clear_eol)

    def move_cursor_to(self, position: Position) -> None:
        """Move the cursor to a 0-based position.

        The device addresses rows and columns from 1; coordinates beyond
        MAX_COORDINATE saturate.
        """
        limit = EditorConstants.MAX_COORDINATE
        row = min(position.y + 1, limit)
        column = min(position.x + 1, limit)
        # blessed takes 0-based arguments for the 1-based cup sequence
        self.write(self.term.move_yx(row - 1, column - 1))

    def hide_cursor(self) -> None:
        self.write(self.term.hide_cursor)

    def show_cursor(self) -> None:
        self.write(self.term.normal_cursor)

    def set_colors(self, foreground: tuple[int, int, int], background: tuple[int, int, int]) -> None:
        self.write(self.term.color_rgb(*foreground) + self.term.on_color_rgb(*background))

    def reset_colors(self) -> None:
        self.write(self.term.normal)

    def read_key(self) -> KeyEvent:
        """Block until the next key press.

        Non-keyboard events from curtsies (pastes, signals) are skipped.

        Raises:
            InputClosedError: the keyboard stream ended.
            OSError: reading from the device failed.
        """
        while True:
            try:
                event = next(self._input)
            except StopIteration:
                raise InputClosedError("keyboard input closed") from None
            if isinstance(event, str):
                return parse_key(event)
            logger.debug("Ignoring input event %r", event)

    def flush(self) -> None:
        self.stream.flush()
