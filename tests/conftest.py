"""Shared fixtures: scripted stand-ins for the terminal device."""

import io
from unittest.mock import PropertyMock, patch

import blessed
import pytest

from hecto.document import Document
from hecto.editor import Editor
from hecto.geometry import Position, Size
from hecto.keyboard import parse_key
from hecto.terminal import InputClosedError, Terminal


class FakeTerminal:
    """Records output and replays curtsies key tokens."""

    def __init__(self, width=80, height=10, keys=(), read_error=None, flush_error=None):
        self._size = Size(width=width, height=height)
        self._keys = list(keys)
        self.read_error = read_error
        self.flush_error = flush_error
        self.output = []
        self.frames = []
        self._frame = []
        self.cursor = None
        self.closed = False
        self.enter_count = 0

    def __enter__(self):
        self.enter_count += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.closed = True

    def current_size(self):
        return self._size

    def write(self, text):
        self.output.append(text)
        self._frame.append(text)

    def clear_screen(self):
        self.write("<clear>")

    def clear_current_line(self):
        self.write("<clear-line>")

    def move_cursor_to(self, position: Position):
        self.cursor = Position(position.x, position.y)

    def hide_cursor(self):
        self.write("<hide>")

    def show_cursor(self):
        self.write("<show>")

    def set_colors(self, foreground, background):
        self.write("<colors>")

    def reset_colors(self):
        self.write("<reset>")

    def read_key(self):
        if self._keys:
            return parse_key(self._keys.pop(0))
        if self.read_error is not None:
            raise self.read_error
        raise InputClosedError("no more scripted keys")

    def flush(self):
        if self.flush_error is not None:
            raise self.flush_error
        self.frames.append(''.join(self._frame))
        self._frame = []

    def text_lines(self, frame):
        """Lines of a frame with the pseudo sequences removed."""
        for marker in ("<clear-line>", "<hide>", "<show>", "<colors>", "<reset>", "<clear>"):
            frame = frame.replace(marker, "")
        return frame.split("\r\n")


@pytest.fixture
def fake_terminal():
    return FakeTerminal


@pytest.fixture
def make_editor():
    """Build an editor over the given lines and a fake terminal."""
    def factory(lines=(), width=80, height=10, keys=(), **kwargs):
        terminal = FakeTerminal(width=width, height=height, keys=keys, **kwargs)
        return Editor(document=Document.from_lines(lines), terminal=terminal)
    return factory


class FakeInput:
    """Stands in for curtsies.Input: a context manager yielding key tokens.

    Once the events run out, ``error`` is raised if given, otherwise the
    iteration stops.
    """

    def __init__(self, events=(), error=None):
        self.events = list(events)
        self.error = error
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True

    def __iter__(self):
        return self

    def __next__(self):
        if not self.events:
            if self.error is not None:
                raise self.error
            raise StopIteration
        return self.events.pop(0)


@pytest.fixture
def blessed_term():
    """An xterm-256color blessed terminal writing to a StringIO, 80x24."""
    stream = io.StringIO()
    term = blessed.Terminal(kind='xterm-256color', stream=stream, force_styling=True)
    with patch.object(blessed.Terminal, 'width', new_callable=PropertyMock, return_value=80), \
         patch.object(blessed.Terminal, 'height', new_callable=PropertyMock, return_value=24):
        yield term


@pytest.fixture
def real_terminal(blessed_term):
    """Build a hecto Terminal over blessed_term fed by a FakeInput."""
    def factory(events=(), error=None):
        fake_input = FakeInput(events, error=error)
        return Terminal(blessed_term, input_factory=lambda: fake_input), fake_input
    return factory
