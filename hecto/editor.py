"""Main editor controller: cursor, scrolling and the input/render loop."""

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .document import Document
from .geometry import Position
from .keyboard import KeyEvent, Movement
from .row import Row
from .terminal import Terminal
from .version import get_version

logger = logging.getLogger(__name__)


@dataclass
class StatusMessage:
    """A message for the message bar, shown for a limited time."""
    text: str
    time: float = field(default_factory=time.monotonic)

    def is_visible(self, now: Optional[float] = None) -> bool:
        if now is None:
            now = time.monotonic()
        return now - self.time < EditorConstants.MESSAGE_TIMEOUT


class Editor:
    """Read-only text editor driving a raw-mode terminal."""

    def __init__(self, document: Optional[Document] = None, terminal: Optional[Terminal] = None):
        """Initialize the editor.

        Creating the editor acquires the terminal unless one is given.

        Raises:
            DeviceError: the terminal could not be initialized.
        """
        self.terminal = terminal or Terminal()
        self.document = document if document is not None else Document()
        self.command_registry = CommandRegistry()
        self.quit_flag = False
        self.cursor_position = Position()
        self.offset = Position()
        self.status_message = StatusMessage(EditorConstants.HELP_MESSAGE)

    def load_file(self, filename: str) -> bool:
        """Replace the document with the contents of filename.

        A file that cannot be read leaves an empty document and an error
        in the message bar.

        Returns:
            True if the file was loaded
        """
        try:
            self.document = Document.open(filename)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not open %s: %s", filename, e)
            self.document = Document()
            self.status_message = StatusMessage(EditorConstants.OPEN_ERROR_MESSAGE.format(filename))
            return False
        self.cursor_position = Position()
        self.offset = Position()
        return True

    def run(self) -> None:
        """Run the main editor loop until the quit key is pressed.

        Any I/O error is fatal: the screen is cleared, the terminal
        restored and the error re-raised.
        """
        with self.terminal:
            try:
                while True:
                    self.refresh_screen()
                    if self.quit_flag:
                        break
                    self.process_keypress()
            except OSError as e:
                logger.error("Fatal terminal error: %s", e)
                self.terminal.clear_screen()
                raise
        logger.info("Editor quit")

    def process_keypress(self) -> None:
        key_event = self.terminal.read_key()
        self._handle_key_event(key_event)
        self.scroll()

    def _handle_key_event(self, key_event: KeyEvent) -> None:
        # Keys without a command are ignored
        self.command_registry.execute(self, key_event)

    @property
    def viewport_width(self) -> int:
        return self.terminal.current_size().width

    @property
    def viewport_height(self) -> int:
        return self.terminal.current_size().height

    def _row_length(self, y: int) -> int:
        row = self.document.row_at(y)
        return len(row) if row is not None else 0

    def move_cursor(self, movement: Movement) -> None:
        """Move the cursor in document space.

        The cursor may sit on row line_count(), one past the last row. After
        every move the column is clamped to the length of the new row.
        """
        x, y = self.cursor_position.x, self.cursor_position.y
        height = self.document.line_count()
        width = self._row_length(y)
        half_page = self.viewport_height // 2

        if movement is Movement.UP:
            y = max(y - 1, 0)
        elif movement is Movement.DOWN:
            y = min(y + 1, height)
        elif movement is Movement.LEFT:
            if x > 0:
                x -= 1
            elif y > 0:
                y -= 1
                x = self._row_length(y)
        elif movement is Movement.RIGHT:
            if x < width:
                x += 1
            elif y < height:
                y += 1
                x = 0
        elif movement is Movement.PAGE_UP:
            y = max(y - half_page, 0)
        elif movement is Movement.PAGE_DOWN:
            y = min(y + half_page, height)
        elif movement is Movement.HOME:
            x = 0
        elif movement is Movement.END:
            x = width

        x = min(x, self._row_length(y))
        self.cursor_position = Position(x, y)

    def scroll(self) -> None:
        """Move the viewport the least amount that keeps the cursor visible."""
        cursor = self.cursor_position
        width = self.viewport_width
        height = self.viewport_height
        offset = self.offset

        if cursor.y < offset.y:
            offset.y = cursor.y
        elif cursor.y >= offset.y + height:
            offset.y = cursor.y - height + 1

        if cursor.x < offset.x:
            offset.x = cursor.x
        elif cursor.x >= offset.x + width:
            offset.x = cursor.x - width + 1

    def refresh_screen(self) -> None:
        """Draw one frame and flush it to the device."""
        terminal = self.terminal
        terminal.hide_cursor()
        terminal.move_cursor_to(Position())
        if self.quit_flag:
            terminal.clear_screen()
            terminal.write(EditorConstants.GOODBYE_MESSAGE + "\r\n")
        else:
            self.draw_rows()
            self.draw_status_bar()
            self.draw_message_bar()
            terminal.move_cursor_to(self.cursor_position - self.offset)
        terminal.show_cursor()
        terminal.flush()

    def draw_row(self, row: Row) -> None:
        start = self.offset.x
        end = start + self.viewport_width
        self.terminal.write(row.render(start, end) + "\r\n")

    def draw_rows(self) -> None:
        height = self.viewport_height
        for terminal_row in range(height):
            self.terminal.clear_current_line()
            row = self.document.row_at(self.offset.y + terminal_row)
            if row is not None:
                self.draw_row(row)
            elif self.document.is_empty() and terminal_row == height // 3:
                self.draw_welcome_message()
            else:
                self.terminal.write(EditorConstants.EMPTY_ROW_MARKER + "\r\n")

    def welcome_message(self) -> str:
        width = self.viewport_width
        message = EditorConstants.WELCOME_MESSAGE.format(get_version())
        padding = max(width - len(message), 0) // 2
        # One column of the padding is taken by the row marker
        spaces = " " * max(padding - 1, 0)
        return f"{EditorConstants.EMPTY_ROW_MARKER}{spaces}{message}"[:width]

    def draw_welcome_message(self) -> None:
        self.terminal.write(self.welcome_message() + "\r\n")

    def status_line(self) -> str:
        """Status bar text: file name and size left, line indicator right."""
        width = self.viewport_width
        line_count = self.document.line_count()
        if self.document.file_name:
            file_name = self.document.file_name[:EditorConstants.FILE_NAME_WIDTH]
        else:
            file_name = EditorConstants.NO_NAME
        status = f"{file_name} - {line_count} lines"
        line_indicator = f"{self.cursor_position.y + 1}/{line_count}"
        padding = max(width - len(status) - len(line_indicator), 0)
        return (status + " " * padding + line_indicator)[:width]

    def draw_status_bar(self) -> None:
        self.terminal.set_colors(EditorConstants.STATUS_FG_COLOR, EditorConstants.STATUS_BG_COLOR)
        self.terminal.write(self.status_line())
        self.terminal.reset_colors()
        self.terminal.write("\r\n")

    def draw_message_bar(self) -> None:
        self.terminal.clear_current_line()
        message = self.status_message
        if message.is_visible():
            self.terminal.write(message.text[:self.viewport_width])
