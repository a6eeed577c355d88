"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING

from .constants import EditorConstants
from .keyboard import KeyType, Movement, MOVEMENT_KEYS

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command
        """


class QuitCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.quit_flag = True


class MoveCursorCommand(EditorCommand):
    """Moves the cursor; the document is never modified."""

    def __init__(self, movement: Movement):
        self.movement = movement

    def execute(self, editor, key_event):
        editor.move_cursor(self.movement)

    def __repr__(self):
        return f"MoveCursorCommand({self.movement})"


class CommandRegistry:
    """Registry mapping key events to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._register_default_commands()

    def _register_default_commands(self):
        self.register(KeyType.CTRL, EditorConstants.QUIT_KEY, QuitCommand())
        for key, movement in MOVEMENT_KEYS.items():
            self.register(KeyType.SPECIAL, key, MoveCursorCommand(movement))

    def register(self, key_type: KeyType, value: str, command: EditorCommand):
        self._commands[(key_type, value)] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Run the command bound to key_event.

        Returns:
            True if a command was found, False for unbound keys
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        command.execute(editor, key_event)
        return True
