"""Key events for a read-only viewer, parsed from curtsies key names."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"  # Printable character
    CTRL = "ctrl"  # Ctrl chord on a character
    SPECIAL = "special"  # Unmodified named key (arrows, paging, escape)
    MODIFIED = "modified"  # Named key pressed with Shift, Ctrl, Alt or Meta


class Movement(Enum):
    """Cursor movements the editor understands."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


@dataclass(frozen=True)
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # 'a', 'q' for Ctrl-Q, 'page_up', or 'ctrl-up' for modified keys
    raw: str  # The token curtsies produced


MOVEMENT_KEYS = {
    'up': Movement.UP,
    'down': Movement.DOWN,
    'left': Movement.LEFT,
    'right': Movement.RIGHT,
    'page_up': Movement.PAGE_UP,
    'page_down': Movement.PAGE_DOWN,
    'home': Movement.HOME,
    'end': Movement.END,
}

_KEY_ALIASES = {'pageup': 'page_up', 'pagedown': 'page_down', 'esc': 'escape'}


def _parse_key_name(token: str) -> KeyEvent:
    # '<Ctrl-q>', '<Shift-HOME>', '<Esc+f>': modifiers first, key name last
    modifiers, _, name = token[1:-1].lower().replace('+', '-').rpartition('-')
    name = _KEY_ALIASES.get(name or '-', name or '-')
    if not modifiers:
        if name == 'space':
            return KeyEvent(KeyType.REGULAR, ' ', token)
        return KeyEvent(KeyType.SPECIAL, name, token)
    if modifiers == 'ctrl' and len(name) == 1:
        return KeyEvent(KeyType.CTRL, name, token)
    return KeyEvent(KeyType.MODIFIED, f"{modifiers}-{name}", token)


def parse_key(token) -> KeyEvent:
    """Classify one curtsies token.

    Tokens are either key names in angle brackets ('<UP>', '<Ctrl-q>') or
    a single character, which may be a raw control byte.
    """
    token = str(token)
    if len(token) > 2 and token.startswith('<') and token.endswith('>'):
        return _parse_key_name(token)
    if token == '\x1b':
        return KeyEvent(KeyType.SPECIAL, 'escape', token)
    if len(token) == 1 and 1 <= ord(token) <= 26:
        return KeyEvent(KeyType.CTRL, chr(ord('a') + ord(token) - 1), token)
    return KeyEvent(KeyType.REGULAR, token, token)


def movement_for(event: KeyEvent) -> Optional[Movement]:
    """Return the cursor movement bound to a key, or None."""
    if event.key_type is not KeyType.SPECIAL:
        return None
    return MOVEMENT_KEYS.get(event.value)
