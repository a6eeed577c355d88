"""Hecto - a small terminal text viewer."""

from .document import Document
from .editor import Editor, StatusMessage
from .geometry import Position, Size
from .keyboard import KeyEvent, KeyType, Movement
from .row import Row
from .terminal import DeviceError, InputClosedError, Terminal

__all__ = [
    'Document',
    'Editor',
    'StatusMessage',
    'Position',
    'Size',
    'KeyEvent',
    'KeyType',
    'Movement',
    'Row',
    'DeviceError',
    'InputClosedError',
    'Terminal',
]
