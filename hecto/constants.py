"""Constants and configuration for the hecto editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Layout
    STATUS_LINE_HEIGHT = 2  # Status bar plus message bar below the text area
    EMPTY_ROW_MARKER = "~"  # Drawn on screen rows past the end of the document
    FILE_NAME_WIDTH = 20  # Status bar truncates file names to this many characters
    NO_NAME = "[No Name]"

    # Keyboard
    QUIT_KEY = 'q'  # Used together with Ctrl

    # Terminal addressing
    MAX_COORDINATE = 0xFFFF  # Largest 1-based row/column the device accepts

    # Status bar colours (RGB)
    STATUS_FG_COLOR = (63, 63, 63)
    STATUS_BG_COLOR = (239, 239, 239)

    # Message bar
    MESSAGE_TIMEOUT = 5.0  # Seconds a status message stays visible

    # Messages
    HELP_MESSAGE = "HELP: Ctrl-Q = quit"
    OPEN_ERROR_MESSAGE = "ERROR: Could not open file: {}"
    WELCOME_MESSAGE = "Hecto editor -- version {}"
    GOODBYE_MESSAGE = "Goodbye"
