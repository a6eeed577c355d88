"""A single line of text measured in grapheme clusters."""

import unicodedata

import grapheme


def _display_grapheme(cluster: str) -> str:
    """Return what a cluster looks like on screen (always one column)."""
    if cluster == '\t':
        return ' '
    if unicodedata.category(cluster[0]) == 'Cc':
        return '?'
    return cluster


class Row:
    """One line of a document.

    Callers address a row in grapheme columns only: a base character
    followed by combining marks, or an emoji sequence, is a single
    column. Rows are never modified after construction.
    """

    __slots__ = ('_string', '_graphemes')

    def __init__(self, string: str = ""):
        self._string = string
        self._graphemes = tuple(grapheme.graphemes(string))

    @classmethod
    def from_text(cls, line: str) -> "Row":
        return cls(line)

    @property
    def string(self) -> str:
        """The original text of the line."""
        return self._string

    def render(self, start: int, end: int) -> str:
        """Render grapheme columns [start, end) for display.

        An end past the row is clamped to the row length and a start past
        the end is clamped to the end, so out-of-range and inverted ranges
        render as an empty string.
        """
        end = max(0, min(end, len(self._graphemes)))
        start = max(0, min(start, end))
        return ''.join(_display_grapheme(g) for g in self._graphemes[start:end])

    def length(self) -> int:
        return len(self._graphemes)

    def is_empty(self) -> bool:
        return not self._graphemes

    def __len__(self) -> int:
        return len(self._graphemes)

    def __eq__(self, other):
        if not isinstance(other, Row):
            return NotImplemented
        return self._string == other._string

    def __hash__(self):
        return hash(self._string)

    def __repr__(self):
        return f"Row({self._string!r})"
