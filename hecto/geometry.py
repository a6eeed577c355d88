from dataclasses import dataclass


@dataclass
class Position:
    """A column/row coordinate in document or screen space."""
    x: int = 0
    y: int = 0

    def __sub__(self, other: "Position") -> "Position":
        """Translate into the space whose origin is other, clamped at 0."""
        return Position(max(self.x - other.x, 0), max(self.y - other.y, 0))


@dataclass(frozen=True)
class Size:
    width: int
    height: int
