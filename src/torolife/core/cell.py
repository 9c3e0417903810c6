"""Cell states for the Game of Life grid."""

from enum import IntEnum


ALIVE_GLYPH = "◼"
DEAD_GLYPH = "◻"


class Cell(IntEnum):
    """State of a single cell.

    Values match the bytes stored in the grid buffer, so a cell can be
    compared directly against buffer entries.
    """

    DEAD = 0
    ALIVE = 1

    @classmethod
    def from_bool(cls, alive: bool) -> "Cell":
        return cls.ALIVE if alive else cls.DEAD
