"""
Board sides and the perspective transform.

Instead of writing four separate slide functions (Up, Down, Left, Right),
the engine looks at the board from the side it is tilting toward, so that the
direction of motion is always "toward increasing row". This module holds the
pure coordinate function that maps such a rotated view back onto the
canonical (NORTH) board.

Coordinates are (column, row) with (0, 0) at the lower-left corner.
"""

from enum import Enum


class Side(Enum):
    """
    One of the four sides of the board.

    Each member carries the affine coefficients of its view transform:
    (col0, row0) select which corner the view origin sits on, and
    (dcol, drow) give how a step in view row moves on the real board.
    """
    NORTH = (0, 0, 0, 1)
    EAST = (0, 1, 1, 0)
    SOUTH = (1, 1, 0, -1)
    WEST = (1, 0, -1, 0)

    def __init__(self, col0, row0, dcol, drow):
        self.col0 = col0
        self.row0 = row0
        self.dcol = dcol
        self.drow = drow

    def canonical(self, col, row, size):
        """
        Maps view coordinates (col, row) to canonical board coordinates.

        Args:
            col (int): Column as seen from this side.
            row (int): Row as seen from this side.
            size (int): Side length of the board.

        Returns:
            (int, int): The (column, row) on the NORTH-up board.
        """
        last = size - 1
        return (self.col0 * last + col * self.drow + row * self.dcol,
                self.row0 * last - col * self.dcol + row * self.drow)

    def opposite(self):
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name):
        """Parses 'north'/'up', 'east'/'right', 'south'/'down' or 'west'/'left'."""
        if isinstance(name, cls):
            return name
        try:
            return _NAMES[str(name).strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


_OPPOSITES = {
    Side.NORTH: Side.SOUTH,
    Side.SOUTH: Side.NORTH,
    Side.EAST: Side.WEST,
    Side.WEST: Side.EAST,
}

_NAMES = {
    'north': Side.NORTH, 'up': Side.NORTH,
    'east': Side.EAST, 'right': Side.EAST,
    'south': Side.SOUTH, 'down': Side.SOUTH,
    'west': Side.WEST, 'left': Side.WEST,
}
