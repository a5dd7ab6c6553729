"""
The board: a fixed N x N array of optional tiles.

Cells live in a numpy object array indexed [column, row], each holding a
Tile or None. Row 0 is the bottom of the board. Rotated access goes through
a GridView bound to a Side; the grid itself never remembers a perspective,
so every direct read is in canonical NORTH coordinates.
"""

import numpy as np

from tiltgame.game.side import Side
from tiltgame.game.tile import Tile


class IllegalStateError(RuntimeError):
    """Raised when a caller breaks a board precondition (e.g. a double placement)."""


class Grid:
    def __init__(self, size):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self._cells = np.empty((size, size), dtype=object)

    @classmethod
    def from_values(cls, raw):
        """
        Builds a grid from a visual layout of tile values.

        Args:
            raw (list[list[int]]): Rows as printed, TOP row first, 0 for empty.

        Returns:
            Grid: A grid holding a tile for every non-zero entry.
        """
        size = len(raw)
        if any(len(line) != size for line in raw):
            raise ValueError("Raw board must be square")
        grid = cls(size)
        for i, line in enumerate(raw):
            row = size - 1 - i
            for col, value in enumerate(line):
                if value:
                    grid.add_tile(Tile(int(value), col, row))
        return grid

    def _check(self, col, row):
        assert 0 <= col < self.size and 0 <= row < self.size, \
            f"({col}, {row}) is outside a {self.size}x{self.size} board"

    def tile(self, col, row):
        """Returns the tile at canonical (col, row), or None if the cell is empty."""
        self._check(col, row)
        return self._cells[col, row]

    def view(self, side):
        """Returns the board as seen from `side`. The grid itself is unaffected."""
        return GridView(self, side)

    def move(self, col, row, tile, side=Side.NORTH):
        """
        Moves `tile` to (col, row) as seen from `side`, clearing its old cell.

        If the target already holds a tile the two merge into a new tile of
        double value. The caller guarantees the target is empty or holds an
        equal-valued tile.

        Returns:
            bool: True if the move was a merge.
        """
        c, r = side.canonical(col, row, self.size)
        self._check(c, r)
        if (tile.column, tile.row) == (c, r):
            return False

        assert self._cells[tile.column, tile.row] == tile, f"{tile} is not on the board"
        target = self._cells[c, r]
        self._cells[tile.column, tile.row] = None

        if target is None:
            self._cells[c, r] = tile.moved_to(c, r)
            return False

        assert target.value == tile.value, f"cannot merge {tile} into {target}"
        self._cells[c, r] = tile.merged_into(c, r)
        return True

    def add_tile(self, tile):
        if not (0 <= tile.column < self.size and 0 <= tile.row < self.size):
            raise IllegalStateError(
                f"Cell ({tile.column}, {tile.row}) is outside a {self.size}x{self.size} board")
        if self._cells[tile.column, tile.row] is not None:
            raise IllegalStateError(
                f"Cell ({tile.column}, {tile.row}) is already occupied by "
                f"{self._cells[tile.column, tile.row]}")
        self._cells[tile.column, tile.row] = tile

    def clear(self):
        self._cells.fill(None)

    def copy(self):
        """Independent grid. Tiles are immutable, so they are shared."""
        new_grid = self.__class__.__new__(self.__class__)
        new_grid.size = self.size
        new_grid._cells = self._cells.copy()
        return new_grid

    def tiles(self):
        """All tiles on the board, column by column."""
        return [t for t in self._cells.flat if t is not None]

    def values(self):
        """
        Snapshot of the board as integers.

        Returns:
            np.ndarray: Shape (size, size), indexed [column, row], 0 for empty.
        """
        values = np.zeros((self.size, self.size), dtype=np.int64)
        for (col, row), tile in np.ndenumerate(self._cells):
            if tile is not None:
                values[col, row] = tile.value
        return values

    def empty_space_exists(self):
        return bool(np.any(self.values() == 0))

    def max_tile_exists(self, max_piece):
        return bool(np.any(self.values() == max_piece))

    def adjacent_equal_exists(self):
        """True if two orthogonally adjacent tiles share a value."""
        values = self.values()
        across = (values[1:, :] == values[:-1, :]) & (values[1:, :] != 0)
        along = (values[:, 1:] == values[:, :-1]) & (values[:, 1:] != 0)
        return bool(np.any(across) or np.any(along))

    def __str__(self):
        lines = []
        for row in range(self.size - 1, -1, -1):
            cells = []
            for col in range(self.size):
                tile = self._cells[col, row]
                cells.append("|    " if tile is None else "|{:4d}".format(tile.value))
            lines.append("".join(cells) + "|")
        return "\n".join(lines)


class GridView:
    """
    A grid seen from one side.

    Coordinates passed to a view are relative to its side and are mapped to
    canonical cells on every lookup; nothing is copied or rotated.
    """

    def __init__(self, grid, side):
        self.grid = grid
        self.side = side
        self.size = grid.size

    def tile(self, col, row):
        return self.grid.tile(*self.side.canonical(col, row, self.size))

    def move(self, col, row, tile):
        return self.grid.move(col, row, tile, self.side)

    def column_values(self, col):
        """Values of view column `col` from view row 0 upward, 0 for empty."""
        values = np.zeros(self.size, dtype=np.int64)
        for row in range(self.size):
            tile = self.tile(col, row)
            if tile is not None:
                values[row] = tile.value
        return values
