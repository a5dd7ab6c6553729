from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """
    A numbered tile at a canonical board position.

    Tiles never change once placed. Sliding or merging yields a new Tile,
    so two tiles compare equal only when value, column and row all match.
    """
    value: int
    column: int
    row: int

    def __post_init__(self):
        if self.value < 1 or self.value & (self.value - 1):
            raise ValueError(f"Tile value must be a positive power of two, got {self.value}")

    def moved_to(self, column, row):
        return Tile(self.value, column, row)

    def merged_into(self, column, row):
        """The tile produced when this tile lands on an equal one at (column, row)."""
        return Tile(self.value * 2, column, row)
