"""
Random tile spawner.

Places new tiles through the public GameState API. The engine itself is
deterministic; all randomness lives here and comes from a numpy Generator
so games can be replayed from a seed.
"""

import logging

import numpy as np

from tiltgame.config import (BOARD_SIZE, MAX_PIECE, SPAWN_PROBABILITIES,
                             SPAWN_VALUES, STARTING_TILES)
from tiltgame.game.game_state import GameState
from tiltgame.game.tile import Tile

logger = logging.getLogger(__name__)


def spawn_tile(game, rng=None):
    """
    Adds a new tile (90% chance of 2, 10% chance of 4) to a random empty cell.

    Args:
        game (GameState): The game to add to.
        rng (np.random.Generator): Source of randomness, a fresh one if omitted.

    Returns:
        Tile: The placed tile, or None if the board is full.
    """
    rng = rng if rng is not None else np.random.default_rng()
    cols, rows = np.where(game.board.values() == 0)
    if cols.size == 0:
        return None

    idx = rng.integers(cols.size)
    value = int(rng.choice(SPAWN_VALUES, p=SPAWN_PROBABILITIES))
    tile = Tile(value, int(cols[idx]), int(rows[idx]))
    game.add_tile(tile)
    logger.debug("Spawned %d at (%d, %d)", tile.value, tile.column, tile.row)
    return tile


def new_game(size=BOARD_SIZE, max_piece=MAX_PIECE, rng=None):
    """Starts a game with STARTING_TILES random tiles on the board."""
    rng = rng if rng is not None else np.random.default_rng()
    game = GameState(size, max_piece)
    for _ in range(STARTING_TILES):
        spawn_tile(game, rng)
    return game
