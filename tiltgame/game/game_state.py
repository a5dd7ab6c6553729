"""
Game State for 2048.

GameState wraps one Grid for the life of one game and keeps the score
bookkeeping around it: the running score, the max score high-water mark and
the game-over flag. It exposes the public move API (`tilt`, `add_tile`,
`clear`) and the query surface used by UIs, spawners and tests.

Key Rules:
1.  Score only grows by the value of newly merged tiles.
2.  The game is over when a MAX_PIECE tile exists, or when the board is full
    and no two adjacent tiles are equal. Observing game over raises max score.
3.  Mutating calls return whether the board changed; nothing is broadcast.
"""

import logging

from tiltgame.config import BOARD_SIZE, MAX_PIECE
from tiltgame.game.grid import Grid
from tiltgame.game.side import Side
from tiltgame.game import tilt as engine

logger = logging.getLogger(__name__)


class GameState:
    def __init__(self, size=BOARD_SIZE, max_piece=MAX_PIECE):
        """
        A new game on an empty size x size board with score 0.
        """
        self.board = Grid(size)
        self.max_piece = max_piece
        self._score = 0
        self._max_score = 0
        self._game_over = False

    @classmethod
    def from_values(cls, raw, score=0, max_score=0, game_over=False, max_piece=MAX_PIECE):
        """
        Builds a game from a visual layout of tile values (TOP row first,
        0 for empty). Used for test fixtures.
        """
        game = cls(len(raw), max_piece)
        game.board = Grid.from_values(raw)
        game._score = score
        game._max_score = max_score
        game._game_over = game_over
        return game

    @property
    def size(self):
        return self.board.size

    def tile(self, col, row):
        return self.board.tile(col, row)

    def score(self):
        return self._score

    def max_score(self):
        """The best score of any finished game (updated at end of game)."""
        return self._max_score

    def game_over(self):
        """
        Returns True iff the game is over. Once it is, max score is raised
        to the current score.
        """
        self._check_game_over()
        if self._game_over:
            self._max_score = max(self._score, self._max_score)
        return self._game_over

    def _check_game_over(self):
        was_over = self._game_over
        self._game_over = (self.board.max_tile_exists(self.max_piece)
                           or not self._move_exists())
        if self._game_over and not was_over:
            logger.info("Game over with score %d", self._score)

    def _move_exists(self):
        return self.board.empty_space_exists() or self.board.adjacent_equal_exists()

    def add_tile(self, tile):
        """
        Adds `tile` to the board. Its cell must be empty.

        Returns:
            bool: Always True, placing a tile changes the board.
        """
        self.board.add_tile(tile)
        self._check_game_over()
        return True

    def tilt(self, side):
        """
        Tilts the board toward `side` (a Side or a direction name).

        Returns:
            bool: True if any tile slid or merged.
        """
        side = Side.from_name(side)
        changed, gained = engine.tilt_grid(self.board, side)
        self._score += gained
        logger.debug("Tilt %s: changed=%s, gained=%d", side.name, changed, gained)
        self._check_game_over()
        return changed

    def can_tilt(self, side):
        """Checks if tilting toward `side` would change the board."""
        return engine.can_tilt(self.board, Side.from_name(side))

    def valid_moves(self):
        """Returns every Side whose tilt would change the board."""
        return [side for side in Side if self.can_tilt(side)]

    def clear(self):
        """
        Clears the board and resets the score, starting a new game.

        Returns:
            bool: True if there was anything to reset.
        """
        changed = bool(self.board.tiles()) or self._score != 0 or self._game_over
        self._score = 0
        self._game_over = False
        self.board.clear()
        return changed

    def copy(self):
        """
        Creates an independent clone of the game.

        Bypasses `__init__`; the grid is the only deep copy needed.
        """
        new_game = self.__class__.__new__(self.__class__)
        new_game.board = self.board.copy()
        new_game.max_piece = self.max_piece
        new_game._score = self._score
        new_game._max_score = self._max_score
        new_game._game_over = self._game_over
        return new_game

    def __str__(self):
        """String representation for debugging and test fixtures."""
        over = "over" if self.game_over() else "not over"
        return "\n[\n{}\n] {} (max: {}) (game is {}) \n".format(
            self.board, self._score, self._max_score, over)

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self):
        return hash(str(self))
