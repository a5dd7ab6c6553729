"""
Engine Configuration for the 2048 Tilt Engine.

This module acts as the central control panel for board geometry and the
random spawn collaborator. Constructors read their defaults from here and
accept explicit overrides, so a test or a variant game never has to patch
module state.
"""

# --- Board Configuration ---
# Side length of the square board (the classic game is 4x4).
BOARD_SIZE = 4

# The objective tile. Its appearance anywhere on the board ends the game.
MAX_PIECE = 2048

# --- Spawn Configuration ---
# A freshly spawned tile is a 2 most of the time and a 4 otherwise.
SPAWN_VALUES = (2, 4)
SPAWN_PROBABILITIES = (0.9, 0.1)

# Number of tiles placed on an empty board when a new game starts.
STARTING_TILES = 2
