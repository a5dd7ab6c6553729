"""
Core Tilt Logic for 2048.

Every tilt is performed as a tilt toward increasing row on a GridView, so a
single column algorithm serves all four sides. Each view column is handled
in two independent passes over the same pre-tilt column:

1.  Change Detection: `column_changed` inspects the integer values of the
    column *before* anything moves. It is compiled with numba `@njit` because
    it is also the workhorse behind legality checks (`GameState.valid_moves`).
2.  Mutation: `tilt_column` walks the column from the second-highest row down
    with a write cursor `pos`. A merge seals `pos` immediately, which gives
    the rules "a merged tile never merges again this tilt" and "of three equal
    tiles, the leading two merge and the trailing one slides".

`merge_line` is the compress-then-pair formulation of the same rule on plain
integers, used for look-ahead (`preview`) without touching any Tile.
"""

import numpy as np
from numba import njit


@njit
def column_changed(values):
    """
    Decides whether tilting one column toward its last index changes it.

    Args:
        values (np.array): Column values from view row 0 upward, 0 for empty.

    Returns:
        bool: True if some tile would slide or merge.
    """
    n = values.shape[0]
    count = 0
    for i in range(n):
        if values[i] != 0:
            count += 1
    if count == 0:
        return False

    upper = values[n - 1]
    # Tiles below an empty top cell always slide
    if upper == 0:
        return True
    count -= 1

    for row in range(n - 2, -1, -1):
        if count == 0:
            return False
        lower = values[row]
        # A gap with tiles still below it
        if lower == 0:
            return True
        count -= 1
        if lower == upper:
            return True
        upper = lower
    return False


@njit
def merge_line(line):
    """
    Compresses and merges a 1D line toward index 0.

    - [2, 2, 4, 8] -> [4, 4, 8, 0]
    - [2, 2, 2, 2] -> [4, 4, 0, 0]

    Returns:
        (np.array, int): The new line and the score gained.
    """
    length = line.shape[0]
    temp = np.zeros(length, dtype=np.int64)

    # 1. Compress Phase
    count = 0
    for i in range(length):
        if line[i] != 0:
            temp[count] = line[i]
            count += 1

    # 2. Merge Phase
    result = np.zeros(length, dtype=np.int64)
    score = 0
    write_idx = 0
    read_idx = 0
    while read_idx < count:
        current_val = temp[read_idx]
        if read_idx + 1 < count and temp[read_idx + 1] == current_val:
            result[write_idx] = current_val * 2
            score += current_val * 2
            read_idx += 2
        else:
            result[write_idx] = current_val
            read_idx += 1
        write_idx += 1

    return result, score


def tilt_column(view, col):
    """
    Slides and merges view column `col` toward its top row.

    Args:
        view (GridView): The board seen from the tilt side.
        col (int): View column to process.

    Returns:
        int: Score gained, i.e. the sum of every newly merged tile.
    """
    n = view.size
    pos = n - 1
    score = 0
    for row in range(n - 2, -1, -1):
        tile = view.tile(col, row)
        if tile is None:
            continue
        top = view.tile(col, pos)
        if top is None:
            view.move(col, pos, tile)
        elif top.value == tile.value:
            view.move(col, pos, tile)
            score += tile.value * 2
            # Seal the merged cell
            pos -= 1
        else:
            pos -= 1
            view.move(col, pos, tile)
    return score


def tilt_grid(grid, side):
    """
    Tilts the whole grid toward `side`.

    Returns:
        (bool, int): Whether any column changed, and the total score gained.
    """
    view = grid.view(side)
    changed = False
    score = 0
    for col in range(grid.size):
        # Detection must see the column before tilt_column mutates it
        if column_changed(view.column_values(col)):
            changed = True
        score += tilt_column(view, col)
    return changed, score


def can_tilt(grid, side):
    view = grid.view(side)
    return any(column_changed(view.column_values(col)) for col in range(grid.size))


def preview(grid, side):
    """
    Calculates the result of a tilt *without* mutating the grid.

    Returns:
        (np.ndarray, int, bool): The new board values indexed [column, row],
        the score gained, and whether the board would change.
    """
    n = grid.size
    view = grid.view(side)
    result = np.zeros((n, n), dtype=np.int64)
    score = 0
    for col in range(n):
        # merge_line packs toward index 0, the view packs toward the top row
        line = np.ascontiguousarray(view.column_values(col)[::-1])
        merged, gained = merge_line(line)
        score += int(gained)
        merged = merged[::-1]
        for row in range(n):
            c, r = side.canonical(col, row, n)
            result[c, r] = merged[row]
    changed = not np.array_equal(result, grid.values())
    return result, score, changed
