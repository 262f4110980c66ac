"""Game engine: board setup, moves, win detection and rendering."""

from __future__ import annotations
import numpy as np

from .board import BoardState, EMPTY


def initialize(dimension: int) -> BoardState:
    """
    Build the starting board for a d x d game.

    Tiles are laid out in descending order from the top-left, ending with
    the empty cell in the bottom-right corner. On even boards tiles 1 and 2
    are swapped so the puzzle is solvable.

    Args:
        dimension: Board dimension d (3 to 9).

    Returns:
        A fresh BoardState with the empty cell at (d-1, d-1).
    """
    size = dimension * dimension
    grid = np.arange(size - 1, -1, -1, dtype=np.int32).reshape(dimension, dimension)

    if dimension % 2 == 0:
        grid[dimension - 1, dimension - 3] = 1
        grid[dimension - 1, dimension - 2] = 2

    return BoardState(dimension, grid, empty=(dimension - 1, dimension - 1))


def attempt_move(state: BoardState, tile: int) -> bool:
    """
    Slide tile into the empty cell if it borders it.

    Args:
        state: Board to mutate.
        tile: Tile value to move.

    Returns:
        True if the tile moved. On False the board is left untouched.
    """
    if tile < 0 or tile > state.size - 1:
        return False

    position = state.find(tile)
    if position is None:
        return False

    row, col = position
    empty_row, empty_col = state.empty
    d_row = abs(row - empty_row)
    d_col = abs(col - empty_col)

    # Only horizontal or vertical neighbours, never diagonal or the gap itself
    if d_row + d_col != 1:
        return False

    state.swap_with_empty(row, col)
    return True


def is_won(state: BoardState) -> bool:
    """
    Check whether tiles 1..d*d-1 are in order, read row by row.

    The bottom-right cell is never inspected.
    """
    last_tile = state.size - 1
    expected = 1
    for value in state.grid.flat:
        if value != expected:
            return False
        if expected == last_tile:
            return True
        expected += 1
    return True


def _render_cell(value: int) -> str:
    if value == EMPTY:
        return " __ "
    if value >= 10:
        return f" {value} "
    return f" {value}  "


def render(state: BoardState) -> str:
    """Draw the board as text, four characters per cell."""
    d = state.dimension
    padding = "|".join(["    "] * d)
    rule = "+".join(["----"] * d)

    lines = []
    for row in range(d):
        lines.append(padding)
        lines.append("|".join(_render_cell(state.get(row, col)) for col in range(d)))
        lines.append(padding)
        if row < d - 1:
            lines.append(rule)
    return "\n".join(lines)
