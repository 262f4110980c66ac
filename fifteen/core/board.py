"""Board state for the Game of Fifteen on a d x d grid."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional

# Smallest and largest supported board dimensions
DIM_MIN = 3
DIM_MAX = 9

# Value of the empty cell
EMPTY = 0


class BoardState:
    """
    Owns the d x d grid of tiles and the position of the empty cell.

    Values 1 to d*d - 1 are tiles and 0 is the gap. The empty position is
    cached so adjacency checks never need to search the grid for it.
    """

    def __init__(self, dimension: int, grid: Optional[np.ndarray] = None,
                 empty: Optional[Tuple[int, int]] = None):
        """
        Create a board state.

        Args:
            dimension: Board dimension d, between DIM_MIN and DIM_MAX.
            grid: Optional initial grid. If None, creates an all-zero grid.
            empty: Optional (row, col) of the empty cell. Located by scan
                when not given; a grid without a 0 raises ValueError.
        """
        if dimension < DIM_MIN or dimension > DIM_MAX:
            raise ValueError(
                f"Dimension must be between {DIM_MIN} and {DIM_MAX}, got {dimension}"
            )

        self.dimension = dimension

        if grid is not None:
            if grid.shape != (dimension, dimension):
                raise ValueError(f"Grid shape must be ({dimension}, {dimension})")
            self._grid = grid.copy().astype(np.int32)
        else:
            self._grid = np.zeros((dimension, dimension), dtype=np.int32)

        if empty is None:
            empty = self.find(EMPTY)
            if empty is None:
                raise ValueError("Grid has no empty cell")
        self.empty = empty

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def size(self) -> int:
        """Number of cells on the board (d * d)."""
        return self.dimension * self.dimension

    def get(self, row: int, col: int) -> int:
        """Get the value at (row, col). 0 means empty."""
        return int(self._grid[row, col])

    def find(self, tile: int) -> Optional[Tuple[int, int]]:
        """Return the first (row, col) holding tile in row-major order, or None."""
        matches = np.argwhere(self._grid == tile)
        if len(matches) == 0:
            return None
        row, col = matches[0]
        return int(row), int(col)

    def swap_with_empty(self, row: int, col: int) -> None:
        """Slide the tile at (row, col) into the empty cell. No checks."""
        empty_row, empty_col = self.empty
        self._grid[empty_row, empty_col] = self._grid[row, col]
        self._grid[row, col] = EMPTY
        self.empty = (row, col)

    def count_misplaced(self) -> int:
        """Count tiles that are not in their solved position."""
        goal = np.arange(1, self.size + 1, dtype=np.int32).reshape(self._grid.shape)
        goal[-1, -1] = EMPTY
        tiles = self._grid != EMPTY
        return int(np.sum((self._grid != goal) & tiles))

    def is_consistent(self) -> bool:
        """
        Check the board invariants.

        Every value in 0..d*d-1 appears exactly once and the cached empty
        position holds 0.
        """
        values = np.sort(self._grid.flatten())
        if not np.array_equal(values, np.arange(self.size)):
            return False
        return self.get(*self.empty) == EMPTY

    def copy(self) -> BoardState:
        """Create a deep copy of the board."""
        return BoardState(self.dimension, self._grid, self.empty)

    def to_rows(self) -> List[List[int]]:
        """Return the grid as a list of rows of plain ints."""
        return [[int(v) for v in row] for row in self._grid]

    def to_log_lines(self) -> List[str]:
        """One pipe-delimited line per row, e.g. '8|7|6'."""
        return ['|'.join(str(v) for v in row) for row in self.to_rows()]

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> BoardState:
        """Create a board from a 2D list."""
        arr = np.array(rows, dtype=np.int32)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Rows must form a square grid, got shape {arr.shape}")
        return cls(arr.shape[0], arr)

    def __repr__(self) -> str:
        return f"BoardState(dimension={self.dimension}, empty={self.empty})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return False
        return (self.dimension == other.dimension
                and self.empty == other.empty
                and np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash((self.dimension, self._grid.tobytes()))
