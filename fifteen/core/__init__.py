"""Core module for the board state and game engine."""

from .board import BoardState, DIM_MIN, DIM_MAX, EMPTY
from .engine import initialize, attempt_move, is_won, render

__all__ = [
    "BoardState",
    "DIM_MIN",
    "DIM_MAX",
    "EMPTY",
    "initialize",
    "attempt_move",
    "is_won",
    "render",
]
