"""Game module: interactive session and move log."""

from .driver import FifteenGame, GameConfig, GameResult, QUIT_TILE
from .log import MoveLog

__all__ = ["FifteenGame", "GameConfig", "GameResult", "QUIT_TILE", "MoveLog"]
