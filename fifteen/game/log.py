"""Turn-by-turn text log of board snapshots and attempted moves."""

from __future__ import annotations
from typing import Optional, TextIO

from ..core.board import BoardState


class MoveLog:
    """
    Writes the game log used for testing and replay.

    Each turn appends the board as pipe-delimited rows, followed by the tile
    the player asked to move (if any). The file is flushed after every write
    so a crashed session still leaves a usable log.
    """

    def __init__(self, path: str = "log.txt"):
        self.path = path
        self._file: Optional[TextIO] = None

    def open(self) -> MoveLog:
        """Open (and truncate) the log file."""
        self._file = open(self.path, "w")
        return self

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> MoveLog:
        if self._file is None:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def write_board(self, state: BoardState) -> None:
        for line in state.to_log_lines():
            self._write(line)

    def write_move(self, tile: int) -> None:
        self._write(str(tile))

    def _write(self, line: str) -> None:
        if self._file is None:
            raise RuntimeError(f"Log {self.path} is not open")
        self._file.write(line + "\n")
        self._file.flush()
