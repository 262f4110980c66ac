"""Interactive game loop around the engine."""

from __future__ import annotations
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TextIO

from ..core.engine import initialize, attempt_move, is_won, render
from .log import MoveLog

# Entering this tile ends the game
QUIT_TILE = 0


class GameResult(Enum):
    """How a game session ended."""
    WON = "won"
    QUIT = "quit"


@dataclass
class GameConfig:
    """Pauses (in seconds) used to pace the game for a human player."""
    greet_delay: float = 2.0
    move_delay: float = 0.5
    illegal_delay: float = 0.5


class FifteenGame:
    """
    One game session: owns the board and drives the prompt loop.

    Input, output and sleeping are injected so the loop can run unattended.
    """

    def __init__(
        self,
        dimension: int,
        log: MoveLog,
        config: Optional[GameConfig] = None,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the session.

        Args:
            dimension: Board dimension (3 to 9).
            log: An open MoveLog receiving snapshots and moves.
            config: Timing configuration (default: GameConfig()).
            input_fn: Reads one line of user input given a prompt.
            output: Stream for the board and messages (default: stdout).
            sleep_fn: Called with a delay in seconds between turns.
        """
        self.state = initialize(dimension)
        self.log = log
        self.config = config or GameConfig()
        self.input_fn = input_fn
        self.output = output if output is not None else sys.stdout
        self.sleep_fn = sleep_fn

        self.moves = 0
        self.illegal_moves = 0

    def _print(self, text: str = "") -> None:
        self.output.write(text + "\n")

    def clear(self) -> None:
        """Clear the screen using ANSI escape sequences."""
        self.output.write("\033[2J")
        self.output.write("\033[0;0H")

    def greet(self) -> None:
        """Show the welcome banner."""
        self.clear()
        self._print("WELCOME TO GAME OF FIFTEEN")
        self.sleep_fn(self.config.greet_delay)

    def read_tile(self) -> int:
        """
        Prompt until the user enters an integer.

        End of input counts as the quit tile.
        """
        prompt = "Tile to move: "
        while True:
            self.output.write(prompt)
            try:
                text = self.input_fn("")
            except EOFError:
                return QUIT_TILE
            try:
                return int(text.strip())
            except ValueError:
                prompt = "Retry: "

    def play(self) -> GameResult:
        """
        Run turns until the board is won or the player quits.

        Returns:
            GameResult.WON or GameResult.QUIT.
        """
        while True:
            self.clear()
            self._print(render(self.state))
            self.log.write_board(self.state)

            if is_won(self.state):
                self._print("ftw!")
                return GameResult.WON

            tile = self.read_tile()
            if tile == QUIT_TILE:
                return GameResult.QUIT

            self.log.write_move(tile)

            if attempt_move(self.state, tile):
                self.moves += 1
            else:
                self.illegal_moves += 1
                self._print("\nIllegal move.")
                self.sleep_fn(self.config.illegal_delay)

            self.sleep_fn(self.config.move_delay)
