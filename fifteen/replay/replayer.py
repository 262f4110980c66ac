"""Replay a game log through the engine and check it turn by turn."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Iterable, Tuple
import json
import os

from tqdm import tqdm

from ..core.board import BoardState, DIM_MIN, DIM_MAX
from ..core.engine import initialize, attempt_move, is_won


class LogFormatError(ValueError):
    """Raised when a game log cannot be parsed."""


@dataclass
class ReplayTurn:
    """One logged turn: the board shown and the tile entered afterwards."""
    rows: List[List[int]]
    tile: Optional[int] = None


@dataclass
class ReplayStep:
    """Outcome of re-applying a single logged move."""
    turn: int
    tile: int
    legal: bool
    misplaced: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "tile": self.tile,
            "legal": self.legal,
            "misplaced": self.misplaced,
        }


@dataclass
class Mismatch:
    """A logged board that differs from what the engine produced."""
    turn: int
    expected: List[List[int]]
    actual: List[List[int]]

    def to_dict(self) -> Dict[str, Any]:
        return {"turn": self.turn, "expected": self.expected, "actual": self.actual}


@dataclass
class ReplayReport:
    """Results of replaying a log."""
    dimension: int
    initial_misplaced: int = 0
    steps: List[ReplayStep] = field(default_factory=list)
    mismatches: List[Mismatch] = field(default_factory=list)
    final_rows: List[List[int]] = field(default_factory=list)
    won: bool = False

    @property
    def total_moves(self) -> int:
        return len(self.steps)

    @property
    def legal_moves(self) -> int:
        return sum(1 for s in self.steps if s.legal)

    @property
    def illegal_moves(self) -> int:
        return sum(1 for s in self.steps if not s.legal)

    @property
    def verified(self) -> bool:
        """True if every logged board matched the engine."""
        return not self.mismatches

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary."""
        return {
            "dimension": self.dimension,
            "total_moves": self.total_moves,
            "legal_moves": self.legal_moves,
            "illegal_moves": self.illegal_moves,
            "won": self.won,
            "verified": self.verified,
            "initial_misplaced": self.initial_misplaced,
            "final_board": self.final_rows,
            "steps": [s.to_dict() for s in self.steps],
            "mismatches": [m.to_dict() for m in self.mismatches],
        }

    def save(self, path: str) -> None:
        """Write the report as JSON."""
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def _parse_int(text: str, line_no: int) -> int:
    try:
        return int(text)
    except ValueError:
        raise LogFormatError(f"Line {line_no}: expected an integer, got {text!r}")


def parse_log(lines: Iterable[str]) -> Tuple[int, List[ReplayTurn]]:
    """
    Parse the text of a game log.

    Board rows look like '8|7|6'; a bare integer after a board is the tile
    the player entered on that turn.

    Args:
        lines: Lines of the log file.

    Returns:
        Tuple of (dimension, turns).
    """
    dimension = 0
    turns: List[ReplayTurn] = []
    rows: List[List[int]] = []

    for line_no, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line:
            continue

        if "|" in line:
            row = [_parse_int(v.strip(), line_no) for v in line.split("|")]
            if dimension == 0:
                dimension = len(row)
                if dimension < DIM_MIN or dimension > DIM_MAX:
                    raise LogFormatError(
                        f"Line {line_no}: board width {dimension} is outside "
                        f"{DIM_MIN}-{DIM_MAX}"
                    )
            if len(row) != dimension:
                raise LogFormatError(
                    f"Line {line_no}: expected {dimension} cells, got {len(row)}"
                )
            rows.append(row)
            if len(rows) == dimension:
                turns.append(ReplayTurn(rows=rows))
                rows = []
            continue

        if rows:
            raise LogFormatError(f"Line {line_no}: move in the middle of a board")
        if not turns or turns[-1].tile is not None:
            raise LogFormatError(f"Line {line_no}: move without a preceding board")
        turns[-1].tile = _parse_int(line, line_no)

    if rows:
        raise LogFormatError("Log ends with an incomplete board")
    if not turns:
        raise LogFormatError("Log contains no boards")

    return dimension, turns


class LogReplayer:
    """
    Re-runs a logged game through the engine.

    Starts from a freshly initialized board, applies each logged tile with
    attempt_move and compares the result against the next logged board.
    After a mismatch the replay continues from the logged board, which must
    hold each tile exactly once.
    """

    def __init__(self, path: str = "log.txt"):
        self.path = path

    def load(self) -> Tuple[int, List[ReplayTurn]]:
        """Read and parse the log file."""
        with open(self.path, "r") as f:
            return parse_log(f)

    def run(self, show_progress: bool = True) -> ReplayReport:
        """
        Replay the log.

        Returns:
            A ReplayReport describing every move and any mismatches.
        """
        dimension, turns = self.load()
        return replay_turns(dimension, turns, show_progress=show_progress)


def _load_logged_board(turn: int, rows: List[List[int]]) -> BoardState:
    """Build a board from a logged snapshot, rejecting impossible boards."""
    try:
        state = BoardState.from_rows(rows)
    except ValueError as e:
        raise LogFormatError(f"Turn {turn}: {e}")
    if not state.is_consistent():
        raise LogFormatError(f"Turn {turn}: board does not hold each tile exactly once")
    return state


def replay_turns(dimension: int, turns: List[ReplayTurn],
                 show_progress: bool = False) -> ReplayReport:
    """Replay already-parsed turns. See LogReplayer."""
    state = initialize(dimension)
    report = ReplayReport(dimension=dimension)

    pbar = tqdm(total=len(turns), desc="Replaying", disable=not show_progress)

    for index, turn in enumerate(turns):
        actual = state.to_rows()
        if actual != turn.rows:
            report.mismatches.append(Mismatch(turn=index, expected=actual, actual=turn.rows))
            state = _load_logged_board(index, turn.rows)
        if index == 0:
            report.initial_misplaced = state.count_misplaced()

        if turn.tile is not None:
            legal = attempt_move(state, turn.tile)
            report.steps.append(ReplayStep(
                turn=index,
                tile=turn.tile,
                legal=legal,
                misplaced=state.count_misplaced(),
            ))
        pbar.update(1)

    pbar.close()

    report.final_rows = state.to_rows()
    report.won = is_won(state)
    return report
