"""Replay module for verifying and charting game logs."""

from .replayer import (
    LogReplayer,
    LogFormatError,
    ReplayReport,
    ReplayStep,
    ReplayTurn,
    Mismatch,
    parse_log,
    replay_turns,
)
from .visualizer import ReplayVisualizer

__all__ = [
    "LogReplayer",
    "LogFormatError",
    "ReplayReport",
    "ReplayStep",
    "ReplayTurn",
    "Mismatch",
    "parse_log",
    "replay_turns",
    "ReplayVisualizer",
]
