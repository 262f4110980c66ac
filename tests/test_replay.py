"""Tests for log parsing, replay and charts."""

import json
import os

import pytest
from fifteen.replay import (
    LogReplayer,
    LogFormatError,
    ReplayVisualizer,
    parse_log,
    replay_turns,
)


# Start, move 1, move 8 (not adjacent), move 4, quit
GAME_LOG = """\
8|7|6
5|4|3
2|1|0
1
8|7|6
5|4|3
2|0|1
8
8|7|6
5|4|3
2|0|1
4
8|7|6
5|0|3
2|4|1
"""


def write_log(tmp_path, text):
    path = tmp_path / "log.txt"
    path.write_text(text)
    return str(path)


class TestParseLog:
    """Tests for parse_log."""

    def test_parse_turns(self):
        """Boards and moves are grouped into turns."""
        dimension, turns = parse_log(GAME_LOG.splitlines())
        assert dimension == 3
        assert len(turns) == 4
        assert [t.tile for t in turns] == [1, 8, 4, None]
        assert turns[1].rows == [[8, 7, 6], [5, 4, 3], [2, 0, 1]]

    def test_empty_log(self):
        """A log without boards is rejected."""
        with pytest.raises(LogFormatError):
            parse_log([])

    def test_incomplete_board(self):
        """A truncated board is rejected."""
        with pytest.raises(LogFormatError):
            parse_log(["8|7|6", "5|4|3"])

    def test_ragged_row(self):
        """Rows must all have the same width."""
        with pytest.raises(LogFormatError):
            parse_log(["8|7|6", "5|4", "2|1|0"])

    def test_two_moves_in_a_row(self):
        """Each board has at most one move after it."""
        with pytest.raises(LogFormatError):
            parse_log(["8|7|6", "5|4|3", "2|1|0", "1", "3"])

    def test_non_numeric(self):
        """Cells and moves must be integers."""
        with pytest.raises(LogFormatError):
            parse_log(["8|x|6", "5|4|3", "2|1|0"])

    def test_is_value_error(self):
        """LogFormatError can be caught as ValueError."""
        assert issubclass(LogFormatError, ValueError)


class TestLogReplayer:
    """Tests for LogReplayer."""

    def test_replay_verified(self, tmp_path):
        """A genuine log replays cleanly."""
        report = LogReplayer(write_log(tmp_path, GAME_LOG)).run(show_progress=False)

        assert report.verified
        assert report.dimension == 3
        assert report.total_moves == 3
        assert report.legal_moves == 2
        assert report.illegal_moves == 1
        assert not report.won
        assert report.final_rows == [[8, 7, 6], [5, 0, 3], [2, 4, 1]]

    def test_replay_detects_tampering(self, tmp_path):
        """A board that the engine could not produce is reported."""
        tampered = GAME_LOG.replace("2|0|1\n8\n", "2|1|0\n8\n", 1)
        report = LogReplayer(write_log(tmp_path, tampered)).run(show_progress=False)

        assert not report.verified
        assert report.mismatches[0].turn == 1
        assert report.mismatches[0].expected == [[8, 7, 6], [5, 4, 3], [2, 0, 1]]

    def test_replay_board_only(self):
        """A log holding only the starting board has no moves."""
        turns = parse_log(["8|7|6", "5|4|3", "2|1|0"])[1]
        report = replay_turns(3, turns)
        assert report.verified
        assert report.total_moves == 0
        assert not report.won

    def test_replay_rejects_board_without_gap(self):
        """A logged board with no empty cell stops the replay."""
        _, turns = parse_log([
            "8|7|6", "5|4|3", "2|1|0", "1",
            "8|7|6", "5|4|3", "2|9|1", "3",
            "8|7|6", "5|4|1", "2|9|3",
        ])
        with pytest.raises(LogFormatError):
            replay_turns(3, turns)

    def test_replay_rejects_duplicate_tiles(self):
        """A logged board repeating a tile stops the replay."""
        _, turns = parse_log(["8|7|6", "5|4|3", "2|1|0", "1", "8|8|6", "5|4|3", "2|0|1"])
        with pytest.raises(LogFormatError):
            replay_turns(3, turns)

    def test_initial_misplaced_uses_logged_start(self):
        """A log starting from another board is measured from that board."""
        _, turns = parse_log(["1|2|3", "4|5|6", "7|0|8", "8", "1|2|3", "4|5|6", "7|8|0"])
        report = replay_turns(3, turns)

        assert report.mismatches[0].turn == 0
        assert report.initial_misplaced == 1
        assert report.steps[0].misplaced == 0
        assert report.won

    def test_report_save(self, tmp_path):
        """Reports are written as JSON."""
        report = LogReplayer(write_log(tmp_path, GAME_LOG)).run(show_progress=False)
        out = tmp_path / "results" / "replay.json"
        report.save(str(out))

        data = json.loads(out.read_text())
        assert data["verified"] is True
        assert data["total_moves"] == 3
        assert [s["legal"] for s in data["steps"]] == [True, False, True]

    def test_missing_file(self, tmp_path):
        """A missing log raises OSError."""
        with pytest.raises(OSError):
            LogReplayer(str(tmp_path / "nope.txt")).run(show_progress=False)


class TestReplayVisualizer:
    """Tests for ReplayVisualizer."""

    def test_generate_all(self, tmp_path):
        """Charts are written to the output directory."""
        report = LogReplayer(write_log(tmp_path, GAME_LOG)).run(show_progress=False)
        charts = ReplayVisualizer(report, str(tmp_path / "charts")).generate_all()

        assert [os.path.basename(c) for c in charts] == ["progress.png", "final_board.png"]
        for chart in charts:
            assert os.path.getsize(chart) > 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
