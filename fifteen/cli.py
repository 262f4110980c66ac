"""Command-line interface for the Game of Fifteen."""

import argparse
import sys
from typing import List, Optional

from .core.board import DIM_MIN, DIM_MAX
from .game import FifteenGame, GameConfig, GameResult, MoveLog
from .replay import LogReplayer, LogFormatError, ReplayVisualizer


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="fifteen",
        description="Game of Fifteen on a d x d board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play the classic 4x4 puzzle
  python -m fifteen.cli play 4

  # Check a log written by a previous game
  python -m fifteen.cli replay log.txt --output results/replay.json

  # Chart a game
  python -m fifteen.cli plot log.txt --output results/
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "dimension", type=str,
        help=f"Board dimension, {DIM_MIN} to {DIM_MAX}"
    )
    play_parser.add_argument(
        "--log", "-l", type=str, default="log.txt",
        help="Log file for board snapshots and moves (default: log.txt)"
    )
    play_parser.add_argument(
        "--delay", type=float, default=None,
        help="Pause after each move and after an illegal move, in seconds (default: 0.5)"
    )
    play_parser.add_argument(
        "--no-greet", action="store_true",
        help="Skip the welcome screen"
    )

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Verify a game log")
    replay_parser.add_argument("log", type=str, help="Log file to replay")
    replay_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Write the replay report as JSON"
    )
    replay_parser.add_argument(
        "--quiet", "-q", action="store_true",
        help="Hide the progress bar"
    )

    # Plot command
    plot_parser = subparsers.add_parser("plot", help="Chart a game log")
    plot_parser.add_argument("log", type=str, help="Log file to chart")
    plot_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for charts (default: results)"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "replay":
        return cmd_replay(args)
    elif args.command == "plot":
        return cmd_plot(args)
    return 1


def cmd_play(args) -> int:
    """Handle the play command."""
    try:
        dimension = int(args.dimension)
    except ValueError:
        dimension = 0

    if dimension < DIM_MIN or dimension > DIM_MAX:
        print(f"Board must be between {DIM_MIN} x {DIM_MIN} and {DIM_MAX} x {DIM_MAX}, inclusive.")
        return 2

    config = GameConfig()
    if args.delay is not None:
        config.move_delay = args.delay
        config.illegal_delay = args.delay

    try:
        log = MoveLog(args.log).open()
    except OSError as e:
        print(f"Error opening log: {e}")
        return 3

    with log:
        game = FifteenGame(dimension, log, config=config)
        if not args.no_greet:
            game.greet()
        result = game.play()

    if result == GameResult.QUIT:
        print(f"Quit after {game.moves} moves.")
    return 0


def _replay(path: str, show_progress: bool):
    try:
        return LogReplayer(path).run(show_progress=show_progress)
    except OSError as e:
        print(f"Error reading log: {e}")
    except LogFormatError as e:
        print(f"Error parsing log: {e}")
    return None


def cmd_replay(args) -> int:
    """Handle the replay command."""
    report = _replay(args.log, show_progress=not args.quiet)
    if report is None:
        return 1

    d = report.dimension
    print("=" * 60)
    print(f"REPLAY OF {args.log} ({d}x{d})")
    print("=" * 60)
    print(f"  Moves: {report.total_moves} ({report.legal_moves} legal, {report.illegal_moves} illegal)")
    print(f"  Won: {'yes' if report.won else 'no'}")

    if report.verified:
        print("✓ Every logged board matches the engine")
    else:
        print(f"✗ {len(report.mismatches)} logged board(s) differ from the engine")
        for mismatch in report.mismatches:
            print(f"  - turn {mismatch.turn}")

    if args.output:
        report.save(args.output)
        print(f"\nReport saved to {args.output}")

    return 0 if report.verified else 1


def cmd_plot(args) -> int:
    """Handle the plot command."""
    report = _replay(args.log, show_progress=False)
    if report is None:
        return 1

    print("\nGenerating charts...")
    visualizer = ReplayVisualizer(report, args.output)
    charts = visualizer.generate_all()
    print(f"Charts saved to {args.output}/")
    for chart in charts:
        print(f"  - {chart.split('/')[-1]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
