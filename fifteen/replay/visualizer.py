"""Charts for replayed games."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .replayer import ReplayReport


class ReplayVisualizer:
    """
    Chart generator for a replayed game.

    Plots how far the board was from solved after each move, and the board
    the game finished on.
    """

    COLORS = {
        "legal": "#3498db",    # Blue
        "illegal": "#e74c3c",  # Red
    }

    def __init__(self, report: ReplayReport, output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            report: Report produced by LogReplayer.
            output_dir: Directory to save generated charts.
        """
        self.report = report
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [self.plot_progress(), self.plot_final_board()]

    def plot_progress(self) -> str:
        """Line chart of misplaced tiles after each move."""
        fig, ax = plt.subplots(figsize=(10, 6))

        moves = np.arange(len(self.report.steps) + 1)
        misplaced = [self.report.initial_misplaced] + [s.misplaced for s in self.report.steps]

        ax.plot(moves, misplaced, color=self.COLORS["legal"], linewidth=1.5,
                label="Misplaced tiles")

        illegal = [(i + 1, s.misplaced) for i, s in enumerate(self.report.steps) if not s.legal]
        if illegal:
            xs, ys = zip(*illegal)
            ax.scatter(xs, ys, color=self.COLORS["illegal"], marker="x", s=40,
                       zorder=3, label="Illegal move")

        ax.set_xlabel('Move', fontsize=12)
        ax.set_ylabel('Misplaced Tiles', fontsize=12)
        d = self.report.dimension
        ax.set_title(f'Progress on {d}x{d} Board', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)
        ax.legend()

        plt.tight_layout()
        path = os.path.join(self.output_dir, "progress.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path

    def plot_final_board(self) -> str:
        """Heatmap of the final board, annotated with tile numbers."""
        d = self.report.dimension
        fig, ax = plt.subplots(figsize=(1.2 * d + 2, 1.2 * d + 1))

        grid = np.array(self.report.final_rows, dtype=np.int32)
        labels = np.where(grid == 0, "", grid.astype(str))
        mask = grid == 0

        sns.heatmap(grid, annot=labels, fmt="", mask=mask, cmap="YlGnBu",
                    cbar=False, linewidths=1, linecolor="black", square=True,
                    xticklabels=False, yticklabels=False, ax=ax)

        status = "solved" if self.report.won else "unsolved"
        ax.set_title(f'Final Board ({status})', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "final_board.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()

        return path
