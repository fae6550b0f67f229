"""
Win checker for terminal TicTacToe.
Decides whether the last move won the game or filled the board.
"""

from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Mark


class GameResult(Enum):
    """Outcome of evaluating the board after a move."""
    NONE = "none"     # Game goes on
    WIN = "win"
    DRAW = "draw"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    Only the mark of the player who just moved is checked, since only
    that move can have completed a line. Run it after the mark is placed.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def evaluate(self, board: Board, mark: Mark) -> GameResult:
        """
        Evaluate the board for the player who just moved.

        Args:
            board: The game board, with the latest move already placed.
            mark: Mark of the player who just moved.

        Returns:
            GameResult.WIN if `mark` owns a full line, GameResult.DRAW if
            no line is won and no empty cell is left, GameResult.NONE otherwise.
        """
        if self.winning_line(board, mark) is not None:
            return GameResult.WIN

        if not board.has_free_cells():
            return GameResult.DRAW

        return GameResult.NONE

    def winning_line(self, board: Board, mark: Mark) -> Optional[List[Tuple[int, int]]]:
        """
        Get the line `mark` completed, if there is one.

        Args:
            board: The game board.
            mark: The mark to look for.

        Returns:
            The winning line as list of (row, col), or None.
        """
        if not mark.is_player_mark():
            return None

        for line in self.WINNING_LINES:
            if np.all(board.line(line) == mark.value):
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Row 0 all X
    board = Board()
    for row, col, mark in [(0, 0, Mark.X), (1, 1, Mark.O), (0, 1, Mark.X),
                           (2, 2, Mark.O), (0, 2, Mark.X)]:
        board.place(row, col, mark)
    print(f"Row win: {checker.evaluate(board, Mark.X)}")

    # Full board, no line
    board = Board()
    for row, col, mark in [(0, 0, Mark.X), (0, 1, Mark.O), (0, 2, Mark.X),
                           (1, 1, Mark.O), (1, 0, Mark.X), (1, 2, Mark.O),
                           (2, 1, Mark.X), (2, 0, Mark.O), (2, 2, Mark.X)]:
        board.place(row, col, mark)
    print(f"Full board: {checker.evaluate(board, Mark.X)}")

    print("\nWinChecker test done!")
