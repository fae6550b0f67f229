"""
Board for terminal TicTacToe.
A fixed 3x3 grid of marks, stored as a numpy array.
"""

from enum import Enum
from typing import List, Tuple

import numpy as np


# TicTacToe is a 3x3 grid
BOARD_SIZE = 3


class Mark(Enum):
    """What a cell can hold."""
    EMPTY = "_"
    X = "X"
    O = "O"

    def is_player_mark(self) -> bool:
        """True for X and O."""
        return self is not Mark.EMPTY


class Board:
    """
    The 3x3 cell store.

    Cells start EMPTY. `place` is the only write operation and it only
    fills empty cells, so a mark never goes away during a game.
    Callers must check the cell first (see MoveHandler).
    """

    def __init__(self):
        # One-character strings: "_", "X" or "O"
        self._cells = np.full((BOARD_SIZE, BOARD_SIZE), Mark.EMPTY.value, dtype="<U1")

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """True if (row, col) is on the board."""
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get(self, row: int, col: int) -> Mark:
        """
        Read a single cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The Mark in that cell.
        """
        return Mark(str(self._cells[row, col]))

    def is_empty(self, row: int, col: int) -> bool:
        """True if the cell holds no mark."""
        return bool(self._cells[row, col] == Mark.EMPTY.value)

    def place(self, row: int, col: int, mark: Mark):
        """
        Put a mark into an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            mark: Mark.X or Mark.O.
        """
        assert self.in_bounds(row, col), f"({row}, {col}) is off the board"
        assert mark.is_player_mark(), "cannot place an empty mark"
        assert self.is_empty(row, col), f"cell ({row}, {col}) is already occupied"

        self._cells[row, col] = mark.value

    def line(self, cells: List[Tuple[int, int]]) -> np.ndarray:
        """Values of the given cells, in order."""
        rows, cols = zip(*cells)
        return self._cells[list(rows), list(cols)]

    def has_free_cells(self) -> bool:
        """True if at least one cell is still empty."""
        return bool(np.any(self._cells == Mark.EMPTY.value))

    def occupied_count(self) -> int:
        """Number of cells holding X or O."""
        return int(np.count_nonzero(self._cells != Mark.EMPTY.value))

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, row by row.
        """
        rows, cols = np.nonzero(self._cells == Mark.EMPTY.value)
        return [(int(row), int(col)) for row, col in zip(rows, cols)]

    def rows(self) -> Tuple[Tuple[Mark, ...], ...]:
        """Read-only snapshot of the whole board, for rendering."""
        return tuple(
            tuple(Mark(str(value)) for value in row)
            for row in self._cells
        )

    def __repr__(self) -> str:
        return "Board(" + "/".join("".join(row) for row in self._cells) + ")"
