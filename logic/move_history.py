"""
Move history for terminal TicTacToe.
Keeps every occupied cell in the order it was played.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    row: int                # Row (0-2)
    col: int                # Column (0-2)


@dataclass
class MoveHistory:
    """
    Append-only record of the moves of one game.

    There is no way to remove or reorder a move. The whole history is
    thrown away together with its game.
    """

    _moves: List[Move] = field(default_factory=list)

    def record(self, row: int, col: int) -> Move:
        """
        Append a move.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The recorded Move.
        """
        move = Move(row=row, col=col)
        self._moves.append(move)
        return move

    def last(self) -> Optional[Move]:
        """The most recent move, or None before the first one."""
        return self._moves[-1] if self._moves else None

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __getitem__(self, index: int) -> Move:
        return self._moves[index]
