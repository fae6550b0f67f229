"""
Game state management for terminal TicTacToe.
Owns the board, both players and the move history of one game.
"""

from enum import Enum
from typing import Optional

from .board import Board, Mark
from .move_history import MoveHistory
from .players import Player, PlayerRegistry
from .win_checker import GameResult


class GameStatus(Enum):
    """Whether moves are still accepted."""
    IN_PROGRESS = "in_progress"
    OVER = "over"


class Game:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - Both players and whose turn it is
    - Move history
    - Game status (in progress or over) and the result

    A game goes from IN_PROGRESS to OVER once and stays there. Restarting
    builds a new Game instead of reviving an old one.
    """

    def __init__(self):
        self.board = Board()
        self.players = PlayerRegistry()
        self.history = MoveHistory()
        self.status = GameStatus.IN_PROGRESS
        self.result = GameResult.NONE

    @property
    def current_player(self) -> Player:
        """The player to move, or the one who finished the game."""
        return self.players.current

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.OVER

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None while playing or after a draw."""
        if self.result is GameResult.WIN:
            return self.players.current
        return None

    def cell(self, row: int, col: int) -> Mark:
        """Mark at (row, col)."""
        return self.board.get(row, col)

    def finish(self, result: GameResult):
        """
        End the game.

        Args:
            result: GameResult.WIN or GameResult.DRAW.
        """
        assert not self.is_over, "game is already over"
        assert result is not GameResult.NONE, "a game cannot end without a result"

        self.status = GameStatus.OVER
        self.result = result


def new_game() -> Game:
    """Create a fresh game: empty board, default players, player 1 to move."""
    return Game()


def destroy_game(game: Optional[Game]):
    """
    Release everything a game owns.

    The game must not be used afterwards. Passing None is allowed.
    """
    if game is None:
        return

    game.board = None
    game.players = None
    game.history = None


def restart_game(game: Optional[Game]) -> Game:
    """
    Throw a game away and start over.

    Nicknames go back to the defaults, since the new game gets new players.

    Returns:
        A brand-new game.
    """
    destroy_game(game)
    return new_game()
