"""
Move handler for terminal TicTacToe.
Validates a move, applies it and advances the turn.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board
from .game_state import Game
from .players import Player
from .win_checker import GameResult, WinChecker


class MoveStatus(Enum):
    APPLIED = "applied"
    REJECTED = "rejected"


class RejectReason(Enum):
    """Why a move was not applied."""
    CELL_OCCUPIED = "cell_occupied"
    OUT_OF_RANGE = "out_of_range"
    GAME_OVER = "game_over"


@dataclass
class MoveResult:
    """Result of a move attempt."""
    status: MoveStatus
    player: Optional[Player] = None              # Who moved (or tried to)
    outcome: GameResult = GameResult.NONE
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None

    @property
    def is_applied(self) -> bool:
        return self.status is MoveStatus.APPLIED


class MoveHandler:
    """
    Applies moves to a Game.

    Rules:
    1. Can only place on empty cells
    2. Row and column must be 0-2
    3. Game must not be over

    A rejected move changes nothing. An applied move is recorded, placed
    for the current player and evaluated; the turn passes to the other
    player only if the game goes on.
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, game: Game, row: int, col: int) -> MoveResult:
        """
        Validate a move without applying it.

        Args:
            game: Current game.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            MoveResult with status APPLIED if the move would be accepted,
            REJECTED with a reason otherwise.
        """
        player = game.current_player

        # Check if game is over
        if game.is_over:
            return MoveResult(
                status=MoveStatus.REJECTED,
                player=player,
                reason=RejectReason.GAME_OVER,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        if not Board.in_bounds(row, col):
            return MoveResult(
                status=MoveStatus.REJECTED,
                player=player,
                reason=RejectReason.OUT_OF_RANGE,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        # Check if cell is empty
        if not game.board.is_empty(row, col):
            return MoveResult(
                status=MoveStatus.REJECTED,
                player=player,
                reason=RejectReason.CELL_OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {game.cell(row, col).value}"
            )

        return MoveResult(status=MoveStatus.APPLIED, player=player)

    def apply_move(self, game: Game, row: int, col: int) -> MoveResult:
        """
        Make a move for the current player.

        Args:
            game: Current game.
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            MoveResult. When applied, `outcome` tells whether the move
            won, drew, or left the game running.
        """
        result = self.validate_move(game, row, col)
        if not result.is_applied:
            return result

        player = game.current_player

        # Record first, then place, then evaluate the placed board
        game.history.record(row, col)
        game.board.place(row, col, player.mark)

        outcome = self.win_checker.evaluate(game.board, player.mark)
        if outcome is GameResult.NONE:
            game.players.switch_turn()
        else:
            # Current player stays put: it's the winner on a WIN
            game.finish(outcome)

        result.outcome = outcome
        return result

    def get_valid_moves(self, game: Game) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions, empty once the game is over.
        """
        if game.is_over:
            return []
        return game.board.empty_cells()
