"""
Logic module for terminal TicTacToe.
Handles the board, players, move history, rules and game lifecycle.
"""

__version__ = "1.0.0"

from .board import Board, Mark, BOARD_SIZE
from .move_history import Move, MoveHistory
from .players import Player, PlayerRegistry, truncate_nickname, MAX_NICKNAME_BYTES
from .win_checker import WinChecker, GameResult
from .game_state import Game, GameStatus, new_game, destroy_game, restart_game
from .move_handler import MoveHandler, MoveResult, MoveStatus, RejectReason
