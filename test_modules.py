"""
Tests for the TicTacToe game logic.
Run with pytest, or run this file directly for a quick summary.
"""

import random
import sys

import pytest

from logic.board import Board, Mark
from logic.move_history import Move, MoveHistory
from logic.players import PlayerRegistry, truncate_nickname, MAX_NICKNAME_BYTES
from logic.win_checker import WinChecker, GameResult
from logic.game_state import Game, GameStatus, new_game, destroy_game, restart_game
from logic.move_handler import MoveHandler, MoveStatus, RejectReason


# Row 0 completed by X on the fifth move
ROW_WIN_MOVES = [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]

# Fills the board without three in a row
DRAW_MOVES = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def play(game, moves, handler=None):
    """Apply moves in order, returning the last result."""
    handler = handler or MoveHandler()
    result = None
    for row, col in moves:
        result = handler.apply_move(game, row, col)
    return result


# ==================== BOARD ====================

def test_board_starts_empty():
    board = Board()
    assert board.occupied_count() == 0
    assert board.has_free_cells()
    assert len(board.empty_cells()) == 9
    assert all(mark is Mark.EMPTY for row in board.rows() for mark in row)


def test_board_place_and_read():
    board = Board()
    board.place(2, 1, Mark.O)
    assert board.get(2, 1) is Mark.O
    assert not board.is_empty(2, 1)
    assert board.occupied_count() == 1
    assert (2, 1) not in board.empty_cells()


def test_board_place_rejects_occupied_cell():
    board = Board()
    board.place(0, 0, Mark.X)
    with pytest.raises(AssertionError):
        board.place(0, 0, Mark.O)
    assert board.get(0, 0) is Mark.X


def test_board_bounds():
    assert Board.in_bounds(0, 0)
    assert Board.in_bounds(2, 2)
    assert not Board.in_bounds(3, 0)
    assert not Board.in_bounds(0, -1)


# ==================== MOVE HISTORY ====================

def test_history_keeps_insertion_order():
    history = MoveHistory()
    assert len(history) == 0
    assert history.last() is None

    history.record(1, 1)
    history.record(0, 2)

    assert list(history) == [Move(1, 1), Move(0, 2)]
    assert history[0] == Move(1, 1)
    assert history.last() == Move(0, 2)


# ==================== PLAYERS ====================

def test_default_players():
    players = PlayerRegistry()
    assert players.player_1.nickname == "Player_1"
    assert players.player_1.mark is Mark.X
    assert players.player_2.nickname == "Player_2"
    assert players.player_2.mark is Mark.O
    assert players.current is players.player_1
    assert players.by_mark(Mark.O) is players.player_2


def test_switch_turn_alternates():
    players = PlayerRegistry()
    assert players.switch_turn() is players.player_2
    assert players.switch_turn() is players.player_1


def test_rename_strips_line_terminator():
    players = PlayerRegistry()
    players.rename(players.player_1, "Alice\n")
    assert players.player_1.nickname == "Alice"
    players.rename(players.player_2, "Bob\r\n")
    assert players.player_2.nickname == "Bob"


def test_rename_truncates_to_63_bytes():
    players = PlayerRegistry()
    players.rename(players.current, "a" * 100 + "\n")

    assert players.current.nickname == "a" * 63
    assert players.current.mark is Mark.X


def test_truncate_never_splits_a_character():
    nickname = truncate_nickname("é" * 40)
    assert len(nickname.encode("utf-8")) <= MAX_NICKNAME_BYTES
    assert nickname == "é" * 31


def test_truncate_escaped_bytes():
    # A non-UTF-8 locale hands undecodable bytes over as surrogate escapes
    assert truncate_nickname("bob\udcff\n") == "bob?"
    assert truncate_nickname("") == ""


def test_rename_does_not_touch_board():
    game = new_game()
    play(game, [(1, 1)])
    game.players.rename(game.players.player_1, "Alice")
    assert game.cell(1, 1) is Mark.X
    assert game.players.player_1.mark is Mark.X
    assert game.current_player is game.players.player_2


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins(line):
    board = Board()
    for row, col in line:
        board.place(row, col, Mark.O)

    checker = WinChecker()
    assert checker.evaluate(board, Mark.O) is GameResult.WIN
    assert checker.winning_line(board, Mark.O) == line


def test_only_the_given_mark_is_checked():
    board = Board()
    for row, col in [(0, 0), (0, 1), (0, 2)]:
        board.place(row, col, Mark.O)

    assert WinChecker().evaluate(board, Mark.X) is GameResult.NONE


def test_full_board_without_line_is_draw():
    game = new_game()
    play(game, DRAW_MOVES)
    checker = WinChecker()
    assert checker.evaluate(game.board, Mark.X) is GameResult.DRAW
    assert checker.evaluate(game.board, Mark.O) is GameResult.DRAW


def test_evaluate_is_pure():
    game = new_game()
    play(game, [(0, 0), (1, 1)])
    checker = WinChecker()
    before = game.board.rows()

    results = {checker.evaluate(game.board, Mark.X) for _ in range(3)}

    assert results == {GameResult.NONE}
    assert game.board.rows() == before


# ==================== MOVE HANDLER ====================

def test_row_win_scenario():
    game = new_game()
    handler = MoveHandler()

    for row, col in ROW_WIN_MOVES[:-1]:
        result = handler.apply_move(game, row, col)
        assert result.outcome is GameResult.NONE

    result = handler.apply_move(game, *ROW_WIN_MOVES[-1])

    assert result.status is MoveStatus.APPLIED
    assert result.outcome is GameResult.WIN
    assert game.status is GameStatus.OVER
    assert game.winner is game.players.player_1
    assert game.current_player is game.players.player_1


def test_draw_scenario():
    game = new_game()
    result = play(game, DRAW_MOVES)

    assert result.outcome is GameResult.DRAW
    assert game.is_over
    assert game.winner is None
    # X made the last move and keeps the turn
    assert game.current_player is game.players.player_1


def test_occupied_cell_is_rejected_without_change():
    game = new_game()
    handler = MoveHandler()
    handler.apply_move(game, 1, 1)
    before = (game.board.rows(), list(game.history), game.current_player)

    result = handler.apply_move(game, 1, 1)

    assert result.status is MoveStatus.REJECTED
    assert result.reason is RejectReason.CELL_OCCUPIED
    assert (game.board.rows(), list(game.history), game.current_player) == before


def test_out_of_range_is_rejected():
    game = new_game()
    result = MoveHandler().apply_move(game, 3, 0)

    assert result.reason is RejectReason.OUT_OF_RANGE
    assert len(game.history) == 0


def test_no_moves_after_game_over():
    game = new_game()
    play(game, ROW_WIN_MOVES)
    handler = MoveHandler()

    result = handler.apply_move(game, 2, 0)

    assert result.reason is RejectReason.GAME_OVER
    assert game.cell(2, 0) is Mark.EMPTY
    assert handler.get_valid_moves(game) == []


def test_turn_switches_after_ongoing_move():
    game = new_game()
    handler = MoveHandler()

    result = handler.apply_move(game, 0, 0)

    assert result.player is game.players.player_1
    assert game.current_player is game.players.player_2
    assert game.cell(0, 0) is Mark.X


def test_validate_move_does_not_apply():
    game = new_game()
    result = MoveHandler().validate_move(game, 0, 0)

    assert result.is_applied
    assert game.cell(0, 0) is Mark.EMPTY
    assert len(game.history) == 0


@pytest.mark.parametrize("seed", range(20))
def test_history_matches_board_in_random_games(seed):
    rng = random.Random(seed)
    game = new_game()
    handler = MoveHandler()

    while not game.is_over:
        row, col = rng.randrange(3), rng.randrange(3)
        mover = game.current_player
        result = handler.apply_move(game, row, col)

        assert len(game.history) == game.board.occupied_count()
        if result.is_applied and result.outcome is GameResult.NONE:
            assert game.current_player is not mover
        else:
            assert game.current_player is mover

    assert game.result in (GameResult.WIN, GameResult.DRAW)


# ==================== LIFECYCLE ====================

def test_new_game():
    game = new_game()
    assert isinstance(game, Game)
    assert game.status is GameStatus.IN_PROGRESS
    assert game.result is GameResult.NONE
    assert len(game.history) == 0
    assert game.current_player is game.players.player_1


def test_restart_resets_everything():
    game = new_game()
    play(game, [(0, 0), (1, 1), (2, 2)])
    game.players.rename(game.players.player_1, "Alice")

    fresh = restart_game(game)

    assert fresh is not game
    assert fresh.board.occupied_count() == 0
    assert len(fresh.history) == 0
    assert fresh.current_player is fresh.players.player_1
    assert [p.nickname for p in fresh.players] == ["Player_1", "Player_2"]
    assert game.board is None


def test_destroy_accepts_none():
    destroy_game(None)


def run_all_tests():
    """Run all tests."""
    print("=" * 60)
    print("   TicTacToe - Logic Tests")
    print("=" * 60)

    sys.exit(pytest.main([__file__, "-q"]))


if __name__ == "__main__":
    run_all_tests()
