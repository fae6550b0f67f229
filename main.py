"""
Main entry point for terminal TicTacToe.

This script ties together:
- Logic (board, players, move history, rules)
- Terminal (input parsing, board drawing, output clearing)

Run this script to play TicTacToe with a friend in one terminal!
"""

import argparse
import sys
from typing import Optional, TextIO

from logic import __version__
from logic.game_state import Game, new_game, destroy_game
from logic.move_handler import MoveHandler, MoveResult

from terminal.config import ExitCode, TerminalConfig
from terminal.input_parser import (
    InputClosedError,
    InputKind,
    read_command,
    read_nickname,
    tolerant_input,
)
from terminal.renderer import TerminalRenderer


class TicTacToeConsole:
    """
    Main controller for a terminal game.

    Game flow:
    1. Draw the board and prompt the current player
    2. Apply a move, or run a command (quit, rename, restart)
    3. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        config: Optional[TerminalConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None
    ):
        """
        Initialize the console.

        Args:
            config: Terminal configuration.
            stdin: Input stream. Defaults to sys.stdin.
            stdout: Output stream. Defaults to sys.stdout.
            stderr: Debug output stream. Defaults to sys.stderr.
        """
        self.config = config or TerminalConfig()
        self.stdin = tolerant_input(stdin or sys.stdin)
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

        self.renderer = TerminalRenderer(self.config, self.stdout)
        self.move_handler = MoveHandler()
        self.game: Optional[Game] = None

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(f"[debug] {message}", file=self.stderr)

    def run(self) -> ExitCode:
        """
        Play until the game ends or a player quits.

        Every restart builds a brand-new game.

        Returns:
            ExitCode.SUCCESS.

        Raises:
            InputClosedError: The console input ended.
        """
        while True:
            self.game = new_game()
            self._debug("new game")

            try:
                restart = self._game_loop()
            finally:
                destroy_game(self.game)
                self.game = None

            if not restart:
                return ExitCode.SUCCESS

            self.renderer.clean_output()

    def _game_loop(self) -> bool:
        """
        Run one game.

        Returns:
            True if a player asked for a restart, False when the game
            ended or a player quit.
        """
        game = self.game

        while not game.is_over:
            self.renderer.show(game)

            player = game.current_player
            command = read_command(self.stdin, self.stdout, player.nickname, self.config)
            self._debug(f"{player.nickname} ({player.mark.value}): {command.kind.value}")

            if command.kind is InputKind.COORDINATES:
                self._handle_move(command.row, command.col)
            elif command.kind is InputKind.ERROR:
                self.renderer.clean_output()
            elif command.kind is InputKind.QUIT:
                return False
            elif command.kind is InputKind.RESTART:
                return True
            elif command.kind is InputKind.RENAME:
                self._handle_rename()

        return False

    def _handle_move(self, row: int, col: int) -> MoveResult:
        """Apply a move and redraw."""
        game = self.game
        result = self.move_handler.apply_move(game, row, col)

        if not result.is_applied:
            self._debug(f"rejected ({row}, {col}): {result.error_message}")
        else:
            self._debug(f"{result.player.nickname} -> ({row}, {col}): {result.outcome.value}")

        self.renderer.clean_output()
        if game.is_over:
            self.renderer.show_game_over(game)
        return result

    def _handle_rename(self):
        """Ask for a new nickname for the current player."""
        player = self.game.current_player
        raw = read_nickname(self.stdin, self.stdout, self.config)
        self.game.players.rename(player, raw)
        self._debug(f"renamed {player.mark.value} to {player.nickname!r}")
        self.renderer.clean_output()


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Tic-tac-toe in a terminal with two players")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not erase previous output between turns"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug traces to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    config = TerminalConfig()
    config.CLEAR_OUTPUT = not args.no_clear
    config.DEBUG_MODE = args.debug

    console = TicTacToeConsole(config)

    try:
        return int(console.run())
    except InputClosedError:
        print("\nERROR: Input closed, cannot continue.", file=sys.stderr)
        return int(ExitCode.INPUT_ERR)
    except UnicodeError as e:
        print(f"\nERROR: Unreadable input: {e}", file=sys.stderr)
        return int(ExitCode.INPUT_ERR)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return int(ExitCode.SUCCESS)
    except MemoryError:
        print("\nERROR: Out of memory!", file=sys.stderr)
        return int(ExitCode.MEMORY_ALLOC_ERR)


if __name__ == "__main__":
    sys.exit(main())
