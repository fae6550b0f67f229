"""
Renderer for terminal TicTacToe.
Draws the help box, the board and the end-of-game message as plain text.
"""

import sys
from typing import List, Optional, TextIO

from logic.board import BOARD_SIZE
from logic.game_state import Game
from logic.win_checker import GameResult

from .config import TerminalConfig


HELP_LINES = [
    "         Tic Tac Toe",
    " To move, enter the row and",
    " column separated by a space.",
    "",
    " Commands:",
    " {quit} - exit",
    " {restart} - restart",
    " {rename} - rename",
    "",
    " Enjoy the game!",
]


class TerminalRenderer:
    """
    Writes the game to a text terminal.

    The engine never prints; everything the player sees goes through here.
    Between turns the previous screen is erased with ANSI escapes
    instead of clearing the whole terminal.
    """

    def __init__(self, config: Optional[TerminalConfig] = None, out: Optional[TextIO] = None):
        """
        Initialize the renderer.

        Args:
            config: Terminal configuration. Uses defaults if not provided.
            out: Output stream. Defaults to sys.stdout.
        """
        self.config = config or TerminalConfig()
        self.out = out or sys.stdout

    def _box(self, lines: List[str]) -> List[str]:
        """Frame lines in the underscore/pipe box."""
        width = self.config.BOX_WIDTH
        framed = [" " + "_" * width]
        for text in lines:
            if len(text) <= width:
                framed.append("|" + text.ljust(width) + "|")
            else:
                # Too long to close the box (long nicknames)
                framed.append("|" + text)
        framed.append("|" + "_" * width + "|")
        return framed

    def render_help(self) -> str:
        """The title box with instructions and commands."""
        lines = [
            text.format(
                quit=self.config.QUIT_KEY,
                restart=self.config.RESTART_KEY,
                rename=self.config.RENAME_KEY,
            )
            for text in HELP_LINES
        ]
        return "\n".join(self._box(lines)) + "\n"

    def render_grid(self, game: Game) -> str:
        """
        The 3x3 grid with row and column labels.

        Empty cells show as "_", occupied ones as X or O.
        """
        indent = self.config.BOARD_INDENT
        header = "    " + "   ".join(str(col) for col in range(BOARD_SIZE))
        lines = [indent + header, indent + "   " + " ".join(["___"] * BOARD_SIZE)]

        for row, marks in enumerate(game.board.rows()):
            cells = "|".join(f"_{mark.value}_" for mark in marks)
            lines.append(f"{indent}{row} |{cells}|")

        return "\n".join(lines) + "\n"

    def render_board(self, game: Game) -> str:
        """Help box, a blank line, the grid and a blank line."""
        return self.render_help() + "\n" + self.render_grid(game) + "\n"

    def render_game_over(self, game: Game) -> str:
        """
        The end-of-game message.

        Returns:
            A winner box, a draw box, or "" while the game is running.
        """
        if game.result is GameResult.WIN:
            box = self._box([""])
            # Nickname length varies, so the winner line is left open
            box.insert(2, f"|  {game.winner.nickname} is a winner!" + " " * 12)
        elif game.result is GameResult.DRAW:
            box = self._box(["", " This game ended in a draw!"])
        else:
            return ""

        return "\n".join(box) + "\n"

    def clean_output(self, rows: Optional[int] = None):
        """
        Erase the previous `rows` lines of output.

        Moves the cursor up line by line and clears each line:
            \\r      - carriage return
            \\033[2K - clear entire line
            \\033[A  - cursor up one line
        """
        if not self.config.CLEAR_OUTPUT:
            return

        rows = self.config.NUM_OF_LINES if rows is None else rows
        for i in range(rows):
            if i < rows - 1:
                self.out.write("\033[K")
            self.out.write("\r\033[2K\033[A")
        self.out.flush()

    def show(self, game: Game):
        """Write the board."""
        self.out.write(self.render_board(game))
        self.out.flush()

    def show_game_over(self, game: Game):
        """Write the final board and the result."""
        self.out.write(self.render_board(game))
        self.out.write(self.render_game_over(game))
        self.out.flush()
