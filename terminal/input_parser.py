"""
Input parser for terminal TicTacToe.
Reads console lines and classifies them as a move or a command.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from logic.board import Board

from .config import TerminalConfig


class InputClosedError(EOFError):
    """The console input ended; no further interaction is possible."""


class InputKind(Enum):
    """What a line of input asks for."""
    COORDINATES = "coordinates"
    ERROR = "error"
    QUIT = "quit"
    RENAME = "rename"
    RESTART = "restart"


@dataclass
class ParsedInput:
    """A classified line. row/col are set only for COORDINATES."""
    kind: InputKind
    row: Optional[int] = None
    col: Optional[int] = None


# Plain ASCII decimal, like scanf's %d (no "1_0", no non-ASCII digits)
INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: str) -> Optional[int]:
    if INT_TOKEN.fullmatch(token) is None:
        return None
    return int(token)


def parse_input(line: str, config: Optional[TerminalConfig] = None) -> ParsedInput:
    """
    Classify one line of input.

    Two integers in range are a move. Otherwise the line must be a single
    command character, optionally followed by whitespace.

    Args:
        line: Raw line, with or without its line terminator.
        config: Terminal configuration (command keys).

    Returns:
        ParsedInput; kind is ERROR for anything unrecognised.
    """
    config = config or TerminalConfig()

    tokens = line.split()
    if len(tokens) == 2:
        row, col = _parse_int(tokens[0]), _parse_int(tokens[1])
        if row is not None and col is not None and Board.in_bounds(row, col):
            return ParsedInput(InputKind.COORDINATES, row=row, col=col)

    text = line.rstrip("\r\n")
    if not text or text[0].isspace() or text[1:].strip():
        return ParsedInput(InputKind.ERROR)

    commands = {
        config.QUIT_KEY: InputKind.QUIT,
        config.RENAME_KEY: InputKind.RENAME,
        config.RESTART_KEY: InputKind.RESTART,
    }
    return ParsedInput(commands.get(text[0], InputKind.ERROR))


def tolerant_input(stream: TextIO) -> TextIO:
    """
    Make undecodable bytes show up as U+FFFD instead of raising.

    Only text wrappers can be switched, and only before the first read;
    other streams (io.StringIO) are returned unchanged.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")
    return stream


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if line == "":
        raise InputClosedError("console input closed")
    return line


def read_command(
    stream: TextIO,
    out: TextIO,
    nickname: Optional[str],
    config: Optional[TerminalConfig] = None
) -> ParsedInput:
    """
    Prompt the current player and parse their answer.

    Args:
        stream: Where lines come from (usually sys.stdin).
        out: Where the prompt goes (usually sys.stdout).
        nickname: Name shown in the prompt.
        config: Terminal configuration.

    Returns:
        The parsed line.

    Raises:
        InputClosedError: The input stream is exhausted.
    """
    config = config or TerminalConfig()

    if nickname is None:
        nickname = config.UNKNOWN_NICKNAME
    out.write(config.MOVE_PROMPT.format(nickname=nickname))
    out.flush()
    return parse_input(_read_line(stream), config)


def read_nickname(
    stream: TextIO,
    out: TextIO,
    config: Optional[TerminalConfig] = None
) -> str:
    """
    Prompt for a new nickname.

    Returns:
        The raw line (terminator included); the player truncates it.

    Raises:
        InputClosedError: The input stream is exhausted.
    """
    config = config or TerminalConfig()

    # Replace the move prompt line with the rename prompt
    if config.CLEAR_OUTPUT:
        out.write("\r\033[A\033[2K")
    out.write(config.RENAME_PROMPT)
    out.flush()
    return _read_line(stream)
