"""
Terminal module for TicTacToe.
Handles console input, board drawing and output clearing.
"""

from .config import TerminalConfig, ExitCode
from .input_parser import (
    InputClosedError,
    InputKind,
    ParsedInput,
    parse_input,
    read_command,
    read_nickname,
)
from .renderer import TerminalRenderer
