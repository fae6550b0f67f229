"""
Terminal configuration for TicTacToe.
All the settings for prompts, board drawing and output clearing.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes."""
    SUCCESS = 0             # Normal end or quit
    MEMORY_ALLOC_ERR = 1    # Out of memory (practically unreachable)
    INPUT_ERR = 2           # Console input closed or unreadable


class TerminalConfig:
    """
    Configuration class for console settings.
    Override attributes on an instance (see main.py flags).
    """

    # ==================== OUTPUT CLEARING ====================
    # Lines erased between turns. Must cover help box + board + prompt.
    NUM_OF_LINES = 20

    # Set False when output is not a terminal (pipes, logs)
    CLEAR_OUTPUT = True

    # ==================== PROMPTS ====================
    MOVE_PROMPT = "> {nickname}: "
    RENAME_PROMPT = "> "
    UNKNOWN_NICKNAME = "Unknown"

    # ==================== BOARD DRAWING ====================
    BOX_WIDTH = 29           # Inner width of the help and result boxes
    BOARD_INDENT = "\t"

    # ==================== COMMANDS ====================
    QUIT_KEY = "q"
    RENAME_KEY = "n"
    RESTART_KEY = "r"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
