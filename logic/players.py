"""
Players for terminal TicTacToe.
Two players with a nickname and a fixed mark, plus whose turn it is.
"""

from dataclasses import dataclass
from typing import Iterator

from .board import Mark


# Nicknames are capped at 63 bytes (UTF-8)
MAX_NICKNAME_BYTES = 63

DEFAULT_NICKNAMES = ("Player_1", "Player_2")


def truncate_nickname(raw: str) -> str:
    """
    Turn a line of user input into a nickname.

    Drops one trailing line terminator and keeps at most
    MAX_NICKNAME_BYTES bytes. A multi-byte character that would be cut
    in half is dropped entirely.

    Args:
        raw: Text as read from the console.

    Returns:
        The nickname to store.
    """
    if raw.endswith("\r\n"):
        raw = raw[:-2]
    elif raw.endswith("\n"):
        raw = raw[:-1]

    # Undecodable input bytes (surrogate escapes) become "?"
    encoded = raw.encode("utf-8", errors="replace")
    return encoded[:MAX_NICKNAME_BYTES].decode("utf-8", errors="ignore")


@dataclass
class Player:
    """A player. Only the nickname ever changes."""
    nickname: str
    mark: Mark

    def rename(self, raw: str):
        """Replace the nickname with the truncated `raw`."""
        self.nickname = truncate_nickname(raw)


class PlayerRegistry:
    """
    The two players of a game and the current-turn pointer.

    Player 1 plays X and moves first, player 2 plays O.
    """

    def __init__(self):
        self.player_1 = Player(nickname=DEFAULT_NICKNAMES[0], mark=Mark.X)
        self.player_2 = Player(nickname=DEFAULT_NICKNAMES[1], mark=Mark.O)
        self.current = self.player_1

    def other(self, player: Player) -> Player:
        """Get the opponent of `player`."""
        return self.player_2 if player is self.player_1 else self.player_1

    def switch_turn(self) -> Player:
        """
        Hand the turn to the other player.

        Returns:
            The player whose turn it is now.
        """
        self.current = self.other(self.current)
        return self.current

    def by_mark(self, mark: Mark) -> Player:
        """Get the player who plays `mark`."""
        for player in self:
            if player.mark is mark:
                return player
        raise KeyError(f"No player plays {mark.value}")

    def rename(self, player: Player, raw: str):
        """Rename one of the two players."""
        player.rename(raw)

    def __iter__(self) -> Iterator[Player]:
        return iter((self.player_1, self.player_2))
