"""
Players for TicTacToe.
A player is either the human or the computer, and holds a mark
that swaps at the start of every round.
"""

from enum import Enum
from dataclasses import dataclass

from .board import Mark


class PlayerId(Enum):
    """The two sides of the game."""
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "PlayerId":
        """Get the other side."""
        return PlayerId.COMPUTER if self == PlayerId.HUMAN else PlayerId.HUMAN


@dataclass
class Player:
    """
    A player and the mark it currently plays with.

    The identity is fixed; only the mark changes.
    """
    identity: PlayerId
    mark: Mark

    def __post_init__(self):
        if self.mark == Mark.EMPTY:
            raise ValueError("A player must play CROSS or CIRCLE")

    def toggle(self):
        """Swap CROSS <-> CIRCLE."""
        self.mark = self.mark.opposite()

    @property
    def is_human(self) -> bool:
        return self.identity == PlayerId.HUMAN

    @property
    def name(self) -> str:
        """Display name, e.g. "Human"."""
        return self.identity.value.capitalize()
