"""
Computer player for TicTacToe.
Picks a random empty cell. There is no strategy on purpose:
every open cell is equally likely.
"""

import random
from typing import Optional

from .board import Board


class RandomComputerPlayer:
    """
    A computer opponent that plays uniformly at random.

    Pass a seed (or your own random.Random) to get a repeatable
    sequence of moves, e.g. in tests or replays.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the computer player.

        Args:
            seed: Seed for a private random generator.
            rng: Random generator to use instead (overrides seed).
        """
        self.rng = rng if rng is not None else random.Random(seed)

        # Keep track of how many moves we've made (for debugging)
        self.moves_made = 0

    def choose_move(self, board: Board) -> Optional[int]:
        """
        Choose a cell for the next move.

        Args:
            board: Current board.

        Returns:
            Index of an empty cell, or None if the board is full.
        """
        candidates = board.empty_indices()

        if not candidates:
            return None

        self.moves_made += 1
        return self.rng.choice(candidates)
