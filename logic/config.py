"""
Game configuration for TicTacToe.
Timings, colours and texts used by the game engine.
"""

from typing import Optional

from .player import PlayerId


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the pace of the game.
    """

    # ==================== TIMING (seconds) ====================
    # Pause before the computer places its mark
    COMPUTER_MOVE_DELAY = 1.0

    # Pause after a win or draw, so the player can see the board
    NEXT_ROUND_DELAY = 2.0

    # ==================== COMPUTER PLAYER ====================
    # Seed for the computer's random moves (None = unpredictable)
    RANDOM_SEED = None

    # ==================== DECORATION ====================
    # Highlight colour of the winning line, per winner
    WIN_COLORS = {
        PlayerId.HUMAN: "#66CC66",     # Green
        PlayerId.COMPUTER: "#ef5959",  # Red
    }

    # ==================== HISTORY ====================
    # History entry text, followed by the score "human:computer"
    HISTORY_WIN = "Win"
    HISTORY_LOSS = "Loss"
    HISTORY_DRAW = "Draw"

    def __init__(
        self,
        computer_move_delay: Optional[float] = None,
        next_round_delay: Optional[float] = None,
        random_seed: Optional[int] = None
    ):
        """
        Initialize the config, optionally overriding the class defaults.

        Args:
            computer_move_delay: Override COMPUTER_MOVE_DELAY.
            next_round_delay: Override NEXT_ROUND_DELAY.
            random_seed: Override RANDOM_SEED.
        """
        if computer_move_delay is not None:
            self.COMPUTER_MOVE_DELAY = computer_move_delay
        if next_round_delay is not None:
            self.NEXT_ROUND_DELAY = next_round_delay
        if random_seed is not None:
            self.RANDOM_SEED = random_seed

    def win_color(self, player_id: PlayerId) -> str:
        """Get the highlight colour for a winner."""
        return self.WIN_COLORS[player_id]
