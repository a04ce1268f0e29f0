"""
Score and history for TicTacToe.
Lives for as long as the process does; nothing is saved.
"""

from typing import Dict, List

from .player import PlayerId


class Scoreboard:
    """
    Counts wins per player and keeps a text line per finished round.
    """

    def __init__(self):
        self.scores: Dict[PlayerId, int] = {
            PlayerId.HUMAN: 0,
            PlayerId.COMPUTER: 0,
        }
        self.history: List[str] = []

    def increment_score(self, player_id: PlayerId):
        """Add one win to a player."""
        self.scores[player_id] += 1

    def get_score(self, player_id: PlayerId) -> int:
        return self.scores[player_id]

    def append_history(self, text: str):
        self.history.append(text)

    def score_text(self) -> str:
        """Score as "human:computer", e.g. "2:1"."""
        return f"{self.scores[PlayerId.HUMAN]}:{self.scores[PlayerId.COMPUTER]}"

    def recent_history(self, count: int) -> List[str]:
        """The last `count` history lines, oldest first."""
        if count <= 0:
            return []
        return self.history[-count:]
