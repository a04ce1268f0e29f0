"""
Board surface for TicTacToe.

The surface is what the player sees: cell texts, the highlight of a
winning line and the "whose turn" decoration. The game engine writes
to it after every change and never reads its own state back from it.
"""

from typing import Optional, List

from .board import Mark, CELL_COUNT
from .player import PlayerId


class BoardSurface:
    """
    In-memory board surface.

    Keeps a mirror of what should be displayed. Renderers subclass it
    (see display.board_view.BoardView) and draw from these fields.
    """

    def __init__(self):
        self.cell_texts: List[Mark] = [Mark.EMPTY] * CELL_COUNT
        self.cell_highlights: List[Optional[str]] = [None] * CELL_COUNT
        self.active_player: Optional[PlayerId] = None

        # Bumped on every change, so renderers can skip redraws
        self.revision = 0

    # ==================== CELLS ====================

    def get_cell_text(self, index: int) -> Mark:
        return self.cell_texts[index]

    def set_cell_text(self, index: int, mark: Mark):
        self.cell_texts[index] = mark
        self._changed()

    def get_cell_highlight(self, index: int) -> Optional[str]:
        return self.cell_highlights[index]

    def set_cell_highlight(self, index: int, color: Optional[str]):
        """Highlight a cell with a colour ("#rrggbb"), or None to clear it."""
        self.cell_highlights[index] = color
        self._changed()

    # ==================== PLAYER DECORATION ====================

    def get_active_player_decoration(self) -> Optional[PlayerId]:
        """The player currently shown in bold + underline, if any."""
        return self.active_player

    def set_active_player_decoration(self, player_id: PlayerId, enabled: bool):
        """Turn the bold + underline decoration of a player on or off."""
        if enabled:
            self.active_player = player_id
        elif self.active_player == player_id:
            self.active_player = None
        self._changed()

    def _changed(self):
        self.revision += 1
