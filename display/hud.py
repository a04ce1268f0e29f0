"""
Heads-up display for TicTacToe.
Draws score, turn and recent history under the board image.
"""

import cv2
import numpy as np
from typing import Optional

from logic.game_engine import GameEngine
from logic.player import PlayerId
from .config import DisplayConfig


def draw_game_info(
    board_image: np.ndarray,
    engine: GameEngine,
    config: Optional[DisplayConfig] = None
) -> np.ndarray:
    """
    Stack an info panel under the board image.

    Shows both players with their marks and scores (the active one
    underlined), the round number and the last few history lines.

    Args:
        board_image: Rendered board (BGR).
        engine: The running game.
        config: Display configuration.

    Returns:
        New image: board on top, panel below.
    """
    cfg = config or DisplayConfig()
    width = board_image.shape[1]
    panel = np.full((cfg.PANEL_HEIGHT, width, 3), cfg.BACKGROUND_COLOR, dtype=np.uint8)

    active = engine.surface.get_active_player_decoration()
    x = 20
    y = 35

    # Players and score
    for player in engine.players:
        text = f"{player.name} ({player.mark.value}): {engine.get_score(player.identity)}"
        is_active = player.identity == active
        thickness = cfg.FONT_THICKNESS + 1 if is_active else cfg.FONT_THICKNESS

        cv2.putText(panel, text, (x, y), cfg.FONT, cfg.FONT_SCALE, cfg.TEXT_COLOR, thickness)

        if is_active:
            # Underline
            (text_width, _), baseline = cv2.getTextSize(text, cfg.FONT, cfg.FONT_SCALE, thickness)
            cv2.line(panel, (x, y + baseline), (x + text_width, y + baseline), cfg.TEXT_COLOR, 2)

        x += width // 2

    # Round / status
    y += 35
    if engine.is_active:
        turn = "Your turn" if active == PlayerId.HUMAN else "Computer is thinking..."
    else:
        turn = "Round over"
    cv2.putText(
        panel, f"Round {engine.round_number} - {turn}", (20, y),
        cfg.FONT, cfg.FONT_SCALE * 0.85, cfg.MUTED_TEXT_COLOR, cfg.FONT_THICKNESS
    )

    # History
    for line in engine.scoreboard.recent_history(cfg.HISTORY_LINES):
        y += 25
        cv2.putText(
            panel, line, (20, y),
            cfg.FONT, cfg.FONT_SCALE * 0.75, cfg.MUTED_TEXT_COLOR, 1
        )

    return np.vstack([board_image, panel])
