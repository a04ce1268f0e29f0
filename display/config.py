"""
Display configuration for TicTacToe.
All the settings for drawing the board with OpenCV.
"""

import cv2


class DisplayConfig:
    """
    Configuration class for display settings.
    Colours are BGR, as OpenCV expects.
    """

    # ==================== BOARD IMAGE ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Output size of the board image (pixels, square)
    BOARD_OUTPUT_SIZE = 450
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 150 pixels per cell

    # Height of the score/history panel drawn under the board
    PANEL_HEIGHT = 170

    # ==================== COLOURS (BGR) ====================
    BACKGROUND_COLOR = (46, 26, 26)     # #1a1a2e
    CELL_COLOR = (62, 33, 22)           # #16213e
    GRID_COLOR = (128, 128, 128)
    CROSS_COLOR = (255, 212, 0)         # #00d4ff
    CIRCLE_COLOR = (0, 215, 255)        # #ffd700
    TEXT_COLOR = (255, 255, 255)
    MUTED_TEXT_COLOR = (200, 200, 200)

    # ==================== DRAWING ====================
    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    MARK_MARGIN = 35                    # Gap between a mark and its cell edge
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    FONT_SCALE = 0.7
    FONT_THICKNESS = 2

    # How many history lines the panel shows
    HISTORY_LINES = 3

    # ==================== WINDOW ====================
    WINDOW_NAME = "TicTacToe"
    FRAME_INTERVAL_MS = 33  # ~30 FPS
    SCREENSHOT_PATTERN = "tictactoe_{timestamp}.png"


def hex_to_bgr(color: str):
    """Convert "#rrggbb" to a BGR tuple."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a colour like #rrggbb, got {color!r}")
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return (b, g, r)
