"""
Display module for TicTacToe.
Renders the board and game info with OpenCV.
"""

from .config import DisplayConfig, hex_to_bgr
from .board_view import BoardView
from .hud import draw_game_info
