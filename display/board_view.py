"""
Board view for TicTacToe.
Draws the board surface into an OpenCV image and maps clicks to cells.
"""

import cv2
import numpy as np
from typing import Optional

from logic.board import Mark
from logic.surface import BoardSurface
from .config import DisplayConfig, hex_to_bgr


class BoardView(BoardSurface):
    """
    A board surface that can render itself.

    The game engine writes cell texts and highlights here; render()
    turns them into a BOARD_OUTPUT_SIZE x BOARD_OUTPUT_SIZE BGR image.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the view.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        super().__init__()
        self.config = config or DisplayConfig()

        # Last rendered image and the revision it was drawn from
        self._cached: Optional[np.ndarray] = None
        self._cached_revision = -1

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Find the cell under a pixel of the board image.

        Args:
            x: Pixel column.
            y: Pixel row.

        Returns:
            Cell index (0-8), or None if the pixel is off the board.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        cell_size = self.config.CELL_OUTPUT_SIZE
        row = min(y // cell_size, self.config.BOARD_SIZE - 1)
        col = min(x // cell_size, self.config.BOARD_SIZE - 1)
        return int(row * self.config.BOARD_SIZE + col)

    def cell_bounds(self, index: int):
        """Get (x1, y1, x2, y2) of a cell in the board image."""
        cell_size = self.config.CELL_OUTPUT_SIZE
        row, col = divmod(index, self.config.BOARD_SIZE)
        x1 = col * cell_size
        y1 = row * cell_size
        return (x1, y1, x1 + cell_size, y1 + cell_size)

    def render(self) -> np.ndarray:
        """
        Draw the board.

        Returns:
            BGR image. A copy, so callers may draw on it.
        """
        if self._cached is None or self._cached_revision != self.revision:
            self._cached = self._draw()
            self._cached_revision = self.revision

        return self._cached.copy()

    def _draw(self) -> np.ndarray:
        cfg = self.config
        size = cfg.BOARD_OUTPUT_SIZE
        image = np.full((size, size, 3), cfg.CELL_COLOR, dtype=np.uint8)

        # Highlighted cells first, so grid lines stay on top
        for index, color in enumerate(self.cell_highlights):
            if color is None:
                continue
            x1, y1, x2, y2 = self.cell_bounds(index)
            cv2.rectangle(image, (x1, y1), (x2, y2), hex_to_bgr(color), -1)

        # Draw grid lines
        for i in range(1, cfg.BOARD_SIZE):
            offset = i * cfg.CELL_OUTPUT_SIZE
            # Vertical lines
            cv2.line(image, (offset, 0), (offset, size), cfg.GRID_COLOR, cfg.GRID_THICKNESS)
            # Horizontal lines
            cv2.line(image, (0, offset), (size, offset), cfg.GRID_COLOR, cfg.GRID_THICKNESS)

        # Draw marks
        for index, mark in enumerate(self.cell_texts):
            if mark == Mark.CROSS:
                self._draw_cross(image, index)
            elif mark == Mark.CIRCLE:
                self._draw_circle(image, index)

        return image

    def _draw_cross(self, image: np.ndarray, index: int):
        cfg = self.config
        x1, y1, x2, y2 = self.cell_bounds(index)
        m = cfg.MARK_MARGIN

        cv2.line(image, (x1 + m, y1 + m), (x2 - m, y2 - m),
                 cfg.CROSS_COLOR, cfg.MARK_THICKNESS, cv2.LINE_AA)
        cv2.line(image, (x2 - m, y1 + m), (x1 + m, y2 - m),
                 cfg.CROSS_COLOR, cfg.MARK_THICKNESS, cv2.LINE_AA)

    def _draw_circle(self, image: np.ndarray, index: int):
        cfg = self.config
        x1, y1, x2, y2 = self.cell_bounds(index)
        center = ((x1 + x2) // 2, (y1 + y2) // 2)
        radius = cfg.CELL_OUTPUT_SIZE // 2 - cfg.MARK_MARGIN

        cv2.circle(image, center, radius, cfg.CIRCLE_COLOR, cfg.MARK_THICKNESS, cv2.LINE_AA)
