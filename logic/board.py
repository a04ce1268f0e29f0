"""
Board model for TicTacToe.
Holds the 9 cells, validates placements and detects a winner.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Mark(Enum):
    """The symbol held by a cell."""
    EMPTY = "-"
    CROSS = "X"
    CIRCLE = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark (EMPTY stays EMPTY)."""
        if self == Mark.CROSS:
            return Mark.CIRCLE
        if self == Mark.CIRCLE:
            return Mark.CROSS
        return Mark.EMPTY


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# All winning lines, as cell indices.
# The order matters: when several lines are complete at once,
# the first one in this list is reported.
WINNING_COMBINATIONS: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
)


class InvalidMoveError(ValueError):
    """Raised when a mark cannot be placed on a cell."""

    def __init__(self, index: int, reason: str):
        super().__init__(f"Invalid move at {index}: {reason}")
        self.index = index
        self.reason = reason


@dataclass(frozen=True)
class WinResult:
    """A completed line."""
    mark: Mark                            # The winning mark
    combination: Tuple[int, int, int]     # The three cell indices


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    Cells are addressed by index 0-8, row by row:

        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8
    """

    cells: List[Mark] = field(
        default_factory=lambda: [Mark.EMPTY for _ in range(CELL_COUNT)]
    )

    def clear(self):
        """Set every cell back to EMPTY."""
        for index in range(CELL_COUNT):
            self.cells[index] = Mark.EMPTY

    def get_cell(self, index: int) -> Mark:
        """Get the mark at a cell."""
        return self.cells[index]

    def set_cell(self, index: int, mark: Mark):
        """
        Place a mark on an empty cell.

        Args:
            index: Cell index (0-8).
            mark: CROSS or CIRCLE.

        Raises:
            InvalidMoveError: if the index is out of range, the cell is
                already taken, or the mark is EMPTY. The board is left
                unchanged.
        """
        if isinstance(index, bool) or not isinstance(index, int) \
                or not 0 <= index < CELL_COUNT:
            raise InvalidMoveError(index, f"must be 0-{CELL_COUNT - 1}")

        if mark == Mark.EMPTY:
            raise InvalidMoveError(index, "cannot place an empty mark")

        if self.cells[index] != Mark.EMPTY:
            raise InvalidMoveError(
                index, f"already occupied by {self.cells[index].value}"
            )

        self.cells[index] = mark

    def empty_indices(self) -> List[int]:
        """Get the indices of all empty cells, in ascending order."""
        return [i for i, mark in enumerate(self.cells) if mark == Mark.EMPTY]

    def is_full(self) -> bool:
        """True when no empty cell is left."""
        return not self.empty_indices()

    def check_winner(self) -> Optional[WinResult]:
        """
        Scan the winning combinations in order.

        Returns:
            WinResult for the first complete line, or None.
        """
        for combination in WINNING_COMBINATIONS:
            a, b, c = (self.cells[i] for i in combination)
            if a != Mark.EMPTY and a == b == c:
                return WinResult(mark=a, combination=combination)

        return None

    def rows(self) -> List[List[Mark]]:
        """The cells grouped into 3 rows."""
        return [
            self.cells[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        ]

    def print_board(self):
        """Print the board to console."""
        print("┌───┬───┬───┐")

        for row, marks in enumerate(self.rows()):
            row_str = "│"
            for mark in marks:
                symbol = " " if mark == Mark.EMPTY else mark.value
                row_str += f" {symbol} │"
            print(row_str)

            if row < BOARD_SIZE - 1:
                print("├───┼───┼───┤")

        print("└───┴───┴───┘")
