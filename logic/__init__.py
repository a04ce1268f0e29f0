"""
TicTacToe Project
=================
Human vs computer TicTacToe on a 3x3 board, with a running score and
a game history. The computer plays random moves.

Logic module: the board, players, the random computer opponent and the
game engine. Marks swap every round; whoever holds X moves first.
"""

from .board import Board, Mark, WinResult, InvalidMoveError, WINNING_COMBINATIONS
from .player import Player, PlayerId
from .ai_player import RandomComputerPlayer
from .config import GameConfig
from .surface import BoardSurface
from .scoreboard import Scoreboard
from .scheduler import DeferredScheduler
from .game_engine import GameEngine, GameStatus

__version__ = "1.0.0"
