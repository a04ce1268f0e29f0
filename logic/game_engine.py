"""
Game engine for TicTacToe.
Runs the human vs computer rounds: turns, wins, draws, score and history.
"""

from enum import Enum
from typing import Optional, Tuple

from .board import Board, Mark, InvalidMoveError, WinResult
from .player import Player, PlayerId
from .ai_player import RandomComputerPlayer
from .config import GameConfig
from .surface import BoardSurface
from .scoreboard import Scoreboard
from .scheduler import DeferredScheduler


class GameStatus(Enum):
    """What the engine is waiting for."""
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_COMPUTER_MOVE = "awaiting_computer_move"
    ROUND_OVER = "round_over"


class GameEngine:
    """
    Owns the board and drives the game.

    Game flow:
    1. Human (X) clicks a cell -> submit_move()
    2. After a short pause the computer plays a random empty cell
    3. Repeat until a line is complete or the board is full
    4. After a longer pause the board is cleared, marks are swapped
       and whoever holds X moves first

    The surface, scoreboard and scheduler are collaborators owned by the
    caller. The engine only writes to the surface.
    """

    def __init__(
        self,
        surface: Optional[BoardSurface] = None,
        scoreboard: Optional[Scoreboard] = None,
        scheduler: Optional[DeferredScheduler] = None,
        computer_ai: Optional[RandomComputerPlayer] = None,
        config: Optional[GameConfig] = None,
        verbose: bool = False
    ):
        """
        Initialize the engine and start the first round.

        Args:
            surface: Where the board is displayed.
            scoreboard: Where wins and history are recorded.
            scheduler: Anything with call_later(delay, callback).
            computer_ai: Anything with choose_move(board) -> index.
            config: Game configuration.
            verbose: Print round results and boards to console.
        """
        self.config = config or GameConfig()
        self.surface = surface if surface is not None else BoardSurface()
        self.scoreboard = scoreboard if scoreboard is not None else Scoreboard()
        self.scheduler = scheduler if scheduler is not None else DeferredScheduler()
        self.computer_ai = computer_ai or RandomComputerPlayer(self.config.RANDOM_SEED)
        self.verbose = verbose

        self.board = Board()
        self.human = Player(PlayerId.HUMAN, Mark.CROSS)
        self.computer = Player(PlayerId.COMPUTER, Mark.CIRCLE)

        self.round_number = 1
        self.last_result: Optional[WinResult] = None

        self._clear_board()
        self._set_active_player(self.human)
        self.status = GameStatus.AWAITING_HUMAN_MOVE

    # ==================== STATE ====================

    @property
    def is_active(self) -> bool:
        """True while a round is in progress."""
        return self.status != GameStatus.ROUND_OVER

    @property
    def players(self) -> Tuple[Player, Player]:
        return (self.human, self.computer)

    def get_score(self, player_id: PlayerId) -> int:
        return self.scoreboard.get_score(player_id)

    # ==================== HUMAN MOVE ====================

    def submit_move(self, index: int) -> bool:
        """
        Place the human's mark on a cell.

        Moves are ignored when it is not the human's turn, the index is
        out of range or the cell is taken.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the mark was placed.
        """
        if self.status != GameStatus.AWAITING_HUMAN_MOVE:
            return False

        if not self._place(self.human, index):
            return False

        if self._check_winner():
            return True

        # Computer's turn
        self._set_active_player(self.computer)
        self._schedule_computer_turn()
        return True

    # ==================== COMPUTER MOVE ====================

    def computer_turn(self):
        """
        Play the computer's move.

        Normally called by the scheduler, COMPUTER_MOVE_DELAY seconds
        after the computer became active. Does nothing otherwise.
        """
        if self.status != GameStatus.AWAITING_COMPUTER_MOVE:
            return

        candidates = self.board.empty_indices()

        if not candidates:
            self._finish_draw()
            return

        # set_cell raises on a bad index from the AI
        index = self.computer_ai.choose_move(self.board)
        self.board.set_cell(index, self.computer.mark)
        self.surface.set_cell_text(index, self.computer.mark)

        if self._check_winner():
            return

        if len(candidates) == 1:
            # That was the last empty cell
            self._finish_draw()
            return

        # Human's turn
        self._set_active_player(self.human)
        self.status = GameStatus.AWAITING_HUMAN_MOVE

    # ==================== ROUND TRANSITION ====================

    def next_round(self):
        """
        Start the next round.

        Clears the board and decorations, swaps both players' marks and
        gives the first move to whoever now holds X.
        """
        if self.status != GameStatus.ROUND_OVER:
            return

        self._clear_decorations()
        self._clear_board()

        for player in self.players:
            player.toggle()

        self.round_number += 1
        self.last_result = None

        first = self.human if self.human.mark == Mark.CROSS else self.computer
        self._set_active_player(first)

        if self.verbose:
            print(f"\n>>> Round {self.round_number}: {first.name} starts with X")

        if first is self.computer:
            self._schedule_computer_turn()
        else:
            self.status = GameStatus.AWAITING_HUMAN_MOVE

    # ==================== HELPERS ====================

    def _place(self, player: Player, index: int) -> bool:
        """Place a player's mark and mirror it to the surface. False if invalid."""
        try:
            self.board.set_cell(index, player.mark)
        except InvalidMoveError:
            return False

        self.surface.set_cell_text(index, player.mark)
        return True

    def _check_winner(self) -> bool:
        """
        Finish the round if a line is complete.

        Returns:
            True if there was a winner.
        """
        result = self.board.check_winner()

        if result is None:
            return False

        winner = self.human if result.mark == self.human.mark else self.computer
        self.last_result = result

        # Decorate, score, history
        color = self.config.win_color(winner.identity)
        for index in result.combination:
            self.surface.set_cell_highlight(index, color)

        self.scoreboard.increment_score(winner.identity)

        label = (
            self.config.HISTORY_WIN if winner.is_human
            else self.config.HISTORY_LOSS
        )
        self._append_history(label)

        if self.verbose:
            self.board.print_board()
            print(f">>> {winner.name} wins round {self.round_number} "
                  f"on {list(result.combination)} ({self.scoreboard.score_text()})")

        self._end_round()
        return True

    def _finish_draw(self):
        self._append_history(self.config.HISTORY_DRAW)

        if self.verbose:
            self.board.print_board()
            print(f">>> Round {self.round_number} is a draw "
                  f"({self.scoreboard.score_text()})")

        self._end_round()

    def _append_history(self, label: str):
        human = self.scoreboard.get_score(PlayerId.HUMAN)
        computer = self.scoreboard.get_score(PlayerId.COMPUTER)
        self.scoreboard.append_history(f"{label} {human}:{computer}")

    def _end_round(self):
        self.status = GameStatus.ROUND_OVER
        self.scheduler.call_later(self.config.NEXT_ROUND_DELAY, self.next_round)

    def _schedule_computer_turn(self):
        self.status = GameStatus.AWAITING_COMPUTER_MOVE
        self.scheduler.call_later(self.config.COMPUTER_MOVE_DELAY, self.computer_turn)

    def _set_active_player(self, player: Player):
        """Move the turn decoration to a player."""
        self.active = player
        self.surface.set_active_player_decoration(player.identity.opposite(), False)
        self.surface.set_active_player_decoration(player.identity, True)

    def _clear_board(self):
        self.board.clear()
        for index in range(len(self.board.cells)):
            self.surface.set_cell_text(index, Mark.EMPTY)
            self.surface.set_cell_highlight(index, None)

    def _clear_decorations(self):
        for index in range(len(self.board.cells)):
            self.surface.set_cell_highlight(index, None)
        for player in self.players:
            self.surface.set_active_player_decoration(player.identity, False)
