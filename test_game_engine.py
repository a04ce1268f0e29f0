"""
Tests for the TicTacToe game engine.
The scheduler is driven by hand and the computer plays scripted moves,
so every scenario is deterministic.
Run with: pytest
"""

import pytest

from logic.board import Board, Mark, CELL_COUNT
from logic.player import PlayerId
from logic.config import GameConfig
from logic.surface import BoardSurface
from logic.scoreboard import Scoreboard
from logic.scheduler import DeferredScheduler
from logic.ai_player import RandomComputerPlayer
from logic.game_engine import GameEngine, GameStatus


class ScriptedComputer:
    """Plays the first still-empty cell of a script, else the lowest empty cell."""

    def __init__(self, moves=()):
        self.moves = list(moves)

    def choose_move(self, board: Board):
        while self.moves:
            index = self.moves.pop(0)
            if board.get_cell(index) == Mark.EMPTY:
                return index
        empty = board.empty_indices()
        return empty[0] if empty else None


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_engine(computer_moves=(), clock=None):
    scheduler = DeferredScheduler(clock=clock) if clock else DeferredScheduler()
    engine = GameEngine(
        surface=BoardSurface(),
        scoreboard=Scoreboard(),
        scheduler=scheduler,
        computer_ai=ScriptedComputer(computer_moves),
    )
    return engine, scheduler


def board_cells(text: str):
    return [Mark(ch) for ch in text]


def play_human_moves(engine, scheduler, moves):
    """Play human moves, letting the computer answer after each one."""
    for index in moves:
        assert engine.status == GameStatus.AWAITING_HUMAN_MOVE
        assert engine.submit_move(index)
        if engine.status == GameStatus.AWAITING_COMPUTER_MOVE:
            assert scheduler.run_next()


def play_round(engine, scheduler):
    """Play until the next round has started. Human always takes the lowest empty cell."""
    start = engine.round_number
    while engine.round_number == start:
        if engine.status == GameStatus.AWAITING_HUMAN_MOVE:
            assert engine.submit_move(engine.board.empty_indices()[0])
        else:
            assert scheduler.run_next()


# ==================== START ====================

def test_initial_state():
    engine, scheduler = make_engine()

    assert engine.status == GameStatus.AWAITING_HUMAN_MOVE
    assert engine.is_active
    assert engine.round_number == 1
    assert engine.human.mark == Mark.CROSS
    assert engine.computer.mark == Mark.CIRCLE
    assert engine.active is engine.human
    assert engine.surface.get_active_player_decoration() == PlayerId.HUMAN
    assert engine.board.empty_indices() == list(range(CELL_COUNT))
    assert engine.get_score(PlayerId.HUMAN) == 0
    assert engine.get_score(PlayerId.COMPUTER) == 0
    assert scheduler.pending == 0


def test_defaults_are_built_when_not_given():
    engine = GameEngine()

    assert isinstance(engine.surface, BoardSurface)
    assert isinstance(engine.scoreboard, Scoreboard)
    assert isinstance(engine.scheduler, DeferredScheduler)
    assert isinstance(engine.computer_ai, RandomComputerPlayer)


# ==================== HUMAN MOVE ====================

def test_human_move_hands_turn_to_computer():
    engine, scheduler = make_engine(computer_moves=[4])

    assert engine.submit_move(0)

    assert engine.board.get_cell(0) == Mark.CROSS
    assert engine.surface.get_cell_text(0) == Mark.CROSS
    assert engine.status == GameStatus.AWAITING_COMPUTER_MOVE
    assert engine.active is engine.computer
    assert engine.surface.get_active_player_decoration() == PlayerId.COMPUTER
    assert scheduler.pending == 1

    scheduler.run_next()

    assert engine.board.get_cell(4) == Mark.CIRCLE
    assert engine.surface.get_cell_text(4) == Mark.CIRCLE
    assert engine.status == GameStatus.AWAITING_HUMAN_MOVE
    assert engine.surface.get_active_player_decoration() == PlayerId.HUMAN


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_out_of_range_move_is_ignored(index):
    engine, scheduler = make_engine()

    assert not engine.submit_move(index)

    assert engine.status == GameStatus.AWAITING_HUMAN_MOVE
    assert engine.board.empty_indices() == list(range(CELL_COUNT))
    assert scheduler.pending == 0


def test_bool_move_is_ignored():
    engine, scheduler = make_engine()

    assert not engine.submit_move(True)

    assert engine.board.get_cell(1) == Mark.EMPTY
    assert engine.surface.get_cell_text(1) == Mark.EMPTY
    assert engine.status == GameStatus.AWAITING_HUMAN_MOVE
    assert scheduler.pending == 0


def test_move_on_occupied_cell_is_ignored():
    engine, scheduler = make_engine(computer_moves=[4])
    play_human_moves(engine, scheduler, [0])
    before = list(engine.board.cells)

    assert not engine.submit_move(0)
    assert not engine.submit_move(4)

    assert engine.board.cells == before
    assert engine.status == GameStatus.AWAITING_HUMAN_MOVE
    assert scheduler.pending == 0
    assert engine.scoreboard.history == []


def test_human_input_ignored_while_computer_is_thinking():
    engine, scheduler = make_engine(computer_moves=[4])
    engine.submit_move(0)

    assert not engine.submit_move(5)

    assert engine.board.get_cell(5) == Mark.EMPTY
    assert scheduler.pending == 1


def test_computer_waits_for_its_delay():
    clock = FakeClock()
    engine, scheduler = make_engine(computer_moves=[4], clock=clock)
    engine.submit_move(0)

    clock.now = 0.5
    assert scheduler.run_due() == 0
    assert engine.board.get_cell(4) == Mark.EMPTY

    clock.now = GameConfig.COMPUTER_MOVE_DELAY
    assert scheduler.run_due() == 1
    assert engine.board.get_cell(4) == Mark.CIRCLE


def test_computer_turn_does_nothing_out_of_turn():
    engine, scheduler = make_engine()

    engine.computer_turn()

    assert engine.board.empty_indices() == list(range(CELL_COUNT))
    assert engine.status == GameStatus.AWAITING_HUMAN_MOVE


# ==================== WIN ====================

def test_human_wins_top_row():
    engine, scheduler = make_engine(computer_moves=[3, 4])

    play_human_moves(engine, scheduler, [0, 1, 2])

    result = engine.board.check_winner()
    assert result.mark == Mark.CROSS
    assert result.combination == (0, 1, 2)
    assert engine.last_result == result
    assert engine.status == GameStatus.ROUND_OVER
    assert not engine.is_active
    assert engine.get_score(PlayerId.HUMAN) == 1
    assert engine.get_score(PlayerId.COMPUTER) == 0
    assert engine.scoreboard.history == ["Win 1:0"]

    green = GameConfig.WIN_COLORS[PlayerId.HUMAN]
    for index in range(CELL_COUNT):
        expected = green if index in (0, 1, 2) else None
        assert engine.surface.get_cell_highlight(index) == expected

    # Only the round transition is pending
    assert scheduler.pending == 1
    assert not engine.submit_move(5)


def test_computer_wins_middle_row():
    engine, scheduler = make_engine(computer_moves=[3, 4, 5])

    play_human_moves(engine, scheduler, [0, 1, 8])

    assert engine.board.check_winner().combination == (3, 4, 5)
    assert engine.status == GameStatus.ROUND_OVER
    assert engine.get_score(PlayerId.COMPUTER) == 1
    assert engine.get_score(PlayerId.HUMAN) == 0
    assert engine.scoreboard.history == ["Loss 0:1"]

    red = GameConfig.WIN_COLORS[PlayerId.COMPUTER]
    assert [engine.surface.get_cell_highlight(i) for i in (3, 4, 5)] == [red] * 3


# ==================== DRAW ====================

def test_full_board_draw_on_computer_turn():
    engine, scheduler = make_engine()
    engine.board.cells = board_cells("XOXXOOOXX")
    engine.status = GameStatus.AWAITING_COMPUTER_MOVE

    engine.computer_turn()

    assert engine.status == GameStatus.ROUND_OVER
    assert engine.scoreboard.history == ["Draw 0:0"]
    assert engine.get_score(PlayerId.HUMAN) == 0
    assert engine.get_score(PlayerId.COMPUTER) == 0
    assert scheduler.pending == 1


def test_human_filling_the_board_ends_in_draw():
    engine, scheduler = make_engine(computer_moves=[4, 1, 6, 5])

    play_human_moves(engine, scheduler, [0, 2, 3, 7, 8])

    assert engine.board.is_full()
    assert engine.board.check_winner() is None
    assert engine.status == GameStatus.ROUND_OVER
    assert engine.scoreboard.history == ["Draw 0:0"]
    assert engine.get_score(PlayerId.HUMAN) == 0
    assert engine.get_score(PlayerId.COMPUTER) == 0


def test_computer_taking_last_cell_ends_in_draw():
    engine, scheduler = make_engine()
    engine.board.cells = board_cells("XOXXOOOX-")
    engine.status = GameStatus.AWAITING_COMPUTER_MOVE

    engine.computer_turn()

    assert engine.board.get_cell(8) == Mark.CIRCLE
    assert engine.status == GameStatus.ROUND_OVER
    assert engine.scoreboard.history == ["Draw 0:0"]
    assert scheduler.pending == 1


# ==================== NEXT ROUND ====================

def test_next_round_clears_board_and_decorations():
    engine, scheduler = make_engine(computer_moves=[3, 4])
    play_human_moves(engine, scheduler, [0, 1, 2])

    assert scheduler.run_next()

    assert engine.round_number == 2
    assert engine.board.empty_indices() == list(range(CELL_COUNT))
    for index in range(CELL_COUNT):
        assert engine.surface.get_cell_text(index) == Mark.EMPTY
        assert engine.surface.get_cell_highlight(index) is None
    assert engine.last_result is None

    # Marks swapped: the computer now has X and moves first
    assert engine.human.mark == Mark.CIRCLE
    assert engine.computer.mark == Mark.CROSS
    assert engine.active is engine.computer
    assert engine.surface.get_active_player_decoration() == PlayerId.COMPUTER
    assert engine.status == GameStatus.AWAITING_COMPUTER_MOVE
    assert not engine.submit_move(0)

    # Score survives the new round
    assert engine.get_score(PlayerId.HUMAN) == 1


def test_round_transition_waits_for_its_delay():
    clock = FakeClock()
    engine, scheduler = make_engine(computer_moves=[3, 4], clock=clock)
    play_human_moves(engine, scheduler, [0, 1, 2])

    clock.now = GameConfig.NEXT_ROUND_DELAY / 2
    scheduler.run_due()
    assert engine.status == GameStatus.ROUND_OVER
    assert engine.round_number == 1

    clock.now = GameConfig.NEXT_ROUND_DELAY
    scheduler.run_due()
    assert engine.round_number == 2


def test_next_round_does_nothing_mid_round():
    engine, scheduler = make_engine()
    engine.next_round()

    assert engine.round_number == 1
    assert engine.human.mark == Mark.CROSS


def test_marks_alternate_over_ten_rounds():
    engine, scheduler = make_engine()
    human_marks = []

    for _ in range(10):
        human_marks.append(engine.human.mark)

        # Marks stay complementary and whoever holds X moves first
        assert engine.computer.mark == engine.human.mark.opposite()
        assert engine.active.mark == Mark.CROSS
        if engine.active is engine.human:
            assert engine.status == GameStatus.AWAITING_HUMAN_MOVE
        else:
            assert engine.status == GameStatus.AWAITING_COMPUTER_MOVE

        play_round(engine, scheduler)

    assert human_marks == [Mark.CROSS, Mark.CIRCLE] * 5
    assert engine.round_number == 11
    assert len(engine.scoreboard.history) == 10


def test_random_games_keep_score_consistent():
    engine = GameEngine(computer_ai=RandomComputerPlayer(seed=2024))
    scheduler = engine.scheduler

    for _ in range(20):
        play_round(engine, scheduler)

    history = engine.scoreboard.history
    wins = sum(1 for line in history if line.startswith("Win"))
    losses = sum(1 for line in history if line.startswith("Loss"))

    assert len(history) == 20
    assert engine.get_score(PlayerId.HUMAN) == wins
    assert engine.get_score(PlayerId.COMPUTER) == losses
    assert history[-1].endswith(engine.scoreboard.score_text())


def test_config_overrides():
    config = GameConfig(computer_move_delay=0.25, next_round_delay=0.5, random_seed=9)

    assert config.COMPUTER_MOVE_DELAY == 0.25
    assert config.NEXT_ROUND_DELAY == 0.5
    assert config.RANDOM_SEED == 9
    assert GameConfig.COMPUTER_MOVE_DELAY == 1.0


def test_verbose_prints_round_result(capsys):
    engine = GameEngine(computer_ai=ScriptedComputer([3, 4]), verbose=True)
    play_human_moves(engine, engine.scheduler, [0, 1, 2])

    out = capsys.readouterr().out
    assert "Human wins round 1" in out
