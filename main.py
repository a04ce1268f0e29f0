"""
Main script for TicTacToe (OpenCV window).

This script ties together:
- Logic (board, players, game engine, scoreboard)
- Display (board rendering, score/history panel)

Click a cell to play. Run this script to play TicTacToe against the computer!
"""

import sys
import time
from typing import Optional

import cv2

from logic.config import GameConfig
from logic.game_engine import GameEngine, GameStatus
from logic.scoreboard import Scoreboard
from logic.scheduler import DeferredScheduler
from logic.ai_player import RandomComputerPlayer
from display.config import DisplayConfig
from display.board_view import BoardView
from display.hud import draw_game_info


class TicTacToeApp:
    """
    Main controller for the OpenCV version of the game.

    Game flow:
    1. Human clicks a cell in the window
    2. The engine places X (or O) and hands the turn to the computer
    3. The main loop runs scheduled calls (computer move, next round)
    4. Repeat until the window is closed or 'q' is pressed
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None,
        verbose: bool = True
    ):
        """
        Initialize the app.

        Args:
            game_config: Game configuration.
            display_config: Display configuration.
            verbose: Print round results to console.
        """
        print("\n" + "="*60)
        print("   TicTacToe - Initializing...")
        print("="*60 + "\n")

        self.game_config = game_config or GameConfig()
        self.display_config = display_config or DisplayConfig()

        self.view = BoardView(self.display_config)
        self.scoreboard = Scoreboard()
        self.scheduler = DeferredScheduler()
        self.engine = GameEngine(
            surface=self.view,
            scoreboard=self.scoreboard,
            scheduler=self.scheduler,
            computer_ai=RandomComputerPlayer(self.game_config.RANDOM_SEED),
            config=self.game_config,
            verbose=verbose
        )

        self.is_running = False
        self.last_frame = None

        print("="*60)
        print("   TicTacToe - Ready!")
        print(f"   Human plays: {self.engine.human.mark.value}")
        print(f"   Computer plays: {self.engine.computer.mark.value}")
        print("="*60 + "\n")

    def start(self):
        """Open the window and run until the user quits."""
        print("Click a cell to play.")
        print("Press 'q' to quit, 's' to save screenshot\n")

        try:
            cv2.namedWindow(self.display_config.WINDOW_NAME)
        except cv2.error as e:
            print(f"ERROR: Could not open window: {e}")
            return False

        cv2.setMouseCallback(self.display_config.WINDOW_NAME, self._on_mouse)

        self.is_running = True
        try:
            self._game_loop()
        finally:
            cv2.destroyAllWindows()

        self._show_final_score()
        return True

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            # Computer moves and round changes
            self.scheduler.run_due()

            frame = draw_game_info(self.view.render(), self.engine, self.display_config)
            cv2.imshow(self.display_config.WINDOW_NAME, frame)
            self.last_frame = frame

            # Handle key presses
            key = cv2.waitKey(self.display_config.FRAME_INTERVAL_MS) & 0xFF
            if key == ord('q'):
                print("\nGame quit by user.")
                self.is_running = False
            elif key == ord('s'):
                self._save_screenshot()

            # Window closed with the mouse
            if cv2.getWindowProperty(self.display_config.WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                self.is_running = False

    def _on_mouse(self, event, x, y, flags, param):
        """Mouse callback: a left click on a cell is a move."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return

        if self.engine.status != GameStatus.AWAITING_HUMAN_MOVE:
            return

        index = self.view.cell_at(x, y)
        if index is not None:
            self.engine.submit_move(index)

    def _save_screenshot(self):
        if self.last_frame is None:
            return
        filename = self.display_config.SCREENSHOT_PATTERN.format(timestamp=int(time.time()))
        cv2.imwrite(filename, self.last_frame)
        print(f"Saved: {filename}")

    def _show_final_score(self):
        """Print the score and history when the game ends."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)
        print(f"\n   Score (human:computer): {self.scoreboard.score_text()}")

        for line in self.scoreboard.history:
            print(f"   {line}")

        print("\n" + "="*60)


def build_parser():
    """Command-line options shared by the OpenCV and Tkinter front ends."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe: human vs computer")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--computer-delay",
        type=float,
        default=None,
        help=f"Seconds before the computer moves (default: {GameConfig.COMPUTER_MOVE_DELAY})"
    )
    parser.add_argument(
        "--round-delay",
        type=float,
        default=None,
        help=f"Seconds between rounds (default: {GameConfig.NEXT_ROUND_DELAY})"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print round results to console"
    )
    return parser


def config_from_args(args) -> GameConfig:
    return GameConfig(
        computer_move_delay=args.computer_delay,
        next_round_delay=args.round_delay,
        random_seed=args.seed
    )


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    app = TicTacToeApp(game_config=config_from_args(args), verbose=not args.quiet)
    return 0 if app.start() else 1


if __name__ == "__main__":
    sys.exit(main())
