"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (rendered with OpenCV, click a cell to play)
- Both players, their marks and scores (active player in bold + underline)
- Game history
"""

import sys
import tkinter as tk
from tkinter import ttk
from typing import Optional

import cv2
from PIL import Image, ImageTk

from logic.config import GameConfig
from logic.game_engine import GameEngine, GameStatus
from logic.scoreboard import Scoreboard
from logic.player import PlayerId
from logic.ai_player import RandomComputerPlayer
from display.config import DisplayConfig
from display.board_view import BoardView
from main import build_parser, config_from_args


class TkScheduler:
    """Runs the engine's deferred calls on the Tk event loop."""

    def __init__(self, root: tk.Tk):
        self.root = root

    def call_later(self, delay: float, callback, *args):
        self.root.after(int(delay * 1000), callback, *args)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None,
        verbose: bool = True
    ):
        """Initialize the UI."""
        self.game_config = game_config or GameConfig()
        self.display_config = display_config or DisplayConfig()
        self.is_running = False

        # Create UI
        self._create_ui()

        # Game
        self.view = BoardView(self.display_config)
        self.scoreboard = Scoreboard()
        self.engine = GameEngine(
            surface=self.view,
            scoreboard=self.scoreboard,
            scheduler=TkScheduler(self.root),
            computer_ai=RandomComputerPlayer(self.game_config.RANDOM_SEED),
            config=self.game_config,
            verbose=verbose
        )

        # Canvas placement of the board image (for click mapping)
        self._board_offset = (0, 0)
        self._board_scale = 1.0
        self._drawn_revision = -1
        self._history_length = 0

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')

        self.root.geometry("820x560")
        self.root.minsize(700, 480)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 20, 'bold'), foreground='#00ff88')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        self.board_canvas = tk.Canvas(left_frame, bg='#0f0f1a', highlightthickness=2,
                                      highlightbackground='#00d4ff', cursor='hand2')
        self.board_canvas.pack(fill=tk.BOTH, expand=True)
        self.board_canvas.bind("<Button-1>", self._on_click)
        self.board_canvas.bind("<Configure>", lambda e: self._invalidate_board())

        # Right panel
        right_frame = ttk.Frame(main_frame, width=300)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Players and score
        ttk.Label(right_frame, text="📊 Score", style='Title.TLabel').pack(pady=(0, 10))

        players_frame = ttk.Frame(right_frame)
        players_frame.pack(pady=5)

        self.player_labels = {}
        self.score_labels = {}
        for column, player_id in enumerate((PlayerId.HUMAN, PlayerId.COMPUTER)):
            name = tk.Label(players_frame, text=player_id.value.capitalize(),
                            bg='#1a1a2e', fg='white', font=('Segoe UI', 12))
            name.grid(row=0, column=column, padx=15)
            score = ttk.Label(players_frame, text="0", style='Score.TLabel')
            score.grid(row=1, column=column, padx=15)
            self.player_labels[player_id] = name
            self.score_labels[player_id] = score

        self.status_label = ttk.Label(right_frame, text="Your turn", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # History
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(right_frame, text="📜 History", style='Title.TLabel').pack()

        self.history_text = tk.Text(right_frame, height=10, width=30, bg='#16213e', fg='white',
                                    font=('Segoe UI', 10), relief='flat', state='disabled')
        self.history_text.pack(fill=tk.BOTH, expand=True, pady=5)

        # Quit button
        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_click(self, event):
        """Map a canvas click to a board cell and play it."""
        if self.engine.status != GameStatus.AWAITING_HUMAN_MOVE:
            return

        offset_x, offset_y = self._board_offset
        x = int((event.x - offset_x) / self._board_scale)
        y = int((event.y - offset_y) / self._board_scale)

        index = self.view.cell_at(x, y)
        if index is not None:
            self.engine.submit_move(index)
            self._refresh()

    def _update_loop(self):
        """Main update loop (runs on UI thread)."""
        if not self.is_running:
            return

        self._refresh()

        # Schedule next update (~30 FPS)
        self.root.after(self.display_config.FRAME_INTERVAL_MS, self._update_loop)

    def _refresh(self):
        if self.view.revision != self._drawn_revision:
            self._update_board_canvas()
        self._update_game_info()

    def _invalidate_board(self):
        self._drawn_revision = -1

    def _update_board_canvas(self):
        """Draw the rendered board on the canvas, scaled to fit."""
        canvas_width = self.board_canvas.winfo_width()
        canvas_height = self.board_canvas.winfo_height()

        if canvas_width < 10 or canvas_height < 10:
            return

        frame = self.view.render()

        # Resize board to fit canvas while keeping it square
        frame_height, frame_width = frame.shape[:2]
        scale = min(canvas_width / frame_width, canvas_height / frame_height)
        new_width = int(frame_width * scale)
        new_height = int(frame_height * scale)

        frame = cv2.resize(frame, (new_width, new_height))

        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        image = Image.fromarray(frame_rgb)
        photo = ImageTk.PhotoImage(image)

        # Update canvas
        self.board_canvas.delete("all")
        x = (canvas_width - new_width) // 2
        y = (canvas_height - new_height) // 2
        self.board_canvas.create_image(x, y, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        self._board_offset = (x, y)
        self._board_scale = scale
        self._drawn_revision = self.view.revision

    def _update_game_info(self):
        """Update score, player and status labels, and the history box."""
        active = self.view.get_active_player_decoration()

        for player in self.engine.players:
            label = self.player_labels[player.identity]
            is_active = player.identity == active
            font = ('Segoe UI', 12, 'bold underline') if is_active else ('Segoe UI', 12)
            label.configure(text=f"{player.name} ({player.mark.value})", font=font)
            self.score_labels[player.identity].configure(
                text=str(self.engine.get_score(player.identity))
            )

        if not self.engine.is_active:
            status = self.scoreboard.history[-1] if self.scoreboard.history else "Round over"
        elif active == PlayerId.HUMAN:
            status = "Your turn"
        else:
            status = "Computer is thinking..."
        self.status_label.configure(text=f"Round {self.engine.round_number}: {status}")

        # Append new history lines only
        history = self.scoreboard.history
        if len(history) != self._history_length:
            self.history_text.configure(state='normal')
            for line in history[self._history_length:]:
                self.history_text.insert(tk.END, line + "\n")
            self.history_text.see(tk.END)
            self.history_text.configure(state='disabled')
            self._history_length = len(history)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False

        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.is_running = True
        self.root.after(0, self._update_loop)
        self.root.mainloop()


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60)
    print(f"   Seed: {args.seed if args.seed is not None else 'random'}")
    print("="*60 + "\n")

    try:
        ui = TicTacToeUI(game_config=config_from_args(args), verbose=not args.quiet)
    except tk.TclError as e:
        print(f"ERROR: Could not open window: {e}")
        return 1

    ui.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
