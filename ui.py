"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (rendered with OpenCV, shown through Pillow)
- Score boxes for X and O, highlighting whose turn it is
- "Play vs Computer" toggle and difficulty selection
- A result overlay when the game ends
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

# Logic imports
from logic.ai_player import Difficulty
from logic.board import GameStatus, Player
from logic.config import GameConfig
from logic.exceptions import InvalidMove
from logic.game_session import GameSession

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    All game changes happen on the Tkinter thread: clicks and the
    delayed computer move are both Tk callbacks.
    """

    def __init__(self, vs_computer: bool = False, difficulty: Difficulty = Difficulty.HARD):
        """Initialize the UI."""
        self.session = GameSession(vs_computer=vs_computer, difficulty=difficulty)
        self.display_config = DisplayConfig()
        self.renderer = BoardRenderer(self.display_config)

        # Pending computer move (Tk `after` id)
        self._computer_job: Optional[str] = None

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.display_config

        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=cfg.UI_BG)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.UI_BG)
        style.configure('TLabel', background=cfg.UI_BG, foreground=cfg.UI_TEXT, font=(cfg.UI_FONT, 11))
        style.configure('Title.TLabel', font=(cfg.UI_FONT, 16, 'bold'), foreground=cfg.UI_ACCENT)
        style.configure('TCheckbutton', background=cfg.UI_BG, foreground=cfg.UI_TEXT, font=(cfg.UI_FONT, 11))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Label(main_frame, text="TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Score boxes
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(pady=5)

        self.score_labels = {}
        self.score_boxes = {}
        for player, color in ((Player.X, cfg.UI_X), (Player.O, cfg.UI_O)):
            box = tk.Frame(score_frame, bg=cfg.UI_INACTIVE_BOX, padx=12, pady=6)
            box.pack(side=tk.LEFT, padx=10)
            tk.Label(box, text=player.value, font=(cfg.UI_FONT, 14, 'bold'),
                     bg=cfg.UI_PANEL_BG, fg=color, width=3).pack(side=tk.LEFT)
            label = tk.Label(box, text="0", font=(cfg.UI_FONT, 14, 'bold'),
                             bg=cfg.UI_PANEL_BG, fg=cfg.UI_TEXT, width=3)
            label.pack(side=tk.LEFT)
            self.score_boxes[player] = box
            self.score_labels[player] = label

        # Board canvas
        size = self.renderer.size
        self.board_canvas = tk.Canvas(main_frame, width=size, height=size, bg=cfg.UI_BG,
                                      highlightthickness=2, highlightbackground=cfg.UI_ACCENT)
        self.board_canvas.pack(pady=10)
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Result overlay (hidden until the game ends)
        self.overlay = tk.Frame(self.board_canvas, bg=cfg.UI_BG)
        self.overlay_icon = tk.Label(self.overlay, bg=cfg.UI_BG)
        self.overlay_icon.pack(pady=(40, 10))
        self.overlay_text = tk.Label(self.overlay, text="", font=(cfg.UI_FONT, 20, 'bold'),
                                     bg=cfg.UI_BG, fg=cfg.UI_ACTIVE_BOX)
        self.overlay_text.pack()
        for widget in (self.overlay, self.overlay_icon, self.overlay_text):
            widget.bind("<Button-1>", self._on_overlay_click)

        # Game mode section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.vs_computer_var = tk.BooleanVar(value=self.session.vs_computer)
        ttk.Checkbutton(
            main_frame,
            text="Play vs Computer",
            variable=self.vs_computer_var,
            command=self._toggle_vs_computer
        ).pack()

        # Difficulty section (only shown against the computer)
        self.diff_frame = ttk.Frame(main_frame)
        ttk.Label(self.diff_frame, text="Difficulty:").pack(side=tk.LEFT, padx=5)

        self.diff_var = tk.StringVar(value=self.session.difficulty.value)
        diff_select = ttk.Combobox(
            self.diff_frame,
            textvariable=self.diff_var,
            values=[d.value for d in Difficulty],
            state='readonly',
            width=10
        )
        diff_select.pack(side=tk.LEFT)
        diff_select.bind("<<ComboboxSelected>>", self._on_difficulty_selected)

        if self.session.vs_computer:
            self.diff_frame.pack(pady=5)

        # Control buttons
        self.restart_btn = tk.Button(
            main_frame,
            text="Restart",
            font=(cfg.UI_FONT, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._restart_game
        )
        self.restart_btn.pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== EVENTS ====================

    def _on_board_click(self, event):
        """Handle a click on the board."""
        index = self.renderer.point_to_cell(event.x, event.y)
        if index is None or self.session.is_computer_turn():
            return

        try:
            self.session.apply_move(index)
        except InvalidMove as e:
            # Occupied cell or finished game - ignore the click
            print(f"Ignored move: {e}")
            return

        self._after_move()

    def _after_move(self):
        """Redraw, then end the game or hand over to the computer."""
        self._refresh()

        if not self.session.is_active:
            self._show_overlay()
        elif self.session.is_computer_turn():
            self._computer_job = self.root.after(GameConfig.COMPUTER_MOVE_DELAY_MS, self._computer_move)

    def _computer_move(self):
        """Play the computer's move (scheduled after a short pause)."""
        self._computer_job = None

        # A restart during the pause cancels the move
        if not self.session.is_computer_turn():
            return

        self.session.play_computer_move()
        self._after_move()

    def _toggle_vs_computer(self):
        """Turn the computer opponent on or off."""
        vs_computer = self.vs_computer_var.get()
        if vs_computer:
            self.diff_frame.pack(pady=5, before=self.restart_btn)
        else:
            self.diff_frame.pack_forget()

        self._cancel_computer_move()
        self.session.set_vs_computer(vs_computer)
        self._restart_game()

    def _on_difficulty_selected(self, event=None):
        """Set the AI difficulty level."""
        self._cancel_computer_move()
        self.session.set_difficulty(Difficulty.from_name(self.diff_var.get()))
        self._restart_game()

    def _on_overlay_click(self, event=None):
        """Dismiss the result overlay and start a new game."""
        self._restart_game()

    # ==================== DRAWING ====================

    def _refresh(self):
        """Redraw the board, scores and turn indicator."""
        cfg = self.display_config
        image = self.renderer.render(self.session.board, self.session.winning_line)
        photo = ImageTk.PhotoImage(Image.fromarray(self.renderer.to_rgb(image)))

        self.board_canvas.delete("board")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo, tags="board")
        self.board_canvas.image = photo  # Keep reference

        for player, label in self.score_labels.items():
            label.configure(text=str(self.session.scores[player]))
            active = self.session.is_active and self.session.current_player == player
            self.score_boxes[player].configure(bg=cfg.UI_ACTIVE_BOX if active else cfg.UI_INACTIVE_BOX)

    def _show_overlay(self):
        """Show the win/draw overlay over the board."""
        winner = self.session.winner if self.session.status == GameStatus.WON else None
        badge = self.renderer.render_result_badge(winner)
        photo = ImageTk.PhotoImage(Image.fromarray(self.renderer.to_rgb(badge)))

        self.overlay_icon.configure(image=photo)
        self.overlay_icon.image = photo  # Keep reference
        self.overlay_text.configure(text="WINNER!" if winner else "DRAW!")
        self.overlay.place(relx=0, rely=0, relwidth=1, relheight=1)

    # ==================== CONTROL ====================

    def _cancel_computer_move(self):
        if self._computer_job is not None:
            self.root.after_cancel(self._computer_job)
            self._computer_job = None

    def _restart_game(self):
        """Reset the game. Scores are kept."""
        print("Resetting game...")
        self._cancel_computer_move()
        self.session.reset()
        self.overlay.place_forget()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_computer_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--vs-computer",
        action="store_true",
        help="Play against the computer (as X)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI difficulty level"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60)
    print(f"   Mode: {'vs Computer (' + args.difficulty + ')' if args.vs_computer else 'Two players'}")
    print("="*60 + "\n")

    ui = TicTacToeUI(vs_computer=args.vs_computer, difficulty=Difficulty.from_name(args.difficulty))
    ui.run()


if __name__ == "__main__":
    main()
