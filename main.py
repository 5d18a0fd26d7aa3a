"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default. With --no-ui the game is played
in the console; --self-play watches the AI play itself on HARD.

Run this script to play TicTacToe against a friend or the computer!
"""

from typing import Optional

# Logic imports
from logic.ai_player import AIPlayer, Difficulty
from logic.board import GameStatus, Player
from logic.config import GameConfig
from logic.exceptions import InvalidMove
from logic.game_session import GameSession

# Display imports
from display.board_renderer import BoardRenderer


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Game flow:
    1. Human types a cell number (0-8)
    2. Move is applied to the session
    3. If playing the computer, it answers as O
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, session: GameSession, save_board: Optional[str] = None):
        """
        Initialize the console game.

        Args:
            session: The game session to play in.
            save_board: Path to save the final board image after each game.
        """
        self.session = session
        self.save_board = save_board
        self.renderer = BoardRenderer()
        self.is_running = False

    def start(self):
        """Play games until the user quits."""
        print("\nType a cell number to move, 'r' to restart, 'q' to quit.\n")

        self.is_running = True
        while self.is_running:
            self._play_game()

            if self.is_running:
                answer = input("Play again? [Y/n] ").strip().lower()
                if answer.startswith("n"):
                    self.is_running = False
                else:
                    self.session.reset()

    def _play_game(self):
        """Main game loop for one game."""
        while self.is_running and self.session.is_active:
            self.session.game_state.print_board()

            if self.session.is_computer_turn():
                print("\n>>> Computer is thinking...")
                self.session.play_computer_move()
                continue

            command = input(f"{self.session.current_player.value} to move: ").strip().lower()

            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
                return
            if command == "r":
                print("\nResetting game...")
                self.session.reset()
                continue

            try:
                index = int(command)
            except ValueError:
                print("Please type a number 0-8.")
                continue

            try:
                self.session.apply_move(index)
            except InvalidMove as e:
                print(f"Illegal move: {e}")

        if not self.session.is_active:
            self._show_game_result()

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        self.session.game_state.print_board()

        scores = self.session.get_scores()
        print(f"\nScore: X {scores[Player.X]} - O {scores[Player.O]}")
        print("="*60)

        if self.save_board:
            image = self.renderer.render(self.session.board, self.session.winning_line)
            self.renderer.save(image, self.save_board)


def self_play(save_board: Optional[str] = None) -> GameStatus:
    """
    Let the AI play both sides on HARD.

    Returns:
        The final status - always a draw with perfect play.
    """
    players = {Player.X: AIPlayer(Player.X), Player.O: AIPlayer(Player.O)}
    session = GameSession()

    while session.is_active:
        mover = session.current_player
        index = players[mover].select_move(session.board, Difficulty.HARD)
        session.apply_move(index, mover)
        print(f"{mover.value} plays at {index}")

    session.game_state.print_board()

    if save_board:
        renderer = BoardRenderer()
        renderer.save(renderer.render(session.board, session.winning_line), save_board)

    return session.status


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--vs-computer",
        action="store_true",
        help="Play against the computer (you are X)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI difficulty level"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Watch the AI play itself on hard (console)"
    )
    parser.add_argument(
        "--save-board",
        metavar="PATH",
        default=None,
        help="Save the final board as an image (console mode)"
    )

    args = parser.parse_args()
    difficulty = Difficulty.from_name(args.difficulty)

    if args.self_play:
        self_play(save_board=args.save_board)
        return

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(vs_computer=args.vs_computer, difficulty=difficulty)
        ui.run()
        return

    # Console mode (--no-ui)
    session = GameSession(vs_computer=args.vs_computer, difficulty=difficulty)
    game = ConsoleGame(session, save_board=args.save_board)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
