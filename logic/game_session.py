"""
Game session for TicTacToe.
Wraps a game with the score tally, game mode and AI opponent
that live across restarts.
"""

from typing import Dict, Optional, Tuple

from .ai_player import AIPlayer, Difficulty
from .board import GameStatus, Player
from .config import GameConfig
from .game_state import GameState


class GameSession:
    """
    One continuous sequence of games.

    The UI (or console) calls into the session; the session never
    calls back into the UI.
    """

    def __init__(
        self,
        vs_computer: bool = False,
        difficulty: Difficulty = Difficulty.HARD,
        ai: Optional[AIPlayer] = None
    ):
        """
        Initialize the session.

        Args:
            vs_computer: True to let the computer play O.
            difficulty: AI difficulty level.
            ai: AI to use. Created for the computer's mark if not provided.
        """
        self.vs_computer = vs_computer
        self.difficulty = difficulty
        self.computer_player = Player(GameConfig.COMPUTER_PLAYER)
        self.ai = ai or AIPlayer(self.computer_player)

        self.game_state = GameState()
        self.scores: Dict[Player, int] = {Player.X: 0, Player.O: 0}

    # ==================== MOVES ====================

    def apply_move(self, index: int, player: Optional[Player] = None) -> GameStatus:
        """
        Apply a move and update the score if it ended the game.

        Args:
            index: Cell index (0-8).
            player: Who is moving. Defaults to the current player.

        Returns:
            The game status after the move.

        Raises:
            InvalidMove: If the move breaks a rule. Nothing is changed.
        """
        status = self.game_state.make_move(index, player)

        if status != GameStatus.IN_PROGRESS:
            self.record_result(status, self.game_state.winner)

        return status

    def record_result(self, status: GameStatus, winner: Optional[Player] = None):
        """Add a won game to the winner's tally. Draws don't count."""
        if status == GameStatus.WON and winner is not None:
            self.scores[winner] += 1
            print(f"{winner.value} wins! Score: X {self.scores[Player.X]} - O {self.scores[Player.O]}")
        elif status == GameStatus.DRAW:
            print("It's a draw!")

    def is_computer_turn(self) -> bool:
        """True if the computer should move now."""
        return (
            self.vs_computer
            and self.game_state.is_active
            and self.game_state.current_player == self.computer_player
        )

    def select_computer_move(self) -> int:
        """
        Ask the AI for a move on the current board.

        Raises:
            NoLegalMove: If the board is full.
        """
        return self.ai.select_move(self.game_state.snapshot(), self.difficulty)

    def play_computer_move(self) -> int:
        """
        Let the AI pick a move and play it.

        Returns:
            The cell the computer played.
        """
        index = self.select_computer_move()
        self.apply_move(index, self.computer_player)
        print(f"Computer ({self.computer_player.value}) plays at {index}")
        return index

    # ==================== SESSION CONTROL ====================

    def reset(self):
        """Start a new game. Scores are kept."""
        self.game_state.reset()

    def set_vs_computer(self, vs_computer: bool):
        """Switch between two players and playing the computer. Restarts the game."""
        self.vs_computer = vs_computer
        self.reset()

    def set_difficulty(self, difficulty: Difficulty):
        """Change the AI difficulty. Restarts the game."""
        self.difficulty = difficulty
        print(f"Difficulty set to: {difficulty.value}")
        self.reset()

    # ==================== QUERIES ====================

    @property
    def board(self) -> Tuple[Optional[Player], ...]:
        return self.game_state.snapshot()

    @property
    def current_player(self) -> Player:
        return self.game_state.current_player

    @property
    def is_active(self) -> bool:
        return self.game_state.is_active

    @property
    def status(self) -> GameStatus:
        return self.game_state.status

    @property
    def winner(self) -> Optional[Player]:
        return self.game_state.winner

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.game_state.get_winning_line()

    def get_scores(self) -> Dict[Player, int]:
        """Copy of the score tally."""
        return dict(self.scores)
