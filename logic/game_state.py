"""
Game state management for TicTacToe.
Tracks the board, current player, move history and game status.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, GameStatus, Player, empty_board, get_empty_cells
from .exceptions import InvalidMove
from .move_validator import MoveValidator
from .win_checker import WinChecker


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board (which marks are where)
    - Current player
    - Move history
    - Game status (in progress, won, draw)
    """

    # The board - None means empty, otherwise the Player's mark
    board: Board = field(default_factory=empty_board)

    # Current player's turn - X always starts
    current_player: Player = Player.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None

    # Rule helpers (shared, stateless)
    validator: MoveValidator = field(default_factory=MoveValidator, repr=False, compare=False)
    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)

    @property
    def is_active(self) -> bool:
        """True while the game is still being played."""
        return self.status == GameStatus.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return not self.is_active

    def make_move(self, index: int, player: Optional[Player] = None) -> GameStatus:
        """
        Make a move at the given cell.

        Args:
            index: Cell index (0-8).
            player: Who is moving. Defaults to the current player.

        Returns:
            The game status after the move.

        Raises:
            InvalidMove: If the move breaks a rule. Nothing is changed.
        """
        result = self.validator.validate_move(self, index, player)
        if not result.is_valid:
            raise InvalidMove(result.error_message)

        mover = self.current_player

        # Place the mark
        self.board[index] = mover
        self.moves.append(Move(player=mover, index=index, move_number=len(self.moves)))

        # Check for winner/draw before handing over the turn
        self.status, self.winner = self.win_checker.evaluate_termination(self.board, mover)

        if self.status == GameStatus.IN_PROGRESS:
            self.current_player = mover.opposite()

        return self.status

    def reset(self):
        """Clear the board and start a new game with X to move."""
        self.board = empty_board()
        self.current_player = Player.X
        self.moves = []
        self.status = GameStatus.IN_PROGRESS
        self.winner = None

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices.
        """
        return get_empty_cells(self.board)

    def snapshot(self) -> Tuple[Optional[Player], ...]:
        """Read-only copy of the board."""
        return tuple(self.board)

    def get_winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            status=self.status,
            winner=self.winner,
        )

    def pretty(self) -> str:
        """Render the board as text, with cell numbers on empty cells."""
        cells = [
            cell.value if cell is not None else str(i)
            for i, cell in enumerate(self.board)
        ]
        rows = [" | ".join(cells[i:i + 3]) for i in range(0, 9, 3)]
        return "\n" + "\n---------\n".join(rows) + "\n"

    def print_board(self):
        """Print the board to console."""
        print(self.pretty())

        # Print game info
        if self.status == GameStatus.WON:
            print(f"{self.winner.value} WINS!")
        elif self.status == GameStatus.DRAW:
            print("It's a DRAW!")
        else:
            print(f"Current turn: {self.current_player.value}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # X wins on the diagonal
    for index in (4, 0, 2, 1, 6):
        print(f"\n{game.current_player.value} moves to {index}")
        game.make_move(index)
        game.print_board()
        if game.is_game_over:
            break

    print("\nGame state test done!")
