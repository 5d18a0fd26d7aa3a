"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .board import GameStatus, Player, get_empty_cells
from .config import GameConfig

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    4. Players alternate, X first
    """

    def validate_move(
        self,
        game_state: "GameState",
        index: int,
        player: Optional[Player] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).
            player: Who is moving. Defaults to the current player.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.status != GameStatus.IN_PROGRESS:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range (bool is an int, but not a cell)
        if (not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < GameConfig.CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        # Check whose turn it is
        if player is not None and player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {game_state.current_player.value}'s turn, not {player.value}'s!"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices.
        """
        if game_state.status != GameStatus.IN_PROGRESS:
            return []

        return get_empty_cells(game_state.board)
