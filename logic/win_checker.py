"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .board import Board, GameStatus, Player, is_full
from .exceptions import InvalidBoard


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell indices)
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def has_won(self, board: Board, player: Player) -> bool:
        """
        Check if a player holds any winning line.

        Args:
            board: The game board.
            player: The player to check.

        Returns:
            True if all 3 cells of some line belong to the player.
        """
        return any(
            board[a] == player and board[b] == player and board[c] == player
            for a, b, c in self.WINNING_LINES
        )

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The game board.

        Returns:
            The winning Player, or None if no winner yet.

        Raises:
            InvalidBoard: If both players hold a winning line.
        """
        x_won = self.has_won(board, Player.X)
        o_won = self.has_won(board, Player.O)

        if x_won and o_won:
            raise InvalidBoard("Both X and O have a winning line")
        if x_won:
            return Player.X
        if o_won:
            return Player.O
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A full board is only a draw when nobody won on it, so the
        win check always comes first.
        """
        if self.check_winner(board) is not None:
            return False
        return is_full(board)

    def evaluate_termination(
        self,
        board: Board,
        player: Player
    ) -> Tuple[GameStatus, Optional[Player]]:
        """
        Evaluate the board right after `player` moved.

        Only the mover can have created a new line, so the mover is
        checked first. The full-board check must follow the win check:
        the last move can fill the board and win at the same time.

        Args:
            board: The game board.
            player: The player who just moved.

        Returns:
            (status, winner) - winner is None unless status is WON.

        Raises:
            InvalidBoard: If both players hold a winning line.
        """
        opponent = player.opposite()

        if self.has_won(board, player):
            if self.has_won(board, opponent):
                raise InvalidBoard("Both X and O have a winning line")
            return GameStatus.WON, player

        # Unreachable through normal play, but never call it a draw
        if self.has_won(board, opponent):
            return GameStatus.WON, opponent

        if is_full(board):
            return GameStatus.DRAW, None

        return GameStatus.IN_PROGRESS, None

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The game board.

        Returns:
            The winning line as a tuple of 3 indices, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board = board_from_string("XXX" "OO_" "___")
    winner = checker.check_winner(board)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == Player.X

    # Test 2: Diagonal win
    board = board_from_string("OX_" "XO_" "X_O")
    winner = checker.check_winner(board)
    print(f"Test 2 (diagonal): winner = {winner}")
    assert winner == Player.O

    # Test 3: Full board with a win is not a draw
    board = board_from_string("XOX" "OXO" "OXX")
    status = checker.evaluate_termination(board, Player.X)
    print(f"Test 3 (full board win): status = {status}")
    assert status == (GameStatus.WON, Player.X)

    # Test 4: Draw
    board = board_from_string("XOX" "XOO" "OXX")
    print(f"Test 4 (draw): is_draw = {checker.check_draw(board)}")
    assert checker.check_draw(board)

    print("\nWinChecker test done!")
