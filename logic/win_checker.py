"""
Win checker for the TicTacToe game.
Checks if a player has won or if the game is a tie.
"""

from typing import Optional, List, Tuple

from .board import Board
from .player import Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = (
        # Rows
        ((0, 0), (0, 1), (0, 2)),
        ((1, 0), (1, 1), (1, 2)),
        ((2, 0), (2, 1), (2, 2)),
        # Columns
        ((0, 0), (1, 0), (2, 0)),
        ((0, 1), (1, 1), (2, 1)),
        ((0, 2), (1, 2), (2, 2)),
        # Diagonals
        ((0, 0), (1, 1), (2, 2)),
        ((0, 2), (1, 1), (2, 0)),
    )

    def check_winner(self, board: Board, player: Player) -> bool:
        """
        Check if the player has won.

        Every line is rescanned on each call.

        Args:
            board: The game board.
            player: The player to check.

        Returns:
            True if the player's mark fills at least one winning line.
        """
        return self.get_winning_line(board, player) is not None

    def get_winning_line(
        self,
        board: Board,
        player: Player
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first line filled by the player's mark.

        Args:
            board: The game board.
            player: The player to check.

        Returns:
            The winning line as list of (row, col), or None.
        """
        grid = board.get_board()

        for line in self.WINNING_LINES:
            if self._check_line(grid, line, player):
                return list(line)

        return None

    def _check_line(self, grid, line, player: Player) -> bool:
        """True if all 3 cells of the line hold the player's mark."""
        matched = 0
        for row, col in line:
            if grid[row][col] == player.mark:
                matched += 1
        return matched == len(line)

    def check_tie(self, board: Board, players) -> bool:
        """
        Check if the game is a tie.

        A tie occurs when all cells are filled AND nobody has a line.

        Args:
            board: The game board.
            players: Both players.

        Returns:
            True if the game is a tie.
        """
        if not board.is_full():
            return False

        return not any(self.check_winner(board, player) for player in players)
