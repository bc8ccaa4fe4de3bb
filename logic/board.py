"""
Board for the TicTacToe game.
Tracks which mark is in each cell and how many cells are filled.
"""

import logging
from typing import Optional, List, Tuple

from .config import GameConfig
from .player import Mark

logger = logging.getLogger(__name__)


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are addressed two ways:
    - (row, col), both 0-2
    - cell number 1-9, row-major:

         1 | 2 | 3
        ---|---|---
         4 | 5 | 6
        ---|---|---
         7 | 8 | 9

    An empty cell holds None, otherwise the Mark placed there.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize an empty board.

        Args:
            config: Game configuration (board dimensions).
        """
        self.config = config or GameConfig()
        self.rows = self.config.BOARD_ROWS
        self.cols = self.config.BOARD_COLS
        self.total_cell_count = self.config.total_cells

        self._grid: List[List[Optional[Mark]]] = [
            [None for _ in range(self.cols)] for _ in range(self.rows)
        ]
        self._filled_cell_count = 0

    def cell_to_coords(self, cell_number: int) -> Tuple[int, int]:
        """
        Convert a cell number (1-9) to (row, col).

        Args:
            cell_number: Cell number, 1-based, row-major.

        Returns:
            (row, col) tuple, both 0-based.
        """
        index = cell_number - 1
        return index // self.cols, index % self.cols

    def is_valid_cell_number(self, cell_number) -> bool:
        """Check that cell_number is an integer between 1 and the cell count."""
        # bool is an int subclass but never a cell number
        if isinstance(cell_number, bool) or not isinstance(cell_number, int):
            return False
        return 1 <= cell_number <= self.total_cell_count

    def set_player_position(self, cell_number: int, mark: Mark) -> bool:
        """
        Place a mark at the given cell.

        Args:
            cell_number: Cell number (1-9).
            mark: The mark to place.

        Returns:
            True if the mark was placed, False if the cell number is out
            of range or the cell is already occupied. The board is not
            changed when False is returned.
        """
        if not self.is_valid_cell_number(cell_number):
            return False

        row, col = self.cell_to_coords(cell_number)

        if self._grid[row][col] is not None:
            return False

        self._grid[row][col] = mark
        self._filled_cell_count += 1
        logger.debug("Placed %s at cell %d (%d, %d)", mark, cell_number, row, col)
        return True

    def get_cell(self, row: int, col: int) -> Optional[Mark]:
        """Get the mark at (row, col), or None if empty."""
        return self._grid[row][col]

    def is_cell_empty(self, cell_number: int) -> bool:
        """True if the cell number is valid and nothing is placed there."""
        if not self.is_valid_cell_number(cell_number):
            return False
        row, col = self.cell_to_coords(cell_number)
        return self._grid[row][col] is None

    def get_board(self) -> List[List[Optional[Mark]]]:
        """
        Get a copy of the current board.

        Both the outer list and every row are new lists, so changing the
        copy never changes the board.
        """
        return [list(row) for row in self._grid]

    def get_board_row_count(self) -> int:
        return self.rows

    def get_board_col_count(self) -> int:
        return self.cols

    def get_total_cell_count(self) -> int:
        return self.total_cell_count

    def get_filled_cell_count(self) -> int:
        return self._filled_cell_count

    def is_full(self) -> bool:
        """True when every cell holds a mark."""
        return self._filled_cell_count == self.total_cell_count

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell numbers (1-9) in ascending order.
        """
        empty = []
        for row in range(self.rows):
            for col in range(self.cols):
                if self._grid[row][col] is None:
                    empty.append(row * self.cols + col + 1)
        return empty

    def reset_board(self):
        """Clear every cell and the filled-cell count."""
        for row in range(self.rows):
            for col in range(self.cols):
                self._grid[row][col] = None
        self._filled_cell_count = 0
        logger.debug("Board reset")
