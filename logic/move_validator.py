"""
Move validator for the TicTacToe game.
Turns raw answers into cell numbers and explains why bad ones are bad.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .board import Board


class InputError(Enum):
    """Why an answer was rejected."""
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"
    INVALID_NUMERIC_INPUT = "invalid_numeric_input"
    DUPLICATE_NAME = "duplicate_name"


@dataclass
class ValidationResult:
    """Result of validating one answer."""
    is_valid: bool
    error: Optional[InputError] = None
    error_message: Optional[str] = None
    cell_number: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe answers.

    Rules:
    1. A cell number must be a whole number
    2. It must be between 1 and 9
    3. The cell must be empty
    4. The two player names must differ
    """

    def parse_cell_number(self, raw) -> ValidationResult:
        """
        Parse a raw answer into a cell number.

        Args:
            raw: Text typed by the player, or an int.

        Returns:
            ValidationResult with cell_number set when parsing worked.
        """
        if isinstance(raw, bool):
            raw = None

        if isinstance(raw, int):
            return ValidationResult(is_valid=True, cell_number=raw)

        text = raw.strip() if isinstance(raw, str) else ""
        try:
            cell_number = int(text)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error=InputError.INVALID_NUMERIC_INPUT,
                error_message=f"'{text}' is not a cell number."
            )

        return ValidationResult(is_valid=True, cell_number=cell_number)

    def validate_move(self, board: Board, raw) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            raw: Cell number answer (text or int).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        result = self.parse_cell_number(raw)
        if not result.is_valid:
            return result

        cell_number = result.cell_number
        total = board.get_total_cell_count()

        # Check if cell number is in valid range
        if not 1 <= cell_number <= total:
            return ValidationResult(
                is_valid=False,
                error=InputError.OUT_OF_RANGE,
                error_message=f"Invalid cell {cell_number}. Must be 1-{total}.",
                cell_number=cell_number
            )

        # Check if cell is empty
        if not board.is_cell_empty(cell_number):
            return ValidationResult(
                is_valid=False,
                error=InputError.CELL_OCCUPIED,
                error_message=f"Cell {cell_number} is already occupied.",
                cell_number=cell_number
            )

        # All checks passed!
        return ValidationResult(is_valid=True, cell_number=cell_number)

    def validate_names(self, name1: str, name2: str) -> ValidationResult:
        """
        Validate the two player names.

        Blank names are not rejected here; the controller swaps them for
        the default names before calling this.
        """
        if name1 == name2:
            return ValidationResult(
                is_valid=False,
                error=InputError.DUPLICATE_NAME,
                error_message="Both players' names cannot be the same."
            )

        return ValidationResult(is_valid=True)
