"""
Players for the TicTacToe game.
Each player has a display name and a mark (X or O).
"""

from enum import Enum
from dataclasses import dataclass


class Mark(Enum):
    """The two marks that can be placed on the board."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


# Player 1 always plays X and moves first
FIRST_MARK = Mark.X


@dataclass(frozen=True)
class Player:
    """
    A player in the game.

    Immutable once created. Renaming means creating new players.
    """
    name: str       # Display name, shown in prompts and results
    mark: Mark      # Which mark this player places
