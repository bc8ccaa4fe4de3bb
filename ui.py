"""
TicTacToe console UI.
A text interface for the TicTacToe game.

Provides:
- GameIO: the prompt/answer/display interface the game talks to
- ConsoleIO: GameIO on top of input() and print()
- BoardRenderer: draws the board as text
"""

from abc import ABC, abstractmethod
from typing import Optional

from logic.board import Board


class GameIO(ABC):
    """
    Everything the game needs from a human.

    The game controller only talks to this interface, so it can be driven
    from a terminal or from a script.
    """

    @abstractmethod
    def ask_text(self, prompt: str, default: Optional[str] = None) -> str:
        """
        Ask for a line of text.

        Args:
            prompt: Text shown to the player.
            default: Returned when the answer is blank.
        """

    @abstractmethod
    def ask_number(self, prompt: str) -> str:
        """
        Ask for a number. Returns the raw answer; the caller parses it.
        """

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def show(self, text: str):
        """Display text to the players."""


class ConsoleIO(GameIO):
    """GameIO for an interactive terminal."""

    YES_ANSWERS = ("y", "yes")

    def ask_text(self, prompt: str, default: Optional[str] = None) -> str:
        if default:
            prompt = f"{prompt}[{default}] "
        answer = input(prompt).strip()
        if not answer and default is not None:
            return default
        return answer

    def ask_number(self, prompt: str) -> str:
        return input(f"{prompt} ")

    def confirm(self, prompt: str) -> bool:
        answer = input(f"{prompt} (y/n): ").strip().lower()
        return answer in self.YES_ANSWERS

    def show(self, text: str):
        print(text)


class BoardRenderer:
    """
    Draws the board as text.

    Example output:

         X | O |
        ---|---|---
           | X |
        ---|---|---
           |   | O

    """

    ROW_SEPARATOR = "---|---|---"
    EMPTY_CELL = " "

    def __init__(self, io: GameIO):
        self.io = io

    def format_board(self, board: Board) -> str:
        """
        Build the text for the board.

        One line per row, a separator between rows (not after the last),
        then a blank line.
        """
        grid = board.get_board()
        row_count = board.get_board_row_count()

        lines = []
        for row in range(row_count):
            cells = [
                self.EMPTY_CELL if mark is None else mark.value
                for mark in grid[row]
            ]
            lines.append(" " + " | ".join(cells) + " ")

            # Print row separators
            if row < row_count - 1:
                lines.append(self.ROW_SEPARATOR)

        return "\n".join(lines) + "\n"

    def render_game_board(self, board: Board):
        """Show the board to the players. Does not change the board."""
        self.io.show(self.format_board(board))
