"""
Game controller for the TicTacToe game.

Ties together:
- Players (setup and renaming)
- Board (placing marks)
- Win checker (win/tie after every move)
- The UI (prompts and board rendering)
"""

import logging
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import Board
from .config import GameConfig
from .move_validator import MoveValidator, InputError
from .player import Player, Mark, FIRST_MARK
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class InputAttemptsExceeded(Exception):
    """Raised when a prompt gets too many invalid answers in a row."""

    def __init__(self, error: InputError, attempts: int):
        self.error = error
        self.attempts = attempts
        super().__init__(
            f"Gave up after {attempts} invalid answers ({error.value})"
        )


@dataclass
class GameResult:
    """How a single game ended."""
    winner: Optional[Player] = None
    is_tie: bool = False
    winning_line: Optional[List[Tuple[int, int]]] = None
    moves: int = 0


class GameController:
    """
    Runs TicTacToe games between two people.

    Game flow:
    1. Ask both players for their names (must differ)
    2. X and O take turns picking a cell (1-9)
    3. After each move, check for a win or a full board
    4. Ask whether to play again, and whether to rename players
    """

    def __init__(
        self,
        io,
        renderer,
        board: Optional[Board] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the game controller.

        Args:
            io: GameIO used for every prompt and message.
            renderer: BoardRenderer that draws the board through io.
            board: The board to play on (a new one if not given).
            config: Game configuration.
        """
        self.io = io
        self.renderer = renderer
        self.config = config or GameConfig()
        self.board = board or Board(self.config)

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.player1: Optional[Player] = None
        self.player2: Optional[Player] = None

    @property
    def players(self) -> Optional[Tuple[Player, Player]]:
        """Both players, or None before setup."""
        if self.player1 is None or self.player2 is None:
            return None
        return self.player1, self.player2

    @property
    def max_input_attempts(self) -> int:
        return self.config.MAX_INPUT_ATTEMPTS

    def setup_player(self):
        """
        Ask both players for their names.

        Asks again while the names are the same, up to
        MAX_INPUT_ATTEMPTS times.

        Raises:
            InputAttemptsExceeded: if every attempt gave equal names.
        """
        for attempt in range(1, self.max_input_attempts + 1):
            name1 = self.io.ask_text(
                self.config.PLAYER_ONE_NAME_PROMPT,
                default=self.config.PLAYER_ONE_DEFAULT_NAME
            ) or self.config.PLAYER_ONE_DEFAULT_NAME
            name2 = self.io.ask_text(
                self.config.PLAYER_TWO_NAME_PROMPT,
                default=self.config.PLAYER_TWO_DEFAULT_NAME
            ) or self.config.PLAYER_TWO_DEFAULT_NAME

            result = self.validator.validate_names(name1, name2)
            if result.is_valid:
                self.player1 = Player(name1, FIRST_MARK)
                self.player2 = Player(name2, FIRST_MARK.opposite())
                logger.info(
                    "Players: %s (%s) vs %s (%s)",
                    name1, self.player1.mark, name2, self.player2.mark
                )
                return

            logger.warning("Duplicate player name %r (attempt %d)", name1, attempt)
            self.io.show(self.config.DUPLICATE_NAME_MESSAGE)

        raise InputAttemptsExceeded(InputError.DUPLICATE_NAME, self.max_input_attempts)

    def start(self) -> List[GameResult]:
        """
        Play games until the players decide to stop.

        Sets up players first if there are none.

        Returns:
            The result of every game played, in order.
        """
        results = []

        while True:
            if self.players is None:
                self.setup_player()

            results.append(self.game_loop())

            # Prompt to play again or exit
            if not self.io.confirm(self.config.PLAY_AGAIN_PROMPT):
                self.io.show(self.config.GAME_EXIT_MESSAGE)
                return results

            self.restart()

    def get_current_player(self) -> Player:
        """
        Get the player whose turn it is.

        X moves when the filled-cell count is even, O when it is odd.
        """
        if self.board.get_filled_cell_count() % 2 == 0:
            mark = FIRST_MARK
        else:
            mark = FIRST_MARK.opposite()
        return self._player_with_mark(mark)

    def _player_with_mark(self, mark: Mark) -> Player:
        for player in (self.player1, self.player2):
            if player is not None and player.mark == mark:
                return player
        raise RuntimeError("Players have not been set up")

    def game_loop(self) -> GameResult:
        """
        Play one game on the current board.

        A board that is already decided (a line or a full board) is
        announced without asking for a move.

        Returns:
            GameResult with the winner, or is_tie set.
        """
        if self.players is None:
            raise RuntimeError("Players have not been set up")

        self.io.show(self.config.GAME_STARTED_MESSAGE)

        result = self._check_board_decided()
        if result is not None:
            return result

        # Continue the game until all cells are filled
        while not self.board.is_full():
            current_player = self.get_current_player()

            self.renderer.render_game_board(self.board)

            cell_number = self.read_cell_number(current_player)
            logger.debug("%s takes cell %d", current_player.name, cell_number)

            # Check if the current player has won
            if self.check_winner(current_player):
                return self._announce_win(current_player)

            # Check for a tie
            if self.win_checker.check_tie(self.board, self.players):
                return self._announce_tie()

        return self._announce_tie()

    def _check_board_decided(self) -> Optional[GameResult]:
        """Result for a board that needs no more moves, else None."""
        for player in self.players:
            if self.check_winner(player):
                return self._announce_win(player)

        if self.win_checker.check_tie(self.board, self.players):
            return self._announce_tie()

        return None

    def _announce_win(self, player: Player) -> GameResult:
        self.renderer.render_game_board(self.board)
        self.io.show(self.config.WIN_MESSAGE.format(name=player.name))
        logger.info(
            "%s won after %d moves",
            player.name, self.board.get_filled_cell_count()
        )
        return GameResult(
            winner=player,
            winning_line=self.win_checker.get_winning_line(self.board, player),
            moves=self.board.get_filled_cell_count()
        )

    def _announce_tie(self) -> GameResult:
        self.renderer.render_game_board(self.board)
        self.io.show(self.config.TIE_MESSAGE)
        logger.info("Tie")
        return GameResult(is_tie=True, moves=self.board.get_filled_cell_count())

    def read_cell_number(self, player: Player) -> int:
        """
        Ask the player for a cell until a mark is placed.

        Bad answers are asked again without a message.

        Args:
            player: Whose turn it is.

        Returns:
            The cell number where the player's mark was placed.

        Raises:
            InputAttemptsExceeded: after MAX_INPUT_ATTEMPTS bad answers in a row.
        """
        prompt = self.config.TURN_PROMPT.format(name=player.name)
        last_error = InputError.INVALID_NUMERIC_INPUT

        for _ in range(self.max_input_attempts):
            raw = self.io.ask_number(prompt)
            result = self.validator.validate_move(self.board, raw)

            if result.is_valid and self.board.set_player_position(result.cell_number, player.mark):
                return result.cell_number

            last_error = result.error or InputError.CELL_OCCUPIED
            logger.debug("Rejected %r from %s: %s", raw, player.name, last_error.value)

        raise InputAttemptsExceeded(last_error, self.max_input_attempts)

    def restart(self):
        """
        Get ready for another game.

        Optionally forgets both players so they are asked for again,
        and always clears the board.
        """
        if self.io.confirm(self.config.RENAME_PROMPT):
            self.player1 = None
            self.player2 = None
            logger.info("Players cleared for renaming")

        self.board.reset_board()

    def check_winner(self, player: Player) -> bool:
        """Check if the given player has 3 in a line."""
        return self.win_checker.check_winner(self.board, player)
