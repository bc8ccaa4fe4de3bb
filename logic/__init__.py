"""
Logic module for the TicTacToe game.
Handles players, the board, rules, and the game flow.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .player import Player, Mark
from .board import Board
from .move_validator import MoveValidator, ValidationResult, InputError
from .win_checker import WinChecker
from .game_controller import GameController, GameResult, InputAttemptsExceeded
