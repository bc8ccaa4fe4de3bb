"""
Shared pytest fixtures for the TicTacToe tests.
"""

import sys
from pathlib import Path

import pytest

# Add project directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.board import Board
from logic.config import GameConfig
from logic.game_controller import GameController
from ui import GameIO, BoardRenderer


class ScriptedIO(GameIO):
    """
    GameIO that answers prompts from a list instead of a keyboard.

    Answers are used in order by ask_text, ask_number and confirm.
    confirm treats True / "y" / "yes" as yes. Everything shown is kept
    in `shown`, every prompt in `prompts`.
    """

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.shown = []

    def _next(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            # Same as input() hitting end of file
            raise EOFError(f"No scripted answer for {prompt!r}")
        return self.answers.pop(0)

    def ask_text(self, prompt, default=None):
        answer = self._next(prompt)
        if not answer and default is not None:
            return default
        return answer

    def ask_number(self, prompt):
        return self._next(prompt)

    def confirm(self, prompt):
        answer = self._next(prompt)
        if isinstance(answer, str):
            return answer.strip().lower() in ("y", "yes")
        return bool(answer)

    def show(self, text):
        self.shown.append(text)


@pytest.fixture
def config():
    return GameConfig(MAX_INPUT_ATTEMPTS=5)


@pytest.fixture
def board(config):
    return Board(config)


@pytest.fixture
def make_controller(config):
    """Build a controller that plays from a list of scripted answers."""
    def _make(answers, **overrides):
        game_config = GameConfig(**overrides) if overrides else config
        io = ScriptedIO(answers)
        controller = GameController(
            io,
            BoardRenderer(io),
            board=Board(game_config),
            config=game_config
        )
        return controller, io
    return _make
