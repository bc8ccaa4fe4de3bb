"""
Game configuration for the console TicTacToe game.
All the settings for the board, players, prompts and logging.
"""


class GameConfig:
    """
    Configuration class for game settings.

    Values live on the class so they can be read without an instance.
    Pass keyword arguments to override any of them for one game:

        config = GameConfig(MAX_INPUT_ATTEMPTS=5)
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_ROWS = 3
    BOARD_COLS = 3

    # ==================== PLAYER SETTINGS ====================
    # Used when a name prompt is answered with a blank line
    PLAYER_ONE_DEFAULT_NAME = "PLAYER-1"
    PLAYER_TWO_DEFAULT_NAME = "PLAYER-2"

    # ==================== INPUT SETTINGS ====================
    # Consecutive invalid answers allowed before giving up on a prompt
    MAX_INPUT_ATTEMPTS = 20

    # ==================== PROMPTS ====================
    PLAYER_ONE_NAME_PROMPT = "Set player 1 name: "
    PLAYER_TWO_NAME_PROMPT = "Set player 2 name: "
    TURN_PROMPT = "{name}'s turn:"
    PLAY_AGAIN_PROMPT = "Play again?"
    RENAME_PROMPT = "Do you want to rename players?"

    # ==================== MESSAGES ====================
    DUPLICATE_NAME_MESSAGE = "Both players' names cannot be the same."
    GAME_STARTED_MESSAGE = "* * * GAME STARTED * * *\n\n"
    GAME_EXIT_MESSAGE = "* * * GAME EXIT * * *"
    WIN_MESSAGE = "{name} won!"
    TIE_MESSAGE = "tie!"

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # The winning lines and the renderer assume 3x3
    FIXED_SETTINGS = ("BOARD_ROWS", "BOARD_COLS", "FIXED_SETTINGS")

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not hasattr(type(self), key) or key.startswith("_"):
                raise AttributeError(f"Unknown config setting: {key}")
            if key in type(self).FIXED_SETTINGS:
                raise ValueError(f"{key} cannot be changed")
            setattr(self, key, value)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.BOARD_ROWS * self.BOARD_COLS
