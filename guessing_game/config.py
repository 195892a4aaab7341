import os

class GameSettings:
    # Menu choice -> preset rules. Choice 4 (Custom) asks the player instead.
    DIFFICULTY_SETTINGS = {
        1: {'name': 'Easy',   'min_value': 1, 'max_value': 20,   'max_attempts': 0},
        2: {'name': 'Medium', 'min_value': 1, 'max_value': 100,  'max_attempts': 10},
        3: {'name': 'Hard',   'min_value': 1, 'max_value': 1000, 'max_attempts': 12},
    }
    CUSTOM_CHOICE = 4

    # Limits for the Custom difficulty prompts
    CUSTOM_LOWEST = -1000000
    CUSTOM_HIGHEST = 1000000

    GIVE_UP_GUESS = 0

    DEFAULT_LEADERBOARD_FILE = 'leaderboard.csv'
    DEFAULT_LEADERBOARD_LIMIT = 10
    DEFAULT_LOG_LEVEL = 'WARNING'

    def __init__(self, leaderboard_file=None, leaderboard_limit=None, log_level=None):
        # Explicit arguments win, then the environment (.env), then the defaults.
        self.leaderboard_file = leaderboard_file or os.environ.get('LEADERBOARD_FILE') or self.DEFAULT_LEADERBOARD_FILE
        self.log_level = (log_level or os.environ.get('LOG_LEVEL') or self.DEFAULT_LOG_LEVEL).upper()

        if leaderboard_limit is None:
            raw_limit = os.environ.get('LEADERBOARD_LIMIT') or str(self.DEFAULT_LEADERBOARD_LIMIT)
            try:
                leaderboard_limit = int(raw_limit)
            except ValueError:
                raise ValueError(f"LEADERBOARD_LIMIT must be an integer, got {raw_limit!r}")
        if leaderboard_limit < 1:
            raise ValueError(f"LEADERBOARD_LIMIT must be at least 1, got {leaderboard_limit}")
        self.leaderboard_limit = leaderboard_limit
