import logging
from dotenv import load_dotenv

from guessing_game.config import GameSettings
from guessing_game.console import Console
from guessing_game.leaderboard import LeaderboardStore
from guessing_game.session import GameLoop

def configure_logging(level_name: str):
    # Diagnostics go to stderr so they never mix with the game's own output
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown LOG_LEVEL: {level_name}")
    logging.basicConfig(level=level, format="%(levelname)s [%(name)s] %(message)s")

def create_game(console=None, settings=None):
    # Load optional overrides (LEADERBOARD_FILE, LEADERBOARD_LIMIT, LOG_LEVEL) from .env
    load_dotenv()

    settings = settings or GameSettings()
    configure_logging(settings.log_level)

    console = console or Console()
    store = LeaderboardStore(settings.leaderboard_file)
    return GameLoop(console, store, settings)

def main() -> int:
    return create_game().run()
