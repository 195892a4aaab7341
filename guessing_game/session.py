import logging
import random
import time
from datetime import datetime

from guessing_game.console import EndOfInput
from guessing_game.game import choose_difficulty, play_game

logger = logging.getLogger(__name__)

class GameLoop:
    """Keeps playing rounds until the player says no (or closes the input)."""

    def __init__(self, console, store, settings, rng=random, clock=time.monotonic, now=datetime.now):
        self.console = console
        self.store = store
        self.settings = settings
        self.rng = rng
        self.clock = clock
        self.now = now

    def run(self) -> int:
        self.console.say("=== Advanced Number Guessing Game ===")
        self.console.say("(Type CTRL+D or CTRL+Z to exit any time)\n")

        try:
            self._play_rounds()
        except EndOfInput:
            # Closing the input is how players quit mid-game, not an error.
            logger.debug("Standard input closed, exiting")
            self.console.say("\nInput closed. Exiting.")
            return 0

        self.console.say("Thanks for playing! Goodbye.")
        return 0

    def _play_rounds(self):
        while True:
            config = choose_difficulty(self.console)
            result = play_game(config, self.console, self.store, rng=self.rng, clock=self.clock, now=self.now)
            self.print_summary(result)

            if self.console.read_yes_no("Would you like to view the recent leaderboard?"):
                self.store.display(self.console, self.settings.leaderboard_limit)

            if not self.console.read_yes_no("Play again?"):
                return
            self.console.say()

    def print_summary(self, result):
        self.console.say("\nGame summary:")
        self.console.say(f" Player: {result.player_name}")
        self.console.say(f" Difficulty: {result.difficulty}")
        self.console.say(f" Attempts: {result.attempts}")
        self.console.say(f" Time: {result.elapsed_seconds:.1f} seconds")
        self.console.say(f" Score: {result.score:.2f}")
