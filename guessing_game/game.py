import logging
import random
import time
from datetime import datetime
from enum import Enum

from guessing_game.config import GameSettings
from guessing_game.schemas import ANONYMOUS_PLAYER, GameConfig, Result
from guessing_game.scoring import compute_score

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

class GameState(Enum):
    AWAITING_GUESS = "awaiting_guess"
    CORRECT = "correct"
    GAVE_UP = "gave_up"
    ATTEMPTS_EXHAUSTED = "attempts_exhausted"

class Feedback(Enum):
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"
    CORRECT = "correct"
    GAVE_UP = "gave_up"

class GameSession:
    """
    The rules of one round, without any input/output.
    Call submit() once per guess until `finished` is True.
    """
    def __init__(self, config: GameConfig, secret: int):
        self.config = config
        self.secret = secret
        self.attempts = 0
        self.low_hint = config.min_value
        self.high_hint = config.max_value
        self.state = GameState.AWAITING_GUESS

    @property
    def finished(self) -> bool:
        return self.state is not GameState.AWAITING_GUESS

    def submit(self, guess: int) -> Feedback:
        if self.finished:
            raise RuntimeError(f"Game already finished ({self.state.value})")

        # Giving up is not counted as an attempt
        if guess == GameSettings.GIVE_UP_GUESS:
            self.state = GameState.GAVE_UP
            return Feedback.GAVE_UP

        self.attempts += 1

        if guess == self.secret:
            self.state = GameState.CORRECT
            return Feedback.CORRECT

        if guess > self.secret:
            feedback = Feedback.TOO_HIGH
            self.high_hint = min(self.high_hint, guess - 1)
        else:
            feedback = Feedback.TOO_LOW
            self.low_hint = max(self.low_hint, guess + 1)

        if self.config.max_attempts > 0 and self.attempts >= self.config.max_attempts:
            self.state = GameState.ATTEMPTS_EXHAUSTED
        return feedback

def choose_difficulty(console) -> GameConfig:
    console.say("Choose difficulty:")
    for choice, settings in GameSettings.DIFFICULTY_SETTINGS.items():
        limit_text = "unlimited attempts" if settings['max_attempts'] == 0 else f"{settings['max_attempts']} attempts"
        name_text = f"{settings['name']:<6}"
        console.say(f"  {choice}) {name_text} ({settings['min_value']} - {settings['max_value']}, {limit_text})")
    console.say(f"  {GameSettings.CUSTOM_CHOICE}) Custom")

    choice = console.read_int(f"Enter choice [1-{GameSettings.CUSTOM_CHOICE}]: ", 1, GameSettings.CUSTOM_CHOICE)

    if choice in GameSettings.DIFFICULTY_SETTINGS:
        settings = GameSettings.DIFFICULTY_SETTINGS[choice]
        config = GameConfig(
            difficulty_name=settings['name'],
            min_value=settings['min_value'],
            max_value=settings['max_value'],
            max_attempts=settings['max_attempts'],
        )
    else:
        config = _choose_custom(console)

    summary = f"You selected: {config.difficulty_name} ({config.min_value} - {config.max_value})"
    if config.max_attempts > 0:
        summary += f", max attempts = {config.max_attempts}"
    console.say(summary)
    return config

def _choose_custom(console) -> GameConfig:
    # The minimum stops one short of the ceiling so there is always room for a maximum.
    min_value = console.read_int("Enter minimum value: ", GameSettings.CUSTOM_LOWEST, GameSettings.CUSTOM_HIGHEST - 1)
    max_value = console.read_int("Enter maximum value: ", min_value + 1, GameSettings.CUSTOM_HIGHEST)

    max_attempts = 0
    if console.read_yes_no("Would you like to set a maximum attempts limit?"):
        max_attempts = console.read_int("Enter maximum attempts (>=1): ", 1, GameSettings.CUSTOM_HIGHEST)

    return GameConfig(difficulty_name="Custom", min_value=min_value, max_value=max_value, max_attempts=max_attempts)

def play_game(config: GameConfig, console, store, rng=random, clock=time.monotonic, now=datetime.now) -> Result:
    """
    Plays one round: draws the secret, runs the guess loop, asks for a name,
    scores the game and saves it (unless the player stays anonymous).
    """
    session = GameSession(config, rng.randint(config.min_value, config.max_value))
    logger.debug(f"Secret drawn for {config.label}")

    console.say(f"\nI have selected a number between {config.min_value} and {config.max_value}.")
    if config.max_attempts > 0:
        console.say(f"You have up to {config.max_attempts} attempts.")
    console.say("Type your guess and press Enter.")

    start_time = clock()
    while not session.finished:
        console.write(f"Allowed range: [{session.low_hint} - {session.high_hint}] ")
        guess = console.read_int(f"Enter guess (or {GameSettings.GIVE_UP_GUESS} to give up): ")
        feedback = session.submit(guess)

        if feedback is Feedback.GAVE_UP:
            console.say(f"You gave up. The number was {session.secret}.")
        elif feedback is Feedback.CORRECT:
            console.say(f"Congratulations! You guessed correctly in {session.attempts} attempts.")
        elif feedback is Feedback.TOO_HIGH:
            console.say("Too high.")
        else:
            console.say("Too low.")

        if session.state is GameState.ATTEMPTS_EXHAUSTED:
            console.say(
                f"Reached maximum attempts ({config.max_attempts}). You lose. The number was {session.secret}."
            )
    elapsed_seconds = max(0.0, clock() - start_time)

    console.write("\nEnter your name for the leaderboard (leave blank to skip): ")
    player_name = console.read_line()
    # Blank names stay anonymous (and are skipped by the leaderboard)
    if not player_name.strip():
        player_name = ANONYMOUS_PLAYER

    result = Result(
        player_name=player_name,
        difficulty=config.label,
        attempts=session.attempts,
        elapsed_seconds=elapsed_seconds,
        secret_number=session.secret,
        score=compute_score(max(1, session.attempts), elapsed_seconds, config),
        timestamp=now().strftime(TIMESTAMP_FORMAT),
    )

    if not result.is_anonymous:
        store.append(result)
    return result
