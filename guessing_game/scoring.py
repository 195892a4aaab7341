import math

from guessing_game.schemas import GameConfig

ATTEMPT_PENALTY = 20.0
SECONDS_PER_PENALTY_POINT = 2.0
BASE_POINTS = 1000.0

def compute_score(attempts: int, elapsed_seconds: float, config: GameConfig) -> float:
    """
    Score for one game. The base shrinks as the range grows, every extra attempt costs
    20 points and every 2 seconds cost 1 point. With an attempt limit, finishing
    in under half of the allowed attempts earns a bonus multiplier (up to 1.5x).
    Never negative.
    """
    base = BASE_POINTS / math.log2(config.range_size + 1)
    score = base - ATTEMPT_PENALTY * (attempts - 1) - elapsed_seconds / SECONDS_PER_PENALTY_POINT

    if config.max_attempts > 0:
        fraction_used = attempts / config.max_attempts
        score *= 1.0 + max(0.0, 0.5 - fraction_used)

    return max(0.0, score)
