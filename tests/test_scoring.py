import math
import pytest
from guessing_game.schemas import GameConfig
from guessing_game.scoring import compute_score

def test_base_score_for_one_to_hundred():
    config = GameConfig(min_value=1, max_value=100, max_attempts=0)
    score = compute_score(1, 0.0, config)
    assert score == pytest.approx(1000 / math.log2(101))
    assert round(score, 1) == 150.2

def test_penalties():
    config = GameConfig(min_value=1, max_value=100, max_attempts=0)
    base = compute_score(1, 0.0, config)
    # 2 extra attempts = 40 points, 10 seconds = 5 points
    assert compute_score(3, 10.0, config) == pytest.approx(base - 45)

def test_bonus_for_using_few_attempts():
    config = GameConfig(min_value=1, max_value=100, max_attempts=10)
    base = 1000 / math.log2(101)
    # 1 of 10 attempts used -> multiplier 1 + (0.5 - 0.1)
    assert compute_score(1, 0.0, config) == pytest.approx(base * 1.4)

def test_no_bonus_past_half_the_attempts():
    limited = GameConfig(min_value=1, max_value=100, max_attempts=10)
    unlimited = GameConfig(min_value=1, max_value=100, max_attempts=0)
    assert compute_score(5, 3.0, limited) == pytest.approx(compute_score(5, 3.0, unlimited))
    assert compute_score(8, 3.0, limited) == pytest.approx(compute_score(8, 3.0, unlimited))

def test_never_negative():
    config = GameConfig(min_value=1, max_value=1000, max_attempts=12)
    assert compute_score(50, 0.0, config) == 0.0
    assert compute_score(1, 100000.0, config) == 0.0

@pytest.mark.parametrize("max_attempts", [0, 10, 30])
def test_score_goes_down_with_more_attempts(max_attempts):
    config = GameConfig(min_value=1, max_value=100, max_attempts=max_attempts)
    scores = [compute_score(attempts, 5.0, config) for attempts in range(1, 30)]
    assert all(later <= earlier for earlier, later in zip(scores, scores[1:]))
    assert all(score >= 0 for score in scores)

@pytest.mark.parametrize("max_attempts", [0, 12])
def test_score_goes_down_with_more_time(max_attempts):
    config = GameConfig(min_value=1, max_value=1000, max_attempts=max_attempts)
    scores = [compute_score(3, seconds / 2, config) for seconds in range(0, 400)]
    assert all(later <= earlier for earlier, later in zip(scores, scores[1:]))
    assert all(score >= 0 for score in scores)

def test_wider_range_has_lower_base():
    narrow = GameConfig(min_value=1, max_value=20)
    wide = GameConfig(min_value=1, max_value=1000)
    # Bigger range -> bigger log2 -> smaller base
    assert compute_score(1, 0.0, narrow) > compute_score(1, 0.0, wide)
