import io
import pytest
from guessing_game.console import Console
from guessing_game.leaderboard import LeaderboardStore

# Shared fixtures. Pytest picks these up automatically for every test file in this folder.

class FixedRandom:
    """Stands in for the 'random' module so the secret number is known in advance."""
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert low <= self.value <= high
        return self.value

class FakeClock:
    """Returns the given timestamps one after another (like time.monotonic would)."""
    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        return self.times.pop(0)

@pytest.fixture
def make_console():
    """
    Builds a Console that reads the given lines instead of the keyboard.
    Everything the game prints can be read back from console.stdout.getvalue().
    """
    def factory(*lines):
        text = "".join(line + "\n" for line in lines)
        return Console(stdin=io.StringIO(text), stdout=io.StringIO())
    return factory

@pytest.fixture
def leaderboard_path(tmp_path):
    return tmp_path / "leaderboard.csv"

@pytest.fixture
def store(leaderboard_path):
    return LeaderboardStore(leaderboard_path)
