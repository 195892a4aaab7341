import logging

from guessing_game.schemas import Result

logger = logging.getLogger(__name__)

FIELD_COUNT = 7

# --- Serialization ---
# The file format is deliberately crude: string fields are wrapped in quotes
# with no escaping, so a quote or comma inside a name corrupts that line.
# Existing leaderboard files depend on it, so keep it byte-for-byte.

def format_record(result: Result) -> str:
    return (
        f'"{result.timestamp}",'
        f'"{result.player_name}",'
        f'"{result.difficulty}",'
        f'{result.attempts},'
        f'{result.elapsed_seconds:.2f},'
        f'{result.secret_number},'
        f'{result.score:.2f}\n'
    )

def _unquote(field: str) -> str:
    if len(field) >= 2 and field[0] == '"':
        return field[1:-1]
    return field

def parse_record(line: str) -> Result | None:
    """
    Best effort: returns None if the line is short of a field or a number
    does not parse. Fields past the seventh are ignored.
    """
    fields = line.rstrip("\r\n").split(",")
    if len(fields) < FIELD_COUNT:
        return None

    try:
        return Result(
            timestamp=_unquote(fields[0]),
            player_name=_unquote(fields[1]),
            difficulty=_unquote(fields[2]),
            attempts=int(fields[3]),
            elapsed_seconds=float(fields[4]),
            secret_number=int(fields[5]),
            score=float(fields[6]),
        )
    except ValueError:
        # pydantic's ValidationError is a ValueError too (negative score etc.)
        return None

# --- Store ---

class LeaderboardStore:
    def __init__(self, path, encoder=format_record, decoder=parse_record):
        self.path = path
        self.encoder = encoder
        self.decoder = decoder

    def append(self, result: Result) -> bool:
        # A failed write must never stop the game, the record is just lost.
        try:
            with open(self.path, 'a', encoding='utf-8') as leaderboard_file:
                leaderboard_file.write(self.encoder(result))
        except OSError as error:
            logger.warning(f"Could not write leaderboard file {self.path}: {error}")
            return False

        logger.debug(f"Saved result for {result.player_name} to {self.path}")
        return True

    def read_recent(self, limit: int = 10) -> list[Result]:
        entries = []
        try:
            with open(self.path, 'r', encoding='utf-8') as leaderboard_file:
                for line_number, line in enumerate(leaderboard_file, start=1):
                    if not line.strip():
                        continue

                    entry = self.decoder(line)
                    if entry is None:
                        logger.debug(f"Skipping malformed leaderboard line {line_number}")
                        continue

                    entries.append(entry)
                    if len(entries) >= limit:
                        break
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as error:
            logger.debug(f"Leaderboard file {self.path} unreadable: {error}")
            return entries

        return entries

    def display(self, console, limit: int = 10):
        entries = self.read_recent(limit)
        if not entries:
            console.say("No leaderboard entries yet.")
            return

        console.say(f"\nTop {len(entries)} recent games:")
        console.say(f"{'Time':<20}{'Player':<15}{'Diff':<12}{'Att':<10}{'Sec':<10}{'Score':<10}")
        console.say("-" * 80)
        for entry in entries:
            console.say(
                f"{entry.timestamp:<20}{entry.player_name:<15}{entry.difficulty:<12}"
                f"{entry.attempts:<10}{entry.elapsed_seconds:<10.1f}{entry.score:<10.2f}"
            )
        console.say()
