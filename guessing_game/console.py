import re
import sys

# Optional sign followed by digits, nothing else (no spaces, no underscores)
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")

class EndOfInput(Exception):
    """
    Raised when standard input is closed (Ctrl+D / Ctrl+Z).
    The session loop treats it as "the player quit" and exits with code 0.
    """

class Console:
    """
    All reading and writing the game does goes through this class.
    The streams are passed in, so tests can use io.StringIO instead of a real terminal.
    """
    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str):
        # Prompts have no newline, so flush to make them appear immediately
        self.stdout.write(text)
        self.stdout.flush()

    def say(self, text: str = ""):
        self.write(text + "\n")

    def read_line(self) -> str:
        line = self.stdin.readline()
        # readline() only returns an empty string at end-of-input
        if line == "":
            raise EndOfInput()
        return line.rstrip("\r\n")

    def read_int(self, prompt: str, min_value: int | None = None, max_value: int | None = None) -> int:
        while True:
            self.write(prompt)
            text = self.read_line().strip()

            if not text:
                self.say("Please enter a value.")
                continue
            if not INTEGER_PATTERN.match(text):
                self.say("Invalid input. Please enter an integer.")
                continue

            value = int(text)
            if (min_value is not None and value < min_value) or (max_value is not None and value > max_value):
                self.say(f"Enter a number between {_bound_text(min_value)} and {_bound_text(max_value)}.")
                continue
            return value

    def read_yes_no(self, prompt: str) -> bool:
        while True:
            self.write(f"{prompt} (y/n): ")
            text = self.read_line().strip()
            if not text:
                continue

            answer = text[0].lower()
            if answer == 'y':
                return True
            if answer == 'n':
                return False
            self.say("Please reply with 'y' or 'n'.")

def _bound_text(bound):
    return "any" if bound is None else str(bound)
