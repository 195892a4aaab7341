import sys
from guessing_game import create_game

# Create the game (reads .env, sets up logging and the leaderboard file)
application = create_game()

if __name__ == '__main__':
    sys.exit(application.run())
