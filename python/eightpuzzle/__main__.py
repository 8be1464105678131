"""Entry point for running the game via ``python -m eightpuzzle``."""

from eightpuzzle.main import app

if __name__ == "__main__":
    app()
