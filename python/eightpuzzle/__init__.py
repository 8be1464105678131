"""Eight puzzle: a 3×3 sliding tile game with undo."""

from eightpuzzle.backend.engine.gameplay import GamePlay
from eightpuzzle.backend.engine.gamestate import PuzzleState, Snapshot

__all__ = ["GamePlay", "PuzzleState", "Snapshot"]
