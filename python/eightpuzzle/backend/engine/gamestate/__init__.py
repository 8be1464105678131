from eightpuzzle.backend.engine.gamestate.state import PuzzleState, Snapshot

__all__ = ["PuzzleState", "Snapshot"]
