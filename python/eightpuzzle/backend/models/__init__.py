from eightpuzzle.backend.models.board import (
    EMPTY_INDEX,
    GRID_SIZE,
    NUM_TILES,
    Board,
    Direction,
    Position,
)

__all__ = ["Board", "Direction", "EMPTY_INDEX", "GRID_SIZE", "NUM_TILES", "Position"]
