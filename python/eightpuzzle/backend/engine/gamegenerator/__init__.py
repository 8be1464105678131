from eightpuzzle.backend.engine.gamegenerator.generator import (
    SHUFFLE_MOVES_RANGE,
    GameGenerator,
)

__all__ = ["GameGenerator", "SHUFFLE_MOVES_RANGE"]
