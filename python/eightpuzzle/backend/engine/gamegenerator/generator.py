"""Generates the random walks used to scramble a solved board."""

from __future__ import annotations

import random

from eightpuzzle.backend.models.board import Direction

SHUFFLE_MOVES_RANGE: tuple[int, int] = (60, 80)


class GameGenerator:
    """Creates solvable scrambles by walking randomly from the solved state."""

    @staticmethod
    def walk_length(rng: random.Random) -> int:
        """Return the number of shuffle steps (inclusive range)."""
        lo, hi = SHUFFLE_MOVES_RANGE
        return rng.randint(lo, hi)

    @staticmethod
    def random_walk(rng: random.Random) -> list[Direction]:
        """Return a random sequence of directions to replay on a board.

        Steps are not filtered for legality: a direction that points off
        the grid is simply rejected when replayed.
        """
        directions = list(Direction)
        return [
            rng.choice(directions)
            for _ in range(GameGenerator.walk_length(rng))
        ]
