"""Board model for the eight puzzle.

The board is indexed by *tile*, not by cell: ``positions[i]`` is the
(row, col) currently occupied by tile ``i``, and the last slot always
holds the blank.  The grid view (cell -> tile) is derived on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable

GRID_SIZE = 3
NUM_TILES = GRID_SIZE * GRID_SIZE
EMPTY_INDEX = NUM_TILES - 1

Position = tuple[int, int]


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Position:
        """Offset from the blank to the tile that will slide.

        UP    -> tile below the blank moves up
        DOWN  -> tile above the blank moves down
        LEFT  -> tile right of the blank moves left
        RIGHT -> tile left of the blank moves right
        """
        return _OFFSETS[self]


_OFFSETS: dict[Direction, Position] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class Board:
    """Immutable tile-indexed board."""

    positions: tuple[Position, ...]
    size: int = field(default=GRID_SIZE)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int = GRID_SIZE) -> Board:
        """Return the goal board (tile i at ``divmod(i, size)``)."""
        return cls(
            positions=tuple(divmod(i, size) for i in range(size * size)),
            size=size,
        )

    @classmethod
    def from_positions(
        cls, positions: Iterable[Iterable[int]], size: int = GRID_SIZE
    ) -> Board:
        """Create a board from a sequence of (row, col) pairs.

        Example::

            Board.from_positions([(0, 0), (0, 1), (0, 2),
                                  (1, 0), (1, 1), (2, 2),
                                  (2, 0), (2, 1), (1, 2)])
        """
        pos = tuple((int(r), int(c)) for r, c in positions)
        if len(pos) != size * size:
            raise ValueError(
                f"Expected {size * size} positions for a {size}×{size} board, "
                f"got {len(pos)}."
            )
        for r, c in pos:
            if not (0 <= r < size and 0 <= c < size):
                raise ValueError(f"Position {(r, c)} is off a {size}×{size} grid.")
        board = cls(positions=pos, size=size)
        if not board.is_permutation():
            raise ValueError("Every grid cell must be occupied exactly once.")
        return board

    # -- queries --------------------------------------------------------------

    @property
    def num_tiles(self) -> int:
        return self.size * self.size

    @property
    def empty_index(self) -> int:
        return self.num_tiles - 1

    @property
    def blank_pos(self) -> Position:
        return self.positions[self.empty_index]

    def tile_at(self, pos: Position) -> int | None:
        """Return the index of the tile at *pos*, or ``None`` if off-grid."""
        for i, p in enumerate(self.positions):
            if p == pos:
                return i
        return None

    def is_adjacent_to_blank(self, index: int) -> bool:
        """Check whether tile *index* shares an edge with the blank."""
        tr, tc = self.positions[index]
        br, bc = self.blank_pos
        if tr == br:
            return abs(tc - bc) == 1
        if tc == bc:
            return abs(tr - br) == 1
        return False

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(self.is_tile_correct(i) for i in range(self.num_tiles))

    def is_tile_correct(self, index: int) -> bool:
        return self.positions[index] == divmod(index, self.size)

    def is_permutation(self) -> bool:
        return set(self.positions) == {
            (r, c) for r in range(self.size) for c in range(self.size)
        }

    def to_grid(self) -> list[list[int | None]]:
        """Return a row-major grid of tile indices, ``None`` for the blank."""
        grid: list[list[int | None]] = [
            [None] * self.size for _ in range(self.size)
        ]
        for i, (r, c) in enumerate(self.positions):
            if i != self.empty_index:
                grid[r][c] = i
        return grid

    # -- transitions ----------------------------------------------------------

    def swap_with_blank(self, index: int) -> Board:
        """Return a new board with tile *index* and the blank exchanged."""
        positions = list(self.positions)
        positions[index], positions[self.empty_index] = (
            positions[self.empty_index],
            positions[index],
        )
        return Board(positions=tuple(positions), size=self.size)
