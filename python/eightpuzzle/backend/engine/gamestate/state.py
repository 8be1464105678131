"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.models.board import Board, Direction, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a puzzle handed to the rendering layer."""

    board: tuple[Position, ...]
    moves: int
    solved: bool


class PuzzleState:
    """Holds the current board, move counter, and undo history.

    Failed actions (illegal moves, moves after a win, undo with nothing
    to undo) return ``False`` and leave the state untouched.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.board: Board = Board.solved()
        self.moves: int = 0
        self.stack: list[Board] = []
        self.shuffling: bool = False
        self.start_new_game()

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> "PuzzleState":
        """Create a state from an existing board without shuffling."""
        obj = object.__new__(cls)
        obj._rng = rng if rng is not None else random.Random()
        obj.board = board
        obj.moves = 0
        obj.stack = []
        obj.shuffling = False
        return obj

    # -- lifecycle ------------------------------------------------------------

    def start_new_game(self) -> None:
        """Reset to the solved board and scramble it."""
        self.moves = 0
        self.board = Board.solved()
        self.stack = []
        self.shuffle()
        logger.info("New game started")

    def shuffle(self) -> None:
        """Scramble the board with random walks until it is not solved.

        Shuffle moves touch neither the move counter nor the undo stack.
        """
        self.shuffling = True
        try:
            while True:
                walk = GameGenerator.random_walk(self._rng)
                for direction in walk:
                    self.move_in_direction(direction)
                if not self.board.is_solved():
                    break
                logger.debug("Walk of %d steps returned to solved, reshuffling", len(walk))
        finally:
            self.shuffling = False
        logger.debug("Shuffled to %s", self.board.positions)

    # -- moves ----------------------------------------------------------------

    def can_move_tile(self, index: int) -> bool:
        if not 0 <= index < self.board.empty_index:
            return False
        return self.board.is_adjacent_to_blank(index)

    def move_tile(self, index: int) -> bool:
        """Slide tile *index* into the blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        if not self.shuffling and self.is_solved():
            return False

        if not self.can_move_tile(index):
            if not self.shuffling:
                logger.debug("Rejected move of tile %d", index)
            return False

        before = self.board
        self.board = before.swap_with_blank(index)
        if not self.shuffling:
            self.stack.append(before)
            self.moves += 1
            logger.debug("Moved tile %d to %s (moves=%d)", index, before.blank_pos, self.moves)
        return True

    def move_in_direction(self, direction: Direction | str) -> bool:
        """Slide whichever tile lies next to the blank in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns False without attempting a move when no tile lies on that
        side of the blank.
        """
        dr, dc = Direction(direction).offset
        br, bc = self.board.blank_pos
        index = self.board.tile_at((br + dr, bc + dc))
        if index is None:
            return False
        return self.move_tile(index)

    def undo(self) -> bool:
        """Restore the board from before the last user move."""
        if not self.stack:
            return False
        self.board = self.stack.pop()
        self.moves -= 1
        logger.debug("Undo (moves=%d, history=%d)", self.moves, len(self.stack))
        return True

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        return self.board.is_solved()

    def get_state(self) -> Snapshot:
        return Snapshot(
            board=self.board.positions,
            moves=self.moves,
            solved=self.is_solved(),
        )
