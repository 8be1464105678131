"""Game session: owns one puzzle and hands fresh snapshots to the view."""

from __future__ import annotations

import logging
import random

from eightpuzzle.backend.engine.gamestate import PuzzleState, Snapshot
from eightpuzzle.backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    Every mutating call returns ``(accepted, snapshot)`` so the caller can
    re-render from the state as it is after the action.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.state = PuzzleState(rng)

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> "GamePlay":
        """Create a session from an existing board (no shuffle).

        *rng* drives the shuffle of any later ``new_game()``.
        """
        obj = object.__new__(cls)
        obj.state = PuzzleState.from_board(board, rng)
        return obj

    # -- actions --------------------------------------------------------------

    def new_game(self) -> Snapshot:
        self.state.start_new_game()
        return self.snapshot()

    def move(self, index: int) -> tuple[bool, Snapshot]:
        """Slide tile *index* (zero-based) into the blank."""
        return self._after(self.state.move_tile(index))

    def move_direction(self, direction: Direction) -> tuple[bool, Snapshot]:
        return self._after(self.state.move_in_direction(direction))

    def undo(self) -> tuple[bool, Snapshot]:
        return self._after(self.state.undo())

    # -- queries --------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        return self.state.get_state()

    @property
    def is_won(self) -> bool:
        return self.state.is_solved()

    # -- helpers --------------------------------------------------------------

    def _after(self, accepted: bool) -> tuple[bool, Snapshot]:
        snap = self.snapshot()
        if accepted and snap.solved:
            logger.info("Puzzle solved in %d moves", snap.moves)
        return accepted, snap
