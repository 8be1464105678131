"""PuzzleState tests — moves, undo, shuffle, and win detection."""

from __future__ import annotations

import random
from typing import Iterator

import pytest

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.engine.gamestate import PuzzleState, Snapshot
from eightpuzzle.backend.models.board import EMPTY_INDEX, NUM_TILES, Board, Direction


# -- helpers ------------------------------------------------------------------


def _solved_state() -> PuzzleState:
    return PuzzleState.from_board(Board.solved())


def _one_off_state() -> PuzzleState:
    """Tile 7 slid right: blank at (2, 1), tile 7 at (2, 2)."""
    return PuzzleState.from_board(Board.solved().swap_with_blank(7))


def _assert_permutation(state: PuzzleState) -> None:
    cells = {(r, c) for r in range(3) for c in range(3)}
    assert len(state.board.positions) == NUM_TILES
    assert set(state.board.positions) == cells


# -- new game / shuffle -------------------------------------------------------


def test_new_game_is_shuffled_and_fresh() -> None:
    state = PuzzleState(random.Random(3))
    assert state.moves == 0
    assert state.stack == []
    assert not state.shuffling
    assert not state.is_solved()
    _assert_permutation(state)


def test_shuffle_is_deterministic_per_seed() -> None:
    a = PuzzleState(random.Random(11))
    b = PuzzleState(random.Random(11))
    assert a.board == b.board


def test_shuffle_leaves_counters_alone() -> None:
    state = _one_off_state()
    state.move_tile(6)
    state.shuffle()
    assert state.moves == 1
    assert len(state.stack) == 1
    assert not state.shuffling


def test_shuffle_retries_when_walk_returns_to_solved(monkeypatch: pytest.MonkeyPatch) -> None:
    walks: Iterator[list[Direction]] = iter(
        [[Direction.DOWN, Direction.UP] * 30, [Direction.DOWN]]
    )
    monkeypatch.setattr(GameGenerator, "random_walk", staticmethod(lambda rng: next(walks)))

    state = PuzzleState(random.Random(0))

    assert state.board == Board.solved().swap_with_blank(5)
    assert not state.is_solved()
    assert state.moves == 0


def test_shuffle_clears_flag_when_walk_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    state = _one_off_state()

    def broken_walk(rng: random.Random) -> list[Direction]:
        raise RuntimeError("no walk")

    monkeypatch.setattr(GameGenerator, "random_walk", staticmethod(broken_walk))

    with pytest.raises(RuntimeError):
        state.shuffle()

    assert state.shuffling is False
    assert state.board == Board.solved().swap_with_blank(7)


def test_start_new_game_resets() -> None:
    state = PuzzleState(random.Random(5))
    index = next(i for i in range(EMPTY_INDEX) if state.can_move_tile(i))
    assert state.move_tile(index)

    state.start_new_game()

    assert state.moves == 0
    assert state.stack == []
    assert state.undo() is False
    _assert_permutation(state)


# -- can_move_tile / move_tile ------------------------------------------------


@pytest.mark.parametrize("index", [-1, EMPTY_INDEX, NUM_TILES, 100])
def test_can_move_tile_rejects_out_of_range(index: int) -> None:
    assert not _one_off_state().can_move_tile(index)


def test_can_move_tile_on_solved_board() -> None:
    state = _solved_state()
    assert state.can_move_tile(5)
    assert state.can_move_tile(7)
    assert not state.can_move_tile(4)
    assert not state.can_move_tile(0)


def test_no_moves_on_solved_board() -> None:
    state = _solved_state()
    for index in range(-1, NUM_TILES + 1):
        assert state.move_tile(index) is False
    assert state.board == Board.solved()
    assert state.moves == 0
    assert state.stack == []


def test_moving_the_blank_always_fails() -> None:
    state = PuzzleState(random.Random(8))
    before = state.board
    assert state.move_tile(EMPTY_INDEX) is False
    assert state.board == before


def test_rejected_moves_are_idempotent() -> None:
    state = _one_off_state()
    before = state.get_state()
    for _ in range(5):
        assert state.move_tile(0) is False
        assert state.move_tile(2) is False
    assert state.get_state() == before
    assert state.stack == []


def test_move_that_solves_the_puzzle() -> None:
    state = PuzzleState.from_board(Board.solved().swap_with_blank(5))
    assert state.can_move_tile(5)

    assert state.move_tile(5) is True

    assert state.moves == 1
    assert state.board.blank_pos == (2, 2)
    assert state.board.positions[5] == (1, 2)
    assert state.is_solved()
    assert state.get_state().solved
    # locked after the win
    assert state.move_tile(5) is False
    assert state.moves == 1


def test_sliding_back_is_a_forward_move() -> None:
    state = _one_off_state()
    start = state.board

    assert state.move_tile(6) is True
    assert state.moves == 1
    assert state.board.blank_pos == (2, 0)
    assert state.board.positions[6] == (2, 1)

    assert state.move_tile(6) is True
    assert state.moves == 2
    assert state.board == start
    assert len(state.stack) == 2


# -- move_in_direction --------------------------------------------------------


@pytest.mark.parametrize(
    "direction, tile",
    [
        (Direction.DOWN, 4),
        (Direction.LEFT, 7),
        (Direction.RIGHT, 6),
        ("right", 6),
    ],
)
def test_move_in_direction(direction: Direction | str, tile: int) -> None:
    state = _one_off_state()
    old_pos = state.board.positions[tile]

    assert state.move_in_direction(direction) is True

    assert state.board.positions[tile] == (2, 1)
    assert state.board.blank_pos == old_pos
    assert state.moves == 1


def test_move_in_direction_off_grid_is_a_no_op(monkeypatch: pytest.MonkeyPatch) -> None:
    state = _one_off_state()
    calls: list[int] = []
    monkeypatch.setattr(state, "move_tile", lambda index: calls.append(index) or True)

    assert state.move_in_direction(Direction.UP) is False

    assert calls == []
    assert state.board == Board.solved().swap_with_blank(7)


def test_move_in_direction_rejects_unknown_direction() -> None:
    with pytest.raises(ValueError):
        _one_off_state().move_in_direction("sideways")


# -- undo ---------------------------------------------------------------------


def test_undo_with_empty_stack() -> None:
    state = PuzzleState(random.Random(2))
    before = state.get_state()
    assert state.undo() is False
    assert state.get_state() == before


def test_move_then_undo_round_trip() -> None:
    state = PuzzleState(random.Random(4))
    index = next(i for i in range(EMPTY_INDEX) if state.can_move_tile(i))
    before = state.get_state()

    assert state.move_tile(index) is True
    assert state.undo() is True

    assert state.get_state() == before
    assert state.stack == []


def test_undo_after_win_reopens_the_game() -> None:
    state = PuzzleState.from_board(Board.solved().swap_with_blank(5))
    state.move_tile(5)

    assert state.undo() is True
    assert state.moves == 0
    assert not state.is_solved()
    assert state.move_tile(5) is True


# -- snapshots & invariants ---------------------------------------------------


def test_get_state_snapshot() -> None:
    state = _one_off_state()
    state.move_tile(7)

    snap = state.get_state()

    assert isinstance(snap, Snapshot)
    assert snap == Snapshot(board=Board.solved().positions, moves=1, solved=True)
    with pytest.raises(AttributeError):
        snap.moves = 5  # type: ignore[misc]


def test_random_play_keeps_board_a_permutation() -> None:
    rng = random.Random(99)
    state = PuzzleState(random.Random(7))
    for _ in range(500):
        action = rng.random()
        if action < 0.6:
            state.move_tile(rng.randrange(-1, NUM_TILES + 1))
        elif action < 0.8:
            state.move_in_direction(rng.choice(list(Direction)))
        elif action < 0.95:
            state.undo()
        else:
            state.start_new_game()
        _assert_permutation(state)
        assert state.moves == len(state.stack)
