"""Tests for the canonical recursive solution."""

import pytest

from hanoi_lite.solver import CanonicalSolution, optimal_move_count, plan_hanoi, replay, solve
from hanoi_lite.state import GameState, Move


@pytest.mark.parametrize("n", range(0, 9))
def test_plan_length_is_optimal(n):
    assert len(plan_hanoi(n)) == (1 << n) - 1 == optimal_move_count(n)


def test_small_plans_match_known_sequences():
    assert plan_hanoi(0) == []
    assert plan_hanoi(1) == [Move(0, 2)]
    assert plan_hanoi(2) == [Move(0, 1), Move(0, 2), Move(1, 2)]
    assert plan_hanoi(3) == [
        (0, 2), (0, 1), (2, 1), (0, 2), (1, 0), (1, 2), (0, 2),
    ]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_every_canonical_move_is_legal(n):
    state = GameState(n)
    for move in solve(n):
        assert state.try_move(*move), f"illegal canonical move {move}"
        state.check_invariants()

    assert state.snapshot() == ((), (), tuple(range(n, 0, -1)))
    assert state.moves == (1 << n) - 1


def test_three_disks_end_on_target_in_seven_moves():
    state = replay(3, plan_hanoi(3))

    assert state.pegs[2] == [3, 2, 1]
    assert state.pegs[0] == [] and state.pegs[1] == []
    assert state.moves == 7


def test_alternative_target_peg():
    state = replay(3, solve(3, source=0, auxiliary=2, target=1))

    assert state.snapshot() == ((), (3, 2, 1), ())


class TestCanonicalSolution:

    def test_iteration_restarts(self):
        solution = CanonicalSolution(4)

        first = list(solution)
        second = list(solution)

        assert first == second == plan_hanoi(4)

    def test_length(self):
        assert len(CanonicalSolution(5)) == 31
        assert len(CanonicalSolution(0)) == 0

    def test_prefix(self):
        solution = CanonicalSolution(3)

        assert solution.prefix(3) == plan_hanoi(3)[:3]
        assert solution.prefix(0) == []
        assert solution.prefix(-2) == []
        assert solution.prefix(100) == plan_hanoi(3)

    def test_pegs_must_be_distinct(self):
        with pytest.raises(ValueError):
            CanonicalSolution(3, source=0, auxiliary=0, target=2)


def test_replay_skips_rejected_moves():
    state = replay(2, [Move(0, 1), Move(0, 1), Move(0, 2)])

    assert state.snapshot() == ((), (1,), (2,))
    assert state.moves == 2
