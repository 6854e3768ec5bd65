"""Canonical recursive solution of the three-peg puzzle."""
from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, List

from .state import GameState, Move


def optimal_move_count(n: int) -> int:
    return (1 << n) - 1 if n > 0 else 0


def solve(n: int, source: int = 0, auxiliary: int = 1, target: int = 2) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from source to target.

    Recursion depth is ``n``; moves are produced lazily so memory stays O(n).
    """
    if n > 0:
        yield from solve(n - 1, source, target, auxiliary)
        yield Move(source, target)
        yield from solve(n - 1, auxiliary, source, target)


def plan_hanoi(n: int, source: int = 0, auxiliary: int = 1, target: int = 2) -> List[Move]:
    """Return the full canonical move list."""
    return list(solve(n, source, auxiliary, target))


class CanonicalSolution:
    """
    Finite, restartable view of the canonical move sequence.

    Each ``iter()`` starts a fresh generator, so the same object can drive
    several playbacks without being rebuilt.
    """

    def __init__(self, n: int, source: int = 0, auxiliary: int = 1, target: int = 2):
        if len({source, auxiliary, target}) != 3:
            raise ValueError("source, auxiliary and target must be distinct pegs")
        self.n = n
        self.source = source
        self.auxiliary = auxiliary
        self.target = target

    def __iter__(self) -> Iterator[Move]:
        return solve(self.n, self.source, self.auxiliary, self.target)

    def __len__(self) -> int:
        return optimal_move_count(self.n)

    def prefix(self, k: int) -> List[Move]:
        """First ``k`` moves (all of them if k exceeds the length)."""
        return list(islice(iter(self), max(0, k)))

    def __repr__(self) -> str:
        return (
            f"CanonicalSolution(n={self.n}, source={self.source}, "
            f"auxiliary={self.auxiliary}, target={self.target})"
        )


def replay(n: int, moves: Iterable[Move]) -> GameState:
    """Apply ``moves`` to a fresh ``n``-disk state and return it.

    Rejected moves are skipped, exactly as they would be interactively.
    """
    state = GameState(n)
    for src, dst in moves:
        state.try_move(src, dst)
    return state
