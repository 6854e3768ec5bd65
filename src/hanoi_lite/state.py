"""Tower of Hanoi game state: three pegs and the single legality rule."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

from .errors import InvalidConfigurationError, InvalidStateError

logger = logging.getLogger(__name__)

PEG_COUNT = 3
GOAL_PEG = 2

Disk = int
PegsView = Tuple[Tuple[Disk, ...], ...]


class Move(NamedTuple):
    """Relocation of the top disk of ``source`` onto ``target``."""
    source: int
    target: int

    def __str__(self) -> str:
        return f"{self.source}->{self.target}"


def validate_disk_count(n: object) -> int:
    """Return ``n`` if it is a usable disk count, raise otherwise."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidConfigurationError(
            "disk count must be an integer",
            context={"n": n},
        )
    if n < 1:
        raise InvalidConfigurationError(
            "Hanoi requires at least one disk",
            context={"n": n},
        )
    return n


@dataclass
class GameState:
    """Three pegs of disks, each listed bottom to top.

    ``try_move`` is the only way peg contents change. Rejected moves leave
    the state untouched.
    """

    n: int
    pegs: List[List[Disk]] = field(init=False)
    moves: int = field(default=0, init=False)
    history: List[Move] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        validate_disk_count(self.n)
        # Peg 0 starts with all disks (largest at bottom, smallest at top).
        self.pegs = [list(range(self.n, 0, -1)), [], []]

    @classmethod
    def initialize(cls, n: int) -> "GameState":
        return cls(n)

    @classmethod
    def from_pegs(cls, pegs: List[List[Disk]]) -> "GameState":
        """Build a state from explicit peg contents (bottom to top)."""
        if len(pegs) != PEG_COUNT:
            raise InvalidStateError(
                f"expected {PEG_COUNT} pegs", context={"pegs": len(pegs)}
            )
        n = sum(len(peg) for peg in pegs)
        state = cls(n)
        state.pegs = [list(peg) for peg in pegs]
        state.check_invariants()
        return state

    @staticmethod
    def in_range(peg: int) -> bool:
        return isinstance(peg, int) and not isinstance(peg, bool) and 0 <= peg < PEG_COUNT

    def top(self, peg: int) -> Optional[Disk]:
        """Smallest disk on ``peg``, or None when the peg is empty."""
        stack = self.pegs[peg]
        return stack[-1] if stack else None

    def legal(self, src: int, dst: int) -> bool:
        """Return True iff moving the top disk from src to dst is legal."""
        if not (self.in_range(src) and self.in_range(dst)):
            return False
        if src == dst:
            return False
        if not self.pegs[src]:
            return False
        if not self.pegs[dst]:
            return True
        return self.pegs[src][-1] < self.pegs[dst][-1]

    def try_move(self, src: int, dst: int) -> bool:
        """Attempt to move a disk; returns True on success, False otherwise."""
        if not self.legal(src, dst):
            logger.debug("rejected move %s->%s", src, dst)
            return False
        disk = self.pegs[src].pop()
        self.pegs[dst].append(disk)
        self.moves += 1
        self.history.append(Move(src, dst))
        logger.debug("disk %d moved %s->%s (move %d)", disk, src, dst, self.moves)
        return True

    def snapshot(self) -> PegsView:
        """Immutable copy of the pegs, bottom to top."""
        return tuple(tuple(peg) for peg in self.pegs)

    def is_goal(self, target: int = GOAL_PEG) -> bool:
        """Check whether all disks sit on ``target``."""
        return len(self.pegs[target]) == self.n

    def check_invariants(self) -> None:
        """Raise InvalidStateError unless every peg is ordered and each disk appears once."""
        for idx, peg in enumerate(self.pegs):
            if any(lower <= upper for lower, upper in zip(peg, peg[1:])):
                raise InvalidStateError(
                    "peg is not strictly decreasing bottom to top",
                    context={"peg": idx, "disks": list(peg)},
                )
        disks = sorted(d for peg in self.pegs for d in peg)
        if disks != list(range(1, self.n + 1)):
            raise InvalidStateError(
                "disks must be 1..n, each exactly once",
                context={"n": self.n, "disks": disks},
            )

    def __str__(self) -> str:
        """Render the pegs as ASCII rows (top row first)."""
        width = len(str(self.n))
        levels = []
        for level in range(self.n - 1, -1, -1):
            row = []
            for peg in self.pegs:
                if len(peg) > level:
                    row.append(str(peg[level]).rjust(width + 1))
                else:
                    row.append("|".rjust(width + 1))
            levels.append("  ".join(row))
        labels = "  ".join(str(i).rjust(width + 1) for i in range(PEG_COUNT))
        return "\n".join(levels + [labels])
