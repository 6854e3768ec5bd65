"""
Numeric encodings of a Hanoi position.

A position is fully described by which peg each disk sits on, since the order
within a peg is forced by size. These helpers turn peg contents into numpy
arrays for analysis and visualization.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .state import GOAL_PEG, PEG_COUNT

Pegs = Sequence[Sequence[int]]


def disk_positions(pegs: Pegs) -> np.ndarray:
    """Peg index of every disk; entry ``d - 1`` belongs to disk ``d``."""
    n = sum(len(peg) for peg in pegs)
    positions = np.full(n, -1, dtype=np.int8)
    for idx, peg in enumerate(pegs):
        for disk in peg:
            positions[disk - 1] = idx
    return positions


def one_hot(pegs: Pegs) -> np.ndarray:
    """(n, 3) float32 matrix with a single 1.0 per disk row."""
    positions = disk_positions(pegs)
    planes = np.zeros((len(positions), PEG_COUNT), dtype=np.float32)
    planes[np.arange(len(positions)), positions] = 1.0
    return planes


def moves_to_goal(pegs: Pegs, target: int = GOAL_PEG) -> int:
    """
    Minimal number of moves from ``pegs`` to all disks on ``target``.

    Works from the largest disk down: a disk already on the current target
    costs nothing; otherwise it must move once, which first requires the
    2^(d-1) - 1 smaller disks to be stacked on the spare peg, so the target
    for the smaller disks becomes that spare peg.
    """
    positions = disk_positions(pegs)
    total = 0
    for disk in range(len(positions), 0, -1):
        peg = int(positions[disk - 1])
        if peg != target:
            total += 1 << (disk - 1)
            target = PEG_COUNT - peg - target
    return total
