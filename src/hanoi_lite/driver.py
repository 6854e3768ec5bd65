"""
Auto-solve playback.

The driver walks the canonical solution one move at a time. ``step()`` is the
discrete unit (one move per call) so any scheduler can drive it; ``play()``
is the asyncio pacing loop used by the session, sleeping between moves.

Cancellation is observed immediately before each application: once
``cancel()`` returns, no further move of that run is applied.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum, auto
from typing import Callable, Iterator, Optional

from .solver import CanonicalSolution
from .state import Move

logger = logging.getLogger(__name__)

DEFAULT_MOVE_DELAY = 0.5


class DriverState(Enum):
    IDLE = auto()
    SOLVING = auto()
    COMPLETED = auto()
    CANCELLED = auto()


class SolverDriver:
    """
    Plays the canonical solution against a move callback.

    State machine: IDLE -> SOLVING -> {COMPLETED, CANCELLED} -> IDLE.
    The terminal outcome is kept in ``last_outcome`` after the driver has
    returned to IDLE.

    Every ``start()`` and ``cancel()`` bumps ``generation``; a playback loop
    that wakes up under a different generation has been superseded and stops
    without touching the board.
    """

    def __init__(
        self,
        apply_move: Callable[[Move], bool],
        delay: float = DEFAULT_MOVE_DELAY,
        on_finish: Optional[Callable[[DriverState], None]] = None,
    ):
        self._apply_move = apply_move
        self._on_finish = on_finish
        self.delay = delay
        self.state = DriverState.IDLE
        self.last_outcome: Optional[DriverState] = None
        self.generation = 0
        self.solution: Optional[CanonicalSolution] = None
        self.applied = 0
        self._moves: Optional[Iterator[Move]] = None

    @property
    def is_solving(self) -> bool:
        return self.state is DriverState.SOLVING

    @property
    def total(self) -> int:
        return len(self.solution) if self.solution is not None else 0

    @property
    def remaining(self) -> int:
        return self.total - self.applied

    def start(self, n: int, source: int = 0, auxiliary: int = 1, target: int = 2) -> int:
        """Begin a new run; any run still in flight is cancelled first."""
        if self.is_solving:
            self.cancel()
        self.generation += 1
        self.solution = CanonicalSolution(n, source, auxiliary, target)
        self._moves = iter(self.solution)
        self.applied = 0
        self.state = DriverState.SOLVING
        logger.info("auto-solve started: n=%d, %d moves (run %d)", n, self.total, self.generation)
        if self.total == 0:
            self._finish(DriverState.COMPLETED)
        return self.generation

    def step(self) -> bool:
        """Apply the next pending move. Returns True if a move was applied."""
        if not self.is_solving or self._moves is None:
            return False
        move = next(self._moves, None)
        if move is None:
            self._finish(DriverState.COMPLETED)
            return False
        generation = self.generation
        try:
            accepted = self._apply_move(move)
        except Exception:
            if self.generation == generation:
                self.cancel()
            raise
        if not accepted:
            logger.warning(
                "canonical move %s rejected after %d moves; stopping run %d",
                move, self.applied, self.generation,
            )
            self.cancel()
            return False
        if self.generation != generation:
            # Cancelled or restarted from inside the move callback.
            return True
        self.applied += 1
        if self.applied >= self.total:
            self._finish(DriverState.COMPLETED)
        return True

    def cancel(self) -> bool:
        """Stop the current run. Returns False if nothing was solving."""
        if not self.is_solving:
            return False
        self.generation += 1
        logger.info("auto-solve cancelled after %d/%d moves", self.applied, self.total)
        self._finish(DriverState.CANCELLED)
        return True

    async def play(self, delay: Optional[float] = None) -> DriverState:
        """Pace the current run, sleeping ``delay`` seconds before each move."""
        delay = self.delay if delay is None else delay
        generation = self.generation
        while self.is_solving and self.generation == generation:
            await asyncio.sleep(delay)
            if self.generation != generation or not self.is_solving:
                break
            self.step()
        if self.generation != generation:
            return DriverState.CANCELLED
        return self.last_outcome or DriverState.CANCELLED

    def _finish(self, outcome: DriverState) -> None:
        self.last_outcome = outcome
        self._moves = None
        if outcome is DriverState.COMPLETED:
            logger.info("auto-solve completed in %d moves", self.applied)
        self.state = DriverState.IDLE
        if self._on_finish is not None:
            self._on_finish(outcome)
