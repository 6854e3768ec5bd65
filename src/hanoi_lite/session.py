"""
Hanoi play session.

A ``HanoiSession`` is the object the presentation layer owns: it holds the
game state, the click selection, the move and time counters, the playing flag,
and the auto-solve driver. Every command returns a fresh ``SessionSnapshot``;
nothing is shared at module level.

Gating:
- Manual commands (``select``, ``try_move``) are ignored while solving.
- ``tick()`` advances the clock only while playing and not solving.
- ``initialize``/``reset`` and a new auto-solve cancel any run in flight.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .config import HanoiConfig
from .driver import DriverState, SolverDriver
from .errors import InvalidConfigurationError
from .interaction import Selection
from .recorder import SessionRecorder
from .solver import optimal_move_count
from .state import GOAL_PEG, GameState, Move, PegsView, validate_disk_count

logger = logging.getLogger(__name__)

Listener = Callable[["SessionSnapshot"], None]


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only projection of a session for rendering."""
    pegs: PegsView
    move_count: int
    elapsed_seconds: int
    selected_peg: Optional[int]
    is_solving: bool
    is_playing: bool
    disk_count: int
    optimal_moves: int
    is_solved: bool

    def as_dict(self) -> Dict[str, Any]:
        return {
            "pegs": [list(peg) for peg in self.pegs],
            "move_count": self.move_count,
            "elapsed_seconds": self.elapsed_seconds,
            "selected_peg": self.selected_peg,
            "is_solving": self.is_solving,
            "is_playing": self.is_playing,
            "disk_count": self.disk_count,
            "optimal_moves": self.optimal_moves,
            "is_solved": self.is_solved,
        }


class HanoiSession:
    """
    One player's puzzle session.

    Args:
        config: Session configuration (disk range, pacing, tick length)
        recorder: Optional frame recorder fed on every observable change
        disks: Initial disk count; defaults to ``config.default_disks``
    """

    def __init__(
        self,
        config: Optional[HanoiConfig] = None,
        recorder: Optional[SessionRecorder] = None,
        disks: Optional[int] = None,
    ):
        self.config = (config or HanoiConfig()).validate()
        self.recorder = recorder
        self.driver = SolverDriver(
            self._apply_solver_move,
            delay=self.config.move_delay,
            on_finish=self._on_solve_finished,
        )
        self._listeners: List[Listener] = []
        self.state = GameState(self.config.default_disks if disks is None else disks)
        self.selection = Selection.none()
        self.elapsed_seconds = 0
        self.is_playing = False
        self._emit("reset", note="created")

    # ----- read side -----

    @property
    def disk_count(self) -> int:
        return self.state.n

    @property
    def is_solving(self) -> bool:
        return self.driver.is_solving

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            pegs=self.state.snapshot(),
            move_count=self.state.moves,
            elapsed_seconds=self.elapsed_seconds,
            selected_peg=self.selection.peg,
            is_solving=self.is_solving,
            is_playing=self.is_playing,
            disk_count=self.state.n,
            optimal_moves=optimal_move_count(self.state.n),
            is_solved=self.state.is_goal(GOAL_PEG),
        )

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # ----- lifecycle -----

    def initialize(self, n: Optional[int] = None) -> SessionSnapshot:
        """Replace the board with ``n`` fresh disks on peg 0 and zero both counters."""
        n = self.config.default_disks if n is None else n
        # Build first so a rejected disk count leaves the session untouched.
        state = GameState(n)
        self.driver.cancel()
        self.state = state
        self.selection = Selection.none()
        self.elapsed_seconds = 0
        self.is_playing = False
        logger.debug("session initialized with %d disks", n)
        self._emit("reset")
        return self.snapshot()

    def reset(self) -> SessionSnapshot:
        return self.initialize(self.disk_count)

    def set_disk_count(self, n: int) -> SessionSnapshot:
        """Change the disk count, enforcing the configured range."""
        validate_disk_count(n)
        if not self.config.allows(n):
            raise InvalidConfigurationError(
                "disk count outside the allowed range",
                context={"n": n, "min": self.config.min_disks, "max": self.config.max_disks},
            )
        return self.initialize(n)

    # ----- manual play -----

    def select(self, peg: int) -> SessionSnapshot:
        """Click on ``peg``: pick it as the source, or drop the held disk onto it."""
        if self.is_solving:
            return self.snapshot()
        if not self.selection.is_selected:
            if GameState.in_range(peg) and self.state.pegs[peg]:
                self.selection = Selection.of(peg)
                self._emit("select", note=f"peg {peg}")
            return self.snapshot()
        source = self.selection.peg
        self.selection = Selection.none()
        self.is_playing = True
        return self.try_move(source, peg)

    def try_move(self, src: int, dst: int) -> SessionSnapshot:
        """Move the top disk of ``src`` onto ``dst`` if the rules allow it."""
        if self.is_solving:
            return self.snapshot()
        if self.state.try_move(src, dst):
            self.is_playing = not self.state.is_goal(GOAL_PEG)
            self._emit("move", move=(src, dst))
        else:
            self._emit("reject", move=(src, dst))
        return self.snapshot()

    def tick(self) -> bool:
        """Advance the clock by one second if a manual game is under way."""
        if not self.is_playing or self.is_solving:
            return False
        self.elapsed_seconds += 1
        self._emit("tick")
        return True

    # ----- auto-solve -----

    def start_auto_solve(self, n: Optional[int] = None) -> asyncio.Task[DriverState]:
        """Reset to ``n`` disks and schedule paced playback on the running loop."""
        # Raises RuntimeError outside a loop, before the board is touched.
        loop = asyncio.get_running_loop()
        self._begin_solve(n)
        return loop.create_task(self.driver.play())

    async def auto_solve(self, n: Optional[int] = None) -> DriverState:
        """Reset to ``n`` disks and play the canonical solution to the end."""
        self._begin_solve(n)
        return await self.driver.play()

    def cancel_solve(self) -> bool:
        return self.driver.cancel()

    def _begin_solve(self, n: Optional[int]) -> None:
        n = self.disk_count if n is None else n
        self.initialize(n)
        self.is_playing = True
        self.driver.start(n)
        self._emit("solve", note="started")

    def _apply_solver_move(self, move: Move) -> bool:
        accepted = self.state.try_move(move.source, move.target)
        self._emit("move" if accepted else "reject", note="auto", move=move)
        return accepted

    def _on_solve_finished(self, outcome: DriverState) -> None:
        if self.state.is_goal(GOAL_PEG):
            self.is_playing = False
        self._emit("solve", note=outcome.name.lower())

    def _emit(self, kind: str, note: str = "", move: Optional[tuple] = None) -> None:
        snap = self.snapshot()
        if self.recorder is not None:
            self.recorder.record(kind, snap, note=note, move=move)
        for listener in list(self._listeners):
            listener(snap)
