"""
Tower of Hanoi puzzle core.

This package provides the game state, the canonical recursive solver, the
paced auto-solve driver, and the session object a UI layer talks to.
"""

from .state import GameState, Move
from .solver import CanonicalSolution, optimal_move_count, plan_hanoi, replay, solve
from .driver import DriverState, SolverDriver
from .interaction import Selection, SelectionPhase
from .session import HanoiSession, SessionSnapshot
from .clock import SessionClock
from .config import HanoiConfig, load_config, save_config
from .recorder import SessionRecorder
from .errors import HanoiError, InvalidConfigurationError, InvalidStateError

__all__ = [
    # Puzzle core
    "GameState", "Move",
    "CanonicalSolution", "optimal_move_count", "plan_hanoi", "replay", "solve",
    "DriverState", "SolverDriver",
    # Session layer
    "Selection", "SelectionPhase",
    "HanoiSession", "SessionSnapshot", "SessionClock",
    "HanoiConfig", "load_config", "save_config",
    "SessionRecorder",
    # Errors
    "HanoiError", "InvalidConfigurationError", "InvalidStateError",
]
