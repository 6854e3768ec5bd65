"""Two-phase click interaction: pick a source peg, then a destination."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class SelectionPhase(Enum):
    NO_SELECTION = auto()
    SELECTED = auto()


@dataclass(frozen=True)
class Selection:
    """Tagged selection state; ``peg`` is set only in the SELECTED phase."""
    phase: SelectionPhase = SelectionPhase.NO_SELECTION
    peg: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.phase is SelectionPhase.SELECTED) != (self.peg is not None):
            raise ValueError("a peg is required exactly when a selection is active")

    @classmethod
    def none(cls) -> "Selection":
        return cls()

    @classmethod
    def of(cls, peg: int) -> "Selection":
        return cls(SelectionPhase.SELECTED, peg)

    @property
    def is_selected(self) -> bool:
        return self.phase is SelectionPhase.SELECTED
