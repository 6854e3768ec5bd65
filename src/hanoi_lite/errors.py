"""
Error hierarchy for hanoi_lite.

Illegal moves are not errors: ``GameState.try_move`` rejects them by returning
False. Exceptions are reserved for requests the core refuses outright.

Usage:
    from hanoi_lite.errors import InvalidConfigurationError

    try:
        session.set_disk_count(12)
    except InvalidConfigurationError as e:
        print(e.message, e.context)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "HanoiError",
    "InvalidConfigurationError",
    "InvalidStateError",
]


class HanoiError(Exception):
    """Base exception for all hanoi_lite errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
        context: Extra values useful for debugging
    """
    code: str = "HANOI_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class InvalidConfigurationError(HanoiError, ValueError):
    """Rejected configuration request.

    Raised for a disk count below one, a disk count outside the configured
    range, or malformed configuration values.
    """
    code: str = "INVALID_CONFIGURATION"


class InvalidStateError(HanoiError):
    """Peg contents that no sequence of legal moves can produce."""
    code: str = "INVALID_STATE"
