"""Session configuration and YAML loading."""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import InvalidConfigurationError


@dataclass
class HanoiConfig:
    """Configuration for a Hanoi session."""
    min_disks: int = 3          # Smallest disk count offered to the player
    max_disks: int = 8          # Largest disk count offered to the player
    default_disks: int = 3      # Disk count of a fresh session
    move_delay: float = 0.5     # Seconds between auto-solve moves
    tick_interval: float = 1.0  # Seconds per timer tick

    def validate(self) -> "HanoiConfig":
        for name in ("min_disks", "max_disks", "default_disks"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigurationError(
                    f"{name} must be an integer", context={name: value}
                )
        if self.min_disks < 1:
            raise InvalidConfigurationError(
                "min_disks must be at least 1", context={"min_disks": self.min_disks}
            )
        if not self.min_disks <= self.default_disks <= self.max_disks:
            raise InvalidConfigurationError(
                "default_disks must lie within [min_disks, max_disks]",
                context={
                    "min_disks": self.min_disks,
                    "default_disks": self.default_disks,
                    "max_disks": self.max_disks,
                },
            )
        for name in ("move_delay", "tick_interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfigurationError(
                    f"{name} must be a number of seconds", context={name: value}
                )
        if self.move_delay < 0:
            raise InvalidConfigurationError(
                "move_delay must be non-negative", context={"move_delay": self.move_delay}
            )
        if self.tick_interval <= 0:
            raise InvalidConfigurationError(
                "tick_interval must be positive", context={"tick_interval": self.tick_interval}
            )
        return self

    def allows(self, n: int) -> bool:
        """True if ``n`` is within the configured disk range."""
        return self.min_disks <= n <= self.max_disks

    def as_dict(self) -> Dict[str, Any]:
        return {
            "min_disks": self.min_disks,
            "max_disks": self.max_disks,
            "default_disks": self.default_disks,
            "move_delay": self.move_delay,
            "tick_interval": self.tick_interval,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "HanoiConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise InvalidConfigurationError(
                "unknown configuration keys", context={"keys": unknown}
            )
        return cls(**d).validate()


def load_config(path: Union[str, Path]) -> HanoiConfig:
    """Load a configuration from a YAML file; missing keys take defaults."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            "configuration file must contain a mapping", context={"path": str(path)}
        )
    return HanoiConfig.from_dict(data)


def save_config(config: HanoiConfig, path: Union[str, Path]) -> None:
    """Save a configuration to a YAML file."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config.as_dict(), f, default_flow_style=False, sort_keys=False)
