"""
Display Configuration

Construction-time configuration for a splitflap display.
Every engine receives its own DisplayConfig; nothing is read from module globals.
"""

import os
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .charset import CharacterSet, NUMERIC, get_preset
from .text import PadDirection


class ConfigError(ValueError):
    """Raised when a display configuration value is out of range"""


@dataclass
class DisplayConfig:
    """
    Configuration for one splitflap display.

    character_set accepts a CharacterSet, a preset name or any iterable of symbols.
    pad_direction accepts a PadDirection or 'left'/'right'.
    """

    character_set: Union[CharacterSet, str, Iterable[str]] = field(default=NUMERIC)
    min_width: int = 5                  # cells; 0 disables padding
    pad_direction: Union[PadDirection, str] = PadDirection.LEFT
    step_interval_ms: int = 200         # delay between ticks
    initial_value: str = ""

    def __post_init__(self):
        # A string names a preset; explicit alphabets are given as a list of symbols
        if isinstance(self.character_set, str):
            self.character_set = get_preset(self.character_set)
        elif not isinstance(self.character_set, CharacterSet):
            self.character_set = CharacterSet(self.character_set)

        self.pad_direction = PadDirection.parse(self.pad_direction)

        if self.min_width is None:
            self.min_width = 0
        if self.min_width < 0:
            raise ConfigError(f"min_width must be non-negative, got {self.min_width}")
        if self.step_interval_ms <= 0:
            raise ConfigError(f"step_interval_ms must be positive, got {self.step_interval_ms}")
        if self.initial_value is None:
            self.initial_value = ""

    @property
    def step_interval(self) -> float:
        """Tick interval in seconds"""
        return self.step_interval_ms / 1000.0

    @classmethod
    def from_env(cls, prefix: str = "SPLITFLAP_") -> "DisplayConfig":
        """Build a config from environment variables, using defaults for anything unset"""
        def env(name: str) -> Optional[str]:
            return os.getenv(f"{prefix}{name}")

        kwargs = {}
        if env("CHARSET"):
            kwargs["character_set"] = env("CHARSET")
        if env("MIN_WIDTH"):
            kwargs["min_width"] = _parse_int(env("MIN_WIDTH"), f"{prefix}MIN_WIDTH")
        if env("PAD_DIRECTION"):
            kwargs["pad_direction"] = env("PAD_DIRECTION")
        if env("STEP_MS"):
            kwargs["step_interval_ms"] = _parse_int(env("STEP_MS"), f"{prefix}STEP_MS")
        if env("INITIAL_VALUE") is not None:
            kwargs["initial_value"] = env("INITIAL_VALUE")
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {
            "character_set": "".join(self.character_set),
            "min_width": self.min_width,
            "pad_direction": self.pad_direction.value,
            "step_interval_ms": self.step_interval_ms,
            "initial_value": self.initial_value,
        }


def _parse_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
