from __future__ import annotations

import os
import string
from dataclasses import dataclass
from typing import Mapping, Optional

COUNT_ENV = "WRITING_INSTRUMENTS_COUNT"
ROUNDS_ENV = "WRITING_INSTRUMENTS_ROUNDS"
REMAINDER_ENV = "WRITING_INSTRUMENTS_REMAINDER"
SEED_ENV = "WRITING_INSTRUMENTS_SEED"


@dataclass(slots=True)
class DemoConfig:
    """Knobs for a single demo run."""

    instrument_count: int = 10
    rounds: int = 10
    initial_remainder: float = 100.0
    min_text_length: int = 3
    max_text_length: int = 5
    alphabet: str = string.ascii_lowercase
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.instrument_count < 0:
            raise ValueError(f"instrument_count must be >= 0, got {self.instrument_count}")
        if self.rounds < 0:
            raise ValueError(f"rounds must be >= 0, got {self.rounds}")
        if self.min_text_length < 0:
            raise ValueError(f"min_text_length must be >= 0, got {self.min_text_length}")
        if self.min_text_length > self.max_text_length:
            raise ValueError(
                f"min_text_length ({self.min_text_length}) exceeds max_text_length ({self.max_text_length})"
            )
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DemoConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            instrument_count=_env_int(env, COUNT_ENV, defaults.instrument_count),
            rounds=_env_int(env, ROUNDS_ENV, defaults.rounds),
            initial_remainder=_env_float(env, REMAINDER_ENV, defaults.initial_remainder),
            seed=_env_int(env, SEED_ENV, None),
        )


def _env_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    value = env.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    value = env.get(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default
