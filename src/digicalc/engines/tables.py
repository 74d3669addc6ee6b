"""
digicalc.engines.tables
-----------------------
Constant tables driving the digit-serial engines.

Every table pairs a multiplier (or rotation step) with its logarithm (or
arctangent). Entries shrink geometrically, so each level corrects one more
decimal digit than the previous one:

    log   : 2,     1.1,     1.01,     ...     with ln(2), ln(1.1), ...
    exp   : 10, 2, 1.1,     1.01,     ...     with ln(10), ln(2), ...
    trig  : 1,     0.1,     0.01,     ...     with atan(1), atan(0.1), ...

Tables are frozen once built and shared by reference between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

LN10 = math.log(10.0)


def log_factor(i: int) -> float:
    """Multiplier of log level i: 2 for the first level, 1 + 10**-i after that."""
    if i < 0:
        raise ValueError("level must be non-negative")
    return 2.0 if i == 0 else 1.0 + 10.0 ** -i


@dataclass(frozen=True)
class LogTable:
    """Pseudo-multiplication table for ln: factors[j] and logs[j] = ln(factors[j])."""
    factors: Tuple[float, ...]
    logs: Tuple[float, ...]
    ln10: float = LN10

    def __post_init__(self) -> None:
        if not self.factors or len(self.factors) != len(self.logs):
            raise ValueError("factors and logs must be non-empty and of equal length")
        if any(f <= 1.0 for f in self.factors):
            raise ValueError("log factors must be greater than 1")

    def __len__(self) -> int:
        return len(self.factors)


@dataclass(frozen=True)
class ExpTable:
    """
    Pseudo-division table for exp.

    Index 0 holds the decade step (factor 10, log ln(10)); indices 1..K hold
    the same geometric family as LogTable.
    """
    factors: Tuple[float, ...]
    logs: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.factors) < 2 or len(self.factors) != len(self.logs):
            raise ValueError("exp table needs the decade entry plus at least one level")
        if self.factors[0] != 10.0:
            raise ValueError("exp table index 0 must be the decade step")

    @property
    def levels(self) -> int:
        """K: number of entries after the decade step."""
        return len(self.factors) - 1


@dataclass(frozen=True)
class TrigTable:
    """Rotation table: steps[i] = 10**-i, angles[i] = atan(steps[i])."""
    steps: Tuple[float, ...]
    angles: Tuple[float, ...]

    def __post_init__(self) -> None:
        if not self.steps or len(self.steps) != len(self.angles):
            raise ValueError("steps and angles must be non-empty and of equal length")

    def __len__(self) -> int:
        return len(self.steps)


def build_log_table(digits: int) -> LogTable:
    factors = tuple(log_factor(i) for i in range(digits))
    return LogTable(factors=factors, logs=tuple(math.log(f) for f in factors))


def build_exp_table(digits: int) -> ExpTable:
    factors = (10.0,) + tuple(log_factor(i) for i in range(digits))
    return ExpTable(factors=factors, logs=(LN10,) + tuple(math.log(f) for f in factors[1:]))


def build_trig_table(digits: int) -> TrigTable:
    steps = tuple(10.0 ** -i for i in range(digits))
    return TrigTable(steps=steps, angles=tuple(math.atan(t) for t in steps))
