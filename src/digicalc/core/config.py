from __future__ import annotations
import math
import sys
from dataclasses import dataclass, replace
from typing import Dict

# 1 + 10**-12 is still comfortably distinct from 1.0 in double precision;
# beyond that the table multipliers collapse and the digit loops stall.
MAX_TABLE_DIGITS = 12

# ln of the largest double; exp overflows past it
MAX_EXP_LIMIT = math.log(sys.float_info.max)

@dataclass(frozen=True)
class CalcSpec:
    """Pure data payload describing table sizes and iteration limits of a calculator."""
    log_digits: int = 7
    exp_digits: int = 7
    trig_digits: int = 7
    exp_limit: float = 230.0
    sqrt_tolerance: float = 1e-15
    sqrt_max_iterations: int = 2000

    def __post_init__(self) -> None:
        for field in ("log_digits", "exp_digits", "trig_digits"):
            n = getattr(self, field)
            if not 1 <= n <= MAX_TABLE_DIGITS:
                raise ValueError(f"{field} must be between 1 and {MAX_TABLE_DIGITS}, got {n}")
        if not 0 < self.exp_limit <= MAX_EXP_LIMIT:
            raise ValueError(f"exp_limit must be in (0, {MAX_EXP_LIMIT:.4f}], got {self.exp_limit}")
        if not self.sqrt_tolerance >= 0:
            raise ValueError("sqrt_tolerance must be non-negative")
        if self.sqrt_max_iterations <= 0:
            raise ValueError("sqrt_max_iterations must be positive")

    @staticmethod
    def like(name: str) -> "CalcSpec":
        if name not in PRESETS:
            raise KeyError(f"Unknown preset '{name}'. Available: {sorted(PRESETS)}")
        return PRESETS[name]

    def tweak(self, **kwargs) -> "CalcSpec":
        return replace(self, **kwargs)


PRESETS: Dict[str, CalcSpec] = {
    "standard": CalcSpec(),
    # Six log digits reproduce the worked examples of the HP-35 write-ups.
    "laporte": CalcSpec(log_digits=6),
    "coarse": CalcSpec(log_digits=4, exp_digits=4, trig_digits=4),
    "fine": CalcSpec(log_digits=10, exp_digits=10, trig_digits=10),
}

DEFAULT_SPEC = PRESETS["standard"]
