"""
digicalc.engines.digit_serial
-----------------------------
The per-level steps shared by the log/exp and tan/atan engines.

Each primitive handles exactly one table level: it repeats a single cheap
operation (multiply by a table factor, subtract a table log, rotate by a
table angle) and counts how many times it succeeded. That count is the
decimal "digit" contributed by the level. Engines chain the levels from the
most significant table entry to the least significant one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class DigitTrace:
    """Digit counts of one engine call, plus whatever is left in the working register."""
    digits: Tuple[int, ...]
    residual: float


def pseudo_multiply(a: float, factor: float, limit: float = 10.0) -> Tuple[float, int]:
    """
    Multiply a by factor for as long as the product stays below limit.

    Returns (a, count). On BCD hardware the multiplication is a shift and add,
    since every factor is 1 + 10**-j (or 2).
    """
    if not a > 0.0:
        raise ValueError("pseudo_multiply needs a positive register")
    if not factor > 1.0:
        raise ValueError("pseudo_multiply needs a factor greater than 1")
    count = 0
    while True:
        p = a * factor
        if p >= limit:
            break
        a = p
        count += 1
    return a, count


def pseudo_divide(a: float, step: float) -> Tuple[float, int]:
    """Subtract step from a while the remainder stays non-negative. Returns (a, count)."""
    if not step > 0.0:
        raise ValueError("pseudo_divide needs a positive step")
    count = 0
    while True:
        s = a - step
        if s < 0.0:
            break
        a = s
        count += 1
    return a, count


def pseudo_rebuild(r: float, factor: float, count: int) -> float:
    """Apply r <- r * factor + 1 count times (one exp reconstruction level)."""
    for _ in range(count):
        r = r * factor + 1.0
    return r


def rotate(x: float, y: float, step: float, count: int) -> Tuple[float, float]:
    """
    Rotate (x, y) count times by atan(step), unnormalized:
        (x, y) <- (x - y*step, y + x*step)
    The growth factor sqrt(1 + step**2) cancels in y/x.
    """
    for _ in range(count):
        xnew = x * step
        ynew = y * step
        x = x - ynew
        y = y + xnew
    return x, y


def vector(x: float, y: float, step: float) -> Tuple[float, float, int]:
    """
    Rotate (x, y) backwards by atan(step) while y stays non-negative.
    Returns (x, y, count).
    """
    count = 0
    while True:
        xnew = x * step
        ynew = y * step
        if y - xnew < 0.0:
            break
        x = x + ynew
        y = y - xnew
        count += 1
    return x, y, count


def accumulate(start: float, digits: Sequence[int], values: Sequence[float]) -> float:
    """start + sum(digits[j] * values[j]), added from the least significant level up."""
    result = start
    for j in range(len(digits) - 1, -1, -1):
        result = result + digits[j] * values[j]
    return result
