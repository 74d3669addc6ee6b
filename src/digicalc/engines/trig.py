"""
digicalc.engines.trig
---------------------
Tangent and arctangent by decimal rotations.

tan splits the reduced angle into counts of atan(1), atan(0.1), ... and then
rotates the vector (1, residual) by exactly those angles; the ratio y/x is
the tangent. atan does the inverse: it rotates (1, x) back towards the axis
one table angle at a time and adds up the angles it used.
"""

from __future__ import annotations

import math
from typing import List

from ..core.types import Outcome
from .digit_serial import accumulate, pseudo_divide, rotate, vector
from .reduction import range_reduce
from .tables import TrigTable

# |tan| beyond this is treated as a pole
POLE_RATIO = 1e15


def tan(n: float, table: TrigTable, *, debug: bool = False) -> Outcome:
    """Tangent, undefined at odd multiples of pi/2."""
    if not math.isfinite(n):
        return Outcome.failure("domain", f"tan is undefined for {n!r}")

    is_neg = n < 0
    y = range_reduce(abs(n))
    reduced = y

    digits: List[int] = []
    for angle in table.angles:
        y, d = pseudo_divide(y, angle)
        digits.append(d)

    # (1, y) already sits at angle atan(y) ~ y for the leftover
    x = 1.0
    for i in range(len(table) - 1, -1, -1):
        x, y = rotate(x, y, table.steps[i], digits[i])

    dbg = {"reduced": reduced, "digits": tuple(digits), "x": x, "y": y} if debug else None
    if x == 0.0 or abs(y) > abs(x) * POLE_RATIO:
        return Outcome.failure("undefined", f"tan has a pole at {n!r}", debug=dbg)

    result = y / x
    if is_neg:
        result = -result
    return Outcome.success(result, debug=dbg)


def atan(n: float, table: TrigTable, *, debug: bool = False) -> Outcome:
    """Arctangent, range [-pi/2, pi/2]."""
    if math.isnan(n):
        return Outcome.failure("domain", "atan of NaN")

    is_neg = n < 0
    if math.isinf(n):
        # The rotations would produce inf - inf; two atan(1) steps is where finite inputs saturate
        result = 2 * table.angles[0]
        return Outcome.success(-result if is_neg else result)

    x = 1.0
    y = abs(n)

    digits: List[int] = []
    for step in table.steps:
        x, y, d = vector(x, y, step)
        digits.append(d)

    remainder = y / x
    result = accumulate(remainder, digits, table.angles)
    # Rounding in the sum can overshoot pi/2 by an ulp for huge arguments
    result = min(result, 2 * table.angles[0])

    if is_neg:
        result = -result

    dbg = {"digits": tuple(digits), "remainder": remainder} if debug else None
    return Outcome.success(result, debug=dbg)
