from __future__ import annotations

import math
from typing import Optional

from ..core.types import Outcome


def sqrt(n: float, *, tolerance: float = 1e-15, max_iterations: int = 2000, debug: bool = False) -> Outcome:
    """
    Babylonian square root with an initial guess of n/10 (a one-digit shift on BCD hardware).

    Stops once two successive iterates differ by at most `tolerance` (scaled by
    the iterate once it drops below 1), or when an iterate repeats the one from two steps back (rounding can leave the
    iteration flipping between two neighbouring floats).
    """
    if math.isnan(n) or n < 0:
        return Outcome.failure("domain", f"sqrt is undefined for {n!r}")
    if math.isinf(n):
        return Outcome.failure("out_of_range", "sqrt of infinity")
    if n == 0:
        return Outcome.success(0.0, debug={"iterations": 0} if debug else None)

    result = n / 10
    if result == 0.0:
        # n/10 underflowed (subnormal input)
        result = n

    before: Optional[float] = None
    for i in range(1, max_iterations + 1):
        last = result
        result = (last + n / last) / 2
        if abs(last - result) <= tolerance * max(1.0, result) or result == before:
            return Outcome.success(result, debug={"iterations": i} if debug else None)
        before = last

    return Outcome.failure(
        "no_convergence",
        f"sqrt({n!r}) did not settle within {max_iterations} iterations",
        debug={"iterations": max_iterations, "last": result} if debug else None,
    )
