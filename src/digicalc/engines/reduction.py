from __future__ import annotations

import math

TWO_PI = 2.0 * math.pi


def range_reduce(n: float) -> float:
    """
    Reduce a non-negative angle to [0, 2*pi) by subtraction only.

    Phase 1 strips multiples of 2*pi*10**e for decreasing decades e, so large
    angles need at most nine subtractions per decade. Phase 2 subtracts bare
    2*pi until the value is no longer positive, then adds one 2*pi back.
    """
    if not math.isfinite(n):
        raise ValueError(f"cannot reduce non-finite angle {n!r}")
    if n < 0:
        raise ValueError("range_reduce expects a non-negative angle; strip the sign first")
    if n == 0:
        return 0.0

    e = int(math.log10(n))
    while e > 0:
        step = TWO_PI * 10.0 ** e
        if n >= step:
            n = n - step
        else:
            e -= 1

    while n > 0:
        n = n - TWO_PI
    n = n + TWO_PI

    # An exact multiple of 2*pi lands on the upper bound
    if n >= TWO_PI:
        n = n - TWO_PI
    return n
