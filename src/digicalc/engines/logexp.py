"""
digicalc.engines.logexp
-----------------------
Natural logarithm and exponential by pseudo-multiplication / pseudo-division.

ln pushes the mantissa towards 10 by multiplying with 2, 1.1, 1.01, ...
and sums the logs of the factors it used. exp runs the same table backwards:
it peels ln(10), ln(2), ln(1.1), ... off the argument and then rebuilds the
product from the least significant digit up.
"""

from __future__ import annotations

import math
from typing import List

from ..core.types import Outcome
from .digit_serial import accumulate, pseudo_divide, pseudo_multiply, pseudo_rebuild
from .tables import ExpTable, LogTable


def ln(n: float, table: LogTable, *, debug: bool = False) -> Outcome:
    """
    Natural logarithm, domain n > 0.

    ln(mant x 10**k) = ln(mant) + k ln(10), so only the mantissa goes through
    the table loop. Arguments below 1 are not scaled up; the x2 level takes
    them to [1, 10) on its own.
    """
    if not n > 0 or math.isinf(n):
        return Outcome.failure("domain", f"ln is undefined for {n!r}")

    a = n
    k = 0
    kln10 = 0.0
    # On a normalized BCD float this is just reading the exponent
    while a >= 10.0:
        a = a / 10
        kln10 += table.ln10
        k += 1

    digits: List[int] = []
    for factor in table.factors:
        a, d = pseudo_multiply(a, factor)
        digits.append(d)

    # ln(10/a) ~ (10 - a)/10 once a is within one least digit of 10
    result = accumulate((10.0 - a) / 10.0, digits, table.logs)
    result = table.ln10 - result
    result += kln10

    dbg = {"exponent": k, "digits": tuple(digits), "residual": a} if debug else None
    return Outcome.success(result, debug=dbg)


def exp(n: float, table: ExpTable, *, limit: float = 230.0, debug: bool = False) -> Outcome:
    """
    e**n for |n| <= limit.

    ln(9.99e99) is about 230, the largest argument a 100-decade calculator
    could take. Negative arguments are evaluated as 1/e**|n|.
    """
    if math.isnan(n):
        return Outcome.failure("domain", "exp of NaN")
    if abs(n) > limit:
        return Outcome.failure("out_of_range", f"|{n!r}| exceeds the exp limit {limit!r}")

    a = abs(n)
    is_neg = n < 0

    digits: List[int] = []
    for step in table.logs:
        a, d = pseudo_divide(a, step)
        digits.append(d)

    K = table.levels
    # Left align the remainder as 0.x for the least significant level
    result = a * 10.0 ** (K - 1)
    for j in range(K, 0, -1):
        result = pseudo_rebuild(result, table.factors[j], digits[j])
        result = result / 10

    result = result + 0.1
    result = result * 10
    for _ in range(digits[0]):
        result = result * 10

    dbg = {"digits": tuple(digits), "residual": a, "decades": digits[0]} if debug else None
    if not math.isfinite(result):
        return Outcome.failure("out_of_range", f"exp({n!r}) overflows a double", debug=dbg)

    if is_neg:
        result = 1.0 / result
    return Outcome.success(result, debug=dbg)
