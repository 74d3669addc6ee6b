from __future__ import annotations

import argparse
import math
from typing import List, Optional, Sequence, Tuple

from digicalc.core.calculator import Calculator, make_calculator
from digicalc.diagnostics._args import add_spec_arguments, spec_from_args
from digicalc.diagnostics.compare_reference import TEST_INPUTS

# forward, inverse, reference of inverse(forward(x))
PAIRS = {
    "exp-ln": ("ln", "exp", lambda x: math.exp(math.log(x))),
    "atan-tan": ("tan", "atan", lambda x: math.atan(math.tan(x))),
}


def round_trip(calc: Calculator, pair: str, inputs: Sequence[float]) -> List[Tuple[float, Optional[float], float]]:
    """Rows of (x, inverse(forward(x)) or None on error, reference)."""
    fwd, inv, ref = PAIRS[pair]
    rows = []
    for x in inputs:
        first = calc.evaluate(fwd, x)
        second = calc.evaluate(inv, first.value) if first.ok else first
        rows.append((x, second.value, ref(x)))
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print exp(ln(x)) and atan(tan(x)) symmetry tables.")
    p.add_argument("--pair", choices=sorted(PAIRS), action="append", default=[])
    add_spec_arguments(p)
    args = p.parse_args(argv)

    calc = make_calculator(spec_from_args(args))
    failures = 0
    for pair in args.pair or sorted(PAIRS):
        fwd = PAIRS[pair][0]
        print(f"\n----- {pair.upper()} SYMMETRY -----")
        for x, result, verif in round_trip(calc, pair, TEST_INPUTS[fwd]):
            if result is None:
                failures += 1
                print(f"x={x:.15g} result=<error>  verif={verif:.15g}")
            else:
                print(f"x={x:.15g} result={result:.15g}  verif={verif:.15g} error={verif - result:.15g}")

    if failures:
        print(f"\n{failures} input(s) hit an error outcome")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
