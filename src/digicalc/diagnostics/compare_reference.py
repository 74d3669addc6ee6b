#!/usr/bin/env python3
"""
Feed the classic literal inputs to each engine and print the difference to
the math module, one table per function.
"""
from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from digicalc.core.calculator import Calculator, make_calculator
from digicalc.diagnostics._args import add_spec_arguments, spec_from_args

PI = math.pi

TEST_INPUTS: Dict[str, Tuple[float, ...]] = {
    "ln": (0.00000001, 0.001, 1.0, 1.1, 4.4, 9.99, 10, 11, 12.345, 15.873, 25.2332, 1.234e34),
    "exp": (0, -1, 0.00000001, 0.001, 1.0, 1.1, 4.4, 9.99, 10, 11, 12.345, 15.873, 25.2332, 87.2332,
            1.234e-13, 9.999e-15, 230),
    "tan": (0, 0.984736, 0.1, 0.5, 1.5, PI / 2, -1.5, 1.234e5),
    "atan": (0, 1, 20, -20, -12345e23, PI, PI / 2),
    "sqrt": (0, 54757, 125348, 0.5, 0.00035, 0.02, 1, 1.234e78),
}

REFERENCE: Dict[str, Callable[[float], float]] = {
    "ln": math.log,
    "exp": math.exp,
    "tan": math.tan,
    "atan": math.atan,
    "sqrt": math.sqrt,
}


@dataclass(frozen=True)
class ComparisonRow:
    x: float
    result: Optional[float]
    reference: float
    error_kind: Optional[str]

    @property
    def error(self) -> Optional[float]:
        if self.result is None:
            return None
        return self.reference - self.result


def compare(calc: Calculator, name: str, inputs: Sequence[float]) -> List[ComparisonRow]:
    ref = REFERENCE[name]
    rows = []
    for x in inputs:
        out = calc.evaluate(name, x)
        rows.append(ComparisonRow(x=x, result=out.value, reference=ref(x), error_kind=out.error))
    return rows


def format_row(row: ComparisonRow) -> str:
    if row.result is None:
        return f"x={row.x:.15g} result=<{row.error_kind}>  verif={row.reference:.15g}"
    return f"x={row.x:.15g} result={row.result:.15g}  verif={row.reference:.15g} error={row.error:.15g}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare digit-serial results against the math module.")
    p.add_argument("--function", action="append", choices=sorted(TEST_INPUTS), default=[],
                   help="function to tabulate (repeatable, default: all)")
    add_spec_arguments(p)
    args = p.parse_args(argv)

    calc = make_calculator(spec_from_args(args))
    for name in args.function or list(TEST_INPUTS):
        print(f"\n----- {name.upper()}(x) -----")
        for row in compare(calc, name, TEST_INPUTS[name]):
            print(format_row(row))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
