#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional, Tuple

from digicalc.core.calculator import Calculator, make_calculator
from digicalc.diagnostics._args import add_spec_arguments, spec_from_args


def _need_numpy():
    try:
        import numpy as np  # noqa: F401
        return np
    except ImportError as e:
        raise RuntimeError('This script needs numpy. Install: pip install "digicalc[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt  # noqa: F401
        return plt
    except ImportError as e:
        raise RuntimeError('This script needs matplotlib. Install: pip install "digicalc[diagnostics]"') from e


# default (lo, hi, log-spaced?) per function
DEFAULT_RANGES = {
    "ln": (1e-8, 1e34, True),
    "exp": (-230.0, 230.0, False),
    "tan": (-1.5, 1.5, False),
    "atan": (-1e6, 1e6, False),
    "sqrt": (1e-6, 1e78, True),
}


@dataclass(frozen=True)
class SweepSummary:
    name: str
    n_points: int
    n_errors: int
    max_abs: float
    max_rel: float
    rms_rel: float
    worst_x: float


def sample_points(lo: float, hi: float, n: int, *, log: bool):
    np = _need_numpy()
    if log:
        if lo <= 0 or hi <= 0:
            raise ValueError("log-spaced sweep needs a positive range")
        return np.logspace(np.log10(lo), np.log10(hi), n)
    return np.linspace(lo, hi, n)


def reference_fn(name: str):
    np = _need_numpy()
    return {"ln": np.log, "exp": np.exp, "tan": np.tan, "atan": np.arctan, "sqrt": np.sqrt}[name]


def sweep(calc: Calculator, name: str, xs) -> Tuple[SweepSummary, object, object]:
    """
    Evaluate name over xs. Returns (summary, abs_err, rel_err); error outcomes
    are counted and carry NaN in the error arrays.
    """
    np = _need_numpy()
    xs = np.asarray(xs, dtype=float)
    outs = [calc.evaluate(name, float(x)) for x in xs]
    got = np.array([o.value if o.ok else np.nan for o in outs], dtype=float)
    ref = reference_fn(name)(xs)

    abs_err = np.abs(got - ref)
    with np.errstate(divide="ignore", invalid="ignore"):
        rel_err = np.where(ref != 0, abs_err / np.abs(ref), abs_err)

    ok = ~np.isnan(got)
    if not np.any(ok):
        raise RuntimeError(f"every point of the {name} sweep hit an error outcome")
    worst = int(np.nanargmax(rel_err))
    summary = SweepSummary(
        name=name,
        n_points=int(xs.size),
        n_errors=int(np.count_nonzero(~ok)),
        max_abs=float(np.nanmax(abs_err)),
        max_rel=float(np.nanmax(rel_err)),
        rms_rel=float(np.sqrt(np.nanmean(rel_err ** 2))),
        worst_x=float(xs[worst]),
    )
    return summary, abs_err, rel_err


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Sweep one function over a range and summarize its error against numpy.")
    p.add_argument("function", choices=sorted(DEFAULT_RANGES))
    p.add_argument("--lo", type=float, default=None)
    p.add_argument("--hi", type=float, default=None)
    p.add_argument("--points", type=int, default=2000)
    p.add_argument("--log", dest="log", action="store_true", default=None, help="log-spaced sample points")
    p.add_argument("--linear", dest="log", action="store_false", help="evenly spaced sample points")
    p.add_argument("--plot", action="store_true", help="plot relative error (needs matplotlib)")
    p.add_argument("--out-png", type=str, default="", help="save the plot instead of showing it")
    add_spec_arguments(p)
    args = p.parse_args(argv)

    lo, hi, log = DEFAULT_RANGES[args.function]
    lo = lo if args.lo is None else args.lo
    hi = hi if args.hi is None else args.hi
    log = log if args.log is None else args.log

    calc = make_calculator(spec_from_args(args))
    xs = sample_points(lo, hi, args.points, log=log)
    s, _, rel_err = sweep(calc, args.function, xs)

    print(f"{s.name}: {s.n_points} points in [{lo:g}, {hi:g}] ({'log' if log else 'linear'})")
    print(f"  error outcomes : {s.n_errors}")
    print(f"  max abs error  : {s.max_abs:.3e}")
    print(f"  max rel error  : {s.max_rel:.3e}  at x={s.worst_x:.15g}")
    print(f"  rms rel error  : {s.rms_rel:.3e}")

    if args.plot:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(9, 4))
        ax.plot(xs, rel_err, lw=0.8)
        if log:
            ax.set_xscale("log")
        ax.set_yscale("log")
        ax.set_xlabel("x")
        ax.set_ylabel("relative error")
        ax.set_title(f"{s.name}: digit-serial vs numpy ({calc.spec})")
        fig.tight_layout()
        if args.out_png:
            fig.savefig(args.out_png, dpi=150)
            print(f"Saved plot to {args.out_png}")
        else:
            plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
