from __future__ import annotations

import argparse
import math
import random
from typing import List

import digicalc


def parse_pairs(s: str) -> List[str]:
    # "exp-ln,atan-tan" -> ["exp-ln", "atan-tan"]
    return [x.strip() for x in s.split(",") if x.strip()]


def random_input(pair: str) -> float:
    if pair == "exp-ln":
        # log-uniform over the range exp can rebuild
        return 10.0 ** random.uniform(-99.0, 99.0)
    return random.uniform(-1.57, 1.57)


def roundtrip_test(pair: str, N: int, seed: int, *, rel_tol: float, max_failures: int) -> int:
    random.seed(seed)
    failures = 0
    fwd, inv = ("ln", "exp") if pair == "exp-ln" else ("tan", "atan")

    for _ in range(N):
        x0 = random_input(pair)
        first = digicalc.evaluate(fwd, x0)
        back = digicalc.evaluate(inv, first.value) if first.ok else first

        if back.ok and math.isclose(back.value, x0, rel_tol=rel_tol, abs_tol=rel_tol):
            continue

        failures += 1
        print("\nFAIL")
        print("pair:", pair)
        print("x0:", repr(x0))
        print(f"{fwd}:", first)
        print(f"{inv}:", back)
        print("explain:", digicalc.explain(fwd, x0))
        if failures >= max_failures:
            return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: exp(ln(x)) and atan(tan(x)).")
    p.add_argument("--pairs", type=str, default="exp-ln,atan-tan", help="Comma-separated pair list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per pair.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--rel-tol", type=float, default=1e-9, help="Accepted relative error.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per pair.")
    args = p.parse_args(argv)

    pairs = parse_pairs(args.pairs)
    unknown = [x for x in pairs if x not in ("exp-ln", "atan-tan")]
    if unknown:
        raise SystemExit(f"Unknown pair(s): {unknown}")

    total_fail = 0
    for pair in pairs:
        print(f"Testing {pair} ...")
        f = roundtrip_test(pair, N=args.N, seed=args.seed, rel_tol=args.rel_tol, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
