# design/table_constants.py

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

from digicalc.core.config import CalcSpec, MAX_TABLE_DIGITS, PRESETS
from digicalc.engines.tables import build_exp_table, build_log_table, build_trig_table


def table_rows(kind: str, digits: int) -> List[Tuple[int, float, float]]:
    """Rows (index, multiplier or step, log or angle) of one table."""
    if kind == "log":
        t = build_log_table(digits)
        return list(zip(range(len(t)), t.factors, t.logs))
    if kind == "exp":
        t = build_exp_table(digits)
        return list(zip(range(len(t.factors)), t.factors, t.logs))
    if kind == "trig":
        t = build_trig_table(digits)
        return list(zip(range(len(t)), t.steps, t.angles))
    raise ValueError("kind must be one of: log, exp, trig")


def format_table(kind: str, digits: int, *, show_hex: bool = False) -> str:
    head = {"log": ("factor", "ln(factor)"), "exp": ("factor", "ln(factor)"), "trig": ("step", "atan(step)")}[kind]
    lines = [f"# {kind} table, {digits} digit levels", f"{'j':>3}  {head[0]:<22} {head[1]:<24}"]
    for j, m, v in table_rows(kind, digits):
        line = f"{j:>3}  {m!r:<22} {v!r:<24}"
        if show_hex:
            line += f" {v.hex()}"
        lines.append(line)
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the constant tables used by the digit-serial engines.")
    p.add_argument("--kind", choices=["log", "exp", "trig", "all"], default="all")
    p.add_argument("--preset", choices=sorted(PRESETS), default="standard", help="Take digit counts from a preset.")
    p.add_argument("--digits", type=int, default=None, help="Override the digit count for every table.")
    p.add_argument("--hex", action="store_true", help="Also print float.hex() of the log/angle column.")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.digits is not None and not 1 <= args.digits <= MAX_TABLE_DIGITS:
        print(f"Error: --digits must be between 1 and {MAX_TABLE_DIGITS}.", file=sys.stderr)
        return 1

    spec = CalcSpec.like(args.preset)
    sizes = {"log": spec.log_digits, "exp": spec.exp_digits, "trig": spec.trig_digits}
    kinds = ["log", "exp", "trig"] if args.kind == "all" else [args.kind]

    blocks = [format_table(k, args.digits or sizes[k], show_hex=args.hex) for k in kinds]
    full_output = "\n\n".join(blocks)
    print(full_output)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(full_output + "\n")
        print(f"\nSaved tables to {args.out_txt}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
