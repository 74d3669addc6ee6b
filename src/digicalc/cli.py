from __future__ import annotations

import argparse
import sys
import importlib
import inspect

FUNCTIONS = ("ln", "exp", "tan", "atan", "sqrt")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_eval(argv: list[str]) -> int:
    from digicalc.core.calculator import make_calculator
    from digicalc.diagnostics._args import add_spec_arguments, spec_from_args

    p = argparse.ArgumentParser(prog="digicalc eval", description="Evaluate one function digit-serially")
    p.add_argument("function", choices=FUNCTIONS)
    p.add_argument("x", type=float)
    p.add_argument("--debug", action="store_true", help="print digit counts and residuals")
    p.add_argument("--legacy", action="store_true", help="print 0 on error instead of failing")
    add_spec_arguments(p)
    args = p.parse_args(argv)

    try:
        calc = make_calculator(spec_from_args(args))
    except (KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    out = calc.evaluate(args.function, args.x, debug=args.debug)
    if args.legacy:
        print(repr(out.sentinel))
    elif out.ok:
        print(repr(out.value))
    else:
        print(f"Error ({out.error}): {out.message}", file=sys.stderr)

    if args.debug and out.debug:
        for k, v in out.debug.items():
            print(f"  {k:<10} = {v}")

    return 0 if (out.ok or args.legacy) else 2


def cmd_list(argv: list[str]) -> int:
    import digicalc

    p = argparse.ArgumentParser(prog="digicalc list", description="List the registered functions")
    p.parse_args(argv)

    for name in digicalc.list_functions():
        info = digicalc.function_info(name)
        print(f"{name:<5} domain: {info.domain:<18} range: {info.range:<14} {info.algorithm}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `digicalc ln 2.5 ...`
    if argv and argv[0] in FUNCTIONS:
        return cmd_eval(argv)

    p = argparse.ArgumentParser(prog="digicalc", description="Digit-serial calculator functions CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("eval", help="Evaluate ln/exp/tan/atan/sqrt at one point", add_help=False)
    sub.add_parser("list", help="List the registered functions")

    # diagnostics
    sub.add_parser("compare", help="Compare the classic test inputs against the math module", add_help=False)
    sub.add_parser("round-trip", help="Print exp(ln(x)) and atan(tan(x)) symmetry tables", add_help=False)
    sub.add_parser("sweep", help="Error sweep of one function against numpy (needs numpy)", add_help=False)

    # design tools
    sub.add_parser("tables", help="Print the constant tables", add_help=False)

    args, rest = p.parse_known_args(argv)

    if args.cmd == "eval":
        return cmd_eval(rest)

    if args.cmd == "list":
        return cmd_list(rest)

    if args.cmd == "compare":
        return _run_module_main("digicalc.diagnostics.compare_reference", rest)

    if args.cmd == "round-trip":
        return _run_module_main("digicalc.diagnostics.round_trip", rest)

    if args.cmd == "sweep":
        return _run_module_main("digicalc.diagnostics.error_sweep", rest)

    if args.cmd == "tables":
        return _run_module_main("digicalc.design.table_constants", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
