from __future__ import annotations

import argparse

from digicalc.core.config import CalcSpec, PRESETS


def add_spec_arguments(p: argparse.ArgumentParser) -> None:
    """Precision options shared by the CLI and the diagnostics scripts."""
    g = p.add_argument_group("precision")
    g.add_argument("--preset", choices=sorted(PRESETS), default="standard")
    g.add_argument("--log-digits", type=int, default=None, help="ln table length M")
    g.add_argument("--exp-digits", type=int, default=None, help="exp table length K (K+1 entries)")
    g.add_argument("--trig-digits", type=int, default=None, help="tan/atan table length K")
    g.add_argument("--exp-limit", type=float, default=None, help="largest |x| accepted by exp")
    g.add_argument("--sqrt-tolerance", type=float, default=None)
    g.add_argument("--sqrt-max-iterations", type=int, default=None)


def spec_from_args(args: argparse.Namespace) -> CalcSpec:
    spec = CalcSpec.like(args.preset)
    overrides = {
        k: getattr(args, k)
        for k in ("log_digits", "exp_digits", "trig_digits", "exp_limit", "sqrt_tolerance", "sqrt_max_iterations")
        if getattr(args, k, None) is not None
    }
    return spec.tweak(**overrides) if overrides else spec
