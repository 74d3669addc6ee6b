from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Protocol, Tuple

from .config import CalcSpec, DEFAULT_SPEC
from .types import FunctionInfo, Outcome
from ..engines import logexp, sqrt as sqrt_engine, trig
from ..engines.reduction import range_reduce
from ..engines.tables import (
    ExpTable,
    LogTable,
    TrigTable,
    build_exp_table,
    build_log_table,
    build_trig_table,
)

class EngineFn(Protocol):
    def __call__(self, x: float, *, debug: bool = False) -> Outcome: ...

@dataclass
class FunctionRegistry:
    _functions: Dict[str, Tuple[EngineFn, FunctionInfo]]

    def get(self, name: str) -> EngineFn:
        if name not in self._functions:
            raise KeyError(f"Unknown function '{name}'. Available: {sorted(self._functions)}")
        return self._functions[name][0]

    def info(self, name: str) -> FunctionInfo:
        self.get(name)
        return self._functions[name][1]

    def list(self) -> List[str]:
        return sorted(self._functions.keys())

    def register(self, name: str, fn: EngineFn, info: FunctionInfo, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._functions):
            raise KeyError(f"Function '{name}' already exists. Use overwrite=True to replace.")
        self._functions[name] = (fn, info)


STANDARD_INFO = {
    "ln": FunctionInfo("ln", "x > 0", "all reals", "pseudo-multiplication by 2, 1.1, 1.01, ..."),
    "exp": FunctionInfo("exp", "|x| <= exp_limit", "x > 0", "pseudo-division by ln(10), ln(2), ln(1.1), ..."),
    "tan": FunctionInfo("tan", "x != pi/2 + k*pi", "all reals", "range reduction, then decimal rotations"),
    "atan": FunctionInfo("atan", "all reals", "[-pi/2, pi/2]", "decimal vectoring by atan(1), atan(0.1), ..."),
    "sqrt": FunctionInfo("sqrt", "x >= 0", "x >= 0", "Babylonian averaging from n/10"),
}


@dataclass(frozen=True)
class Calculator:
    """
    A set of digit-serial engines bound to one CalcSpec.

    Tables are built once in make_calculator() and only read afterwards, so a
    Calculator can be shared freely between threads.
    """
    spec: CalcSpec
    log_table: LogTable
    exp_table: ExpTable
    trig_table: TrigTable
    registry: FunctionRegistry = field(compare=False, repr=False)

    def ln(self, x: float, *, debug: bool = False) -> Outcome:
        return logexp.ln(x, self.log_table, debug=debug)

    def exp(self, x: float, *, debug: bool = False) -> Outcome:
        return logexp.exp(x, self.exp_table, limit=self.spec.exp_limit, debug=debug)

    def tan(self, x: float, *, debug: bool = False) -> Outcome:
        return trig.tan(x, self.trig_table, debug=debug)

    def atan(self, x: float, *, debug: bool = False) -> Outcome:
        return trig.atan(x, self.trig_table, debug=debug)

    def sqrt(self, x: float, *, debug: bool = False) -> Outcome:
        return sqrt_engine.sqrt(
            x,
            tolerance=self.spec.sqrt_tolerance,
            max_iterations=self.spec.sqrt_max_iterations,
            debug=debug,
        )

    def range_reduce(self, x: float) -> float:
        return range_reduce(x)

    def evaluate(self, name: str, x: float, *, debug: bool = False) -> Outcome:
        return self.registry.get(name)(x, debug=debug)

    def legacy(self, name: str) -> Callable[[float], float]:
        """Plain float -> float callable that returns 0.0 on error."""
        fn = self.registry.get(name)

        def call(x: float) -> float:
            return fn(x).sentinel

        call.__name__ = name
        return call

    def explain(self, name: str, x: float) -> Dict[str, Any]:
        out = self.evaluate(name, x, debug=True)
        return {
            "function": self.registry.info(name),
            "x": x,
            "value": out.value,
            "error": out.error,
            "message": out.message,
            "trace": out.debug or {},
        }


def make_calculator(spec: CalcSpec = DEFAULT_SPEC) -> Calculator:
    """Build the tables for spec and wire the standard functions into a fresh registry."""
    registry = FunctionRegistry({})
    calc = Calculator(
        spec=spec,
        log_table=build_log_table(spec.log_digits),
        exp_table=build_exp_table(spec.exp_digits),
        trig_table=build_trig_table(spec.trig_digits),
        registry=registry,
    )
    for name in ("ln", "exp", "tan", "atan", "sqrt"):
        registry.register(name, getattr(calc, name), STANDARD_INFO[name])
    return calc
