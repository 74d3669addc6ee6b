from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .core.calculator import Calculator, make_calculator as _make_calculator
from .core.config import CalcSpec, DEFAULT_SPEC
from .core.types import FunctionInfo, Outcome
from .engines.reduction import range_reduce as _range_reduce

_calculator: Optional[Calculator] = None

def set_calculator(calc: Calculator) -> None:
    global _calculator
    _calculator = calc

def _calc() -> Calculator:
    if _calculator is None:
        raise RuntimeError("Default calculator not initialized")
    return _calculator

def get_calculator() -> Calculator:
    return _calc()

def make_calculator(spec: CalcSpec = DEFAULT_SPEC) -> Calculator:
    return _make_calculator(spec)

def list_functions() -> List[str]:
    return _calc().registry.list()

def function_info(name: str) -> FunctionInfo:
    return _calc().registry.info(name)

def ln(x: float, *, debug: bool = False) -> Outcome:
    return _calc().ln(x, debug=debug)

def exp(x: float, *, debug: bool = False) -> Outcome:
    return _calc().exp(x, debug=debug)

def tan(x: float, *, debug: bool = False) -> Outcome:
    return _calc().tan(x, debug=debug)

def atan(x: float, *, debug: bool = False) -> Outcome:
    return _calc().atan(x, debug=debug)

def sqrt(x: float, *, debug: bool = False) -> Outcome:
    return _calc().sqrt(x, debug=debug)

def range_reduce(x: float) -> float:
    return _range_reduce(x)

def evaluate(name: str, x: float, *, debug: bool = False) -> Outcome:
    return _calc().evaluate(name, x, debug=debug)

def legacy(name: str) -> Callable[[float], float]:
    return _calc().legacy(name)

def explain(name: str, x: float) -> Dict[str, Any]:
    return _calc().explain(name, x)
