"""digicalc public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default calculator on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    ln,
    exp,
    tan,
    atan,
    sqrt,
    range_reduce,
    evaluate,
    explain,
    legacy,
    list_functions,
    function_info,
    make_calculator,
    get_calculator,
    set_calculator,
)
from .core.config import CalcSpec, PRESETS
from .core.errors import (
    DigicalcError,
    DomainError,
    OutOfRangeError,
    UndefinedError,
    NonConvergenceError,
)
from .core.types import Outcome, FunctionInfo

__all__ = [
    "ln",
    "exp",
    "tan",
    "atan",
    "sqrt",
    "range_reduce",
    "evaluate",
    "explain",
    "legacy",
    "list_functions",
    "function_info",
    "make_calculator",
    "get_calculator",
    "set_calculator",
    "CalcSpec",
    "PRESETS",
    "Outcome",
    "FunctionInfo",
    "DigicalcError",
    "DomainError",
    "OutOfRangeError",
    "UndefinedError",
    "NonConvergenceError",
]
