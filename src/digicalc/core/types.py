from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Type

from .errors import (
    DigicalcError,
    DomainError,
    NonConvergenceError,
    OutOfRangeError,
    UndefinedError,
)

ErrorKind = Literal["domain", "out_of_range", "undefined", "no_convergence"]

ERROR_TYPES: Dict[str, Type[DigicalcError]] = {
    "domain": DomainError,
    "out_of_range": OutOfRangeError,
    "undefined": UndefinedError,
    "no_convergence": NonConvergenceError,
}

# Value every engine used to return in-band for "error".
SENTINEL = 0.0

@dataclass(frozen=True)
class Outcome:
    """Result of one engine call: either a value or an error kind, never both."""
    value: Optional[float] = None
    error: Optional[ErrorKind] = None
    message: str = ""
    debug: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of value or error")
        if self.error is not None and self.error not in ERROR_TYPES:
            raise ValueError(f"Unknown error kind '{self.error}'. Available: {sorted(ERROR_TYPES)}")

    @staticmethod
    def success(value: float, *, debug: Optional[Dict[str, Any]] = None) -> "Outcome":
        return Outcome(value=value, debug=debug)

    @staticmethod
    def failure(kind: ErrorKind, message: str, *, debug: Optional[Dict[str, Any]] = None) -> "Outcome":
        return Outcome(error=kind, message=message, debug=debug)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def sentinel(self) -> float:
        """Legacy view: the value, or 0.0 for any error."""
        return SENTINEL if self.value is None else self.value

    def unwrap(self) -> float:
        if self.value is None:
            raise ERROR_TYPES[self.error](self.message or self.error)
        return self.value

@dataclass(frozen=True)
class FunctionInfo:
    """Registry metadata for one public function."""
    name: str
    domain: str
    range: str
    algorithm: str
