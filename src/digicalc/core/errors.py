class DigicalcError(Exception):
    """Base error."""

class DomainError(DigicalcError, ValueError):
    """Raised when an argument lies outside a function's domain (e.g. ln of a non-positive number)."""

class OutOfRangeError(DigicalcError, OverflowError):
    """Raised when an argument exceeds the range a digit-serial engine can handle (e.g. exp(231))."""

class UndefinedError(DigicalcError, ZeroDivisionError):
    """Raised when the result is mathematically undefined (tan at an odd multiple of pi/2)."""

class NonConvergenceError(DigicalcError, ArithmeticError):
    """Raised when an iterative engine exhausts its iteration budget."""
