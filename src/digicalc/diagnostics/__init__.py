"""Diagnostics package.

- compare_reference, round_trip: always available, compare against the math module
- error_sweep: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["compare_reference", "round_trip", "error_sweep"]
