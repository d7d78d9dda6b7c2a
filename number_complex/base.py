"""
Shared pieces of the two complex‑number representations.

Both `Rectangular` and `Polar` satisfy the `Complex` protocol structurally;
neither inherits from the other.
"""
import math
from typing import Protocol, runtime_checkable

TAU = 2.0 * math.pi

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians into [0, 2π)."""
    wrapped = angle % TAU
    # a tiny negative angle rounds to exactly TAU
    if wrapped >= TAU:
        return 0.0
    return wrapped


@runtime_checkable
class Complex(Protocol):
    """Capability shared by every complex representation."""

    def conjugate(self) -> "Complex":
        ...

    def add(self, other) -> "Complex":
        ...

    def sub(self, other) -> "Complex":
        ...

    def mul(self, other) -> "Complex":
        ...

    def div(self, other) -> "Complex":
        ...

    def isclose(self, other, *, rel_tol: float = DEFAULT_REL_TOL,
                abs_tol: float = DEFAULT_ABS_TOL) -> bool:
        ...
