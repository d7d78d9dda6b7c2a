"""
Complex numbers in polar form: modulus·e^{i·argument}.

Multiplication and division stay in polar space.  Addition and
subtraction have no closed form here, so both operands go through
rectangular form and the result comes back as `Polar`.
"""
import logging
import math
from dataclasses import dataclass

from .base import DEFAULT_ABS_TOL, DEFAULT_REL_TOL, TAU, normalize_angle
from .rectangular import Rectangular

logger = logging.getLogger(__name__)


def _check_operand(other, op: str) -> None:
    if not isinstance(other, Polar):
        raise TypeError(
            f"unsupported operand for {op}: 'Polar' and '{type(other).__name__}'"
        )


@dataclass(frozen=True)
class Polar:
    argument: float
    modulus: float

    @classmethod
    def from_rectangular(cls, real: float, imag: float) -> "Polar":
        return Rectangular(real, imag).to_polar()

    def to_rectangular(self) -> Rectangular:
        return Rectangular(self.modulus * math.cos(self.argument),
                           self.modulus * math.sin(self.argument))

    def conjugate(self) -> "Polar":
        return Polar(normalize_angle(TAU - self.argument), self.modulus)

    def add(self, other: "Polar") -> "Polar":
        _check_operand(other, "+")
        return self.to_rectangular().add(other.to_rectangular()).to_polar()

    def sub(self, other: "Polar") -> "Polar":
        _check_operand(other, "-")
        return self.to_rectangular().sub(other.to_rectangular()).to_polar()

    def mul(self, other: "Polar") -> "Polar":
        _check_operand(other, "*")
        return Polar(normalize_angle(self.argument + other.argument),
                     self.modulus * other.modulus)

    def div(self, other: "Polar") -> "Polar":
        _check_operand(other, "/")
        if other.modulus == 0:
            logger.debug("division of %s by zero modulus", self)
            raise ZeroDivisionError("polar division by a zero-modulus divisor")
        return Polar(normalize_angle(self.argument - other.argument),
                     self.modulus / other.modulus)

    def isclose(self, other, *, rel_tol: float = DEFAULT_REL_TOL,
                abs_tol: float = DEFAULT_ABS_TOL) -> bool:
        """Compare in rectangular space, so 0 and 2π - ε are neighbours."""
        return self.to_rectangular().isclose(other, rel_tol=rel_tol, abs_tol=abs_tol)

    # ---------- dunder sugar ----------
    def _binary(method):
        def op(self, other):
            if not isinstance(other, Polar):
                return NotImplemented
            return method(self, other)
        op.__name__ = method.__name__
        return op

    __add__ = _binary(add)
    __sub__ = _binary(sub)
    __mul__ = _binary(mul)
    __truediv__ = _binary(div)
    del _binary

    def __abs__(self) -> float:
        return self.modulus

    def __complex__(self) -> complex:
        return complex(self.to_rectangular())

    def __str__(self) -> str:
        return f"{self.modulus}*e^{self.argument}i"
