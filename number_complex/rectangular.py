"""
Complex numbers in rectangular (Cartesian) form.

Constructors
------------
Rectangular(a, b)              -> a + b i
Rectangular.from_complex(z)    -> from a builtin `complex` (or any number)

Arithmetic works between two `Rectangular` values and between a
`Rectangular` and a plain real scalar.  A scalar only touches the real
part for `+`/`-` and scales both parts for `*`/`/`.

Dividing by zero (a zero scalar or a divisor with zero modulus) raises
`ZeroDivisionError`.  NaN and infinite components are accepted and
propagate through every operation.
"""
import logging
import math
import numbers
from dataclasses import dataclass

from .base import DEFAULT_ABS_TOL, DEFAULT_REL_TOL, TAU

logger = logging.getLogger(__name__)


def _check_operand(other, op: str) -> None:
    if not isinstance(other, (Rectangular, numbers.Real)):
        raise TypeError(
            f"unsupported operand for {op}: 'Rectangular' and '{type(other).__name__}'"
        )


@dataclass(frozen=True)
class Rectangular:
    real: float
    imag: float

    # ---------- convenience makers ----------
    @classmethod
    def from_complex(cls, value: "complex | float | int") -> "Rectangular":
        value = complex(value)
        return cls(value.real, value.imag)

    # ---------- basic properties ----------
    def modulus(self) -> float:
        return math.hypot(self.real, self.imag)

    def conjugate(self) -> "Rectangular":
        return Rectangular(self.real, -self.imag)

    def to_polar(self) -> "Polar":
        """
        Convert to polar form with the argument in [0, 2π).

        `atan(imag / real)` only covers (−π/2, π/2); the left half plane
        is shifted by π and what is still negative by 2π.  A zero real
        part is resolved directly instead of dividing by it.
        """
        from .polar import Polar

        modulus = self.modulus()
        if self.real == 0:
            logger.debug("to_polar on the imaginary axis: %s", self)
            if self.imag > 0:
                arg = math.pi / 2
            elif self.imag < 0:
                arg = 3 * math.pi / 2
            elif self.imag == 0:
                arg = 0.0
            else:
                arg = math.nan
            return Polar(arg, modulus)

        arg = math.atan(self.imag / self.real)
        if self.real < 0:
            # second and third quadrant
            arg += math.pi
        elif arg < 0:
            # fourth quadrant
            arg += TAU
        if arg >= TAU:
            arg = 0.0
        # -0.0 from atan on a negative-zero imaginary part
        arg += 0.0
        return Polar(arg, modulus)

    # ---------- arithmetic helpers ----------
    def add(self, other: "Rectangular | float") -> "Rectangular":
        _check_operand(other, "+")
        if isinstance(other, Rectangular):
            return Rectangular(self.real + other.real, self.imag + other.imag)
        return Rectangular(self.real + other, self.imag)

    def sub(self, other: "Rectangular | float") -> "Rectangular":
        _check_operand(other, "-")
        if isinstance(other, Rectangular):
            return Rectangular(self.real - other.real, self.imag - other.imag)
        return Rectangular(self.real - other, self.imag)

    # (a + bi)(c + di) = (ac - bd) + (bc + ad)i
    def mul(self, other: "Rectangular | float") -> "Rectangular":
        _check_operand(other, "*")
        if isinstance(other, Rectangular):
            return Rectangular(self.real * other.real - self.imag * other.imag,
                               self.imag * other.real + self.real * other.imag)
        return Rectangular(self.real * other, self.imag * other)

    # (a + bi)/(c + di) = (a + bi)(c - di)/(c² + d²), with c² + d² scaled by
    # the larger of |c|, |d| so it neither overflows nor underflows (Smith)
    def div(self, other: "Rectangular | float") -> "Rectangular":
        _check_operand(other, "/")
        if isinstance(other, Rectangular):
            if other.real == 0 and other.imag == 0:
                logger.debug("division of %s by zero modulus %s", self, other)
                raise ZeroDivisionError("complex division by a zero-modulus divisor")
            if abs(other.real) >= abs(other.imag):
                ratio = other.imag / other.real
                denominator = other.real + other.imag * ratio
                return Rectangular((self.real + self.imag * ratio) / denominator,
                                   (self.imag - self.real * ratio) / denominator)
            ratio = other.real / other.imag
            denominator = other.real * ratio + other.imag
            return Rectangular((self.real * ratio + self.imag) / denominator,
                               (self.imag * ratio - self.real) / denominator)
        if other == 0:
            logger.debug("division of %s by scalar zero", self)
            raise ZeroDivisionError("complex division by zero")
        return Rectangular(self.real / other, self.imag / other)

    def isclose(self, other, *, rel_tol: float = DEFAULT_REL_TOL,
                abs_tol: float = DEFAULT_ABS_TOL) -> bool:
        if hasattr(other, "to_rectangular"):
            other = other.to_rectangular()
        elif not isinstance(other, Rectangular):
            other = Rectangular.from_complex(other)
        return (math.isclose(self.real, other.real, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.imag, other.imag, rel_tol=rel_tol, abs_tol=abs_tol))

    # ---------- dunder sugar ----------
    def _binary(method):
        def op(self, other):
            if not isinstance(other, (Rectangular, numbers.Real)):
                return NotImplemented
            return method(self, other)
        op.__name__ = method.__name__
        return op

    __add__ = _binary(add)
    __sub__ = _binary(sub)
    __mul__ = _binary(mul)
    __truediv__ = _binary(div)
    __radd__ = __add__
    __rmul__ = __mul__
    del _binary

    def __rsub__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Rectangular(other - self.real, -self.imag)

    def __rtruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return Rectangular(other, 0.0).div(self)

    def __neg__(self) -> "Rectangular":
        return Rectangular(-self.real, -self.imag)

    def __pos__(self) -> "Rectangular":
        return self

    __abs__ = modulus

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        return f"{self.real} + {self.imag}i"
