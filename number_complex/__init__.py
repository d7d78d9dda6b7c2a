"""
Complex numbers in rectangular and polar form, convertible into each other.
"""

from .base import Complex, TAU, normalize_angle  # noqa: F401
from .polar import Polar  # noqa: F401
from .rectangular import Rectangular  # noqa: F401

__all__ = [
    "Complex",
    "Polar",
    "Rectangular",
    "TAU",
    "normalize_angle",
]
