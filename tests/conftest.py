"""
Pytest fixtures for number_complex tests.
"""

import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from number_complex import Polar, Rectangular  # noqa: E402


@pytest.fixture
def quadrant_points():
    """One rectangular value per quadrant with its expected argument."""
    return [
        (Rectangular(1.0, 1.0), math.pi / 4),
        (Rectangular(-1.0, 1.0), 3 * math.pi / 4),
        (Rectangular(-1.0, -1.0), 5 * math.pi / 4),
        (Rectangular(1.0, -1.0), 7 * math.pi / 4),
    ]


@pytest.fixture
def sample_polars():
    """Polar values with arguments spread over [0, 2π)."""
    return [Polar(k * 0.7, 0.5 + k) for k in range(9)]


@pytest.fixture(autouse=True)
def close_figures():
    """Release every figure a test opened."""
    yield
    plt.close("all")
