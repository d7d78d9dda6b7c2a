"""
Plot a walk through the complex plane.

Run:
    python -m number_complex.animate
"""
import logging
import math
from typing import Iterable, List

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from .polar import Polar
from .rectangular import Rectangular

logger = logging.getLogger(__name__)


def rotation_path(start: Polar, step: float, count: int) -> List[Polar]:
    """`count` values, each the previous one rotated by `step` radians."""
    if count <= 0:
        return []
    unit = Polar(step, 1.0)
    path = [start]
    for _ in range(1, count):
        path.append(path[-1] * unit)
    return path


def _as_points(sequence) -> np.ndarray:
    points = []
    for z in sequence:
        if isinstance(z, tuple):
            points.append(complex(*z))
        else:
            points.append(complex(z))
    return np.asarray(points, dtype=complex)


def animate_complex(
    sequence: Iterable[Rectangular | Polar | complex | tuple[float, float]],
    *,
    interval: int = 200,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex‑number samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of `Rectangular`, `Polar`, builtin `complex`
               or (x, y) tuples
    interval : delay between frames in **ms**
    show     : call `plt.show()` before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – handy if you need to save().
    """
    points = _as_points(sequence)
    if points.size == 0:
        raise ValueError("Nothing to animate: the sequence is empty")
    logger.debug("animating %d points", points.size)

    # Pre‑compute limits for a clean box that fits everything
    span = max(float(np.max(np.abs(points.real))), float(np.max(np.abs(points.imag))), 1.0)
    margin = 0.1 * span

    fig, ax = plt.subplots()
    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title("Complex number animation")
    ax.grid(True, linestyle="--", alpha=0.3)

    point, = ax.plot([], [], "ro", markersize=6)
    trail, = ax.plot([], [], "b-", alpha=0.5, linewidth=1)

    def init():
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        z = points[frame]
        point.set_data([z.real], [z.imag])
        trail.set_data(points.real[:frame + 1], points.imag[:frame + 1])
        ax.set_title(f"t = {frame}  |  z = {z.real:+.3f} {z.imag:+.3f}i")
        return point, trail

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(points),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    # (1 + 2i) + (3 + 4i), shown in polar form
    total = (Rectangular(1.0, 2.0) + Rectangular(3.0, 4.0)).to_polar()
    logger.info("(1 + 2i) + (3 + 4i) = %s", total)

    o = rotation_path(Polar(0.0, 1.0), math.pi / 180, 360)
    animate_complex(o, interval=1)
