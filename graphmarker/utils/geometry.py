"""Leaf-node numeric helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray


def as_array(points: Iterable[object]) -> NDArray[np.float64]:
    """Nx2 array from anything with .x and .y."""
    coords = [(p.x, p.y) for p in points]  # type: ignore[attr-defined]
    if not coords:
        return np.empty((0, 2))
    return np.asarray(coords, dtype=np.float64)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bboxes_overlap(
    a: tuple[float, float, float, float], b: tuple[float, float, float, float]
) -> bool:
    """Closed bounding boxes touch or overlap."""
    return a[0] <= b[2] and a[2] >= b[0] and a[1] <= b[3] and a[3] >= b[1]


def local_extrema(values: NDArray[np.float64]) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
    """Indices of interior local maxima and minima of a sampled sequence.

    A flat run counts once, at its first sample. End points never count.
    """
    if len(values) < 3:
        empty = np.empty(0, dtype=np.intp)
        return empty, empty
    prev = values[1:-1] - values[:-2]
    nxt = values[1:-1] - values[2:]
    maxima = np.nonzero((prev > 0) & (nxt >= 0))[0] + 1
    minima = np.nonzero((prev < 0) & (nxt <= 0))[0] + 1
    return maxima, minima
