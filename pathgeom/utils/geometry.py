"""Leaf-node numpy helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


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


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def unit(vector: NDArray[np.float64]) -> NDArray[np.float64]:
    """Normalize a 2-vector. Zero vectors come back unchanged."""
    norm = float(np.hypot(vector[0], vector[1]))
    if norm < 1e-12:
        return vector
    return vector / norm
