"""Least-squares Bézier fitting with fixed end tangents.

Samples are parameterized by chord length, then the distances of the inner
control points along the given tangents are solved from the normal
equations over the Bernstein basis (Schneider, "An Algorithm for
Automatically Fitting Digitized Curves"). The end tangent points from the
last sample back into the curve.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from pathgeom.config import settings
from pathgeom.geometry import curves
from pathgeom.geometry.point import Point, Vector, points_to_array
from pathgeom.utils.geometry import arc_lengths, unit

logger = logging.getLogger(__name__)

_ALPHA_EPSILON = 1e-6


def chord_length_parameterize(samples: Sequence[Point] | NDArray[np.float64]) -> NDArray[np.float64]:
    """u[i] = cumulative chord length to sample i / total length."""
    pts = _as_array(samples)
    n = len(pts)
    if n == 0:
        return np.zeros(0)
    if n == 1:
        return np.zeros(1)
    d = arc_lengths(pts)
    total = d[-1]
    if total <= 0:
        return np.linspace(0.0, 1.0, n)
    return d / total


def _as_array(samples: Sequence[Point] | NDArray[np.float64]) -> NDArray[np.float64]:
    if isinstance(samples, np.ndarray):
        return samples.astype(np.float64).reshape(-1, 2)
    return points_to_array(samples)


def _tangent(t: Vector | NDArray[np.float64] | Sequence[float]) -> NDArray[np.float64]:
    if isinstance(t, Vector):
        arr = np.array([t.x, t.y], dtype=np.float64)
    else:
        arr = np.asarray(t, dtype=np.float64).reshape(2)
    return unit(arr)


def _check_u(u: NDArray[np.float64], n: int) -> None:
    if len(u) != n:
        raise ValueError(f"parameter count {len(u)} does not match sample count {n}")


def fit_cubic(
    samples: Sequence[Point] | NDArray[np.float64],
    start_tangent: Vector | Sequence[float],
    end_tangent: Vector | Sequence[float],
    u: NDArray[np.float64] | None = None,
) -> tuple[Point, Point, Point, Point]:
    """Fit one cubic to ``samples``; returns (p0, c1, c2, p3)."""
    pts = _as_array(samples)
    if len(pts) == 0:
        raise ValueError("cannot fit a curve to zero samples")
    if u is None:
        u = chord_length_parameterize(pts)
    u = np.asarray(u, dtype=np.float64)
    _check_u(u, len(pts))

    s0, sn = pts[0], pts[-1]
    t1, t2 = _tangent(start_tangent), _tangent(end_tangent)

    mt = 1 - u
    b0 = mt**3
    b1 = 3 * u * mt**2
    b2 = 3 * u**2 * mt
    b3 = u**3

    a1 = np.outer(b1, t1)
    a2 = np.outer(b2, t2)
    c11 = float(np.sum(a1 * a1))
    c12 = float(np.sum(a1 * a2))
    c22 = float(np.sum(a2 * a2))

    residual = pts - (np.outer(b0 + b1, s0) + np.outer(b2 + b3, sn))
    x1 = float(np.sum(a1 * residual))
    x2 = float(np.sum(a2 * residual))

    seg_len = float(np.hypot(*(sn - s0)))
    epsilon = _ALPHA_EPSILON * seg_len
    det = c11 * c22 - c12 * c12

    alpha1 = alpha2 = float("nan")
    if det != 0:
        alpha1 = (x1 * c22 - x2 * c12) / det
        alpha2 = (c11 * x2 - c12 * x1) / det

    if not (np.isfinite(alpha1) and np.isfinite(alpha2)) or alpha1 <= epsilon or alpha2 <= epsilon:
        logger.debug("Cubic fit degenerate (det=%g), using chord/3 heuristic", det)
        alpha1 = alpha2 = seg_len / 3

    p0 = Point(float(s0[0]), float(s0[1]))
    p3 = Point(float(sn[0]), float(sn[1]))
    c1 = Point(float(s0[0] + alpha1 * t1[0]), float(s0[1] + alpha1 * t1[1]))
    c2 = Point(float(sn[0] + alpha2 * t2[0]), float(sn[1] + alpha2 * t2[1]))
    return p0, c1, c2, p3


def fit_quadratic(
    samples: Sequence[Point] | NDArray[np.float64],
    start_tangent: Vector | Sequence[float],
    end_tangent: Vector | Sequence[float] | None = None,
    u: NDArray[np.float64] | None = None,
) -> tuple[Point, Point, Point]:
    """Fit one quadratic to ``samples``; returns (p0, c1, p2).

    The control point sits on the start tangent. ``end_tangent`` is accepted
    for symmetry with ``fit_cubic`` but a quadratic has only one free scalar.
    """
    pts = _as_array(samples)
    if len(pts) == 0:
        raise ValueError("cannot fit a curve to zero samples")
    if u is None:
        u = chord_length_parameterize(pts)
    u = np.asarray(u, dtype=np.float64)
    _check_u(u, len(pts))

    s0, sn = pts[0], pts[-1]
    t1 = _tangent(start_tangent)

    mt = 1 - u
    b0 = mt**2
    b1 = 2 * u * mt
    b2 = u**2

    a = np.outer(b1, t1)
    residual = pts - (np.outer(b0 + b1, s0) + np.outer(b2, sn))
    denom = float(np.sum(a * a))
    alpha = float(np.sum(a * residual)) / denom if denom != 0 else float("nan")

    seg_len = float(np.hypot(*(sn - s0)))
    if not np.isfinite(alpha) or alpha <= _ALPHA_EPSILON * seg_len:
        logger.debug("Quadratic fit degenerate, using chord/2 heuristic")
        alpha = seg_len / 2

    p0 = Point(float(s0[0]), float(s0[1]))
    p2 = Point(float(sn[0]), float(sn[1]))
    c1 = Point(float(s0[0] + alpha * t1[0]), float(s0[1] + alpha * t1[1]))
    return p0, c1, p2


def evaluate(curve: Sequence[Point], t: float) -> Point:
    """Evaluate a quadratic (3 points) or cubic (4 points) control polygon."""
    if len(curve) == 4:
        return curves.cubic_evaluate(curve[0], curve[1], curve[2], curve[3], t)
    if len(curve) == 3:
        return curves.quadratic_evaluate(curve[0], curve[1], curve[2], t)
    raise ValueError(f"expected 3 or 4 control points, got {len(curve)}")


def max_error(
    curve: Sequence[Point],
    samples: Sequence[Point] | NDArray[np.float64],
    u: NDArray[np.float64] | None = None,
) -> float:
    """Largest squared distance between curve(u[i]) and samples[i]."""
    pts = _as_array(samples)
    if u is None:
        u = chord_length_parameterize(pts)
    _check_u(np.asarray(u), len(pts))
    worst = 0.0
    for i in range(1, len(pts)):
        p = evaluate(curve, float(u[i]))
        d = (p.x - pts[i, 0]) ** 2 + (p.y - pts[i, 1]) ** 2
        worst = max(worst, float(d))
    return worst


# ---------------------------------------------------------------------------
# Incremental stroke fitting
# ---------------------------------------------------------------------------


@dataclass
class Pencil:
    """Greedy stroke-to-quadratics fitter.

    Points are appended one at a time. The current run of samples is refit
    as a single quadratic; when the fit error grows past ``smoothness`` the
    previous fit is committed and a new run starts at its end point, with its
    start tangent continuing the committed curve.
    """

    smoothness: float = field(default_factory=lambda: settings.pencil_smoothness)
    committed: list[tuple[Point, Point, Point]] = field(default_factory=list)
    samples: list[Point] = field(default_factory=list)
    current: tuple[Point, Point, Point] | None = None
    _tangent: Vector | None = field(default=None, init=False, repr=False)

    def begin(self, point: Point) -> None:
        self.committed = []
        self.samples = [point]
        self.current = None
        self._tangent = None

    def add(self, point: Point) -> None:
        if not self.samples:
            self.begin(point)
            return
        if point == self.samples[-1]:
            return
        trial = self.samples + [point]
        fit = self._fit(trial)
        if self.current is not None and max_error(fit, trial) > self.smoothness:
            self.committed.append(self.current)
            p0, c1, p2 = self.current
            self._tangent = p2 - c1 if p2 != c1 else None
            trial = [p2, point]
            fit = self._fit(trial)
        self.samples = trial
        self.current = fit

    def _fit(self, samples: list[Point]) -> tuple[Point, Point, Point]:
        tangent = self._tangent
        if tangent is None:
            tangent = samples[1] - samples[0]
        return fit_quadratic(samples, tangent)

    def curves(self) -> list[tuple[Point, Point, Point]]:
        result = list(self.committed)
        if self.current is not None:
            result.append(self.current)
        return result
