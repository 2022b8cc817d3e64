"""Scalar Bézier algebra.

Evaluation of cubic and quadratic Bézier polynomials, plus inverse solvers that
recover one control point from a point the curve must pass through at a fixed
parameter. The solvers divide by a Bernstein weight and are undefined at t=0
and t=1 for the inner control points; callers only use them at interior proxy
parameters (1/3, 2/3, 1/2).
"""

from __future__ import annotations

from pathgeom.geometry.point import Point

# ---------------------------------------------------------------------------
# Cubic, scalar
# ---------------------------------------------------------------------------


def cubic(c0: float, c1: float, c2: float, c3: float, t: float) -> float:
    if t == 0:
        return c0
    if t == 1:
        return c3
    u = 1 - t
    return c0 * u**3 + 3 * c1 * t * u**2 + 3 * c2 * u * t**2 + c3 * t**3


def cubic_c0(y: float, c1: float, c2: float, c3: float, t: float) -> float:
    u = 1 - t
    return (y - 3 * c1 * t * u**2 - 3 * c2 * u * t**2 - c3 * t**3) / u**3


def cubic_c1(y: float, c0: float, c2: float, c3: float, t: float) -> float:
    u = 1 - t
    return (y - c0 * u**3 - 3 * c2 * u * t**2 - c3 * t**3) / (3 * t * u**2)


def cubic_c2(y: float, c0: float, c1: float, c3: float, t: float) -> float:
    u = 1 - t
    return (y - c0 * u**3 - 3 * c1 * t * u**2 - c3 * t**3) / (3 * u * t**2)


def cubic_c3(y: float, c0: float, c1: float, c2: float, t: float) -> float:
    u = 1 - t
    return (y - c0 * u**3 - 3 * c1 * t * u**2 - 3 * c2 * u * t**2) / t**3


# ---------------------------------------------------------------------------
# Quadratic, scalar
# ---------------------------------------------------------------------------


def quadratic(c0: float, c1: float, c2: float, t: float) -> float:
    if t == 0:
        return c0
    if t == 1:
        return c2
    u = 1 - t
    return c0 * u**2 + 2 * c1 * u * t + c2 * t**2


def quadratic_c0(y: float, c1: float, c2: float, t: float) -> float:
    u = 1 - t
    return (y - 2 * c1 * u * t - c2 * t**2) / u**2


def quadratic_c1(y: float, c0: float, c2: float, t: float) -> float:
    u = 1 - t
    return (y - c0 * u**2 - c2 * t**2) / (2 * u * t)


def quadratic_c2(y: float, c0: float, c1: float, t: float) -> float:
    u = 1 - t
    return (y - c0 * u**2 - 2 * c1 * u * t) / t**2


# ---------------------------------------------------------------------------
# Point forms
# ---------------------------------------------------------------------------


def cubic_evaluate(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    return Point(cubic(p0.x, p1.x, p2.x, p3.x, t), cubic(p0.y, p1.y, p2.y, p3.y, t))


def quadratic_evaluate(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    return Point(quadratic(p0.x, p1.x, p2.x, t), quadratic(p0.y, p1.y, p2.y, t))


def solve_cubic_c0(b: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    return Point(cubic_c0(b.x, p1.x, p2.x, p3.x, t), cubic_c0(b.y, p1.y, p2.y, p3.y, t))


def solve_cubic_c1(b: Point, p0: Point, p2: Point, p3: Point, t: float) -> Point:
    return Point(cubic_c1(b.x, p0.x, p2.x, p3.x, t), cubic_c1(b.y, p0.y, p2.y, p3.y, t))


def solve_cubic_c2(b: Point, p0: Point, p1: Point, p3: Point, t: float) -> Point:
    return Point(cubic_c2(b.x, p0.x, p1.x, p3.x, t), cubic_c2(b.y, p0.y, p1.y, p3.y, t))


def solve_cubic_c3(b: Point, p0: Point, p1: Point, p2: Point, t: float) -> Point:
    return Point(cubic_c3(b.x, p0.x, p1.x, p2.x, t), cubic_c3(b.y, p0.y, p1.y, p2.y, t))


def solve_quadratic_c0(b: Point, p1: Point, p2: Point, t: float) -> Point:
    return Point(quadratic_c0(b.x, p1.x, p2.x, t), quadratic_c0(b.y, p1.y, p2.y, t))


def solve_quadratic_c1(b: Point, p0: Point, p2: Point, t: float) -> Point:
    return Point(quadratic_c1(b.x, p0.x, p2.x, t), quadratic_c1(b.y, p0.y, p2.y, t))


def solve_quadratic_c2(b: Point, p0: Point, p1: Point, t: float) -> Point:
    return Point(quadratic_c2(b.x, p0.x, p1.x, t), quadratic_c2(b.y, p0.y, p1.y, t))
