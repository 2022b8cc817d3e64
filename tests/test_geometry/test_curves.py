"""Tests for scalar Bézier algebra and arc center recovery."""

from __future__ import annotations

import math

import pytest

from pathgeom.geometry import curves
from pathgeom.geometry.arcs import ellipse_center, feasible_radii, rotate_point
from pathgeom.geometry.point import Point


CONTROL_SETS = [
    (Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)),
    (Point(-3.5, 2), Point(10, -7), Point(0.1, 0.2), Point(4, 4)),
    (Point(1e6, -1e6), Point(1e6, 1e6), Point(-1e6, 1e6), Point(-1e6, -1e6)),
    (Point(2, 2), Point(2, 2), Point(2, 2), Point(2, 2)),
]


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("p0,p1,p2,p3", CONTROL_SETS)
def test_cubic_endpoints_exact(p0, p1, p2, p3):
    assert curves.cubic_evaluate(p0, p1, p2, p3, 0) == p0
    assert curves.cubic_evaluate(p0, p1, p2, p3, 1) == p3


def test_cubic_midpoint():
    p = curves.cubic_evaluate(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0), 0.5)
    assert p.x == pytest.approx(0.5)
    assert p.y == pytest.approx(0.75)


def test_quadratic_endpoints_and_midpoint():
    p0, p1, p2 = Point(0, 0), Point(5, 10), Point(10, 0)
    assert curves.quadratic_evaluate(p0, p1, p2, 0) == p0
    assert curves.quadratic_evaluate(p0, p1, p2, 1) == p2
    mid = curves.quadratic_evaluate(p0, p1, p2, 0.5)
    assert mid.x == pytest.approx(5.0)
    assert mid.y == pytest.approx(5.0)


# ---------------------------------------------------------------------------
# Inverse solvers
# ---------------------------------------------------------------------------


def test_solve_cubic_inner_controls():
    p0, p1, p2, p3 = Point(0, 0), Point(2, 5), Point(7, -3), Point(10, 1)
    b1 = curves.cubic_evaluate(p0, p1, p2, p3, 1 / 3)
    b2 = curves.cubic_evaluate(p0, p1, p2, p3, 2 / 3)
    c1 = curves.solve_cubic_c1(b1, p0, p2, p3, 1 / 3)
    c2 = curves.solve_cubic_c2(b2, p0, p1, p3, 2 / 3)
    assert c1.x == pytest.approx(p1.x) and c1.y == pytest.approx(p1.y)
    assert c2.x == pytest.approx(p2.x) and c2.y == pytest.approx(p2.y)


def test_solve_cubic_outer_controls():
    p0, p1, p2, p3 = Point(1, 1), Point(2, 5), Point(7, -3), Point(10, 1)
    b = curves.cubic_evaluate(p0, p1, p2, p3, 0.4)
    c0 = curves.solve_cubic_c0(b, p1, p2, p3, 0.4)
    c3 = curves.solve_cubic_c3(b, p0, p1, p2, 0.4)
    assert c0.x == pytest.approx(p0.x) and c0.y == pytest.approx(p0.y)
    assert c3.x == pytest.approx(p3.x) and c3.y == pytest.approx(p3.y)


def test_solve_quadratic_controls():
    p0, p1, p2 = Point(0, 0), Point(4, 8), Point(9, 1)
    b = curves.quadratic_evaluate(p0, p1, p2, 0.3)
    assert curves.solve_quadratic_c0(b, p1, p2, 0.3).x == pytest.approx(p0.x)
    assert curves.solve_quadratic_c1(b, p0, p2, 0.3).y == pytest.approx(p1.y)
    assert curves.solve_quadratic_c2(b, p0, p1, 0.3).x == pytest.approx(p2.x)


# ---------------------------------------------------------------------------
# Arcs
# ---------------------------------------------------------------------------


def test_ellipse_center_semicircle():
    c = ellipse_center(Point(0, 0), Point(10, 0), 5, 5, 0.0, False, True)
    assert c.x == pytest.approx(5.0)
    assert c.y == pytest.approx(0.0)


def test_ellipse_center_quarter_circle_flags():
    small = ellipse_center(Point(0, 0), Point(10, 10), 10, 10, 0.0, False, True)
    large = ellipse_center(Point(0, 0), Point(10, 10), 10, 10, 0.0, True, True)
    assert (small.x, small.y) == (pytest.approx(0.0), pytest.approx(10.0))
    assert (large.x, large.y) == (pytest.approx(10.0), pytest.approx(0.0))


def test_ellipse_center_clamps_small_radii():
    c = ellipse_center(Point(0, 0), Point(10, 0), 1, 1, 0.0, False, True)
    assert not math.isnan(c.x) and not math.isnan(c.y)
    assert c.x == pytest.approx(5.0)
    assert c.y == pytest.approx(0.0)


def test_feasible_radii_scales_uniformly():
    rx, ry = feasible_radii(Point(0, 0), Point(10, 0), 1, 2, 0.0)
    assert rx == pytest.approx(5.0)
    assert ry == pytest.approx(10.0)


def test_ellipse_center_degenerate_inputs():
    assert ellipse_center(Point(0, 0), Point(10, 0), 0, 5, 0.0, False, True) == Point(5, 0)
    assert ellipse_center(Point(3, 3), Point(3, 3), 5, 5, 0.0, False, True) == Point(3, 3)


def test_rotate_point_about_center():
    p = rotate_point(Point(2, 1), math.pi / 2, Point(1, 1))
    assert p.x == pytest.approx(1.0)
    assert p.y == pytest.approx(2.0)
