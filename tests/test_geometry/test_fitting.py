"""Tests for chord-length parameterization, Bézier fitting and the pencil."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pathgeom.geometry.fitting import (
    Pencil,
    chord_length_parameterize,
    fit_cubic,
    fit_quadratic,
    max_error,
)
from pathgeom.geometry.point import Point, Vector


def test_chord_length_parameterization():
    u = chord_length_parameterize([Point(0, 0), Point(3, 4), Point(6, 8)])
    assert u.tolist() == pytest.approx([0.0, 0.5, 1.0])


def test_chord_length_parameterization_coincident_samples():
    u = chord_length_parameterize([Point(1, 1)] * 3)
    assert not np.isnan(u).any()
    assert u[0] == 0.0 and u[-1] == 1.0


def test_cubic_fit_coincident_samples_falls_back():
    p0, c1, c2, p3 = fit_cubic([Point(2, 2), Point(2, 2)], Vector(1, 0), Vector(-1, 0))
    for p in (p0, c1, c2, p3):
        assert p == Point(2, 2)
        assert not math.isnan(p.x) and not math.isnan(p.y)


def test_cubic_fit_straight_samples_is_exact():
    samples = [Point(float(x), 0.0) for x in range(10)]
    curve = fit_cubic(samples, Vector(1, 0), Vector(-1, 0))
    p0, c1, c2, p3 = curve
    assert p0 == Point(0, 0) and p3 == Point(9, 0)
    assert c1.x == pytest.approx(3.0) and c1.y == pytest.approx(0.0)
    assert c2.x == pytest.approx(6.0) and c2.y == pytest.approx(0.0)
    assert max_error(curve, samples) == pytest.approx(0.0, abs=1e-12)


def test_cubic_fit_controls_lie_on_tangents():
    ts = np.linspace(0, 1, 25)
    samples = [Point(10 * t, 4 * math.sin(math.pi * t)) for t in ts]
    t1 = Vector(1, 4 * math.pi / 10)
    t2 = Vector(-1, 4 * math.pi / 10)
    p0, c1, c2, p3 = fit_cubic(samples, t1, t2)
    d1 = (c1 - p0).normalized()
    d2 = (c2 - p3).normalized()
    assert d1.dot(t1.normalized()) == pytest.approx(1.0)
    assert d2.dot(t2.normalized()) == pytest.approx(1.0)
    assert max_error((p0, c1, c2, p3), samples) < 0.5


def test_cubic_fit_rejects_backwards_tangents():
    # tangents pointing away from the samples give negative alphas
    samples = [Point(float(x), 0.0) for x in range(10)]
    p0, c1, c2, p3 = fit_cubic(samples, Vector(-1, 0), Vector(1, 0))
    assert c1 == Point(-3, 0)
    assert c2 == Point(12, 0)


def test_quadratic_fit_straight_samples():
    samples = [Point(float(x), 0.0) for x in range(9)]
    p0, c1, p2 = fit_quadratic(samples, Vector(1, 0))
    assert c1.x == pytest.approx(4.0)
    assert c1.y == pytest.approx(0.0)
    assert max_error((p0, c1, p2), samples) == pytest.approx(0.0, abs=1e-12)


def test_quadratic_fit_two_samples_uses_half_chord():
    p0, c1, p2 = fit_quadratic([Point(0, 0), Point(6, 8)], Vector(0, 1))
    assert c1 == Point(0, 5)


def test_max_error_length_mismatch():
    curve = (Point(0, 0), Point(1, 0), Point(2, 0))
    with pytest.raises(ValueError):
        max_error(curve, [Point(0, 0), Point(2, 0)], np.array([0.0, 0.5, 1.0]))


def test_max_error_is_squared_distance():
    curve = (Point(0, 0), Point(1, 0), Point(2, 0))
    samples = [Point(0, 0), Point(1, 3), Point(2, 0)]
    assert max_error(curve, samples, np.array([0.0, 0.5, 1.0])) == pytest.approx(9.0)


def test_fit_requires_samples():
    with pytest.raises(ValueError):
        fit_cubic([], Vector(1, 0), Vector(-1, 0))


# ---------------------------------------------------------------------------
# Pencil
# ---------------------------------------------------------------------------


def test_pencil_straight_stroke_is_one_curve():
    pencil = Pencil(smoothness=1.0)
    pencil.begin(Point(0, 0))
    for x in (10, 20, 30):
        pencil.add(Point(x, 0))
    result = pencil.curves()
    assert len(result) == 1
    assert result[0][0] == Point(0, 0)
    assert result[0][2] == Point(30, 0)


def test_pencil_sharp_turn_starts_new_curve():
    pencil = Pencil(smoothness=1.0)
    pencil.begin(Point(0, 0))
    for p in (Point(10, 0), Point(20, 0), Point(30, 0), Point(30, 30), Point(30, 60)):
        pencil.add(p)
    result = pencil.curves()
    assert len(result) >= 2
    assert result[0][2] == Point(30, 0)
    assert result[-1][2] == Point(30, 60)


def test_pencil_ignores_repeated_points():
    pencil = Pencil()
    pencil.begin(Point(0, 0))
    pencil.add(Point(0, 0))
    assert pencil.curves() == []
