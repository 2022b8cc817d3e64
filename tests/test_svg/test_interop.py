"""Tests for the svgpathtools bridge."""

from __future__ import annotations

import pytest
import svgpathtools

from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.point import Point
from pathgeom.svg.interop import path_bounds, sample_figure, to_svgpathtools
from pathgeom.svg.parser import parse_path


def test_to_svgpathtools_explodes_units():
    converted = to_svgpathtools(parse_path("M0,0 L1,0 2,0 Q3,1 4,0 C5,1 6,1 7,0"))
    assert [type(seg) for seg in converted] == [
        svgpathtools.Line,
        svgpathtools.Line,
        svgpathtools.QuadraticBezier,
        svgpathtools.CubicBezier,
    ]
    assert converted[0].start == 0j
    assert converted[-1].end == complex(7, 0)


def test_to_svgpathtools_degenerate_arcs():
    converted = to_svgpathtools(parse_path("M0,0 A0,5 0 0,1 10,0 A5,5 0 0,1 10,0"))
    assert len(converted) == 1
    assert isinstance(converted[0], svgpathtools.Line)


def test_path_bounds_include_arc_extrema():
    bounds = path_bounds(parse_path("M0,0 A5,5 0 0,1 10,0"))
    assert bounds[0] == pytest.approx(0)
    assert bounds[2] == pytest.approx(10)
    assert bounds[3] - bounds[1] == pytest.approx(5)


def test_path_bounds_lone_start_point():
    assert path_bounds(Path([Figure(Point(3, 4))])) == (3, 4, 3, 4)
    assert path_bounds(Path()) == (0, 0, 0, 0)


def test_sample_figure_ends_on_endpoints():
    fig = parse_path("M0,0 L10,0 L10,10").figures[0]
    samples = sample_figure(fig, 4)
    assert samples.shape == (9, 2)
    assert tuple(samples[0]) == (0, 0)
    assert tuple(samples[-1]) == pytest.approx((10, 10))
