"""Tests for the path data parser."""

from __future__ import annotations

import pytest

from pathgeom.geometry.point import Point
from pathgeom.geometry.segments import (
    ArcSegment,
    CubicBezierSegment,
    LineSegment,
    PolyCubicBezierSegment,
    PolyLineSegment,
    PolyQuadraticBezierSegment,
    QuadraticBezierSegment,
)
from pathgeom.svg.parser import PathSyntaxError, parse_path, try_parse_path

from tests.conftest import COMPACT_D, MIXED_D, RELATIVE_D, SQUARE_D, assert_points_close


def test_parse_square():
    path = parse_path(SQUARE_D)
    assert len(path.figures) == 1
    fig = path.figures[0]
    assert fig.is_closed
    assert fig.start_point == Point(0, 0)
    assert fig.segments == [
        LineSegment(Point(10, 0)),
        LineSegment(Point(10, 10)),
        LineSegment(Point(0, 10)),
    ]


def test_implicit_lineto_after_moveto():
    single = parse_path("M0,0 10,0").figures[0]
    assert single.segments == [LineSegment(Point(10, 0))]
    run = parse_path("M0,0 10,0 10,10").figures[0]
    assert run.segments == [PolyLineSegment([Point(10, 0), Point(10, 10)])]


def test_repeated_groups_collapse_into_poly_segments():
    fig = parse_path("M0,0 L1,1 2,0 C3,0 4,0 5,1 6,2 7,2 8,1 Q9,0 10,1 11,2 12,1").figures[0]
    assert isinstance(fig.segments[0], PolyLineSegment)
    assert isinstance(fig.segments[1], PolyCubicBezierSegment)
    assert len(fig.segments[1].points) == 6
    assert isinstance(fig.segments[2], PolyQuadraticBezierSegment)
    assert fig.end_point == Point(12, 1)


def test_single_groups_stay_discrete():
    fig = parse_path("M0,0 C1,1 2,1 3,0 Q4,1 5,0").figures[0]
    assert fig.segments == [
        CubicBezierSegment(Point(1, 1), Point(2, 1), Point(3, 0)),
        QuadraticBezierSegment(Point(4, 1), Point(5, 0)),
    ]


def test_horizontal_and_vertical():
    fig = parse_path("M1,2 H5 V7 h-1 v-2").figures[0]
    assert [seg.end for seg in fig.segments] == [Point(5, 2), Point(5, 7), Point(4, 7), Point(4, 5)]


def test_relative_matches_absolute():
    assert_points_close(parse_path(RELATIVE_D).points(), parse_path(MIXED_D).points())


def test_arc_arguments():
    seg = parse_path("M0,0 A5,5 0 0,1 10,0").figures[0].segments[0]
    assert seg == ArcSegment(Point(10, 0), 5.0, 5.0, 0.0, False, True)


def test_arc_packed_flags_and_negative_radius():
    seg = parse_path("M0,0 a-5 5 30 1010 0").figures[0].segments[0]
    assert seg == ArcSegment(Point(10, 0), 5.0, 5.0, 30.0, True, False)


def test_repeated_arc_groups():
    fig = parse_path("M0,0 A5,5 0 0,1 10,0 5,5 0 0,1 20,0").figures[0]
    assert len(fig.segments) == 2
    assert all(isinstance(seg, ArcSegment) for seg in fig.segments)


def test_smooth_cubic_duplicates_control_by_default():
    seg = parse_path("M0,0 C1,1 2,1 3,0 S5,-1 6,0", reflect_smooth=False).figures[0].segments[1]
    assert seg == CubicBezierSegment(Point(5, -1), Point(5, -1), Point(6, 0))


def test_smooth_cubic_reflection():
    seg = parse_path("M0,0 C1,1 2,1 3,0 S5,-1 6,0", reflect_smooth=True).figures[0].segments[1]
    assert seg == CubicBezierSegment(Point(4, -1), Point(5, -1), Point(6, 0))


def test_smooth_cubic_reflection_without_previous_cubic():
    seg = parse_path("M0,0 L3,0 S5,-1 6,0", reflect_smooth=True).figures[0].segments[1]
    assert seg.c1 == Point(3, 0)


def test_number_forms():
    fig = parse_path("M1e1,-.5 L.5.5 2E-1-3").figures[0]
    assert fig.start_point == Point(10, -0.5)
    assert fig.segments[0].points == [Point(0.5, 0.5), Point(0.2, -3)]


def test_commands_after_close_start_new_figure():
    path = parse_path("M0,0 L1,0 Z l0,1")
    assert len(path.figures) == 2
    assert path.figures[1].start_point == Point(0, 0)
    assert path.figures[1].segments == [LineSegment(Point(0, 1))]


def test_multiple_figures():
    path = parse_path("M0,0 L1,1 M5,5 L6,6")
    assert len(path.figures) == 2
    assert not path.figures[0].is_closed


def test_whitespace_and_empty():
    assert parse_path("").is_empty
    assert parse_path("   ").is_empty
    assert len(parse_path("\n  M 0 0 L 1 1  \t").figures) == 1


def test_compact_icon_data():
    path = parse_path(COMPACT_D)
    assert len(path.figures) == 1
    assert path.figures[0].is_closed
    assert path.figures[0].end_point.x == pytest.approx(3.0)


@pytest.mark.parametrize(
    "text",
    [
        "L1,1",
        "M0,0 L",
        "M0,0 X1,1",
        "M0,0 A5,5 0 2,1 10,0",
        "M0,0 L1,1,",
        "M1",
        "M0,0 L1,1 junk",
        "M0,0 C1,1 2,2",
        "M1e999,0",
        "M0,0 L1,-1e400",
    ],
)
def test_malformed_input_raises(text):
    with pytest.raises(PathSyntaxError):
        parse_path(text)


def test_try_parse_returns_none():
    assert try_parse_path("M0,0 L") is None
    assert try_parse_path(SQUARE_D) is not None


def test_syntax_error_carries_offset():
    with pytest.raises(ValueError) as exc_info:
        parse_path("M0,0 Lx")
    assert exc_info.value.position == 6


def test_overflowing_number_is_rejected():
    assert try_parse_path("M1e999,0 L1,1") is None
    with pytest.raises(PathSyntaxError) as exc_info:
        parse_path("M0,0 L1e999,1")
    assert exc_info.value.position == 6
