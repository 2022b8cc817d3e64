"""Tests for figure-level join priority and chaining."""

from __future__ import annotations

from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.joining import JoinMode, explode_path, find_join_target, join_figure, join_paths
from pathgeom.geometry.point import Point
from pathgeom.geometry.segments import LineSegment, PolyLineSegment
from pathgeom.svg.parser import parse_path


def _line(x0, y0, x1, y1) -> Figure:
    return Figure(Point(x0, y0), [LineSegment(Point(x1, y1))])


def test_append_when_end_meets_start():
    figures = [_line(0, 0, 10, 0)]
    result = join_figure(figures, _line(10, 0, 10, 10), 0.5)
    assert len(figures) == 1
    assert result is figures[0]
    assert result.end_point == Point(10, 10)


def test_prepend_when_start_meets_end():
    figures = [_line(0, 0, 10, 0)]
    join_figure(figures, _line(-10, 0, 0, 0), 0.5)
    assert len(figures) == 1
    assert figures[0].start_point == Point(-10, 0)
    assert figures[0].end_point == Point(10, 0)


def test_reverse_append_when_ends_meet():
    figures = [_line(0, 0, 10, 0)]
    assert find_join_target(figures, _line(20, 0, 10, 0), 0.5)[1] is JoinMode.REVERSE_APPEND
    join_figure(figures, _line(20, 0, 10, 0), 0.5)
    assert figures[0].start_point == Point(0, 0)
    assert figures[0].end_point == Point(20, 0)


def test_reverse_prepend_when_starts_meet():
    figures = [_line(0, 0, 10, 0)]
    assert find_join_target(figures, _line(0, 0, -10, 5), 0.5)[1] is JoinMode.REVERSE_PREPEND
    join_figure(figures, _line(0, 0, -10, 5), 0.5)
    assert figures[0].start_point == Point(-10, 5)
    assert figures[0].end_point == Point(10, 0)


def test_priority_prefers_append():
    # the candidate touches F.end with its start and F.start with its end
    figures = [_line(0, 0, 10, 0)]
    target = find_join_target(figures, _line(10, 0, 0, 0), 0.5)
    assert target[1] is JoinMode.APPEND


def test_join_chains_through_bridging_figure():
    figures = [_line(0, 0, 10, 0), _line(20, 0, 30, 0)]
    result = join_figure(figures, _line(10, 0, 20, 0), 0.5)
    assert len(figures) == 1
    assert result is figures[0]
    assert result.start_point == Point(0, 0)
    assert result.end_point == Point(30, 0)
    assert len(result.segments) == 3


def test_no_match_adds_figure():
    figures = [_line(0, 0, 10, 0)]
    join_figure(figures, _line(50, 50, 60, 60), 0.5)
    assert len(figures) == 2
    assert not figures[1].is_closed


def test_touching_own_ends_closes():
    figures: list[Figure] = []
    tri = Figure(Point(0, 0), [PolyLineSegment([Point(10, 0), Point(5, 8), Point(0.1, 0)])])
    join_figure(figures, tri, 0.5)
    assert figures[0].is_closed


def test_join_paths_merges_across_paths():
    result = join_paths([parse_path("M0,0 L5,0"), parse_path("M5,0 L5,5 M5,5 L0,5")], 0.01)
    assert len(result.figures) == 1
    assert result.figures[0].end_point == Point(0, 5)


def test_explode_skips_implicit_close():
    units = explode_path(parse_path("M0,0 L10,0 10,10 Z"))
    assert len(units) == 2
    assert units[1][0] == Point(10, 0)


def test_explode_empty_path():
    assert explode_path(Path()) == []
