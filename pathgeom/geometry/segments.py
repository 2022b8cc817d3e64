"""Segment model.

A figure is a start point followed by segments; every segment only stores
the points after its (implicit) start, so each operation takes the
preceding point as an argument. The set of segment kinds is closed:

    LineSegment, CubicBezierSegment, QuadraticBezierSegment, ArcSegment,
    PolyLineSegment, PolyCubicBezierSegment, PolyQuadraticBezierSegment

Handles are the points an editor can drag. End points are exposed directly;
Bézier control points are exposed as on-curve proxies (cubic at t=1/3 and
t=2/3, quadratic at t=1/2) so that a dragged handle always lies on the
rendered curve.
"""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pathgeom.geometry import curves
from pathgeom.geometry.arcs import ArcParams, ellipse_center, transform_arc
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import Point

CUBIC_PROXY_T1 = 1 / 3
CUBIC_PROXY_T2 = 2 / 3
QUADRATIC_PROXY_T = 0.5


class Segment(ABC):
    """Common protocol of all segment kinds."""

    @abstractmethod
    def end_point(self, start: Point) -> Point: ...

    @abstractmethod
    def reversed(self, start: Point) -> tuple[Segment, Point]:
        """Return the segment traced backwards and its new start point."""

    @abstractmethod
    def transform(self, start: Point, transform: Transform) -> None:
        """Map stored points through ``transform`` in place."""

    @abstractmethod
    def handle_count(self) -> int: ...

    @abstractmethod
    def get_handle(self, start: Point, index: int) -> Point: ...

    @abstractmethod
    def set_handle(self, start: Point, index: int, point: Point) -> None: ...

    @abstractmethod
    def stored_points(self) -> list[Point]:
        """All points the segment stores, in order."""

    @abstractmethod
    def explode(self, start: Point) -> list[tuple[Point, Segment]]:
        """Split into single-unit segments, each paired with its start point."""

    def copy(self) -> Segment:
        return copy.deepcopy(self)


def _check_index(index: int, count: int) -> None:
    if not 0 <= index < count:
        raise IndexError(f"handle index {index} out of range 0..{count - 1}")


# ---------------------------------------------------------------------------
# Single segments
# ---------------------------------------------------------------------------


@dataclass
class LineSegment(Segment):
    end: Point

    def end_point(self, start: Point) -> Point:
        return self.end

    def reversed(self, start: Point) -> tuple[Segment, Point]:
        return LineSegment(start), self.end

    def transform(self, start: Point, transform: Transform) -> None:
        self.end = transform.apply(self.end)

    def handle_count(self) -> int:
        return 1

    def get_handle(self, start: Point, index: int) -> Point:
        _check_index(index, 1)
        return self.end

    def set_handle(self, start: Point, index: int, point: Point) -> None:
        _check_index(index, 1)
        self.end = point

    def stored_points(self) -> list[Point]:
        return [self.end]

    def explode(self, start: Point) -> list[tuple[Point, Segment]]:
        return [(start, LineSegment(self.end))]


@dataclass
class CubicBezierSegment(Segment):
    c1: Point
    c2: Point
    end: Point

    def end_point(self, start: Point) -> Point:
        return self.end

    def reversed(self, start: Point) -> tuple[Segment, Point]:
        return CubicBezierSegment(self.c2, self.c1, start), self.end

    def transform(self, start: Point, transform: Transform) -> None:
        self.c1 = transform.apply(self.c1)
        self.c2 = transform.apply(self.c2)
        self.end = transform.apply(self.end)

    def handle_count(self) -> int:
        return 3

    def get_handle(self, start: Point, index: int) -> Point:
        _check_index(index, 3)
        if index == 0:
            return curves.cubic_evaluate(start, self.c1, self.c2, self.end, CUBIC_PROXY_T1)
        if index == 1:
            return curves.cubic_evaluate(start, self.c1, self.c2, self.end, CUBIC_PROXY_T2)
        return self.end

    def set_handle(self, start: Point, index: int, point: Point) -> None:
        _check_index(index, 3)
        if index == 0:
            self.c1 = curves.solve_cubic_c1(point, start, self.c2, self.end, CUBIC_PROXY_T1)
        elif index == 1:
            self.c2 = curves.solve_cubic_c2(point, start, self.c1, self.end, CUBIC_PROXY_T2)
        else:
            self.end = point

    def stored_points(self) -> list[Point]:
        return [self.c1, self.c2, self.end]

    def explode(self, start: Point) -> list[tuple[Point, Segment]]:
        return [(start, CubicBezierSegment(self.c1, self.c2, self.end))]


@dataclass
class QuadraticBezierSegment(Segment):
    c1: Point
    end: Point

    def end_point(self, start: Point) -> Point:
        return self.end

    def reversed(self, start: Point) -> tuple[Segment, Point]:
        return QuadraticBezierSegment(self.c1, start), self.end

    def transform(self, start: Point, transform: Transform) -> None:
        self.c1 = transform.apply(self.c1)
        self.end = transform.apply(self.end)

    def handle_count(self) -> int:
        return 2

    def get_handle(self, start: Point, index: int) -> Point:
        _check_index(index, 2)
        if index == 0:
            return curves.quadratic_evaluate(start, self.c1, self.end, QUADRATIC_PROXY_T)
        return self.end

    def set_handle(self, start: Point, index: int, point: Point) -> None:
        _check_index(index, 2)
        if index == 0:
            self.c1 = curves.solve_quadratic_c1(point, start, self.end, QUADRATIC_PROXY_T)
        else:
            self.end = point

    def stored_points(self) -> list[Point]:
        return [self.c1, self.end]

    def explode(self, start: Point) -> list[tuple[Point, Segment]]:
        return [(start, QuadraticBezierSegment(self.c1, self.end))]


@dataclass
class ArcSegment(Segment):
    end: Point
    radius_x: float
    radius_y: float
    rotation_deg: float = 0.0
    is_large_arc: bool = False
    sweep_clockwise: bool = True

    def end_point(self, start: Point) -> Point:
        return self.end

    def reversed(self, start: Point) -> tuple[Segment, Point]:
        seg = ArcSegment(
            end=start,
            radius_x=self.radius_x,
            radius_y=self.radius_y,
            rotation_deg=self.rotation_deg,
            is_large_arc=self.is_large_arc,
            sweep_clockwise=not self.sweep_clockwise,
        )
        return seg, self.end

    def params(self, start: Point) -> ArcParams:
        return ArcParams(
            start=start,
            end=self.end,
            radius_x=self.radius_x,
            radius_y=self.radius_y,
            rotation_deg=self.rotation_deg,
            is_large_arc=self.is_large_arc,
            sweep_clockwise=self.sweep_clockwise,
        )

    def center(self, start: Point) -> Point:
        return ellipse_center(
            start,
            self.end,
            self.radius_x,
            self.radius_y,
            math.radians(self.rotation_deg),
            self.is_large_arc,
            self.sweep_clockwise,
        )

    def transform(self, start: Point, transform: Transform) -> None:
        mapped = transform_arc(self.params(start), transform)
        self.end = mapped.end
        self.radius_x = mapped.radius_x
        self.radius_y = mapped.radius_y
        self.rotation_deg = mapped.rotation_deg
        self.is_large_arc = mapped.is_large_arc
        self.sweep_clockwise = mapped.sweep_clockwise

    def handle_count(self) -> int:
        return 1

    def get_handle(self, start: Point, index: int) -> Point:
        _check_index(index, 1)
        return self.end

    def set_handle(self, start: Point, index: int, point: Point) -> None:
        _check_index(index, 1)
        self.end = point

    def stored_points(self) -> list[Point]:
        return [self.end]

    def explode(self, start: Point) -> list[tuple[Point, Segment]]:
        return [(start, copy.deepcopy(self))]


# ---------------------------------------------------------------------------
# Poly variants
# ---------------------------------------------------------------------------


def _reverse_run(start: Point, points: list[Point]) -> tuple[list[Point], Point]:
    """Reverse a chained run of points: [s, p0..pn] -> [pn, ..., p0, s]."""
    if not points:
        return [], start
    return list(reversed(points[:-1])) + [start], points[-1]


@dataclass
class PolyLineSegment(Segment):
    points: list[Point] = field(default_factory=list)

    def end_point(self, start: Point) -> Point:
        return self.points[-1] if self.points else start

    def reversed(self, start: Point) -> tuple[Segment, Point]:
        points, new_start = _reverse_run(start, self.points)
        return PolyLineSegment(points), new_start

    def transform(self, start: Point, transform: Transform) -> None:
        self.points = [transform.apply(p) for p in self.points]

    def handle_count(self) -> int:
        return len(self.points)

    def get_handle(self, start: Point, index: int) -> Point:
        _check_index(index, len(self.points))
        return self.points[index]

    def set_handle(self, start: Point, index: int, point: Point) -> None:
        _check_index(index, len(self.points))
        self.points[index] = point

    def stored_points(self) -> list[Point]:
        return list(self.points)

    def explode(self, start: Point) -> list[tuple[Point, Segment]]:
        units: list[tuple[Point, Segment]] = []
        prev = start
        for p in self.points:
            units.append((prev, LineSegment(p)))
            prev = p
        return units


@dataclass
class PolyCubicBezierSegment(Segment):
    """Run of cubic curves; points are (c1, c2, end) triples."""

    points: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.points) % 3:
            raise ValueError(f"poly cubic needs point triples, got {len(self.points)} points")

    def end_point(self, start: Point) -> Point:
        return self.points[-1] if self.points else start

    def reversed(self, start: Point) -> tuple[Segment, Point]:
        points, new_start = _reverse_run(start, self.points)
        return PolyCubicBezierSegment(points), new_start

    def transform(self, start: Point, transform: Transform) -> None:
        self.points = [transform.apply(p) for p in self.points]

    def handle_count(self) -> int:
        return len(self.points)

    def _unit(self, start: Point, index: int) -> tuple[int, Point]:
        base = index - index % 3
        p0 = self.points[base - 1] if base > 0 else start
        return base, p0

    def get_handle(self, start: Point, index: int) -> Point:
        _check_index(index, len(self.points))
        base, p0 = self._unit(start, index)
        c1, c2, end = self.points[base : base + 3]
        k = index % 3
        if k == 0:
            return curves.cubic_evaluate(p0, c1, c2, end, CUBIC_PROXY_T1)
        if k == 1:
            return curves.cubic_evaluate(p0, c1, c2, end, CUBIC_PROXY_T2)
        return end

    def set_handle(self, start: Point, index: int, point: Point) -> None:
        _check_index(index, len(self.points))
        base, p0 = self._unit(start, index)
        c1, c2, end = self.points[base : base + 3]
        k = index % 3
        if k == 0:
            self.points[index] = curves.solve_cubic_c1(point, p0, c2, end, CUBIC_PROXY_T1)
        elif k == 1:
            self.points[index] = curves.solve_cubic_c2(point, p0, c1, end, CUBIC_PROXY_T2)
        else:
            self.points[index] = point

    def stored_points(self) -> list[Point]:
        return list(self.points)

    def explode(self, start: Point) -> list[tuple[Point, Segment]]:
        units: list[tuple[Point, Segment]] = []
        prev = start
        for i in range(0, len(self.points), 3):
            c1, c2, end = self.points[i : i + 3]
            units.append((prev, CubicBezierSegment(c1, c2, end)))
            prev = end
        return units


@dataclass
class PolyQuadraticBezierSegment(Segment):
    """Run of quadratic curves; points are (c1, end) pairs."""

    points: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.points) % 2:
            raise ValueError(f"poly quadratic needs point pairs, got {len(self.points)} points")

    def end_point(self, start: Point) -> Point:
        return self.points[-1] if self.points else start

    def reversed(self, start: Point) -> tuple[Segment, Point]:
        points, new_start = _reverse_run(start, self.points)
        return PolyQuadraticBezierSegment(points), new_start

    def transform(self, start: Point, transform: Transform) -> None:
        self.points = [transform.apply(p) for p in self.points]

    def handle_count(self) -> int:
        return len(self.points)

    def get_handle(self, start: Point, index: int) -> Point:
        _check_index(index, len(self.points))
        base = index - index % 2
        p0 = self.points[base - 1] if base > 0 else start
        if index % 2 == 0:
            return curves.quadratic_evaluate(p0, self.points[base], self.points[base + 1], QUADRATIC_PROXY_T)
        return self.points[index]

    def set_handle(self, start: Point, index: int, point: Point) -> None:
        _check_index(index, len(self.points))
        base = index - index % 2
        p0 = self.points[base - 1] if base > 0 else start
        if index % 2 == 0:
            self.points[index] = curves.solve_quadratic_c1(point, p0, self.points[base + 1], QUADRATIC_PROXY_T)
        else:
            self.points[index] = point

    def stored_points(self) -> list[Point]:
        return list(self.points)

    def explode(self, start: Point) -> list[tuple[Point, Segment]]:
        units: list[tuple[Point, Segment]] = []
        prev = start
        for i in range(0, len(self.points), 2):
            c1, end = self.points[i : i + 2]
            units.append((prev, QuadraticBezierSegment(c1, end)))
            prev = end
        return units
