"""Single cubic and quadratic Bézier primitives.

Unlike path segments, these expose their raw control points as handles.
"""

from __future__ import annotations

from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import ORIGIN, Point
from pathgeom.geometry.segments import CubicBezierSegment, QuadraticBezierSegment
from pathgeom.models.style import ShapeStyle
from pathgeom.shapes.base import Shape


class CubicBezier(Shape):
    def __init__(
        self,
        p1: Point = ORIGIN,
        p2: Point = ORIGIN,
        p3: Point = ORIGIN,
        p4: Point = ORIGIN,
        style: ShapeStyle | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__(style, transform)
        self.points = [p1, p2, p3, p4]

    def place(self, point: Point) -> None:
        self.points = [point, point, point, point]

    def draw(self, point: Point) -> None:
        p1 = self.points[0]
        chord = point - p1
        self.points = [p1, p1 + chord / 3, p1 + chord * (2 / 3), point]

    @property
    def handle_count(self) -> int:
        return 4

    def _get_local_handle(self, index: int) -> Point:
        return self.points[index]

    def _set_local_handle(self, index: int, point: Point) -> None:
        self.points[index] = point

    def _bake(self, transform: Transform) -> None:
        self.points = [transform.apply(p) for p in self.points]

    def to_path(self) -> Path:
        p1, p2, p3, p4 = self.points
        return Path([Figure(p1, [CubicBezierSegment(p2, p3, p4)])])


class QuadraticBezier(Shape):
    def __init__(
        self,
        p1: Point = ORIGIN,
        p2: Point = ORIGIN,
        p3: Point = ORIGIN,
        style: ShapeStyle | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__(style, transform)
        self.points = [p1, p2, p3]

    def place(self, point: Point) -> None:
        self.points = [point, point, point]

    def draw(self, point: Point) -> None:
        p1 = self.points[0]
        self.points = [p1, p1.midpoint(point), point]

    @property
    def handle_count(self) -> int:
        return 3

    def _get_local_handle(self, index: int) -> Point:
        return self.points[index]

    def _set_local_handle(self, index: int, point: Point) -> None:
        if index == 1:
            self.points[1] = point
            return
        # dragging an end point pulls the control point half as far
        shift = (point - self.points[index]) / 2
        self.points[1] = self.points[1] + shift
        self.points[index] = point

    def _bake(self, transform: Transform) -> None:
        self.points = [transform.apply(p) for p in self.points]

    def to_path(self) -> Path:
        p1, p2, p3 = self.points
        return Path([Figure(p1, [QuadraticBezierSegment(p2, p3)])])
