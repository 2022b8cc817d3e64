"""Straight line primitive."""

from __future__ import annotations

from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import ORIGIN, Point
from pathgeom.geometry.segments import LineSegment
from pathgeom.models.style import ShapeStyle
from pathgeom.shapes.base import Shape


class Line(Shape):
    def __init__(
        self,
        start: Point = ORIGIN,
        end: Point = ORIGIN,
        style: ShapeStyle | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__(style, transform)
        self.start = start
        self.end = end

    def place(self, point: Point) -> None:
        self.start = self.end = point

    def draw(self, point: Point) -> None:
        self.end = point

    @property
    def handle_count(self) -> int:
        return 2

    def _get_local_handle(self, index: int) -> Point:
        return self.start if index == 0 else self.end

    def _set_local_handle(self, index: int, point: Point) -> None:
        if index == 0:
            self.start = point
        else:
            self.end = point

    def _bake(self, transform: Transform) -> None:
        self.start = transform.apply(self.start)
        self.end = transform.apply(self.end)

    def to_path(self) -> Path:
        return Path([Figure(self.start, [LineSegment(self.end)])])
