"""Open or closed run of straight lines, drawn vertex by vertex."""

from __future__ import annotations

from pathgeom.config import settings
from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import Point
from pathgeom.geometry.segments import PolyLineSegment
from pathgeom.models.style import ShapeStyle
from pathgeom.shapes.base import Shape


class PolyLine(Shape):
    def __init__(
        self,
        points: list[Point] | None = None,
        style: ShapeStyle | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__(style, transform)
        self.points: list[Point] = list(points) if points else []
        self._reset = True

    def place(self, point: Point) -> None:
        if self._reset or not self.points:
            self.points = [point]
            self._reset = False
        self.points[-1] = point

    def complete_placing(self) -> bool:
        """True once the loop is closed; otherwise start a new rubber-band vertex."""
        if not self.points:
            return False
        if len(self.points) > 1 and self.points[0] == self.points[-1]:
            return True
        self.points.append(self.points[-1])
        return False

    def draw(self, point: Point) -> None:
        self.place(point)

    def complete_drawing(self) -> bool:
        if len(self.points) > 2 and self.points[0] == self.points[-1]:
            return True
        if len(self.points) > 1:
            edge = self.points[-1] - self.points[-2]
            if edge.length >= settings.polyline_min_vertex_spacing:
                self.points.append(self.points[-1])
        return False

    def cancel_drawing(self) -> bool:
        if not self.points:
            return False
        self.points.pop()
        return True

    @property
    def handle_count(self) -> int:
        return len(self.points)

    def _get_local_handle(self, index: int) -> Point:
        return self.points[index]

    def _set_local_handle(self, index: int, point: Point) -> None:
        self.points[index] = point

    def _bake(self, transform: Transform) -> None:
        self.points = [transform.apply(p) for p in self.points]

    def to_path(self) -> Path:
        if not self.points:
            return Path()
        first, rest = self.points[0], self.points[1:]
        segments = [PolyLineSegment(rest)] if rest else []
        return Path([Figure(first, segments)])
