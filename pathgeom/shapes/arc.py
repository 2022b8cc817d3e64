"""Elliptical arc primitive.

Handles: 0 = end point, 1 = start point, 2 = width handle on the ellipse's
x axis (on the positive side for clockwise sweep, negative otherwise).
Dragging an end point keeps the chord as the y diameter; dragging the width
handle across the center flips the sweep.
"""

from __future__ import annotations

import math

from pathgeom.geometry.arcs import rotate_point
from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import ORIGIN, Point
from pathgeom.geometry.segments import ArcSegment
from pathgeom.models.style import ShapeStyle
from pathgeom.shapes.base import Shape


class Arc(Shape):
    def __init__(
        self,
        start: Point = ORIGIN,
        end: Point = ORIGIN,
        radius_x: float = 0.0,
        radius_y: float = 0.0,
        rotation_deg: float = 0.0,
        is_large_arc: bool = False,
        sweep_clockwise: bool = True,
        style: ShapeStyle | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__(style, transform)
        self.start = start
        self.segment = ArcSegment(
            end=end,
            radius_x=radius_x,
            radius_y=radius_y,
            rotation_deg=rotation_deg,
            is_large_arc=is_large_arc,
            sweep_clockwise=sweep_clockwise,
        )

    @classmethod
    def from_segment(
        cls,
        start: Point,
        segment: ArcSegment,
        style: ShapeStyle | None = None,
        transform: Transform | None = None,
    ) -> Arc:
        arc = cls(start=start, style=style, transform=transform)
        arc.segment = ArcSegment(**vars(segment))
        return arc

    @property
    def end(self) -> Point:
        return self.segment.end

    @property
    def center(self) -> Point:
        return self.segment.center(self.start)

    @property
    def _tilt(self) -> float:
        return math.radians(self.segment.rotation_deg)

    def _fit_chord(self) -> None:
        delta = self.segment.end - self.start
        self.segment.radius_y = delta.length / 2
        self.segment.rotation_deg = math.degrees(delta.angle()) - 90.0

    def place(self, point: Point) -> None:
        self.start = point
        self.segment.end = point
        self.segment.radius_x = self.segment.radius_y = 0.0

    def draw(self, point: Point) -> None:
        self.segment.end = point
        delta = point - self.start
        self.segment.radius_x = self.segment.radius_y = delta.length / 2
        self.segment.rotation_deg = math.degrees(delta.angle()) - 90.0
        self.segment.sweep_clockwise = True
        self.segment.is_large_arc = True

    @property
    def handle_count(self) -> int:
        return 3

    def _get_local_handle(self, index: int) -> Point:
        if index == 0:
            return self.segment.end
        if index == 1:
            return self.start
        center = self.center
        rx = self.segment.radius_x if self.segment.sweep_clockwise else -self.segment.radius_x
        return rotate_point(Point(center.x + rx, center.y), self._tilt, center)

    def _set_local_handle(self, index: int, point: Point) -> None:
        if index == 0:
            self.segment.end = point
            self._fit_chord()
        elif index == 1:
            self.start = point
            self._fit_chord()
        else:
            center = self.center
            rx = rotate_point(point, -self._tilt, center).x - center.x
            self.segment.sweep_clockwise = rx >= 0
            self.segment.radius_x = abs(rx)

    def _bake(self, transform: Transform) -> None:
        start = self.start
        self.segment.transform(start, transform)
        self.start = transform.apply(start)

    def to_path(self) -> Path:
        return Path([Figure(self.start, [ArcSegment(**vars(self.segment))])])
