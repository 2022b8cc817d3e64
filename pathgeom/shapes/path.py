"""Composite path primitive and the shape-level join/split operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pathgeom.config import settings
from pathgeom.geometry.figures import Figure, Path, transformed_path
from pathgeom.geometry.fitting import Pencil
from pathgeom.geometry.joining import explode_path, join_figure
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import Point
from pathgeom.geometry.segments import (
    ArcSegment,
    CubicBezierSegment,
    LineSegment,
    QuadraticBezierSegment,
    Segment,
)
from pathgeom.models.style import ShapeStyle
from pathgeom.shapes.arc import Arc
from pathgeom.shapes.base import Shape
from pathgeom.shapes.bezier import CubicBezier, QuadraticBezier
from pathgeom.shapes.line import Line
from pathgeom.svg.parser import try_parse_path
from pathgeom.svg.serializer import format_path

logger = logging.getLogger(__name__)


def shape_for_segment(
    start: Point,
    seg: Segment,
    style: ShapeStyle | None = None,
    transform: Transform | None = None,
) -> Shape:
    """Standalone primitive for a single-unit segment."""
    if isinstance(seg, LineSegment):
        return Line(start, seg.end, style=style, transform=transform)
    if isinstance(seg, CubicBezierSegment):
        return CubicBezier(start, seg.c1, seg.c2, seg.end, style=style, transform=transform)
    if isinstance(seg, QuadraticBezierSegment):
        return QuadraticBezier(start, seg.c1, seg.end, style=style, transform=transform)
    if isinstance(seg, ArcSegment):
        return Arc.from_segment(start, seg, style=style, transform=transform)
    raise TypeError(f"No primitive for segment type: {type(seg).__name__}")


def split_path(
    path: Path,
    style: ShapeStyle | None = None,
    transform: Transform | None = None,
) -> list[Shape]:
    """One primitive per segment unit; ``path`` is emptied.

    Parts carry only the stroke settings of ``style``; a single segment has no fill.
    """
    if style is not None:
        style = style.stroke_only()
    shapes = [shape_for_segment(start, seg, style, transform) for start, seg in explode_path(path)]
    path.figures.clear()
    return shapes


class PathShape(Shape):
    """Arbitrary path: any number of figures of any segment kinds."""

    def __init__(
        self,
        path: Path | None = None,
        style: ShapeStyle | None = None,
        transform: Transform | None = None,
        smoothness: float | None = None,
    ) -> None:
        super().__init__(style, transform)
        self.path = path if path is not None else Path()
        self.smoothness = settings.pencil_smoothness if smoothness is None else smoothness
        self._pencil: Pencil | None = None

    # -- path data --------------------------------------------------------------

    @property
    def data(self) -> str:
        return format_path(self.path)

    @data.setter
    def data(self, text: str) -> None:
        parsed = try_parse_path(text)
        self.path = parsed if parsed is not None else Path()

    @property
    def rendered_data(self) -> str:
        return format_path(self.rendered_path())

    @rendered_data.setter
    def rendered_data(self, text: str) -> None:
        parsed = try_parse_path(text)
        if parsed is None:
            self.path = Path()
            return
        inverse = self.transform.inverse()
        if inverse is None:
            logger.warning("Singular transform; rendered data stored untransformed")
            self.transform = Transform.identity()
            self.path = parsed
            return
        self.path = transformed_path(parsed, inverse)

    # -- drawing session ------------------------------------------------------

    def place(self, point: Point) -> None:
        self.path = Path([Figure(point)])
        self._start_stroke(point)

    def _start_stroke(self, point: Point) -> None:
        self._pencil = Pencil(smoothness=self.smoothness)
        self._pencil.begin(point)

    def draw(self, point: Point) -> None:
        """Extend the current stroke; without one, start a new figure at ``point``."""
        if self._pencil is None:
            self.path.figures.append(Figure(point))
            self._start_stroke(point)
        self._pencil.add(point)
        figure = self.path.figures[-1]
        figure.segments = [QuadraticBezierSegment(c1, end) for _, c1, end in self._pencil.curves()]

    def complete_drawing(self) -> bool:
        self._pencil = None
        return True

    def cancel_drawing(self) -> bool:
        self._pencil = None
        return True

    # -- handles ----------------------------------------------------------------

    @property
    def handle_count(self) -> int:
        return self.path.handle_count()

    def _get_local_handle(self, index: int) -> Point:
        return self.path.get_handle(index)

    def _set_local_handle(self, index: int, point: Point) -> None:
        self.path.set_handle(index, point)

    def snap_points(self) -> list[Point]:
        """Bounding-box corners, plus the end points of an open path."""
        xmin, ymin, xmax, ymax = self.bounds()
        snaps = [Point(xmin, ymin), Point(xmax, ymin), Point(xmin, ymax), Point(xmax, ymax)]
        if self.path.figures and not self.path.figures[0].is_closed:
            rendered = self.rendered_path().figures[0]
            snaps.extend([rendered.start_point, rendered.end_point])
        return snaps

    def _bake(self, transform: Transform) -> None:
        self.path.transform(transform)

    def to_path(self) -> Path:
        return self.path.copy()

    # -- join / split -----------------------------------------------------------

    def split(self) -> list[Shape]:
        shapes = split_path(self.path, self.style, self.transform)
        logger.debug("Split path into %d primitives", len(shapes))
        return shapes

    def join_shape(self, shape: Shape, threshold: float | None = None) -> bool:
        """Stitch ``shape`` into this path. False if the strokes differ."""
        if not self.style.stroke_matches(shape.style):
            logger.debug("Join refused: stroke mismatch with %s", type(shape).__name__)
            return False
        if threshold is None:
            threshold = settings.join_threshold
        if threshold is None:
            threshold = self.style.stroke_width

        shape.normalize()
        incoming = shape.to_path()
        if not self.transform.is_identity:
            inverse = self.transform.inverse()
            if inverse is None:
                logger.warning("Join refused: singular transform")
                return False
            incoming.transform(inverse)

        for fig in incoming.figures:
            join_figure(self.path.figures, fig, threshold)
        return True

    def join(self, shapes: Iterable[Shape], threshold: float | None = None) -> bool:
        for shape in shapes:
            if not self.join_shape(shape, threshold):
                return False
        return True

    @classmethod
    def create(cls, shapes: Iterable[Shape], threshold: float | None = None) -> PathShape | None:
        """Join ``shapes`` into a new path styled after the first one; None on mismatch."""
        shapes = list(shapes)
        if not shapes:
            return None
        style = shapes[0].style.model_copy(update={"stroke_line_join": "round"}, deep=True)
        result = cls(style=style)
        if not result.join(shapes, threshold):
            return None
        return result
