"""Bridge to svgpathtools for measurements the engine does not do itself.

Bounding boxes of curves and arcs need their extrema, and sampled polylines
are handy for checking geometry; both come from svgpathtools' segment
classes built from our figures.
"""

from __future__ import annotations

import numpy as np
import svgpathtools
from numpy.typing import NDArray

from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.joining import explode_path
from pathgeom.geometry.point import Point, points_to_array
from pathgeom.geometry.segments import (
    ArcSegment,
    CubicBezierSegment,
    LineSegment,
    QuadraticBezierSegment,
    Segment,
)
from pathgeom.utils.geometry import bbox


def _c(p: Point) -> complex:
    return complex(p.x, p.y)


def _to_svgpathtools(start: Point, seg: Segment):
    """Convert one single-unit segment; None for segments with nothing to draw."""
    if isinstance(seg, LineSegment):
        return svgpathtools.Line(_c(start), _c(seg.end))
    if isinstance(seg, CubicBezierSegment):
        return svgpathtools.CubicBezier(_c(start), _c(seg.c1), _c(seg.c2), _c(seg.end))
    if isinstance(seg, QuadraticBezierSegment):
        return svgpathtools.QuadraticBezier(_c(start), _c(seg.c1), _c(seg.end))
    if isinstance(seg, ArcSegment):
        if start == seg.end:
            return None
        if seg.radius_x == 0 or seg.radius_y == 0:
            return svgpathtools.Line(_c(start), _c(seg.end))
        return svgpathtools.Arc(
            _c(start),
            complex(seg.radius_x, seg.radius_y),
            seg.rotation_deg,
            seg.is_large_arc,
            seg.sweep_clockwise,
            _c(seg.end),
        )
    raise TypeError(f"Unknown segment type: {type(seg).__name__}")


def to_svgpathtools(path: Path) -> svgpathtools.Path:
    """All drawable units of ``path`` as one svgpathtools Path."""
    pieces = []
    for start, seg in explode_path(path):
        piece = _to_svgpathtools(start, seg)
        if piece is not None:
            pieces.append(piece)
    return svgpathtools.Path(*pieces)


def path_bounds(path: Path) -> tuple[float, float, float, float]:
    """(xmin, ymin, xmax, ymax) of the drawn geometry, including lone start points."""
    corners: list[Point] = [fig.start_point for fig in path.figures]
    for piece in to_svgpathtools(path):
        xmin, xmax, ymin, ymax = piece.bbox()
        corners.append(Point(float(xmin), float(ymin)))
        corners.append(Point(float(xmax), float(ymax)))
    return bbox(points_to_array(corners))


def sample_figure(fig: Figure, samples_per_segment: int = 16) -> NDArray[np.float64]:
    """Points along the figure, evaluated per segment at evenly spaced t."""
    points: list[tuple[float, float]] = [(fig.start_point.x, fig.start_point.y)]
    for piece in to_svgpathtools(Path(figures=[fig])):
        for t in np.linspace(0, 1, samples_per_segment + 1)[1:]:
            pt = piece.point(float(t))
            points.append((pt.real, pt.imag))
    return np.array(points, dtype=np.float64)


def sample_path(path: Path, samples_per_segment: int = 16) -> NDArray[np.float64]:
    if path.is_empty:
        return np.zeros((0, 2))
    return np.concatenate([sample_figure(fig, samples_per_segment) for fig in path.figures])
