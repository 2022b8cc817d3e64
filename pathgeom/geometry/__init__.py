"""Path geometry core: curve algebra, segments, figures, fitting, join/split."""

from pathgeom.geometry.figures import Figure, HandleRef, Path
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import Point, Vector
from pathgeom.geometry.segments import (
    ArcSegment,
    CubicBezierSegment,
    LineSegment,
    PolyCubicBezierSegment,
    PolyLineSegment,
    PolyQuadraticBezierSegment,
    QuadraticBezierSegment,
    Segment,
)

__all__ = [
    "Point",
    "Vector",
    "Transform",
    "Segment",
    "LineSegment",
    "CubicBezierSegment",
    "QuadraticBezierSegment",
    "ArcSegment",
    "PolyLineSegment",
    "PolyCubicBezierSegment",
    "PolyQuadraticBezierSegment",
    "Figure",
    "Path",
    "HandleRef",
]
