"""Drawable primitives: the contract editors use to place, edit and combine geometry."""

from pathgeom.shapes.arc import Arc
from pathgeom.shapes.base import Shape
from pathgeom.shapes.bezier import CubicBezier, QuadraticBezier
from pathgeom.shapes.line import Line
from pathgeom.shapes.path import PathShape, split_path
from pathgeom.shapes.polyline import PolyLine

__all__ = [
    "Shape",
    "Line",
    "CubicBezier",
    "QuadraticBezier",
    "Arc",
    "PolyLine",
    "PathShape",
    "split_path",
]
