"""Path → SVG path data string."""

from __future__ import annotations

from pathgeom.config import settings
from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.point import Point
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


def format_number(value: float, precision: int | None = None) -> str:
    """Locale-independent number text: fixed decimals, trailing zeros stripped."""
    if precision is None:
        precision = settings.number_precision
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_point(p: Point, precision: int | None = None) -> str:
    return f"{format_number(p.x, precision)},{format_number(p.y, precision)}"


def _points(points: list[Point], precision: int | None) -> str:
    return " ".join(format_point(p, precision) for p in points)


def format_segment(seg: Segment, precision: int | None = None) -> str:
    if isinstance(seg, LineSegment):
        return "L" + format_point(seg.end, precision)
    if isinstance(seg, CubicBezierSegment):
        return "C" + _points([seg.c1, seg.c2, seg.end], precision)
    if isinstance(seg, QuadraticBezierSegment):
        return "Q" + _points([seg.c1, seg.end], precision)
    if isinstance(seg, ArcSegment):
        return (
            f"A{format_number(seg.radius_x, precision)},{format_number(seg.radius_y, precision)}"
            f" {format_number(seg.rotation_deg, precision)}"
            f" {int(seg.is_large_arc)},{int(seg.sweep_clockwise)}"
            f" {format_point(seg.end, precision)}"
        )
    if isinstance(seg, PolyLineSegment):
        return "L" + _points(seg.points, precision)
    if isinstance(seg, PolyCubicBezierSegment):
        return "C" + _points(seg.points, precision)
    if isinstance(seg, PolyQuadraticBezierSegment):
        return "Q" + _points(seg.points, precision)
    raise TypeError(f"Unknown segment type: {type(seg).__name__}")


def format_figure(fig: Figure, precision: int | None = None) -> str:
    parts = ["M" + format_point(fig.start_point, precision)]
    parts.extend(format_segment(seg, precision) for seg in fig.segments)
    if fig.is_closed:
        parts.append("Z")
    return " ".join(parts)


def format_path(path: Path, precision: int | None = None) -> str:
    return " ".join(format_figure(fig, precision) for fig in path.figures)
