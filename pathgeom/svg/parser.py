"""SVG path data parser.

Recursive descent over the ``d`` attribute mini-language (M L H V C Q S A Z,
absolute and relative). One coordinate group per command letter yields a
single segment; repeated groups collapse into the matching poly segment.

``parse_path`` raises ``PathSyntaxError``; ``try_parse_path`` returns None
instead and never yields a partially parsed path.
"""

from __future__ import annotations

import logging
import math
import re

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

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WSP = " \t\r\n\f"
_NUMBER_START = "+-.0123456789"
_COMMANDS = "MmLlHhVvCcQqSsAaZz"


class PathSyntaxError(ValueError):
    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at offset {position}")
        self.position = position


class _Reader:
    """Character stream with one-character lookahead."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def read(self) -> str:
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def error(self, message: str) -> PathSyntaxError:
        return PathSyntaxError(message, self.pos)

    def skip_ws(self) -> None:
        while self.peek() and self.peek() in _WSP:
            self.pos += 1

    def skip_comma_wsp(self) -> None:
        self.skip_ws()
        if self.peek() == ",":
            self.pos += 1
            self.skip_ws()

    def at_number(self) -> bool:
        ch = self.peek()
        return bool(ch) and ch in _NUMBER_START

    def number(self) -> float:
        m = _NUMBER_RE.match(self.text, self.pos)
        if m is None:
            raise self.error(f"expected number, found {self.peek()!r}")
        value = float(m.group(0))
        if not math.isfinite(value):
            raise self.error("number out of range")
        self.pos = m.end()
        return value

    def flag(self) -> bool:
        ch = self.peek()
        if ch not in ("0", "1"):
            raise self.error(f"expected flag 0 or 1, found {ch!r}")
        self.pos += 1
        return ch == "1"

    def point(self) -> Point:
        x = self.number()
        self.skip_comma_wsp()
        y = self.number()
        return Point(x, y)

    def more(self) -> bool:
        """Another coordinate group follows the current one."""
        self.skip_ws()
        if self.peek() == ",":
            self.pos += 1
            self.skip_ws()
            if not self.at_number():
                raise self.error("expected coordinate after ','")
            return True
        return self.at_number()


class _PathParser:
    def __init__(self, text: str, reflect_smooth: bool) -> None:
        self.reader = _Reader(text)
        self.reflect_smooth = reflect_smooth
        self.path = Path()
        self.figure: Figure | None = None
        self.current = Point(0.0, 0.0)
        self.subpath_start: Point | None = None
        self.last_c2: Point | None = None

    def parse(self) -> Path:
        r = self.reader
        r.skip_ws()
        while not r.at_end():
            cmd = r.read()
            if cmd not in _COMMANDS:
                r.pos -= 1
                raise r.error(f"unexpected character {cmd!r}")
            self._command(cmd)
            r.skip_ws()
        return self.path

    # -- helpers --------------------------------------------------------------

    def _abs(self, p: Point, relative: bool, origin: Point) -> Point:
        if relative:
            return Point(origin.x + p.x, origin.y + p.y)
        return p

    def _ensure_figure(self) -> Figure:
        if self.figure is None:
            if self.subpath_start is None:
                raise self.reader.error("path data must begin with a moveto")
            self.figure = Figure(start_point=self.subpath_start)
            self.path.figures.append(self.figure)
        return self.figure

    def _emit(self, seg: Segment) -> None:
        self._ensure_figure().segments.append(seg)

    def _groups(self, read_group) -> list:
        r = self.reader
        r.skip_ws()
        if not r.at_number():
            raise r.error("expected coordinates")
        groups = [read_group()]
        while r.more():
            groups.append(read_group())
        return groups

    # -- commands -------------------------------------------------------------

    def _command(self, cmd: str) -> None:
        relative = cmd.islower()
        c = cmd.upper()
        if c == "M":
            self._moveto(relative)
        elif c == "Z":
            self._close()
        elif c in "LHV":
            self._lineto(c, relative)
        elif c == "C":
            self._cubic(relative)
        elif c == "S":
            self._smooth_cubic(relative)
        elif c == "Q":
            self._quadratic(relative)
        elif c == "A":
            self._arc(relative)
        if c not in "CS":
            self.last_c2 = None

    def _moveto(self, relative: bool) -> None:
        r = self.reader
        r.skip_ws()
        start = self._abs(r.point(), relative, self.current)
        self.figure = Figure(start_point=start)
        self.path.figures.append(self.figure)
        self.current = start
        self.subpath_start = start

        points = []
        while r.more():
            p = self._abs(r.point(), relative, self.current)
            points.append(p)
            self.current = p
        if points:
            self._emit_lines(points)

    def _close(self) -> None:
        fig = self._ensure_figure()
        fig.is_closed = True
        self.current = fig.start_point
        self.subpath_start = fig.start_point
        self.figure = None

    def _emit_lines(self, points: list[Point]) -> None:
        if len(points) == 1:
            self._emit(LineSegment(points[0]))
        else:
            self._emit(PolyLineSegment(points))

    def _lineto(self, c: str, relative: bool) -> None:
        self._ensure_figure()
        r = self.reader
        points: list[Point] = []

        def read_group() -> Point:
            if c == "L":
                p = self._abs(r.point(), relative, self.current)
            elif c == "H":
                x = r.number()
                p = Point(self.current.x + x if relative else x, self.current.y)
            else:
                y = r.number()
                p = Point(self.current.x, self.current.y + y if relative else y)
            self.current = p
            points.append(p)
            return p

        self._groups(read_group)
        self._emit_lines(points)

    def _cubic(self, relative: bool) -> None:
        self._ensure_figure()
        r = self.reader

        def read_group() -> tuple[Point, Point, Point]:
            origin = self.current
            c1 = self._abs(r.point(), relative, origin)
            r.skip_comma_wsp()
            c2 = self._abs(r.point(), relative, origin)
            r.skip_comma_wsp()
            end = self._abs(r.point(), relative, origin)
            self.current = end
            self.last_c2 = c2
            return c1, c2, end

        self._emit_cubics(self._groups(read_group))

    def _smooth_cubic(self, relative: bool) -> None:
        self._ensure_figure()
        r = self.reader

        def read_group() -> tuple[Point, Point, Point]:
            origin = self.current
            c2 = self._abs(r.point(), relative, origin)
            r.skip_comma_wsp()
            end = self._abs(r.point(), relative, origin)
            if self.reflect_smooth:
                if self.last_c2 is not None:
                    c1 = Point(2 * origin.x - self.last_c2.x, 2 * origin.y - self.last_c2.y)
                else:
                    c1 = origin
            else:
                c1 = c2
            self.current = end
            self.last_c2 = c2
            return c1, c2, end

        self._emit_cubics(self._groups(read_group))

    def _emit_cubics(self, groups: list[tuple[Point, Point, Point]]) -> None:
        if len(groups) == 1:
            self._emit(CubicBezierSegment(*groups[0]))
        else:
            self._emit(PolyCubicBezierSegment([p for g in groups for p in g]))

    def _quadratic(self, relative: bool) -> None:
        self._ensure_figure()
        r = self.reader

        def read_group() -> tuple[Point, Point]:
            origin = self.current
            c1 = self._abs(r.point(), relative, origin)
            r.skip_comma_wsp()
            end = self._abs(r.point(), relative, origin)
            self.current = end
            return c1, end

        groups = self._groups(read_group)
        if len(groups) == 1:
            self._emit(QuadraticBezierSegment(*groups[0]))
        else:
            self._emit(PolyQuadraticBezierSegment([p for g in groups for p in g]))

    def _arc(self, relative: bool) -> None:
        self._ensure_figure()
        r = self.reader

        def read_group() -> ArcSegment:
            rx = r.number()
            r.skip_comma_wsp()
            ry = r.number()
            r.skip_comma_wsp()
            rotation = r.number()
            r.skip_comma_wsp()
            large = r.flag()
            r.skip_comma_wsp()
            sweep = r.flag()
            r.skip_comma_wsp()
            end = self._abs(r.point(), relative, self.current)
            self.current = end
            return ArcSegment(
                end=end,
                radius_x=abs(rx),
                radius_y=abs(ry),
                rotation_deg=rotation,
                is_large_arc=large,
                sweep_clockwise=sweep,
            )

        for seg in self._groups(read_group):
            self._emit(seg)


def parse_path(text: str, reflect_smooth: bool | None = None) -> Path:
    """Parse path data into a Path. Raises PathSyntaxError on malformed input."""
    if reflect_smooth is None:
        reflect_smooth = settings.smooth_curve_reflection
    return _PathParser(text, reflect_smooth).parse()


def try_parse_path(text: str, reflect_smooth: bool | None = None) -> Path | None:
    """Parse path data, returning None instead of raising."""
    try:
        return parse_path(text, reflect_smooth)
    except PathSyntaxError as e:
        logger.warning("Rejected path data: %s", e)
        return None
