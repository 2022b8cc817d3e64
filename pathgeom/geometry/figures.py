"""Figures, paths and the flat handle index.

A Figure is one unbroken pen stroke: a start point, its segments and a
closed flag. A Path is an ordered list of figures and owns them outright;
``copy()`` is always deep.

Handle indices flatten (figure, segment, sub-index) into one integer. A
figure contributes its start point as its first handle unless it is closed
and the start coincides with the end, in which case the last segment's end
handle already represents that point.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import NamedTuple

from pathgeom.config import settings
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import ORIGIN, Point
from pathgeom.geometry.segments import Segment

logger = logging.getLogger(__name__)


class HandleRef(NamedTuple):
    """Where a flat handle index lands. ``segment_index == -1`` is the start point."""

    figure_index: int
    segment_index: int
    sub_index: int


@dataclass(eq=False)
class Figure:
    start_point: Point
    segments: list[Segment] = field(default_factory=list)
    is_closed: bool = False

    @property
    def end_point(self) -> Point:
        current = self.start_point
        for seg in self.segments:
            current = seg.end_point(current)
        return current

    def segment_starts(self) -> list[Point]:
        """Start point of each segment, in order."""
        starts = []
        current = self.start_point
        for seg in self.segments:
            starts.append(current)
            current = seg.end_point(current)
        return starts

    def reversed(self) -> Figure:
        """Same shape traced from the other end. The closed flag is not carried."""
        result = Figure(start_point=self.start_point)
        current = self.start_point
        for seg in self.segments:
            rev, new_start = seg.reversed(current)
            result.segments.insert(0, rev)
            result.start_point = new_start
            current = new_start
        return result

    def transform(self, transform: Transform) -> None:
        current = self.start_point
        for seg in self.segments:
            next_start = seg.end_point(current)
            seg.transform(current, transform)
            current = next_start
        self.start_point = transform.apply(self.start_point)

    def points(self) -> list[Point]:
        pts = [self.start_point]
        for seg in self.segments:
            pts.extend(seg.stored_points())
        return pts

    def copy(self) -> Figure:
        return copy.deepcopy(self)

    # -- handles --------------------------------------------------------------

    def has_start_handle(self) -> bool:
        if not self.is_closed:
            return True
        return not self.start_point.is_close(self.end_point, settings.handle_tolerance)

    def handle_count(self) -> int:
        count = 1 if self.has_start_handle() else 0
        return count + sum(seg.handle_count() for seg in self.segments)

    def locate_handle(self, index: int) -> tuple[int, int] | None:
        """Resolve a figure-local index to (segment_index, sub_index)."""
        if index < 0:
            return None
        if self.has_start_handle():
            if index == 0:
                return (-1, 0)
            index -= 1
        for i, seg in enumerate(self.segments):
            count = seg.handle_count()
            if index < count:
                return (i, index)
            index -= count
        return None

    def get_handle(self, index: int) -> Point:
        loc = self.locate_handle(index)
        if loc is None:
            return ORIGIN
        seg_index, sub_index = loc
        if seg_index < 0:
            return self.start_point
        start = self.segment_starts()[seg_index]
        return self.segments[seg_index].get_handle(start, sub_index)

    def set_handle(self, index: int, point: Point) -> None:
        loc = self.locate_handle(index)
        if loc is None:
            logger.debug("Ignoring out-of-range handle %d", index)
            return
        seg_index, sub_index = loc
        if seg_index < 0:
            self.start_point = point
            return
        has_start = self.has_start_handle()
        seg = self.segments[seg_index]
        start = self.segment_starts()[seg_index]
        seg.set_handle(start, sub_index, point)
        # in a closed figure the final end point doubles as the start point
        is_last = seg_index == len(self.segments) - 1 and sub_index == seg.handle_count() - 1
        if self.is_closed and is_last and not has_start:
            self.start_point = point


@dataclass(eq=False)
class Path:
    figures: list[Figure] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.figures

    def points(self) -> list[Point]:
        pts: list[Point] = []
        for fig in self.figures:
            pts.extend(fig.points())
        return pts

    def copy(self) -> Path:
        return copy.deepcopy(self)

    def transform(self, transform: Transform) -> None:
        for fig in self.figures:
            fig.transform(transform)

    def handle_count(self) -> int:
        return sum(fig.handle_count() for fig in self.figures)

    def locate_handle(self, index: int) -> HandleRef | None:
        if index < 0:
            return None
        for i, fig in enumerate(self.figures):
            count = fig.handle_count()
            if index < count:
                loc = fig.locate_handle(index)
                if loc is None:
                    return None
                return HandleRef(i, loc[0], loc[1])
            index -= count
        return None

    def _figure_for(self, index: int) -> tuple[Figure, int] | None:
        if index < 0:
            return None
        for fig in self.figures:
            count = fig.handle_count()
            if index < count:
                return fig, index
            index -= count
        return None

    def get_handle(self, index: int) -> Point:
        found = self._figure_for(index)
        if found is None:
            return ORIGIN
        fig, local = found
        return fig.get_handle(local)

    def set_handle(self, index: int, point: Point) -> None:
        found = self._figure_for(index)
        if found is None:
            logger.debug("Ignoring out-of-range handle %d", index)
            return
        fig, local = found
        fig.set_handle(local, point)

    def handles(self) -> list[Point]:
        return [self.get_handle(i) for i in range(self.handle_count())]


def transform_path(path: Path, transform: Transform) -> None:
    """Bake ``transform`` into the path's coordinates in place."""
    path.transform(transform)


def transformed_path(path: Path, transform: Transform) -> Path:
    result = path.copy()
    result.transform(transform)
    return result
