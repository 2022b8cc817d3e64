"""Join/split at the figure level.

Join stitches a new figure onto whichever existing figure it touches, then
keeps going with the extended figure so one call can chain through several
touching figures. Each successful match removes one figure from the
collection, so the loop runs at most ``len(figures)`` times.
"""

from __future__ import annotations

import logging
from enum import Enum

from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.point import Point, touches
from pathgeom.geometry.segments import Segment

logger = logging.getLogger(__name__)


class JoinMode(str, Enum):
    APPEND = "append"  # F.end ~ new.start
    PREPEND = "prepend"  # F.start ~ new.end
    REVERSE_APPEND = "reverse_append"  # F.end ~ new.end
    REVERSE_PREPEND = "reverse_prepend"  # F.start ~ new.start


def find_join_target(
    figures: list[Figure], candidate: Figure, threshold: float
) -> tuple[Figure, JoinMode] | None:
    """First figure the candidate can be attached to, in priority order."""
    others = [f for f in figures if f is not candidate]
    start, end = candidate.start_point, candidate.end_point
    for fig in others:
        if touches(fig.end_point, start, threshold):
            return fig, JoinMode.APPEND
    for fig in others:
        if touches(fig.start_point, end, threshold):
            return fig, JoinMode.PREPEND
    for fig in others:
        if touches(fig.end_point, end, threshold):
            return fig, JoinMode.REVERSE_APPEND
    for fig in others:
        if touches(fig.start_point, start, threshold):
            return fig, JoinMode.REVERSE_PREPEND
    return None


def _splice(target: Figure, candidate: Figure, mode: JoinMode) -> None:
    if mode in (JoinMode.REVERSE_APPEND, JoinMode.REVERSE_PREPEND):
        candidate = candidate.reversed()
    if mode in (JoinMode.APPEND, JoinMode.REVERSE_APPEND):
        target.segments.extend(candidate.segments)
    else:
        target.segments[:0] = candidate.segments
        target.start_point = candidate.start_point
    target.is_closed = False


def _remove(figures: list[Figure], fig: Figure) -> None:
    for i, f in enumerate(figures):
        if f is fig:
            del figures[i]
            return


def join_figure(figures: list[Figure], new_figure: Figure, threshold: float) -> Figure:
    """Merge ``new_figure`` into ``figures`` and return the figure it ended up in.

    ``figures`` is modified in place. ``new_figure`` may or may not already be
    a member of the collection.
    """
    candidate = new_figure
    for _ in range(len(figures) + 1):
        match = find_join_target(figures, candidate, threshold)
        if match is None:
            break
        target, mode = match
        logger.debug("Join %s onto figure at %s", mode.value, target.start_point)
        _splice(target, candidate, mode)
        _remove(figures, candidate)
        candidate = target

    if touches(candidate.start_point, candidate.end_point, threshold) and candidate.segments:
        candidate.is_closed = True

    if not any(f is candidate for f in figures):
        figures.append(candidate)
    return candidate


def join_paths(paths: list[Path], threshold: float) -> Path:
    """Join every figure of every path into one path."""
    result = Path()
    for path in paths:
        for fig in path.figures:
            join_figure(result.figures, fig.copy(), threshold)
    return result


def explode_path(path: Path) -> list[tuple[Point, Segment]]:
    """Every single-unit segment of the path with its start point.

    Implicit closing lines of closed figures are not materialized.
    """
    units: list[tuple[Point, Segment]] = []
    for fig in path.figures:
        for start, seg in zip(fig.segment_starts(), fig.segments):
            units.extend(seg.explode(start))
    return units
