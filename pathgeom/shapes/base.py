"""Shape: the primitive contract exposed to editors.

Geometry is stored in local coordinates. Everything an editor sees (handles,
snaps, bounds, rendered path data) is in rendered coordinates, obtained by
applying ``transform``. Handle edits are mapped back through the inverse.
``normalize()`` bakes the transform into the stored coordinates.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod

from pathgeom.geometry.figures import Path, transformed_path
from pathgeom.geometry.matrix import Transform, to_local, to_rendered
from pathgeom.geometry.point import ORIGIN, Point, Vector
from pathgeom.models.style import ShapeStyle
from pathgeom.svg.interop import path_bounds
from pathgeom.svg.serializer import format_path

logger = logging.getLogger(__name__)


class Shape(ABC):
    def __init__(self, style: ShapeStyle | None = None, transform: Transform | None = None) -> None:
        self.style = style.model_copy(deep=True) if style is not None else ShapeStyle()
        self.transform = transform.copy() if transform is not None else Transform.identity()

    # -- drawing session ------------------------------------------------------

    def place(self, point: Point) -> None:
        """Begin interactive construction at ``point``."""

    def complete_placing(self) -> bool:
        return True

    def draw(self, point: Point) -> None:
        """Continue interactive construction toward ``point``."""

    def complete_drawing(self) -> bool:
        return True

    def cancel_drawing(self) -> bool:
        return True

    # -- handles ----------------------------------------------------------------

    @property
    @abstractmethod
    def handle_count(self) -> int: ...

    @abstractmethod
    def _get_local_handle(self, index: int) -> Point: ...

    @abstractmethod
    def _set_local_handle(self, index: int, point: Point) -> None: ...

    def get_handle(self, index: int) -> Point:
        if not 0 <= index < self.handle_count:
            return ORIGIN
        return to_rendered(self._get_local_handle(index), self.transform)

    def set_handle(self, index: int, point: Point) -> None:
        if not 0 <= index < self.handle_count:
            logger.debug("Ignoring out-of-range handle %d on %s", index, type(self).__name__)
            return
        local = to_local(point, self.transform)
        if local is None:
            logger.warning("Singular transform on %s; handle %d left unchanged", type(self).__name__, index)
            return
        self._set_local_handle(index, local)

    def move_handle(self, index: int, delta: Vector) -> None:
        if delta.length != 0:
            self.set_handle(index, self.get_handle(index) + delta)

    def handles(self) -> list[Point]:
        return [self.get_handle(i) for i in range(self.handle_count)]

    def snap_points(self) -> list[Point]:
        return self.handles()

    # -- transform --------------------------------------------------------------

    def apply_transform(self, transform: Transform) -> None:
        self.transform = self.transform.then(transform)

    def translate(self, dx: float, dy: float) -> None:
        self.apply_transform(Transform.translation(dx, dy))

    def scale(self, sx: float, sy: float) -> None:
        self.apply_transform(Transform.scaling(sx, sy))

    def scale_at(self, sx: float, sy: float, center: Point) -> None:
        self.apply_transform(Transform.scaling(sx, sy, center))

    def rotate(self, degrees: float) -> None:
        self.apply_transform(Transform.rotation(degrees))

    def rotate_at(self, degrees: float, center: Point) -> None:
        self.apply_transform(Transform.rotation(degrees, center))

    def normalize(self) -> None:
        """Bake the transform into local coordinates and reset it to identity."""
        if not self.transform.is_identity:
            self._bake(self.transform)
        self.transform = Transform.identity()

    @abstractmethod
    def _bake(self, transform: Transform) -> None:
        """Map stored coordinates through ``transform``."""

    # -- geometry ---------------------------------------------------------------

    @abstractmethod
    def to_path(self) -> Path:
        """Geometry in local coordinates, as a freshly built Path."""

    def rendered_path(self) -> Path:
        return transformed_path(self.to_path(), self.transform)

    def bounds(self) -> tuple[float, float, float, float]:
        return path_bounds(self.rendered_path())

    def clone(self) -> Shape:
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_path(self.rendered_path())!r})"
