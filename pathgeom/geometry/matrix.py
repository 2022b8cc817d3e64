"""3x3 homogeneous transform.

Column-vector convention: a point p maps to M @ [x, y, 1]. ``a.then(b)`` is
the transform that applies ``a`` first and ``b`` second, which matches how
editing operations accumulate onto a shape.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from pathgeom.geometry.point import Point

logger = logging.getLogger(__name__)


class Transform:
    __slots__ = ("matrix",)

    def __init__(self, matrix: NDArray[np.float64] | None = None) -> None:
        if matrix is None:
            matrix = np.eye(3)
        self.matrix = np.asarray(matrix, dtype=np.float64).reshape(3, 3)

    # -- constructors -------------------------------------------------------

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def from_affine(cls, a: float, b: float, c: float, d: float, e: float, f: float) -> Transform:
        """SVG matrix(a b c d e f) ordering."""
        return cls(np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]]))

    @classmethod
    def translation(cls, dx: float, dy: float) -> Transform:
        return cls.from_affine(1.0, 0.0, 0.0, 1.0, dx, dy)

    @classmethod
    def scaling(cls, sx: float, sy: float, center: Point | None = None) -> Transform:
        t = cls.from_affine(sx, 0.0, 0.0, sy, 0.0, 0.0)
        if center is None:
            return t
        return cls.translation(-center.x, -center.y).then(t).then(
            cls.translation(center.x, center.y)
        )

    @classmethod
    def rotation(cls, degrees: float, center: Point | None = None) -> Transform:
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        t = cls.from_affine(cos, sin, -sin, cos, 0.0, 0.0)
        if center is None:
            return t
        return cls.translation(-center.x, -center.y).then(t).then(
            cls.translation(center.x, center.y)
        )

    # -- algebra --------------------------------------------------------------

    def then(self, other: Transform) -> Transform:
        return Transform(other.matrix @ self.matrix)

    def inverse(self) -> Transform | None:
        if abs(np.linalg.det(self.matrix)) < 1e-12:
            return None
        return Transform(np.linalg.inv(self.matrix))

    @property
    def is_identity(self) -> bool:
        return bool(np.allclose(self.matrix, np.eye(3), rtol=0.0, atol=1e-12))

    @property
    def is_affine(self) -> bool:
        return bool(np.allclose(self.matrix[2], [0.0, 0.0, 1.0], rtol=0.0, atol=1e-12))

    @property
    def linear(self) -> NDArray[np.float64]:
        """Upper-left 2x2 block."""
        return self.matrix[:2, :2]

    def apply(self, point: Point) -> Point:
        """Map ``point``. A point sent to infinity (w == 0) comes back as its direction."""
        x, y, w = self.matrix @ np.array([point.x, point.y, 1.0])
        if w == 0.0:
            logger.debug("Point %s maps to infinity; returning its direction", point)
        elif w != 1.0:
            x, y = x / w, y / w
        return Point(float(x), float(y))

    def to_affine(self) -> tuple[float, float, float, float, float, float]:
        m = self.matrix
        return (
            float(m[0, 0]), float(m[1, 0]), float(m[0, 1]),
            float(m[1, 1]), float(m[0, 2]), float(m[1, 2]),
        )

    def copy(self) -> Transform:
        return Transform(self.matrix.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.allclose(self.matrix, other.matrix, rtol=0.0, atol=1e-12))

    def __repr__(self) -> str:
        return f"Transform({self.to_affine()})"


def to_rendered(point: Point, transform: Transform) -> Point:
    """Local (stored) coordinates -> rendered coordinates."""
    return transform.apply(point)


def to_local(point: Point, transform: Transform) -> Point | None:
    """Rendered coordinates -> local coordinates; None if the transform is singular."""
    inverse = transform.inverse()
    if inverse is None:
        return None
    return inverse.apply(point)
