"""Plane coordinates and displacements."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Vector:
        return Vector(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Vector:
        return Vector(self.x / k, self.y / k)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def normalized(self) -> Vector:
        n = self.length
        if n == 0:
            return self
        return Vector(self.x / n, self.y / n)

    def angle(self) -> float:
        """Direction in radians, atan2 convention."""
        return math.atan2(self.y, self.x)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point | Vector) -> Vector | Point:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: Point, tol: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def midpoint(self, other: Point) -> Point:
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


def points_to_array(points: Iterable[Point]) -> NDArray[np.float64]:
    """Stack points into an (N, 2) float array."""
    arr = np.array([(p.x, p.y) for p in points], dtype=np.float64)
    return arr.reshape(-1, 2)


def touches(a: Point, b: Point, threshold: float) -> bool:
    """Plain Euclidean proximity test used by join."""
    return a.distance_to(b) <= threshold
