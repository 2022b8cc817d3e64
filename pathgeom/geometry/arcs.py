"""Elliptical-arc geometry.

Endpoint-to-center conversion (SVG implementation notes, F.6.5) and the
re-derivation of arc parameters after an arbitrary linear transform.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import Point

logger = logging.getLogger(__name__)


def rotate_point(point: Point, angle_rad: float, center: Point) -> Point:
    cos, sin = math.cos(angle_rad), math.sin(angle_rad)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(center.x + dx * cos - dy * sin, center.y + dx * sin + dy * cos)


def feasible_radii(
    p1: Point, p2: Point, rx: float, ry: float, tilt_rad: float
) -> tuple[float, float]:
    """Scale radii up to the smallest ellipse that spans the chord p1-p2."""
    rx, ry = abs(rx), abs(ry)
    if rx == 0 or ry == 0:
        return rx, ry
    a = (p1.x - p2.x) / 2
    b = (p1.y - p2.y) / 2
    cos, sin = math.cos(tilt_rad), math.sin(tilt_rad)
    x1p = a * cos + b * sin
    y1p = b * cos - a * sin
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        scale = math.sqrt(lam)
        return rx * scale, ry * scale
    return rx, ry


def ellipse_center(
    p1: Point,
    p2: Point,
    rx: float,
    ry: float,
    tilt_rad: float,
    is_large_arc: bool,
    is_clockwise: bool,
) -> Point:
    """Center of the ellipse through p1 and p2.

    Radii that cannot span the chord are scaled up first. Zero radii and
    coincident endpoints have no defined center; the chord midpoint is
    returned instead of NaN.
    """
    mid = p1.midpoint(p2)
    rx, ry = feasible_radii(p1, p2, rx, ry, tilt_rad)
    if rx == 0 or ry == 0:
        return mid

    a = (p1.x - p2.x) / 2
    b = (p1.y - p2.y) / 2
    cos, sin = math.cos(tilt_rad), math.sin(tilt_rad)
    x1p = a * cos + b * sin
    y1p = b * cos - a * sin

    rx2, ry2 = rx * rx, ry * ry
    denom = rx2 * y1p * y1p + ry2 * x1p * x1p
    if denom == 0:
        return mid
    num = rx2 * ry2 - rx2 * y1p * y1p - ry2 * x1p * x1p
    c = math.sqrt(max(0.0, num / denom))
    if is_large_arc == is_clockwise:
        c = -c

    cxp = c * rx * y1p / ry
    cyp = -c * ry * x1p / rx
    return Point(cxp * cos - cyp * sin + mid.x, cxp * sin + cyp * cos + mid.y)


@dataclass
class ArcParams:
    start: Point
    end: Point
    radius_x: float
    radius_y: float
    rotation_deg: float
    is_large_arc: bool
    sweep_clockwise: bool


def transform_arc(params: ArcParams, transform: Transform) -> ArcParams:
    """Map an arc through ``transform``.

    Endpoints go through the full transform. The ellipse is re-derived from
    the linear part: the image of the unit circle under L·R(tilt)·diag(rx, ry)
    is an ellipse whose semi-axes are the singular values and whose major
    direction is the matching left singular vector. A reflection (negative
    determinant) reverses the drawing direction.
    """
    start = transform.apply(params.start)
    end = transform.apply(params.end)
    if not transform.is_affine:
        logger.debug("Projective transform on arc: ellipse derived from linear part only")

    linear = transform.linear
    tilt = math.radians(params.rotation_deg)
    cos, sin = math.cos(tilt), math.sin(tilt)
    rot = np.array([[cos, -sin], [sin, cos]])
    shape = linear @ rot @ np.diag([params.radius_x, params.radius_y])

    # image of the original x semi-axis; used to keep the axis pairing stable
    x_axis = shape[:, 0]
    u, s, _ = np.linalg.svd(shape)
    rx, ry = float(s[0]), float(s[1])
    major = u[:, 0]
    minor_axis = u[:, 1]
    if abs(float(np.dot(x_axis, minor_axis))) > abs(float(np.dot(x_axis, major))) + 1e-12:
        major = minor_axis
        rx, ry = ry, rx
    if abs(rx - ry) <= 1e-12 * max(rx, 1.0):
        major = x_axis
    elif float(np.dot(x_axis, major)) < 0:
        major = -major

    rotation_deg = math.degrees(math.atan2(float(major[1]), float(major[0])))
    sweep = params.sweep_clockwise
    if float(np.linalg.det(linear)) < 0:
        sweep = not sweep

    return ArcParams(
        start=start,
        end=end,
        radius_x=rx,
        radius_y=ry,
        rotation_deg=rotation_deg,
        is_large_arc=params.is_large_arc,
        sweep_clockwise=sweep,
    )
