"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from pathgeom.models.style import ShapeStyle


class PathRequest(BaseModel):
    d: str = Field(..., description="SVG path data")
    precision: int | None = Field(
        default=None, ge=0, le=15, description="Decimal places in the output path data"
    )


class NormalizeRequest(PathRequest):
    transform: list[float] | None = Field(
        default=None,
        min_length=6,
        max_length=6,
        description="Affine matrix a b c d e f (SVG order) baked into the coordinates",
    )
    reflect_smooth: bool | None = Field(
        default=None, description="Reflect the previous control point for S commands"
    )


class SetHandleRequest(PathRequest):
    index: int = Field(..., description="Flat handle index")
    x: float
    y: float


class ShapeInput(BaseModel):
    d: str = Field(..., description="SVG path data of the shape")
    style: ShapeStyle = Field(default_factory=ShapeStyle)


class JoinRequest(BaseModel):
    shapes: list[ShapeInput] = Field(..., min_length=1, description="Shapes to stitch together")
    threshold: float | None = Field(
        default=None, ge=0.0, description="Endpoint snap distance (default: stroke width)"
    )
    precision: int | None = Field(default=None, ge=0, le=15)


class SplitRequest(ShapeInput):
    precision: int | None = Field(default=None, ge=0, le=15)


class FitRequest(BaseModel):
    points: list[tuple[float, float]] = Field(..., min_length=2, description="Sampled stroke points")
    start_tangent: tuple[float, float] | None = Field(
        default=None, description="Unit direction leaving the first point (default: first chord)"
    )
    end_tangent: tuple[float, float] | None = Field(
        default=None, description="Direction from the last point back into the curve (default: last chord)"
    )
    degree: Literal[2, 3] = 3
    precision: int | None = Field(default=None, ge=0, le=15)
