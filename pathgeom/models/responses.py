"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class PathResponse(BaseModel):
    d: str
    figure_count: int = 0
    handle_count: int = 0
    closed: list[bool] = Field(default_factory=list)
    bounds: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


class HandleRefModel(BaseModel):
    figure_index: int
    segment_index: int
    sub_index: int


class HandlesResponse(BaseModel):
    handles: list[tuple[float, float]] = Field(default_factory=list)
    refs: list[HandleRefModel] = Field(default_factory=list)


class JoinResponse(BaseModel):
    joined: bool
    path: PathResponse | None = None


class SplitShape(BaseModel):
    kind: str
    d: str


class SplitResponse(BaseModel):
    shapes: list[SplitShape] = Field(default_factory=list)


class FitResponse(BaseModel):
    control_points: list[tuple[float, float]]
    max_error: float
    d: str
