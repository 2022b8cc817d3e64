"""POST /api/path/*: parse, normalize and edit path data."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathgeom.config import Settings
from pathgeom.dependencies import get_settings
from pathgeom.geometry.figures import Path
from pathgeom.geometry.matrix import Transform
from pathgeom.geometry.point import Point
from pathgeom.models.requests import NormalizeRequest, PathRequest, SetHandleRequest
from pathgeom.models.responses import HandleRefModel, HandlesResponse, PathResponse
from pathgeom.svg.interop import path_bounds
from pathgeom.svg.parser import PathSyntaxError, parse_path
from pathgeom.svg.serializer import format_path

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/path")


def parse_or_422(d: str, reflect_smooth: bool | None = None) -> Path:
    try:
        return parse_path(d, reflect_smooth)
    except PathSyntaxError as e:
        logger.warning("Invalid path data: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


def path_response(path: Path, precision: int | None) -> PathResponse:
    return PathResponse(
        d=format_path(path, precision),
        figure_count=len(path.figures),
        handle_count=path.handle_count(),
        closed=[fig.is_closed for fig in path.figures],
        bounds=path_bounds(path),
    )


@router.post("/normalize", response_model=PathResponse)
async def normalize(
    request: NormalizeRequest, settings: Settings = Depends(get_settings)
) -> PathResponse:
    path = parse_or_422(request.d, request.reflect_smooth)
    if request.transform is not None:
        path.transform(Transform.from_affine(*request.transform))
    precision = request.precision if request.precision is not None else settings.number_precision
    return path_response(path, precision)


@router.post("/handles", response_model=HandlesResponse)
async def handles(request: PathRequest) -> HandlesResponse:
    path = parse_or_422(request.d)
    points = path.handles()
    refs = [path.locate_handle(i) for i in range(len(points))]
    return HandlesResponse(
        handles=[p.as_tuple() for p in points],
        refs=[HandleRefModel(**ref._asdict()) for ref in refs if ref is not None],
    )


@router.post("/handles/set", response_model=PathResponse)
async def set_handle(request: SetHandleRequest) -> PathResponse:
    path = parse_or_422(request.d)
    if not 0 <= request.index < path.handle_count():
        raise HTTPException(status_code=422, detail=f"handle index {request.index} out of range")
    path.set_handle(request.index, Point(request.x, request.y))
    return path_response(path, request.precision)
