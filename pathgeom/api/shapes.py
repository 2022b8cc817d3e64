"""POST /api/shapes/*: join primitives into one path, split a path apart."""

from __future__ import annotations

from fastapi import APIRouter

from pathgeom.api.paths import parse_or_422, path_response
from pathgeom.models.requests import JoinRequest, SplitRequest
from pathgeom.models.responses import JoinResponse, SplitResponse, SplitShape
from pathgeom.shapes.path import PathShape
from pathgeom.svg.serializer import format_path

router = APIRouter(prefix="/shapes")


@router.post("/join", response_model=JoinResponse)
async def join(request: JoinRequest) -> JoinResponse:
    shapes = [PathShape(parse_or_422(item.d), style=item.style) for item in request.shapes]
    joined = PathShape.create(shapes, request.threshold)
    if joined is None:
        return JoinResponse(joined=False)
    return JoinResponse(joined=True, path=path_response(joined.path, request.precision))


@router.post("/split", response_model=SplitResponse)
async def split(request: SplitRequest) -> SplitResponse:
    shape = PathShape(parse_or_422(request.d), style=request.style)
    parts = shape.split()
    return SplitResponse(
        shapes=[
            SplitShape(kind=type(part).__name__, d=format_path(part.rendered_path(), request.precision))
            for part in parts
        ]
    )
