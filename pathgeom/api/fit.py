"""POST /api/fit: fit one Bézier curve to sampled points."""

from __future__ import annotations

from fastapi import APIRouter

from pathgeom.geometry.figures import Figure, Path
from pathgeom.geometry.fitting import chord_length_parameterize, fit_cubic, fit_quadratic, max_error
from pathgeom.geometry.point import Point
from pathgeom.geometry.segments import CubicBezierSegment, QuadraticBezierSegment
from pathgeom.models.requests import FitRequest
from pathgeom.models.responses import FitResponse
from pathgeom.svg.serializer import format_path

router = APIRouter()


@router.post("/fit", response_model=FitResponse)
async def fit(request: FitRequest) -> FitResponse:
    samples = [Point(x, y) for x, y in request.points]
    start_tangent = request.start_tangent or (samples[1] - samples[0])
    end_tangent = request.end_tangent or (samples[-2] - samples[-1])
    u = chord_length_parameterize(samples)

    if request.degree == 3:
        p0, c1, c2, p3 = fit_cubic(samples, start_tangent, end_tangent, u)
        curve = [p0, c1, c2, p3]
        segment = CubicBezierSegment(c1, c2, p3)
    else:
        p0, c1, p2 = fit_quadratic(samples, start_tangent, end_tangent, u)
        curve = [p0, c1, p2]
        segment = QuadraticBezierSegment(c1, p2)

    path = Path([Figure(p0, [segment])])
    return FitResponse(
        control_points=[p.as_tuple() for p in curve],
        max_error=max_error(curve, samples, u),
        d=format_path(path, request.precision),
    )
