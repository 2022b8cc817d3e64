"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathgeom.geometry.figures import Path
from pathgeom.svg.parser import parse_path


# Sample path data

SQUARE_D = "M0,0 L10,0 L10,10 L0,10 Z"

# explicitly returns to the start before closing
CLOSED_SQUARE_D = "M0,0 L10,0 L10,10 L0,10 L0,0 Z"

MIXED_D = "M10,20 L30,20 C40,20 50,30 50,40 Q50,60 30,60 A10,10 0 0,1 10,60 Z"

# same geometry as MIXED_D in relative commands
RELATIVE_D = "m10,20 l20,0 c10,0 20,10 20,20 q0,20 -20,20 a10,10 0 0 1 -20,0 z"

POLY_D = "M0,0 L1,1 2,0 3,1 C4,0 5,0 6,1 7,2 8,2 9,1 Q10,0 11,1 12,2 13,1"

TWO_FIGURES_D = "M0,0 L10,0 L10,10 M20,20 Q25,30 30,20 Z"

# icon-style data with compact number syntax
COMPACT_D = "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"

ALL_PATHS = [SQUARE_D, CLOSED_SQUARE_D, MIXED_D, RELATIVE_D, POLY_D, TWO_FIGURES_D, COMPACT_D]


@pytest.fixture
def square_path() -> Path:
    return parse_path(SQUARE_D)


@pytest.fixture
def mixed_path() -> Path:
    return parse_path(MIXED_D)


@pytest.fixture
def poly_path() -> Path:
    return parse_path(POLY_D)


def assert_points_close(a, b, tol: float = 1e-6) -> None:
    assert len(a) == len(b)
    for p, q in zip(a, b):
        assert abs(p.x - q.x) <= tol and abs(p.y - q.y) <= tol, f"{p} != {q}"
