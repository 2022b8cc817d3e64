"""Stroke and fill styling carried by every primitive."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ShapeStyle(BaseModel):
    stroke_brush: str | None = Field(default="#000000", description="Stroke paint (color text)")
    stroke_width: float = Field(default=1.0, ge=0.0, description="Stroke width in local units")
    fill_brush: str | None = Field(default=None, description="Fill paint, None for unfilled")
    stroke_line_cap: str = Field(default="butt", description="butt | round | square")
    stroke_line_join: str = Field(default="miter", description="miter | round | bevel")
    stroke_dash_array: list[float] = Field(default_factory=list)

    def stroke_matches(self, other: ShapeStyle) -> bool:
        """Same stroke paint and width; the precondition for joining."""
        return (
            _normalize_brush(self.stroke_brush) == _normalize_brush(other.stroke_brush)
            and self.stroke_width == other.stroke_width
        )

    def stroke_only(self) -> ShapeStyle:
        """Copy of the stroke settings (brush, width, cap, dashes) with no fill."""
        return ShapeStyle(
            stroke_brush=self.stroke_brush,
            stroke_width=self.stroke_width,
            stroke_line_cap=self.stroke_line_cap,
            stroke_dash_array=list(self.stroke_dash_array),
        )


def _normalize_brush(brush: str | None) -> str | None:
    if brush is None:
        return None
    return brush.strip().lower()
