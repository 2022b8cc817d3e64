"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathgeom_env: str = "development"
    pathgeom_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Path data output
    number_precision: int = 6
    smooth_curve_reflection: bool = False

    # Geometry tolerances
    handle_tolerance: float = 1e-9
    join_threshold: float | None = None  # None -> stroke width of the joined shapes

    # Interactive drawing
    pencil_smoothness: float = 256.0
    polyline_min_vertex_spacing: float = 5.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
