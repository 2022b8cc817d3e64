"""pathgeom: vector path geometry engine."""

__version__ = "0.1.0"
