"""Brush engine building blocks for raster painting: settings and dynamics, dab preparation, blend modes and colour helpers."""

__version__ = "0.1.0"