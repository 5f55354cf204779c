"""Quaternion fractal sampling, marching-cubes tables, mesh helpers and matrix-derived parameters."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "cli",
    "controls",
    "coords",
    "geometry",
    "matrix",
    "quaternion",
    "sampling",
    "settings",
    "tables",
]