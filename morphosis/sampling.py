"""Point samplers for 4D quaternion Julia and Mandelbrot sets.

Every sampler returns ``1.0`` for a point that stays bounded for the
configured number of iterations and ``0.0`` for a point that escapes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Tuple

from morphosis.quaternion import Quat

Point = Tuple[float, float, float]
_Q = Tuple[float, float, float, float]


@dataclass
class JuliaParams:
    """Iteration settings and constant of a quaternion Julia set."""

    max_iter: int = 6
    threshold: float = 2.0
    w: float = 0.0
    c: Quat = field(default_factory=lambda: Quat(-0.2, 0.8, 0.0, 0.0))


class Formula(enum.IntEnum):
    """Iteration formulas for the alternative Julia sampler."""

    STANDARD = 0
    CUBIC = 1
    SQUARE_PLUS_Z = 2
    MAGNITUDE = 3

    @property
    def label(self) -> str:
        return _FORMULA_LABELS[self]


_FORMULA_LABELS = {
    Formula.STANDARD: "Standard z²+c",
    Formula.CUBIC: "Cubic z³+c",
    Formula.SQUARE_PLUS_Z: "z²+z+c",
    Formula.MAGNITUDE: "|z|²-z²+c",
}


def _square(z: _Q) -> _Q:
    x, y, zz, w = z
    return (
        x * x - y * y - zz * zz - w * w,
        2.0 * x * y,
        2.0 * x * zz,
        2.0 * x * w,
    )


def _norm_sq(z: _Q) -> float:
    return sum(v * v for v in z)


def _add(a: _Q, b: _Q) -> _Q:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2], a[3] + b[3])


def _iterate(start: _Q, c: _Q, max_iter: int, escape_sq: float, step) -> float:
    z = start
    for _ in range(max_iter):
        z = _add(step(z), c)
        if _norm_sq(z) > escape_sq:
            return 0.0
    return 1.0


def sample_julia_deep_zoom(julia: JuliaParams, pos: Point, zoom_level: float) -> float:
    """Sample the z²+c Julia set with the point (and ``w``) divided by ``zoom_level``."""
    x, y, z = pos
    start = (x / zoom_level, y / zoom_level, z / zoom_level, julia.w / zoom_level)
    return _iterate(start, tuple(julia.c), julia.max_iter, 4.0, _square)


def sample_mandelbrot(julia: JuliaParams, pos: Point) -> float:
    """Sample the 4D Mandelbrot set with ``c`` taken from the point.

    Iteration starts from a tenth of the Julia constant rather than the
    origin, which varies the shape with the Julia parameters.
    """
    x, y, z = pos
    c = (x, y, z, julia.w)
    start = tuple(0.1 * v for v in julia.c)
    return _iterate(start, c, julia.max_iter, 4.0, _square)


def _cube(z: _Q) -> _Q:
    x, y, zz, w = z
    s = _square(z)
    return (
        x * s[0] - y * s[1] - zz * s[2] - w * s[3],
        x * s[1] + y * s[0] + zz * s[3] - w * s[2],
        x * s[2] - y * s[3] + zz * s[0] + w * s[1],
        x * s[3] + y * s[2] - zz * s[1] + w * s[0],
    )


def _square_plus_z(z: _Q) -> _Q:
    return _add(_square(z), z)


def _magnitude(z: _Q) -> _Q:
    x, y, zz, w = z
    s = _square(z)
    return (_norm_sq(z) - s[0], -s[1], -s[2], -s[3])


_STEPS = {
    Formula.STANDARD: _square,
    Formula.CUBIC: _cube,
    Formula.SQUARE_PLUS_Z: _square_plus_z,
    Formula.MAGNITUDE: _magnitude,
}


def sample_julia_formula(julia: JuliaParams, pos: Point, formula: int) -> float:
    """Sample a Julia set with one of the ``Formula`` iterations.

    Unknown formula numbers fall back to the standard z²+c iteration.
    The escape radius is 4 (squared norm above 16).
    """
    try:
        step = _STEPS[Formula(formula)]
    except ValueError:
        step = _square
    x, y, z = pos
    start = (x, y, z, julia.w)
    return _iterate(start, tuple(julia.c), julia.max_iter, 16.0, step)