"""Flattening, scaling and normal calculation for triangle meshes."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

Vec3 = Tuple[float, float, float]
Triangle = Sequence[Vec3]

_EPSILON = 0.0001
_DEFAULT_NORMAL: Vec3 = (0.0, 1.0, 0.0)
_TARGET_SPAN = 1.5
_TARGET_OFFSET = 0.75


def flatten_triangles(triangles: Iterable[Triangle]) -> List[float]:
    """Return the vertex coordinates of the triangles as one flat list.

    Each triangle contributes nine values: x, y, z of its three corners.
    """
    flat: List[float] = []
    for triangle in triangles:
        corners = tuple(triangle)
        if len(corners) != 3:
            raise ValueError(f"a triangle needs 3 corners, got {len(corners)}")
        for x, y, z in corners:
            flat.extend((float(x), float(y), float(z)))
    return flat


def scale_points(
    points: Sequence[float], max_corner: Vec3, min_corner: Vec3
) -> List[float]:
    """Map flat x, y, z coordinates from the given box into [-0.75, 0.75].

    An axis whose extent is zero is divided by one instead.
    """
    if len(points) % 3:
        raise ValueError(f"point count must be a multiple of 3, got {len(points)}")
    deltas = [
        (hi - lo) or 1.0 for hi, lo in zip(max_corner, min_corner)
    ]
    if len(deltas) != 3:
        raise ValueError("corners must have three coordinates")
    return [
        ((value - min_corner[axis]) / deltas[axis]) * _TARGET_SPAN - _TARGET_OFFSET
        for axis, value in zip(
            (i % 3 for i in range(len(points))), points
        )
    ]


def _unit(v: Vec3) -> Tuple[Vec3, bool]:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length > _EPSILON:
        return (v[0] / length, v[1] / length, v[2] / length), True
    return v, False


def _face_normal(triangle: Triangle) -> Vec3:
    v0, v1, v2 = triangle
    e1 = (v1[0] - v0[0], v1[1] - v0[1], v1[2] - v0[2])
    e2 = (v2[0] - v0[0], v2[1] - v0[1], v2[2] - v0[2])
    cross = (
        e1[1] * e2[2] - e1[2] * e2[1],
        e1[2] * e2[0] - e1[0] * e2[2],
        e1[0] * e2[1] - e1[1] * e2[0],
    )
    return _unit(cross)[0]


def vertex_normals(triangles: Sequence[Triangle], num_pts: int) -> List[float]:
    """Per-vertex normals laid out like the flattened triangle coordinates.

    ``num_pts`` is the number of floats in the flat vertex list. Each
    triangle's unit face normal is given to its three vertices; normals
    that come out with no length default to pointing along +y.
    """
    if num_pts < 0 or num_pts % 3:
        raise ValueError(f"num_pts must be a non-negative multiple of 3: {num_pts}")
    if len(triangles) * 9 > num_pts:
        raise ValueError(
            f"{len(triangles)} triangles need {len(triangles) * 9} values, "
            f"only {num_pts} given"
        )
    accumulated: List[Vec3] = [(0.0, 0.0, 0.0)] * (num_pts // 3)
    for index, triangle in enumerate(triangles):
        normal = _face_normal(triangle)
        for corner in range(3):
            slot = index * 3 + corner
            ax, ay, az = accumulated[slot]
            accumulated[slot] = (ax + normal[0], ay + normal[1], az + normal[2])
    result: List[float] = []
    for vector in accumulated:
        unit, ok = _unit(vector)
        result.extend(unit if ok else _DEFAULT_NORMAL)
    return result