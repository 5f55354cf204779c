import math

import pytest

from morphosis.geometry import flatten_triangles, scale_points, vertex_normals

TRI_A = ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
TRI_B = ((0.5, -0.25, 2.0), (-1.0, 3.0, 0.5), (2.0, 2.0, -1.0))


def test_flatten_keeps_order():
    flat = flatten_triangles([TRI_A, TRI_B])
    expected = [c for tri in (TRI_A, TRI_B) for v in tri for c in v]
    assert flat == expected
    assert len(flat) == 18


def test_flatten_empty():
    assert flatten_triangles([]) == []


def test_flatten_rejects_bad_triangle():
    with pytest.raises(ValueError):
        flatten_triangles([((0, 0, 0), (1, 1, 1))])


def test_scale_maps_corners_to_bounds():
    points = [-1.5, -1.5, -1.5, 1.5, 1.5, 1.5]
    scaled = scale_points(points, (1.5, 1.5, 1.5), (-1.5, -1.5, -1.5))
    assert scaled[:3] == pytest.approx([-0.75] * 3)
    assert scaled[3:] == pytest.approx([0.75] * 3)


def test_scale_zero_extent_uses_unit_delta():
    scaled = scale_points([2.0, 0.0, 0.0], (2.0, 1.0, 1.0), (2.0, 0.0, 0.0))
    assert scaled[0] == pytest.approx(-0.75)


def test_scale_stays_in_range():
    flat = flatten_triangles([TRI_B])
    lo = tuple(min(flat[i::3]) for i in range(3))
    hi = tuple(max(flat[i::3]) for i in range(3))
    scaled = scale_points(flat, hi, lo)
    assert all(-0.75 - 1e-9 <= v <= 0.75 + 1e-9 for v in scaled)


def test_scale_rejects_partial_point():
    with pytest.raises(ValueError):
        scale_points([1.0, 2.0], (1, 1, 1), (0, 0, 0))


def test_normals_are_unit_and_shared():
    normals = vertex_normals([TRI_A, TRI_B], 18)
    assert len(normals) == 18
    for i in range(0, 18, 3):
        assert math.sqrt(sum(v * v for v in normals[i:i + 3])) == pytest.approx(1.0)
    assert normals[0:3] == normals[3:6] == normals[6:9]


def test_normal_perpendicular_to_edges():
    normals = vertex_normals([TRI_B], 9)
    v0, v1, v2 = TRI_B
    for other in (v1, v2):
        edge = [o - a for o, a in zip(other, v0)]
        assert sum(e * n for e, n in zip(edge, normals[:3])) == pytest.approx(0.0, abs=1e-9)


def test_degenerate_triangle_points_up():
    flat = ((1.0, 1.0, 1.0),) * 3
    assert vertex_normals([flat], 9) == [0.0, 1.0, 0.0] * 3


def test_unused_slots_point_up():
    normals = vertex_normals([], 6)
    assert normals == [0.0, 1.0, 0.0, 0.0, 1.0, 0.0]


def test_normals_reject_too_few_points():
    with pytest.raises(ValueError):
        vertex_normals([TRI_A], 6)