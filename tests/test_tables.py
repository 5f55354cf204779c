import pytest

from morphosis.tables import (
    EDGE_TABLE,
    TRIANGLE_TABLE,
    intersected_edges,
    triangle_edges,
)


def test_tables_have_one_entry_per_cube_index():
    masks = [intersected_edges(i) for i in range(256)]
    triangles = [triangle_edges(i) for i in range(256)]
    assert len(masks) == len(EDGE_TABLE) == 256
    assert len(triangles) == len(TRIANGLE_TABLE) == 256
    assert masks == list(EDGE_TABLE)
    with pytest.raises(ValueError):
        intersected_edges(256)


def test_first_entries_match_source():
    assert intersected_edges(1) == 0x109
    assert triangle_edges(1) == ((0, 8, 3),)
    assert intersected_edges(3) == 0x30A
    assert triangle_edges(3) == ((1, 8, 3), (9, 8, 1))


def test_empty_and_full_cubes_have_no_triangles():
    assert intersected_edges(0) == 0
    assert intersected_edges(255) == 0
    assert triangle_edges(0) == ()
    assert triangle_edges(255) == ()


def test_last_nonempty_entries_match_source():
    assert triangle_edges(254) == ((0, 3, 8),)
    assert intersected_edges(254) == 0x109
    assert triangle_edges(128) == ((7, 6, 11),)


@pytest.mark.parametrize("cube_index", range(256))
def test_edge_mask_matches_triangle_edges(cube_index):
    used = {edge for tri in triangle_edges(cube_index) for edge in tri}
    mask = intersected_edges(cube_index)
    from_mask = {bit for bit in range(12) if mask >> bit & 1}
    assert used == from_mask


@pytest.mark.parametrize("cube_index", range(256))
def test_edge_mask_symmetric_under_complement(cube_index):
    assert intersected_edges(cube_index) == intersected_edges(255 - cube_index)


@pytest.mark.parametrize("cube_index", range(256))
def test_triangles_well_formed(cube_index):
    triangles = triangle_edges(cube_index)
    assert len(triangles) <= 5
    for tri in triangles:
        assert len(tri) == 3
        assert all(0 <= edge < 12 for edge in tri)
        assert len(set(tri)) == 3


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_out_of_range_index_rejected(bad):
    with pytest.raises(ValueError):
        intersected_edges(bad)
    with pytest.raises(ValueError):
        triangle_edges(bad)


@pytest.mark.parametrize("bad", [1.0, "1", None, True])
def test_non_int_index_rejected(bad):
    with pytest.raises(TypeError):
        intersected_edges(bad)
    with pytest.raises(TypeError):
        triangle_edges(bad)