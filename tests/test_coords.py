import hashlib

import pytest

from morphosis.coords import (
    MatrixParameters,
    coords_from_hash,
    generate_number,
    hash_matrix_string,
    hash_mean_matrix,
    matrix_to_string,
)
from morphosis.quaternion import Quat


def test_generate_number_zero_bytes():
    assert generate_number([0] * 8) == 0.0


def test_generate_number_pinned_value():
    assert generate_number([0xFF, 0, 1, 1, 1, 1, 1, 1]) == pytest.approx(0.111111)


def test_generate_number_sign_from_first_byte():
    rest = [0x12, 0x34, 0x56, 0x78, 0x9A, 0xBC, 0xDE]
    positive = generate_number([0x0F] + rest)
    negative = generate_number([0x07] + rest)
    assert positive > 0
    assert negative == -positive


def test_generate_number_ignores_second_byte():
    rest = [1, 3, 7, 15, 31, 63]
    assert generate_number([0xFF, 0] + rest) == generate_number([0xFF, 0xFF] + rest)


def test_generate_number_in_range():
    for seed in range(50):
        data = hashlib.sha256(str(seed).encode()).digest()[:8]
        assert -1.0 < generate_number(data) < 1.0


def test_generate_number_wrong_length():
    with pytest.raises(ValueError):
        generate_number([1, 2, 3])


def test_coords_from_hash_uses_byte_groups():
    digest = hashlib.sha256(b"morphosis").digest()
    q = coords_from_hash(digest)
    assert q.x == generate_number(digest[0:8])
    assert q.y == generate_number(digest[8:16])
    assert q.z == generate_number(digest[16:24])
    assert q.w == generate_number(digest[24:32])


def test_coords_from_hash_too_short():
    with pytest.raises(ValueError):
        coords_from_hash(bytes(16))


def test_matrix_to_string_concatenates():
    assert matrix_to_string([[0] * 6 for _ in range(6)]) == "0" * 36
    assert matrix_to_string([[10] * 6 for _ in range(6)]) == "10" * 36


def test_matrix_to_string_order():
    matrix = [[1, 2], [3, 45]]
    assert matrix_to_string(matrix) == "12345"


def test_hash_mean_matrix_matches_string_hash():
    matrix = [[(i * 6 + j) % 64 for j in range(6)] for i in range(6)]
    assert hash_mean_matrix(matrix) == hash_matrix_string(matrix_to_string(matrix))


def test_hash_matrix_string_deterministic_and_bounded():
    q1 = hash_matrix_string("1" * 1296)
    q2 = hash_matrix_string("1" * 1296)
    assert q1 == q2
    assert all(-1.0 < v < 1.0 for v in q1)


def test_hash_matrix_string_matches_digest():
    text = "poem"
    assert hash_matrix_string(text) == coords_from_hash(
        hashlib.sha256(text.encode()).digest()
    )


def test_matrix_parameters_defaults():
    params = MatrixParameters()
    assert params.q == Quat(0.0, 0.0, 0.0, 0.0)
    assert params.step_size == 0.0
    assert params.iterations == 0