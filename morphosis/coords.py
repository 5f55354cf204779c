"""Turning matrices into Julia constants through a SHA-256 digest."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from morphosis.quaternion import Quat

_BYTES_PER_COORD = 8
_DIGEST_BYTES = 4 * _BYTES_PER_COORD


@dataclass
class MatrixParameters:
    """Julia constant, step size and iteration count derived from a matrix."""

    q: Quat = field(default_factory=Quat)
    step_size: float = 0.0
    iterations: int = 0


def generate_number(values: Iterable[int]) -> float:
    """Build one coordinate in ``(-1, 1)`` from eight byte values.

    The sign comes from the set-bit count of the first byte (four or more
    bits give a positive value); bytes three to eight give six decimal
    digits from their set-bit counts.
    """
    data = list(values)
    if len(data) != _BYTES_PER_COORD:
        raise ValueError(f"expected {_BYTES_PER_COORD} values, got {len(data)}")
    positive = int(data[0]).bit_count() >= 4
    mantissa = 0
    for value in data[2:]:
        mantissa = (mantissa + int(value).bit_count()) * 10
    result = mantissa / 10_000_000
    return result if positive else -result


def coords_from_hash(digest: Sequence[int]) -> Quat:
    """Derive a quaternion from the first 32 bytes of a digest."""
    if len(digest) < _DIGEST_BYTES:
        raise ValueError(f"digest needs at least {_DIGEST_BYTES} bytes")
    parts = [
        generate_number(digest[i:i + _BYTES_PER_COORD])
        for i in range(0, _DIGEST_BYTES, _BYTES_PER_COORD)
    ]
    return Quat(*parts)


def matrix_to_string(matrix: Iterable[Iterable[int]]) -> str:
    """Concatenate the decimal forms of a matrix's entries, row by row."""
    return "".join(str(value) for row in matrix for value in row)


def hash_matrix_string(text: str) -> Quat:
    """Quaternion derived from the SHA-256 digest of a string."""
    return coords_from_hash(hashlib.sha256(text.encode()).digest())


def hash_mean_matrix(matrix: Iterable[Iterable[int]]) -> Quat:
    """Quaternion derived from a 6x6 mean matrix."""
    return hash_matrix_string(matrix_to_string(matrix))