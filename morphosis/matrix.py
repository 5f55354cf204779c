"""Readers for the 6x6x6 binary matrix file and the integer matrix text."""

from __future__ import annotations

from os import PathLike
from typing import Iterable, List, Union

from morphosis.settings import ErrorKind, MorphosisError

SIDE = 6
CELLS = SIDE * SIDE
CHUNK_WIDTH = 12
CHUNK_TEXT = 11
INT_MATRIX_SIZE = 1296

Cube = List[List[List[int]]]
Square = List[List[int]]


def binary_to_int(bits: str) -> int:
    """Convert the first six binary digits of ``bits`` to an integer."""
    head = bits[:SIDE]
    if len(head) < SIDE or any(ch not in "01" for ch in head):
        raise MorphosisError(ErrorKind.BAD_FILE, f"bad binary value: {bits!r}")
    return int(head, 2)


def _values_in_line(line: str):
    for start in range(0, len(line), CHUNK_WIDTH):
        chunk = line[start:start + CHUNK_TEXT]
        yield binary_to_int("".join(ch for ch in chunk if ch in "01"))


def parse_matrix_lines(lines: Iterable[str]) -> Cube:
    """Parse 36 lines of binary values into a cube indexed ``[dim][col][row]``.

    Each value takes a 12-character field whose binary digits (spaces and
    other characters are ignored) give a 6-bit number. Values fill one
    6x6 layer after another.
    """
    cube = [[[0] * SIDE for _ in range(SIDE)] for _ in range(SIDE)]
    count = 0
    line_count = 0
    for raw in lines:
        line_count += 1
        for value in _values_in_line(raw.rstrip("\n")):
            dim, cell = divmod(count, CELLS)
            if dim >= SIDE:
                raise MorphosisError(ErrorKind.BAD_FILE, "too many values")
            col, row = divmod(cell, SIDE)
            cube[dim][col][row] = value
            count += 1
    if line_count != CELLS:
        raise MorphosisError(
            ErrorKind.BAD_FILE, f"expected {CELLS} lines, found {line_count}"
        )
    return cube


def read_matrix_file(path: Union[str, PathLike]) -> Cube:
    """Read and parse a binary matrix file."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            return parse_matrix_lines(stream)
    except OSError as exc:
        raise MorphosisError(ErrorKind.OPEN_FILE, str(exc)) from exc


def mean_matrix(cube: Cube) -> Square:
    """Integer mean over the six layers of a cube, giving a 6x6 matrix."""
    return [
        [sum(layer[col][row] for layer in cube) // SIDE for row in range(SIDE)]
        for col in range(SIDE)
    ]


def read_int_matrix(text: str) -> str:
    """Read 1296 integers and build the string that is hashed from them.

    Each integer contributes its first character, except the last one,
    which contributes its full decimal form.
    """
    tokens = text.split()
    if len(tokens) < INT_MATRIX_SIZE:
        raise MorphosisError(
            ErrorKind.BAD_FILE,
            f"expected {INT_MATRIX_SIZE} integers, found {len(tokens)}",
        )
    try:
        numbers = [int(token) for token in tokens[:INT_MATRIX_SIZE]]
    except ValueError as exc:
        raise MorphosisError(ErrorKind.BAD_FILE, str(exc)) from exc
    *head, last = (str(n) for n in numbers)
    return "".join(s[0] for s in head) + last