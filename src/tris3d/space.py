"""
Z3xZ3xZ3, the 27 cells of the cube as vectors with coordinates modulo 3.

A cell's linear index is its coordinates read as a base 3 number:

    x, y, z -> x * 9 + y * 3 + z
"""

from __future__ import annotations

from typing import TypeAlias

from . import z3

Vector: TypeAlias = tuple[int, int, int]

NUM_CELLS = z3.ORDER**3


def coordinates_of_index(index: int) -> Vector:
    if not (0 <= index < NUM_CELLS):
        raise ValueError(f"index must be in range 0..{NUM_CELLS - 1}, got: {index!r}")
    return (index // 9, (index // 3) % 3, index % 3)


def index_of_coordinates(vector: Vector) -> int:
    x, y, z = normalize(vector)
    return x * 9 + y * 3 + z


def normalize(vector: Vector) -> Vector:
    return (vector[0] % 3, vector[1] % 3, vector[2] % 3)


def are_equal(a: Vector, b: Vector) -> bool:
    return normalize(a) == normalize(b)


def semi_sum(a: Vector, b: Vector) -> Vector:
    """
    Component-wise Z3 semi-sum.

    It is commutative, the identity on equal arguments and cyclic otherwise.
    If a and b lie on a line of the cube, the result is the third cell of
    that line.
    """
    return (
        z3.semi_sum(a[0], b[0]),
        z3.semi_sum(a[1], b[1]),
        z3.semi_sum(a[2], b[2]),
    )
