"""
Cell labels of the tris3d board.

Every cell is labelled with an uppercase latin letter, or the asterisk for the
center of the cube, which has coordinates (1, 1, 1). Label 'A' is the corner
(0, 0, 0); from there the perimeter of the z = 0 layer is walked clockwise and
its center labelled last, then the same is done for the z = 1 layer (whose
center is already '*') and the z = 2 layer.

    z = 2            z = 1            z = 0

    T  U  V          L  M  N          C  D  E
    S  Z  W          K  *  O          B  I  F
    R  X  Y          J  Q  P          A  H  G

    y
    ^
    o > x
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .space import Vector, coordinates_of_index, index_of_coordinates

CENTER = "*"

# Indexed by x * 9 + y * 3 + z.
POSITIONS: tuple[str, ...] = (
    "A", "J", "R", "B", "K", "S", "C", "L", "T",  # x = 0
    "H", "Q", "X", "I", "*", "Z", "D", "M", "U",  # x = 1
    "G", "P", "Y", "F", "O", "W", "E", "N", "V",  # x = 2
)

VECTOR_OF_POSITION: Mapping[str, Vector] = MappingProxyType(
    {
        "A": (0, 0, 0),
        "H": (1, 0, 0),
        "G": (2, 0, 0),
        "B": (0, 1, 0),
        "I": (1, 1, 0),
        "F": (2, 1, 0),
        "C": (0, 2, 0),
        "D": (1, 2, 0),
        "E": (2, 2, 0),
        "J": (0, 0, 1),
        "Q": (1, 0, 1),
        "P": (2, 0, 1),
        "K": (0, 1, 1),
        "*": (1, 1, 1),
        "O": (2, 1, 1),
        "L": (0, 2, 1),
        "M": (1, 2, 1),
        "N": (2, 2, 1),
        "R": (0, 0, 2),
        "X": (1, 0, 2),
        "Y": (2, 0, 2),
        "S": (0, 1, 2),
        "Z": (1, 1, 2),
        "W": (2, 1, 2),
        "T": (0, 2, 2),
        "U": (1, 2, 2),
        "V": (2, 2, 2),
    }
)


def is_valid_position(position: object) -> bool:
    return isinstance(position, str) and position in VECTOR_OF_POSITION


def vector_of_position(position: str) -> Vector | None:
    if not is_valid_position(position):
        return None
    return VECTOR_OF_POSITION[position]


def position_of_vector(vector: Vector) -> str:
    return POSITIONS[index_of_coordinates(vector)]


def index_of_position(position: str) -> int | None:
    vector = vector_of_position(position)
    return None if vector is None else index_of_coordinates(vector)


def position_of_index(index: int) -> str:
    return position_of_vector(coordinates_of_index(index))
