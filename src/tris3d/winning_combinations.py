from __future__ import annotations

from .errors import InvalidPosition, PositionsMustBeDistinct
from .positions import CENTER, vector_of_position
from .space import Vector, are_equal, semi_sum


def _vector_or_raise(position: str) -> Vector:
    vector = vector_of_position(position)
    if vector is None:
        raise InvalidPosition(f"{position!r} is not a cell label")
    return vector


def is_winning_combination(position_a: str, position_b: str, position_c: str) -> bool:
    """
    Tell whether three cells form a winning line of the cube.

    The geometric cases are checked in order, each one assuming the previous
    ones did not apply: alignment, line through the center of the cube, line
    parallel to an axis, diagonal of a face.
    """
    # Let T = (A, B, C) be a tern of vectors.
    vector_a = _vector_or_raise(position_a)
    vector_b = _vector_or_raise(position_b)
    vector_c = _vector_or_raise(position_c)

    if position_a == position_b or position_a == position_c or position_b == position_c:
        raise PositionsMustBeDistinct(f"{position_a!r}, {position_b!r}, {position_c!r}")

    # A necessary condition is semi-sum(A, B) = C. Semi-sum is cyclic, so the
    # order of A, B, C does not matter.
    if not are_equal(semi_sum(vector_a, vector_b), vector_c):
        return False

    # Aligned and containing the center: a line through the center of the cube.
    if CENTER in (position_a, position_b, position_c):
        return True

    # A and B share two coordinates: a line parallel to the remaining axis.
    same = [vector_a[k] == vector_b[k] for k in range(3)]
    if sum(same) == 2:
        return True

    # A and B share the k-th coordinate only. Let F be the center of the face
    # at that coordinate, F[k] = A[k] and F[h] = 1 for h != k. T is a diagonal
    # of the face when it contains F.
    for k in range(3):
        if not same[k]:
            continue
        face_center = [1, 1, 1]
        face_center[k] = vector_a[k]
        vector_f: Vector = (face_center[0], face_center[1], face_center[2])
        if are_equal(vector_f, vector_a) or are_equal(vector_f, vector_b) or are_equal(vector_f, vector_c):
            return True

    return False
