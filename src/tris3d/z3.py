"""
Semi-sum operator in Z3, the integers modulo 3.

In Z3 multiplying by 2 and dividing by 2 give the same result
(0 -> 0, 1 -> 2, 2 -> 1), so the semi-sum (a + b) / 2 is computed as
(a + b) * 2 and stays on integers.

When a == b the semi-sum is the identity. Otherwise it is cyclic and
returns the third value of Z3:

    0, 1 -> 2        1, 0 -> 2
    1, 2 -> 0        2, 1 -> 0
    2, 0 -> 1        0, 2 -> 1
"""

from __future__ import annotations

ORDER = 3


def semi_sum(a: int, b: int) -> int:
    return ((a + b) * 2) % ORDER
