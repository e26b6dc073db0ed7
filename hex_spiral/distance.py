from __future__ import annotations

from .coords import CoordinateLike, Cube, as_axial


def cube_distance(a: Cube, b: Cube) -> int:
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))


def distance(a: CoordinateLike, b: CoordinateLike) -> int:
    """Minimum number of steps between two hexes."""

    a = as_axial(a)
    b = as_axial(b)
    dq = a.q - b.q
    dr = a.r - b.r
    return max(abs(dq), abs(dr), abs(dq + dr))


def index_distance(a: int, b: int) -> int:
    from .conversions import coordinate_from_index

    return distance(coordinate_from_index(a), coordinate_from_index(b))
