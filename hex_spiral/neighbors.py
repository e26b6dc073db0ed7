from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .conversions import DIRECTIONS, coordinate_from_index, index_from_coordinate
from .coords import Axial, SpiralIndex
from .rings import cells_within, check_index, check_ring, ring_of, ring_size  # noqa: F401


def _check_direction(direction: int) -> int:
    if isinstance(direction, bool) or not isinstance(direction, int):
        raise TypeError("direction must be an integer")
    if not 0 <= direction < 6:
        raise ValueError(f"direction must be in 0..5 (got {direction})")
    return direction


def axial_neighbors(a: Axial) -> Iterable[Axial]:
    for d in DIRECTIONS:
        yield a + d


def neighbors(index: int) -> tuple[SpiralIndex, ...]:
    """The six neighbouring indices of ``index``, ordered by direction 0-5."""

    coord = coordinate_from_index(index)
    return tuple(index_from_coordinate(n) for n in axial_neighbors(coord))


def neighbor(index: int, direction: int) -> SpiralIndex:
    direction = _check_direction(direction)
    return index_from_coordinate(coordinate_from_index(index) + DIRECTIONS[direction])


def are_neighbors(a: int, b: int) -> bool:
    check_index(b)
    return b in neighbors(a)


def walk(index: int, direction: int) -> Iterator[SpiralIndex]:
    """Endlessly yield the indices met stepping from ``index`` in ``direction``.

    The starting index itself is not yielded.
    """

    step = DIRECTIONS[_check_direction(direction)]
    coord = coordinate_from_index(index)
    while True:
        coord = coord + step
        yield index_from_coordinate(coord)


def is_path_consistent(path: Sequence[int]) -> bool:
    """True when every consecutive pair in ``path`` are neighbours."""

    if len(path) < 2:
        raise ValueError("a path needs at least two positions")
    return all(are_neighbors(a, b) for a, b in zip(path, path[1:]))


def is_in_ring(index: int, ring: int) -> bool:
    return ring_of(index) == check_ring(ring)


def is_within(index: int, radius: int) -> bool:
    """True when ``index`` lies on ``radius`` or any ring inside it."""

    return check_index(index) < cells_within(radius)
