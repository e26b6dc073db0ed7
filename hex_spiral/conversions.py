"""Mapping between spiral indices and axial/cube hex coordinates.

The grid is read flat-topped: direction 0 points up and directions advance
clockwise.  Offset 0 of ring ``r`` sits ``r`` steps up from the centre; edge
``k`` starts at corner ``r * DIRECTIONS[k]`` and walks ``DIRECTIONS[k + 2]``
until the next corner.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from .coords import (
    ORIGIN,
    Axial,
    CoordinateLike,
    Cube,
    Ring,
    RingOffset,
    RingPosition,
    SpiralIndex,
    as_axial,
)
from .distance import distance
from .errors import InvariantViolationError
from .logging import get_logger
from .rings import (
    check_index,
    check_ring,
    check_ring_offset,
    index_from_ring_and_offset,
    ring_and_offset_from_index,
)
from .settings import get_settings

logger = get_logger(__name__)

DIRECTIONS: Tuple[Axial, ...] = (
    Axial(0, -1),
    Axial(+1, -1),
    Axial(+1, 0),
    Axial(0, +1),
    Axial(-1, +1),
    Axial(-1, 0),
)


def axial_to_cube(a: Axial) -> Cube:
    return Cube(a.q, a.r, -a.q - a.r)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.q, c.r)


def _edge_direction(edge: int) -> Axial:
    return DIRECTIONS[(edge + 2) % 6]


def axial_from_ring_offset(ring: int, offset: int) -> Axial:
    ring, offset = check_ring_offset(ring, offset)
    if ring == 0:
        return ORIGIN
    edge, step = divmod(offset, ring)
    return DIRECTIONS[edge].scale(ring) + _edge_direction(edge).scale(step)


def ring_offset_from_axial(coord: Axial) -> RingPosition:
    ring = distance(ORIGIN, coord)
    if ring == 0:
        return RingPosition(Ring(0), RingOffset(0))
    for edge, corner in enumerate(DIRECTIONS):
        start = corner.scale(ring)
        step = distance(start, coord)
        if step < ring and start + _edge_direction(edge).scale(step) == coord:
            return RingPosition(Ring(ring), RingOffset(edge * ring + step))
    logger.error("invariant_violation", check="ring_offset_from_axial", q=coord.q, r=coord.r)
    raise InvariantViolationError(f"{coord} is not on any edge of ring {ring}")


def _coordinate_from_index(index: int) -> Axial:
    position = ring_and_offset_from_index(index)
    return axial_from_ring_offset(position.ring, position.offset)


def _index_from_coordinate(coord: Axial) -> SpiralIndex:
    position = ring_offset_from_axial(coord)
    return index_from_ring_and_offset(position.ring, position.offset)


def verify_round_trip(index: int) -> Axial:
    """Convert ``index`` to a coordinate and back, failing loudly on mismatch."""

    index = check_index(index)
    coord = _coordinate_from_index(index)
    back = _index_from_coordinate(coord)
    if back != index:
        logger.error("invariant_violation", check="round_trip", index=index, result=back)
        raise InvariantViolationError(f"index {index} mapped to {coord} which maps back to {back}")
    logger.debug("round_trip_verified", index=index, q=coord.q, r=coord.r)
    return coord


def coordinate_from_index(index: int) -> Axial:
    """Axial coordinate of the hex at spiral position ``index``."""

    if get_settings().verify_conversions:
        return verify_round_trip(index)
    return _coordinate_from_index(index)


def index_from_coordinate(coord: CoordinateLike) -> SpiralIndex:
    """Spiral index of the hex at ``coord``; every coordinate has one."""

    axial = as_axial(coord)
    index = _index_from_coordinate(axial)
    if get_settings().verify_conversions and verify_round_trip(index) != axial:
        logger.error("invariant_violation", check="round_trip", q=axial.q, r=axial.r, index=index)
        raise InvariantViolationError(f"{axial} mapped to index {index} which maps elsewhere")
    return index


def cube_from_index(index: int) -> Cube:
    return axial_to_cube(coordinate_from_index(index))


def index_from_cube(c: Cube) -> SpiralIndex:
    return index_from_coordinate(cube_to_axial(c))


def spiral(radius: int) -> Iterator[Axial]:
    """Yield every coordinate within ``radius`` of the centre in index order."""

    radius = check_ring(radius)
    yield ORIGIN
    for ring in range(1, radius + 1):
        coord = DIRECTIONS[0].scale(ring)
        for edge in range(6):
            step = _edge_direction(edge)
            for _ in range(ring):
                yield coord
                coord = coord + step
