"""Ring geometry: locating a spiral index on its ring without walking rings.

Ring ``r >= 1`` holds ``6r`` cells and starts at index ``1 + 3r(r - 1)``, so
everything strictly inside radius ``r`` is ``1 + 3r(r + 1)`` cells.  Inverting
that quadratic with :func:`math.isqrt` gives the ring of any index in
constant time.
"""

from __future__ import annotations

from math import isqrt

from .coords import Ring, RingOffset, RingPosition, SpiralIndex, require_int
from .errors import (
    InvalidOffsetError,
    InvalidRingError,
    InvariantViolationError,
    NegativeIndexError,
)


def check_index(index: int) -> int:
    """Validate ``index`` as a spiral index and return it."""

    index = require_int(index, "index")
    if index < 0:
        raise NegativeIndexError(index)
    return index


def check_ring(ring: int) -> int:
    ring = require_int(ring, "ring")
    if ring < 0:
        raise InvalidRingError(ring)
    return ring


def ring_size(ring: int) -> int:
    """Number of cells on ``ring``: 1 for the centre, ``6r`` otherwise."""

    ring = check_ring(ring)
    return 1 if ring == 0 else 6 * ring


def first_index(ring: int) -> SpiralIndex:
    """The spiral index of offset 0 on ``ring``."""

    ring = check_ring(ring)
    if ring == 0:
        return SpiralIndex(0)
    return SpiralIndex(1 + 3 * ring * (ring - 1))


def cells_within(radius: int) -> int:
    """Count of cells whose ring is at most ``radius``."""

    radius = check_ring(radius)
    return 1 + 3 * radius * (radius + 1)


def ring_indices(ring: int) -> range:
    start = first_index(ring)
    return range(start, start + ring_size(ring))


def _locate_ring(index: int) -> int:
    # 3r^2 - 3r + 1 <= index  <=>  r <= (3 + sqrt(12 * index - 3)) / 6
    ring = (3 + isqrt(12 * index - 3)) // 6
    if 1 + 3 * ring * (ring - 1) > index:
        ring -= 1
    elif 1 + 3 * ring * (ring + 1) <= index:
        ring += 1
    if not 1 + 3 * ring * (ring - 1) <= index < 1 + 3 * ring * (ring + 1):
        raise InvariantViolationError(f"could not place index {index} on a ring (candidate {ring})")
    return ring


def ring_and_offset_from_index(index: int) -> RingPosition:
    """Split a spiral index into its ring and its offset within that ring."""

    index = check_index(index)
    if index == 0:
        return RingPosition(Ring(0), RingOffset(0))
    ring = _locate_ring(index)
    return RingPosition(Ring(ring), RingOffset(index - (1 + 3 * ring * (ring - 1))))


def check_ring_offset(ring: int, offset: int) -> tuple[int, int]:
    """Validate a ``(ring, offset)`` pair and return it."""

    ring = check_ring(ring)
    offset = require_int(offset, "offset")
    size = ring_size(ring)
    if not 0 <= offset < size:
        raise InvalidOffsetError(ring, offset, size)
    return ring, offset


def index_from_ring_and_offset(ring: int, offset: int) -> SpiralIndex:
    ring, offset = check_ring_offset(ring, offset)
    return SpiralIndex(first_index(ring) + offset)


def ring_of(index: int) -> Ring:
    return Ring(ring_and_offset_from_index(index).ring)


def edge_index(index: int) -> int:
    """Which of the six ring edges (0-5) ``index`` lies on."""

    position = ring_and_offset_from_index(index)
    if position.ring == 0:
        raise InvalidRingError(0, "the centre cell has no edges")
    return position.offset // position.ring


def is_at_ring_tip(index: int) -> bool:
    """True when ``index`` is one of the six corners of its ring."""

    position = ring_and_offset_from_index(index)
    if position.ring == 0:
        return False
    return position.offset % position.ring == 0
