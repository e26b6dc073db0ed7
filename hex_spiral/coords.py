from __future__ import annotations

from dataclasses import dataclass
from typing import NewType, Tuple, Union

from .errors import InvalidCoordinateError

SpiralIndex = NewType("SpiralIndex", int)
Ring = NewType("Ring", int)
RingOffset = NewType("RingOffset", int)


def require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class RingPosition:
    ring: Ring
    offset: RingOffset


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: Axial) -> Axial:
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Axial) -> Axial:
        return Axial(self.q - other.q, self.r - other.r)

    def scale(self, factor: int) -> Axial:
        return Axial(self.q * factor, self.r * factor)


ORIGIN = Axial(0, 0)


@dataclass(frozen=True, slots=True)
class Cube:
    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise InvalidCoordinateError(
                f"For cube coords, q + r + s must be 0 (got {self.q}, {self.r}, {self.s})"
            )


CoordinateLike = Union[Axial, Cube, Tuple[int, int]]


def as_axial(coord: CoordinateLike) -> Axial:
    """Normalise an ``Axial``, ``Cube`` or ``(q, r)`` pair to ``Axial``."""

    if isinstance(coord, Axial):
        q, r = coord.q, coord.r
    elif isinstance(coord, Cube):
        q, r = coord.q, coord.r
    else:
        q, r = coord
    return Axial(require_int(q, "q"), require_int(r, "r"))
