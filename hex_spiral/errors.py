"""Exception hierarchy for spiral index arithmetic."""

from __future__ import annotations


class HexSpiralError(Exception):
    """Base exception for all hex-spiral errors."""


class NegativeIndexError(HexSpiralError, ValueError):
    """Raised when a spiral index argument is negative."""

    def __init__(self, index: int) -> None:
        super().__init__(f"spiral index cannot be negative (got {index})")
        self.index = index


class InvalidRingError(HexSpiralError, ValueError):
    """Raised when a ring number is negative or has no edges."""

    def __init__(self, ring: int, reason: str = "ring cannot be negative") -> None:
        super().__init__(f"{reason} (got ring {ring})")
        self.ring = ring


class InvalidOffsetError(HexSpiralError, ValueError):
    """Raised when an offset lies outside ``[0, ring_size(ring))``."""

    def __init__(self, ring: int, offset: int, size: int) -> None:
        super().__init__(f"offset {offset} outside [0, {size}) for ring {ring}")
        self.ring = ring
        self.offset = offset
        self.size = size


class InvalidCoordinateError(HexSpiralError, ValueError):
    """Raised when cube components do not sum to zero."""


class InvariantViolationError(HexSpiralError, RuntimeError):
    """Raised when an internal consistency check fails.

    This signals a defect in the library, not a caller error.
    """
