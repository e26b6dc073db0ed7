"""Single-integer spiral addressing for hexagonal grids."""

__version__ = "0.1.0"

from .coords import ORIGIN, Axial, Cube, Ring, RingOffset, RingPosition, SpiralIndex
from .errors import (
    HexSpiralError,
    InvalidCoordinateError,
    InvalidOffsetError,
    InvalidRingError,
    InvariantViolationError,
    NegativeIndexError,
)
from .rings import (
    cells_within,
    edge_index,
    first_index,
    index_from_ring_and_offset,
    is_at_ring_tip,
    ring_and_offset_from_index,
    ring_indices,
    ring_of,
    ring_size,
)
from .distance import cube_distance, distance, index_distance
from .conversions import (
    DIRECTIONS,
    axial_from_ring_offset,
    axial_to_cube,
    coordinate_from_index,
    cube_from_index,
    cube_to_axial,
    index_from_coordinate,
    index_from_cube,
    ring_offset_from_axial,
    spiral,
    verify_round_trip,
)
from .neighbors import (
    are_neighbors,
    axial_neighbors,
    is_in_ring,
    is_path_consistent,
    is_within,
    neighbor,
    neighbors,
    walk,
)
from .groups import adjacency_graph, are_grouped, groups
from .settings import SpiralSettings, configure, get_settings

__all__ = [
    "ORIGIN",
    "Axial",
    "Cube",
    "Ring",
    "RingOffset",
    "RingPosition",
    "SpiralIndex",
    "HexSpiralError",
    "InvalidCoordinateError",
    "InvalidOffsetError",
    "InvalidRingError",
    "InvariantViolationError",
    "NegativeIndexError",
    "cells_within",
    "edge_index",
    "first_index",
    "index_from_ring_and_offset",
    "is_at_ring_tip",
    "ring_and_offset_from_index",
    "ring_indices",
    "ring_of",
    "ring_size",
    "cube_distance",
    "distance",
    "index_distance",
    "DIRECTIONS",
    "axial_from_ring_offset",
    "axial_to_cube",
    "coordinate_from_index",
    "cube_from_index",
    "cube_to_axial",
    "index_from_coordinate",
    "index_from_cube",
    "ring_offset_from_axial",
    "spiral",
    "verify_round_trip",
    "are_neighbors",
    "axial_neighbors",
    "is_in_ring",
    "is_path_consistent",
    "is_within",
    "neighbor",
    "neighbors",
    "walk",
    "adjacency_graph",
    "are_grouped",
    "groups",
    "SpiralSettings",
    "configure",
    "get_settings",
]
