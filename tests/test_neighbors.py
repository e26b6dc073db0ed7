import itertools

import pytest

from hex_spiral import (
    Axial,
    NegativeIndexError,
    are_neighbors,
    axial_neighbors,
    is_in_ring,
    is_path_consistent,
    is_within,
    neighbor,
    neighbors,
    walk,
)


def test_neighbors_axial_six():
    n = list(axial_neighbors(Axial(0, 0)))
    assert len(n) == 6
    assert Axial(0, -1) in n
    assert Axial(0, 1) in n


def test_neighbors_of_centre():
    assert neighbors(0) == (1, 2, 3, 4, 5, 6)


@pytest.mark.parametrize(
    ("index", "expected"),
    [
        (1, (7, 8, 2, 0, 6, 18)),
        (2, (8, 9, 10, 3, 0, 1)),
        (3, (2, 10, 11, 12, 4, 0)),
        (4, (0, 3, 12, 13, 14, 5)),
        (5, (6, 0, 4, 14, 15, 16)),
        (6, (18, 1, 0, 5, 16, 17)),
        (7, (19, 20, 8, 1, 18, 36)),
        (9, (21, 22, 23, 10, 2, 8)),
        (11, (10, 24, 25, 26, 12, 3)),
        (13, (4, 12, 27, 28, 29, 14)),
        (15, (16, 5, 14, 30, 31, 32)),
        (17, (35, 18, 6, 16, 33, 34)),
        (28, (13, 27, 48, 49, 50, 29)),
        (53, (54, 31, 52, 80, 81, 82)),
        (57, (87, 58, 34, 56, 85, 86)),
    ],
)
def test_ring_tip_neighbors(index, expected):
    assert neighbors(index) == expected


@pytest.mark.parametrize(
    ("index", "expected"),
    [
        (8, (20, 21, 9, 2, 1, 7)),
        (10, (9, 23, 24, 11, 3, 2)),
        (12, (3, 11, 26, 27, 13, 4)),
        (14, (5, 4, 13, 29, 30, 15)),
        (16, (17, 6, 5, 15, 32, 33)),
        (18, (36, 7, 1, 6, 17, 35)),
        (38, (62, 63, 39, 20, 19, 37)),
        (40, (64, 65, 41, 22, 21, 39)),
        (42, (41, 67, 68, 43, 23, 22)),
        (44, (43, 69, 70, 45, 25, 24)),
        (46, (25, 45, 72, 73, 47, 26)),
        (48, (27, 47, 74, 75, 49, 28)),
        (50, (29, 28, 49, 77, 78, 51)),
        (52, (31, 30, 51, 79, 80, 53)),
        (54, (55, 32, 31, 53, 82, 83)),
        (56, (57, 34, 33, 55, 84, 85)),
        (58, (88, 59, 35, 34, 57, 87)),
        (60, (90, 37, 19, 36, 59, 89)),
    ],
)
def test_ring_edge_neighbors(index, expected):
    assert neighbors(index) == expected


def test_neighbors_are_six_distinct_and_symmetric():
    for index in range(2_000):
        around = neighbors(index)
        assert len(around) == 6
        assert len(set(around)) == 6
        assert index not in around
        for other in around:
            assert index in neighbors(other)


def test_opposite_directions_are_inverse():
    for index in range(200):
        for direction in range(6):
            assert neighbor(neighbor(index, direction), (direction + 3) % 6) == index


def test_neighbor_direction_validation():
    with pytest.raises(ValueError):
        neighbor(0, 6)
    with pytest.raises(TypeError):
        neighbor(0, 1.5)


def test_negative_index():
    with pytest.raises(NegativeIndexError):
        neighbors(-1)


def test_are_neighbors():
    assert are_neighbors(0, 4)
    assert are_neighbors(18, 7)
    assert not are_neighbors(1, 4)
    assert not are_neighbors(0, 0)


@pytest.mark.parametrize(
    ("start", "direction", "expected"),
    [
        (75, 0, [48, 27, 12, 3, 2, 8, 20, 38, 62]),
        (76, 0, [49, 28, 13, 4, 0, 1, 7, 19, 37, 61]),
        (77, 0, [50, 29, 14, 5, 6, 18, 36, 60, 90]),
        (80, 1, [52, 30, 14, 4, 3, 10, 23, 42, 67]),
        (81, 1, [53, 31, 15, 5, 0, 2, 9, 22, 41, 66]),
        (82, 1, [54, 32, 16, 6, 1, 8, 21, 40, 65]),
        (85, 2, [56, 33, 16, 5, 4, 12, 26, 46, 72]),
        (86, 2, [57, 34, 17, 6, 0, 3, 11, 25, 45, 71]),
        (87, 2, [58, 35, 18, 1, 2, 10, 24, 44, 70]),
    ],
)
def test_walk(start, direction, expected):
    assert list(itertools.islice(walk(start, direction), len(expected))) == expected


def test_path_consistency():
    assert is_path_consistent([0, 1, 7, 19])
    assert is_path_consistent([8, 9, 10, 11])
    assert not is_path_consistent([0, 1, 4])
    with pytest.raises(ValueError):
        is_path_consistent([3])


def test_ring_membership():
    assert is_in_ring(0, 0)
    assert is_in_ring(6, 1)
    assert not is_in_ring(7, 1)
    assert is_in_ring(7, 2)


def test_containment():
    assert is_within(0, 0)
    assert not is_within(1, 0)
    assert is_within(18, 2)
    assert not is_within(19, 2)
    assert is_within(19, 3)
