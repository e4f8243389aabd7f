import random

import pytest

from hex_dot_game.config import BOARD_H, BOARD_SIZE, BOARD_W
from hex_dot_game.dot_engine.geometry import (
    CENTER, NEIGHBOR_TABLE, dist_to_edge, from_xy, is_boundary, near_center,
    neighbors, random_position, to_xy,
)

from tests.helpers import ScriptedRng


def test_coordinates_round_trip_row_major():
    for pos in range(BOARD_SIZE):
        x, y = to_xy(pos)
        assert from_xy(x, y) == pos
    assert from_xy(0, 1) == BOARD_W
    assert to_xy(BOARD_SIZE - 1) == (BOARD_W - 1, BOARD_H - 1)


@pytest.mark.parametrize("x, y", [(BOARD_W, 0), (0, BOARD_H), (-1, 3)])
def test_from_xy_rejects_out_of_range(x, y):
    with pytest.raises(AssertionError):
        from_xy(x, y)


def test_center_neighbors_in_direction_order():
    # even row: vertical neighbours sit at x-1 and x
    assert [to_xy(n) for n in neighbors(from_xy(4, 4))] == [
        (3, 3), (4, 3), (3, 4), (5, 4), (3, 5), (4, 5),
    ]
    # odd row: shifted half a cell right
    assert [to_xy(n) for n in neighbors(from_xy(4, 3))] == [
        (4, 2), (5, 2), (3, 3), (5, 3), (4, 4), (5, 4),
    ]


@pytest.mark.parametrize("xy, present", [
    ((0, 0), 2),
    ((8, 0), 3),
    ((0, 1), 5),
    ((8, 1), 3),
    ((0, 2), 3),
    ((0, 8), 2),
    ((8, 8), 3),
    ((4, 0), 4),
    ((4, 4), 6),
])
def test_neighbor_counts_at_edges(xy, present):
    ns = neighbors(from_xy(*xy))
    assert len(ns) == 6
    assert sum(n is not None for n in ns) == present


def test_adjacency_is_symmetric():
    for pos in range(BOARD_SIZE):
        for n in neighbors(pos):
            if n is not None:
                assert pos in neighbors(n)


def test_neighbor_table_matches_tuples():
    assert NEIGHBOR_TABLE.shape == (BOARD_SIZE, 6)
    for pos in range(BOARD_SIZE):
        expected = [-1 if n is None else n for n in neighbors(pos)]
        assert NEIGHBOR_TABLE[pos].tolist() == expected


def test_boundary_cells_are_exactly_the_outer_ring():
    for pos in range(BOARD_SIZE):
        x, y = to_xy(pos)
        on_ring = x in (0, BOARD_W - 1) or y in (0, BOARD_H - 1)
        assert is_boundary(pos) == on_ring


@pytest.mark.parametrize("xy, dist", [
    ((0, 0), 1), ((8, 4), 1), ((4, 8), 1), ((4, 4), 5), ((2, 6), 3), ((1, 1), 2),
])
def test_dist_to_edge(xy, dist):
    assert dist_to_edge(from_xy(*xy)) == dist


def test_near_center_draws_neighbor_or_center():
    assert near_center(ScriptedRng([6])) == CENTER
    assert near_center(ScriptedRng([0])) == from_xy(3, 3)
    assert near_center(ScriptedRng([5])) == from_xy(4, 5)
    rng = random.Random(4)
    allowed = set(neighbors(CENTER)) | {CENTER}
    assert all(near_center(rng) in allowed for _ in range(50))


def test_random_position_in_range():
    rng = random.Random(1)
    assert all(0 <= random_position(rng) < BOARD_SIZE for _ in range(200))
