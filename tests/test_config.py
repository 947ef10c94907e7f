import pytest

from forestfire.config import ANIMAL_DIRECTIONS, Cell, wind_directions


def test_no_wind_spreads_in_all_four_directions():
    assert wind_directions(0) == ((-1, 0), (1, 0), (0, -1), (0, 1))


def test_unknown_wind_falls_back_to_all_directions():
    assert wind_directions(99) == wind_directions(0)
    assert wind_directions(-3) == wind_directions(0)


def test_single_direction_winds():
    assert wind_directions(11) == ((0, 1),)
    assert wind_directions(12) == ((0, -1),)
    assert wind_directions(13) == ((-1, 0),)
    assert wind_directions(14) == ((1, 0),)


@pytest.mark.parametrize("wind", range(0, 15))
def test_every_route_is_a_distinct_unit_step(wind):
    routes = wind_directions(wind)
    assert len(set(routes)) == len(routes)
    assert all(abs(dx) + abs(dy) == 1 for dx, dy in routes)
    assert set(routes) <= set(ANIMAL_DIRECTIONS)


def test_route_sizes_follow_wind_groups():
    assert [len(wind_directions(w)) for w in range(1, 7)] == [2] * 6
    assert [len(wind_directions(w)) for w in range(7, 11)] == [3] * 4


def test_cell_codes_compare_with_plain_integers():
    assert Cell(9) is Cell.ANIMAL
    assert Cell.BURNING == 2