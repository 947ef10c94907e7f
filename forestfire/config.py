"""Cell codes, wind settings and movement directions for the simulation."""

from __future__ import annotations

from enum import IntEnum

Direction = tuple[int, int]


class Cell(IntEnum):
    """Values that a forest cell can hold."""

    EMPTY = 0
    TREE = 1
    BURNING = 2
    BURNED = 3
    WATER = 4
    DEAD_ANIMAL = 8
    ANIMAL = 9


DEFAULT_WIND = 0
DEFAULT_ITERATIONS = 10

ANIMAL_DIRECTIONS: tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

_UP = (-1, 0)
_DOWN = (1, 0)
_LEFT = (0, -1)
_RIGHT = (0, 1)

_WIND_ROUTES: dict[int, tuple[Direction, ...]] = {
    1: (_RIGHT, _DOWN),
    2: (_LEFT, _DOWN),
    3: (_RIGHT, _UP),
    4: (_LEFT, _UP),
    5: (_UP, _DOWN),
    6: (_LEFT, _RIGHT),
    7: (_RIGHT, _LEFT, _UP),
    8: (_RIGHT, _LEFT, _DOWN),
    9: (_RIGHT, _UP, _DOWN),
    10: (_LEFT, _UP, _DOWN),
    11: (_RIGHT,),
    12: (_LEFT,),
    13: (_UP,),
    14: (_DOWN,),
}


def wind_directions(wind: int) -> tuple[Direction, ...]:
    """Return the (row, column) steps along which fire spreads for a wind setting.

    Settings 1 to 14 restrict the spread; 0 and any other value spread in all
    four directions.
    """
    return _WIND_ROUTES.get(wind, (_UP, _DOWN, _LEFT, _RIGHT))