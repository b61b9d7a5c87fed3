"""Neighbor lookup on geohash strings without decoding them to coordinates."""

import logging

from .base32 import Direction, index_of, is_on_border, neighbor, parity_of
from .errors import InvalidArgument, InvalidCharacter

logger = logging.getLogger(__name__)

# Clockwise from the top; diagonals step vertically first.
_GRID = (
    (Direction.TOP,),
    (Direction.TOP, Direction.RIGHT),
    (Direction.RIGHT,),
    (Direction.BOTTOM, Direction.RIGHT),
    (Direction.BOTTOM,),
    (Direction.BOTTOM, Direction.LEFT),
    (Direction.LEFT,),
    (Direction.TOP, Direction.LEFT),
)
_COMPASS = ("n", "ne", "e", "se", "s", "sw", "w", "nw")


def _as_direction(direction) -> Direction:
    if isinstance(direction, Direction):
        return direction
    if isinstance(direction, str):
        try:
            return Direction[direction.upper()]
        except KeyError:
            pass
    raise InvalidArgument("direction", direction)


def _normalize(geohash: str) -> str:
    for position, char in enumerate(geohash):
        try:
            index_of(char)
        except InvalidCharacter:
            logger.debug("adjacent: bad character %r at %d in geohash %r", char, position, geohash)
            raise InvalidCharacter(char, position, geohash) from None
    return geohash.lower()


def _step(geohash: str, direction: Direction) -> str:
    if not geohash:
        return ""

    parity = parity_of(len(geohash))
    base, last = geohash[:-1], geohash[-1]

    if is_on_border(parity, direction, last):
        base = _step(base, direction)
        if not base:
            return ""

    return base + neighbor(parity, direction, last)


def adjacent(geohash: str, direction) -> str:
    """Return the geohash of the same length next to `geohash` in `direction`.

    `direction` is a Direction or its name. An empty string comes back when
    the step would leave the map; the map does not wrap at the antimeridian.

    Raises:
        InvalidCharacter: `geohash` contains a character outside the alphabet.
        InvalidArgument: `direction` is not a known direction.
    """
    direction = _as_direction(direction)
    result = _step(_normalize(geohash), direction)
    if geohash and not result:
        logger.debug("adjacent: no %s neighbor for %r", direction.name, geohash)
    return result


def adjacent_grid(geohash: str) -> list[str]:
    """
    Compute the 8 surrounding geohashes, clockwise starting from the top:
    TOP, TOP-RIGHT, RIGHT, BOTTOM-RIGHT, BOTTOM, BOTTOM-LEFT, LEFT, TOP-LEFT.
    Missing neighbors at the edge of the map are empty strings.
    """
    geohash = _normalize(geohash)
    sides = {direction: _step(geohash, direction) for direction in Direction}

    grid = []
    for path in _GRID:
        cell = sides[path[0]]
        for direction in path[1:]:
            cell = _step(cell, direction)
        grid.append(cell)
    return grid


def neighbors(geohash: str) -> dict[str, str]:
    """Same cells as adjacent_grid, keyed n, ne, e, se, s, sw, w, nw."""
    return dict(zip(_COMPASS, adjacent_grid(geohash)))
