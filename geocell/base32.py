"""Base32 alphabet and the neighbor/border lookup tables used for adjacency.

A character at an EVEN position (counting from the end of a string of even
length) splits longitude, latitude, longitude, latitude, longitude, which
lays the alphabet out as an 8x4 block:

    b  c  f  g  u  v  y  z
    8  9  d  e  s  t  w  x
    2  3  6  7  k  m  q  r
    0  1  4  5  h  j  n  p

An ODD position starts with latitude instead, transposing the block to 4x8.
Moving in a direction is a lookup within the block; characters on the edge
of the block carry into the preceding character.
"""

from enum import Enum
from types import MappingProxyType

from .errors import InvalidArgument, InvalidCharacter

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"  # Standard Base32 characters
_INDEX = MappingProxyType({char: i for i, char in enumerate(BASE32)})


class Direction(Enum):
    RIGHT = 0
    LEFT = 1
    TOP = 2
    BOTTOM = 3

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


_OPPOSITE = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
}


class Parity(Enum):
    EVEN = 0
    ODD = 1


def parity_of(length: int) -> Parity:
    """Parity governing the last character of a geohash of this length."""
    return Parity.ODD if length % 2 else Parity.EVEN


# Position i holds the character sitting on the opposite side of BASE32[i].
_EVEN_NEIGHBORS = {
    Direction.RIGHT: "bc01fg45238967deuvhjyznpkmstqrwx",
    Direction.LEFT: "238967debc01fg45kmstqrwxuvhjyznp",
    Direction.TOP: "p0r21436x8zb9dcf5h7kjnmqesgutwvy",
    Direction.BOTTOM: "14365h7k9dcfesgujnmqp0r2twvyx8zb",
}
_EVEN_BORDERS = {
    Direction.RIGHT: "bcfguvyz",
    Direction.LEFT: "0145hjnp",
    Direction.TOP: "prxz",
    Direction.BOTTOM: "028b",
}

# Odd positions are the even layout transposed.
_TRANSPOSE = {
    Direction.RIGHT: Direction.TOP,
    Direction.LEFT: Direction.BOTTOM,
    Direction.TOP: Direction.RIGHT,
    Direction.BOTTOM: Direction.LEFT,
}


def _derive_odd(even_tables: dict) -> dict:
    return {direction: even_tables[_TRANSPOSE[direction]] for direction in Direction}


NEIGHBORS = MappingProxyType(
    {
        Parity.EVEN: MappingProxyType(dict(_EVEN_NEIGHBORS)),
        Parity.ODD: MappingProxyType(_derive_odd(_EVEN_NEIGHBORS)),
    }
)
BORDERS = MappingProxyType(
    {
        Parity.EVEN: MappingProxyType({d: frozenset(chars) for d, chars in _EVEN_BORDERS.items()}),
        Parity.ODD: MappingProxyType({d: frozenset(chars) for d, chars in _derive_odd(_EVEN_BORDERS).items()}),
    }
)

# NEIGHBORS inverted once so a step is a single dict lookup.
_STEPS = MappingProxyType(
    {
        parity: MappingProxyType(
            {
                direction: MappingProxyType({char: BASE32[i] for i, char in enumerate(table)})
                for direction, table in tables.items()
            }
        )
        for parity, tables in NEIGHBORS.items()
    }
)


def _fold(char: str) -> str:
    # only ASCII folds; str.lower maps some non-ASCII letters onto the alphabet
    return char.lower() if char.isascii() else char


def index_of(char: str) -> int:
    """Return the 5-bit value of a base32 character."""
    try:
        return _INDEX[_fold(char)]
    except KeyError:
        raise InvalidCharacter(char) from None


def char_at(index: int) -> str:
    if not 0 <= index < len(BASE32):
        raise InvalidArgument("index", index)
    return BASE32[index]


def neighbor(parity: Parity, direction: Direction, char: str) -> str:
    """Character one cell away from `char` in `direction`, ignoring carries."""
    try:
        return _STEPS[parity][direction][_fold(char)]
    except KeyError:
        raise InvalidCharacter(char) from None


def is_on_border(parity: Parity, direction: Direction, char: str) -> bool:
    """True when stepping from `char` in `direction` leaves its parent cell."""
    return _fold(char) in BORDERS[parity][direction]
