"""Geohash encoding, decoding and neighbor lookup."""

from .adjacency import adjacent, adjacent_grid, neighbors
from .base32 import BASE32, Direction, Parity
from .codec import Interval, cell_size, decode, encode
from .errors import GeohashError, InvalidArgument, InvalidCharacter
from .validation import is_valid_coordinate

__all__ = [
    "BASE32",
    "Direction",
    "GeohashError",
    "Interval",
    "InvalidArgument",
    "InvalidCharacter",
    "Parity",
    "adjacent",
    "adjacent_grid",
    "cell_size",
    "decode",
    "encode",
    "is_valid_coordinate",
    "neighbors",
]
