import logging
from typing import NamedTuple

from .base32 import BASE32, index_of
from .config import BITS_PER_CHAR, DEFAULT_PRECISION, LAT_RANGE, LON_RANGE
from .errors import InvalidArgument, InvalidCharacter
from .validation import is_valid_coordinate, is_valid_precision

logger = logging.getLogger(__name__)


class Interval(NamedTuple):
    """Bounds of one axis of a geohash cell, with its center and half-width."""

    lo: float
    hi: float
    center: float
    error: float


def _check_encode_args(lat: float, lon: float, precision: int) -> None:
    if not is_valid_coordinate(lat, lon):
        if LAT_RANGE[0] <= lat <= LAT_RANGE[1]:
            raise InvalidArgument("longitude", lon)
        raise InvalidArgument("latitude", lat)
    if not is_valid_precision(precision):
        raise InvalidArgument("precision", precision)


def encode(lat: float, lon: float, precision: int = DEFAULT_PRECISION) -> str:
    """Encode a latitude and longitude into a geohash of `precision` characters.

    Bits alternate longitude first. A coordinate sitting exactly on a
    midpoint falls in the lower half.

    Raises:
        InvalidArgument: latitude, longitude or precision out of range.
    """
    try:
        _check_encode_args(lat, lon, precision)
    except InvalidArgument:
        logger.error("encode: input lat %s lon %s precision %s invalid", lat, lon, precision)
        raise

    lat_lo, lat_hi = LAT_RANGE
    lon_lo, lon_hi = LON_RANGE
    is_lon = True
    result = []
    while len(result) < precision:
        ch = 0
        for _ in range(BITS_PER_CHAR):
            ch <<= 1
            if is_lon:
                mid = (lon_lo + lon_hi) / 2
                if lon > mid:
                    ch |= 1
                    lon_lo = mid
                else:
                    lon_hi = mid
            else:
                mid = (lat_lo + lat_hi) / 2
                if lat > mid:
                    ch |= 1
                    lat_lo = mid
                else:
                    lat_hi = mid
            is_lon = not is_lon
        result.append(BASE32[ch])

    return "".join(result)


def _refine(interval: list[float], bit: int) -> None:
    mid = (interval[0] + interval[1]) / 2
    if bit:
        interval[0] = mid
    else:
        interval[1] = mid


def decode(geohash: str) -> tuple[Interval, Interval]:
    """Decode a geohash into its (latitude, longitude) intervals.

    The empty string decodes to the whole map.

    Raises:
        InvalidCharacter: a character is not in the base32 alphabet.
    """
    lat = list(LAT_RANGE)
    lon = list(LON_RANGE)
    lat_err, lon_err = LAT_RANGE[1], LON_RANGE[1]

    is_lon = True
    for position, char in enumerate(geohash):
        try:
            value = index_of(char)
        except InvalidCharacter:
            raise InvalidCharacter(char, position, geohash) from None
        for shift in range(BITS_PER_CHAR - 1, -1, -1):
            bit = (value >> shift) & 1
            if is_lon:
                lon_err /= 2
                _refine(lon, bit)
            else:
                lat_err /= 2
                _refine(lat, bit)
            is_lon = not is_lon

    return (
        Interval(lat[0], lat[1], (lat[0] + lat[1]) / 2, lat_err),
        Interval(lon[0], lon[1], (lon[0] + lon[1]) / 2, lon_err),
    )


def cell_size(precision: int) -> tuple[float, float]:
    """Calculate the size of a geohash cell for a given precision.

    Args:
        precision (int): precision/length of geohash

    Returns:
        (latitude_height, longitude_width) in degrees
    """
    if not is_valid_precision(precision):
        raise InvalidArgument("precision", precision)
    lat_bits = precision * BITS_PER_CHAR // 2
    lon_bits = precision * BITS_PER_CHAR - lat_bits

    lat_height = (LAT_RANGE[1] - LAT_RANGE[0]) / (1 << lat_bits)
    lon_width = (LON_RANGE[1] - LON_RANGE[0]) / (1 << lon_bits)

    return lat_height, lon_width
