import math

import pytest

from geocell import InvalidArgument, InvalidCharacter, cell_size, decode, encode
from geocell.base32 import BASE32

POINTS = [
    (39.928167, 116.389550),
    (41.878738, -87.6359612),
    (-33.8688, 151.2093),
    (0.0, 0.0),
    (90.0, 180.0),
    (-90.0, -180.0),
    (42.605, -5.603),
]


def test_encode_beijing():
    assert encode(39.928167, 116.389550, 4) == "wx4g"


def test_encode_default_precision():
    assert len(encode(39.928167, 116.389550)) == 5
    assert encode(39.928167, 116.389550).startswith("wx4g")


def test_encode_midpoint_goes_to_lower_half():
    # 0,0 sits on the first midpoint of both axes
    assert encode(0.0, 0.0, 1) == "7"
    assert encode(0.0, 0.0, 2) == "7z"


def test_encode_corners():
    assert encode(-90.0, -180.0, 3) == "000"
    assert encode(90.0, 180.0, 3) == "zzz"


@pytest.mark.parametrize(
    "lat, lon, precision, name",
    [
        (91.0, 0.0, 1, "latitude"),
        (-90.5, 0.0, 1, "latitude"),
        (23.4, 181.2, 1, "longitude"),
        (23.4, -180.1, 1, "longitude"),
        (23.4, 121.2, -1, "precision"),
        (23.4, 121.2, 0, "precision"),
        (23.4, 121.2, True, "precision"),
        (23.4, 121.2, 2.0, "precision"),
        (math.nan, 0.0, 1, "latitude"),
    ],
)
def test_encode_invalid_arguments(lat, lon, precision, name):
    with pytest.raises(InvalidArgument) as excinfo:
        encode(lat, lon, precision)
    assert excinfo.value.name == name
    assert isinstance(excinfo.value, ValueError)


def test_encode_logs_rejected_input(caplog):
    with pytest.raises(InvalidArgument):
        encode(91.0, 0.0, 1)
    assert "invalid" in caplog.text


@pytest.mark.parametrize("lat, lon", POINTS)
def test_encode_uses_alphabet_only(lat, lon):
    geohash = encode(lat, lon, 12)
    assert len(geohash) == 12
    assert all(c in BASE32 for c in geohash)


def test_decode_ezs42():
    lat, lon = decode("ezs42")

    assert lat.lo == pytest.approx(42.583, abs=1e-3)
    assert lat.hi == pytest.approx(42.627, abs=1e-3)
    assert lat.center == pytest.approx(42.605, abs=1e-3)
    assert lat.error == pytest.approx(0.02197, abs=1e-5)

    assert lon.lo == pytest.approx(-5.625, abs=1e-3)
    assert lon.hi == pytest.approx(-5.581, abs=1e-3)
    assert lon.center == pytest.approx(-5.603, abs=1e-3)
    assert lon.error == pytest.approx(0.02197, abs=1e-5)


def test_decode_returns_four_values_per_axis():
    lat, lon = decode("wx4g")
    assert len(lat) == 4 and len(lon) == 4
    assert lat[2] == lat.center == (lat.lo + lat.hi) / 2


def test_decode_empty_is_whole_map():
    lat, lon = decode("")
    assert tuple(lat) == (-90.0, 90.0, 0.0, 90.0)
    assert tuple(lon) == (-180.0, 180.0, 0.0, 180.0)


def test_decode_is_case_insensitive():
    assert decode("EZS42") == decode("ezs42")


@pytest.mark.parametrize("geohash, char, position", [("ezsa2", "a", 3), ("i", "i", 0), ("wx4g!", "!", 4)])
def test_decode_invalid_character(geohash, char, position):
    with pytest.raises(InvalidCharacter) as excinfo:
        decode(geohash)
    assert excinfo.value.char == char
    assert excinfo.value.position == position


@pytest.mark.parametrize("geohash", ["\u212a", "wx4\u212a", "\u0130"])
def test_decode_rejects_non_ascii_lookalikes(geohash):
    # KELVIN SIGN lowercases to "k"
    with pytest.raises(InvalidCharacter):
        decode(geohash)


@pytest.mark.parametrize("lat, lon", POINTS)
@pytest.mark.parametrize("precision", [1, 2, 5, 8, 12])
def test_round_trip_contains_point(lat, lon, precision):
    lat_interval, lon_interval = decode(encode(lat, lon, precision))

    assert lat_interval.lo <= lat <= lat_interval.hi
    assert lon_interval.lo <= lon <= lon_interval.hi
    assert lon_interval.error == 180 / 2 ** math.ceil(5 * precision / 2)
    assert lat_interval.error == 90 / 2 ** math.floor(5 * precision / 2)


@pytest.mark.parametrize("precision", [1, 4, 7, 12])
def test_cell_size_is_twice_decode_error(precision):
    lat_interval, lon_interval = decode("s" * precision)
    assert cell_size(precision) == (2 * lat_interval.error, 2 * lon_interval.error)


def test_cell_size_rejects_bad_precision():
    with pytest.raises(InvalidArgument):
        cell_size(0)
