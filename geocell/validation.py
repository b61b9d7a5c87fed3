from .config import LAT_RANGE, LON_RANGE


def is_valid_coordinate(lat: float, lon: float) -> bool:
    """Check latitude and longitude are inside the encodable ranges."""
    return LAT_RANGE[0] <= lat <= LAT_RANGE[1] and LON_RANGE[0] <= lon <= LON_RANGE[1]


def is_valid_precision(precision: int) -> bool:
    # bool is an int subclass but never a meaningful precision
    return isinstance(precision, int) and not isinstance(precision, bool) and precision > 0
