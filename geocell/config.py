import os

DEFAULT_PRECISION = 5
BITS_PER_CHAR = 5

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)

LOG_LEVEL = os.environ.get("GEOCELL_LOG_LEVEL", "INFO").upper()
