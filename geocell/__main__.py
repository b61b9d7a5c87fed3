import logging
import sys

from . import config
from .adjacency import neighbors
from .codec import decode, encode
from .errors import GeohashError

logger = logging.getLogger("geocell")


def main(argv: list[str]) -> int:
    # no-op when the root logger already has handlers
    logging.basicConfig(
        stream=sys.stdout,
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    lat, lon, precision = 41.878738, -87.6359612, 6  # Willis Tower
    try:
        if len(argv) >= 2:
            lat, lon = float(argv[0]), float(argv[1])
        if len(argv) >= 3:
            precision = int(argv[2])
        encoded = encode(lat, lon, precision)
    except (ValueError, GeohashError) as e:
        logger.error("Could not encode %s: %s", argv, e)
        return 1

    lat_interval, lon_interval = decode(encoded)
    logger.info("Encoded: %s", encoded)
    logger.info("Decoded: (%f, %f) +/- (%f, %f)", lat_interval.center, lon_interval.center,
                lat_interval.error, lon_interval.error)
    logger.info("Neighbors: %s", neighbors(encoded))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
