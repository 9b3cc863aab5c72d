import os
import sys

from loguru import logger

# Latitude of the top edge of tile (0, 0): degrees(atan(sinh(pi)))
MAX_LATITUDE = 85.0511287798066

# Above this, 2 ** zoom tile indices are no longer exact in a float64
MAX_PRECISE_ZOOM = 52

LOG_LEVEL_ENV = 'SLIPPYTILE_LOG_LEVEL'


class Config:
    def __init__(self, environ=None):
        environ = os.environ if environ is None else environ
        self.log_level = environ.get(LOG_LEVEL_ENV, 'INFO').upper()

    def setup_logging(self, verbose=False):
        level = 'DEBUG' if verbose else self.log_level
        try:
            logger.level(level)
        except ValueError:
            unknown, level = level, 'INFO'
        else:
            unknown = None
        logger.remove()
        logger.add(sys.stderr, level=level)
        if unknown:
            logger.warning(f'unknown {LOG_LEVEL_ENV} {unknown!r}, logging at INFO')


if __name__ == '__main__':
    config = Config()
    print(config.log_level)
