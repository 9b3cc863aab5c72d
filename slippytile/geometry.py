"""
Conversions between lon/lat degrees and slippy map (Web Mercator) tiles.
See https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames
"""
import math
from collections import namedtuple

from loguru import logger

Extent = namedtuple('Extent', ['west', 'north', 'east', 'south'])


class OutOfRangeError(ValueError):
    pass


def lonlat2tile(lon, lat, zoom):
    """
    Convert lon/lat to the tile containing it.
    Indices are not clamped: a longitude outside [-180, 180] or a latitude
    beyond the Mercator limit gives a tile outside the grid.
    :param lon: longitude (W-E), degrees
    :param lat: latitude (N-S), degrees, strictly between -90 and 90
    :param zoom: zoom level
    :return: (x, y)
    """
    if not abs(lat) < 90:
        raise OutOfRangeError(f'latitude must be strictly between -90 and 90: {lat}')
    if not math.isfinite(lon):
        raise OutOfRangeError(f'longitude must be finite: {lon}')
    lat_rad = math.radians(lat)
    n = math.pow(2, zoom)
    col = (lon + 180) / 360 * n
    if math.isinf(col):
        raise OutOfRangeError(f'longitude overflows the tile grid at zoom {zoom}: {lon}')
    # asinh(tan) is ln(tan + sec) without the cancellation near -90
    x = math.floor(col)
    y = math.floor(
        (1 -
         math.asinh(math.tan(lat_rad)) /
         math.pi) /
        2 *
        n
    )
    return x, y


def tile2lonlat(x, y, zoom):
    """
    Convert a tile to the lon/lat of its top-left (NW) corner.
    :param x: tile column
    :param y: tile row
    :param zoom: zoom level
    :return: (lon, lat)
    """
    n = math.pow(2, zoom)
    lon = x / n * 360 - 180
    y_frac = math.pi * (1 - 2 * y / n)
    try:
        lat = math.degrees(math.atan(math.sinh(y_frac)))
    except OverflowError:
        # atan(+-inf)
        lat = math.copysign(90.0, y_frac)
    return lon, lat


def zoom_in(x, y):
    """
    The four tiles a tile splits into at the next zoom level.

        +--------+--------+
        | x1, y1 | x2, y1 |
        +--------+--------+
        | x1, y2 | x2, y2 |
        +--------+--------+

    :return: (nw, ne, sw, se)
    """
    x2 = 2 * x
    y2 = 2 * y
    return (x2, y2), (x2 + 1, y2), (x2, y2 + 1), (x2 + 1, y2 + 1)


def zoom_out(x, y):
    """The tile this one merges into at the previous zoom level."""
    return x // 2, y // 2


def tile_extent(x, y, zoom):
    west, north = tile2lonlat(x, y, zoom)
    east, south = tile2lonlat(x + 1, y + 1, zoom)
    return Extent(west, north, east, south)


def tiles_in_extent(left, top, right, bottom, zoom):
    """
    Every tile covering a lon/lat box, row by row. The box is checked on the
    call, before iterating.
    :param left: west longitude
    :param top: north latitude
    :param right: east longitude
    :param bottom: south latitude
    :param zoom: zoom level
    :return: iterator of (x, y)
    """
    if left > right or bottom > top:
        raise OutOfRangeError(f'invalid extent: {left}, {top}, {right}, {bottom}')
    max_index = 2 ** zoom - 1
    x1, y1 = lonlat2tile(left, top, zoom)
    x2, y2 = lonlat2tile(right, bottom, zoom)
    x1, y1 = max(0, x1), max(0, y1)
    x2, y2 = min(max_index, x2), min(max_index, y2)
    logger.debug(f'tile range at zoom {zoom}: x {x1}:{x2}, y {y1}:{y2}')
    return _iter_tiles(x1, y1, x2, y2)


def _iter_tiles(x1, y1, x2, y2):
    for y in range(y1, y2 + 1):
        for x in range(x1, x2 + 1):
            yield x, y


if __name__ == '__main__':
    print(lonlat2tile(14.016667, 42.683333, 13))
    print(tile2lonlat(4414, 3019, 13))
