"""
numpy versions of the tile conversions, for many points at once.

Unlike the scalar functions in geometry, nothing is validated here: a
latitude at or beyond the poles gives inf/nan rows instead of an error.
"""
import numpy as np


def lonlat2tile_array(lon, lat, zoom):
    """
    :param lon: array-like of longitudes, degrees
    :param lat: array-like of latitudes, degrees
    :param zoom: zoom level
    :return: (x, y) float64 arrays of floored tile indices
    """
    lon, lat = np.broadcast_arrays(np.asarray(lon, dtype=np.float64), np.asarray(lat, dtype=np.float64))
    lat_rad = np.radians(lat)
    n = 2.0 ** zoom
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        x = np.floor((lon + 180) / 360 * n)
        y = np.floor((1 - np.log(np.tan(lat_rad) + 1 / np.cos(lat_rad)) / np.pi) / 2 * n)
    return x, y


def tile2lonlat_array(x, y, zoom):
    """
    :return: (lon, lat) float64 arrays, NW corner of each tile
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
    n = 2.0 ** zoom
    lon = x / n * 360 - 180
    with np.errstate(over='ignore'):
        lat = np.degrees(np.arctan(np.sinh(np.pi * (1 - 2 * y / n))))
    return lon, lat
