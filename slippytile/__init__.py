from slippytile.geometry import (Extent, OutOfRangeError, lonlat2tile, tile2lonlat, tile_extent,
                                 tiles_in_extent, zoom_in, zoom_out)
