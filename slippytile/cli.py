"""
Command line wrapper around the tile conversions.

Usage:
    slippytile tile 14.016667 42.683333 13
    slippytile lonlat 4376 2932 13
    slippytile cover 108.9 28.2 109.0 28.1 15
"""
import argparse
import sys

from loguru import logger

from slippytile.config import Config, MAX_PRECISE_ZOOM
from slippytile.geometry import (OutOfRangeError, lonlat2tile, tile2lonlat, tile_extent,
                                 tiles_in_extent, zoom_in, zoom_out)


def build_parser():
    parser = argparse.ArgumentParser(prog='slippytile',
                                     description='Convert between lon/lat and slippy map tiles')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('tile', help='lon/lat to tile x/y')
    p.add_argument('lon', type=float)
    p.add_argument('lat', type=float)
    p.add_argument('zoom', type=int)

    p = sub.add_parser('lonlat', help='tile x/y to lon/lat of its NW corner')
    p.add_argument('x', type=int)
    p.add_argument('y', type=int)
    p.add_argument('zoom', type=int)

    p = sub.add_parser('extent', help='tile x/y to west north east south')
    p.add_argument('x', type=int)
    p.add_argument('y', type=int)
    p.add_argument('zoom', type=int)

    p = sub.add_parser('cover', help='tiles covering a lon/lat box')
    p.add_argument('left', type=float)
    p.add_argument('top', type=float)
    p.add_argument('right', type=float)
    p.add_argument('bottom', type=float)
    p.add_argument('zoom', type=int)

    for name, help_text in (('children', 'the 4 tiles at the next zoom'),
                            ('parent', 'the tile at the previous zoom')):
        p = sub.add_parser(name, help=help_text)
        p.add_argument('x', type=int)
        p.add_argument('y', type=int)
    return parser


def run(args, out):
    if getattr(args, 'zoom', 0) > MAX_PRECISE_ZOOM:
        logger.warning(f'zoom {args.zoom} is above {MAX_PRECISE_ZOOM}, tile indices lose precision')

    if args.command == 'tile':
        print(*lonlat2tile(args.lon, args.lat, args.zoom), file=out)
    elif args.command == 'lonlat':
        print(*tile2lonlat(args.x, args.y, args.zoom), file=out)
    elif args.command == 'extent':
        print(*tile_extent(args.x, args.y, args.zoom), file=out)
    elif args.command == 'cover':
        for x, y in tiles_in_extent(args.left, args.top, args.right, args.bottom, args.zoom):
            print(x, y, file=out)
    elif args.command == 'children':
        for x, y in zoom_in(args.x, args.y):
            print(x, y, file=out)
    elif args.command == 'parent':
        print(*zoom_out(args.x, args.y), file=out)


def main(argv=None, out=None):
    args = build_parser().parse_args(argv)
    Config().setup_logging(args.verbose)
    logger.debug(f'command: {vars(args)}')
    try:
        run(args, out or sys.stdout)
    except OutOfRangeError as e:
        logger.error(f'{args.command} failed: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
