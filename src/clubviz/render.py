"""
render.py

Command-line entry point: build a reproducible random snapshot of clubs and
people, lay it out on a headless Pillow surface and write it to a PNG.

    clubviz-render --clubs 6 --people 60 --memberships 2 --seed 7 --out clubs.png
"""
import argparse
import logging
import sys

import numpy as np

from clubviz.config import SURFACE_DEFAULTS
from clubviz.model import build_random_snapshot
from clubviz.utils import configure_logging
from clubviz.visualization import FixedViewport, GridVisualizer, PillowSurface

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='clubviz-render',
                                description='Render a random club snapshot to PNG.')
    p.add_argument('--clubs', type=int, default=6, help='number of clubs')
    p.add_argument('--people', type=int, default=60, help='number of people')
    p.add_argument('--memberships', type=int, default=1, help='clubs per person')
    p.add_argument('--r-share', type=float, default=0.5, help='probability of trait R')
    p.add_argument('--width', type=float, default=SURFACE_DEFAULTS['width'])
    p.add_argument('--height', type=float, default=SURFACE_DEFAULTS['height'])
    p.add_argument('--dpr', type=float, default=SURFACE_DEFAULTS['device_pixel_ratio'],
                   help='device pixel ratio of the output image')
    p.add_argument('--seed', type=int, default=None, help='seed for membership and dot placement')
    p.add_argument('--out', default='clubs.png', help='output PNG path')
    p.add_argument('--log-level', default='INFO',
                   choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return p


def render_snapshot(clubs, people, width, height, device_pixel_ratio=1.0, rng=None):
    """Lay out and draw `clubs`/`people`; returns the visualizer holding the surface."""
    surface = PillowSurface(width, height)
    viewport = FixedViewport(width, height, device_pixel_ratio)
    viz = GridVisualizer(surface, viewport, rng=rng)
    viz.initialize(clubs, people)
    return viz


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    rng = np.random.default_rng(args.seed)
    try:
        clubs, people = build_random_snapshot(args.clubs, args.people, args.memberships,
                                              r_share=args.r_share, rng=rng)
    except ValueError as e:
        log.error('invalid snapshot parameters: %s', e)
        return 2

    viz = render_snapshot(clubs, people, args.width, args.height, args.dpr, rng=rng)
    try:
        viz.surface.save_png(args.out)
    except OSError as e:
        log.error('could not write %s: %s', args.out, e)
        return 1
    log.info('wrote %s (%dx%d px, %d clubs, %s)', args.out, *viz.surface.size,
             len(clubs), viz.legend.caption())
    return 0


if __name__ == '__main__':
    sys.exit(main())
