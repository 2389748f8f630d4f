"""
viewer.py

Interactive pygame window around `GridVisualizer`.

The window is the viewport: resizing it re-runs `initialize` (member offsets
are kept), every frame repaints the Pillow surface and blits it. Keys:
`q`/Esc quit, `r` re-lays out at the current size.
"""
import argparse
import logging
import os
import sys

import numpy as np

from clubviz.config import SURFACE_DEFAULTS, VIEWER
from clubviz.model import build_random_snapshot
from clubviz.utils import configure_logging
from clubviz.visualization import GridVisualizer, PillowSurface
from clubviz.visualization.viewport import apply_device_scale

log = logging.getLogger(__name__)


class WindowViewport:
    """Viewport provider reading the size of a pygame display surface."""

    def __init__(self, screen, device_pixel_ratio=1.0):
        self.screen = screen
        self.device_pixel_ratio = device_pixel_ratio

    def get_size(self):
        w, h = self.screen.get_size()
        return float(w), float(h)

    def get_device_pixel_ratio(self):
        return self.device_pixel_ratio

    def apply_scale(self, surface, width, height, ratio) -> None:
        apply_device_scale(surface, width, height, ratio)


def blit_surface(pygame, screen, surface) -> None:
    """Copy the Pillow image onto `screen`, scaling it down if the device ratio is > 1."""
    img = surface.image
    frame = pygame.image.frombuffer(img.tobytes(), img.size, 'RGBA')
    if frame.get_size() != screen.get_size():
        frame = pygame.transform.smoothscale(frame, screen.get_size())
    screen.fill(VIEWER['background'])
    screen.blit(frame, (0, 0))


def run_viewer(clubs, people, width=SURFACE_DEFAULTS['width'], height=SURFACE_DEFAULTS['height'],
               device_pixel_ratio=1.0, rng=None, max_frames=None) -> int:
    """Open a window and repaint until closed or `max_frames` frames have been shown."""
    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((int(width), int(height)), pygame.RESIZABLE)
    except Exception as e:
        log.error('failed to open display: %s (set SDL_VIDEODRIVER=dummy for headless runs)', e)
        pygame.quit()
        return 1

    viz = GridVisualizer(PillowSurface(width * device_pixel_ratio, height * device_pixel_ratio),
                         WindowViewport(screen, device_pixel_ratio), rng=rng)
    viz.initialize(clubs, people)
    clock = pygame.time.Clock()

    frames = 0
    running = True
    try:
        while running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN and e.key in (pygame.K_q, pygame.K_ESCAPE):
                    running = False
                elif e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                    viz.initialize(clubs, people)
                elif e.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                    viz.viewport.screen = screen
                    viz.initialize(clubs, people)

            viz.draw()
            blit_surface(pygame, screen, viz.surface)
            pygame.display.set_caption(f"{VIEWER['caption']} - {viz.legend.caption()}")
            pygame.display.flip()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
            clock.tick(VIEWER['fps'])
    finally:
        pygame.quit()
    return 0


def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog='clubviz-viewer', description='Live club grid viewer.')
    p.add_argument('--clubs', type=int, default=6)
    p.add_argument('--people', type=int, default=60)
    p.add_argument('--memberships', type=int, default=1)
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--width', type=int, default=SURFACE_DEFAULTS['width'])
    p.add_argument('--height', type=int, default=SURFACE_DEFAULTS['height'])
    p.add_argument('--dpr', type=float, default=SURFACE_DEFAULTS['device_pixel_ratio'],
                   help='device pixel ratio of the backing surface')
    p.add_argument('--headless', action='store_true', help='use the dummy SDL driver and show one frame')
    args = p.parse_args(argv)

    configure_logging(logging.INFO)
    if args.headless:
        os.environ['SDL_VIDEODRIVER'] = 'dummy'

    rng = np.random.default_rng(args.seed)
    clubs, people = build_random_snapshot(args.clubs, args.people, args.memberships, rng=rng)
    return run_viewer(clubs, people, args.width, args.height, args.dpr, rng=rng,
                      max_frames=1 if args.headless else None)


if __name__ == '__main__':
    sys.exit(main())
