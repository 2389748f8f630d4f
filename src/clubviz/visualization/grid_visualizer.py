"""
grid_visualizer.py

`GridVisualizer` lays clubs out on a grid and repaints the whole surface on
every `draw()`: one circle per club, a stats block above it, a label below it
and a dot per member inside it.

Control flow:
    initialize(clubs, people)
        -> update_surface_size()   viewport size and device pixel ratio
        -> compute_layout()        club centers and radius
        -> seed offsets            one polar offset per (person, club), kept forever
        -> draw()

Errors while drawing never reach the caller: missing data is logged and the
draw is skipped, a failing club is logged with its id and the remaining clubs
are still drawn.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

import numpy as np

from clubviz.config import CLUB_STYLE, LAYOUT, MEMBER_STYLE, STATS_STYLE, TRAIT_COLORS, TRAITS
from clubviz.utils import safe_log_exception
from clubviz.visualization.layout import GridLayout, OffsetStore, compute_layout
from clubviz.visualization.legend import TraitLegend
from clubviz.visualization.stats import ClubStats, draw_club_stats

logger = logging.getLogger(__name__)


class GridVisualizer:
    """Grid renderer for clubs and their members.

    Args:
        surface: drawing surface (see `PillowSurface`).
        viewport: viewport provider with `get_size`, `get_device_pixel_ratio`
            and `apply_scale`.
        legend: object with `update_legend(counts)`; a `TraitLegend` by default.
        rng: numpy Generator used for member offsets.
        layout_config: overrides for `LAYOUT` keys.
    """

    def __init__(self, surface, viewport, legend=None,
                 rng: Optional[np.random.Generator] = None,
                 layout_config: Optional[dict] = None):
        self.surface = surface
        self.viewport = viewport
        self.legend = legend if legend is not None else TraitLegend()
        self.layout_config = dict(LAYOUT, **(layout_config or {}))
        self.clubs: Optional[Sequence] = None
        self.people: Optional[Sequence] = None
        self.width = 0.0
        self.height = 0.0
        self.min_dimension = 0.0
        self.layout = GridLayout()
        self.offsets = OffsetStore(rng,
                                   min_fraction=self.layout_config['offset_min_frac'],
                                   max_fraction=self.layout_config['offset_max_frac'])

    @property
    def club_radius(self) -> float:
        return self.layout.club_radius

    @property
    def club_positions(self):
        return self.layout.positions

    # ------------------------------------------------------------------
    # layout
    # ------------------------------------------------------------------
    def initialize(self, clubs: Sequence, people: Sequence) -> None:
        """Lay out `clubs`, seed member offsets and draw."""
        self.clubs = list(clubs)
        self.people = list(people)

        self.update_surface_size()
        self.layout = compute_layout([c.id for c in self.clubs], self.width, self.height,
                                     self.layout_config)
        self._seed_offsets()

        self.surface.show()
        self.draw()

    def update_surface_size(self) -> None:
        """Fit the surface to the viewport, scaled by the device pixel ratio."""
        width, height = self.viewport.get_size()
        ratio = self.viewport.get_device_pixel_ratio() or 1
        self.viewport.apply_scale(self.surface, width, height, ratio)
        self.width = width
        self.height = height
        self.min_dimension = min(width, height)
        logger.debug('surface sized to %sx%s @%sx', width, height, ratio)

    resize = update_surface_size

    def _seed_offsets(self) -> None:
        all_clubs = self.layout_config['seed_scope'] == 'all'
        for person in self.people:
            clubs = self.clubs if all_clubs else getattr(person, 'clubs', ())
            for club in clubs:
                self.offsets.ensure(person.id, club.id)
        # members listed by a club but not in `people` still need a dot
        for club in self.clubs:
            for person in club.members:
                self.offsets.ensure(person.id, club.id)

    # ------------------------------------------------------------------
    # drawing
    # ------------------------------------------------------------------
    def draw(self) -> None:
        """Clear and repaint every club, then refresh the legend."""
        if self.surface is None or self.clubs is None or self.people is None:
            logger.error('Cannot draw: missing surface or data')
            return

        self.surface.clear_rect(0, 0, self.width, self.height)

        for club in self.clubs:
            try:
                self.draw_club(club)
            except Exception as e:
                safe_log_exception('Error drawing club', e, club_id=getattr(club, 'id', None))

        self.legend.update_legend(self.trait_counts())

    def trait_counts(self):
        counts = {t: 0 for t in TRAITS}
        for person in self.people or ():
            if person.trait in counts:
                counts[person.trait] += 1
        return counts

    def draw_club(self, club) -> None:
        pos = self.layout.positions.get(club.id)
        if pos is None:
            return

        radius = self.layout.club_radius
        surface = self.surface
        surface.save()
        try:
            surface.translate(pos[0], pos[1])

            surface.draw_circle(0, 0, radius, fill=CLUB_STYLE['fill'], outline=CLUB_STYLE['stroke'],
                                width=self.min_dimension * CLUB_STYLE['line_width_frac'])

            font_size = max(CLUB_STYLE['label_font_min'],
                            math.floor(self.min_dimension * CLUB_STYLE['label_font_frac']))
            surface.set_font(font_size)

            # stats sit above the circle, one spacing clear of it
            spacing = radius * STATS_STYLE['spacing_frac']
            draw_club_stats(
                surface,
                0,
                -radius - spacing,
                radius * STATS_STYLE['bar_width_frac'],
                radius * STATS_STYLE['bar_height_frac'],
                ClubStats.from_club(club),
                spacing,
                self.min_dimension,
            )

            surface.fill_text(f'Club {club.id}', 0, radius * CLUB_STYLE['label_offset'],
                              CLUB_STYLE['label_color'], align='center')

            for person in club.members:
                self.draw_member(club, person)
        finally:
            surface.restore()

    def draw_member(self, club, person) -> None:
        """Dot for `person` inside `club`, in the club's translated coordinates."""
        offset = self.offsets.get(person.id, club.id)
        if offset is None:
            return
        x, y = offset.to_local(self.layout.club_radius)
        self._paint_dot(x, y, person.trait)

    def draw_person(self, person) -> None:
        """Dots for `person` in every club it belongs to, in absolute surface coordinates.

        Alternate entry point; `draw()` goes through `draw_member` instead.
        """
        for club in getattr(person, 'clubs', ()):
            pos = self.layout.positions.get(club.id)
            offset = self.offsets.get(person.id, club.id)
            if pos is None or offset is None:
                continue
            dx, dy = offset.to_local(self.layout.club_radius)
            self._paint_dot(pos[0] + dx, pos[1] + dy, person.trait)

    def _paint_dot(self, x, y, trait) -> None:
        color = TRAIT_COLORS['R'] if trait == 'R' else TRAIT_COLORS['B']
        self.surface.draw_circle(x, y, self.min_dimension * MEMBER_STYLE['dot_radius_frac'],
                                 fill=color, outline=MEMBER_STYLE['outline'],
                                 width=self.min_dimension * MEMBER_STYLE['outline_width_frac'])
