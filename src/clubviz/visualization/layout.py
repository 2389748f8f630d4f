"""
layout.py

Grid layout of clubs on a surface and the per-person polar offsets inside
each club's circle.

Functions are small and pure apart from the random draws in `OffsetStore`,
which come from an injected numpy Generator.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, NamedTuple, Optional, Tuple

import numpy as np

from clubviz.config import LAYOUT

logger = logging.getLogger(__name__)


def compute_grid(n_clubs: int, width: float, height: float,
                 rebalance_ratio: float = LAYOUT['rebalance_ratio']) -> Tuple[int, int]:
    """Return (columns, rows) for `n_clubs` on a `width` x `height` surface.

    Columns follow the surface aspect ratio, ``ceil(sqrt(n * w / h))``. While
    the grid is more than `rebalance_ratio` times taller than wide, a column is
    added. Degenerate input (no clubs or an empty surface) yields ``(0, 0)``.
    Raises ValueError for a non-positive `rebalance_ratio`.
    """
    if rebalance_ratio <= 0:
        raise ValueError('rebalance_ratio must be positive')
    if n_clubs <= 0 or width <= 0 or height <= 0:
        return 0, 0
    aspect_ratio = width / height
    n_cols = max(1, math.ceil(math.sqrt(n_clubs * aspect_ratio)))
    n_rows = math.ceil(n_clubs / n_cols)
    # bounded for a positive ratio: n_rows reaches 1 once n_cols >= n_clubs
    while n_rows > n_cols * rebalance_ratio:
        n_cols += 1
        n_rows = math.ceil(n_clubs / n_cols)
    return n_cols, n_rows


@dataclass
class GridLayout:
    """Result of one layout pass. Positions map club id -> (x, y) center."""
    width: float = 0.0
    height: float = 0.0
    n_columns: int = 0
    n_rows: int = 0
    cell_width: float = 0.0
    cell_height: float = 0.0
    club_radius: float = 0.0
    horizontal_padding: float = 0.0
    vertical_padding: float = 0.0
    positions: Dict[Hashable, Tuple[float, float]] = field(default_factory=dict)

    def cell_of(self, index: int) -> Tuple[int, int]:
        """Row-major (row, col) of the club at `index`."""
        return index // self.n_columns, index % self.n_columns

    def center_of(self, index: int) -> Tuple[float, float]:
        row, col = self.cell_of(index)
        return (self.horizontal_padding + self.cell_width * (0.5 + col),
                self.vertical_padding + self.cell_height * (0.5 + row))


def compute_layout(club_ids: Iterable[Hashable], width: float, height: float,
                   config: Optional[dict] = None) -> GridLayout:
    """Place clubs on a centered grid.

    Args:
        club_ids: club identifiers in display order (row-major).
        width, height: surface size in logical pixels.
        config: overrides for `LAYOUT` keys.

    Returns:
        GridLayout. Empty (no positions, radius 0) for degenerate input.
    """
    cfg = dict(LAYOUT, **(config or {}))
    club_ids = list(club_ids)
    n_cols, n_rows = compute_grid(len(club_ids), width, height, cfg['rebalance_ratio'])
    if n_cols == 0:
        if club_ids:
            logger.warning('degenerate surface %sx%s, %d clubs left unplaced',
                           width, height, len(club_ids))
        return GridLayout(width=width, height=height)

    min_padding = min(width, height) * cfg['min_padding_frac']
    cell_width = (width - min_padding * 2) / n_cols
    cell_height = (height - min_padding * 2) / n_rows

    layout = GridLayout(
        width=width,
        height=height,
        n_columns=n_cols,
        n_rows=n_rows,
        cell_width=cell_width,
        cell_height=cell_height,
        club_radius=min(cell_width, cell_height) * cfg['club_radius_frac'],
        # realized padding centers the grid; min_padding only sizes the cells
        horizontal_padding=(width - cell_width * n_cols) / 2,
        vertical_padding=(height - cell_height * n_rows) / 2,
    )
    for i, club_id in enumerate(club_ids):
        layout.positions[club_id] = layout.center_of(i)

    logger.debug('layout %d clubs -> %d cols x %d rows, radius %.2f',
                 len(club_ids), n_cols, n_rows, layout.club_radius)
    return layout


class PolarOffset(NamedTuple):
    """Position of a person inside a club circle.

    `radius_fraction` is relative to the club radius so an offset stays inside
    the circle when the layout is recomputed at another size.
    """
    angle: float
    radius_fraction: float

    def radius_at(self, club_radius: float) -> float:
        return self.radius_fraction * club_radius

    def to_local(self, club_radius: float) -> Tuple[float, float]:
        r = self.radius_at(club_radius)
        return math.cos(self.angle) * r, math.sin(self.angle) * r


class OffsetStore:
    """person id -> club id -> PolarOffset, with insert-if-absent semantics.

    An offset is drawn once per (person, club) pair and then reused for every
    later draw and layout.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 min_fraction: float = LAYOUT['offset_min_frac'],
                 max_fraction: float = LAYOUT['offset_max_frac']):
        if not 0.0 <= min_fraction <= max_fraction:
            raise ValueError('offset fractions must satisfy 0 <= min <= max')
        self.rng = rng if rng is not None else np.random.default_rng()
        self.min_fraction = min_fraction
        self.max_fraction = max_fraction
        self._offsets: Dict[Hashable, Dict[Hashable, PolarOffset]] = {}

    def __len__(self):
        return sum(len(v) for v in self._offsets.values())

    def __contains__(self, key):
        person_id, club_id = key
        return club_id in self._offsets.get(person_id, {})

    def get(self, person_id, club_id) -> Optional[PolarOffset]:
        per_person = self._offsets.get(person_id)
        if per_person is None:
            return None
        return per_person.get(club_id)

    def ensure(self, person_id, club_id) -> PolarOffset:
        per_person = self._offsets.setdefault(person_id, {})
        offset = per_person.get(club_id)
        if offset is None:
            # modulo keeps a rounded-up 2*pi inside [0, 2*pi)
            angle = (float(self.rng.random()) * 2.0 * math.pi) % (2.0 * math.pi)
            frac = self.min_fraction + float(self.rng.random()) * (self.max_fraction - self.min_fraction)
            offset = PolarOffset(angle, frac)
            per_person[club_id] = offset
        return offset

    def resolve(self, person_id, club_id, club_radius: float) -> Optional[Tuple[float, float]]:
        """Return ``(angle, radius)`` for the pair at `club_radius`, or None if unseen."""
        offset = self.get(person_id, club_id)
        if offset is None:
            return None
        return offset.angle, offset.radius_at(club_radius)

    def clubs_for(self, person_id) -> Dict[Hashable, PolarOffset]:
        return dict(self._offsets.get(person_id, {}))
