"""Per-club statistics block: R/B ratio, member count and a two-color proportion bar.

Computation (`ClubStats`, `format_ratio`, `bar_segments`) is kept apart from
drawing so it can be checked without a surface.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from clubviz.config import RATIO_LABELS, STATS_STYLE, TRAIT_COLORS


@dataclass(frozen=True)
class ClubStats:
    r_count: int
    b_count: int
    total: int

    @classmethod
    def from_club(cls, club) -> 'ClubStats':
        return cls(club.get_trait_count('R'), club.get_trait_count('B'), club.get_member_count())

    @property
    def ratio_label(self) -> str:
        return f'R/B: {format_ratio(self.r_count, self.b_count, self.total)}'

    @property
    def members_label(self) -> str:
        return f'Members: {self.total}'


def format_ratio(r_count: int, b_count: int, total: int) -> str:
    """R/B ratio to two decimals; configured placeholders for an empty club or zero B."""
    if total <= 0:
        return RATIO_LABELS['empty']
    if r_count == 0 and b_count == 0:
        # members carry neither trait
        return RATIO_LABELS['empty']
    if b_count == 0:
        return RATIO_LABELS['no_b']
    return f'{r_count / b_count:.2f}'


def bar_segments(stats: ClubStats, bar_width: float) -> Tuple[float, float]:
    """Widths of the R and B segments. B takes the remainder so they sum to `bar_width`."""
    if stats.total <= 0:
        return 0.0, 0.0
    r_width = stats.r_count / stats.total * bar_width
    return r_width, bar_width - r_width


def draw_info_label(surface, text: str, x: float, y: float, height: float,
                    style: Optional[dict] = None) -> None:
    """Centered black text on a translucent white backing box of `height`."""
    style = style or STATS_STYLE
    width = surface.measure_text(text)
    padding = height * style['label_padding_frac']
    surface.fill_rect(x - width / 2 - padding, y - height / 2,
                      width + padding * 2, height, style['label_backing'])
    surface.fill_text(text, x, y + height / 3, style['label_color'], align='center')


def draw_count_label(surface, count: int, x: float, y: float, height: float, color,
                     align: str, style: Optional[dict] = None) -> None:
    """Count next to the bar; `align` 'right' grows leftwards from `x`, 'left' rightwards."""
    style = style or STATS_STYLE
    text = str(count)
    width = surface.measure_text(text)
    padding = height * style['label_padding_frac']
    bg_x = x - width - padding * 2 if align == 'right' else x
    surface.fill_rect(bg_x, y, width + padding * 2, height, style['label_backing'])
    surface.fill_text(text, x, y + height / 2 + height / 3, color, align=align)


def draw_club_stats(surface, x: float, y: float, bar_width: float, bar_height: float,
                    stats: ClubStats, spacing: float, min_dimension: float,
                    style: Optional[dict] = None) -> Tuple[float, float]:
    """Draw the stats block with the bar's top edge at `y`, centered on `x`.

    Returns the (r_width, b_width) segment widths that were drawn.
    """
    style = style or STATS_STYLE
    bar_x = x - bar_width / 2

    draw_info_label(surface, stats.ratio_label, x, y - spacing * style['ratio_label_offset'],
                    bar_height, style)
    draw_info_label(surface, stats.members_label, x, y - spacing * style['members_label_offset'],
                    bar_height, style)

    surface.fill_rect(bar_x, y, bar_width, bar_height, style['background'])

    r_width, b_width = bar_segments(stats, bar_width)
    if stats.total > 0:
        surface.fill_rect(bar_x, y, r_width, bar_height, TRAIT_COLORS['R'])
        surface.fill_rect(bar_x + r_width, y, b_width, bar_height, TRAIT_COLORS['B'])

    padding = min_dimension * style['count_padding_frac']
    count_height = min_dimension * style['count_height_frac']
    draw_count_label(surface, stats.r_count, bar_x - padding, y, count_height,
                     TRAIT_COLORS['R'], 'right', style)
    draw_count_label(surface, stats.b_count, bar_x + bar_width + padding, y, count_height,
                     TRAIT_COLORS['B'], 'left', style)
    return r_width, b_width
