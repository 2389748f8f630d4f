# -*- coding: utf-8 -*-

"""
clubviz/config.py

This module centralizes all layout fractions, colors and style constants used by
the club grid renderer. Keeping them in one place keeps the layout engine, the
statistics renderer and the viewer consistent with each other.

Contents:
---------
1. LAYOUT:
   - Grid sizing and padding fractions used by `visualization.layout`.
   - Range of the randomized polar offset given to each person inside a club.

2. CLUB_STYLE / STATS_STYLE / MEMBER_STYLE:
   - Stroke/fill colors and size fractions for the club circle, the stats block
     above it and the member dots inside it. Size fractions are relative to
     either the club radius or the smaller surface dimension, as noted.

3. TRAIT_COLORS:
   - One fixed category color per trait.

4. RATIO_LABELS:
   - What the "R/B" label shows for an empty club and for a club with no B
     members.

5. SURFACE_DEFAULTS / VIEWER:
   - Default viewport size for headless renders and the pygame viewer settings.

Usage:
------
    from clubviz.config import LAYOUT, TRAIT_COLORS

    min_r = LAYOUT['offset_min_frac'] * club_radius

"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) LAYOUT
# ───────────────────────────────────────────────────────────────────────────────
LAYOUT = {
    'min_padding_frac': 0.05,   # floor padding, fraction of the smaller surface dimension
    'club_radius_frac': 0.3,    # club radius, fraction of min(cell width, cell height)
    'rebalance_ratio': 1.5,     # add a column while rows exceed this many times the columns

    # polar offsets of people inside a club, fraction of the club radius
    'offset_min_frac': 0.10,
    'offset_max_frac': 0.85,

    # 'members' seeds offsets only for clubs a person belongs to,
    # 'all' seeds every person x every club
    'seed_scope': 'members',
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) STYLES
# ───────────────────────────────────────────────────────────────────────────────
CLUB_STYLE = {
    'stroke': '#cccccc',
    'fill': '#ffffff',
    'line_width_frac': 0.002,   # of min dimension
    'label_color': '#000000',
    'label_offset': 1.25,       # label baseline, in club radii below the center
    'label_font_min': 12,       # px
    'label_font_frac': 0.012,   # of min dimension
}

STATS_STYLE = {
    'bar_width_frac': 0.75,     # of club radius
    'bar_height_frac': 0.2,     # of club radius
    'spacing_frac': 0.3,        # gap between circle and bar, of club radius
    'ratio_label_offset': 1.2,  # in spacings above the bar
    'members_label_offset': 0.6,
    'background': '#f0f0f0',
    'label_color': '#000000',
    'label_backing': (255, 255, 255, 230),
    'label_padding_frac': 0.3,  # of label height
    'count_padding_frac': 0.005,  # of min dimension
    'count_height_frac': 0.015,   # of min dimension
}

MEMBER_STYLE = {
    'dot_radius_frac': 0.008,       # of min dimension
    'outline': '#ffffff',
    'outline_width_frac': 0.001,    # of min dimension
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) TRAIT COLORS
# ───────────────────────────────────────────────────────────────────────────────
TRAITS = ('R', 'B')

TRAIT_COLORS = {
    'R': '#e91e63',     # red-pink
    'B': '#2196f3',     # blue
}

# ───────────────────────────────────────────────────────────────────────────────
# 4) RATIO LABELS
# ───────────────────────────────────────────────────────────────────────────────
RATIO_LABELS = {
    'empty': 'N/A',     # club has no members
    'no_b': 'inf',      # club has R members but no B members
}

# ───────────────────────────────────────────────────────────────────────────────
# 5) SURFACE / VIEWER
# ───────────────────────────────────────────────────────────────────────────────
SURFACE_DEFAULTS = {
    'width': 800,
    'height': 600,
    'device_pixel_ratio': 1.0,
    'background': (0, 0, 0, 0),
}

VIEWER = {
    'caption': 'clubviz',
    'fps': 30,
    'background': (250, 250, 250),
}
