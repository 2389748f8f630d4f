"""
surface.py

CPU drawing surface backed by a Pillow RGBA image.

`PillowSurface` exposes a small stateful 2D-context API (transform stack,
styles, rectangles, circles, text) so the layout and stats code can draw in
local coordinates and let the surface map them to device pixels. Only
axis-aligned transforms are supported: translation plus per-axis scale.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from clubviz.config import SURFACE_DEFAULTS

logger = logging.getLogger(__name__)

_FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "Arial.ttf",
)

_ANCHORS = {'left': 'ls', 'center': 'ms', 'right': 'rs'}


def load_font(size: int):
    """Load a sans-serif font at `size` device pixels, falling back to Pillow's default."""
    size = max(1, int(size))
    for path in _FONT_CANDIDATES:
        try:
            return ImageFont.truetype(path, size=size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


class PillowSurface:
    """Stateful 2D drawing surface rendering into ``self.image``.

    Coordinates passed to the drawing methods are in user space; the current
    transform maps them to device pixels as ``(tx + x * sx, ty + y * sy)``.
    """

    def __init__(self, width: int = SURFACE_DEFAULTS['width'],
                 height: int = SURFACE_DEFAULTS['height'],
                 background=SURFACE_DEFAULTS['background']):
        self.background = tuple(background)
        self.visible = False
        self.font_size = 12.0
        self._transform = (1.0, 1.0, 0.0, 0.0)
        self._stack: List[Tuple[Tuple[float, float, float, float], float]] = []
        self._fonts: Dict[int, object] = {}
        self.image: Optional[Image.Image] = None
        self._draw: Optional[ImageDraw.ImageDraw] = None
        self.resize(width, height)

    # ------------------------------------------------------------------
    # backing store and state
    # ------------------------------------------------------------------
    @property
    def size(self) -> Tuple[int, int]:
        """Backing-store size in device pixels."""
        return self.image.size

    def resize(self, width, height) -> None:
        """Reallocate the backing store. Clears pixels and the state stack."""
        w = max(0, int(round(width)))
        h = max(0, int(round(height)))
        self.image = Image.new('RGBA', (w, h), self.background)
        self._draw = ImageDraw.Draw(self.image, 'RGBA')
        self._stack.clear()
        logger.debug('surface resized to %dx%d device px', w, h)

    def show(self) -> None:
        self.visible = True

    def save(self) -> None:
        self._stack.append((self._transform, self.font_size))

    def restore(self) -> None:
        # unmatched restore is a no-op, like a browser 2D context
        if self._stack:
            self._transform, self.font_size = self._stack.pop()

    @property
    def transform(self) -> Tuple[float, float, float, float]:
        """Current ``(sx, sy, tx, ty)``."""
        return self._transform

    def set_transform(self, a, b, c, d, e, f) -> None:
        if b or c:
            raise ValueError('only axis-aligned transforms are supported')
        self._transform = (float(a), float(d), float(e), float(f))

    def scale(self, x, y) -> None:
        sx, sy, tx, ty = self._transform
        self._transform = (sx * x, sy * y, tx, ty)

    def translate(self, x, y) -> None:
        sx, sy, tx, ty = self._transform
        self._transform = (sx, sy, tx + x * sx, ty + y * sy)

    def to_device(self, x, y) -> Tuple[float, float]:
        sx, sy, tx, ty = self._transform
        return tx + x * sx, ty + y * sy

    # ------------------------------------------------------------------
    # primitives
    # ------------------------------------------------------------------
    def _device_box(self, x, y, w, h):
        x0, y0 = self.to_device(x, y)
        x1, y1 = self.to_device(x + w, y + h)
        x0, x1 = sorted((x0, x1))
        y0, y1 = sorted((y0, y1))
        return int(round(x0)), int(round(y0)), int(round(x1)), int(round(y1))

    def clear_rect(self, x, y, w, h) -> None:
        x0, y0, x1, y1 = self._device_box(x, y, w, h)
        iw, ih = self.image.size
        x0, y0 = max(0, x0), max(0, y0)
        x1, y1 = min(iw, x1), min(ih, y1)
        if x1 <= x0 or y1 <= y0:
            return
        self.image.paste(self.background, (x0, y0, x1, y1))

    def fill_rect(self, x, y, w, h, color) -> None:
        x0, y0, x1, y1 = self._device_box(x, y, w, h)
        if x1 <= x0 or y1 <= y0:
            return
        self._draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=color)

    def draw_circle(self, x, y, radius, fill=None, outline=None, width=0.0) -> None:
        """Fill and/or stroke a circle centred at ``(x, y)``; `width` is in user units."""
        cx, cy = self.to_device(x, y)
        r = abs(radius * self._transform[0])
        if r <= 0:
            return
        line = max(1, int(round(width * self._transform[0]))) if outline is not None else 0
        self._draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=fill, outline=outline, width=line)

    # ------------------------------------------------------------------
    # text
    # ------------------------------------------------------------------
    def set_font(self, size) -> None:
        self.font_size = float(size)

    def _font(self):
        px = max(1, int(round(self.font_size * self._transform[0])))
        font = self._fonts.get(px)
        if font is None:
            font = load_font(px)
            self._fonts[px] = font
        return font

    def measure_text(self, text: str) -> float:
        """Width of `text` in user units at the current font size."""
        sx = self._transform[0] or 1.0
        return self._draw.textlength(str(text), font=self._font()) / sx

    def fill_text(self, text: str, x, y, color, align: str = 'left') -> None:
        """Draw `text` with its baseline at `y`, aligned on `x` per `align`."""
        if align not in _ANCHORS:
            raise ValueError(f'unknown text alignment {align!r}')
        text = str(text)
        font = self._font()
        dx, dy = self.to_device(x, y)
        if isinstance(font, ImageFont.FreeTypeFont):
            self._draw.text((dx, dy), text, fill=color, font=font, anchor=_ANCHORS[align])
            return
        # bitmap fonts only anchor at the top-left
        width = self._draw.textlength(text, font=font)
        left, top, right, bottom = font.getbbox(text)
        if align == 'center':
            dx -= width / 2.0
        elif align == 'right':
            dx -= width
        self._draw.text((dx, dy - bottom), text, fill=color, font=font)

    def save_png(self, path) -> None:
        self.image.save(path, format='PNG')
