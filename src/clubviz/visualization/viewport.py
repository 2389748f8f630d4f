"""
viewport.py

Viewport providers report the size of the area a surface is displayed in and
the device pixel ratio, and apply that scaling to the surface. Keeping this
behind a narrow interface lets the layout math run against a fixed size in
tests and against a live window in the viewer.

Interface:
- `get_size()` -> (width, height) in CSS/logical pixels
- `get_device_pixel_ratio()` -> float
- `apply_scale(surface, width, height, ratio)`
"""

from clubviz.config import SURFACE_DEFAULTS


def apply_device_scale(surface, width, height, ratio) -> None:
    """Resize the backing store to ``size * ratio``, reset the transform, scale by `ratio`."""
    surface.resize(width * ratio, height * ratio)
    surface.set_transform(1, 0, 0, 1, 0, 0)
    surface.scale(ratio, ratio)


class FixedViewport:
    """Viewport of a constant logical size, e.g. for headless PNG renders."""

    def __init__(self, width=SURFACE_DEFAULTS['width'], height=SURFACE_DEFAULTS['height'],
                 device_pixel_ratio=SURFACE_DEFAULTS['device_pixel_ratio']):
        self.width = float(width)
        self.height = float(height)
        self.device_pixel_ratio = device_pixel_ratio

    def get_size(self):
        return self.width, self.height

    def get_device_pixel_ratio(self):
        return self.device_pixel_ratio

    def set_size(self, width, height) -> None:
        self.width = float(width)
        self.height = float(height)

    def apply_scale(self, surface, width, height, ratio) -> None:
        apply_device_scale(surface, width, height, ratio)
