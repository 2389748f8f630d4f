import numpy as np
import pytest

from clubviz.model import Club, Person
from clubviz.visualization.viewport import FixedViewport


class RecordingSurface:
    """Surface double that records every drawing call with its current translation."""

    def __init__(self):
        self.calls = []
        self.visible = False
        self.font_size = 12.0
        self.depth = 0
        self.offset = (0.0, 0.0)
        self.scale_factor = (1.0, 1.0)
        self.size = (0, 0)
        self._stack = []

    def resize(self, width, height):
        self.size = (width, height)
        self.calls.append(('resize', width, height))

    def set_transform(self, a, b, c, d, e, f):
        self.offset = (e, f)
        self.scale_factor = (a, d)
        self.calls.append(('set_transform', a, b, c, d, e, f))

    def scale(self, x, y):
        self.scale_factor = (self.scale_factor[0] * x, self.scale_factor[1] * y)
        self.calls.append(('scale', x, y))

    def translate(self, x, y):
        self.offset = (self.offset[0] + x, self.offset[1] + y)
        self.calls.append(('translate', x, y))

    def save(self):
        self._stack.append(self.offset)
        self.depth += 1
        self.calls.append(('save',))

    def restore(self):
        if self._stack:
            self.offset = self._stack.pop()
            self.depth -= 1
        self.calls.append(('restore',))

    def show(self):
        self.visible = True

    def clear_rect(self, x, y, w, h):
        self.calls.append(('clear_rect', x, y, w, h))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(('fill_rect', x, y, w, h, color))

    def draw_circle(self, x, y, radius, fill=None, outline=None, width=0.0):
        self.calls.append(('draw_circle', x, y, radius, fill, outline, width, self.offset))

    def set_font(self, size):
        self.font_size = size
        self.calls.append(('set_font', size))

    def measure_text(self, text):
        return 6.0 * len(str(text))

    def fill_text(self, text, x, y, color, align='left'):
        self.calls.append(('fill_text', text, x, y, color, align))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class RecordingLegend:
    def __init__(self):
        self.updates = []

    def update_legend(self, counts):
        self.updates.append(dict(counts))


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def legend():
    return RecordingLegend()


@pytest.fixture
def viewport():
    return FixedViewport(800, 600, 1.0)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def snapshot():
    """Two clubs: club 1 has R,R,R,B; club 2 is empty. Person 5 belongs to no club."""
    people = [Person(1, 'R'), Person(2, 'R'), Person(3, 'R'), Person(4, 'B'), Person(5, 'B')]
    c1 = Club(1, people[:4])
    c2 = Club(2)
    return [c1, c2], people
