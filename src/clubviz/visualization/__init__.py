"""Layout and drawing of club grids onto a 2D surface."""
from clubviz.visualization.base import Renderer
from clubviz.visualization.grid_visualizer import GridVisualizer
from clubviz.visualization.surface import PillowSurface
from clubviz.visualization.viewport import FixedViewport

__all__ = ['Renderer', 'GridVisualizer', 'PillowSurface', 'FixedViewport']
