import math
import numpy as np
import pytest

from clubviz.visualization.layout import OffsetStore, PolarOffset, compute_grid, compute_layout


def test_grid_four_clubs_landscape():
    # ceil(sqrt(4 * 800/600)) = 3 columns, ceil(4/3) = 2 rows
    assert compute_grid(4, 800, 600) == (3, 2)


def test_grid_rebalances_tall_layout():
    # 1 column x 10 rows is too tall; columns grow until rows <= 1.5 * columns
    cols, rows = compute_grid(10, 100, 1000)
    assert rows <= 1.5 * cols
    assert cols * rows >= 10
    assert (cols, rows) == (3, 4)


@pytest.mark.parametrize('width,height', [(800, 600), (600, 800), (1920, 1080), (100, 1000), (1000, 100), (300, 300)])
def test_grid_covers_all_clubs(width, height):
    for n in range(1, 80):
        cols, rows = compute_grid(n, width, height)
        assert cols * rows >= n
        assert rows <= 1.5 * cols + 1


def test_grid_degenerate_input():
    assert compute_grid(0, 800, 600) == (0, 0)
    assert compute_grid(3, 0, 600) == (0, 0)
    assert compute_grid(3, 800, 0) == (0, 0)


def test_layout_scenario_positions():
    layout = compute_layout([1, 2, 3, 4], 800, 600)
    assert (layout.n_columns, layout.n_rows) == (3, 2)
    min_padding = 600 * 0.05
    cell_w = (800 - 2 * min_padding) / 3
    cell_h = (600 - 2 * min_padding) / 2
    assert layout.cell_width == pytest.approx(cell_w)
    assert layout.cell_height == pytest.approx(cell_h)
    assert layout.club_radius == pytest.approx(0.3 * min(cell_w, cell_h))
    hp = (800 - cell_w * 3) / 2
    vp = (600 - cell_h * 2) / 2
    # club 4 is row 1, col 0
    assert layout.cell_of(3) == (1, 0)
    assert layout.positions[4] == pytest.approx((hp + cell_w * 0.5, vp + cell_h * 1.5))
    assert layout.positions[3] == pytest.approx((hp + cell_w * 2.5, vp + cell_h * 0.5))


def test_layout_is_deterministic_and_in_bounds():
    ids = list(range(1, 14))
    a = compute_layout(ids, 1024, 640)
    b = compute_layout(ids, 1024, 640)
    assert a.positions == b.positions
    half = a.club_radius / 2
    for x, y in a.positions.values():
        assert half <= x <= 1024 - half
        assert half <= y <= 640 - half


def test_layout_empty_surface_logs_and_places_nothing(caplog):
    with caplog.at_level('WARNING'):
        layout = compute_layout([1, 2], 0, 0)
    assert layout.positions == {}
    assert layout.club_radius == 0.0
    assert 'degenerate surface' in caplog.text


def test_offset_generated_once():
    store = OffsetStore(np.random.default_rng(0))
    first = store.ensure('p1', 'c1')
    again = store.ensure('p1', 'c1')
    assert first is again
    assert len(store) == 1
    assert ('p1', 'c1') in store
    assert ('p1', 'c2') not in store


def test_offset_ranges():
    store = OffsetStore(np.random.default_rng(42))
    club_radius = 37.5
    for p in range(200):
        store.ensure(p, 'c')
        angle, radius = store.resolve(p, 'c', club_radius)
        assert 0.0 <= angle < 2 * math.pi
        assert 0.10 * club_radius <= radius <= 0.85 * club_radius


def test_offset_seeded_rng_is_reproducible():
    a = OffsetStore(np.random.default_rng(7))
    b = OffsetStore(np.random.default_rng(7))
    assert a.ensure(1, 1) == b.ensure(1, 1)


def test_resolve_unknown_pair():
    store = OffsetStore(np.random.default_rng(0))
    assert store.get('nobody', 'c') is None
    assert store.resolve('nobody', 'c', 10.0) is None


def test_polar_offset_to_local():
    off = PolarOffset(angle=math.pi / 2, radius_fraction=0.5)
    x, y = off.to_local(20.0)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(10.0)


def test_offset_store_rejects_bad_fractions():
    with pytest.raises(ValueError):
        OffsetStore(min_fraction=0.9, max_fraction=0.1)


@pytest.mark.parametrize('ratio', [0, -1.5])
def test_grid_rejects_non_positive_rebalance_ratio(ratio):
    with pytest.raises(ValueError):
        compute_grid(4, 800, 600, rebalance_ratio=ratio)


def test_grid_small_positive_rebalance_ratio_terminates():
    cols, rows = compute_grid(6, 800, 600, rebalance_ratio=0.5)
    assert rows <= 0.5 * cols
    assert cols * rows >= 6
