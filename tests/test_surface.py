import pytest
from PIL import Image

from clubviz.visualization.surface import PillowSurface, load_font
from clubviz.visualization.viewport import FixedViewport, apply_device_scale

RED = (255, 0, 0, 255)
CLEAR = (0, 0, 0, 0)


def test_new_surface_is_transparent_and_hidden():
    s = PillowSurface(100, 50)
    assert s.size == (100, 50)
    assert s.image.getpixel((10, 10)) == CLEAR
    assert not s.visible
    s.show()
    assert s.visible


def test_fill_rect_pixels():
    s = PillowSurface(100, 50)
    s.fill_rect(10, 10, 20, 10, '#ff0000')
    assert s.image.getpixel((15, 15)) == RED
    assert s.image.getpixel((29, 19)) == RED
    assert s.image.getpixel((30, 20)) == CLEAR
    assert s.image.getpixel((5, 5)) == CLEAR


def test_zero_width_rect_draws_nothing():
    s = PillowSurface(20, 20)
    s.fill_rect(5, 5, 0, 10, '#ff0000')
    assert s.image.getbbox() is None


def test_device_scale_maps_user_units():
    s = PillowSurface(10, 10)
    apply_device_scale(s, 50, 40, 2.0)
    assert s.size == (100, 80)
    s.fill_rect(0, 0, 5, 5, '#ff0000')
    assert s.image.getpixel((9, 9)) == RED
    assert s.image.getpixel((10, 10)) == CLEAR


def test_save_restore_translate():
    s = PillowSurface(100, 100)
    s.save()
    s.translate(30, 40)
    assert s.to_device(1, 1) == (31, 41)
    s.restore()
    assert s.to_device(1, 1) == (1, 1)
    # unmatched restore is ignored
    s.restore()
    assert s.transform == (1.0, 1.0, 0.0, 0.0)


def test_translate_after_scale_uses_scaled_units():
    s = PillowSurface(100, 100)
    s.scale(2, 2)
    s.translate(10, 5)
    assert s.to_device(0, 0) == (20, 10)


def test_rotation_not_supported():
    s = PillowSurface(10, 10)
    with pytest.raises(ValueError):
        s.set_transform(0, 1, -1, 0, 0, 0)


def test_draw_circle_fills_center():
    s = PillowSurface(100, 50)
    s.draw_circle(50, 25, 10, fill='#ffffff', outline='#cccccc', width=1)
    assert s.image.getpixel((50, 25)) == (255, 255, 255, 255)
    assert s.image.getpixel((50, 5)) == CLEAR


def test_clear_rect_restores_background():
    s = PillowSurface(40, 40)
    s.fill_rect(0, 0, 40, 40, '#ff0000')
    s.clear_rect(0, 0, 20, 40)
    assert s.image.getpixel((10, 10)) == CLEAR
    assert s.image.getpixel((30, 10)) == RED
    # out-of-range boxes are clipped
    s.clear_rect(-10, -10, 1000, 1000)
    assert s.image.getbbox() is None


def test_measure_text_grows_with_length_and_size():
    s = PillowSurface(100, 100)
    s.set_font(12)
    short = s.measure_text('hi')
    long = s.measure_text('hello there')
    assert 0 < short < long
    s.set_font(24)
    assert s.measure_text('hi') > short


def test_measure_text_in_user_units_under_scale():
    s = PillowSurface(200, 200)
    s.set_font(12)
    unscaled = s.measure_text('Members: 10')
    s.scale(2, 2)
    assert s.measure_text('Members: 10') == pytest.approx(unscaled, rel=0.2)


@pytest.mark.parametrize('align', ['left', 'center', 'right'])
def test_fill_text_marks_pixels(align):
    s = PillowSurface(120, 40)
    s.set_font(14)
    s.fill_text('Club 1', 60, 30, '#000000', align=align)
    bbox = s.image.getbbox()
    assert bbox is not None
    if align == 'left':
        assert bbox[0] >= 59
    elif align == 'right':
        assert bbox[2] <= 61


def test_fill_text_rejects_unknown_alignment():
    s = PillowSurface(10, 10)
    with pytest.raises(ValueError):
        s.fill_text('x', 0, 0, '#000000', align='justify')


def test_load_font_has_requested_size():
    font = load_font(20)
    assert font is not None
    assert getattr(font, 'size', 20) == 20


def test_save_png(tmp_path):
    s = PillowSurface(30, 20)
    s.fill_rect(0, 0, 30, 20, '#2196f3')
    out = tmp_path / 'frame.png'
    s.save_png(out)
    with Image.open(out) as img:
        assert img.size == (30, 20)


def test_fixed_viewport_reports_size():
    vp = FixedViewport(320, 200, 1.5)
    assert vp.get_size() == (320.0, 200.0)
    assert vp.get_device_pixel_ratio() == 1.5
    vp.set_size(10, 20)
    assert vp.get_size() == (10.0, 20.0)
