import pytest

from photoframe.errors import DegenerateGeometryError
from photoframe.utils.geometry import (
    LayoutMode, Rect, clamp_point, compute_draw_rect, inset_image_area_height,
)

FRAME = (600, 700)


def test_fill_covers_frame_regardless_of_aspect():
    assert compute_draw_rect((800, 400), FRAME, LayoutMode.FILL) == Rect(0, 0, 600, 700)
    assert compute_draw_rect((10, 3000), FRAME, 'fill') == Rect(0, 0, 600, 700)


def test_inset_landscape_hits_width_cap():
    rect = compute_draw_rect((800, 400), FRAME, LayoutMode.INSET)
    assert rect.width == 400
    assert rect.height == 200
    assert rect.x == 100
    assert rect.y == 20


def test_inset_portrait_hits_height_cap():
    rect = compute_draw_rect((300, 600), FRAME, LayoutMode.INSET)
    # 80% of 700 minus padding
    assert rect.height == pytest.approx(520)
    assert rect.width == pytest.approx(260)
    assert rect.x == pytest.approx(170)


def test_inset_area_shrinks_for_text_within_bounds():
    assert inset_image_area_height(700, 0) == pytest.approx(560)
    assert inset_image_area_height(700, 68) == pytest.approx(560)
    assert inset_image_area_height(700, 200) == pytest.approx(460)
    assert inset_image_area_height(700, 1000) == pytest.approx(210)


def test_inset_rect_stays_in_frame():
    rect = compute_draw_rect((100, 100), FRAME, LayoutMode.INSET, reserved_text_height=600)
    frame = Rect(0, 0, *FRAME)
    assert frame.contains(rect.x, rect.y) and frame.contains(rect.right, rect.bottom)


@pytest.mark.parametrize('source', [(0, 100), (100, 0), (0, 0)])
def test_zero_source_fails_fast(source):
    with pytest.raises(DegenerateGeometryError):
        compute_draw_rect(source, FRAME, LayoutMode.INSET)


def test_zero_frame_fails_fast():
    with pytest.raises(DegenerateGeometryError):
        compute_draw_rect((100, 100), (0, 700))


def test_clamp_point_margin():
    assert clamp_point((10, 10), FRAME, 30) == (30, 30)
    assert clamp_point((1000, 1000), FRAME, 30) == (570, 670)
    assert clamp_point((300, 350), FRAME, 30) == (300, 350)


def test_layout_mode_parse():
    assert LayoutMode.parse('INSET') is LayoutMode.INSET
    with pytest.raises(ValueError):
        LayoutMode.parse('stretch')
