import math

import pytest

from photoframe.errors import InvalidShapeKind
from photoframe.shapes import ShapeKind, build_mask
from photoframe.utils.geometry import Rect

AREAS = [Rect(0, 0, 600, 700), Rect(100, 20, 400, 200), Rect(10, 10, 50, 300)]
CLIPPING = [k for k in ShapeKind if k is not ShapeKind.NONE]


@pytest.mark.parametrize('area', AREAS)
@pytest.mark.parametrize('kind', CLIPPING)
def test_mask_is_closed_and_inside_area(kind, area):
    path = build_mask(kind, area)
    assert path.clips
    assert path.is_closed
    for p in path.vertices:
        assert area.contains(p.x, p.y, tolerance=1e-6), (kind, p)


def test_none_is_identity():
    path = build_mask(ShapeKind.NONE, Rect(0, 0, 10, 10))
    assert not path.clips
    mask = path.rasterize((10, 10))
    assert mask.getextrema() == (255, 255)


def test_circle_matches_frame_scenario():
    path = build_mask('circle', Rect(0, 0, 600, 700))
    assert path.circle == (300, 350, 300)


def test_square_is_the_rect():
    path = build_mask(ShapeKind.SQUARE, Rect(10, 20, 30, 40))
    assert path.vertices[:4] == ((10, 20), (40, 20), (40, 60), (10, 60))


def test_triangle_vertices():
    path = build_mask(ShapeKind.TRIANGLE, Rect(0, 0, 100, 80))
    assert path.vertices[:3] == ((50, 0), (0, 80), (100, 80))


def test_hexagon_angles():
    path = build_mask(ShapeKind.HEXAGON, Rect(0, 0, 200, 100))
    assert len(path.vertices) == 7
    first = path.vertices[0]
    assert first.x == pytest.approx(150) and first.y == pytest.approx(50)
    assert path.vertices[1].x == pytest.approx(100 + 50 * math.cos(math.pi / 3))


def test_star_alternates_radii():
    path = build_mask(ShapeKind.STAR, Rect(0, 0, 100, 100))
    radii = [math.hypot(p.x - 50, p.y - 50) for p in path.vertices[:10]]
    assert radii[0::2] == pytest.approx([50] * 5)
    assert radii[1::2] == pytest.approx([20] * 5)


def test_heart_has_four_curves():
    path = build_mask(ShapeKind.HEART, Rect(0, 0, 200, 200))
    assert len(path.curves) == 4
    assert path.curves[0][0] == path.curves[-1][-1]


def test_diamond_midpoints():
    path = build_mask(ShapeKind.DIAMOND, Rect(0, 0, 100, 60))
    assert path.vertices[:4] == ((50, 0), (100, 30), (50, 60), (0, 30))


def test_unknown_shape_falls_back_to_square():
    path = build_mask('octagon', Rect(0, 0, 10, 10))
    assert path.kind is ShapeKind.SQUARE


def test_strict_lookup_raises():
    with pytest.raises(InvalidShapeKind):
        ShapeKind.from_id('octagon')


def test_rasterized_circle_clears_corners():
    path = build_mask(ShapeKind.CIRCLE, Rect(0, 0, 60, 60))
    mask = path.rasterize((60, 60))
    assert mask.getpixel((0, 0)) == 0
    assert mask.getpixel((30, 30)) == 255
