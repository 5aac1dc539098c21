# shapes/heart.py

from photoframe.shapes.base_shape import MaskPath, ShapeKind, close, flatten_curves
from photoframe.utils.geometry import Point, Rect


def build(area: Rect) -> MaskPath:
    """
    Heart made of four cubic Bezier segments scaled by half the smaller side.

    The control-point template runs from the notch line down to the tip, a span of
    1.5 * size, so it is lifted by 0.75 * size to sit centred on the area. Drawn
    unlifted, the tip would hang below the area's bottom edge. The lift means these
    masks are not pixel-identical to the unlifted template's.
    """
    size = area.half_extent
    cx = area.center.x
    cy = area.center.y - 0.75 * size

    start = Point(cx, cy + size / 2)
    curves = (
        (start, Point(cx, cy), Point(cx - size, cy), Point(cx - size, cy + size / 2)),
        (Point(cx - size, cy + size / 2), Point(cx - size, cy + size),
         Point(cx, cy + size * 1.5), Point(cx, cy + size * 1.5)),
        (Point(cx, cy + size * 1.5), Point(cx, cy + size),
         Point(cx + size, cy + size), Point(cx + size, cy + size / 2)),
        (Point(cx + size, cy + size / 2), Point(cx + size, cy), Point(cx, cy), start),
    )
    return MaskPath(ShapeKind.HEART, area, close(flatten_curves(curves)), curves=curves)
