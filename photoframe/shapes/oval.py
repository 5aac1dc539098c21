# shapes/oval.py

import math

from photoframe.constants import CIRCLE_SEGMENTS
from photoframe.shapes.base_shape import MaskPath, ShapeKind, close, radial_points
from photoframe.utils.geometry import Rect


def build(area: Rect) -> MaskPath:
    """Circle inscribed in the area: centred, radius half the smaller side."""
    center = area.center
    radius = area.half_extent
    outline = radial_points(center, [radius] * CIRCLE_SEGMENTS, 2 * math.pi / CIRCLE_SEGMENTS)
    return MaskPath(ShapeKind.CIRCLE, area, close(outline), circle=(center.x, center.y, radius))
