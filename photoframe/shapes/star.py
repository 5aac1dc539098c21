# shapes/star.py

import math

from photoframe.constants import STAR_INNER_RATIO
from photoframe.shapes.base_shape import MaskPath, ShapeKind, close, radial_points
from photoframe.utils.geometry import Rect


def build(area: Rect) -> MaskPath:
    """Five-pointed star: ten vertices alternating outer and inner radius."""
    outer = area.half_extent
    inner = outer * STAR_INNER_RATIO
    radii = [outer if i % 2 == 0 else inner for i in range(10)]
    return MaskPath(ShapeKind.STAR, area, close(radial_points(area.center, radii, math.pi / 5)))
