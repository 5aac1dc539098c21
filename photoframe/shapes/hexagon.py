# shapes/hexagon.py

import math

from photoframe.shapes.base_shape import MaskPath, ShapeKind, close, radial_points
from photoframe.utils.geometry import Rect


def build(area: Rect) -> MaskPath:
    """Regular hexagon with a vertex pointing right (angles i*60 degrees)."""
    points = radial_points(area.center, [area.half_extent] * 6, math.pi / 3)
    return MaskPath(ShapeKind.HEXAGON, area, close(points))
