# shapes/triangle.py

from photoframe.shapes.base_shape import MaskPath, ShapeKind, close
from photoframe.utils.geometry import Rect


def build(area: Rect) -> MaskPath:
    # Apex top-centre, base along the bottom edge
    x0, y0, x1, y1 = area.bbox
    center_x = area.center.x
    return MaskPath(ShapeKind.TRIANGLE, area, close([(center_x, y0), (x0, y1), (x1, y1)]))
