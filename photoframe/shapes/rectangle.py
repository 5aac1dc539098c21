# shapes/rectangle.py

from photoframe.shapes.base_shape import MaskPath, ShapeKind, close
from photoframe.utils.geometry import Rect


def build(area: Rect) -> MaskPath:
    x0, y0, x1, y1 = area.bbox
    return MaskPath(ShapeKind.SQUARE, area, close([(x0, y0), (x1, y0), (x1, y1), (x0, y1)]))
