# shapes/diamond.py

from photoframe.shapes.base_shape import MaskPath, ShapeKind, close
from photoframe.utils.geometry import Rect


def build(area: Rect) -> MaskPath:
    x0, y0, x1, y1 = area.bbox
    cx, cy = area.center
    return MaskPath(ShapeKind.DIAMOND, area, close([(cx, y0), (x1, cy), (cx, y1), (x0, cy)]))
