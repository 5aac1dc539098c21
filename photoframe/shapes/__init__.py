# shapes/__init__.py

from typing import Callable, Dict, Union

from photoframe.utils.geometry import Rect

# Import the base types first; the builders depend on them
from .base_shape import MaskPath, ShapeKind

# Import the specific shape builders
from . import diamond, heart, hexagon, oval, rectangle, star, triangle

BUILDERS: Dict[ShapeKind, Callable[[Rect], MaskPath]] = {
    ShapeKind.CIRCLE: oval.build,
    ShapeKind.SQUARE: rectangle.build,
    ShapeKind.TRIANGLE: triangle.build,
    ShapeKind.HEXAGON: hexagon.build,
    ShapeKind.STAR: star.build,
    ShapeKind.HEART: heart.build,
    ShapeKind.DIAMOND: diamond.build,
}


def build_mask(shape: Union[ShapeKind, str], area: Rect) -> MaskPath:
    """
    Clip path for `shape` over `area`.

    ShapeKind.NONE gives the identity path (nothing is clipped). Unknown ids fall
    back to the square.
    """
    kind = ShapeKind.parse(shape)
    area = Rect(*area)
    if kind is ShapeKind.NONE:
        return MaskPath(ShapeKind.NONE, area)
    return BUILDERS[kind](area)
