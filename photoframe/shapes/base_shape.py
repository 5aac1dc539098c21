# shapes/base_shape.py

import enum
import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw

from photoframe.constants import BEZIER_STEPS, MASK_SUPERSAMPLE, SHAPE_BUTTONS
from photoframe.errors import InvalidShapeKind
from photoframe.utils.geometry import Point, Rect

logger = logging.getLogger(__name__)

Curve = Tuple[Point, Point, Point, Point]


class ShapeKind(str, enum.Enum):
    CIRCLE = 'circle'
    SQUARE = 'square'
    TRIANGLE = 'triangle'
    HEXAGON = 'hexagon'
    STAR = 'star'
    HEART = 'heart'
    DIAMOND = 'diamond'
    NONE = 'none'

    @property
    def label(self) -> str:
        return SHAPE_BUTTONS[self.value][0]

    @property
    def icon(self) -> str:
        return SHAPE_BUTTONS[self.value][1]

    @classmethod
    def from_id(cls, value: Union[str, "ShapeKind"]) -> "ShapeKind":
        """Strict lookup by id ('circle', 'star', ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidShapeKind(f"Unknown shape: '{value}'") from None

    @classmethod
    def parse(cls, value: Union[str, "ShapeKind", None]) -> "ShapeKind":
        """Lenient lookup: anything unrecognised is treated as a square."""
        try:
            return cls.from_id(value)
        except InvalidShapeKind as e:
            logger.warning("%s; falling back to square.", e)
            return cls.SQUARE


@dataclass(frozen=True)
class MaskPath:
    """
    Closed clip region built for one shape over one target area.

    `vertices` is always a closed outline (first point repeated at the end) and is
    what bounds checks and polygon rasterisation use. Circles also carry their exact
    (cx, cy, r) so they rasterise as true ellipses; hearts keep their Bezier control
    points alongside the flattened outline.
    """
    kind: ShapeKind
    area: Rect
    vertices: Tuple[Point, ...] = ()
    circle: Optional[Tuple[float, float, float]] = None
    curves: Tuple[Curve, ...] = ()

    @property
    def clips(self) -> bool:
        return self.kind is not ShapeKind.NONE

    @property
    def is_closed(self) -> bool:
        return len(self.vertices) > 2 and self.vertices[0] == self.vertices[-1]

    def bounds(self) -> Rect:
        if not self.vertices:
            return self.area
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def rasterize(self, size: Tuple[int, int], supersample: int = MASK_SUPERSAMPLE) -> Image.Image:
        """
        Paint the path into an 'L' mask of `size` (255 inside, 0 outside).

        Drawn at `supersample` times the resolution and scaled down so the edges are
        smoothed; the same input always produces the same mask.
        """
        width, height = size
        if not self.clips:
            return Image.new('L', (width, height), 255)

        scale = max(1, int(supersample))
        mask = Image.new('L', (width * scale, height * scale), 0)
        mdraw = ImageDraw.Draw(mask)
        if self.circle is not None:
            cx, cy, r = self.circle
            mdraw.ellipse([(cx - r) * scale, (cy - r) * scale,
                           (cx + r) * scale, (cy + r) * scale], fill=255)
        elif self.vertices:
            mdraw.polygon([(p.x * scale, p.y * scale) for p in self.vertices], fill=255)

        if scale == 1:
            return mask
        return mask.resize((width, height), Image.Resampling.LANCZOS)


# ─── Helpers shared by the shape builders ───────────────────────────────────────

def close(points: Sequence[Tuple[float, float]]) -> Tuple[Point, ...]:
    """Turn a point list into a closed outline."""
    pts = [Point(float(x), float(y)) for x, y in points]
    if pts and pts[0] != pts[-1]:
        pts.append(pts[0])
    return tuple(pts)


def radial_points(center: Point, radii: Sequence[float], step: float):
    """Vertices at angles i*step around `center`, with radius radii[i]."""
    points = []
    for i, radius in enumerate(radii):
        angle = i * step
        points.append((center.x + radius * math.cos(angle), center.y + radius * math.sin(angle)))
    return points


def cubic_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    mt = 1 - t
    a, b, c, d = mt * mt * mt, 3 * mt * mt * t, 3 * mt * t * t, t * t * t
    return Point(a * p0.x + b * p1.x + c * p2.x + d * p3.x,
                 a * p0.y + b * p1.y + c * p2.y + d * p3.y)


def flatten_curves(curves: Sequence[Curve], steps: int = BEZIER_STEPS):
    """Sample each cubic segment into `steps` line segments."""
    if not curves:
        return []
    points = [curves[0][0]]
    for p0, p1, p2, p3 in curves:
        for i in range(1, steps + 1):
            points.append(cubic_point(p0, p1, p2, p3, i / steps))
    return points
