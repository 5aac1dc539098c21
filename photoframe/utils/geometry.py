# geometry.py

import enum
import logging
from typing import NamedTuple, Tuple, Union

from photoframe.constants import (
    INSET_AREA_PADDING, INSET_MAX_AREA, INSET_MAX_WIDTH, INSET_MIN_AREA, INSET_TOP_OFFSET,
)
from photoframe.errors import DegenerateGeometryError

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: float
    y: float


class Size(NamedTuple):
    width: int
    height: int


class Rect(NamedTuple):
    """Axis-aligned rectangle in canvas pixel space."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, size: Tuple[float, float]) -> "Rect":
        return cls(0, 0, size[0], size[1])

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def half_extent(self) -> float:
        """Half of the smaller side; the radius most shapes are built from."""
        return min(self.width, self.height) / 2

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def bbox(self) -> Tuple[float, float, float, float]:
        """(x0, y0, x1, y1), the form Pillow drawing calls expect."""
        return (self.x, self.y, self.right, self.bottom)

    def contains(self, x: float, y: float, tolerance: float = 0.0) -> bool:
        return (self.x - tolerance <= x <= self.right + tolerance
                and self.y - tolerance <= y <= self.bottom + tolerance)

    def clamped_to(self, other: "Rect") -> "Rect":
        """Intersection with `other`; an empty intersection collapses to zero size."""
        x0 = min(max(self.x, other.x), other.right)
        y0 = min(max(self.y, other.y), other.bottom)
        x1 = max(min(self.right, other.right), x0)
        y1 = max(min(self.bottom, other.bottom), y0)
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def rounded(self) -> Tuple[int, int, int, int]:
        """Integer (x, y, width, height) for pasting into a bitmap."""
        x0, y0 = int(round(self.x)), int(round(self.y))
        x1, y1 = int(round(self.right)), int(round(self.bottom))
        return (x0, y0, x1 - x0, y1 - y0)


class LayoutMode(str, enum.Enum):
    FILL = 'fill'      # full-bleed, image stretched over the whole frame
    INSET = 'inset'    # legacy: capped image at the top, caption space reserved below

    @classmethod
    def parse(cls, value: Union[str, "LayoutMode"]) -> "LayoutMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown layout mode: '{value}'") from None


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_point(point: Tuple[float, float], frame: Tuple[int, int], margin: float) -> Point:
    """Keep a point at least `margin` pixels inside the frame edges."""
    width, height = frame
    return Point(clamp(point[0], margin, width - margin),
                 clamp(point[1], margin, height - margin))


def _require_positive(size: Tuple[float, float], what: str):
    width, height = size
    if width <= 0 or height <= 0:
        raise DegenerateGeometryError(f"{what} has zero area: {width}x{height}")


def inset_image_area_height(frame_height: float, reserved_text_height: float = 0) -> float:
    """
    Vertical space the inset layout gives the image.

    Without a caption the image gets 80% of the frame. With one, whatever is
    left after the caption and padding, kept between 30% and 80%.
    """
    ceiling = frame_height * INSET_MAX_AREA
    if reserved_text_height <= 0:
        return ceiling
    floor = frame_height * INSET_MIN_AREA
    return clamp(frame_height - reserved_text_height - INSET_AREA_PADDING, floor, ceiling)


def compute_draw_rect(source_size: Tuple[float, float],
                      frame: Tuple[int, int],
                      mode: Union[str, LayoutMode] = LayoutMode.FILL,
                      reserved_text_height: float = 0) -> Rect:
    """
    Work out where the source image lands on the canvas.

    Args:
        source_size: (width, height) of the decoded image.
        frame: (width, height) of the output canvas.
        mode: LayoutMode.FILL or LayoutMode.INSET.
        reserved_text_height: caption height the inset layout keeps free.

    Returns:
        Rect: the draw rectangle, clamped to the frame.

    Raises:
        DegenerateGeometryError: if the source or the frame has zero area.
    """
    _require_positive(source_size, "Source image")
    _require_positive(frame, "Frame")
    mode = LayoutMode.parse(mode)
    frame_rect = Rect.from_size(frame)

    if mode is LayoutMode.FILL:
        return frame_rect

    src_w, src_h = source_size
    max_height = inset_image_area_height(frame[1], reserved_text_height) - INSET_AREA_PADDING
    if src_w > src_h:
        width = INSET_MAX_WIDTH
        height = src_h * INSET_MAX_WIDTH / src_w
    else:
        width = src_w * max_height / src_h
        height = max_height

    x = (frame[0] - width) / 2
    rect = Rect(x, INSET_TOP_OFFSET, max(width, 0), max(height, 0)).clamped_to(frame_rect)
    logger.debug("Inset draw rect for %sx%s source: %s", src_w, src_h, rect)
    return rect
