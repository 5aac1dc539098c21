# model.py

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple, Union, TYPE_CHECKING

from PIL import Image, ImageColor

from photoframe.constants import (
    CAPTION_MARGIN, DEFAULT_FONT_SIZE, DEFAULT_SHAPE, DEFAULT_TEXT_COLOR, MAX_FONT_SIZE, MIN_FONT_SIZE,
)
from photoframe.shapes import ShapeKind
from photoframe.utils.geometry import LayoutMode, Point, Size, clamp, clamp_point

if TYPE_CHECKING:
    from photoframe.renderer import RenderResult

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


def parse_color(value: Union[str, Tuple[int, ...]]) -> RGB:
    """Accepts '#rrggbb', colour names, or an (r, g, b[, a]) tuple; returns (r, g, b)."""
    if isinstance(value, str):
        return ImageColor.getrgb(value)[:3]
    if len(value) < 3:
        raise ValueError(f"Colour needs three channels: {value!r}")
    return tuple(int(clamp(c, 0, 255)) for c in value[:3])


def clamp_font_size(size) -> int:
    return int(clamp(int(round(float(size))), MIN_FONT_SIZE, MAX_FONT_SIZE))


@dataclass(frozen=True)
class SourceImage:
    """A decoded upload. Replacing the image means building a new one."""
    image: Image.Image = field(repr=False, compare=False)
    width: int
    height: int
    format: Optional[str] = None

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


@dataclass(frozen=True)
class Caption:
    text: str = ''
    color: RGB = (255, 255, 255)
    font_size: int = DEFAULT_FONT_SIZE
    position: Point = Point(0, 0)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @classmethod
    def default(cls, frame: Tuple[int, int]) -> "Caption":
        return cls(text='', color=parse_color(DEFAULT_TEXT_COLOR), font_size=DEFAULT_FONT_SIZE,
                   position=Point(frame[0] / 2, frame[1] / 2))


class EditorModel:
    """
    State for one edit session: the image, the shape, the caption and the last render.

    Observers are plain callables invoked after every change; hosts use them to
    refresh the preview. The model never renders on its own.
    """

    def __init__(self, frame: Tuple[int, int], layout_mode: LayoutMode = LayoutMode.FILL,
                 margin: float = CAPTION_MARGIN):
        self.frame = Size(*frame)
        self.margin = margin
        self.default_layout_mode = LayoutMode.parse(layout_mode)
        self._observers: List[Callable[[], None]] = []
        self._reset_state()

    def _reset_state(self):
        self.source: Optional[SourceImage] = None
        self.shape: ShapeKind = ShapeKind.parse(DEFAULT_SHAPE)
        self.caption: Caption = Caption.default(self.frame)
        self.layout_mode: LayoutMode = self.default_layout_mode
        self.result: Optional["RenderResult"] = None

    # ─── Observers ──────────────────────────────────────────────────────────────

    def add_observer(self, callback: Callable[[], None]):
        self._observers.append(callback)

    def remove_observer(self, callback: Callable[[], None]):
        if callback in self._observers:
            self._observers.remove(callback)

    def notify_observers(self):
        for callback in list(self._observers):
            callback()

    # ─── Mutations (called by the session) ──────────────────────────────────────

    def reset(self):
        self._reset_state()
        self.notify_observers()

    def set_source(self, source: Optional[SourceImage]):
        self.source = source
        # Previous output belongs to the previous image
        self.result = None
        self.notify_observers()

    def set_shape(self, shape: Union[ShapeKind, str]):
        self.shape = ShapeKind.parse(shape)
        self.notify_observers()

    def set_layout_mode(self, mode: Union[LayoutMode, str]):
        self.layout_mode = LayoutMode.parse(mode)
        self.notify_observers()

    def update_caption(self, **changes) -> Caption:
        """Replace the caption with `changes` applied; position is kept inside the margin."""
        if 'position' in changes:
            changes['position'] = clamp_point(changes['position'], self.frame, self.margin)
        self.caption = replace(self.caption, **changes)
        self.notify_observers()
        return self.caption

    def set_result(self, result: Optional["RenderResult"]):
        self.result = result
        self.notify_observers()
