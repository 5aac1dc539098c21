# controller.py

import enum
import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from PIL import Image

from photoframe.config import EditorSettings
from photoframe.constants import CAPTION_MARGIN, HIT_RADIUS
from photoframe.errors import DecodeError
from photoframe.model import Caption, EditorModel, SourceImage, clamp_font_size, parse_color
from photoframe.renderer import CompositionRenderer, RenderResult, decode_image, draw_drag_overlay
from photoframe.scheduler import ManualTimerHost, RenderScheduler
from photoframe.shapes import ShapeKind
from photoframe.utils.font_manager import FontManager
from photoframe.utils.geometry import LayoutMode, Point, Size, clamp_point

logger = logging.getLogger(__name__)

DecodeCallback = Callable[[Optional[SourceImage], Optional[DecodeError]], None]


class DragPhase(enum.Enum):
    IDLE = 'idle'
    DRAGGING = 'dragging'


@dataclass
class DragState:
    active: bool = False
    hit_radius: float = HIT_RADIUS
    candidate: Optional[Point] = None


class CaptionPositionController:
    """
    Pointer handling for moving the caption.

    A press close enough to a visible caption starts a drag; moves update a clamped
    candidate position; release or leaving the canvas ends the drag and hands the
    candidate back to be committed. Nothing here renders.
    """

    def __init__(self, frame: Tuple[int, int], hit_radius: float = HIT_RADIUS,
                 margin: float = CAPTION_MARGIN):
        self.frame = Size(*frame)
        self.margin = margin
        self.drag = DragState(hit_radius=hit_radius)

    @property
    def phase(self) -> DragPhase:
        return DragPhase.DRAGGING if self.drag.active else DragPhase.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.drag.active

    @property
    def candidate(self) -> Optional[Point]:
        return self.drag.candidate

    def to_canvas(self, x: float, y: float,
                  display_size: Optional[Tuple[float, float]] = None) -> Point:
        """Convert host display coordinates to canvas pixels using the display/canvas ratio."""
        if not display_size or display_size[0] <= 0 or display_size[1] <= 0:
            return Point(x, y)
        return Point(x * self.frame.width / display_size[0],
                     y * self.frame.height / display_size[1])

    def clamp(self, point: Tuple[float, float]) -> Point:
        return clamp_point(point, self.frame, self.margin)

    def hit_test(self, point: Tuple[float, float], caption: Caption) -> bool:
        if caption.is_blank:
            return False
        dx = point[0] - caption.position.x
        dy = point[1] - caption.position.y
        return math.hypot(dx, dy) <= self.drag.hit_radius

    def pointer_down(self, point: Tuple[float, float], caption: Caption) -> bool:
        """Idle -> Dragging if the press lands on the caption. Returns True when a drag starts."""
        if self.drag.active:
            return True
        if not self.hit_test(point, caption):
            return False
        self.drag.active = True
        self.drag.candidate = self.clamp(caption.position)
        logger.debug("Caption drag started at %s", self.drag.candidate)
        return True

    def pointer_move(self, point: Tuple[float, float]) -> Optional[Point]:
        if not self.drag.active:
            return None
        self.drag.candidate = self.clamp(point)
        return self.drag.candidate

    def pointer_up(self, point: Optional[Tuple[float, float]] = None) -> Optional[Point]:
        """Dragging -> Idle. Returns the position to commit, or None if no drag was running."""
        if not self.drag.active:
            return None
        if point is not None:
            self.drag.candidate = self.clamp(point)
        committed = self.drag.candidate
        self.cancel()
        logger.debug("Caption drag ended at %s", committed)
        return committed

    def pointer_leave(self) -> Optional[Point]:
        return self.pointer_up()

    def cancel(self):
        self.drag.active = False
        self.drag.candidate = None


class EditorSession:
    """
    One edit session: owns the model, the renderer, the drag controller and the
    render scheduler, and is the only thing that mutates them.

    All calls are expected on the host's event thread. Image decoding is posted to
    the timer host and comes back through `on_complete`, so it lands in the same
    serialized stream as every other event.
    """

    def __init__(self, timer_host=None, settings: Optional[EditorSettings] = None,
                 font_manager: Optional[FontManager] = None,
                 renderer: Optional[CompositionRenderer] = None):
        self.settings = settings or EditorSettings()
        self.timer_host = timer_host if timer_host is not None else ManualTimerHost()
        self.font_manager = font_manager or FontManager(self.settings.font_path)
        self.renderer = renderer or CompositionRenderer(self.font_manager, self.settings.frame,
                                                        self.settings.layout_mode)
        self.model = EditorModel(self.settings.frame, self.settings.layout_mode,
                                 margin=self.settings.caption_margin)
        self.positioner = CaptionPositionController(self.settings.frame, self.settings.hit_radius,
                                                    self.settings.caption_margin)
        self.scheduler = RenderScheduler(self.timer_host, self._render, overlay=self._draw_overlay,
                                         debounce_ms=self.settings.debounce_ms)
        self.overlay_image: Optional[Image.Image] = None
        self._load_generation = 0

    # ─── Read-only views for the host ───────────────────────────────────────────

    @property
    def frame(self) -> Size:
        return self.model.frame

    @property
    def caption(self) -> Caption:
        return self.model.caption

    @property
    def shape(self) -> ShapeKind:
        return self.model.shape

    @property
    def result(self) -> Optional[RenderResult]:
        return self.model.result

    @property
    def has_render(self) -> bool:
        return self.model.result is not None

    @property
    def download_filename(self) -> str:
        return self.settings.download_filename

    @property
    def preview_image(self) -> Optional[Image.Image]:
        """What the host should show: the drag overlay while dragging, else the committed render."""
        if self.positioner.is_dragging and self.overlay_image is not None:
            return self.overlay_image
        return self.model.result.image if self.model.result else None

    def add_observer(self, callback: Callable[[], None]):
        self.model.add_observer(callback)

    def export_png(self) -> Optional[bytes]:
        return self.model.result.png if self.model.result else None

    # ─── Inputs ─────────────────────────────────────────────────────────────────

    def load_image(self, data: bytes, on_complete: Optional[DecodeCallback] = None):
        """
        Decode `data` on the next turn of the host loop.

        On success the image replaces the current one and a render follows; on
        failure the previous image and render are kept and `on_complete` receives
        the DecodeError. A later load or a reset makes this one stale.
        """
        self._load_generation += 1
        generation = self._load_generation
        self.timer_host.after(0, lambda: self._finish_load(generation, data, on_complete))

    def _finish_load(self, generation: int, data: bytes, on_complete: Optional[DecodeCallback]):
        if generation != self._load_generation:
            logger.debug("Dropping stale image load #%d", generation)
            return
        try:
            source = decode_image(data)
        except DecodeError as e:
            logger.error("Image load failed: %s", e)
            if on_complete:
                on_complete(None, e)
            return

        logger.info("Loaded %s image %dx%d", source.format or 'unknown', source.width, source.height)
        self.positioner.cancel()
        self.model.set_source(source)
        self.scheduler.request_render('image loaded')
        if on_complete:
            on_complete(source, None)

    def set_shape(self, shape: Union[ShapeKind, str]):
        self.model.set_shape(shape)
        self.scheduler.request_render('shape')

    def set_layout_mode(self, mode: Union[LayoutMode, str]):
        self.model.set_layout_mode(mode)
        self.scheduler.request_render('layout mode')

    def set_caption_text(self, text: str):
        self.model.update_caption(text=text or '')
        self.scheduler.text_changed()

    def set_caption_color(self, color):
        self.model.update_caption(color=parse_color(color))
        self.scheduler.request_render('caption color')

    def set_caption_size(self, size):
        self.model.update_caption(font_size=clamp_font_size(size))
        self.scheduler.request_render('caption size')

    def set_caption_position(self, x: float, y: float):
        self.model.update_caption(position=Point(x, y))
        self.scheduler.request_render('caption moved')

    # ─── Pointer ────────────────────────────────────────────────────────────────

    def pointer_down(self, x: float, y: float, display_size=None) -> bool:
        point = self.positioner.to_canvas(x, y, display_size)
        started = self.positioner.pointer_down(point, self.model.caption)
        if started:
            self.scheduler.overlay_changed()
        return started

    def pointer_move(self, x: float, y: float, display_size=None) -> Optional[Point]:
        candidate = self.positioner.pointer_move(self.positioner.to_canvas(x, y, display_size))
        if candidate is not None:
            self.scheduler.overlay_changed()
        return candidate

    def pointer_up(self, x: Optional[float] = None, y: Optional[float] = None,
                   display_size=None) -> Optional[Point]:
        point = None if x is None or y is None else self.positioner.to_canvas(x, y, display_size)
        return self._commit_drag(self.positioner.pointer_up(point))

    def pointer_leave(self) -> Optional[Point]:
        return self._commit_drag(self.positioner.pointer_leave())

    def _commit_drag(self, committed: Optional[Point]) -> Optional[Point]:
        self.overlay_image = None
        if committed is None:
            return None
        self.set_caption_position(*committed)
        return self.model.caption.position

    # ─── Lifecycle ──────────────────────────────────────────────────────────────

    def reset(self):
        """Back to defaults: circle, empty caption centred, no image, no render."""
        self._load_generation += 1
        self.scheduler.cancel()
        self.positioner.cancel()
        self.overlay_image = None
        self.model.reset()

    def teardown(self):
        """Host exit hook: drop timers, state and cached fonts."""
        self.reset()
        self.font_manager.clear()

    # ─── Scheduler callbacks ────────────────────────────────────────────────────

    def _render(self) -> Optional[RenderResult]:
        model = self.model
        if model.source is None:
            if model.result is not None:
                model.set_result(None)
            return None
        result = self.renderer.render(model.source, model.shape, model.caption,
                                      frame=model.frame, mode=model.layout_mode)
        model.set_result(result)
        if self.positioner.is_dragging:
            # keep the live overlay on top of the new bitmap
            self._draw_overlay()
        return result

    def _draw_overlay(self):
        candidate = self.positioner.candidate
        if candidate is None or self.model.result is None:
            self.overlay_image = None
        else:
            self.overlay_image = draw_drag_overlay(self.model.result.image, candidate,
                                                   self.positioner.drag.hit_radius)
        self.model.notify_observers()
