# renderer.py

import io
import logging
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from PIL import Image, ImageChops, ImageDraw, ImageFilter, ImageOps, UnidentifiedImageError

from photoframe.constants import (
    FRAME_HEIGHT, FRAME_WIDTH, HIT_RADIUS, OUTPUT_FORMAT, OVERLAY_DASH_DEGREES, OVERLAY_HANDLE_RADIUS,
    SHADOW_BLUR, SHADOW_COLOR, SHADOW_OFFSET, TEXT_SIDE_PADDING,
)
from photoframe.errors import DecodeError, DegenerateGeometryError
from photoframe.model import Caption, SourceImage
from photoframe.shapes import MaskPath, ShapeKind, build_mask
from photoframe.utils.font_manager import FontManager
from photoframe.utils.geometry import LayoutMode, Point, Rect, Size, compute_draw_rect
from photoframe.utils.text_layout import TextLayout, wrap

logger = logging.getLogger(__name__)


def decode_image(data: bytes) -> SourceImage:
    """
    Decode uploaded bytes into an RGBA SourceImage.

    EXIF orientation is applied so the picture is upright, as a browser would
    show it.

    Raises:
        DecodeError: if the bytes are empty, not an image Pillow understands, or
            an image too large to decode safely.
    """
    if not data:
        raise DecodeError("No image data")
    try:
        with Image.open(io.BytesIO(data)) as im:
            fmt = im.format
            im.load()
            upright = ImageOps.exif_transpose(im)
            rgba = upright.convert('RGBA')
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(f"Could not decode image: {e}") from e

    if rgba.width <= 0 or rgba.height <= 0:
        raise DecodeError(f"Decoded image is empty: {rgba.width}x{rgba.height}")
    return SourceImage(image=rgba, width=rgba.width, height=rgba.height, format=fmt)


@dataclass(frozen=True, eq=False)
class RenderResult:
    png: bytes = field(repr=False)
    image: Image.Image = field(repr=False)
    draw_rect: Rect
    mask: MaskPath = field(repr=False)
    text_layout: TextLayout
    mode: LayoutMode

    @property
    def size(self) -> Size:
        return Size(*self.image.size)


class CompositionRenderer:
    """
    Draws the source image through the shape mask, then the caption on top.

    The drawing order is fixed: clear, fit, clip, image, unclip, caption, encode.
    Output depends only on the arguments, so the same inputs always give the same
    PNG bytes.
    """

    def __init__(self, font_manager: Optional[FontManager] = None,
                 frame: Tuple[int, int] = (FRAME_WIDTH, FRAME_HEIGHT),
                 mode: Union[LayoutMode, str] = LayoutMode.FILL):
        self.font_manager = font_manager or FontManager()
        self.frame = Size(*frame)
        self.mode = LayoutMode.parse(mode)

    def layout_caption(self, caption: Caption, frame: Tuple[int, int]) -> TextLayout:
        max_width = frame[0] - 2 * TEXT_SIDE_PADDING
        return wrap(caption.text, max_width, self.font_manager.measure(caption.font_size),
                    font_size=caption.font_size)

    def render(self, source: SourceImage, shape: Union[ShapeKind, str], caption: Caption,
               frame: Optional[Tuple[int, int]] = None,
               mode: Union[LayoutMode, str, None] = None) -> RenderResult:
        """
        Composite `source`, `shape` and `caption` into a PNG.

        Raises:
            DegenerateGeometryError: zero-area source or frame.
        """
        started = time.perf_counter()
        frame = Size(*(frame or self.frame))
        mode = LayoutMode.parse(mode or self.mode)
        if frame.width <= 0 or frame.height <= 0:
            raise DegenerateGeometryError(f"Frame has zero area: {frame.width}x{frame.height}")

        # 1. clear
        canvas = Image.new('RGBA', frame, (0, 0, 0, 0))

        # 2. fit; the inset layout needs to know how tall the caption is first
        text_layout = self.layout_caption(caption, frame)
        draw_rect = compute_draw_rect(source.size, frame, mode, reserved_text_height=text_layout.height)

        # 3. clip
        target = Rect.from_size(frame) if mode is LayoutMode.FILL else draw_rect
        mask_path = build_mask(shape, target)

        # 4. image through the clip, 5. clip released with the temporary layer
        self._draw_image(canvas, source, draw_rect, mask_path)

        # 6. caption
        if text_layout:
            self._draw_caption(canvas, caption, text_layout)

        # 7. encode
        png = encode_png(canvas)
        logger.debug("Rendered %s/%s %sx%s in %.1f ms (%d caption lines)",
                     mask_path.kind.value, mode.value, frame.width, frame.height,
                     (time.perf_counter() - started) * 1000, len(text_layout.lines))
        return RenderResult(png=png, image=canvas, draw_rect=draw_rect, mask=mask_path,
                            text_layout=text_layout, mode=mode)

    @staticmethod
    def _draw_image(canvas: Image.Image, source: SourceImage, draw_rect: Rect, mask_path: MaskPath):
        x, y, w, h = draw_rect.rounded()
        if w <= 0 or h <= 0:
            logger.debug("Draw rect %s is empty after rounding; skipping image.", draw_rect)
            return

        layer = Image.new('RGBA', canvas.size, (0, 0, 0, 0))
        layer.paste(source.image.resize((w, h), Image.Resampling.LANCZOS), (x, y))
        if mask_path.clips:
            clip = mask_path.rasterize(canvas.size)
            layer.putalpha(ImageChops.multiply(layer.getchannel('A'), clip))
        canvas.alpha_composite(layer)

    def _draw_caption(self, canvas: Image.Image, caption: Caption, text_layout: TextLayout):
        font = self.font_manager.get_pil_font(caption.font_size)
        center_x = caption.position.x
        baselines = text_layout.baselines(caption.position.y)

        # Drop shadow on its own layer so the blur does not touch the photo
        shadow = Image.new('RGBA', canvas.size, (0, 0, 0, 0))
        sdraw = ImageDraw.Draw(shadow)
        dx, dy = SHADOW_OFFSET
        for line, y in zip(text_layout.lines, baselines):
            sdraw.text((center_x + dx, y + dy), line, font=font, fill=SHADOW_COLOR, anchor='mm')
        # A canvas shadowBlur of N is a Gaussian with sigma N/2
        shadow = shadow.filter(ImageFilter.GaussianBlur(SHADOW_BLUR / 2))
        canvas.alpha_composite(shadow)

        draw = ImageDraw.Draw(canvas)
        fill = tuple(caption.color) + (255,)
        for line, y in zip(text_layout.lines, baselines):
            draw.text((center_x, y), line, font=font, fill=fill, anchor='mm')


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=OUTPUT_FORMAT, optimize=False)
    return buf.getvalue()


def draw_drag_overlay(backdrop: Image.Image, position: Tuple[float, float],
                      radius: float = HIT_RADIUS) -> Image.Image:
    """
    Live drag indicator: a dashed circle and a handle at `position`, painted over a
    copy of the committed bitmap. The backdrop itself is left alone.
    """
    overlay = backdrop.copy()
    draw = ImageDraw.Draw(overlay)
    cx, cy = Point(*position)
    box = [cx - radius, cy - radius, cx + radius, cy + radius]
    for start in range(0, 360, OVERLAY_DASH_DEGREES * 2):
        draw.arc(box, start, start + OVERLAY_DASH_DEGREES, fill=(255, 255, 255, 230), width=2)
    r = OVERLAY_HANDLE_RADIUS
    draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=(255, 255, 255, 255), outline=(0, 0, 0, 204))
    return overlay
