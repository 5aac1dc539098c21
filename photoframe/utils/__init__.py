# utils/__init__.py

from .font_manager import FontManager
from .geometry import LayoutMode, Point, Rect, Size, compute_draw_rect
from .text_layout import TextLayout, wrap
