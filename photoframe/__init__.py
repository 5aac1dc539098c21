# photoframe/__init__.py

from .config import EditorSettings, load_settings
from .controller import CaptionPositionController, DragPhase, EditorSession
from .errors import DecodeError, DegenerateGeometryError, InvalidShapeKind, PhotoFrameError
from .model import Caption, SourceImage
from .renderer import CompositionRenderer, RenderResult, decode_image
from .scheduler import ManualTimerHost, RenderScheduler
from .shapes import MaskPath, ShapeKind, build_mask
from .utils.geometry import LayoutMode, Point, Rect, Size, compute_draw_rect
from .utils.text_layout import TextLayout, wrap

__version__ = '0.1.0'
