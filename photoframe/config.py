# config.py
"""
Session settings.

Defaults come from constants.py; an optional JSON file can override any of them,
e.g. {"frame": [800, 900], "layout_mode": "inset", "debounce_ms": 150}.
"""

import json
import logging
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Union

from photoframe.constants import (
    CAPTION_MARGIN, DEBOUNCE_MS, DOWNLOAD_FILENAME, FRAME_HEIGHT, FRAME_WIDTH, HIT_RADIUS,
)
from photoframe.errors import DegenerateGeometryError
from photoframe.utils.geometry import LayoutMode, Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorSettings:
    frame: Size = Size(FRAME_WIDTH, FRAME_HEIGHT)
    layout_mode: LayoutMode = LayoutMode.FILL
    debounce_ms: int = DEBOUNCE_MS
    hit_radius: float = HIT_RADIUS
    caption_margin: float = CAPTION_MARGIN
    download_filename: str = DOWNLOAD_FILENAME
    font_path: Optional[str] = None

    def __post_init__(self):
        frame = Size(*(int(v) for v in self.frame))
        if frame.width <= 0 or frame.height <= 0:
            raise DegenerateGeometryError(f"Frame has zero area: {frame.width}x{frame.height}")
        if frame.width <= 2 * self.caption_margin or frame.height <= 2 * self.caption_margin:
            raise DegenerateGeometryError(
                f"Frame {frame.width}x{frame.height} leaves no room inside a {self.caption_margin}px margin")
        # frozen dataclass; normalise through object.__setattr__
        object.__setattr__(self, 'frame', frame)
        object.__setattr__(self, 'layout_mode', LayoutMode.parse(self.layout_mode))
        object.__setattr__(self, 'debounce_ms', max(0, int(self.debounce_ms)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})


@lru_cache(maxsize=8)
def _load_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def load_settings(path: Union[str, Path, None] = None, **overrides) -> EditorSettings:
    """
    Settings from `path` (JSON) merged over the defaults, then `overrides` on top.

    A missing or unreadable file is logged and ignored. Invalid values such as a
    zero-sized frame still raise.
    """
    data: Dict[str, Any] = {}
    if path:
        try:
            data = dict(_load_file(str(Path(path).expanduser().resolve())))
        except (OSError, ValueError) as e:
            logger.warning("Failed to load settings %s, using defaults: %s", path, e)
            data = {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return EditorSettings.from_dict(data)
