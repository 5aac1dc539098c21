# font_manager.py

import logging
import os
import platform
from typing import Callable, Dict, List, Optional

from PIL import ImageFont

logger = logging.getLogger(__name__)


# --- FontManager Class ---
class FontManager:
    """
    Finds a bold sans-serif TrueType face on the host and hands out sized PIL fonts.

    Captions were designed around bold Arial. Where no comparable face can be found
    the manager falls back to Pillow's bundled default face, so measuring and
    drawing always use the same metrics.
    """

    def __init__(self, font_path: Optional[str] = None):
        self._fonts: Dict[int, ImageFont.FreeTypeFont] = {}
        self._font_path = font_path or self._find_default_font_path()
        if not self._font_path:
            logger.warning("No bold system font found; captions will use Pillow's default face.")

    @property
    def font_path(self) -> Optional[str]:
        return self._font_path

    @staticmethod
    def _candidate_paths() -> List[str]:
        """Bold sans-serif faces in rough order of preference for each platform."""
        system = platform.system()
        if system == 'Windows':
            win_fonts = os.path.join(os.environ.get('WINDIR', 'C:\\Windows'), 'Fonts')
            return [
                os.path.join(win_fonts, 'arialbd.ttf'),
                os.path.join(win_fonts, 'segoeuib.ttf'),
                os.path.join(win_fonts, 'arial.ttf'),
            ]
        if system == 'Darwin':
            paths = []
            for base_dir in ['/Library/Fonts', '/System/Library/Fonts',
                             '/System/Library/Fonts/Supplemental',
                             os.path.expanduser('~/Library/Fonts')]:
                paths.extend([
                    os.path.join(base_dir, 'Arial Bold.ttf'),
                    os.path.join(base_dir, 'Arial.ttf'),
                ])
            return paths
        return [
            '/usr/share/fonts/truetype/msttcorefonts/Arial_Bold.ttf',
            '/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf',
            '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf',
            '/usr/share/fonts/truetype/freefont/FreeSansBold.ttf',
            '/usr/share/fonts/TTF/DejaVuSans-Bold.ttf',
        ]

    def _find_default_font_path(self) -> Optional[str]:
        for path in self._candidate_paths():
            if path and os.path.exists(path):
                logger.debug("FontManager: using %s", path)
                return path
        return None

    def get_pil_font(self, size: int) -> ImageFont.FreeTypeFont:
        """
        Returns the caption font at `size` pixels, loading it on first use.

        Args:
            size (int): Font size in pixels.

        Returns:
            PIL.ImageFont.FreeTypeFont: the sized font.
        """
        size = int(size)
        font = self._fonts.get(size)
        if font is None:
            font = self._load(size)
            self._fonts[size] = font
        return font

    def _load(self, size: int) -> ImageFont.FreeTypeFont:
        if self._font_path:
            try:
                return ImageFont.truetype(self._font_path, size)
            except OSError as e:
                logger.warning("FontManager: could not load %s at %spx (%s); using default face.",
                               self._font_path, size, e)
                self._font_path = None
        return ImageFont.load_default(size=size)

    def measure(self, size: int) -> Callable[[str], float]:
        """Width function for the text layout engine."""
        font = self.get_pil_font(size)
        return font.getlength

    def clear(self):
        self._fonts.clear()
