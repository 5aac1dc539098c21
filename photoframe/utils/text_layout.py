# text_layout.py

from dataclasses import dataclass
from typing import Callable, List, Tuple

from photoframe.constants import DEFAULT_FONT_SIZE, LINE_SPACING

MeasureFunc = Callable[[str], float]


@dataclass(frozen=True)
class TextLayout:
    lines: Tuple[str, ...]
    line_height: int

    @property
    def height(self) -> int:
        """Vertical space the caption takes; zero when there is nothing to draw."""
        return len(self.lines) * self.line_height

    def __bool__(self):
        return bool(self.lines)

    def baselines(self, center_y: float) -> List[float]:
        """Middle baseline of every line, with the block centred on `center_y`."""
        first = center_y - (len(self.lines) - 1) * self.line_height / 2
        return [first + i * self.line_height for i in range(len(self.lines))]


def line_height_for(font_size: int) -> int:
    return int(font_size) + LINE_SPACING


def wrap(text: str, max_width: float, measure_width: MeasureFunc,
         font_size: int = DEFAULT_FONT_SIZE) -> TextLayout:
    """
    Greedy word wrap.

    Each word is tried with a trailing space; if the widened line no longer fits
    and something is already on it, the line is committed and the word starts the
    next one. Lines keep their trailing space because that is how they were
    measured. A word wider than `max_width` gets a line of its own.

    Args:
        text (str): Caption text. Newlines count as spaces.
        max_width (float): Widest a line may measure, in pixels.
        measure_width (callable): Returns the rendered width of a string.
        font_size (int): Pixel size the text is drawn at; sets the line height.

    Returns:
        TextLayout: the wrapped lines and their line height.
    """
    line_height = line_height_for(font_size)
    if not text or not text.strip():
        return TextLayout((), line_height)

    words = text.replace('\r\n', ' ').replace('\n', ' ').split(' ')
    lines: List[str] = []
    line = ''
    for word in words:
        candidate = line + word + ' '
        if line and measure_width(candidate) > max_width:
            lines.append(line)
            line = word + ' '
        else:
            line = candidate
    lines.append(line)
    return TextLayout(tuple(lines), line_height)
