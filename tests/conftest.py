import io

import pytest
from PIL import Image

from photoframe.config import EditorSettings
from photoframe.controller import EditorSession
from photoframe.renderer import CompositionRenderer
from photoframe.scheduler import ManualTimerHost
from photoframe.utils.font_manager import FontManager


def make_png(width=800, height=400, color=(200, 60, 40)):
    buf = io.BytesIO()
    Image.new('RGB', (width, height), color).save(buf, format='PNG')
    return buf.getvalue()


@pytest.fixture
def png_bytes():
    return make_png


@pytest.fixture
def em_measure():
    """Every character is one em wide; handy for predictable wrapping."""
    def factory(font_size=24):
        return lambda s: len(s) * font_size
    return factory


@pytest.fixture(scope='session')
def font_manager():
    return FontManager()


@pytest.fixture
def renderer(font_manager):
    return CompositionRenderer(font_manager)


@pytest.fixture
def host():
    return ManualTimerHost()


@pytest.fixture
def session(host, font_manager):
    return EditorSession(timer_host=host, settings=EditorSettings(), font_manager=font_manager)


@pytest.fixture
def loaded_session(session, host, png_bytes):
    session.load_image(png_bytes())
    host.run_pending()
    assert session.has_render
    return session
