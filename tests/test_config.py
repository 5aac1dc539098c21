import json

import pytest

from photoframe.config import EditorSettings, load_settings
from photoframe.errors import DegenerateGeometryError
from photoframe.utils.geometry import LayoutMode


def test_defaults():
    settings = EditorSettings()
    assert settings.frame == (600, 700)
    assert settings.layout_mode is LayoutMode.FILL
    assert settings.debounce_ms == 300
    assert settings.download_filename == 'joke-photo.png'


def test_load_from_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"frame": [800, 900], "layout_mode": "inset", "bogus": 1}))
    settings = load_settings(path)
    assert settings.frame == (800, 900)
    assert settings.layout_mode is LayoutMode.INSET


def test_overrides_win(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"layout_mode": "inset"}))
    assert load_settings(path, layout_mode='fill').layout_mode is LayoutMode.FILL
    assert load_settings(path, layout_mode=None).layout_mode is LayoutMode.INSET


def test_missing_file_falls_back(tmp_path):
    assert load_settings(tmp_path / "nope.json") == EditorSettings()


def test_broken_json_falls_back(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert load_settings(path) == EditorSettings()


@pytest.mark.parametrize('frame', [(0, 700), (600, 0), (50, 700)])
def test_degenerate_frame_rejected(frame):
    with pytest.raises(DegenerateGeometryError):
        EditorSettings(frame=frame)
