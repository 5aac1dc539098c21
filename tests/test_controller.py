import pytest

from photoframe.controller import CaptionPositionController, DragPhase
from photoframe.model import Caption
from photoframe.utils.geometry import Point

FRAME = (600, 700)


def caption(text="Hello", at=(300, 350)):
    return Caption(text=text, position=Point(*at))


@pytest.fixture
def positioner():
    return CaptionPositionController(FRAME)


def test_press_on_caption_starts_drag(positioner):
    assert positioner.pointer_down((320, 360), caption())
    assert positioner.phase is DragPhase.DRAGGING
    assert positioner.candidate == (300, 350)


def test_press_on_radius_edge_starts_drag(positioner):
    assert positioner.pointer_down((350, 350), caption())


@pytest.mark.parametrize('point', [(351, 350), (300, 401), (0, 0), (340, 390)])
def test_press_far_away_stays_idle(positioner, point):
    assert not positioner.pointer_down(point, caption())
    assert positioner.phase is DragPhase.IDLE


def test_blank_caption_is_not_draggable(positioner):
    assert not positioner.pointer_down((300, 350), caption(text="   "))


def test_move_without_drag_does_nothing(positioner):
    assert positioner.pointer_move((10, 10)) is None
    assert positioner.pointer_up() is None


@pytest.mark.parametrize('point,expected', [
    ((10, 10), (30, 30)),
    ((-500, 900), (30, 670)),
    ((9999, -1), (570, 30)),
    ((200, 200), (200, 200)),
])
def test_moves_are_clamped(positioner, point, expected):
    positioner.pointer_down((300, 350), caption())
    assert positioner.pointer_move(point) == expected


def test_scenario_d_release_commits_clamped(positioner):
    positioner.pointer_down((300, 350), caption())
    positioner.pointer_move((10, 10))
    assert positioner.pointer_up() == (30, 30)
    assert positioner.phase is DragPhase.IDLE


def test_release_coordinates_update_candidate(positioner):
    positioner.pointer_down((300, 350), caption())
    assert positioner.pointer_up((650, 20)) == (570, 30)


def test_leave_ends_drag(positioner):
    positioner.pointer_down((300, 350), caption())
    positioner.pointer_move((100, 100))
    assert positioner.pointer_leave() == (100, 100)
    assert not positioner.is_dragging


def test_display_to_canvas_ratio(positioner):
    assert positioner.to_canvas(240, 280, (480, 560)) == (300, 350)
    assert positioner.to_canvas(12, 34) == (12, 34)
