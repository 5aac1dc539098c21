import pytest

from photoframe.utils.text_layout import wrap

SCENARIO_B = "a very long caption that exceeds the maximum line width repeatedly"


@pytest.mark.parametrize('text', ['', '   ', '\n'])
def test_blank_text_gives_no_lines(text, em_measure):
    layout = wrap(text, 560, em_measure())
    assert layout.lines == ()
    assert layout.height == 0
    assert not layout


def test_single_line(em_measure):
    layout = wrap("Hello", 560, em_measure())
    assert layout.lines == ("Hello ",)
    assert layout.line_height == 34


def test_greedy_wrap_with_em_measure(em_measure):
    measure = em_measure(24)
    layout = wrap(SCENARIO_B, 560, measure, font_size=24)
    assert len(layout.lines) >= 3
    for line in layout.lines:
        assert measure(line) <= 560
    assert ''.join(layout.lines).split() == SCENARIO_B.split()


def test_scenario_b_with_real_font(font_manager):
    # A bold 24px face averages well under 17px per character, so this caption
    # only reaches two lines at 560px. Three or more lines need wider metrics;
    # test_greedy_wrap_with_em_measure covers that case.
    measure = font_manager.measure(24)
    layout = wrap(SCENARIO_B, 560, measure, font_size=24)
    assert len(layout.lines) >= 2
    for line in layout.lines:
        assert measure(line.rstrip()) <= 560


def test_oversized_word_gets_its_own_line():
    layout = wrap("hi enormousword hi", 50, lambda s: len(s) * 10)
    assert layout.lines == ("hi ", "enormousword ", "hi ")


def test_line_height_tracks_font_size(em_measure):
    assert wrap("x", 560, em_measure(), font_size=48).line_height == 58


def test_baselines_are_centred():
    layout = wrap("aa bb cc", 30, lambda s: len(s) * 10, font_size=20)
    assert len(layout.lines) == 3
    assert layout.baselines(350) == [320, 350, 380]
