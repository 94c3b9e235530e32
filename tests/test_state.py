import pytest

from fancontroller.model.fan_speed import FanSpeed
from fancontroller.model.geometry_utils import position_for
from fancontroller.model.state import BLACK, GRAY, DialColors, DialState


def test_initial_state(colors):
    state = DialState(colors=colors)
    assert state.speed == FanSpeed.OFF
    assert state.radius == 0.0
    assert state.fill_color() == GRAY


def test_default_colors_are_transparent():
    colors = DialColors()
    assert (colors.low, colors.medium, colors.high) == (0, 0, 0)


def test_colors_are_immutable(colors):
    with pytest.raises(AttributeError):
        colors.low = 0


@pytest.mark.parametrize("w, h", [(200, 100), (100, 200), (640, 480), (33, 77)])
def test_on_resize(w, h):
    state = DialState()
    radius = state.on_resize(w, h)
    assert radius == state.radius
    assert radius == pytest.approx(min(w, h) * 0.4)
    assert (state.width, state.height) == (w, h)
    assert state.center == (w / 2, h / 2)


def test_advance_visits_all_speeds():
    state = DialState()
    visited = [state.advance() for _ in range(4)]
    assert visited == [FanSpeed.LOW, FanSpeed.MEDIUM, FanSpeed.HIGH, FanSpeed.OFF]
    assert state.speed == FanSpeed.OFF


def test_fill_color_per_speed(colors):
    state = DialState(colors=colors)
    expected = [0xFF00FF00, 0xFFFFFF00, 0xFFFF0000, GRAY]
    for color in expected:
        state.advance()
        assert state.fill_color() == color


def test_indicator_radius():
    state = DialState()
    state.on_resize(300, 300)
    assert state.indicator_radius == pytest.approx(120 / 12)


def test_locate_reuses_buffer():
    state = DialState()
    state.on_resize(200, 100)
    first = state.locate(FanSpeed.OFF, 70)
    second = state.locate(FanSpeed.HIGH, 70)
    assert first is second is state.point
    assert second == position_for(FanSpeed.HIGH, 70, 200, 100)


def test_black_is_opaque():
    assert BLACK >> 24 == 0xFF
