import pytest

from spaceout.hud import Bar, bar_fill_width, bar_label, build_panel
from spaceout.spaceship import Spaceship


def test_bar_label_plain():
    assert bar_label("Hull", None) == "Hull"


def test_bar_label_with_warning():
    assert bar_label("Hull", "!") == "Hull !"


def test_full_bar_width():
    assert bar_fill_width(200.0, 1.0) == 110.0


def test_fill_width_is_clamped():
    assert bar_fill_width(200.0, 5.0) == bar_fill_width(200.0, 1.0)
    assert bar_fill_width(200.0, -1.0) == 0.0


@pytest.mark.parametrize("low, high", [(0.0, 0.25), (0.25, 0.5), (0.5, 0.99)])
def test_fill_width_grows_with_value(low, high):
    assert bar_fill_width(200.0, low) < bar_fill_width(200.0, high)


def test_panel_bars_in_order():
    panel = build_panel(Spaceship())
    assert [bar.label for bar in panel.bars] == ["Fuel", "Hull", "Shields", "Weapons"]


def test_panel_speed_text():
    assert build_panel(Spaceship(throttle=0.0)).speed_text == "speed: 0"
    assert build_panel(Spaceship(throttle=200.0)).speed_text == "speed: 200"


def test_sun_warning_marks_hull_only():
    panel = build_panel(Spaceship(), sun_warning=True)
    texts = [bar.text for bar in panel.bars]
    assert texts == ["Fuel", "Hull !", "Shields", "Weapons"]


def test_no_warning_without_sun():
    panel = build_panel(Spaceship(), sun_warning=False)
    assert all(bar.warning is None for bar in panel.bars)


def test_weapons_scaled_by_ten():
    panel = build_panel(Spaceship(weapons=10))
    weapons = panel.bars[3]
    assert weapons.value == 1.0
    assert weapons.fill_width == weapons.track_width


def test_overfull_fuel_fills_bar():
    fuel = build_panel(Spaceship(fuel=150.0)).bars[0]
    assert fuel.fill_width == fuel.track_width


def test_bar_text_uses_label():
    assert Bar("Shields", 0.5, (0.0, 0.0, 0.0), "!").text == "Shields !"