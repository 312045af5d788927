import pytest

from spaceout.menu import (
    HOVERED_BUTTON,
    HOVERED_PRESSED_BUTTON,
    NORMAL_BUTTON,
    PRESSED_BUTTON,
    Menu,
    MenuButton,
    MenuButtonAction,
    MenuState,
    build_screen,
    button_color,
)
from spaceout.state import DisplayQuality, GameState, Interaction, Settings, Volume


@pytest.mark.parametrize(
    "interaction, selected, expected",
    [
        (Interaction.PRESSED, False, PRESSED_BUTTON),
        (Interaction.PRESSED, True, PRESSED_BUTTON),
        (Interaction.NONE, True, PRESSED_BUTTON),
        (Interaction.HOVERED, True, HOVERED_PRESSED_BUTTON),
        (Interaction.HOVERED, False, HOVERED_BUTTON),
        (Interaction.NONE, False, NORMAL_BUTTON),
    ],
)
def test_button_color(interaction, selected, expected):
    assert button_color(interaction, selected) == expected


def test_menu_starts_disabled_without_screen():
    menu = Menu()
    assert menu.state is MenuState.DISABLED
    assert menu.screen() is None
    assert MenuState.default() is MenuState.DISABLED


def test_open_shows_main_screen():
    menu = Menu()
    menu.open()
    screen = menu.screen()
    assert screen.state is MenuState.MAIN
    assert [b.text for b in screen.buttons] == ["New Game", "Settings", "Quit"]
    assert screen.headings == ("spaceout", "adventure")


def test_press_on_hidden_menu_raises():
    menu = Menu()
    with pytest.raises(RuntimeError):
        menu.press(MenuButton("Quit", MenuButtonAction.QUIT))


def test_press_button_not_on_screen_raises():
    menu = Menu()
    menu.open()
    with pytest.raises(ValueError):
        menu.press(MenuButton("Back", MenuButtonAction.BACK_TO_SETTINGS))


def test_play_starts_game_and_closes_menu():
    menu = Menu()
    menu.open()
    result = menu.press(menu.screen().button("New Game"))
    assert result is GameState.SPACE
    assert menu.state is MenuState.DISABLED


def test_quit_requests_exit():
    menu = Menu()
    menu.open()
    assert menu.press(menu.screen().button("Quit")) is None
    assert menu.exit_requested is True


def test_navigation_round_trip():
    menu = Menu()
    menu.open()
    menu.press(menu.screen().button("Settings"))
    assert menu.state is MenuState.SETTINGS
    menu.press(menu.screen().button("Display"))
    assert menu.state is MenuState.SETTINGS_DISPLAY
    menu.press(menu.screen().button("Back"))
    assert menu.state is MenuState.SETTINGS
    menu.press(menu.screen().button("Sound"))
    assert menu.state is MenuState.SETTINGS_SOUND
    menu.press(menu.screen().button("Back"))
    menu.press(menu.screen().button("Back"))
    assert menu.state is MenuState.MAIN


def test_display_screen_marks_current_quality():
    screen = build_screen(MenuState.SETTINGS_DISPLAY, Settings())
    choices = [b for b in screen.buttons if b.setting is not None]
    assert [b.text for b in choices] == ["Low", "Medium", "High"]
    selected = [b.setting for b in choices if b.selected]
    assert selected == [Settings().display_quality]
    assert screen.label == "Display Quality"


def test_choosing_quality_updates_settings_and_selection():
    menu = Menu(state=MenuState.SETTINGS_DISPLAY)
    menu.press(menu.screen().button("High"))
    assert menu.settings.display_quality is DisplayQuality.HIGH
    selected = [b.setting for b in menu.screen().buttons if b.selected]
    assert selected == [DisplayQuality.HIGH]


def test_sound_screen_has_ten_levels_with_current_selected():
    settings = Settings()
    screen = build_screen(MenuState.SETTINGS_SOUND, settings)
    levels = [b.setting for b in screen.buttons if b.setting is not None]
    assert levels == [Volume(n) for n in range(10)]
    assert [b.setting for b in screen.buttons if b.selected] == [settings.volume]


def test_choosing_volume_updates_settings():
    menu = Menu(state=MenuState.SETTINGS_SOUND)
    level = next(b for b in menu.screen().buttons if b.setting == Volume(3))
    assert menu.press(level) is None
    assert menu.settings.volume == Volume(3)
    assert menu.state is MenuState.SETTINGS_SOUND


def test_button_requires_exactly_one_role():
    with pytest.raises(ValueError):
        MenuButton("x")
    with pytest.raises(ValueError):
        MenuButton("x", MenuButtonAction.QUIT, setting=Volume(1))


def test_disabled_state_has_no_screen():
    assert build_screen(MenuState.DISABLED, Settings()) is None


def test_missing_button_caption_raises_key_error():
    screen = build_screen(MenuState.SETTINGS, Settings())
    with pytest.raises(KeyError):
        screen.button("Nowhere")