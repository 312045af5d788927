"""The main menu and its settings screens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from spaceout.state import (
    TEXT_COLOR,
    DisplayQuality,
    GameState,
    Interaction,
    Settings,
    Volume,
)

Color = tuple[float, float, float]

NORMAL_BUTTON: Color = (0.15, 0.15, 0.15)
HOVERED_BUTTON: Color = (0.25, 0.25, 0.25)
HOVERED_PRESSED_BUTTON: Color = (0.25, 0.65, 0.25)
PRESSED_BUTTON: Color = (0.35, 0.75, 0.35)
CRIMSON: Color = (220 / 255, 20 / 255, 60 / 255)
WHITE: Color = (1.0, 1.0, 1.0)

MENU_BACKGROUND_IMAGE = "menu_bg.png"
TITLE = "spaceout"
SUBTITLE = "adventure"
TITLE_FONT = "fonts/PaytoneOne-Regular.ttf"
SUBTITLE_FONT = "fonts/Satisfy-Regular.ttf"
BUTTON_FONT_SIZE = 33.0

ICON_PLAY = "textures/Game Icons/right.png"
ICON_SETTINGS = "textures/Game Icons/wrench.png"
ICON_QUIT = "textures/Game Icons/exitRight.png"

VOLUME_LEVELS = range(10)
QUALITY_LEVELS = (DisplayQuality.LOW, DisplayQuality.MEDIUM, DisplayQuality.HIGH)

Setting = DisplayQuality | Volume


class MenuState(Enum):
    """Which menu screen is shown."""

    MAIN = "main"
    SETTINGS = "settings"
    SETTINGS_DISPLAY = "settings_display"
    SETTINGS_SOUND = "settings_sound"
    DISABLED = "disabled"

    @classmethod
    def default(cls) -> MenuState:
        return cls.DISABLED


class MenuButtonAction(Enum):
    """What a navigation button does when pressed."""

    PLAY = "play"
    SETTINGS = "settings"
    SETTINGS_DISPLAY = "settings_display"
    SETTINGS_SOUND = "settings_sound"
    BACK_TO_MAIN_MENU = "back_to_main_menu"
    BACK_TO_SETTINGS = "back_to_settings"
    QUIT = "quit"


_NAVIGATION: dict[MenuButtonAction, MenuState] = {
    MenuButtonAction.SETTINGS: MenuState.SETTINGS,
    MenuButtonAction.SETTINGS_DISPLAY: MenuState.SETTINGS_DISPLAY,
    MenuButtonAction.SETTINGS_SOUND: MenuState.SETTINGS_SOUND,
    MenuButtonAction.BACK_TO_MAIN_MENU: MenuState.MAIN,
    MenuButtonAction.BACK_TO_SETTINGS: MenuState.SETTINGS,
}


def button_color(interaction: Interaction, selected: bool) -> Color:
    """Background colour of a button for an interaction and selection."""
    if interaction is Interaction.PRESSED or (
        interaction is Interaction.NONE and selected
    ):
        return PRESSED_BUTTON
    if interaction is Interaction.HOVERED:
        return HOVERED_PRESSED_BUTTON if selected else HOVERED_BUTTON
    return NORMAL_BUTTON


@dataclass(frozen=True)
class MenuButton:
    """A button that either navigates or picks a setting value."""

    text: str
    action: MenuButtonAction | None = None
    setting: Setting | None = None
    selected: bool = False
    icon: str | None = None

    def __post_init__(self) -> None:
        if (self.action is None) == (self.setting is None):
            raise ValueError("a button needs exactly one of an action or a setting")

    def color(self, interaction: Interaction = Interaction.NONE) -> Color:
        return button_color(interaction, self.selected)


@dataclass(frozen=True)
class MenuScreen:
    """The content of one menu screen."""

    state: MenuState
    buttons: tuple[MenuButton, ...]
    headings: tuple[str, ...] = ()
    label: str | None = None
    background: Color = CRIMSON
    background_image: str | None = None
    text_color: Color = TEXT_COLOR

    def button(self, text: str) -> MenuButton:
        """The first button with the given caption."""
        for candidate in self.buttons:
            if candidate.text == text:
                return candidate
        raise KeyError(text)


def _main_screen() -> MenuScreen:
    return MenuScreen(
        state=MenuState.MAIN,
        headings=(TITLE, SUBTITLE),
        background=WHITE,
        background_image=MENU_BACKGROUND_IMAGE,
        buttons=(
            MenuButton("New Game", MenuButtonAction.PLAY, icon=ICON_PLAY),
            MenuButton("Settings", MenuButtonAction.SETTINGS, icon=ICON_SETTINGS),
            MenuButton("Quit", MenuButtonAction.QUIT, icon=ICON_QUIT),
        ),
    )


def _settings_screen() -> MenuScreen:
    return MenuScreen(
        state=MenuState.SETTINGS,
        buttons=(
            MenuButton("Display", MenuButtonAction.SETTINGS_DISPLAY),
            MenuButton("Sound", MenuButtonAction.SETTINGS_SOUND),
            MenuButton("Back", MenuButtonAction.BACK_TO_MAIN_MENU),
        ),
    )


def _display_screen(settings: Settings) -> MenuScreen:
    choices = tuple(
        MenuButton(
            str(quality),
            setting=quality,
            selected=quality is settings.display_quality,
        )
        for quality in QUALITY_LEVELS
    )
    return MenuScreen(
        state=MenuState.SETTINGS_DISPLAY,
        label="Display Quality",
        buttons=choices + (MenuButton("Back", MenuButtonAction.BACK_TO_SETTINGS),),
    )


def _sound_screen(settings: Settings) -> MenuScreen:
    choices = tuple(
        MenuButton("", setting=Volume(level), selected=Volume(level) == settings.volume)
        for level in VOLUME_LEVELS
    )
    return MenuScreen(
        state=MenuState.SETTINGS_SOUND,
        label="Volume",
        buttons=choices + (MenuButton("Back", MenuButtonAction.BACK_TO_SETTINGS),),
    )


def build_screen(state: MenuState, settings: Settings) -> MenuScreen | None:
    """The screen for a menu state; the disabled menu has none."""
    if state is MenuState.MAIN:
        return _main_screen()
    if state is MenuState.SETTINGS:
        return _settings_screen()
    if state is MenuState.SETTINGS_DISPLAY:
        return _display_screen(settings)
    if state is MenuState.SETTINGS_SOUND:
        return _sound_screen(settings)
    return None


@dataclass
class Menu:
    """Menu navigation and the settings it edits."""

    settings: Settings = field(default_factory=Settings)
    state: MenuState = MenuState.DISABLED
    exit_requested: bool = False

    def open(self) -> None:
        """Show the main screen."""
        self.state = MenuState.MAIN

    def close(self) -> None:
        """Hide the menu."""
        self.state = MenuState.DISABLED

    def screen(self) -> MenuScreen | None:
        """The screen currently shown, or None when the menu is hidden."""
        return build_screen(self.state, self.settings)

    def press(self, button: MenuButton) -> GameState | None:
        """Act on a pressed button; starting a game returns the space state."""
        current = self.screen()
        if current is None:
            raise RuntimeError("the menu is not shown")
        if button not in current.buttons:
            raise ValueError(f"button {button.text!r} is not on the current screen")

        if button.setting is not None:
            self._apply(button.setting)
            return None

        action = button.action
        if action is MenuButtonAction.QUIT:
            self.exit_requested = True
            return None
        if action is MenuButtonAction.PLAY:
            self.close()
            return GameState.SPACE
        self.state = _NAVIGATION[action]
        return None

    def _apply(self, setting: Setting) -> None:
        if isinstance(setting, DisplayQuality):
            if self.settings.display_quality is not setting:
                self.settings.display_quality = setting
        elif self.settings.volume != setting:
            self.settings.volume = setting