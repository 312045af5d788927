"""Top-level game states and the user-adjustable settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

TEXT_COLOR = (0.9, 0.9, 0.9)


class GameState(Enum):
    """The screens the game moves between."""

    SPLASH = "splash"
    MENU = "menu"
    SPACE = "space"
    DOCKED = "docked"

    @classmethod
    def default(cls) -> GameState:
        return cls.SPLASH


class DisplayQuality(Enum):
    """Display quality choices offered in the settings menu."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value


class Interaction(Enum):
    """Pointer interaction with a button."""

    PRESSED = "pressed"
    HOVERED = "hovered"
    NONE = "none"


@dataclass(frozen=True, order=True)
class Volume:
    """Sound volume level; a non-negative integer."""

    level: int

    def __post_init__(self) -> None:
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise TypeError("volume level must be an integer")
        if self.level < 0:
            raise ValueError("volume level must not be negative")

    def __str__(self) -> str:
        return str(self.level)


@dataclass
class Settings:
    """The settings the menu can change."""

    display_quality: DisplayQuality = DisplayQuality.MEDIUM
    volume: Volume = field(default_factory=lambda: Volume(7))