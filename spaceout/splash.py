"""The splash screen shown for a moment before the main menu."""

from __future__ import annotations

from dataclasses import dataclass

from spaceout.state import GameState

SPLASH_DURATION = 1.0
SPLASH_ICON = "branding/icon.png"
SPLASH_TEXT = "spaceout"
SPLASH_FONT = "fonts/PaytoneOne-Regular.ttf"
SPLASH_FONT_SIZE = 32.0
SPLASH_LOGO_WIDTH = 200.0
SPLASH_BACKGROUND = (1.0, 1.0, 1.0)
SPLASH_TEXT_COLOR = (0.0, 0.0, 0.0)


@dataclass
class SplashScreen:
    """A logo and title held on screen until a one-shot timer runs out."""

    duration: float = SPLASH_DURATION
    elapsed: float = 0.0
    icon: str = SPLASH_ICON
    text: str = SPLASH_TEXT
    font: str = SPLASH_FONT
    font_size: float = SPLASH_FONT_SIZE
    logo_width: float = SPLASH_LOGO_WIDTH

    def __post_init__(self) -> None:
        if self.duration < 0.0:
            raise ValueError("splash duration must not be negative")

    def tick(self, dt: float) -> GameState | None:
        """Advance the timer; once it has run out, ask for the menu."""
        if dt < 0.0:
            raise ValueError("time step must not be negative")
        self.elapsed = min(self.elapsed + dt, self.duration)
        return GameState.MENU if self.finished() else None

    def finished(self) -> bool:
        """Whether the timer has run out."""
        return self.elapsed >= self.duration