"""The ship status panel: speed read-out and status bars."""

from __future__ import annotations

import colorsys
from dataclasses import dataclass

from spaceout.spaceship import Spaceship

Color = tuple[float, float, float]

YELLOW: Color = (1.0, 1.0, 0.0)
DARK_CYAN: Color = (0.0, 139 / 255, 139 / 255)
DARK_GRAY: Color = (169 / 255, 169 / 255, 169 / 255)
WEAPONS_COLOR: Color = colorsys.hls_to_rgb(0.0, 0.5, 0.75)

BAR_WIDTH = 200.0
BAR_HEIGHT = 24.0
BAR_LABEL_SPACE = 90.0
SUN_WARNING_MARK = "!"


def bar_label(label: str, warning: str | None = None) -> str:
    """The bar's caption, with a warning mark appended when given."""
    return f"{label} {warning}" if warning is not None else label


def bar_fill_width(width: float, value: float) -> float:
    """Width of the filled part of a bar for a value clamped to [0, 1]."""
    return (width - BAR_LABEL_SPACE) * min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class Bar:
    """One labelled status bar."""

    label: str
    value: float
    color: Color
    warning: str | None = None
    width: float = BAR_WIDTH
    height: float = BAR_HEIGHT

    @property
    def text(self) -> str:
        return bar_label(self.label, self.warning)

    @property
    def fill_width(self) -> float:
        return bar_fill_width(self.width, self.value)

    @property
    def track_width(self) -> float:
        return self.width - BAR_LABEL_SPACE


@dataclass(frozen=True)
class HudPanel:
    """Everything the side panel shows for one frame."""

    speed_text: str
    bars: tuple[Bar, ...]


def build_panel(ship: Spaceship, sun_warning: bool = False) -> HudPanel:
    """Describe the panel for the ship's current state."""
    bars = (
        Bar("Fuel", ship.fuel, YELLOW),
        Bar(
            "Hull",
            ship.hull,
            DARK_CYAN,
            SUN_WARNING_MARK if sun_warning else None,
        ),
        Bar("Shields", ship.shields, DARK_GRAY),
        Bar("Weapons", ship.weapons / 10.0, WEAPONS_COLOR),
    )
    return HudPanel(speed_text=f"speed: {ship.throttle:.0f}", bars=bars)