"""The docking menu that appears when the ship comes close to a body."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from spaceout.state import GameState, Interaction

Color = tuple[float, float, float]

NORMAL_BUTTON: Color = (0.15, 0.15, 0.15)
HOVERED_BUTTON: Color = (0.25, 0.25, 0.25)
PRESSED_BUTTON: Color = (0.35, 0.75, 0.35)
RED: Color = (1.0, 0.0, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0)

MENU_RADIUS = 120.0
BUTTON_TEXT = "Dock"


@dataclass(frozen=True)
class ActionMenuTarget:
    """A place that offers actions when the ship is near it."""

    label: str
    position: tuple[float, float]


@dataclass(frozen=True)
class ButtonStyle:
    """Colours of the dock button."""

    background: Color
    border: Color


def nearest_target(
    ship_pos: tuple[float, float], targets: Iterable[ActionMenuTarget]
) -> ActionMenuTarget | None:
    """The first target within reach of the ship, if any."""
    for target in targets:
        if math.dist(ship_pos, target.position) < MENU_RADIUS:
            return target
    return None


def button_style(interaction: Interaction) -> ButtonStyle:
    """The dock button's colours for a given interaction."""
    if interaction is Interaction.PRESSED:
        return ButtonStyle(PRESSED_BUTTON, RED)
    if interaction is Interaction.HOVERED:
        return ButtonStyle(HOVERED_BUTTON, WHITE)
    return ButtonStyle(NORMAL_BUTTON, BLACK)


@dataclass
class ActionMenu:
    """The menu's visibility, label and dock button appearance."""

    label: str | None = None
    style: ButtonStyle = field(default_factory=lambda: button_style(Interaction.NONE))
    button_text: str = BUTTON_TEXT

    @property
    def is_open(self) -> bool:
        return self.label is not None

    def update(
        self, ship_pos: tuple[float, float], targets: Iterable[ActionMenuTarget]
    ) -> None:
        """Open the menu near a target, close it otherwise."""
        target = nearest_target(ship_pos, targets)
        if target is None:
            self.label = None
            self.style = button_style(Interaction.NONE)
        elif not self.is_open:
            self.label = target.label
            self.style = button_style(Interaction.NONE)

    def interact(self, interaction: Interaction) -> GameState | None:
        """Restyle the dock button; pressing it asks for the docked state."""
        if not self.is_open:
            raise RuntimeError("the action menu is not shown")
        self.button_text = BUTTON_TEXT
        self.style = button_style(interaction)
        if interaction is Interaction.PRESSED:
            return GameState.DOCKED
        return None

    def title(self) -> str:
        """The heading shown at the top of the menu."""
        if self.label is None:
            raise RuntimeError("the action menu is not shown")
        return f"{self.label} Actions"