"""The game as a whole: state changes between the splash, menu and space scenes."""

from __future__ import annotations

import random
from collections.abc import Collection
from dataclasses import dataclass, field

from spaceout.action_menu import ActionMenu, ActionMenuTarget
from spaceout.bodies import CelestialBody, rotate_sun, spawn_base, spawn_moon, spawn_sun
from spaceout.hud import HudPanel, build_panel
from spaceout.menu import Menu, MenuButton
from spaceout.space import (
    Camera,
    Star,
    camera_follow_and_zoom,
    parallax_starfield,
    refuel_on_base_visit,
    spawn_starfield,
    sun_proximity_damage,
)
from spaceout.spaceship import Key, Spaceship, Transform, move_spaceship, spawn_spaceship
from spaceout.splash import SplashScreen
from spaceout.state import GameState, Interaction, Settings

BASE_LABEL = "Base"
MOON_LABEL = "Moon"


@dataclass
class SpaceScene:
    """Everything that lives in space while the game is being played."""

    camera: Camera = field(default_factory=Camera)
    stars: list[Star] = field(default_factory=spawn_starfield)
    ship_transform: Transform = field(default_factory=lambda: spawn_spaceship()[0])
    ship: Spaceship = field(default_factory=lambda: spawn_spaceship()[1])
    base: CelestialBody = field(default_factory=spawn_base)
    moon: CelestialBody = field(default_factory=spawn_moon)
    sun: CelestialBody = field(default_factory=spawn_sun)
    action_menu: ActionMenu = field(default_factory=ActionMenu)
    sun_warning: bool = False
    hud: HudPanel | None = None

    def __post_init__(self) -> None:
        if self.hud is None:
            self.hud = build_panel(self.ship, self.sun_warning)

    @property
    def targets(self) -> tuple[ActionMenuTarget, ...]:
        """The places that offer the docking menu."""
        return (
            ActionMenuTarget(BASE_LABEL, self.base.position()),
            ActionMenuTarget(MOON_LABEL, self.moon.position()),
        )

    def update(self, dt: float, pressed: Collection[Key] = frozenset()) -> None:
        """Run one frame of the scene."""
        if dt < 0.0:
            raise ValueError("time step must not be negative")
        parallax_starfield(self.stars, self.ship_transform.position())
        move_spaceship(self.ship_transform, self.ship, pressed, dt)
        ship_pos = self.ship_transform.position()
        base_pos = self.base.position()
        camera_follow_and_zoom(self.camera, ship_pos, base_pos)
        refuel_on_base_visit(self.ship, ship_pos, base_pos, self.moon.position())
        rotate_sun(self.sun)
        self.sun_warning = sun_proximity_damage(
            self.ship, ship_pos, self.sun.position(), dt
        )
        self.action_menu.update(ship_pos, self.targets)
        self.hud = build_panel(self.ship, self.sun_warning)


class Game:
    """The current game state and the scene that belongs to it."""

    def __init__(
        self, rng: random.Random | None = None, settings: Settings | None = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.camera = Camera()
        self.menu = Menu(settings=settings if settings is not None else Settings())
        self.splash: SplashScreen | None = None
        self.space: SpaceScene | None = None
        self.state = GameState.default()
        self._enter(self.state)

    @property
    def settings(self) -> Settings:
        return self.menu.settings

    @property
    def exit_requested(self) -> bool:
        return self.menu.exit_requested

    def update(
        self, dt: float, pressed: Collection[Key] = frozenset()
    ) -> GameState:
        """Advance the current scene by one frame and return the state after it."""
        if dt < 0.0:
            raise ValueError("time step must not be negative")
        if self.state is GameState.SPLASH and self.splash is not None:
            self._change_state(self.splash.tick(dt))
        elif self.state is GameState.SPACE and self.space is not None:
            self.space.update(dt, pressed)
        return self.state

    def press_menu_button(self, button: MenuButton) -> GameState:
        """Press a button on the menu screen shown."""
        if self.state is not GameState.MENU:
            raise RuntimeError("the menu is not shown")
        self._change_state(self.menu.press(button))
        return self.state

    def press_dock(self) -> GameState:
        """Press the dock button of the action menu."""
        if self.state is not GameState.SPACE or self.space is None:
            raise RuntimeError("not in space")
        self._change_state(self.space.action_menu.interact(Interaction.PRESSED))
        return self.state

    def _change_state(self, new_state: GameState | None) -> None:
        if new_state is None:
            return
        self._exit(self.state)
        self.state = new_state
        self._enter(new_state)

    def _enter(self, state: GameState) -> None:
        if state is GameState.SPLASH:
            self.splash = SplashScreen()
        elif state is GameState.MENU:
            self.menu.open()
        elif state is GameState.SPACE:
            self.space = SpaceScene(camera=self.camera, stars=spawn_starfield(self.rng))

    def _exit(self, state: GameState) -> None:
        if state is GameState.SPLASH:
            self.splash = None
        elif state is GameState.SPACE:
            self.space = None