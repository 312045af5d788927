"""The space scene: starfield parallax, camera, refuelling and sun damage."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from dataclasses import dataclass

from spaceout.spaceship import Spaceship

STAR_LAYERS = 3
STARS_PER_LAYER = 100
STAR_COLORS: tuple[tuple[float, float, float], ...] = (
    (0.0, 0.0, 0.0),
    (0.2, 0.2, 0.2),
    (0.5, 0.5, 0.5),
)
STAR_PARALLAX: tuple[float, ...] = (0.2, 0.5, 0.8)
STARFIELD_EXTENT = 2000.0
STAR_DEPTH = -100.0

BASE_REFUEL_RADIUS = 150.0
MOON_REFUEL_RADIUS = 100.0
REFUELLED_FUEL = 1.0

CAMERA_BOUNDS_RADIUS = 400.0
ZOOM_NEAR = 2.0
ZOOM_FAR = 6.0
ZOOM_SPEED = 5.0
ZOOM_FRAME_TIME = 0.016

SUN_DAMAGE_RADIUS = 600.0
SUN_DAMAGE_PER_SECOND = 0.25

Point = tuple[float, float]


@dataclass
class Star:
    """A background star on one parallax layer."""

    layer: int
    base_pos: Point
    size: float
    x: float
    y: float
    z: float

    @property
    def color(self) -> tuple[float, float, float]:
        return STAR_COLORS[self.layer]

    @property
    def parallax(self) -> float:
        return STAR_PARALLAX[self.layer]


@dataclass
class Camera:
    """A 2D camera: a centre in world space and a zoom scale."""

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0


def _distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def spawn_starfield(rng: random.Random | None = None) -> list[Star]:
    """Scatter stars over every layer; deeper layers get larger stars."""
    rng = rng if rng is not None else random.Random()
    stars = []
    for layer in range(STAR_LAYERS):
        for _ in range(STARS_PER_LAYER):
            x = rng.uniform(-STARFIELD_EXTENT, STARFIELD_EXTENT)
            y = rng.uniform(-STARFIELD_EXTENT, STARFIELD_EXTENT)
            size = rng.uniform(1.0, 3.0) * (layer + 1.0)
            stars.append(
                Star(
                    layer=layer,
                    base_pos=(x, y),
                    size=size,
                    x=x,
                    y=y,
                    z=STAR_DEPTH - layer,
                )
            )
    return stars


def parallax_starfield(stars: Iterable[Star], player_pos: Point) -> None:
    """Shift each star with the player, less for layers with more parallax."""
    px, py = player_pos
    for star in stars:
        factor = 1.0 - star.parallax
        star.x = star.base_pos[0] + px * factor
        star.y = star.base_pos[1] + py * factor


def refuel_on_base_visit(
    ship: Spaceship, ship_pos: Point, base_pos: Point, moon_pos: Point
) -> bool:
    """Set the fuel to full when the ship is near the base or the moon."""
    if (
        _distance(ship_pos, base_pos) < BASE_REFUEL_RADIUS
        or _distance(ship_pos, moon_pos) < MOON_REFUEL_RADIUS
    ):
        ship.fuel = REFUELLED_FUEL
        return True
    return False


def camera_follow_and_zoom(camera: Camera, player_pos: Point, base_pos: Point) -> None:
    """Centre the camera on the player and ease the zoom out when far from base."""
    out_of_bounds = _distance(player_pos, base_pos) > CAMERA_BOUNDS_RADIUS
    target = ZOOM_FAR if out_of_bounds else ZOOM_NEAR
    camera.scale += (target - camera.scale) * ZOOM_SPEED * ZOOM_FRAME_TIME
    camera.x, camera.y = player_pos


def sun_proximity_damage(
    ship: Spaceship, ship_pos: Point, sun_pos: Point, dt: float
) -> bool:
    """Wear down the hull near the sun; return whether the warning is on."""
    if _distance(ship_pos, sun_pos) < SUN_DAMAGE_RADIUS:
        ship.hull = max(ship.hull - SUN_DAMAGE_PER_SECOND * dt, 0.0)
        return True
    return False