"""The player's spaceship: its state, spawning and keyboard-driven movement."""

from __future__ import annotations

import math
from collections.abc import Collection
from dataclasses import dataclass, field
from enum import Enum

ROTATION_SPEED = math.pi  # radians per second
ACCELERATION = 200.0
FUEL_BURN_RATE = 0.25
FUEL_BURN_REFERENCE_THROTTLE = 800.0
SPRITE_IMAGE = "s2.png"
SPRITE_SCALE = 128.0 / 500.0


@dataclass
class Transform:
    """Position, rotation about the z axis (radians) and scale of an object."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotation: float = 0.0
    scale: tuple[float, float, float] = field(default=(1.0, 1.0, 1.0))

    def forward(self) -> tuple[float, float]:
        """The unit vector the object faces: its local +y axis."""
        return (-math.sin(self.rotation), math.cos(self.rotation))

    def rotate_z(self, angle: float) -> None:
        """Turn the object by ``angle`` radians about the z axis."""
        self.rotation += angle

    def position(self) -> tuple[float, float]:
        """The object's position in the plane."""
        return (self.x, self.y)


@dataclass
class Spaceship:
    """Flight and status values of the player's ship."""

    throttle: float = 0.0
    fuel: float = 150.0
    hull: float = 1.0
    shields: float = 1.0
    weapons: int = 1


class Key(Enum):
    """Keys that steer the ship."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def spawn_spaceship() -> tuple[Transform, Spaceship]:
    """Create the ship at the origin, turned half a revolution."""
    transform = Transform(
        x=0.0,
        y=0.0,
        z=0.0,
        rotation=math.pi,
        scale=(SPRITE_SCALE, SPRITE_SCALE, 1.0),
    )
    return transform, Spaceship()


def move_spaceship(
    transform: Transform, ship: Spaceship, pressed: Collection[Key], dt: float
) -> None:
    """Apply one frame of steering, throttle, fuel burn and motion."""
    rotation_delta = 0.0
    speed_delta = 0.0
    burning_fuel = False
    if Key.LEFT in pressed:
        rotation_delta += 1.0
    if Key.RIGHT in pressed:
        rotation_delta -= 1.0
    if Key.UP in pressed and ship.fuel > 0.0:
        speed_delta += 1.0
        burning_fuel = True
    if Key.DOWN in pressed:
        speed_delta -= 1.0

    transform.rotate_z(rotation_delta * ROTATION_SPEED * dt)

    if speed_delta > 0.0 and ship.fuel > 0.0:
        ship.throttle += speed_delta * ACCELERATION * dt
    elif speed_delta < 0.0:
        ship.throttle = max(ship.throttle + speed_delta * ACCELERATION * dt, 0.0)

    if burning_fuel and ship.throttle > 0.0:
        burn = FUEL_BURN_RATE * ship.throttle / FUEL_BURN_REFERENCE_THROTTLE * dt
        ship.fuel = max(ship.fuel - burn, 0.0)

    fx, fy = transform.forward()
    transform.x += fx * ship.throttle * dt
    transform.y += fy * ship.throttle * dt