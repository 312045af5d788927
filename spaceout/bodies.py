"""The celestial bodies of the space scene: base planet, moon and sun."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from spaceout.spaceship import Transform

SUN_ROTATION_STEP = 0.01


class BodyKind(Enum):
    """Which body an entity is."""

    BASE = "base"
    MOON = "moon"
    SUN = "sun"


@dataclass
class CelestialBody:
    """A body drawn from an image at a placed, scaled transform."""

    kind: BodyKind
    transform: Transform
    image: str

    def position(self) -> tuple[float, float]:
        return self.transform.position()


def _uniform(scale: float) -> tuple[float, float, float]:
    return (scale, scale, scale)


def spawn_base() -> CelestialBody:
    """The home planet at the origin."""
    return CelestialBody(
        BodyKind.BASE,
        Transform(x=0.0, y=0.0, z=-1.0, scale=_uniform(6.0)),
        "earth.png",
    )


def spawn_moon() -> CelestialBody:
    """The moon, far out from the base."""
    return CelestialBody(
        BodyKind.MOON,
        Transform(x=4600.0, y=4400.0, z=-1.0, scale=_uniform(2.5)),
        "moon.png",
    )


def spawn_sun() -> CelestialBody:
    """The sun, further out still."""
    return CelestialBody(
        BodyKind.SUN,
        Transform(x=8000.0, y=8000.0, z=-1.0, scale=_uniform(8.0)),
        "sun.png",
    )


def rotate_sun(body: CelestialBody) -> None:
    """Turn the sun by one small step; only the sun spins."""
    if body.kind is not BodyKind.SUN:
        raise ValueError(f"only the sun rotates, not the {body.kind.value}")
    body.transform.rotate_z(SUN_ROTATION_STEP)