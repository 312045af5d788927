import pytest

from spaceout.bodies import (
    BodyKind,
    rotate_sun,
    spawn_base,
    spawn_moon,
    spawn_sun,
)


def test_base_placement():
    base = spawn_base()
    assert base.kind is BodyKind.BASE
    assert base.image == "earth.png"
    assert base.position() == (0.0, 0.0)
    assert base.transform.z == -1.0
    assert base.transform.scale == (6.0, 6.0, 6.0)


def test_moon_placement():
    moon = spawn_moon()
    assert moon.kind is BodyKind.MOON
    assert moon.image == "moon.png"
    assert moon.position() == (4600.0, 4400.0)
    assert moon.transform.scale == (2.5, 2.5, 2.5)


def test_sun_placement():
    sun = spawn_sun()
    assert sun.kind is BodyKind.SUN
    assert sun.image == "sun.png"
    assert sun.position() == (8000.0, 8000.0)
    assert sun.transform.scale == (8.0, 8.0, 8.0)


def test_spawns_are_independent():
    first = spawn_sun()
    second = spawn_sun()
    first.transform.x = 1.0
    assert second.transform.x == 8000.0


def test_rotate_sun_steps():
    sun = spawn_sun()
    rotate_sun(sun)
    assert sun.transform.rotation == pytest.approx(0.01)
    rotate_sun(sun)
    assert sun.transform.rotation == pytest.approx(0.02)
    assert sun.position() == (8000.0, 8000.0)


@pytest.mark.parametrize("factory", [spawn_base, spawn_moon])
def test_rotate_rejects_other_bodies(factory):
    body = factory()
    with pytest.raises(ValueError):
        rotate_sun(body)
    assert body.transform.rotation == 0.0