import pytest

from spaceout.splash import SPLASH_DURATION, SplashScreen
from spaceout.state import GameState


def test_default_duration_matches_constant():
    splash = SplashScreen()
    assert splash.duration == SPLASH_DURATION
    assert splash.text == "spaceout"
    assert splash.icon == "branding/icon.png"


def test_not_finished_before_duration():
    splash = SplashScreen()
    assert splash.tick(SPLASH_DURATION / 2) is None
    assert splash.finished() is False


def test_finishes_and_requests_menu():
    splash = SplashScreen()
    splash.tick(SPLASH_DURATION / 2)
    assert splash.tick(SPLASH_DURATION / 2) is GameState.MENU
    assert splash.finished() is True


def test_stays_finished_after_more_ticks():
    splash = SplashScreen()
    splash.tick(SPLASH_DURATION * 3)
    assert splash.elapsed == SPLASH_DURATION
    assert splash.tick(0.1) is GameState.MENU


def test_zero_tick_does_not_advance():
    splash = SplashScreen()
    assert splash.tick(0.0) is None
    assert splash.elapsed == 0.0


def test_negative_tick_rejected():
    with pytest.raises(ValueError):
        SplashScreen().tick(-0.1)


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        SplashScreen(duration=-1.0)