import pytest

from spaceout.state import DisplayQuality, GameState, Interaction, Settings, Volume


def test_game_starts_on_splash():
    assert GameState.default() is GameState.SPLASH


def test_game_state_members():
    members = list(GameState)
    assert [s.name for s in members] == ["SPLASH", "MENU", "SPACE", "DOCKED"]
    assert members.index(GameState.default()) == 0
    assert GameState(GameState.DOCKED.value) is GameState.DOCKED


def test_default_settings():
    settings = Settings()
    assert settings.display_quality is DisplayQuality.MEDIUM
    assert settings.volume == Volume(7)


def test_settings_are_independent():
    first = Settings()
    second = Settings()
    first.volume = Volume(3)
    assert second.volume == Volume(7)


def test_display_quality_text():
    assert [str(q) for q in DisplayQuality] == ["Low", "Medium", "High"]
    assert str(Settings().display_quality) == "Medium"
    assert str(DisplayQuality(DisplayQuality.HIGH.value)) == "High"


def test_volume_equality_and_ordering():
    assert Volume(4) == Volume(4)
    assert Volume(2) < Volume(5)
    assert str(Volume(9)) == "9"


def test_volume_rejects_negative():
    with pytest.raises(ValueError):
        Volume(-1)


def test_volume_rejects_non_integer():
    with pytest.raises(TypeError):
        Volume(1.5)


def test_interaction_members():
    assert {i.name for i in Interaction} == {"PRESSED", "HOVERED", "NONE"}
    assert Interaction(Interaction.PRESSED.value) is Interaction.PRESSED
    assert Interaction(Interaction.NONE.value) is Interaction.NONE