from __future__ import annotations

import pytest
from pydantic import ValidationError

from distancetable.config.settings import Settings, get_settings


@pytest.fixture
def fresh_settings():
    # `get_settings` is cached; clear it around tests that change the environment.
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


def test_packaged_defaults_match_builtin_constants(fresh_settings, monkeypatch):
    monkeypatch.delenv("DISTANCETABLE_CONFIG_PATH", raising=False)
    settings = fresh_settings()

    assert settings.origin.name == "Raleigh"
    assert (settings.origin.lat, settings.origin.lon) == (35.78, -78.64)
    assert settings.geo.earth_radius_miles == 3959
    assert settings.grid.latitude.model_dump() == {"minimum": 30, "maximum": 50, "increment": 10}
    assert settings.grid.longitude.model_dump() == {"minimum": -120, "maximum": -70, "increment": 5}
    assert settings.model_dump()["grid"] == Settings().model_dump()["grid"]


def test_config_path_and_log_level_env_overrides(fresh_settings, monkeypatch, tmp_path):
    cfg = tmp_path / "custom.yaml"
    cfg.write_text(
        "origin:\n  name: Durham\n  lat: 35.99\n  lon: -78.9\n", encoding="utf-8"
    )
    monkeypatch.setenv("DISTANCETABLE_CONFIG_PATH", str(cfg))
    monkeypatch.setenv("DISTANCETABLE_LOG_LEVEL", "debug")

    settings = fresh_settings()

    assert settings.origin.name == "Durham"
    assert settings.app.log_level == "debug"
    # Unspecified sections fall back to model defaults.
    assert settings.grid.longitude.increment == 5


def test_config_file_must_be_a_mapping(fresh_settings, monkeypatch, tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("DISTANCETABLE_CONFIG_PATH", str(cfg))

    with pytest.raises(ValueError, match="expected a mapping"):
        fresh_settings()


@pytest.mark.parametrize("increment", [0, -10])
def test_non_positive_increment_is_rejected(increment):
    with pytest.raises(ValidationError):
        Settings.model_validate({"grid": {"latitude": {"increment": increment}}})


def test_inverted_bounds_are_rejected():
    with pytest.raises(ValidationError, match="must not exceed maximum"):
        Settings.model_validate({"grid": {"longitude": {"minimum": -70, "maximum": -120}}})


def test_out_of_range_origin_is_rejected():
    with pytest.raises(ValidationError):
        Settings.model_validate({"origin": {"lat": 91}})
