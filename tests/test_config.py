"""Settings loading and providers file location tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from weather_lookup.config import Settings, load_settings, resolve_providers_path
from weather_lookup.exceptions import ConfigError


def test_providers_path_prefers_home(tmp_path: Path) -> None:
    home = tmp_path / "home"
    assert resolve_providers_path(home, tmp_path / "tmp") == home / ".weather_providers.data"


def test_providers_path_falls_back_to_temp_dir(tmp_path: Path) -> None:
    temp_dir = tmp_path / "tmp"
    assert resolve_providers_path(None, temp_dir) == temp_dir / ".weather_providers.data"


def test_settings_override_providers_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv("WEATHER_PROVIDERS_FILE", str(target))
    assert load_settings().resolve_providers_path() == target


def test_settings_default_location_uses_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("WEATHER_PROVIDERS_FILE", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    settings = Settings(_env_file=None)
    assert settings.resolve_providers_path() == tmp_path / ".weather_providers.data"


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEATHER_LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [("WEATHER_LOG_LEVEL", "chatty"), ("WEATHER_TIMEOUT_SECONDS", "0")],
)
def test_invalid_settings_raise_config_error(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_settings()
