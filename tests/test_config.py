import pytest
from pydantic import ValidationError

from savereminder.config import AppSettings, ReminderSettings, load_settings


def test_load_settings_creates_paths(tmp_path, monkeypatch):
    monkeypatch.setenv("SAVE_REMINDER_HOME", str(tmp_path / "home"))
    settings = load_settings(tmp_path / "missing.env")
    assert isinstance(settings, AppSettings)
    for required in (settings.paths.base_dir, settings.paths.logs_dir, settings.paths.config_dir):
        assert required.exists()


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("SAVE_REMINDER_HOME", str(tmp_path))
    monkeypatch.setenv("SAVE_REMINDER_BACKEND", "Memory")
    monkeypatch.setenv("SAVE_REMINDER_TICK_MS", "250")
    settings = load_settings(tmp_path / "missing.env")
    assert settings.ui.backend == "memory"
    assert settings.ui.tick_ms == 250


def test_reminder_defaults():
    settings = ReminderSettings()
    assert settings.enabled is True
    assert settings.warning_time_seconds == 600
    assert settings.flash is False
    assert settings.flash_speed == 2.0
    assert settings.last_flash_speed == 2.0
    assert settings.text_color == "FF0000FF"
    assert settings.font_size == 20


def test_text_color_is_normalised():
    assert ReminderSettings(text_color="#00ff00").text_color == "00FF00FF"


def test_font_size_bounds():
    with pytest.raises(ValidationError):
        ReminderSettings(font_size=60)


def test_first_flash_enable_uses_default_speed():
    settings = ReminderSettings(flash_speed=0.0, last_flash_speed=0.0)
    enabled = settings.with_flash(True)
    assert enabled.flash is True
    assert enabled.flash_speed == 2.0


def test_reenabling_flash_restores_last_speed():
    settings = ReminderSettings().with_flash(True).model_copy(update={"flash_speed": 3.5})
    disabled = settings.with_flash(False)
    assert disabled.flash_speed == 0.0
    assert disabled.last_flash_speed == 3.5
    assert disabled.with_flash(True).flash_speed == 3.5
