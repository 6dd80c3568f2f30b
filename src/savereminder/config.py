"""Application configuration models and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from savereminder.core.color import RGBA

DEFAULT_FLASH_SPEED = 2.0
MIN_FONT_SIZE = 10
MAX_FONT_SIZE = 50


class AppPaths(BaseModel):
    """Resolved directories for save-reminder runtime assets."""

    base_dir: Path = Field(
        default_factory=lambda: Path(
            os.getenv("SAVE_REMINDER_HOME", Path.home() / ".save-reminder")
        )
    )

    @property
    def config_dir(self) -> Path:
        return self.base_dir / "config"

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "logs"

    @property
    def preferences_file(self) -> Path:
        return self.config_dir / "preferences.json"

    def ensure(self) -> None:
        for path in (self.base_dir, self.config_dir, self.logs_dir):
            path.mkdir(parents=True, exist_ok=True)


class UISettings(BaseModel):
    tick_ms: int = Field(default=100, ge=16, le=2000)
    backend: Literal["json", "qt", "memory"] = "json"
    log_level: str = "INFO"


class ReminderSettings(BaseModel):
    """The seven persisted reminder knobs.

    ``text_color`` is kept as an 8-digit RGBA hex string; use
    :meth:`color` to get the parsed value.
    """

    enabled: bool = True
    warning_time_seconds: int = Field(default=600, ge=0)
    flash: bool = False
    flash_speed: float = Field(default=DEFAULT_FLASH_SPEED, ge=0.0)
    last_flash_speed: float = Field(default=DEFAULT_FLASH_SPEED, ge=0.0)
    text_color: str = "FF0000FF"
    font_size: int = Field(default=20, ge=MIN_FONT_SIZE, le=MAX_FONT_SIZE)

    @field_validator("text_color")
    @classmethod
    def _normalise_color(cls, value: str) -> str:
        return RGBA.parse_hex(value).to_hex()

    def color(self) -> RGBA:
        return RGBA.parse_hex(self.text_color)

    def with_flash(self, enabled: bool) -> ReminderSettings:
        """Toggle flashing, remembering the speed across off/on cycles."""

        speed = self.flash_speed
        last = self.last_flash_speed
        if enabled:
            if speed <= 0.0:
                speed = last if last > 0.0 else DEFAULT_FLASH_SPEED
        else:
            if speed > 0.0:
                last = speed
            speed = 0.0
        return self.model_copy(
            update={"flash": enabled, "flash_speed": speed, "last_flash_speed": last}
        )


class AppSettings(BaseModel):
    app_name: str = "save-reminder"
    paths: AppPaths = Field(default_factory=AppPaths)
    ui: UISettings = Field(default_factory=UISettings)


def _maybe_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def load_settings(env_path: Path | None = None) -> AppSettings:
    """Load application settings from environment variables and defaults."""

    env_file = env_path or Path(".env")
    if env_file.exists():
        load_dotenv(env_file)

    overrides: dict[str, Any] = {}

    if backend := os.getenv("SAVE_REMINDER_BACKEND"):
        overrides.setdefault("ui", {})["backend"] = backend.lower()

    if (tick_ms := _maybe_int(os.getenv("SAVE_REMINDER_TICK_MS"))) is not None:
        overrides.setdefault("ui", {})["tick_ms"] = tick_ms

    if level := os.getenv("SAVE_REMINDER_LOG_LEVEL"):
        overrides.setdefault("ui", {})["log_level"] = level.upper()

    settings = AppSettings(**overrides)
    settings.paths.ensure()
    return settings
