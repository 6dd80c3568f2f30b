"""Key/value preference storage for the reminder settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Protocol

import portalocker

from savereminder.config import (
    DEFAULT_FLASH_SPEED,
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    ReminderSettings,
)
from savereminder.core.color import RED, RGBA
from savereminder.logging import get_logger

PREF_PREFIX = "SaveReminder_"


class PreferenceBackend(Protocol):
    def get_bool(self, key: str, default: bool) -> bool: ...

    def get_int(self, key: str, default: int) -> int: ...

    def get_float(self, key: str, default: float) -> float: ...

    def get_string(self, key: str, default: str) -> str: ...

    def set_bool(self, key: str, value: bool) -> None: ...

    def set_int(self, key: str, value: int) -> None: ...

    def set_float(self, key: str, value: float) -> None: ...

    def set_string(self, key: str, value: str) -> None: ...

    def sync(self) -> None: ...

    def reload(self) -> None: ...


class MemoryPreferences:
    """Dict-backed preferences; values of the wrong type read as the default."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values: dict[str, Any] = dict(values or {})

    def get_bool(self, key: str, default: bool) -> bool:
        value = self.values.get(key)
        return value if isinstance(value, bool) else default

    def get_int(self, key: str, default: int) -> int:
        value = self.values.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def get_float(self, key: str, default: float) -> float:
        value = self.values.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return default

    def get_string(self, key: str, default: str) -> str:
        value = self.values.get(key)
        return value if isinstance(value, str) else default

    def set_bool(self, key: str, value: bool) -> None:
        self._store(key, bool(value))

    def set_int(self, key: str, value: int) -> None:
        self._store(key, int(value))

    def set_float(self, key: str, value: float) -> None:
        self._store(key, float(value))

    def set_string(self, key: str, value: str) -> None:
        self._store(key, str(value))

    def _store(self, key: str, value: Any) -> None:
        self.values[key] = value

    def sync(self) -> None:
        return None

    def reload(self) -> None:
        return None


class JsonPreferences(MemoryPreferences):
    """Preferences persisted as a flat JSON object.

    Reads and writes hold a lock on a sidecar ``.lock`` file so that several
    tools sharing the same file do not interleave writes. Only keys set
    through this instance are written back; everything else on disk wins.
    """

    def __init__(self, path: Path, timeout: float = 5.0) -> None:
        self.path = path
        self.lockfile = path.with_name(path.name + ".lock")
        self.timeout = timeout
        self.logger = get_logger("prefs")
        self._pending: set[str] = set()
        super().__init__(self._read())

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with portalocker.Lock(str(self.lockfile), timeout=self.timeout):
                data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError, portalocker.exceptions.LockException) as e:
            self.logger.warning("Ignoring unreadable preferences {}: {}", self.path, e)
            return {}
        if not isinstance(data, dict):
            self.logger.warning("Ignoring preferences {}: not a JSON object", self.path)
            return {}
        return data

    def _store(self, key: str, value: Any) -> None:
        super()._store(key, value)
        self._pending.add(key)

    def _unsynced(self) -> dict[str, Any]:
        return {key: self.values[key] for key in self._pending}

    def reload(self) -> None:
        self.values = {**self._read(), **self._unsynced()}

    def sync(self) -> None:
        if not self._pending:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with portalocker.Lock(str(self.lockfile), timeout=self.timeout):
                on_disk = self._read_unlocked()
                on_disk.update(self._unsynced())
                tmp = self.path.with_name(self.path.name + ".tmp")
                tmp.write_text(json.dumps(on_disk, indent=2, sort_keys=True), encoding="utf-8")
                tmp.replace(self.path)
        except (OSError, portalocker.exceptions.LockException) as e:
            # Pending keys stay queued for the next sync.
            self.logger.warning("Could not write preferences {}: {}", self.path, e)
            return
        self._pending.clear()
        self.values = on_disk

    def _read_unlocked(self) -> dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}


def _clamp_int(value: int, low: int, high: int | None = None) -> int:
    value = max(low, value)
    return min(high, value) if high is not None else value


def load_reminder_settings(
    prefs: PreferenceBackend, prefix: str = PREF_PREFIX
) -> ReminderSettings:
    """Read every reminder key, falling back to defaults for missing or bad values."""

    color = RGBA.parse_hex_or(prefs.get_string(prefix + "TextColor", RED.to_hex()), RED)
    return ReminderSettings(
        enabled=prefs.get_bool(prefix + "Enabled", True),
        warning_time_seconds=_clamp_int(prefs.get_int(prefix + "WarningTime", 600), 0),
        flash=prefs.get_bool(prefix + "Flash", False),
        flash_speed=max(0.0, prefs.get_float(prefix + "FlashSpeed", DEFAULT_FLASH_SPEED)),
        last_flash_speed=max(
            0.0, prefs.get_float(prefix + "LastFlashSpeed", DEFAULT_FLASH_SPEED)
        ),
        text_color=color.to_hex(),
        font_size=_clamp_int(
            prefs.get_int(prefix + "FontSize", 20), MIN_FONT_SIZE, MAX_FONT_SIZE
        ),
    )


def save_reminder_settings(
    prefs: PreferenceBackend, settings: ReminderSettings, prefix: str = PREF_PREFIX
) -> None:
    prefs.set_bool(prefix + "Enabled", settings.enabled)
    prefs.set_int(prefix + "WarningTime", settings.warning_time_seconds)
    prefs.set_bool(prefix + "Flash", settings.flash)
    prefs.set_float(prefix + "FlashSpeed", settings.flash_speed)
    prefs.set_float(prefix + "LastFlashSpeed", settings.last_flash_speed)
    prefs.set_string(prefix + "TextColor", settings.text_color)
    prefs.set_int(prefix + "FontSize", settings.font_size)
    prefs.sync()
