"""QSettings-backed preference storage."""

from __future__ import annotations

from PySide6 import QtCore


class QtPreferences:
    """Store reminder keys in the platform's native Qt settings store."""

    def __init__(self, application: str, organization: str = "save-reminder") -> None:
        self._settings = QtCore.QSettings(organization, application)

    def _get(self, key: str, default, kind):
        if not self._settings.contains(key):
            return default
        try:
            value = self._settings.value(key, default, type=kind)
        except (TypeError, ValueError):
            return default
        return default if value is None else value

    def get_bool(self, key: str, default: bool) -> bool:
        return bool(self._get(key, default, bool))

    def get_int(self, key: str, default: int) -> int:
        return int(self._get(key, default, int))

    def get_float(self, key: str, default: float) -> float:
        return float(self._get(key, default, float))

    def get_string(self, key: str, default: str) -> str:
        return str(self._get(key, default, str))

    def set_bool(self, key: str, value: bool) -> None:
        self._settings.setValue(key, bool(value))

    def set_int(self, key: str, value: int) -> None:
        self._settings.setValue(key, int(value))

    def set_float(self, key: str, value: float) -> None:
        self._settings.setValue(key, float(value))

    def set_string(self, key: str, value: str) -> None:
        self._settings.setValue(key, str(value))

    def sync(self) -> None:
        self._settings.sync()

    def reload(self) -> None:
        self._settings.sync()
