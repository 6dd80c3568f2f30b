"""Save-reminder composition root."""

from __future__ import annotations

from dataclasses import dataclass

from savereminder.config import AppSettings, ReminderSettings
from savereminder.core.events import SETTINGS_CHANGED, EventBus
from savereminder.core.host import DocumentRegistry
from savereminder.core.prefs import (
    JsonPreferences,
    MemoryPreferences,
    PreferenceBackend,
    load_reminder_settings,
    save_reminder_settings,
)
from savereminder.core.session import ReminderSession
from savereminder.logging import get_logger


@dataclass(slots=True)
class ReminderContext:
    settings: AppSettings
    events: EventBus
    documents: DocumentRegistry
    prefs: PreferenceBackend
    session: ReminderSession

    def start(self) -> None:
        self.session.bind(self.events)

    def stop(self) -> None:
        save_reminder_settings(self.prefs, self.session.settings)
        self.session.unbind(self.events)

    def load_reminder(self) -> ReminderSettings:
        self.prefs.reload()
        return load_reminder_settings(self.prefs)

    def update_reminder(self, reminder: ReminderSettings) -> None:
        """Persist ``reminder`` and push it to every listener."""

        save_reminder_settings(self.prefs, reminder)
        self.events.emit(SETTINGS_CHANGED, reminder)


def open_preferences(settings: AppSettings) -> PreferenceBackend:
    backend = settings.ui.backend
    if backend == "memory":
        return MemoryPreferences()
    if backend == "qt":
        from savereminder.ui.qt_prefs import QtPreferences

        return QtPreferences(settings.app_name)
    return JsonPreferences(settings.paths.preferences_file)


def build_context(
    settings: AppSettings, prefs: PreferenceBackend | None = None
) -> ReminderContext:
    events = EventBus()
    documents = DocumentRegistry(events)
    prefs = prefs if prefs is not None else open_preferences(settings)
    session = ReminderSession(load_reminder_settings(prefs), documents)

    logger = get_logger("bootstrap")
    logger.info("Save reminder context ready ({} preferences)", settings.ui.backend)

    return ReminderContext(
        settings=settings,
        events=events,
        documents=documents,
        prefs=prefs,
        session=session,
    )
