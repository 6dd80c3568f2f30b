"""Pub/sub bus carrying editor lifecycle events."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from typing import Any

EventHandler = Callable[[Any], None]

DOCUMENT_SAVED = "document.saved"
DOCUMENT_DIRTIED = "document.dirtied"
EDITOR_RELOADED = "editor.reloaded"
SETTINGS_CHANGED = "settings.changed"


class EventBus:
    """Minimal event bus for main-thread editor callbacks."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, topic: str, handler: EventHandler) -> None:
        if handler not in self._subscribers[topic]:
            self._subscribers[topic].append(handler)

    def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        if handler in self._subscribers[topic]:
            self._subscribers[topic].remove(handler)

    def emit(self, topic: str, payload: Any = None) -> None:
        for handler in list(self._subscribers.get(topic, ())):
            handler(payload)
