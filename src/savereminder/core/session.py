"""Per-editor reminder session: settings, anchor and the transition table."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from savereminder.config import ReminderSettings
from savereminder.core.events import (
    DOCUMENT_DIRTIED,
    DOCUMENT_SAVED,
    EDITOR_RELOADED,
    SETTINGS_CHANGED,
    EventBus,
)
from savereminder.core.host import EditorHost
from savereminder.core.timer import Banner, TickResult, TimerState, evaluate, render
from savereminder.logging import get_logger

Clock = Callable[[], float]


class ReminderSession:
    """Owns the dirty timer for one editor.

    ``tick`` is the only place the anchor advances during redraws; every
    viewport paints from ``last_banner`` instead of re-evaluating.
    """

    def __init__(
        self,
        settings: ReminderSettings,
        host: EditorHost,
        clock: Clock = time.monotonic,
    ) -> None:
        self.settings = settings
        self.host = host
        self.clock = clock
        self.state = TimerState()
        self.last_result = TickResult(anchor=None, display=False)
        self.last_banner: Banner | None = None
        self.logger = get_logger("session")
        self.transitions: dict[str, Callable[[Any], None]] = {
            DOCUMENT_SAVED: self.on_document_saved,
            DOCUMENT_DIRTIED: self.on_document_dirtied,
            EDITOR_RELOADED: self.on_reloaded,
        }

    def bind(self, events: EventBus) -> None:
        for topic, handler in self.transitions.items():
            events.subscribe(topic, handler)
        events.subscribe(SETTINGS_CHANGED, self.apply_settings)

    def unbind(self, events: EventBus) -> None:
        for topic, handler in self.transitions.items():
            events.unsubscribe(topic, handler)
        events.unsubscribe(SETTINGS_CHANGED, self.apply_settings)

    @property
    def anchor(self) -> float | None:
        return self.state.anchor

    def tick(self) -> Banner | None:
        was_counting = self.state.counting
        result = evaluate(
            now=self.clock(),
            anchor=self.state.anchor,
            dirty=self.host.any_document_dirty(),
            settings=self.settings,
            simulating=self.host.is_simulating(),
        )
        self.state.anchor = result.anchor
        if was_counting != self.state.counting:
            self.logger.debug("Dirty timer {}", "started" if self.state.counting else "cleared")
        self.last_result = result
        self.last_banner = render(result, self.settings)
        return self.last_banner

    def _reset_if_clean(self) -> None:
        if not self.host.any_document_dirty():
            self.state.anchor = None
            self.last_banner = None

    def on_document_saved(self, _payload: Any = None) -> None:
        self._reset_if_clean()

    def on_reloaded(self, _payload: Any = None) -> None:
        self._reset_if_clean()

    def on_document_dirtied(self, _payload: Any = None) -> None:
        if self.state.anchor is None and self.host.any_document_dirty():
            self.state.anchor = self.clock()

    def apply_settings(self, settings: ReminderSettings) -> None:
        self.settings = settings
        if not settings.enabled:
            self.state.anchor = None
            self.last_banner = None
        self.logger.debug(
            "Save reminder {}", "enabled" if settings.enabled else "disabled"
        )
