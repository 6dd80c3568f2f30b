from savereminder.config import ReminderSettings
from savereminder.core.events import (
    DOCUMENT_DIRTIED,
    DOCUMENT_SAVED,
    EDITOR_RELOADED,
    SETTINGS_CHANGED,
    EventBus,
)
from savereminder.core.host import DocumentRegistry
from savereminder.core.session import ReminderSession


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_session(**overrides):
    events = EventBus()
    documents = DocumentRegistry(events)
    documents.open("scene")
    clock = FakeClock()
    settings = ReminderSettings(**{"warning_time_seconds": 10, **overrides})
    session = ReminderSession(settings, documents, clock=clock)
    session.bind(events)
    return session, documents, events, clock


def test_warning_appears_after_threshold_and_clears_on_save():
    session, documents, _, clock = make_session()
    documents.mark_dirty("scene")
    assert session.anchor == 1000.0

    clock.now += 9
    assert session.tick() is None
    clock.now += 1
    banner = session.tick()
    assert banner is not None
    assert banner.message == "⚠ You haven't saved in 10s! ⚠"
    assert session.last_banner is banner

    documents.mark_saved("scene")
    assert session.anchor is None
    assert session.last_banner is None
    assert session.tick() is None


def test_lazy_anchor_on_first_tick_never_displays():
    session, documents, _, clock = make_session(warning_time_seconds=0)
    documents.get("scene").dirty = True
    assert session.tick() is None
    assert session.anchor == clock.now
    clock.now += 0.1
    assert session.tick() is not None


def test_save_keeps_anchor_while_other_document_dirty():
    session, documents, _, _ = make_session()
    documents.open("prefab")
    documents.mark_dirty("scene")
    documents.mark_dirty("prefab")
    anchor = session.anchor
    documents.mark_saved("scene")
    assert session.anchor == anchor


def test_reload_resets_only_when_clean():
    session, documents, events, clock = make_session()
    documents.mark_dirty("scene")
    events.emit(EDITOR_RELOADED)
    assert session.anchor == 1000.0
    documents.get("scene").dirty = False
    events.emit(EDITOR_RELOADED)
    assert session.anchor is None


def test_simulating_suppresses_display():
    session, documents, _, clock = make_session(warning_time_seconds=0)
    documents.mark_dirty("scene")
    documents.set_simulating(True)
    clock.now += 60
    assert session.tick() is None
    assert session.anchor == 1000.0
    documents.set_simulating(False)
    assert session.tick() is not None


def test_disabling_clears_anchor():
    session, documents, events, _ = make_session()
    documents.mark_dirty("scene")
    events.emit(SETTINGS_CHANGED, ReminderSettings(enabled=False))
    assert session.anchor is None
    assert session.tick() is None
    assert session.anchor is None


def test_transition_table_names():
    session, *_ = make_session()
    assert set(session.transitions) == {DOCUMENT_SAVED, DOCUMENT_DIRTIED, EDITOR_RELOADED}


def test_unbind_detaches_handlers():
    session, documents, events, _ = make_session()
    session.unbind(events)
    documents.mark_dirty("scene")
    assert session.anchor is None


def test_undo_to_saved_text_stops_timer():
    session, documents, _, clock = make_session(warning_time_seconds=0)
    documents.mark_dirty("scene")
    clock.now += 5
    assert session.tick() is not None
    documents.mark_clean("scene")
    assert session.anchor is None
    assert session.tick() is None
