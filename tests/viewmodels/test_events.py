"""Tests for sport_tracker/viewmodels/events.py — event types, toasts and observers."""

from unittest.mock import MagicMock

from sport_tracker.viewmodels.events import (
    EntryEvent,
    EventPayload,
    Observable,
    Toast,
    ToastType,
)


# ── EntryEvent enum ────────────────────────────────────────────────────

class TestEntryEvent:
    def test_events_are_unique(self):
        values = [e.value for e in EntryEvent]
        assert len(values) == len(set(values))

    def test_entry_events_defined(self):
        names = {e.name for e in EntryEvent}
        assert {"ROLL_ADDED", "STRIKE", "SPARE", "GAME_COMPLETED", "VALIDATION_FAILED"} <= names


# ── Toast ──────────────────────────────────────────────────────────────

class TestToast:
    def test_constructors(self):
        assert Toast.success("ok") == Toast(ToastType.SUCCESS, "ok")
        assert Toast.error("bad").type is ToastType.ERROR
        assert Toast.warning("hmm").type is ToastType.WARNING

    def test_type_values(self):
        assert ToastType.ERROR.value == "error"


# ── EventPayload ───────────────────────────────────────────────────────

class TestEventPayload:
    def test_minimal_payload(self):
        p = EventPayload(event=EntryEvent.ROLL_ADDED)
        assert p.snapshot is None
        assert p.toast is None
        assert p.data == {}

    def test_data_not_shared(self):
        a = EventPayload(event=EntryEvent.ROLL_ADDED)
        b = EventPayload(event=EntryEvent.ROLL_ADDED)
        a.data["x"] = 1
        assert b.data == {}


# ── Observable ─────────────────────────────────────────────────────────

class TestObservable:
    def test_notifies_in_registration_order(self):
        observable = Observable()
        calls = []
        observable.subscribe(lambda p: calls.append(("first", p.event)))
        observable.subscribe(lambda p: calls.append(("second", p.event)))

        observable._notify(EventPayload(event=EntryEvent.STRIKE))

        assert calls == [("first", EntryEvent.STRIKE), ("second", EntryEvent.STRIKE)]

    def test_unsubscribe_twice_is_harmless(self):
        observable = Observable()
        unsubscribe = observable.subscribe(lambda p: None)
        unsubscribe()
        unsubscribe()

    def test_observer_error_is_logged_not_raised(self, caplog):
        observable = Observable()
        observable.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        after = MagicMock()
        observable.subscribe(after)

        observable._notify(EventPayload(event=EntryEvent.SPARE))

        after.assert_called_once()
        assert "Observer failed handling SPARE" in caplog.text
