"""Tests for the merge, cancel and filter decisions of the coalescer."""

from __future__ import annotations

import copy
import threading
import time
from contextlib import contextmanager
from dataclasses import replace
from datetime import timedelta

import pytest

from notifyhub.application.use_cases.notifications import (
    KeyedLock,
    NotificationEventCoalescer,
)
from notifyhub.domain.entities import (
    EventType,
    NotificationEvent,
    Project,
    ResourceType,
)
from notifyhub.domain.exceptions import ResourceNotFoundError

PROJECT = Project(id=7, name="hive")
ISSUE = (ResourceType.ISSUE_POST, "42")
OTHER_ISSUE = (ResourceType.ISSUE_POST, "43")


class _InMemoryEventStore:
    def __init__(self, *, lookup_delay: float = 0.0) -> None:
        self.events: dict[int, NotificationEvent] = {}
        self.deleted: list[int] = []
        self.commits = 0
        self.rollbacks = 0
        self._next_id = 1
        self._lookup_delay = lookup_delay

    @contextmanager
    def atomic(self):
        snapshot = copy.deepcopy(self.events)
        next_id = self._next_id
        try:
            yield
        except Exception:
            self.events = snapshot
            self._next_id = next_id
            self.rollbacks += 1
            raise
        self.commits += 1

    def find_recent_sibling(self, resource_type, resource_id, *, after):
        matches = [
            event
            for event in self.events.values()
            if event.resource_type == resource_type
            and event.resource_id == resource_id
            and event.created > after
        ]
        if self._lookup_delay:
            time.sleep(self._lookup_delay)
        if not matches:
            return None
        return copy.deepcopy(max(matches, key=lambda event: event.id))

    def delete(self, event_id):
        del self.events[event_id]
        self.deleted.append(event_id)

    def save(self, event):
        stored = replace(event, id=self._next_id, receivers=set(event.receivers))
        self._next_id += 1
        self.events[stored.id] = stored
        return copy.deepcopy(stored)

    def delete_all_for(self, resource_type, resource_id):
        doomed = [
            event_id
            for event_id, event in self.events.items()
            if (event.resource_type, event.resource_id) == (resource_type, resource_id)
        ]
        for event_id in doomed:
            del self.events[event_id]
        return len(doomed)


class _StubResourceLocator:
    def __init__(self, resources):
        self._resources = dict(resources)

    def resolve(self, resource_type, resource_id):
        return self._resources.get((resource_type, resource_id))


class _StubPreferenceOracle:
    def __init__(self, disabled=()):
        self._disabled = set(disabled)
        self.calls: list[tuple[int, int, EventType]] = []

    def is_enabled(self, user_id, project, event_type):
        self.calls.append((user_id, project.id, event_type))
        return (user_id, event_type) not in self._disabled


def _event(
    old_value,
    new_value,
    *,
    event_type=EventType.ISSUE_STATE_CHANGED,
    sender_id=1,
    receivers=(101, 102, 103),
    resource=ISSUE,
):
    return NotificationEvent(
        id=None,
        event_type=event_type,
        resource_type=resource[0],
        resource_id=resource[1],
        sender_id=sender_id,
        old_value=old_value,
        new_value=new_value,
        receivers=set(receivers),
    )


@pytest.fixture
def store():
    return _InMemoryEventStore()


@pytest.fixture
def preferences():
    return _StubPreferenceOracle()


@pytest.fixture
def coalescer(store, preferences, clock):
    return NotificationEventCoalescer(
        store,
        _StubResourceLocator({ISSUE: PROJECT, OTHER_ISSUE: PROJECT}),
        preferences,
        draft_window=timedelta(seconds=30),
        clock=clock,
    )


def test_standalone_event_is_stored_with_mail_placeholder(coalescer, store, clock):
    saved = coalescer.submit(_event("open", "closed"))

    assert saved is not None
    assert saved.id in store.events
    assert saved.created == clock.now
    assert saved.notification_mail is not None
    assert saved.receivers == {101, 102, 103}


def test_round_trip_within_window_cancels_both_events(coalescer, store, clock):
    first = coalescer.submit(_event("open", "closed"))
    clock.advance(10)

    second = coalescer.submit(_event("closed", "open"))

    assert second is None
    assert store.events == {}
    assert store.deleted == [first.id]


def test_chained_changes_merge_into_one_event(coalescer, store, clock):
    first = coalescer.submit(_event("backlog", "closed"))
    clock.advance(10)

    merged = coalescer.submit(_event("closed", "open"))

    assert merged is not None
    assert merged.id != first.id
    assert (merged.old_value, merged.new_value) == ("backlog", "open")
    assert list(store.events) == [merged.id]


def test_three_step_chain_keeps_the_first_old_value(coalescer, store, clock):
    coalescer.submit(_event("a", "b"))
    clock.advance(5)
    coalescer.submit(_event("b", "c"))
    clock.advance(5)
    last = coalescer.submit(_event("c", "d"))

    assert (last.old_value, last.new_value) == ("a", "d")
    assert len(store.events) == 1


@pytest.mark.parametrize(
    "overrides",
    [
        {"event_type": EventType.ISSUE_ASSIGNEE_CHANGED},
        {"sender_id": 2},
    ],
    ids=["different-category", "different-sender"],
)
def test_events_with_different_category_or_sender_never_merge(
    coalescer, store, clock, overrides
):
    coalescer.submit(_event("open", "closed"))
    clock.advance(1)

    second = coalescer.submit(_event("closed", "open", **overrides))

    assert second is not None
    assert second.old_value == "closed"
    assert len(store.events) == 2
    assert store.deleted == []


def test_events_after_the_window_never_merge(coalescer, store, clock):
    coalescer.submit(_event("open", "closed"))
    clock.advance(31)

    second = coalescer.submit(_event("closed", "open"))

    assert second is not None
    assert len(store.events) == 2


def test_window_start_is_exclusive(coalescer, store, clock):
    coalescer.submit(_event("open", "closed"))
    clock.advance(30)

    coalescer.submit(_event("closed", "open"))

    assert len(store.events) == 2


def test_only_the_most_recent_event_on_the_resource_is_considered(
    coalescer, store, clock
):
    coalescer.submit(_event("open", "closed"))
    clock.advance(1)
    comment = coalescer.submit(
        _event(None, "Looks done", event_type=EventType.NEW_COMMENT)
    )
    clock.advance(1)

    reopened = coalescer.submit(_event("closed", "open"))

    assert reopened is not None
    assert reopened.old_value == "closed"
    assert comment.id in store.events
    assert len(store.events) == 3


def test_events_on_other_resources_do_not_merge(coalescer, store, clock):
    coalescer.submit(_event("open", "closed"))
    clock.advance(1)

    other = coalescer.submit(
        _event("closed", "open", resource=OTHER_ISSUE)
    )

    assert other is not None
    assert len(store.events) == 2


def test_receivers_are_filtered_by_preferences(store, clock):
    preferences = _StubPreferenceOracle(
        disabled={(102, EventType.ISSUE_STATE_CHANGED)}
    )
    coalescer = NotificationEventCoalescer(
        store,
        _StubResourceLocator({ISSUE: PROJECT}),
        preferences,
        draft_window=timedelta(seconds=30),
        clock=clock,
    )

    saved = coalescer.submit(_event("open", "closed"))

    assert saved.receivers == {101, 103}
    assert sorted(call[0] for call in preferences.calls) == [101, 102, 103]
    assert {call[1:] for call in preferences.calls} == {
        (PROJECT.id, EventType.ISSUE_STATE_CHANGED)
    }


def test_event_without_interested_receivers_is_not_stored(store, clock):
    coalescer = NotificationEventCoalescer(
        store,
        _StubResourceLocator({ISSUE: PROJECT}),
        _StubPreferenceOracle(disabled={(101, EventType.ISSUE_STATE_CHANGED)}),
        draft_window=timedelta(seconds=30),
        clock=clock,
    )

    assert coalescer.submit(_event("open", "closed", receivers=(101,))) is None
    assert store.events == {}


def test_merged_sibling_stays_deleted_when_receivers_filter_to_nothing(
    store, clock
):
    preferences = _StubPreferenceOracle()
    coalescer = NotificationEventCoalescer(
        store,
        _StubResourceLocator({ISSUE: PROJECT}),
        preferences,
        draft_window=timedelta(seconds=30),
        clock=clock,
    )
    first = coalescer.submit(_event("open", "closed", receivers=(101,)))
    clock.advance(5)
    preferences._disabled.add((101, EventType.ISSUE_STATE_CHANGED))

    assert coalescer.submit(_event("closed", "rejected", receivers=(101,))) is None
    assert store.deleted == [first.id]
    assert store.events == {}
    assert store.rollbacks == 0


def test_cancellation_happens_before_preferences_are_consulted(
    coalescer, preferences, clock
):
    coalescer.submit(_event("open", "closed"))
    preferences.calls.clear()
    clock.advance(1)

    coalescer.submit(_event("closed", "open"))

    assert preferences.calls == []


def test_missing_resource_raises_and_restores_the_sibling(store, clock):
    locator = _StubResourceLocator({ISSUE: PROJECT})
    coalescer = NotificationEventCoalescer(
        store,
        locator,
        _StubPreferenceOracle(),
        draft_window=timedelta(seconds=30),
        clock=clock,
    )
    first = coalescer.submit(_event("open", "closed"))
    locator._resources.clear()
    clock.advance(1)

    with pytest.raises(ResourceNotFoundError) as excinfo:
        coalescer.submit(_event("closed", "rejected"))

    assert excinfo.value.resource_type is ResourceType.ISSUE_POST
    assert excinfo.value.resource_id == "42"
    assert list(store.events) == [first.id]
    assert store.rollbacks == 1


def test_store_failure_propagates_and_keeps_the_sibling(store, clock):
    class _FailingSaveStore(_InMemoryEventStore):
        fail = False

        def save(self, event):
            if self.fail:
                raise RuntimeError("database unavailable")
            return super().save(event)

    failing = _FailingSaveStore()
    coalescer = NotificationEventCoalescer(
        failing,
        _StubResourceLocator({ISSUE: PROJECT}),
        _StubPreferenceOracle(),
        draft_window=timedelta(seconds=30),
        clock=clock,
    )
    first = coalescer.submit(_event("open", "closed"))
    failing.fail = True
    clock.advance(1)

    with pytest.raises(RuntimeError):
        coalescer.submit(_event("closed", "rejected"))

    assert list(failing.events) == [first.id]


def test_negative_draft_window_is_rejected(store, preferences):
    with pytest.raises(ValueError):
        NotificationEventCoalescer(
            store,
            _StubResourceLocator({}),
            preferences,
            draft_window=timedelta(seconds=-1),
        )


def test_concurrent_submissions_on_one_resource_are_serialized(clock):
    store = _InMemoryEventStore(lookup_delay=0.005)
    coalescer = NotificationEventCoalescer(
        store,
        _StubResourceLocator({ISSUE: PROJECT}),
        _StubPreferenceOracle(),
        draft_window=timedelta(seconds=30),
        clock=clock,
        locks=KeyedLock(),
    )
    errors: list[BaseException] = []

    def submit(index: int) -> None:
        try:
            coalescer.submit(_event(None, f"v{index}"))
        except BaseException as exc:  # pragma: no cover - surfaced below
            errors.append(exc)

    threads = [threading.Thread(target=submit, args=(index,)) for index in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(store.events) == 1
    assert len(store.deleted) == 7
