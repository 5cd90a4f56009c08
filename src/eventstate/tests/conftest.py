"""Shared fixtures for eventstate tests."""

import typing as t
from datetime import UTC, datetime

import pytest

from eventstate import EventSnapshot

START = datetime(2025, 1, 10, 18, 0, tzinfo=UTC)
END = datetime(2025, 1, 10, 20, 0, tzinfo=UTC)


SnapshotFactory = t.Callable[..., EventSnapshot]


@pytest.fixture
def start() -> datetime:
    return START


@pytest.fixture
def end() -> datetime:
    return END


@pytest.fixture
def make_snapshot() -> SnapshotFactory:
    """Build a snapshot of a two hour event starting 2025-01-10 18:00 UTC.

    All join windows are unbounded, late join is allowed and there is no capacity limit.
    Keyword arguments override any field.
    """

    def _make(**overrides: t.Any) -> EventSnapshot:
        fields: dict[str, t.Any] = {"start_at": START, "end_at": END}
        fields.update(overrides)
        return EventSnapshot(**fields)

    return _make


@pytest.fixture
def open_snapshot(make_snapshot: SnapshotFactory) -> EventSnapshot:
    """An event with a bounded join window: opens 24h before, closes 30 minutes before start."""
    return make_snapshot(
        join_opens_minutes_before_start=24 * 60,
        join_cutoff_minutes_before_start=30,
        late_join_cutoff_minutes_after_start=15,
        max_participants=10,
        joined_count=3,
    )
