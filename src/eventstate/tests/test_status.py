"""Tests for the lifecycle status and reason/tone helpers."""

from datetime import UTC, datetime, timedelta

import pytest

from eventstate import EventStatus, JoinMode, JoinReason, Phase, Tone, evaluate, tone_for_reason
from eventstate.status import compute_event_status

START = datetime(2025, 1, 10, 18, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "overrides,phase,expected",
    [
        ({"is_deleted": True, "is_canceled": True}, Phase.UPCOMING, EventStatus.DELETED),
        ({"is_canceled": True}, Phase.PAST, EventStatus.CANCELED),
        ({}, Phase.PAST, EventStatus.PAST),
        ({}, Phase.ONGOING, EventStatus.ONGOING),
        ({}, Phase.UPCOMING, EventStatus.UPCOMING),
        ({"join_manually_closed": True}, Phase.UPCOMING, EventStatus.UPCOMING),
    ],
)
def test_status_priority(make_snapshot, overrides: dict[str, bool], phase: Phase, expected: EventStatus) -> None:
    assert compute_event_status(make_snapshot(**overrides), phase) == expected


def test_evaluation_status_uses_hinted_phase(make_snapshot) -> None:
    snapshot = make_snapshot(server_phase_hint=Phase.ONGOING)

    assert evaluate(snapshot, START - timedelta(hours=1)).status == EventStatus.ONGOING


@pytest.mark.parametrize(
    "value,expected",
    [
        ("DELETED", Tone.DANGER),
        ("CANCELED", Tone.DANGER),
        ("PAST", Tone.NEUTRAL),
        ("FULL", Tone.WARNING),
        ("MANUALLY_CLOSED", Tone.WARNING),
        ("NOT_YET_OPEN", Tone.INFO),
        ("CLOSED", Tone.WARNING),
        ("LATE_JOIN_CLOSED", Tone.WARNING),
        ("OK", Tone.SUCCESS),
        ("WAITLIST_ONLY", Tone.NEUTRAL),
        ("", Tone.NEUTRAL),
    ],
)
def test_tone_for_reason(value: str, expected: Tone) -> None:
    assert tone_for_reason(value) == expected


def test_unknown_reason_parses_to_none() -> None:
    assert JoinReason.parse("WAITLIST_ONLY") is None
    assert JoinReason.parse("FULL") is JoinReason.FULL


def test_unknown_join_mode_parses_to_none() -> None:
    assert JoinMode.parse("PAID") is None
    assert JoinMode.parse("REQUEST") is JoinMode.REQUEST


def test_reason_contract() -> None:
    """The reason set is a versioned contract shared with the presentation layer."""
    assert [reason.value for reason in JoinReason] == [
        "DELETED",
        "CANCELED",
        "PAST",
        "FULL",
        "MANUALLY_CLOSED",
        "NOT_YET_OPEN",
        "CLOSED",
        "LATE_JOIN_CLOSED",
        "OK",
    ]
