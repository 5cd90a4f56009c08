"""Absolute join window boundaries derived from an event's minute offsets."""

from datetime import datetime, timedelta

from .enums import Phase
from .types import EventSnapshot, JoinWindows


def compute_phase(snapshot: EventSnapshot, now: datetime) -> Phase:
    """Return the event's phase at `now`.

    A server-provided phase hint is authoritative over the schedule, so a client with a
    drifting clock still agrees with the server.
    """
    if snapshot.server_phase_hint is not None:
        return snapshot.server_phase_hint
    return schedule_phase(snapshot, now)


def schedule_phase(snapshot: EventSnapshot, now: datetime) -> Phase:
    """Return the phase from the schedule alone, ignoring any server hint."""
    if now >= snapshot.end_at:
        return Phase.PAST
    if now >= snapshot.start_at:
        return Phase.ONGOING
    return Phase.UPCOMING


def compute_join_windows(snapshot: EventSnapshot) -> JoinWindows:
    """Turn the minute offsets into instants.

    Unset offsets are kept as unbounded rather than converted to a number:
    no opening bound gives `opens_at=None`, no cutoff closes the window at the start,
    and no late cutoff keeps late joining open until the end.
    """
    start = snapshot.start_at

    opens_at = None
    if snapshot.join_opens_minutes_before_start is not None:
        opens_at = start - timedelta(minutes=snapshot.join_opens_minutes_before_start)

    cutoff_at = start
    if snapshot.join_cutoff_minutes_before_start is not None:
        cutoff_at = start - timedelta(minutes=snapshot.join_cutoff_minutes_before_start)

    late_cutoff_at = None
    if snapshot.allow_join_late:
        if snapshot.late_join_cutoff_minutes_after_start is None:
            late_cutoff_at = snapshot.end_at
        else:
            late_cutoff_at = start + timedelta(minutes=snapshot.late_join_cutoff_minutes_after_start)

    return JoinWindows(opens_at=opens_at, cutoff_at=cutoff_at, late_cutoff_at=late_cutoff_at)
