"""Countdown to the next join or schedule boundary, for countdown widgets."""

from datetime import datetime

from .enums import CountdownStage
from .types import Countdown, EventSnapshot, JoinWindows
from .windows import compute_join_windows


def countdown_stage(snapshot: EventSnapshot, windows: JoinWindows, now: datetime) -> CountdownStage:
    """Return which boundary the event is heading towards at `now`.

    Follows the raw schedule, not the server phase hint: a countdown is a timer to an instant.
    """
    if now >= snapshot.end_at:
        return CountdownStage.ENDED
    if now >= snapshot.start_at:
        if windows.late_cutoff_at is not None and now <= windows.late_cutoff_at:
            return CountdownStage.STARTED_LATE_JOIN
        return CountdownStage.STARTED_NO_LATE_JOIN
    if snapshot.join_cutoff_minutes_before_start is not None and now >= windows.cutoff_at:
        return CountdownStage.CUTOFF_BEFORE_START
    if windows.opens_at is not None and now < windows.opens_at:
        return CountdownStage.BEFORE_OPEN
    return CountdownStage.OPEN_BEFORE_CUTOFF


def _target(snapshot: EventSnapshot, windows: JoinWindows, stage: CountdownStage) -> datetime | None:
    match stage:
        case CountdownStage.BEFORE_OPEN:
            return windows.opens_at
        case CountdownStage.OPEN_BEFORE_CUTOFF:
            # cutoff_at falls back to start_at when no cutoff is configured
            return windows.cutoff_at
        case CountdownStage.CUTOFF_BEFORE_START:
            return snapshot.start_at
        case CountdownStage.STARTED_LATE_JOIN:
            return windows.late_cutoff_at
        case CountdownStage.STARTED_NO_LATE_JOIN:
            return snapshot.end_at
        case CountdownStage.ENDED:
            return None


def compute_countdown(
    snapshot: EventSnapshot, now: datetime, windows: JoinWindows | None = None
) -> Countdown | None:
    """Compute the countdown shown next to an event.

    Returns None when there is nothing to count down to: the event is deleted, canceled,
    manually closed or over, or the target instant is not in the future.
    """
    if snapshot.is_deleted or snapshot.is_canceled or snapshot.join_manually_closed:
        return None

    if windows is None:
        windows = compute_join_windows(snapshot)
    stage = countdown_stage(snapshot, windows, now)
    target = _target(snapshot, windows, stage)
    if target is None:
        return None

    remaining = target - now
    if remaining.total_seconds() <= 0:
        return None
    return Countdown(stage=stage, target=target, remaining=remaining)
