from .enums import EventStatus, Phase
from .types import EventSnapshot

_PHASE_STATUSES = {
    Phase.PAST: EventStatus.PAST,
    Phase.ONGOING: EventStatus.ONGOING,
    Phase.UPCOMING: EventStatus.UPCOMING,
}


def compute_event_status(snapshot: EventSnapshot, phase: Phase) -> EventStatus:
    """Compute the high-level lifecycle status.

    Priority order: DELETED > CANCELED > PAST > ONGOING > UPCOMING.
    """
    if snapshot.is_deleted:
        return EventStatus.DELETED
    if snapshot.is_canceled:
        return EventStatus.CANCELED
    return _PHASE_STATUSES[phase]
