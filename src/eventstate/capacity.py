"""Capacity summary for event cards and the management dashboard."""

from eventstate import settings

from .enums import CapacityState, Tone
from .types import CapacitySummary, EventSnapshot


def summarize_capacity(snapshot: EventSnapshot, nearly_full_ratio: float | None = None) -> CapacitySummary:
    """Summarize how full an event is.

    Checks run in order: full, below minimum, nearly full, open. Events without a maximum are
    UNLIMITED unless they are still below their minimum.

    Args:
        snapshot: The event snapshot
        nearly_full_ratio: Fill ratio from which the event counts as nearly full,
            defaults to settings.EVENTSTATE_NEARLY_FULL_RATIO

    Returns:
        CapacitySummary with the state, its tone and the remaining spots
    """
    if nearly_full_ratio is None:
        nearly_full_ratio = settings.EVENTSTATE_NEARLY_FULL_RATIO

    joined = snapshot.joined_count
    maximum = snapshot.max_participants
    minimum = snapshot.min_participants
    spots_left = None if maximum is None else max(0, maximum - joined)
    is_full = maximum is not None and joined >= maximum

    if is_full:
        state, tone = CapacityState.FULL, Tone.WARNING
    elif minimum is not None and joined < minimum:
        state, tone = CapacityState.BELOW_MINIMUM, Tone.WARNING
    elif maximum is None:
        state, tone = CapacityState.UNLIMITED, Tone.INFO
    elif joined / maximum >= nearly_full_ratio:
        state, tone = CapacityState.NEARLY_FULL, Tone.WARNING
    else:
        state, tone = CapacityState.OPEN, Tone.INFO

    return CapacitySummary(state=state, tone=tone, is_full=is_full, spots_left=spots_left)
