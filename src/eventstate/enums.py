"""Enums for the event phase and join eligibility system."""

from enum import StrEnum


class Phase(StrEnum):
    """Position of an event in time relative to its schedule."""

    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
    PAST = "PAST"


class JoinReason(StrEnum):
    """Why a user can or cannot join an event right now.

    This is a closed, versioned contract shared with the presentation layer.
    Consumers receiving a raw string should go through `parse` and handle `None`.
    """

    DELETED = "DELETED"
    CANCELED = "CANCELED"
    PAST = "PAST"
    FULL = "FULL"
    MANUALLY_CLOSED = "MANUALLY_CLOSED"
    NOT_YET_OPEN = "NOT_YET_OPEN"
    CLOSED = "CLOSED"
    LATE_JOIN_CLOSED = "LATE_JOIN_CLOSED"
    OK = "OK"

    @classmethod
    def parse(cls, value: str) -> "JoinReason | None":
        """Return the matching reason, or None for values this version does not know."""
        try:
            return cls(value)
        except ValueError:
            return None


class Tone(StrEnum):
    """Presentation hint for a reason's severity. Carries no business meaning."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"
    NEUTRAL = "neutral"


class JoinMode(StrEnum):
    """How participants get in. Informational only for eligibility."""

    OPEN = "OPEN"
    REQUEST = "REQUEST"
    INVITE_ONLY = "INVITE_ONLY"

    @classmethod
    def parse(cls, value: str) -> "JoinMode | None":
        """Return the matching mode, or None for modes this version does not know."""
        try:
            return cls(value)
        except ValueError:
            return None


class EventStatus(StrEnum):
    """High-level lifecycle status. Priority: DELETED > CANCELED > PAST > ONGOING > UPCOMING."""

    DELETED = "DELETED"
    CANCELED = "CANCELED"
    PAST = "PAST"
    ONGOING = "ONGOING"
    UPCOMING = "UPCOMING"


class CapacityState(StrEnum):
    FULL = "FULL"
    BELOW_MINIMUM = "BELOW_MINIMUM"
    NEARLY_FULL = "NEARLY_FULL"
    OPEN = "OPEN"
    UNLIMITED = "UNLIMITED"


class CountdownStage(StrEnum):
    """Which schedule boundary a countdown widget is counting towards."""

    BEFORE_OPEN = "BEFORE_OPEN"
    OPEN_BEFORE_CUTOFF = "OPEN_BEFORE_CUTOFF"
    CUTOFF_BEFORE_START = "CUTOFF_BEFORE_START"
    STARTED_LATE_JOIN = "STARTED_LATE_JOIN"
    STARTED_NO_LATE_JOIN = "STARTED_NO_LATE_JOIN"
    ENDED = "ENDED"


REASON_TONES: dict[JoinReason, Tone] = {
    JoinReason.DELETED: Tone.DANGER,
    JoinReason.CANCELED: Tone.DANGER,
    JoinReason.PAST: Tone.NEUTRAL,
    JoinReason.FULL: Tone.WARNING,
    JoinReason.MANUALLY_CLOSED: Tone.WARNING,
    JoinReason.NOT_YET_OPEN: Tone.INFO,
    JoinReason.CLOSED: Tone.WARNING,
    JoinReason.LATE_JOIN_CLOSED: Tone.WARNING,
    JoinReason.OK: Tone.SUCCESS,
}


def tone_for_reason(value: str) -> Tone:
    """Map a reason, possibly from a newer producer, to a tone.

    Unknown values fall back to NEUTRAL instead of raising.
    """
    reason = JoinReason.parse(value)
    if reason is None:
        return Tone.NEUTRAL
    return REASON_TONES[reason]
