"""Join gate classes for the event join eligibility system.

Each gate performs a specific check. Gates are evaluated in order by the EligibilityEngine and
the first gate that blocks decides the reason. A gate returns None to pass to the next one;
when every gate passes the user can join.
"""

from __future__ import annotations

import abc
from datetime import datetime
from typing import TYPE_CHECKING

from .enums import JoinReason, Phase
from .types import EventSnapshot, Joinability, JoinWindows

if TYPE_CHECKING:
    from .service import EligibilityEngine


class BaseJoinGate(abc.ABC):
    """Abstract Base Class for a composable join check."""

    def __init__(self, engine: EligibilityEngine) -> None:
        """Initialize the join check."""
        self.engine = engine
        self.snapshot: EventSnapshot = engine.snapshot
        self.now: datetime = engine.now
        self.phase: Phase = engine.phase
        self.windows: JoinWindows = engine.windows

    @abc.abstractmethod
    def check(self) -> Joinability | None:
        """Perform the join check.

        Returns:
            Joinability if this gate blocks joining, None to continue to next gate.
        """


class DeletedGate(BaseJoinGate):
    """Gate #1: Deleted events can never be joined."""

    def check(self) -> Joinability | None:
        """Check the deletion flag."""
        if self.snapshot.is_deleted:
            return Joinability.for_reason(JoinReason.DELETED)
        return None


class CanceledGate(BaseJoinGate):
    """Gate #2: Canceled events can never be joined."""

    def check(self) -> Joinability | None:
        """Check the cancellation flag."""
        if self.snapshot.is_canceled:
            return Joinability.for_reason(JoinReason.CANCELED)
        return None


class PastGate(BaseJoinGate):
    """Gate #3: Events that are over can't be joined."""

    def check(self) -> Joinability | None:
        """Check that the event has not finished."""
        if self.phase == Phase.PAST:
            return Joinability.for_reason(JoinReason.PAST)
        return None


class CapacityGate(BaseJoinGate):
    """Gate #4: Checks if the event has space available for another participant.

    Runs before the manual close gate: a full event reports FULL even when the organizer
    also closed joining.
    """

    def check(self) -> Joinability | None:
        """Check if the event has space available for another participant."""
        maximum = self.snapshot.max_participants
        if maximum is not None and self.snapshot.joined_count >= maximum:
            return Joinability.for_reason(JoinReason.FULL)
        return None


class ManualCloseGate(BaseJoinGate):
    """Gate #5: The organizer closed joining by hand. This does not change the phase."""

    def check(self) -> Joinability | None:
        """Check the organizer override."""
        if self.snapshot.join_manually_closed:
            return Joinability.for_reason(JoinReason.MANUALLY_CLOSED)
        return None


class PreStartWindowGate(BaseJoinGate):
    """Gate #6: Before the start, joining is only possible inside the join window.

    The window is [opens_at, cutoff_at): opening is inclusive, the cutoff instant itself is closed.
    """

    def check(self) -> Joinability | None:
        """Check the join window of an upcoming event."""
        if self.phase != Phase.UPCOMING:
            return None

        # No opening bound means the window has always been open
        if self.windows.opens_at is not None and self.now < self.windows.opens_at:
            return Joinability.for_reason(JoinReason.NOT_YET_OPEN)

        if self.now >= self.windows.cutoff_at:
            return Joinability.for_reason(JoinReason.CLOSED)
        return None


class LateJoinGate(BaseJoinGate):
    """Gate #7: After the start, joining requires late join and respects its cutoff.

    The late cutoff instant itself is still open.
    """

    def check(self) -> Joinability | None:
        """Check late joining for an ongoing event."""
        if self.phase != Phase.ONGOING:
            return None

        if not self.snapshot.allow_join_late or self.windows.late_cutoff_at is None:
            return Joinability.for_reason(JoinReason.LATE_JOIN_CLOSED)

        if self.now > self.windows.late_cutoff_at:
            return Joinability.for_reason(JoinReason.LATE_JOIN_CLOSED)
        return None


# List of all gates in execution order
JOIN_GATES: list[type[BaseJoinGate]] = [
    DeletedGate,
    CanceledGate,
    PastGate,
    CapacityGate,
    ManualCloseGate,
    PreStartWindowGate,
    LateJoinGate,
]
