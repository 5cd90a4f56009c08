"""EligibilityEngine for deriving an event's phase and join status."""

from datetime import UTC, datetime

import structlog

from eventstate import settings

from .capacity import summarize_capacity
from .countdown import compute_countdown
from .enums import JoinReason
from .exceptions import NaiveInstantError
from .gates import JOIN_GATES, BaseJoinGate
from .status import compute_event_status
from .types import EventEvaluation, EventSnapshot, Joinability
from .windows import compute_join_windows, compute_phase, schedule_phase

logger = structlog.get_logger(__name__)


class EligibilityEngine:
    """The Eligibility Engine Class.

    Evaluates one event snapshot against one reference instant. The phase is computed first
    and every gate, as well as the status and countdown, reads that same phase and instant,
    so a single evaluation never mixes two clocks.
    """

    def __init__(self, snapshot: EventSnapshot, now: datetime) -> None:
        """Initialize the engine and derive the phase and the join windows.

        Raises:
            NaiveInstantError: if `now` carries no timezone
        """
        if now.tzinfo is None or now.utcoffset() is None:
            raise NaiveInstantError("The reference instant must be timezone-aware.")

        self.snapshot = snapshot
        self.now = now
        self.phase = compute_phase(snapshot, now)
        self.windows = compute_join_windows(snapshot)

        if snapshot.server_phase_hint is not None and snapshot.server_phase_hint != schedule_phase(snapshot, now):
            logger.debug(
                "server_phase_hint_overrides_schedule",
                hint=snapshot.server_phase_hint.value,
                now=now.isoformat(),
                start_at=snapshot.start_at.isoformat(),
                end_at=snapshot.end_at.isoformat(),
            )

        self._gates: list[BaseJoinGate] = [gate(self) for gate in JOIN_GATES]

    def check_joinability(self) -> Joinability:
        """Run the gates in order and return the first blocking result, or OK."""
        for gate in self._gates:
            if result := gate.check():
                return result

        return Joinability.for_reason(JoinReason.OK)

    def evaluate(self) -> EventEvaluation:
        """Compute the full evaluation for the snapshot at the engine's instant."""
        joinability = self.check_joinability()
        evaluation = EventEvaluation(
            evaluated_at=self.now,
            phase=self.phase,
            joinability=joinability,
            status=compute_event_status(self.snapshot, self.phase),
            windows=self.windows,
            capacity=summarize_capacity(self.snapshot),
            countdown=compute_countdown(self.snapshot, self.now, windows=self.windows),
        )
        if settings.EVENTSTATE_LOG_EVALUATIONS:
            logger.debug(
                "event_evaluated",
                phase=evaluation.phase.value,
                reason=joinability.reason.value,
                can_join=joinability.can_join,
                now=self.now.isoformat(),
            )
        return evaluation


def evaluate(snapshot: EventSnapshot, now: datetime) -> EventEvaluation:
    """Evaluate the event's phase and join status at `now`.

    Deterministic: the same snapshot and instant always give the same result.
    """
    return EligibilityEngine(snapshot, now).evaluate()


def evaluate_now(snapshot: EventSnapshot) -> EventEvaluation:
    """Evaluate against the current wall clock, read exactly once."""
    return evaluate(snapshot, datetime.now(UTC))
