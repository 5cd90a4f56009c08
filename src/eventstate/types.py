"""Types for the event phase and join eligibility system."""

import typing as t
from datetime import datetime, timedelta

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .enums import (
    REASON_TONES,
    CapacityState,
    CountdownStage,
    EventStatus,
    JoinMode,
    JoinReason,
    Phase,
    Tone,
)


class FrozenSchema(BaseModel):
    """Immutable value with camelCase aliases for the API payloads."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class EventSnapshot(FrozenSchema):
    """Schedule, lifecycle flags, join windows and capacity of an event at one point in time.

    Every optional integer uses None as the "no bound" sentinel, which is not the same thing as 0.
    """

    start_at: AwareDatetime
    end_at: AwareDatetime
    is_deleted: bool = False
    is_canceled: bool = False
    server_phase_hint: Phase | None = None

    join_opens_minutes_before_start: int | None = Field(default=None, ge=0)  # None: no lower bound
    join_cutoff_minutes_before_start: int | None = Field(default=None, ge=0)  # None: open until start
    allow_join_late: bool = True
    late_join_cutoff_minutes_after_start: int | None = Field(default=None, ge=0)  # None: until end
    join_manually_closed: bool = False

    min_participants: int | None = Field(default=None, ge=0, alias="min")
    max_participants: int | None = Field(default=None, ge=0, alias="max")
    joined_count: int = Field(default=0, ge=0)
    join_mode: JoinMode = JoinMode.OPEN

    @model_validator(mode="after")
    def validate_schedule(self) -> t.Self:
        """Validate that the event ends after it starts."""
        if self.end_at <= self.start_at:
            raise ValueError("Event end must be after its start.")
        return self

    @model_validator(mode="after")
    def validate_capacity_bounds(self) -> t.Self:
        """Validate that the minimum does not exceed the maximum when both are set."""
        if (
            self.min_participants is not None
            and self.max_participants is not None
            and self.min_participants > self.max_participants
        ):
            raise ValueError("Minimum participants must be less than or equal to maximum participants.")
        return self

    @model_validator(mode="after")
    def validate_offsets_in_range(self) -> t.Self:
        """Validate that every join offset lands on a representable instant."""
        offsets = (
            ("join_opens_minutes_before_start", self.join_opens_minutes_before_start, -1),
            ("join_cutoff_minutes_before_start", self.join_cutoff_minutes_before_start, -1),
            ("late_join_cutoff_minutes_after_start", self.late_join_cutoff_minutes_after_start, 1),
        )
        for name, minutes, direction in offsets:
            if minutes is None:
                continue
            try:
                self.start_at + direction * timedelta(minutes=minutes)
            except OverflowError:
                raise ValueError(f"{name} puts the join window outside the supported date range.") from None
        return self


class Joinability(FrozenSchema):
    """Whether a user may join right now, and the single most relevant reason."""

    can_join: bool
    reason: JoinReason
    tone: Tone

    @classmethod
    def for_reason(cls, reason: JoinReason) -> "Joinability":
        return cls(can_join=reason == JoinReason.OK, reason=reason, tone=REASON_TONES[reason])

    @model_validator(mode="after")
    def validate_can_join_matches_reason(self) -> t.Self:
        """Only OK allows joining."""
        if self.can_join != (self.reason == JoinReason.OK):
            raise ValueError("can_join must be true exactly when the reason is OK.")
        return self


class JoinWindows(FrozenSchema):
    """Absolute instants derived from the minute offsets.

    opens_at is None when joining has no lower bound. late_cutoff_at is None when late join is
    not allowed at all.
    """

    opens_at: datetime | None
    cutoff_at: datetime
    late_cutoff_at: datetime | None


class CapacitySummary(FrozenSchema):
    state: CapacityState
    tone: Tone
    is_full: bool
    spots_left: int | None  # None when there is no maximum


class Countdown(FrozenSchema):
    """Time left until the next schedule boundary."""

    stage: CountdownStage
    target: datetime
    remaining: timedelta


class EventEvaluation(FrozenSchema):
    """Result of evaluating an event snapshot against a reference instant."""

    evaluated_at: datetime
    phase: Phase
    joinability: Joinability
    status: EventStatus
    windows: JoinWindows
    capacity: CapacitySummary
    countdown: Countdown | None = None

    @property
    def can_join(self) -> bool:
        return self.joinability.can_join

    @property
    def reason(self) -> JoinReason:
        return self.joinability.reason

    def to_payload(self) -> dict[str, t.Any]:
        """Return a camelCase, JSON-ready dict. Unset bounds stay None."""
        return self.model_dump(mode="json", by_alias=True)
