"""Event phase and join eligibility package.

This package derives an event's temporal phase and whether a user may join it right now,
from an immutable event snapshot and an explicit reference instant.
"""

from .enums import CapacityState, CountdownStage, EventStatus, JoinMode, JoinReason, Phase, Tone, tone_for_reason
from .exceptions import NaiveInstantError
from .payloads import snapshot_from_json, snapshot_from_payload
from .service import EligibilityEngine, evaluate, evaluate_now
from .types import CapacitySummary, Countdown, EventEvaluation, EventSnapshot, Joinability, JoinWindows

__all__ = [
    "CapacityState",
    "CapacitySummary",
    "Countdown",
    "CountdownStage",
    "EligibilityEngine",
    "EventEvaluation",
    "EventSnapshot",
    "EventStatus",
    "JoinMode",
    "JoinReason",
    "JoinWindows",
    "Joinability",
    "NaiveInstantError",
    "Phase",
    "Tone",
    "evaluate",
    "evaluate_now",
    "snapshot_from_json",
    "snapshot_from_payload",
    "tone_for_reason",
]
