"""Build event snapshots from the event API's camelCase payloads."""

import typing as t

import orjson
import structlog
from pydantic.alias_generators import to_camel

from .enums import JoinMode, Phase
from .types import EventSnapshot

logger = structlog.get_logger(__name__)

_PHASE_HINTS = {phase.value: phase for phase in Phase}
_SNAPSHOT_ALIASES = frozenset(field.alias or to_camel(name) for name, field in EventSnapshot.model_fields.items())


def snapshot_from_payload(data: t.Mapping[str, t.Any]) -> EventSnapshot:
    """Build an EventSnapshot from an event payload.

    Accepts the same field names the event API returns (`startAt`, `joinCutoffMinutesBeforeStart`,
    `min`, `max`, ...). Missing join settings fall back to the API defaults. Explicit nulls are kept
    as "no bound" and are never turned into 0.

    - `isDeleted` / `isCanceled` may be omitted when `deletedAt` / `canceledAt` are present.
    - `status` becomes the server phase hint only for UPCOMING, ONGOING and PAST.
    - An unknown `joinMode` falls back to OPEN.

    Raises:
        pydantic.ValidationError: if the payload breaks the snapshot invariants
    """
    fields = {key: value for key, value in data.items() if key in _SNAPSHOT_ALIASES}

    if fields.get("isDeleted") is None:
        fields["isDeleted"] = data.get("deletedAt") is not None
    if fields.get("isCanceled") is None:
        fields["isCanceled"] = data.get("canceledAt") is not None

    if fields.get("serverPhaseHint") is None:
        fields["serverPhaseHint"] = _PHASE_HINTS.get(data.get("status") or "")

    # The API omits these on older list queries
    if fields.get("allowJoinLate") is None:
        fields["allowJoinLate"] = True
    if fields.get("joinManuallyClosed") is None:
        fields["joinManuallyClosed"] = False
    if fields.get("joinedCount") is None:
        fields["joinedCount"] = 0
    join_mode = fields.pop("joinMode", None)
    if join_mode is not None:
        # Unknown modes fall back to the default
        if (known := JoinMode.parse(join_mode)) is None:
            logger.debug("unknown_join_mode", join_mode=join_mode)
        else:
            fields["joinMode"] = known

    return EventSnapshot.model_validate(fields)


def snapshot_from_json(raw: bytes | str) -> EventSnapshot:
    """Decode a JSON event payload and build an EventSnapshot from it."""
    return snapshot_from_payload(orjson.loads(raw))
