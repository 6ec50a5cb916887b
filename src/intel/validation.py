"""
Strict validation of model-supplied conflict events.

The parser passes event fields through exactly as the model wrote them.
validate_events() coerces them into the typed model and rejects anything
that cannot be coerced.
"""

from dataclasses import replace
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from core.utils import debug, warn
from intel.models import ConflictEvent, EventType, Severity, SourceCategory


class EventValidationError(ValueError):
    """Raised when an event field cannot be coerced."""

    pass


def _coerce_enum(enum_cls, value, field_name: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        s = value.strip()
        for member in enum_cls:
            if member.value == s or member.value == s.lower() or member.value == s.upper():
                return member
    raise EventValidationError(f"invalid {field_name}: {value!r}")


def _coerce_coordinate(value, field_name: str, limit: float) -> float:
    if isinstance(value, bool) or value is None:
        raise EventValidationError(f"invalid {field_name}: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise EventValidationError(f"invalid {field_name}: {value!r}")
    if number != number or not -limit <= number <= limit:
        raise EventValidationError(f"{field_name} out of range: {value!r}")
    return number


def _check_timestamp(value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise EventValidationError(f"invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        datetime.fromisoformat(text)
    except ValueError:
        raise EventValidationError(f"unparseable timestamp: {value!r}")
    return value


def validate_event(event: ConflictEvent) -> ConflictEvent:
    """Return a coerced copy of event.

    Raises:
        EventValidationError: if any field is missing or malformed
    """
    event_type = _coerce_enum(EventType, event.type, "type")
    severity = _coerce_enum(Severity, event.severity, "severity")
    category = _coerce_enum(SourceCategory, event.source_category, "sourceCategory")
    lat = _coerce_coordinate(event.lat, "lat", 90.0)
    lng = _coerce_coordinate(event.lng, "lng", 180.0)
    _check_timestamp(event.timestamp)

    alignment: Optional[str] = event.source_alignment
    if category is SourceCategory.INDEPENDENT:
        if not isinstance(alignment, str) or not alignment.strip():
            raise EventValidationError("independent event without sourceAlignment")
    elif alignment is not None and not isinstance(alignment, str):
        raise EventValidationError(f"invalid sourceAlignment: {alignment!r}")

    return replace(
        event,
        type=event_type,
        severity=severity,
        source_category=category,
        lat=lat,
        lng=lng,
    )


def validate_events(
    events: Iterable[ConflictEvent],
) -> Tuple[List[ConflictEvent], List[Tuple[ConflictEvent, str]]]:
    """
    Split events into coerced valid events and rejected ones.

    Args:
        events: Events as returned by the parser

    Returns:
        Tuple of (valid_events, [(rejected_event, reason), ...])
    """
    valid: List[ConflictEvent] = []
    rejected: List[Tuple[ConflictEvent, str]] = []
    for event in events:
        try:
            valid.append(validate_event(event))
        except EventValidationError as e:
            debug(f"[validate] Rejected {event.id}: {e}")
            rejected.append((event, str(e)))
    if rejected:
        warn(f"Dropped {len(rejected)} of {len(events)} events that failed validation")
    return valid, rejected
