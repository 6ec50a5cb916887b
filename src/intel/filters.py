"""
Event filtering helpers used by the presentation layer.

Events may hold raw model strings or coerced enums, so comparisons go through
the string value.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from intel.models import ConflictEvent, EventType, Severity, SourceCategory


def _value(v) -> Optional[str]:
    if isinstance(v, Enum):
        return v.value
    return v


def _severity(event: ConflictEvent) -> Optional[Severity]:
    raw = _value(event.severity)
    if not isinstance(raw, str):
        return None
    try:
        return Severity.from_string(raw)
    except ValueError:
        return None


def filter_events(
    events: Iterable[ConflictEvent],
    types: Optional[Iterable[EventType]] = None,
    categories: Optional[Iterable[SourceCategory]] = None,
    min_severity: Optional[Severity] = None,
) -> List[ConflictEvent]:
    """
    Keep events matching all given criteria.

    Args:
        events: Events to filter
        types: Allowed event types (None = all)
        categories: Allowed source categories (None = all)
        min_severity: Minimum severity; events with unknown severity are dropped

    Returns:
        Filtered list, original order preserved
    """
    type_values = {t.value for t in types} if types is not None else None
    category_values = {c.value for c in categories} if categories is not None else None

    result = []
    for event in events:
        if type_values is not None and _value(event.type) not in type_values:
            continue
        if category_values is not None and _value(event.source_category) not in category_values:
            continue
        if min_severity is not None:
            sev = _severity(event)
            if sev is None or sev < min_severity:
                continue
        result.append(event)
    return result


def split_by_category(events: Iterable[ConflictEvent]) -> Tuple[List[ConflictEvent], List[ConflictEvent]]:
    """Split events into (mainstream, independent) feeds."""
    events = list(events)
    mainstream = filter_events(events, categories=[SourceCategory.MAINSTREAM])
    independent = filter_events(events, categories=[SourceCategory.INDEPENDENT])
    return mainstream, independent


def threat_level(events: Iterable[ConflictEvent]) -> str:
    """CRITICAL when any event is critical, otherwise ELEVATED."""
    if any(_severity(e) is Severity.CRITICAL for e in events):
        return "CRITICAL"
    return "ELEVATED"
