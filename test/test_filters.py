"""Tests for event filtering helpers."""

from intel.filters import filter_events, split_by_category, threat_level
from intel.models import ConflictEvent, EventType, Severity, SourceCategory


def _event(idx, type_, severity, category):
    return ConflictEvent(
        id=f"event-{idx}-0",
        title=f"E{idx}",
        type=type_,
        severity=severity,
        source_category=category,
    )


EVENTS = [
    _event(0, "STRIKE", "high", "mainstream"),
    _event(1, "PROTEST", "low", "independent"),
    _event(2, "CONFLICT", "critical", "independent"),
    _event(3, EventType.RIOT, Severity.MEDIUM, SourceCategory.MAINSTREAM),
    _event(4, "STRIKE", "bogus", "mainstream"),
]


def _ids(events):
    return [e.id.split("-")[1] for e in events]


def test_no_criteria_keeps_everything():
    assert filter_events(EVENTS) == EVENTS


def test_filter_by_type():
    result = filter_events(EVENTS, types=[EventType.STRIKE, EventType.RIOT])
    assert _ids(result) == ["0", "3", "4"]


def test_empty_type_list_hides_everything():
    assert filter_events(EVENTS, types=[]) == []


def test_filter_by_min_severity():
    result = filter_events(EVENTS, min_severity=Severity.HIGH)
    assert _ids(result) == ["0", "2"]


def test_unknown_severity_dropped_by_severity_filter():
    result = filter_events(EVENTS, min_severity=Severity.LOW)
    assert "4" not in _ids(result)


def test_split_by_category():
    mainstream, independent = split_by_category(EVENTS)
    assert _ids(mainstream) == ["0", "3", "4"]
    assert _ids(independent) == ["1", "2"]


def test_threat_level():
    assert threat_level(EVENTS) == "CRITICAL"
    assert threat_level(EVENTS[:2]) == "ELEVATED"
    assert threat_level([]) == "ELEVATED"


def test_severity_ordering():
    assert Severity.LOW < Severity.MEDIUM < Severity.HIGH < Severity.CRITICAL
    assert Severity.from_string(" High ") is Severity.HIGH
