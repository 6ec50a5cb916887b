"""Tests for strict event validation."""

import pytest

from intel.models import ConflictEvent, EventType, Severity, SourceCategory
from intel.validation import EventValidationError, validate_event, validate_events


def _event(**overrides):
    data = {
        "title": "Protest in Tehran",
        "description": "Crowds gathered",
        "type": "PROTEST",
        "severity": "medium",
        "lat": 35.69,
        "lng": 51.39,
        "locationName": "Tehran",
        "timestamp": "2026-10-16T18:30:00+03:30",
        "sourceCategory": "mainstream",
        "sourceAlignment": None,
    }
    data.update(overrides)
    return ConflictEvent.from_dict(data, event_id="event-0-1")


def test_valid_event_is_coerced():
    event = validate_event(_event(lat="35.69", severity="MEDIUM"))

    assert event.type is EventType.PROTEST
    assert event.severity is Severity.MEDIUM
    assert event.source_category is SourceCategory.MAINSTREAM
    assert event.lat == 35.69
    assert isinstance(event.lat, float)
    assert event.id == "event-0-1"
    assert event.title == "Protest in Tehran"


def test_original_event_not_mutated():
    original = _event()
    validate_event(original)
    assert original.type == "PROTEST"


@pytest.mark.parametrize(
    "overrides",
    [
        {"type": "SKIRMISH"},
        {"type": None},
        {"severity": "extreme"},
        {"lat": 91},
        {"lng": -180.5},
        {"lat": "north"},
        {"lat": True},
        {"lng": None},
        {"timestamp": "yesterday"},
        {"timestamp": None},
        {"sourceCategory": "blog"},
        {"sourceCategory": "independent", "sourceAlignment": None},
        {"sourceCategory": "independent", "sourceAlignment": "  "},
    ],
)
def test_invalid_events_rejected(overrides):
    with pytest.raises(EventValidationError):
        validate_event(_event(**overrides))


def test_independent_with_alignment_accepted():
    event = validate_event(_event(sourceCategory="independent", sourceAlignment="Protest Monitoring"))
    assert event.source_category is SourceCategory.INDEPENDENT
    assert event.source_alignment == "Protest Monitoring"


def test_zulu_timestamp_accepted():
    validate_event(_event(timestamp="2026-10-16T08:00:00Z"))


def test_validate_events_splits_batch(capsys):
    good = _event()
    bad = _event(severity="unknown")

    valid, rejected = validate_events([good, bad])

    assert len(valid) == 1
    assert valid[0].severity is Severity.MEDIUM
    assert len(rejected) == 1
    assert rejected[0][0] is bad
    assert "severity" in rejected[0][1]
    assert "Dropped 1 of 2 events" in capsys.readouterr().err
