"""Tests for the data model and region catalogue."""

import dataclasses

import pytest

from intel.models import AnalysisResult, ConflictEvent, GroundingSource, Severity
from intel.regions import REGIONS, SEVERITY_COLORS, get_region


def test_event_round_trips_wire_keys():
    raw = {
        "title": "Convoy",
        "type": "MILITARY_MOVE",
        "severity": "low",
        "lat": 47.1,
        "lng": 37.5,
        "locationName": "Mariupol",
        "sourceUrl": "https://t.me/x/1",
        "sourceCategory": "independent",
        "sourceAlignment": "Pro-Ukraine/Map",
        "timestamp": "2026-10-16T00:00:00Z",
        "description": "Armour moving west",
    }
    event = ConflictEvent.from_dict(raw, event_id="event-0-9")

    assert event.location_name == "Mariupol"
    assert event.source_url == "https://t.me/x/1"
    assert event.to_dict() == dict(raw, id="event-0-9")


def test_result_to_dict():
    result = AnalysisResult(
        events=(ConflictEvent(id="e", title="t", severity=Severity.HIGH),),
        summary="s",
        sources=(GroundingSource("Reuters", "https://reuters.com"),),
    )
    data = result.to_dict()

    assert data["summary"] == "s"
    assert data["events"][0]["severity"] == "high"
    assert data["sources"] == [{"title": "Reuters", "uri": "https://reuters.com"}]


def test_result_is_immutable():
    result = AnalysisResult(events=(ConflictEvent(id="e"),), summary="s")

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.events = ()
    with pytest.raises(AttributeError):
        result.events.append(ConflictEvent(id="f"))
    assert len(result.events) == 1


def test_catalogue_ids_unique():
    ids = [r.id for r in REGIONS]
    assert len(ids) == len(set(ids))
    assert {"ukraine", "syria", "lebanon", "iran", "israel-palestine"} <= set(ids)


def test_every_region_has_monitored_sources():
    for region in REGIONS:
        assert region.has_monitored_sources
        for source in region.monitored_sources:
            assert source.url.startswith("https://")
            assert source.alignment


def test_territory_polygons():
    syria = get_region("syria")
    assert [t.id for t in syria.territories] == ["pro-government", "sdf-rojava"]
    for territory in syria.territories:
        for polygon in territory.coordinates:
            assert len(polygon) >= 3
            assert all(len(point) == 2 for point in polygon)


def test_get_region_unknown():
    with pytest.raises(ValueError, match="Unknown region"):
        get_region("atlantis")


def test_severity_colors_cover_all_levels():
    assert set(SEVERITY_COLORS) == set(Severity)
