"""
Data model for regions, conflict events and analysis results.

Region data is static reference data. Events and sources are created fresh on
every successful parse and never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class EventType(Enum):
    CONFLICT = "CONFLICT"
    PROTEST = "PROTEST"
    RIOT = "RIOT"
    MILITARY_MOVE = "MILITARY_MOVE"
    STRIKE = "STRIKE"


class Severity(Enum):
    """Event severity levels, ordered from lowest to highest."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_string(cls, s: str) -> "Severity":
        """Parse severity from string."""
        s_lower = s.lower().strip()
        for sev in cls:
            if sev.value == s_lower:
                return sev
        raise ValueError(f"Unknown severity: {s}")

    @property
    def level(self) -> int:
        """Numeric level for comparison (higher = more severe)."""
        levels = {
            Severity.LOW: 0,
            Severity.MEDIUM: 1,
            Severity.HIGH: 2,
            Severity.CRITICAL: 3,
        }
        return levels[self]

    def __ge__(self, other: "Severity") -> bool:
        return self.level >= other.level

    def __gt__(self, other: "Severity") -> bool:
        return self.level > other.level

    def __le__(self, other: "Severity") -> bool:
        return self.level <= other.level

    def __lt__(self, other: "Severity") -> bool:
        return self.level < other.level


class SourceCategory(Enum):
    MAINSTREAM = "mainstream"
    INDEPENDENT = "independent"


# =============================================================================
# Region reference data
# =============================================================================


@dataclass(frozen=True)
class MonitoredSource:
    """A named feed searched explicitly by URL."""

    name: str
    url: str
    alignment: str


@dataclass(frozen=True)
class Territory:
    """Area of control drawn as one or more (lat, lng) polygons."""

    id: str
    name: str
    color: str
    coordinates: Tuple[Tuple[Tuple[float, float], ...], ...]


@dataclass(frozen=True)
class MilitantGroup:
    name: str
    description: str
    status: str
    area_of_operation: str
    logo_url: str = ""


@dataclass(frozen=True)
class Region:
    id: str
    name: str
    lat: float
    lng: float
    zoom: int
    description: str
    monitored_sources: Tuple[MonitoredSource, ...] = ()
    territories: Tuple[Territory, ...] = ()
    militant_groups: Tuple[MilitantGroup, ...] = ()

    @property
    def has_monitored_sources(self) -> bool:
        return bool(self.monitored_sources)


# =============================================================================
# Analysis output
# =============================================================================

# Wire (model output) key -> ConflictEvent attribute
_EVENT_FIELDS = {
    "id": "id",
    "title": "title",
    "description": "description",
    "type": "type",
    "severity": "severity",
    "lat": "lat",
    "lng": "lng",
    "timestamp": "timestamp",
    "sourceUrl": "source_url",
    "sourceCategory": "source_category",
    "sourceAlignment": "source_alignment",
    "locationName": "location_name",
}


@dataclass(frozen=True)
class ConflictEvent:
    """
    A single reported incident.

    Values are kept exactly as the model supplied them, so `type` and
    `severity` are usually plain strings. Use intel.validation to coerce them.
    Keys the model sent that are not part of the event shape land in `extra`.
    """

    id: str
    title: Any = None
    description: Any = None
    type: Any = None
    severity: Any = None
    lat: Any = None
    lng: Any = None
    timestamp: Any = None
    source_url: Any = None
    source_category: Any = None
    source_alignment: Any = None
    location_name: Any = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], event_id: Optional[str] = None) -> "ConflictEvent":
        """Build an event from a raw model object, overriding its id if given."""
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            attr = _EVENT_FIELDS.get(key)
            if attr is None:
                extra[key] = value
            else:
                kwargs[attr] = value
        if event_id is not None:
            kwargs["id"] = event_id
        kwargs.setdefault("id", "")
        return cls(extra=extra, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the wire (camelCase) shape."""
        data = dict(self.extra)
        for key, attr in _EVENT_FIELDS.items():
            value = getattr(self, attr)
            if isinstance(value, Enum):
                value = value.value
            data[key] = value
        return data


@dataclass(frozen=True)
class GroundingSource:
    """A web document the model cites as evidence."""

    title: str
    uri: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "uri": self.uri}


@dataclass(frozen=True)
class AnalysisResult:
    events: Tuple[ConflictEvent, ...] = ()
    summary: str = ""
    sources: Tuple[GroundingSource, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "events": [e.to_dict() for e in self.events],
            "sources": [s.to_dict() for s in self.sources],
        }
