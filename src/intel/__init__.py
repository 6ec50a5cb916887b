"""
Domain model, region catalogue and event helpers.
"""
from intel.models import (
    AnalysisResult,
    ConflictEvent,
    EventType,
    GroundingSource,
    MilitantGroup,
    MonitoredSource,
    Region,
    Severity,
    SourceCategory,
    Territory,
)
from intel.regions import REGIONS, SEVERITY_COLORS, get_region

__all__ = [
    "AnalysisResult",
    "ConflictEvent",
    "EventType",
    "GroundingSource",
    "MilitantGroup",
    "MonitoredSource",
    "Region",
    "Severity",
    "SourceCategory",
    "Territory",
    "REGIONS",
    "SEVERITY_COLORS",
    "get_region",
]
