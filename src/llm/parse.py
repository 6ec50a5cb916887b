"""
Parsing of freeform model answers into an AnalysisResult.

The model is asked for a prose summary followed by a JSON array of events, but
it is free to wrap the array in code fences, add trailing text or return
broken JSON. All extraction happens here so that switching to a structured
output mode later only touches this module.
"""

import json
import re
from typing import Any, Dict, List, Optional

from core.utils import debug, error, now_ms
from intel.models import AnalysisResult, ConflictEvent, GroundingSource

# First "[{" through the last "}]" in the text (greedy)
_EVENT_ARRAY_RE = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")
_ARRAY_START_RE = re.compile(r"\[\s*\{")
_CODE_FENCE_RE = re.compile(r"```json|```")


def extract_sources(grounding_chunks: Optional[List[Dict[str, Any]]]) -> List[GroundingSource]:
    """Map grounding chunks to sources, defaulting missing title/uri."""
    sources = []
    for chunk in grounding_chunks or []:
        web = (chunk or {}).get("web") or {}
        sources.append(
            GroundingSource(
                title=web.get("title") or "Source",
                uri=web.get("uri") or "#",
            )
        )
    return sources


def extract_event_array(text: str) -> List[Dict[str, Any]]:
    """
    Find and decode the embedded JSON event array.

    Returns:
        List of raw event objects. Empty if there is no array or it does not
        decode; decode failures are logged, never raised.
    """
    match = _EVENT_ARRAY_RE.search(text)
    if not match:
        if _ARRAY_START_RE.search(text):
            error("Failed to parse event JSON: unterminated event array")
        else:
            debug("[parse] No event array in response")
        return []

    try:
        parsed = json.loads(match.group())
    except json.JSONDecodeError as e:
        error(f"Failed to parse event JSON: {e}")
        return []

    if not isinstance(parsed, list):
        error(f"Failed to parse event JSON: expected array, got {type(parsed).__name__}")
        return []

    # Drop anything that is not an object
    return [item for item in parsed if isinstance(item, dict)]


def extract_summary(text: str) -> str:
    """Prose before the event array, without code fences."""
    head = _ARRAY_START_RE.split(text, maxsplit=1)[0]
    return _CODE_FENCE_RE.sub("", head).strip()


def parse_events(text: str, timestamp_ms: Optional[int] = None) -> List[ConflictEvent]:
    """Extract events, assigning ids unique within this batch."""
    stamp = now_ms() if timestamp_ms is None else timestamp_ms
    return [
        ConflictEvent.from_dict(raw, event_id=f"event-{idx}-{stamp}")
        for idx, raw in enumerate(extract_event_array(text))
    ]


def parse_response(text: Optional[str], grounding_chunks: Optional[List[Dict[str, Any]]] = None) -> AnalysisResult:
    """
    Turn a raw model answer into an AnalysisResult.

    Args:
        text: Model answer (prose plus embedded JSON array)
        grounding_chunks: Provider grounding chunks, [{"web": {"title", "uri"}}]

    Returns:
        AnalysisResult with summary, events and sources (never None)
    """
    text = text or ""
    return AnalysisResult(
        events=tuple(parse_events(text)),
        summary=extract_summary(text),
        sources=tuple(extract_sources(grounding_chunks)),
    )
