"""
Command-line situation report for a catalogued region.
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

# Load environment variables from .env file (if exists)
try:
    from dotenv import load_dotenv  # ty: ignore[unresolved-import]

    load_dotenv()
except ImportError:
    pass

from core.utils import error, warn
from intel.filters import filter_events, split_by_category, threat_level
from intel.models import AnalysisResult, ConflictEvent, EventType, Region, Severity, SourceCategory
from intel.regions import REGIONS, get_region
from llm.client import RegionAnalyzer, build_prompt, describe_error


def _format_event(event: ConflictEvent) -> str:
    def v(x):
        return getattr(x, "value", x)

    line = f"  [{str(v(event.severity)).upper()}] {v(event.type)} - {event.title}"
    if event.location_name:
        line += f" ({event.location_name})"
    if v(event.source_category) == SourceCategory.INDEPENDENT.value and event.source_alignment:
        line += f" <{event.source_alignment}>"
    return line


def print_report(region: Region, result: AnalysisResult, events: List[ConflictEvent]) -> None:
    mainstream, independent = split_by_category(events)
    print(f"{region.name} - threat level {threat_level(events)} - {len(events)} active")
    print()
    if result.summary:
        print(result.summary)
        print()
    for title, feed in (("Mainstream", mainstream), ("Independent", independent)):
        print(f"{title} ({len(feed)}):")
        for event in feed:
            print(_format_event(event))
        print()
    if result.sources:
        print(f"Sources ({len(result.sources)}):")
        for source in result.sources:
            print(f"  {source.title}: {source.uri}")


def main(
    region_id: str,
    as_json: bool = False,
    types: Optional[List[EventType]] = None,
    categories: Optional[List[SourceCategory]] = None,
    min_severity: Optional[Severity] = None,
    strict: Optional[bool] = None,
    print_prompt: bool = False,
    analyzer: Optional[RegionAnalyzer] = None,
) -> int:
    """Main entry point for a region report."""
    try:
        region = get_region(region_id)
    except ValueError as e:
        error(str(e))
        return 1

    if print_prompt:
        print(build_prompt(region))
        return 0

    analyzer = analyzer or RegionAnalyzer(strict=strict)
    if not analyzer.provider.is_available():
        error(f"{analyzer.provider.name} not available. Set GEMINI_API_KEY.")
        return 1

    try:
        result = asyncio.run(analyzer.analyze_region(region))
    except Exception as e:
        error(describe_error(e))
        return 2

    events = filter_events(result.events, types=types, categories=categories, min_severity=min_severity)
    if not events and result.events:
        warn("No events matched the current filters")

    if as_json:
        data = result.to_dict()
        data["events"] = [e.to_dict() for e in events]
        data["region"] = region.id
        print(json.dumps(data, indent=2, default=str))
    else:
        print_report(region, result, events)
    return 0


def cli(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the report."""
    parser = argparse.ArgumentParser(description="OSINT situation report for a conflict region")
    parser.add_argument("region", nargs="?", help="Region id (see --list-regions)")
    parser.add_argument("--list-regions", action="store_true", help="List catalogued regions")
    parser.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    parser.add_argument(
        "--type",
        action="append",
        choices=[t.value for t in EventType],
        help="Only show events of this type (repeatable)",
    )
    parser.add_argument(
        "--category",
        choices=[c.value for c in SourceCategory],
        help="Only show events from this feed",
    )
    parser.add_argument(
        "--min-severity",
        choices=[s.value for s in Severity],
        help="Only show events at or above this severity",
    )
    parser.add_argument("--strict", action="store_true", default=None, help="Drop events that fail validation")
    parser.add_argument("--print-prompt", action="store_true", help="Print the prompt and exit")

    args = parser.parse_args(argv)

    if args.list_regions:
        print(f"Available regions ({len(REGIONS)}):\n")
        for r in REGIONS:
            print(f"  {r.id} - {r.name} [{len(r.monitored_sources)} monitored sources]")
            print(f"    {r.description}\n")
        return 0

    if not args.region:
        parser.error("region is required (or use --list-regions)")

    return main(
        args.region,
        as_json=args.json,
        types=[EventType(t) for t in args.type] if args.type else None,
        categories=[SourceCategory(args.category)] if args.category else None,
        min_severity=Severity.from_string(args.min_severity) if args.min_severity else None,
        strict=args.strict,
        print_prompt=args.print_prompt,
    )


if __name__ == "__main__":
    sys.exit(cli())
