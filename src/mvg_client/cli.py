"""Command-line helper for querying the MVG API."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

import aiohttp
from pydantic import ValidationError

from mvg_client.adapters.config import ClientConfig
from mvg_client.api import create_service
from mvg_client.application.services import MvgClientService
from mvg_client.domain.errors import MvgApiError
from mvg_client.domain.models import ApiRecord, DepartureInfo, Line, Location, Station

logger = logging.getLogger(__name__)


def _format_station(station: Station) -> str:
    products = ", ".join(station.products or [])
    return f"{station.name or '?'} ({station.place or '?'})  {station.id or '-'}  [{products}]"


def _format_line(line: Line) -> str:
    return f"{line.product or '?':<8} {line.name or '?':<6} #{line.line_number}"


def _format_departure(departure: DepartureInfo) -> str:
    when = departure.realtime_departure or departure.planned_departure
    time_str = when.strftime("%H:%M") if when else "--:--"
    delay = departure.delay_in_minutes
    delay_str = f" {delay:+d}" if delay else ""
    cancelled = " (cancelled)" if departure.cancelled else ""
    return (
        f"{time_str}{delay_str}  {departure.label or '?':<5} "
        f"{departure.destination or '?'}{cancelled}"
    )


def _format_location(location: Location) -> str:
    distance = (
        f"  {location.distance_in_meters} m" if location.distance_in_meters is not None else ""
    )
    return (
        f"{location.name or '?'} ({location.place or '?'})  "
        f"{location.global_id or '-'}  {location.type or ''}{distance}"
    )


def _format_item(item: Any) -> str:
    """Format a single result for text output."""
    if isinstance(item, Station):
        return _format_station(item)
    if isinstance(item, Line):
        return _format_line(item)
    if isinstance(item, DepartureInfo):
        return _format_departure(item)
    if isinstance(item, Location):
        return _format_location(item)
    return str(item)


def print_results(results: list[Any], as_json: bool = False, limit: int | None = None) -> None:
    """Print results as text lines or as a JSON array with upstream keys."""
    if limit is not None:
        results = results[:limit]

    if as_json:
        payload = [item.to_payload() if isinstance(item, ApiRecord) else item for item in results]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if not results:
        print("No results.", file=sys.stderr)
        return
    for item in results:
        print(f"  {_format_item(item)}")


async def run_command(service: MvgClientService, args: argparse.Namespace) -> list[Any]:
    """Dispatch a parsed command to the matching service operation."""
    if args.command == "stations":
        return await service.request_stations()
    if args.command == "global-ids":
        return await service.request_station_global_ids()
    if args.command == "lines":
        return await service.request_lines()
    if args.command == "departures":
        return await service.request_departures(args.global_id)
    if args.command == "search":
        return await service.find_location(args.query)
    if args.command == "nearby":
        return await service.find_nearby_location(args.latitude, args.longitude)
    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="MVG API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for a station
  mvg-client search "Karlsplatz"

  # Show upcoming departures
  mvg-client departures de:09162:1

  # Find stations near a coordinate
  mvg-client nearby 48.13951 11.56613
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Output as JSON")
    common.add_argument("--limit", type=int, default=None, help="Maximum number of results")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    subparsers.add_parser("stations", parents=[common], help="List all stations")
    subparsers.add_parser("global-ids", parents=[common], help="List all station global ids")
    subparsers.add_parser("lines", parents=[common], help="List all lines")

    departures_parser = subparsers.add_parser(
        "departures", parents=[common], help="Show departures for a station"
    )
    departures_parser.add_argument("global_id", help="Station global id (e.g., de:09162:1)")

    search_parser = subparsers.add_parser("search", parents=[common], help="Search locations")
    search_parser.add_argument("query", help="Free-text search query")

    nearby_parser = subparsers.add_parser(
        "nearby", parents=[common], help="Find stations near a coordinate"
    )
    nearby_parser.add_argument("latitude", type=float, help="Latitude (e.g., 48.13951)")
    nearby_parser.add_argument("longitude", type=float, help="Longitude (e.g., 11.56613)")

    return parser


async def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = ClientConfig()
        async with aiohttp.ClientSession() as session:
            service = create_service(session=session, config=config)
            results = await run_command(service, args)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1
    except MvgApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_results(results, as_json=args.json, limit=args.limit)
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
