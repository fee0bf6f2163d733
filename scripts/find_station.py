#!/usr/bin/env python3
"""Helper script to find MVG station global ids."""

import asyncio
import sys

import aiohttp

from mvg_client import DepartureInfo, Location, find_location, request_departures


def _print_location_info(location: Location) -> None:
    """Print location information."""
    print("\nFound station:")
    print(f"  ID: {location.global_id}")
    print(f"  Name: {location.name}")
    print(f"  Place: {location.place}")
    print(f"  Coordinates: {location.latitude}, {location.longitude}")
    print(f"  Transport types: {', '.join(location.transport_types or [])}")


def _print_sample_destinations(departures: list[DepartureInfo]) -> None:
    """Print sample destinations from departures."""
    print("\nSample destinations:")
    seen = set()
    for dep in departures:
        key = (dep.label, dep.destination)
        if key not in seen:
            print(f"  {dep.label} → {dep.destination}")
            seen.add(key)


async def find_station(query: str) -> None:
    """Find a station by name."""
    print(f"Searching for: {query}")

    async with aiohttp.ClientSession() as session:
        locations = await find_location(query, session=session)
        stations = [loc for loc in locations if loc.type == "STATION" and loc.global_id]
        if not stations:
            print(f"Station not found: {query}")
            sys.exit(1)

        station = stations[0]
        _print_location_info(station)

        print("\nFetching sample departures...")
        departures = await request_departures(station.global_id, session=session)
        if departures:
            _print_sample_destinations(departures[:10])


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python find_station.py <station_name>")
        print('Example: python find_station.py "Chiemgaustraße"')
        sys.exit(1)

    asyncio.run(find_station(sys.argv[1]))
