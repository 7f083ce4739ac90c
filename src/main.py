"""
Subway Path - command line entry point.

Usage:
    python -m src.main path 강남역 삼성역
    python -m src.main lines
    python -m src.main stations --stations data/stations.csv --sections data/sections.csv
"""

import argparse
import logging
import sys
from pathlib import Path

from src.config import settings
from src.exceptions import SubwayException
from src.line import LineRepository, load_sections
from src.pathfinding import PathFinder
from src.station import StationRepository, load_stations

logger = logging.getLogger(__name__)


def load_network(
    stations_file: Path, sections_file: Path
) -> tuple[StationRepository, LineRepository]:
    """Build in-memory repositories from the network CSV files."""
    station_repository = StationRepository()
    line_repository = LineRepository()
    if stations_file.exists():
        load_stations(station_repository, stations_file)
    load_sections(line_repository, station_repository, sections_file)
    logger.info(
        "Loaded %d stations and %d lines",
        len(station_repository), len(line_repository),
    )
    return station_repository, line_repository


def format_path(path) -> str:
    """Format a path as its station walk followed by the total distance."""
    route = "→".join(station.name for station in path.stations)
    return f"{route} ({path.distance} km)"


def cmd_path(args, stations: StationRepository, lines: LineRepository) -> int:
    source = stations.find_by_name(args.source)
    target = stations.find_by_name(args.target)
    for name, station in ((args.source, source), (args.target, target)):
        if station is None:
            print(f"Error: Unknown station: {name}", file=sys.stderr)
            return 1

    path = PathFinder(lines).find_path(source, target)
    print(format_path(path))
    if args.verbose:
        for segment in path.segments:
            print(
                f"  {segment.up_station.name} → {segment.down_station.name}"
                f"  {segment.distance} km  [{segment.line}]"
            )
    return 0


def cmd_lines(args, stations: StationRepository, lines: LineRepository) -> int:
    for line in lines.find_all():
        route = "→".join(station.name for station in line.get_stations())
        print(f"{line.name} ({line.color}, {line.distance()} km): {route}")
    return 0


def cmd_stations(args, stations: StationRepository, lines: LineRepository) -> int:
    for station in stations.find_all():
        print(f"{station.id},{station.name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Subway Path - shortest routes across subway lines"
    )
    parser.add_argument(
        "--stations",
        type=Path,
        default=settings.STATIONS_FILE,
        help="Path to stations CSV",
    )
    parser.add_argument(
        "--sections",
        type=Path,
        default=settings.SECTIONS_FILE,
        help="Path to sections CSV",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    path_parser = subparsers.add_parser("path", help="Find the shortest path")
    path_parser.add_argument("source", help="Departure station name")
    path_parser.add_argument("target", help="Arrival station name")
    path_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show each segment"
    )
    path_parser.set_defaults(func=cmd_path)

    subparsers.add_parser("lines", help="List lines").set_defaults(func=cmd_lines)
    subparsers.add_parser("stations", help="List stations").set_defaults(func=cmd_stations)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=settings.LOG_FORMAT)

    if not args.sections.exists():
        print(f"Error: Sections file not found: {args.sections}", file=sys.stderr)
        return 1

    try:
        stations, lines = load_network(args.stations, args.sections)
        return args.func(args, stations, lines)
    except SubwayException as e:
        print(f"Error: {e.message} ({e.code})", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
