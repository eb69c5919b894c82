"""Command line client for Skånetrafiken stations and departures."""

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Any

from skane_departures.adapters.config import AppConfig
from skane_departures.adapters.provider_registry import ProviderRegistry
from skane_departures.adapters.skanetrafiken_api.rt90 import (
    GridPoint,
    geodetic_to_grid,
    grid_to_geodetic,
)
from skane_departures.application.services import TransitQueryService
from skane_departures.domain.exceptions import TransitError
from skane_departures.domain.models import Departure, Location, NetworkId

logger = logging.getLogger(__name__)


def _location_to_dict(location: Location) -> dict[str, Any]:
    return {
        "id": location.id,
        "type": location.type.name,
        "name": location.name,
        "place": location.place,
        "latitude": location.coord.latitude if location.coord else None,
        "longitude": location.coord.longitude if location.coord else None,
    }


def _departure_to_dict(departure: Departure) -> dict[str, Any]:
    return {
        "line": departure.line.label,
        "product": departure.line.product.name,
        "destination": departure.destination.name if departure.destination else None,
        "planned_time": departure.planned_time.isoformat(),
        "predicted_time": departure.predicted_time.isoformat()
        if departure.predicted_time
        else None,
        "position": str(departure.position) if departure.position else None,
        "message": departure.message,
    }


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _print_locations(locations: list[Location], empty_message: str) -> None:
    if not locations:
        print(empty_message, file=sys.stderr)
        sys.exit(1)
    print(f"\nFound {len(locations)} station(s):\n")
    for location in locations:
        print(f"  {location.name or 'Unknown'}")
        print(f"    ID: {location.id or '-'}")
        if location.coord:
            coord = location.coord
            print(f"    Coordinates: {coord.latitude:.6f}, {coord.longitude:.6f}")
        print()


def _print_departures(station_id: str, departures: tuple[Departure, ...]) -> None:
    if not departures:
        print(f"No departures for station {station_id}.")
        return
    for departure in departures:
        clock = departure.time.strftime("%H:%M")
        delay = departure.delay
        delay_text = f" ({int(delay.total_seconds() // 60):+d})" if delay else ""
        position = f" [{departure.position}]" if departure.position else ""
        towards = departure.destination.name if departure.destination else ""
        print(f"  {clock}{delay_text}  {departure.line.label:<16} {towards}{position}")
        if departure.message:
            print(f"         ! {departure.message}")


def _parse_at(value: str) -> datetime:
    try:
        return datetime.strptime(value, "%Y-%m-%d %H:%M")
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected 'YYYY-MM-DD HH:MM', got '{value}'") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Skånetrafiken stations and departures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stations
  skane-departures suggest "Malmö C"

  # Stations near a position
  skane-departures nearby 55.6090 13.0002 --radius 500

  # Departures for a station
  skane-departures departures 80000 --limit 10

  # Convert coordinates
  skane-departures convert to-grid 55.6090 13.0002
  skane-departures convert to-wgs84 6167946 1323245
        """,
    )
    parser.add_argument(
        "--network",
        default=NetworkId.SKANETRAFIKEN.value,
        choices=[network.value for network in NetworkId],
        help="Network to query",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    suggest_parser = subparsers.add_parser("suggest", help="Search for stations by name")
    suggest_parser.add_argument("query", help="Station name to search for")
    suggest_parser.add_argument("--limit", type=int, default=10, help="Maximum results")
    suggest_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearby_parser = subparsers.add_parser("nearby", help="Find stations near a position")
    nearby_parser.add_argument("latitude", type=float, help="WGS84 latitude")
    nearby_parser.add_argument("longitude", type=float, help="WGS84 longitude")
    nearby_parser.add_argument("--radius", type=int, default=0, help="Radius in meters")
    nearby_parser.add_argument("--limit", type=int, default=10, help="Maximum results")
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Show departures")
    departures_parser.add_argument("station_id", help="Station ID (e.g., 80000)")
    departures_parser.add_argument(
        "--at", type=_parse_at, default=None, help="Local time 'YYYY-MM-DD HH:MM'"
    )
    departures_parser.add_argument("--limit", type=int, default=20, help="Maximum results")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    convert_parser = subparsers.add_parser("convert", help="Convert RT90 and WGS84")
    convert_sub = convert_parser.add_subparsers(dest="direction")
    to_grid = convert_sub.add_parser("to-grid", help="WGS84 to RT90 2.5 gon V")
    to_grid.add_argument("latitude", type=float)
    to_grid.add_argument("longitude", type=float)
    to_wgs84 = convert_sub.add_parser("to-wgs84", help="RT90 2.5 gon V to WGS84")
    to_wgs84.add_argument("x", type=float, help="Northing (X)")
    to_wgs84.add_argument("y", type=float, help="Easting (Y)")

    return parser


def _run_convert(args: argparse.Namespace) -> None:
    if args.direction == "to-grid":
        grid = geodetic_to_grid(args.latitude, args.longitude)
        print(f"X={grid.northing:.3f} Y={grid.easting:.3f}")
    elif args.direction == "to-wgs84":
        latitude, longitude = grid_to_geodetic(GridPoint(northing=args.x, easting=args.y))
        print(f"{latitude:.7f}, {longitude:.7f}")
    else:
        print("Specify a direction: to-grid or to-wgs84", file=sys.stderr)
        sys.exit(1)


def run(args: argparse.Namespace, config: AppConfig) -> None:
    """Execute a parsed command."""
    if args.command == "convert":
        _run_convert(args)
        return

    service = TransitQueryService(ProviderRegistry(config).get(args.network))

    if args.command == "suggest":
        stations = service.suggest_stations(args.query, limit=args.limit)
        if args.json:
            _print_json([_location_to_dict(s) for s in stations])
        else:
            _print_locations(stations, f"No stations found for '{args.query}'")

    elif args.command == "nearby":
        stations = service.nearest_stations(
            args.latitude, args.longitude, max_distance=args.radius, limit=args.limit
        )
        if args.json:
            _print_json([_location_to_dict(s) for s in stations])
        else:
            _print_locations(stations, "No stations found nearby")

    elif args.command == "departures":
        try:
            group = service.departures(args.station_id, time=args.at, limit=args.limit)
        except LookupError as e:
            print(str(e), file=sys.stderr)
            sys.exit(1)
        if args.json:
            _print_json([_departure_to_dict(d) for d in group.departures])
        else:
            _print_departures(args.station_id, group.departures)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        run(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except TransitError as e:
        logger.debug("Query failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
