"""Command line access to stations, one-off scans and line lookups."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from tas_lightning.adapters.config import AppConfig
from tas_lightning.adapters.web import parse_scan_request
from tas_lightning.domain.errors import LightningServiceError
from tas_lightning.main import build_services


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def run_command(args: argparse.Namespace, config: AppConfig) -> Any:
    """Run the selected subcommand and return its JSON-ready result."""
    async with aiohttp.ClientSession() as session:
        station_repo, scan_service, line_service = build_services(config, session)

        if args.command == "stations":
            return {"stations": [s.to_dict() for s in station_repo.list_stations()]}

        if args.command == "scan":
            params = {"includeIC": "true" if args.include_ic else "false"}
            if args.minutes is not None:
                params["minutes"] = str(args.minutes)
            if args.radius_km is not None:
                params["radiusKm"] = str(args.radius_km)
            request = parse_scan_request(params, config.default_minutes, config.default_radius_km)
            result = await scan_service.scan(request)
            return result.to_dict()

        bbox = {"xmin": args.xmin, "ymin": args.ymin, "xmax": args.xmax, "ymax": args.ymax}
        return await line_service.fetch_lines(bbox)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lightning proximity monitor for power stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s stations
  %(prog)s scan --minutes 30 --radius-km 25 --include-ic
  %(prog)s lines 144.5 -43.7 148.5 -39.5
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("stations", help="List monitored stations")

    scan_parser = subparsers.add_parser("scan", help="Scan all stations for nearby lightning")
    scan_parser.add_argument("--minutes", type=float, help="Length of the time window")
    scan_parser.add_argument("--radius-km", type=float, help="Search radius in kilometres")
    scan_parser.add_argument(
        "--include-ic", action="store_true", help="Include intracloud strikes"
    )

    lines_parser = subparsers.add_parser("lines", help="Fetch transmission lines in a bbox")
    for name in ("xmin", "ymin", "xmax", "ymax"):
        lines_parser.add_argument(name, type=float)

    return parser


def main() -> None:
    """CLI entry point."""
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        _print_json(asyncio.run(run_command(args, AppConfig())))
    except LightningServiceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
