"""
Nearby Plants — Interactive CLI
===============================
Thin wrapper around the nearplants library.

Usage:
    nearplants                      # interactive mode
    nearplants 40.0012 -75.0021     # single lookup

Settings are read from environment variables:
    NEARPLANTS_SOURCE               Path or URL of the plant CSV (ABG.csv)
    NEARPLANTS_RADIUS_M             Search radius in metres (100)
    NEARPLANTS_LIMIT                Maximum plants listed (10)
    NEARPLANTS_DELIMITER            Column delimiter (,)
    NEARPLANTS_LOG_LEVEL            stderr log level (WARNING)
"""

import os
import sys

from loguru import logger

from nearplants.client import NearbyPlants
from nearplants.config import Settings
from nearplants.exceptions import ConfigInvalid, NearPlantsError
from nearplants.models import GeoPoint, RankedRecord
from nearplants.sink import RecordingSink

_BANNER = """\
╔══════════════════════════════════════╗
║          Nearby Plants               ║
║  Position → Closest Plant Records    ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def parse_coordinates(lat_raw: str, lon_raw: str) -> GeoPoint:
    """
    Turn two strings into a GeoPoint.

    Raises ValueError if either is not a number or is out of range.
    """
    lat = float(lat_raw)
    lon = float(lon_raw)
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"latitude out of range: {lat}")
    if not -180.0 <= lon <= 180.0:
        raise ValueError(f"longitude out of range: {lon}")
    return GeoPoint(lat, lon)


def format_ranked(ranked: list[RankedRecord]) -> str:
    """Render a ranking as an aligned text table."""
    if not ranked:
        return "  (no plants in range)"
    lines = []
    for r in ranked:
        rec = r.record
        lines.append(
            f"  {r.distance_m:>9.1f} m  {rec.id:<10} {rec.label:<32} "
            f"{rec.genus} {rec.species or 'N/A'}"
        )
    return "\n".join(lines)


def _configure_logging() -> None:
    """
    Send log output to stderr at NEARPLANTS_LOG_LEVEL.

    Raises ConfigInvalid for a level loguru does not know; stderr
    logging stays enabled at WARNING in that case.
    """
    raw = os.environ.get("NEARPLANTS_LOG_LEVEL", "WARNING")
    logger.remove()
    try:
        logger.add(sys.stderr, level=raw.strip().upper())
    except ValueError:
        logger.add(sys.stderr, level="WARNING")
        raise ConfigInvalid("NEARPLANTS_LOG_LEVEL", raw) from None


def _run_interactive(client: NearbyPlants) -> None:
    print(_BANNER)
    print(
        f"Source: {client.settings.source}  "
        f"(radius {client.settings.radius_m:g} m, "
        f"limit {client.settings.limit})"
    )

    while True:
        try:
            lat_raw = input("\nLatitude:   ").strip()
            if lat_raw.lower() in ("q", "quit", "exit"):
                print("Bye!")
                break
            lon_raw = input("Longitude:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        try:
            here = parse_coordinates(lat_raw, lon_raw)
        except ValueError as exc:
            print(f"  ✗ {exc}")
            continue

        try:
            ranked = client.nearest(here)
        except NearPlantsError as exc:
            print(f"  ✗ Error: {exc}")
            continue

        print(f"  ✓ {len(ranked)} plant(s) nearby")
        print(format_ranked(ranked))


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    try:
        _configure_logging()
        settings = Settings.from_env()
    except ConfigInvalid as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    with NearbyPlants(settings, RecordingSink()) as client:
        if len(sys.argv) == 3:
            # Single-shot mode
            try:
                here = parse_coordinates(sys.argv[1], sys.argv[2])
            except ValueError as exc:
                print(f"Invalid coordinates: {exc}", file=sys.stderr)
                sys.exit(1)
            try:
                ranked = client.nearest(here)
            except NearPlantsError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                sys.exit(1)
            print(format_ranked(ranked))
        else:
            _run_interactive(client)


if __name__ == "__main__":
    main()
