"""
Command-line entry point for Route Visualization.

Usage:
    python -m routeviz data/telemetry.csv
    python -m routeviz data/telemetry.csv --zoom 11 --format geojson --output route.geojson
    python -m routeviz data/telemetry.csv --format csv --origin-lat 32.98 --origin-lon -96.75
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import load_config
from .errors import IngestionSchemaError
from .export import export_segments_csv
from .session import RouteSession
from .telemetry import build_route_payload, segments_to_geojson


def render(session: RouteSession, fmt: str) -> str:
    view = session.view
    if fmt == "geojson":
        return json.dumps(segments_to_geojson(view.segments), indent=2)
    if fmt == "csv":
        return export_segments_csv(view.segments)
    payload = build_route_payload(view.segments, session.center, view.zoom,
                                  len(session.route), session.max_speed)
    return json.dumps(payload, indent=2)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Build zoom-dependent, speed-colored route segments from telemetry CSV"
    )
    parser.add_argument("data_file", type=str, help="Path to telemetry CSV export")
    parser.add_argument("--zoom", type=int, default=None,
                        help="Map zoom level (default: configured default zoom)")
    parser.add_argument("--format", dest="fmt", choices=["json", "geojson", "csv"],
                        default="json", help="Output format (default: json)")
    parser.add_argument("--output", type=str, default=None,
                        help="Write output to this file instead of stdout")
    parser.add_argument("--origin-lat", type=float, default=None,
                        help="Reference latitude for the projection")
    parser.add_argument("--origin-lon", type=float, default=None,
                        help="Reference longitude for the projection")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.origin_lat is not None:
        config = replace(config, origin_latitude=args.origin_lat)
    if args.origin_lon is not None:
        config = replace(config, origin_longitude=args.origin_lon)

    data_file = Path(args.data_file)
    if not data_file.exists():
        print(f"Error: Data file not found: {data_file}", file=sys.stderr)
        return 1

    session = RouteSession(config)
    try:
        session.load_file(data_file, zoom=args.zoom)
    except IngestionSchemaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        # Unreadable or undecodable file, or a CSV pandas cannot tokenize
        print(f"Error: Failed to load telemetry: {e}", file=sys.stderr)
        return 1

    body = render(session, args.fmt)

    if args.output:
        Path(args.output).write_text(body, encoding="utf-8")
        print(f"Wrote {len(session.segments)} segments to {args.output}")
    else:
        print(body)

    return 0


if __name__ == "__main__":
    sys.exit(main())
