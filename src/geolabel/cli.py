"""Command line entry point: place labels for a few cities and write SVG."""

from __future__ import annotations

__all__ = ["main"]

import argparse
import logging
import sys

from geolabel.orchestrator import PlacementOrchestrator
from geolabel.projection import WebMercatorProjector
from geolabel.render.constants import (
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from geolabel.render.svg import SvgRenderer
from geolabel.themes import THEMES


def _parse_pair(value: str) -> tuple[float, float]:
    try:
        a, b = (float(v) for v in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected two comma-separated numbers, got {value!r}"
        ) from None
    return a, b


def _parse_pin(value: str) -> tuple[str, tuple[float, float]]:
    city, sep, offset = value.rpartition("=")
    if not sep or not city:
        raise argparse.ArgumentTypeError(f"expected CITY=DX,DY, got {value!r}")
    return city, _parse_pair(offset)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geolabel",
        description="Place non-overlapping labels for cities and render them to SVG",
    )
    parser.add_argument(
        "--entry",
        "-e",
        action="append",
        default=[],
        metavar="CITY[=NAME]",
        help="Add a city, optionally with a name for its label (repeatable)",
    )
    parser.add_argument(
        "--pin",
        action="append",
        default=[],
        type=_parse_pin,
        metavar="CITY=DX,DY",
        help="Drag a city's label to a fixed pixel offset (repeatable)",
    )
    parser.add_argument(
        "--center",
        type=_parse_pair,
        default=DEFAULT_CENTER,
        metavar="LAT,LNG",
        help="Map center",
    )
    parser.add_argument("--zoom", type=float, default=DEFAULT_ZOOM, help="Zoom level")
    parser.add_argument("--width", type=int, default=VIEWPORT_WIDTH)
    parser.add_argument("--height", type=int, default=VIEWPORT_HEIGHT)
    parser.add_argument("--theme", choices=sorted(THEMES), default="light")
    parser.add_argument("--output", "-o", help="SVG file to write (default: stdout)")
    parser.add_argument(
        "--list-points", action="store_true", help="Print the known cities and exit"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        projector = WebMercatorProjector(
            center_lat=args.center[0],
            center_lng=args.center[1],
            zoom=args.zoom,
            width=args.width,
            height=args.height,
        )
    except ValueError as e:
        parser.error(str(e))

    renderer = SvgRenderer(args.width, args.height, THEMES[args.theme])
    orchestrator = PlacementOrchestrator(projector, renderer)

    if args.list_points:
        for name in orchestrator.catalog.names():
            print(name)
        return 0

    status = 0
    for entry in args.entry:
        city, _, name = entry.partition("=")
        city = city.strip()
        if city not in orchestrator.catalog:
            print(f"Unknown city: {city}", file=sys.stderr)
            status = 1
            continue
        orchestrator.add_entry(city, name)

    for city, (dx, dy) in args.pin:
        marker = orchestrator.registry.get(city)
        if marker is None:
            print(f"Cannot pin {city}: not on the map", file=sys.stderr)
            status = 1
            continue
        ax, ay = projector.project(marker.point.lat, marker.point.lng)
        orchestrator.drag_start(city, (ax + marker.offset[0], ay + marker.offset[1]))
        orchestrator.drag_end((ax + dx, ay + dy))

    if args.output:
        renderer.save(args.output)
    else:
        sys.stdout.write(renderer.as_svg())
    return status


if __name__ == "__main__":
    sys.exit(main())
