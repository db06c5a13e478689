"""Command-line entrypoint for Mapty."""

from __future__ import annotations

import argparse

from mapty.core.geolocation import parse_location
from mapty.map.constants import DEFAULT_ZOOM


def _location_arg(raw: str) -> tuple[float, float]:
    try:
        return parse_location(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _zoom_arg(raw: str) -> int:
    try:
        zoom = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid zoom '{raw}'") from exc
    if not 0 <= zoom <= 19:
        raise argparse.ArgumentTypeError("Zoom must be within [0, 19]")
    return zoom


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mapty workout map")
    parser.add_argument(
        "--web-host",
        default="127.0.0.1",
        help="Host bind for the web UI",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=8088,
        help="Port for the web UI",
    )
    parser.add_argument(
        "--zoom",
        type=_zoom_arg,
        default=DEFAULT_ZOOM,
        help="Map zoom used when centering and when jumping to a workout",
    )
    parser.add_argument(
        "--debug-sim-location",
        type=_location_arg,
        default=None,
        metavar="LAT,LNG",
        help="Skip browser geolocation and start the map at this position "
        "(use --debug-sim-location=LAT,LNG for a negative latitude)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print map/form/list events as they happen",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    from mapty.ui.web_app import run_web_ui

    return run_web_ui(
        host=args.web_host,
        port=args.web_port,
        zoom=args.zoom,
        location=args.debug_sim_location,
        debug=args.debug,
    )


if __name__ == "__main__":
    raise SystemExit(main())
