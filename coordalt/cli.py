"""Command line lookup of the altitude of one coordinate."""

from __future__ import annotations

import sys
from typing import Sequence

from coordalt.altitude import AltitudeError, Coord, _format_float

USAGE = (
    "usage: coordalt <COORDINATE>\n"
    '<COORDINATE>: <LATITUDE> <LONGITUDE> || "<LATITUDE>,<LONGITUDE>"'
)


def _parse_number(text: str) -> float:
    if text != text.strip() or "_" in text or not text:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)


def parse_coordinate(args: Sequence[str]) -> tuple[float, float]:
    """Parse '<lat> <lon>' or '<lat>,<lon>' arguments into a pair of floats."""
    if len(args) == 1:
        parts = args[0].split(",")
        if len(parts) < 2:
            raise ValueError("expected '<LATITUDE>,<LONGITUDE>'")
        latitude, longitude = parts[0], parts[1]
    elif len(args) == 2:
        latitude, longitude = args
    else:
        raise ValueError("expected one or two arguments")
    return _parse_number(latitude), _parse_number(longitude)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        latitude, longitude = parse_coordinate(args)
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        coord = Coord(latitude, longitude)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        coord.add_altitude()
    except AltitudeError:
        print(USAGE, file=sys.stderr)
        return 1
    print(
        f"altitude for ({_format_float(coord.latitude)};{_format_float(coord.longitude)})"
        f" is {_format_float(coord.altitude)}m"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())