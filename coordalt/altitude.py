"""Altitude lookup for geographical coordinates, with a local JSON cache.

Latitude and longitude values are rounded to 6 decimal places by the
elevation service, and cached entries are matched at that precision.
"""

from __future__ import annotations

import json
import math
import sys
from dataclasses import dataclass, replace
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable, MutableSequence, Sequence

import platformdirs
import requests

API_URL = "https://api.open-elevation.com/api/v1/lookup"
CACHE_DIR_NAME = "coordalt"
CACHE_FILE_NAME = "cache.json"
MAX_GET_FORM_BYTES = 1024
REQUEST_TIMEOUT = 30.0


class AltitudeError(Exception):
    """Raised when altitude data cannot be fetched, parsed or stored."""


def _format_float(value: float) -> str:
    """Format a float in plain decimal notation, dropping a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _round6(value: float) -> float:
    """Round to 6 decimal places, halves away from zero."""
    scaled = value * 1_000_000.0
    magnitude = abs(scaled)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, scaled) / 1_000_000.0


def _as_number(data: dict, key: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise AltitudeError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


@dataclass
class Coord:
    """A geographical coordinate of planet Earth with its elevation."""

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0

    def __post_init__(self) -> None:
        self.latitude = float(self.latitude)
        self.longitude = float(self.longitude)
        self.altitude = float(self.altitude)
        if not (-90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0):
            raise ValueError(
                f"coordinate out of range: latitude {self.latitude}, longitude {self.longitude}"
            )

    def with_altitude(self, altitude: float) -> Coord:
        """Return a copy of this coordinate with the given altitude."""
        return replace(self, altitude=float(altitude))

    def _form(self) -> str:
        return f"{_format_float(self.latitude)},{_format_float(self.longitude)}"

    def fetch_altitude(self) -> Coord | None:
        """Return a copy with the altitude fetched, or None if that fails."""
        try:
            fetched = fetch_altitude([self])
        except AltitudeError:
            return None
        return fetched[0] if fetched else None

    def add_altitude(self) -> None:
        """Fetch the altitude and store it on this coordinate."""
        batch = [replace(self)]
        add_altitude(batch)
        self.altitude = batch[0].altitude

    def to_dict(self) -> dict[str, float]:
        """Return the coordinate as a JSON-ready mapping."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude": self.altitude,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Coord:
        """Build a coordinate from a mapping; 'elevation' is accepted for 'altitude'."""
        if not isinstance(data, dict):
            raise AltitudeError(f"expected an object, got {data!r}")
        if "altitude" in data and "elevation" in data:
            raise AltitudeError("duplicate field 'altitude'")
        altitude_key = "elevation" if "elevation" in data else "altitude"
        for key in ("latitude", "longitude", altitude_key):
            if key not in data:
                raise AltitudeError(f"missing field {key!r}")
        try:
            return cls(
                _as_number(data, "latitude"),
                _as_number(data, "longitude"),
                _as_number(data, altitude_key),
            )
        except ValueError as exc:
            raise AltitudeError(str(exc)) from exc

    @classmethod
    def from_pair(cls, pair: Iterable[float]) -> Coord:
        """Build a coordinate from a (latitude, longitude) pair."""
        latitude, longitude = pair
        return cls(latitude, longitude)


def dumps_coord(coord: Coord) -> str:
    """Serialize one coordinate to compact JSON."""
    return json.dumps(coord.to_dict(), separators=(",", ":"))


def dumps_coords(coords: Iterable[Coord]) -> str:
    """Serialize coordinates to a compact JSON array."""
    return json.dumps([coord.to_dict() for coord in coords], separators=(",", ":"))


def _loads_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise AltitudeError(f"invalid JSON: {exc}") from exc


def loads_coord(text: str) -> Coord:
    """Parse one coordinate from JSON."""
    return Coord.from_dict(_loads_json(text))


def loads_coords(text: str) -> list[Coord]:
    """Parse a JSON array of coordinates."""
    data = _loads_json(text)
    if not isinstance(data, list):
        raise AltitudeError(f"expected an array, got {type(data).__name__}")
    return [Coord.from_dict(item) for item in data]


def cache_path() -> Path:
    """Return the cache file path, creating its directory if needed."""
    cache_dir = Path(platformdirs.user_cache_path(CACHE_DIR_NAME, appauthor=False))
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir / CACHE_FILE_NAME


def load_cache() -> list[Coord]:
    """Load cached coordinates; any read or parse failure gives an empty list."""
    try:
        content = cache_path().read_text(encoding="utf-8")
    except OSError:
        content = ""
    try:
        return loads_coords(content)
    except AltitudeError as exc:
        print(f"parse error: {exc}", file=sys.stderr)
        return []


def save_cache(coords: Iterable[Coord]) -> None:
    """Write the given coordinates to the cache file."""
    data = dumps_coords(coords)
    try:
        cache_path().write_text(data, encoding="utf-8")
    except OSError as exc:
        raise AltitudeError(f"cannot write cache: {exc}") from exc


def _fetch_get(coords: Sequence[Coord]) -> str | None:
    form = "|".join(coord._form() for coord in coords)
    if len(form.encode("utf-8")) > MAX_GET_FORM_BYTES:
        return None
    try:
        response = requests.get(API_URL, params={"locations": form}, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as exc:
        print(f"fetch error: {exc!r}", file=sys.stderr)
        return None
    return response.text


def _fetch_post(coords: Sequence[Coord]) -> str:
    body = f'{{"locations":{dumps_coords(coords)}}}'
    try:
        response = requests.post(
            API_URL,
            data=body.encode("utf-8"),
            headers={"Accept": "application/json", "Content-Type": "application/json"},
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        print(f"fetch error: {exc!r}", file=sys.stderr)
        raise AltitudeError(f"fetch failed: {exc}") from exc
    return response.text


def _parse_results(text: str) -> list[Coord]:
    try:
        data = _loads_json(text)
        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise AltitudeError("response has no 'results' array")
        return [Coord.from_dict(item) for item in data["results"]]
    except AltitudeError as exc:
        print(f"parse error: {exc}", file=sys.stderr)
        raise


def fetch_altitude(coords: Iterable[Coord]) -> list[Coord]:
    """Return coordinates with altitude: cached matches first, then fetched ones."""
    cached = load_cache()
    cached_needed: list[Coord] = []
    to_fetch: list[Coord] = []
    for coord in coords:
        latitude = _round6(coord.latitude)
        longitude = _round6(coord.longitude)
        hit = next(
            (c for c in cached if c.latitude == latitude and c.longitude == longitude),
            None,
        )
        if hit is not None:
            cached_needed.append(replace(hit))
        else:
            to_fetch.append(coord)

    if not to_fetch:
        return cached_needed

    text = _fetch_get(to_fetch)
    if text is None:
        text = _fetch_post(to_fetch)
    fetched = _parse_results(text)

    save_cache([*cached, *fetched])
    return cached_needed + fetched


def add_altitude(coords: MutableSequence[Coord]) -> None:
    """Fetch altitudes and store them on the given coordinates in place."""
    with_altitude = fetch_altitude(coords)
    if len(with_altitude) < len(coords):
        raise AltitudeError(
            f"expected {len(coords)} results, got {len(with_altitude)}"
        )
    for coord, source in zip(coords, with_altitude):
        coord.altitude = source.altitude