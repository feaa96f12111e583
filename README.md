# coordalt

Look up the altitude (elevation above sea level) of points on Earth.

The package asks the open-elevation lookup service for elevations. It keeps
the answers in a JSON cache file in your user cache directory. A point that
is already in the cache is not looked up again.

The service rounds latitude and longitude to 6 decimal places. Cache lookups
match coordinates at that precision. The coordinates returned from a lookup
are the ones the service reports, so they are rounded too.

## Installation

```
pip install coordalt
```

## Command line

```
coordalt <LATITUDE> <LONGITUDE>
coordalt "<LATITUDE>,<LONGITUDE>"
```

Example:

```
$ coordalt 47.0745464 12.6938825
altitude for (47.0745464;12.6938825) is 3431m
```

Numbers are printed without a trailing `.0`.

The command exits with status 1 in these cases:

- The arguments are wrong or cannot be read as numbers. It prints usage help
  to standard error.
- The lookup fails. It prints usage help to standard error.
- The coordinate is out of range. It prints an `error:` line to standard
  error.

## Library

```python
from coordalt.altitude import Coord, fetch_altitude, add_altitude

# one coordinate
coord = Coord(34.324, 1.88832)
print(coord.fetch_altitude())      # a new Coord with its altitude, or None on failure

coord.add_altitude()               # fills in coord.altitude, raises AltitudeError on failure
print(coord.altitude)

# several coordinates at once
coords = [
    Coord.from_pair((58.2926289, 134.3025286)),
    Coord.from_pair((7.4894883, 80.8144869)),
    Coord(47.0745464, 12.6938825),
]
print(fetch_altitude(coords))      # a list of new Coord values
add_altitude(coords)               # sets the altitude of each one in place
```

`Coord(latitude, longitude, altitude=0.0)` is a dataclass. It stores each
value as a float. It raises `ValueError` in these cases:

- the latitude is outside -90..90
- the longitude is outside -180..180

`with_altitude(value)` returns a copy of a coordinate with the altitude you
give it.

### Result order

`fetch_altitude` returns the coordinates found in the cache first, then the
ones it fetched. The list is therefore not always in the order you passed.

`add_altitude` copies altitudes onto your coordinates by position in that
returned list. It raises `AltitudeError` if the service returns fewer results
than the number of coordinates you passed.

### How a lookup is made

A lookup first sends a GET request. If the encoded location list is longer
than 1024 bytes, or if the GET request fails, it sends a POST request instead.
Each request times out after 30 seconds. `AltitudeError` is raised in these
cases:

- the POST request fails
- the response cannot be parsed

### JSON

`dumps_coord` and `dumps_coords` serialize coordinates as compact JSON
objects. The objects have the keys `latitude`, `longitude` and `altitude`.

`loads_coord` and `loads_coords` read those objects back. They also accept
`elevation` in place of `altitude`. They raise `AltitudeError` in these
cases:

- the JSON is invalid
- a field is missing or not a number
- an object has both `altitude` and `elevation`
- a coordinate is out of range

`Coord.to_dict` and `Coord.from_dict` work with plain dictionaries in the same
format.

### Cache

`cache_path()` returns the location of the cache file, and creates its
directory if that is needed. The file is `cache.json` in the `coordalt` user
cache directory.

`load_cache()` reads the cache file. If the file is missing, cannot be read or
cannot be parsed, it returns an empty list. When it cannot parse the file, it
writes a message to standard error.

`save_cache(coords)` overwrites the file with the coordinates you pass. It
raises `AltitudeError` if the file cannot be written.

After a lookup, the fetched coordinates are added to the cache. The cache has
no expiry and no size limit.