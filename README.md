# geoutil

Geospatial helpers for Python:

- great-circle distances (Haversine) and symmetric distance matrices
- point-in-polygon tests (ray casting) and polygon filtering
- forward and reverse geocoding against a Nominatim service
- elevation lookups against an Open-Elevation service
- combined location lookups (address and elevation) for one point or many

The network clients rate-limit their requests and keep results in a TTL cache.
Batch calls run on a thread pool and return results in input order; if any
item fails, the exception of the first failing item in input order is raised.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Points and locations

`geoutil.models` holds the value types:

- `Point(lat, lon)`: a frozen dataclass of degrees.
- `Location`: a dataclass with `country`, `city`, `address`, `lat`, `lon`,
  `elevation` (whole metres) and `timezone`, all with empty or zero defaults.
- `GeocoderConfig(user_agent, requests_per_sec, timeout)`: settings for
  `NominatimGeocoder`; `timeout` is in seconds, and zero values pick the
  defaults.

## Distances

```python
from geoutil.models import Point
from geoutil.distance import distance_haversine, batch_distance

berlin = Point(lat=52.5200, lon=13.4050)
paris = Point(lat=48.8566, lon=2.3522)

km = distance_haversine(berlin, paris)     # about 878 km, Earth radius 6371 km

matrix = batch_distance([berlin, paris])   # distance_haversine by default
# matrix[i][j] == matrix[j][i], diagonal is 0.0
```

`batch_distance(points, distance_func)` accepts any function of two points and
calls it once per unordered pair.

## Polygons

```python
from geoutil.models import Point
from geoutil.geometry import is_point_in_polygon, filter_points_in_polygon

square = [Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0)]

is_point_in_polygon(Point(5, 5), square)      # True
filter_points_in_polygon([Point(5, 5), Point(20, 20)], square)
# [Point(lat=5, lon=5)]
```

A polygon with fewer than three vertices contains no points. The polygon is
closed automatically; do not repeat the first vertex.

## Geocoding

```python
from geoutil.models import GeocoderConfig, Point
from geoutil.geocoding import NominatimGeocoder

geocoder = NominatimGeocoder(GeocoderConfig(user_agent="my-app/1.0 (ops@example.com)"))

point = geocoder.geocode("Brandenburger Tor, Berlin")
location = geocoder.reverse_geocode(Point(52.5163, 13.3777))
points = geocoder.batch_geocode(["Paris", "Rome"])
locations = geocoder.batch_reverse_geocode([Point(48.8566, 2.3522)])
```

`NominatimGeocoder(config, base_url, session)` takes an optional base URL
(default `https://nominatim.openstreetmap.org`) and an optional
`requests.Session`. By default it sends at most one request per second and
uses a 10 second timeout, both for the HTTP request and for waiting on the
rate limiter. Results are cached for 24 hours. Batch calls use up to 10
threads.

`reverse_geocode` fills `country` and `city` from the service's answer and sets
`address` to the road and house number joined by a space.

A non-200 status, a body that is not JSON, an empty result list or unreadable
coordinates raise `GeocodingError`. Network errors from `requests` propagate
as they are, and `geoutil.ratelimit.RateLimitTimeout` is raised when a
request slot cannot be had within the timeout.

## Elevation

```python
from geoutil.models import Point
from geoutil.elevation import OpenElevationProvider

provider = OpenElevationProvider()           # 5 requests per second by default
metres = provider.get_elevation(Point(46.5197, 6.6323))
many = provider.batch_get_elevation([Point(0, 0), Point(27.9881, 86.9250)])
```

`OpenElevationProvider(requests_per_sec, base_url, session)` defaults to
`https://api.open-elevation.com/api/v1/lookup`. Elevations are rounded to
whole metres (halves away from zero) and cached for 30 days. Batch lookups use
up to 8 threads. The HTTP timeout is 10 seconds; waiting for the rate limiter
is allowed 5 seconds before `RateLimitTimeout` is raised.

A body that is not JSON, an empty result list or an unreadable value raise
`ElevationError`; network errors from `requests` propagate as they are.

## Full locations

```python
from geoutil.location import full_location, batch_full_location

loc = full_location(Point(52.5163, 13.3777), geocoder, provider)
loc.country, loc.city, loc.address, loc.elevation, loc.timezone

locs = batch_full_location([Point(52.5163, 13.3777)], geocoder, provider)
```

`batch_full_location` uses up to 20 threads.

## Your own services

`geoutil.models.Geocoder` and `geoutil.models.ElevationProvider` are abstract
base classes naming the methods the bundled clients provide.
`full_location` and `batch_full_location` only call `reverse_geocode` and
`get_elevation`, so any object with those methods can stand in.

## Caching and rate limiting

`geoutil.cache.TTLCache(ttl)` is a thread-safe cache whose entries expire
`ttl` seconds (or a `timedelta`) after they are set. It offers
`set(key, value)`, `get(key, default)`, `key in cache`, `len(cache)` (live
entries only) and `purge()`, which drops expired entries and returns how many
it removed. Expired entries are also swept out on a `set` at most once an hour.

`geoutil.ratelimit.RateLimiter(rate, burst)` is a token-bucket limiter that
starts full. `wait(timeout)` blocks until a token is available and returns the
seconds it waited; if that wait would exceed `timeout`, it raises
`RateLimitTimeout` at once without taking a token. A rate of `math.inf`
imposes no limit.

## What it does not do

- There is no timezone lookup: `full_location` always reports `"UTC"`.
- There is no command-line tool; the package is used as a library.
- Caches live in memory only and are not shared between processes.