"""Forward and reverse geocoding through a Nominatim service."""

from __future__ import annotations

import dataclasses
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from typing import Any, Sequence

import requests

from geoutil.cache import TTLCache
from geoutil.models import Geocoder, GeocoderConfig, Location, Point
from geoutil.ratelimit import RateLimiter

DEFAULT_NOMINATIM_URL = "https://nominatim.openstreetmap.org"

_DEFAULT_REQUESTS_PER_SEC = 1
_DEFAULT_TIMEOUT = 10.0
_CACHE_TTL = timedelta(hours=24)
_MAX_WORKERS = 10


class GeocodingError(RuntimeError):
    """Raised when the geocoding service gives no usable answer."""


class NominatimGeocoder(Geocoder):
    """Geocoder backed by an OpenStreetMap Nominatim service.

    Results are cached for a day and requests are rate limited. Zero values
    in ``config`` select one request per second and a ten second timeout.
    """

    def __init__(
        self,
        config: GeocoderConfig | None = None,
        base_url: str = DEFAULT_NOMINATIM_URL,
        session: requests.Session | None = None,
    ) -> None:
        config = dataclasses.replace(config) if config else GeocoderConfig()
        if not config.requests_per_sec:
            config.requests_per_sec = _DEFAULT_REQUESTS_PER_SEC
        if not config.timeout:
            config.timeout = _DEFAULT_TIMEOUT
        self.config = config
        self.base_url = base_url.rstrip("/")
        self._session = session if session is not None else requests.Session()
        self._limiter = RateLimiter(config.requests_per_sec, 1)
        self._cache = TTLCache(_CACHE_TTL)

    def _request(self, path: str, params: dict[str, str]) -> Any:
        self._limiter.wait(self.config.timeout)
        response = self._session.get(
            f"{self.base_url}/{path}",
            params=sorted(params.items()),
            headers={"User-Agent": self.config.user_agent},
            timeout=self.config.timeout,
        )
        with response:
            if response.status_code != 200:
                raise GeocodingError(f"HTTP error: {response.status_code}")
            try:
                return response.json()
            except ValueError as exc:
                raise GeocodingError(f"invalid response: {exc}") from exc

    def geocode(self, address: str) -> Point:
        """Return the coordinates of the best match for ``address``."""
        key = ("search", address)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        results = self._request(
            "search", {"q": address, "format": "json", "limit": "1"}
        )
        if not isinstance(results, list):
            raise GeocodingError("invalid response: expected a list")
        if not results:
            raise GeocodingError("address not found")

        first = results[0]
        if not isinstance(first, dict):
            raise GeocodingError("invalid response: malformed result")
        try:
            point = Point(lat=float(first.get("lat", "")), lon=float(first.get("lon", "")))
        except (TypeError, ValueError) as exc:
            raise GeocodingError(f"invalid coordinates: {exc}") from exc

        self._cache.set(key, point)
        return point

    def batch_geocode(self, addresses: Sequence[str]) -> list[Point]:
        """Geocode addresses concurrently, keeping their order."""
        if not addresses:
            return []
        with ThreadPoolExecutor(max_workers=_MAX_WORKERS) as pool:
            return list(pool.map(self.geocode, addresses))

    def reverse_geocode(self, point: Point) -> Location:
        """Return address details for ``point``."""
        lat, lon = f"{point.lat:f}", f"{point.lon:f}"
        key = ("reverse", lat, lon)
        cached = self._cache.get(key)
        if cached is not None:
            return dataclasses.replace(cached)

        data = self._request("reverse", {"lat": lat, "lon": lon, "format": "json"})
        if not isinstance(data, dict):
            raise GeocodingError("invalid response: expected an object")
        address = data.get("address") or {}
        if not isinstance(address, dict):
            raise GeocodingError("invalid response: malformed address")

        road = address.get("road", "")
        house = address.get("house_number", "")
        location = Location(
            country=address.get("country", ""),
            city=address.get("city", ""),
            address=f"{road} {house}",
            lat=point.lat,
            lon=point.lon,
        )
        self._cache.set(key, location)
        return dataclasses.replace(location)

    def batch_reverse_geocode(self, points: Sequence[Point]) -> list[Location]:
        """Reverse-geocode points concurrently, keeping their order."""
        if not points:
            return []
        with ThreadPoolExecutor(max_workers=_MAX_WORKERS) as pool:
            return list(pool.map(self.reverse_geocode, points))