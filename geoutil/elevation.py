"""Terrain elevation lookups through an Open-Elevation service."""

from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from typing import Any, Sequence

import requests

from geoutil.cache import TTLCache
from geoutil.models import ElevationProvider, Point
from geoutil.ratelimit import RateLimiter

DEFAULT_ELEVATION_URL = "https://api.open-elevation.com/api/v1/lookup"

_DEFAULT_REQUESTS_PER_SEC = 5
_HTTP_TIMEOUT = 10.0
_LIMITER_TIMEOUT = 5.0
_CACHE_TTL = timedelta(days=30)
_MAX_WORKERS = 8


class ElevationError(RuntimeError):
    """Raised when the elevation service gives no usable answer."""


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class OpenElevationProvider(ElevationProvider):
    """Elevation provider backed by the Open-Elevation lookup API.

    Results are cached for thirty days and requests are rate limited.
    A ``requests_per_sec`` of zero selects the default of five.
    """

    def __init__(
        self,
        requests_per_sec: float = 0,
        base_url: str = DEFAULT_ELEVATION_URL,
        session: requests.Session | None = None,
    ) -> None:
        if not requests_per_sec:
            requests_per_sec = _DEFAULT_REQUESTS_PER_SEC
        self.requests_per_sec = requests_per_sec
        self.base_url = base_url
        self._session = session if session is not None else requests.Session()
        self._limiter = RateLimiter(requests_per_sec, 1)
        self._cache = TTLCache(_CACHE_TTL)

    def get_elevation(self, point: Point) -> int:
        """Return the elevation of ``point`` in whole metres."""
        lat, lon = f"{point.lat:f}", f"{point.lon:f}"
        key = ("elevation", lat, lon)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        self._limiter.wait(_LIMITER_TIMEOUT)

        body = f'{{"locations":[{{"latitude":{lat},"longitude":{lon}}}]}}'
        response = self._session.post(
            self.base_url,
            data=body.encode(),
            headers={"Content-Type": "application/json"},
            timeout=_HTTP_TIMEOUT,
        )
        with response:
            try:
                payload: Any = response.json()
            except ValueError as exc:
                raise ElevationError(f"invalid elevation response: {exc}") from exc

        if not isinstance(payload, dict):
            raise ElevationError("invalid elevation response: expected an object")
        results = payload.get("results") or []
        if not results:
            raise ElevationError("elevation not found")

        first = results[0]
        if not isinstance(first, dict):
            raise ElevationError("invalid elevation response: malformed result")
        raw = first.get("elevation")
        try:
            value = float(raw) if raw is not None else 0.0
        except (TypeError, ValueError) as exc:
            raise ElevationError(f"invalid elevation value: {raw!r}") from exc

        elevation = _round_half_away(value)
        self._cache.set(key, elevation)
        return elevation

    def batch_get_elevation(self, points: Sequence[Point]) -> list[int]:
        """Look up elevations concurrently, keeping the order of ``points``."""
        if not points:
            return []
        workers = min(_MAX_WORKERS, len(points))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.get_elevation, points))