"""Combined address and elevation lookups."""

from __future__ import annotations

import dataclasses
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from geoutil.models import ElevationProvider, Geocoder, Location, Point

_MAX_WORKERS = 20


def full_location(
    point: Point, geocoder: Geocoder, elevation: ElevationProvider
) -> Location:
    """Return address details and elevation for ``point``.

    The timezone is always reported as ``"UTC"``.
    """
    location = geocoder.reverse_geocode(point)
    height = elevation.get_elevation(point)
    return dataclasses.replace(location, elevation=height, timezone="UTC")


def batch_full_location(
    points: Sequence[Point], geocoder: Geocoder, elevation: ElevationProvider
) -> list[Location]:
    """Run :func:`full_location` concurrently, keeping the order of ``points``."""
    if not points:
        return []
    with ThreadPoolExecutor(max_workers=_MAX_WORKERS) as pool:
        return list(
            pool.map(lambda p: full_location(p, geocoder, elevation), points)
        )