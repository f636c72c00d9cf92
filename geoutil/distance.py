"""Great-circle distances between points."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from geoutil.models import Point

EARTH_RADIUS_KM = 6371.0


def distance_haversine(p1: Point, p2: Point) -> float:
    """Return the great-circle distance between two points in kilometres."""
    phi1 = math.radians(p1.lat)
    phi2 = math.radians(p2.lat)
    d_phi = math.radians(p2.lat - p1.lat)
    d_lambda = math.radians(p2.lon - p1.lon)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def batch_distance(
    points: Sequence[Point],
    distance_func: Callable[[Point, Point], float] = distance_haversine,
) -> list[list[float]]:
    """Return the symmetric matrix of distances between every pair of points.

    ``distance_func`` is evaluated once per unordered pair; the diagonal is 0.
    """
    n = len(points)
    matrix = [[0.0] * n for _ in range(n)]
    for i, p1 in enumerate(points):
        for j in range(i + 1, n):
            dist = distance_func(p1, points[j])
            matrix[i][j] = dist
            matrix[j][i] = dist
    return matrix