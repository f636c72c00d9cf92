"""Point-in-polygon tests by ray casting."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence

from geoutil.models import Point


def is_point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Return whether ``point`` lies inside ``polygon``.

    Polygons with fewer than three vertices contain no points.
    """
    if len(polygon) < 3:
        return False

    inside = False
    # each edge runs from the previous vertex to the current one, closing the ring
    edges = pairwise([polygon[-1], *polygon])
    for prev, cur in edges:
        if (cur.lon > point.lon) != (prev.lon > point.lon):
            crossing = (prev.lat - cur.lat) * (point.lon - cur.lon) / (
                prev.lon - cur.lon
            ) + cur.lat
            if point.lat < crossing:
                inside = not inside
    return inside


def filter_points_in_polygon(
    points: Iterable[Point], polygon: Sequence[Point]
) -> list[Point]:
    """Return the points lying inside ``polygon``, in their original order."""
    return [p for p in points if is_point_in_polygon(p, polygon)]