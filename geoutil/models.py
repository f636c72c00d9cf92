"""Core value types and provider interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point:
    """A geographic coordinate in degrees."""

    lat: float
    lon: float


@dataclass
class Location:
    """Address and terrain details for a geographic point."""

    country: str = ""
    city: str = ""
    address: str = ""
    lat: float = 0.0
    lon: float = 0.0
    elevation: int = 0
    timezone: str = ""


@dataclass
class GeocoderConfig:
    """Settings for a geocoding service.

    A ``requests_per_sec`` or ``timeout`` of zero lets the service choose its
    own default. ``timeout`` is given in seconds.
    """

    user_agent: str = ""
    requests_per_sec: float = 0
    timeout: float = 0.0


class Geocoder(ABC):
    """Converts between addresses and coordinates."""

    @abstractmethod
    def geocode(self, address: str) -> Point:
        """Return the coordinates of a human-readable address."""

    @abstractmethod
    def reverse_geocode(self, point: Point) -> Location:
        """Return address details for a point."""

    @abstractmethod
    def batch_geocode(self, addresses: Sequence[str]) -> list[Point]:
        """Geocode many addresses, keeping their order."""

    @abstractmethod
    def batch_reverse_geocode(self, points: Sequence[Point]) -> list[Location]:
        """Reverse-geocode many points, keeping their order."""


class ElevationProvider(ABC):
    """Supplies terrain elevation for points."""

    @abstractmethod
    def get_elevation(self, point: Point) -> int:
        """Return the elevation of a point in metres."""

    @abstractmethod
    def batch_get_elevation(self, points: Sequence[Point]) -> list[int]:
        """Return elevations for many points, keeping their order."""