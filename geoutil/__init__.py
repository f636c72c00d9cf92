"""Geospatial utilities: distances, polygons, geocoding and elevation lookups."""

__version__ = "0.1.0"