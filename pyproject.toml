[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geoutil"
version = "0.1.0"
description = "Geospatial utilities: distances, point-in-polygon tests, geocoding and elevation lookups with caching and rate limiting."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["geo", "gis", "geocoding", "haversine", "elevation", "polygon", "nominatim", "rate-limit", "ttl-cache"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["geoutil"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
