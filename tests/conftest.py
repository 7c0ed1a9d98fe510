# tests/conftest.py
"""
Pytest configuration and shared fixtures for geokit tests.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path

from geokit.utils.geocoding import GeocodeResult


# Googleplex, as returned by the geocoder
GOOGLEPLEX_ADDRESS = "1600 Amphitheatre Parkway"
GOOGLEPLEX_LNG = -122.0841
GOOGLEPLEX_LAT = 37.4220


class FakeGeocoder:
    """Stands in for GoogleGeocoder; returns canned results and records queries."""

    def __init__(self, results):
        self.results = results
        self.queries = []

    def geocode(self, address):
        self.queries.append(address)
        return list(self.results)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def square_ring():
    """Closed ring of a 0.1 degree square near Mountain View, [lng, lat] order."""
    return [
        [-122.15, 37.40],
        [-122.05, 37.40],
        [-122.05, 37.50],
        [-122.15, 37.50],
        [-122.15, 37.40],
    ]


@pytest.fixture
def polygon_feature(square_ring):
    return {
        "type": "Feature",
        "id": "square-1",
        "properties": {"name": "Test Square", "rank": 1},
        "geometry": {"type": "Polygon", "coordinates": [square_ring]},
    }


@pytest.fixture
def point_feature():
    return {
        "type": "Feature",
        "properties": {"name": "Googleplex"},
        "geometry": {"type": "Point", "coordinates": [GOOGLEPLEX_LNG, GOOGLEPLEX_LAT]},
    }


@pytest.fixture
def feature_collection(polygon_feature, point_feature):
    return {"type": "FeatureCollection", "features": [polygon_feature, point_feature]}


@pytest.fixture
def geojson_file(temp_dir, feature_collection):
    """Write the sample FeatureCollection to disk."""
    path = temp_dir / "input.geojson"
    path.write_text(json.dumps(feature_collection), encoding="utf-8")
    return path


@pytest.fixture
def polygon_file(temp_dir, polygon_feature):
    """FeatureCollection holding only the square polygon."""
    path = temp_dir / "square.geojson"
    path.write_text(
        json.dumps({"type": "FeatureCollection", "features": [polygon_feature]}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def make_geocoder():
    """Factory for fake geocoders returning the given results."""
    return FakeGeocoder


@pytest.fixture
def googleplex_geocoder():
    return FakeGeocoder([GeocodeResult(lat=GOOGLEPLEX_LAT, lng=GOOGLEPLEX_LNG)])


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
