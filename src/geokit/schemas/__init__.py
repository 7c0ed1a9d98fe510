"""Pydantic models for geokit configuration and GeoJSON documents."""

from .config_models import CoveringConfig, GeocodingConfig, InputMode, LogLevel
from .geojson import (
    Feature,
    FeatureCollection,
    PointGeometry,
    PolygonGeometry,
    AddressProperties,
    CellProperties,
    CellLabels,
)

__all__ = [
    'CoveringConfig',
    'GeocodingConfig',
    'InputMode',
    'LogLevel',
    'Feature',
    'FeatureCollection',
    'PointGeometry',
    'PolygonGeometry',
    'AddressProperties',
    'CellProperties',
    'CellLabels',
]
