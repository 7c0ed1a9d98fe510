"""
geokit - S2 cell coverings for addresses and GeoJSON geometries.

Converts a geocoded address or a GeoJSON FeatureCollection into the set of
S2 cells covering it, emitted as a GeoJSON FeatureCollection.
"""

from .__version__ import __version__, __author__, __description__

# Core imports
from .core.base import BaseProcessor, ProcessingResult
from .core.exceptions import (
    GeoKitError,
    ConfigurationError,
    FileOperationError,
    DecodeError,
    UnsupportedGeometryError,
    EncodeError,
    GeocodingError,
    GeospatialError,
)

# Configuration and GeoJSON models
from .schemas.config_models import CoveringConfig, GeocodingConfig
from .schemas.geojson import Feature, FeatureCollection, PointGeometry, PolygonGeometry

__all__ = [
    # Version info
    '__version__',
    '__author__',
    '__description__',
    
    # Core classes
    'BaseProcessor',
    'ProcessingResult',
    
    # Exceptions
    'GeoKitError',
    'ConfigurationError',
    'FileOperationError',
    'DecodeError',
    'UnsupportedGeometryError',
    'EncodeError',
    'GeocodingError',
    'GeospatialError',
    
    # Models
    'CoveringConfig',
    'GeocodingConfig',
    'Feature',
    'FeatureCollection',
    'PointGeometry',
    'PolygonGeometry',
]
