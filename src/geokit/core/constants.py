"""
Global constants for the geokit package.

This module contains constants used throughout the package including
S2 level limits, GeoJSON type names, geocoding defaults and logging
configuration.
"""

from pathlib import Path
from typing import Dict, FrozenSet


# ============================================================================
# S2 Covering Defaults
# ============================================================================

S2_MIN_LEVEL: int = 0
S2_MAX_LEVEL: int = 30

DEFAULT_MIN_LEVEL: int = 1
DEFAULT_MAX_LEVEL: int = 30

# Hard cap on the number of cells in a single covering
DEFAULT_MAX_CELLS: int = 100_000

# Segments per cell edge when approximating the geodesic edge in lng/lat
CELL_EDGE_SEGMENTS: int = 8

# Longest piece, in degrees of arc, of a polygon edge after densifying it along its great circle
POLYGON_EDGE_STEP: float = 0.25


# ============================================================================
# GeoJSON
# ============================================================================

FEATURE_COLLECTION_TYPE: str = "FeatureCollection"
FEATURE_TYPE: str = "Feature"

POINT_TYPE: str = "Point"
POLYGON_TYPE: str = "Polygon"

SUPPORTED_GEOMETRY_TYPES: FrozenSet[str] = frozenset({POINT_TYPE, POLYGON_TYPE})

# Label keys attached to generated cell features
CELL_TOKEN_LABEL: str = "s2CellToken"
CELL_LEVEL_LABEL: str = "s2Level"


# ============================================================================
# Geocoding
# ============================================================================

GOOGLE_GEOCODING_ENDPOINT: str = "https://maps.googleapis.com/maps/api/geocode/json"
DEFAULT_GEOCODING_TIMEOUT: float = 30.0

API_KEY_ENV_VAR: str = "GOOGLE_MAPS_API_KEY"
CONFIG_PATH_ENV_VAR: str = "GEOKIT_CONFIG"
DEFAULT_CONFIG_PATH: Path = Path.home() / ".geokit" / "config.yaml"


# ============================================================================
# Logging Configuration
# ============================================================================

# Log levels
LOG_LEVELS: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50
}

DEFAULT_LOG_LEVEL: str = "WARNING"
DEFAULT_LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ============================================================================
# Application Metadata
# ============================================================================

PACKAGE_NAME: str = "geokit"
