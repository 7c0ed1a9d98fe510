"""Utility modules for geokit."""

from .s2_utils import (
    geometry_to_region,
    cover_region,
    cell_ring,
    cell_to_feature,
    cells_to_feature_collection,
)
from .geojson_utils import (
    decode_feature_collection,
    encode_feature_collection,
    read_geojson_file,
)
from .geocoding import GoogleGeocoder, GeocodeResult, create_geocoder

__all__ = [
    # S2 utilities
    'geometry_to_region',
    'cover_region',
    'cell_ring',
    'cell_to_feature',
    'cells_to_feature_collection',
    # GeoJSON utilities
    'decode_feature_collection',
    'encode_feature_collection',
    'read_geojson_file',
    # Geocoding
    'GoogleGeocoder',
    'GeocodeResult',
    'create_geocoder',
]
