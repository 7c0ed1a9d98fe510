"""
Input resolution for the covering processor.

Produces the ordered list of input features from exactly one source:
a geocoded address or a GeoJSON FeatureCollection file.
"""

from typing import List, Optional
import logging

from geokit.core.exceptions import GeocodingError
from geokit.schemas.config_models import CoveringConfig, InputMode
from geokit.schemas.geojson import AddressProperties, Feature, PointGeometry
from geokit.utils.geocoding import GoogleGeocoder, create_geocoder
from geokit.utils.geojson_utils import decode_feature_collection, read_geojson_file

logger = logging.getLogger(__name__)


def geocode_address(address: str, geocoder: GoogleGeocoder) -> Feature:
    """
    Geocode an address into a single Point feature.
    
    Raises:
        GeocodingError: If the service does not return exactly one result
    """
    results = geocoder.geocode(address)
    if len(results) != 1:
        raise GeocodingError(
            f"expected one result from Geocoding API, received {len(results)}",
            details={"address": address},
        )
    
    result = results[0]
    logger.info(f"Geocoded {address!r} to lat={result.lat}, lng={result.lng}")
    return Feature.with_properties(
        PointGeometry(coordinates=(result.lng, result.lat)),
        AddressProperties(address=address),
    )


def resolve_input_features(config: CoveringConfig,
                           geocoder: Optional[GoogleGeocoder] = None) -> List[Feature]:
    """
    Resolve the input features for a covering run.
    
    Args:
        config: Covering configuration naming exactly one source
        geocoder: Geocoder to use in address mode; built from settings when omitted
        
    Returns:
        Input features in source order
    """
    if config.input_mode == InputMode.ADDRESS:
        return [geocode_address(config.address, geocoder or create_geocoder())]
    
    collection = decode_feature_collection(read_geojson_file(config.geojson))
    logger.info(f"Loaded {len(collection.features)} features from {config.geojson}")
    return collection.features
