"""
GeoJSON reading and writing utilities.

Decoding types every feature's geometry once, at parse time, and reports
problems with the index of the offending feature.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union
import logging

from pydantic import ValidationError as PydanticValidationError

from geokit.core.constants import (
    FEATURE_COLLECTION_TYPE,
    FEATURE_TYPE,
    SUPPORTED_GEOMETRY_TYPES,
)
from geokit.core.exceptions import (
    DecodeError,
    EncodeError,
    FileOperationError,
    UnsupportedGeometryError,
)
from geokit.schemas.geojson import Feature, FeatureCollection
from geokit.utils.validation import describe_validation_error

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"non-finite number {name} is not valid JSON")


def read_geojson_file(path: Union[str, Path]) -> bytes:
    """
    Read the raw bytes of a GeoJSON file.
    
    Raises:
        FileOperationError: If the file cannot be read
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise FileOperationError(f"failed reading input file: {e}", details={"path": str(path)})
    
    logger.debug(f"Read {len(raw)} bytes from {path}")
    return raw


def decode_feature(item: Any, index: int) -> Feature:
    """
    Decode one feature of a FeatureCollection.
    
    Args:
        item: Parsed JSON value of the feature
        index: Position of the feature in the collection, used in errors
        
    Returns:
        Feature with a typed Point or Polygon geometry
        
    Raises:
        UnsupportedGeometryError: If the geometry type is not Point or Polygon
        DecodeError: If the feature does not have the expected shape
    """
    if not isinstance(item, dict):
        raise DecodeError(f"GeoJSON feature {index} must be an object, got {type(item).__name__}")
    
    if item.get("type") != FEATURE_TYPE:
        raise DecodeError(f"GeoJSON feature {index} unsupported type: {item.get('type')!r}")
    
    geometry = item.get("geometry")
    if not isinstance(geometry, dict):
        raise DecodeError(f"GeoJSON feature {index} has no geometry object")
    
    geometry_type = geometry.get("type")
    if geometry_type not in SUPPORTED_GEOMETRY_TYPES:
        raise UnsupportedGeometryError(
            f"GeoJSON feature {index} unsupported geometry {geometry_type!r}",
            geometry_type=geometry_type,
            details={"supported": sorted(SUPPORTED_GEOMETRY_TYPES)},
        )
    
    try:
        return Feature.model_validate(item)
    except PydanticValidationError as e:
        raise DecodeError(
            f"GeoJSON feature {index} failed decoding {geometry_type} geometry: {describe_validation_error(e)}"
        )


def decode_feature_collection(raw: Union[bytes, str]) -> FeatureCollection:
    """
    Decode a GeoJSON FeatureCollection document.
    
    Args:
        raw: JSON document as bytes or text
        
    Returns:
        FeatureCollection whose features carry typed geometries
        
    Raises:
        DecodeError: If the document is not valid JSON or not a FeatureCollection
        UnsupportedGeometryError: If any feature has an unsupported geometry
    """
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as e:
        raise DecodeError(f"json decode failed: {e}")
    
    if not isinstance(document, dict):
        raise DecodeError(f"GeoJSON document must be an object, got {type(document).__name__}")
    
    document_type = document.get("type")
    if document_type != FEATURE_COLLECTION_TYPE:
        raise DecodeError(
            f"GeoJSON document type unsupported: {document_type!r}",
            details={"expected": FEATURE_COLLECTION_TYPE},
        )
    
    items = document.get("features")
    if not isinstance(items, list):
        raise DecodeError("GeoJSON FeatureCollection must have a 'features' array")
    
    features = [decode_feature(item, i) for i, item in enumerate(items)]
    logger.debug(f"Decoded FeatureCollection with {len(features)} features")
    
    return FeatureCollection.model_validate({**document, "features": features})


def feature_collection_to_dict(collection: FeatureCollection) -> Dict[str, Any]:
    """Plain JSON-compatible dict for a FeatureCollection."""
    return collection.model_dump(mode='json')


def encode_feature_collection(collection: FeatureCollection) -> str:
    """
    Serialize a FeatureCollection to compact JSON.
    
    Raises:
        EncodeError: If the collection cannot be represented as JSON
    """
    try:
        return json.dumps(
            feature_collection_to_dict(collection),
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise EncodeError(f"failed encoding output FeatureCollection: {e}")


def merge_features(inputs: List[Feature], generated: List[Feature]) -> List[Feature]:
    """Input features first, in original order, then the generated ones."""
    return list(inputs) + list(generated)
