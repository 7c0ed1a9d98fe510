# File: src/geokit/schemas/geojson.py
"""
GeoJSON models for the geokit package using Pydantic v2.

Only the subset of RFC 7946 the covering tool understands is modelled:
FeatureCollection, Feature, and a closed union of Point and Polygon
geometries discriminated on ``type``. Unknown members are kept so that
input features can be written back out unchanged.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from geokit.core.constants import CELL_LEVEL_LABEL, CELL_TOKEN_LABEL


def _json_number(v: Any) -> Any:
    # bool is an int subclass; neither it nor numeric strings are coordinates
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError(f"coordinate must be a number, got {type(v).__name__}")
    return v


Coordinate = Annotated[float, BeforeValidator(_json_number)]

# [longitude, latitude] with an optional altitude
Position = Union[Tuple[Coordinate, Coordinate], Tuple[Coordinate, Coordinate, Coordinate]]


class GeoJSONModel(BaseModel):
    """Base for GeoJSON objects; foreign members are preserved."""
    model_config = ConfigDict(extra='allow')


class PointGeometry(GeoJSONModel):
    type: Literal["Point"] = "Point"
    coordinates: Position
    
    @property
    def lng(self) -> float:
        return self.coordinates[0]
    
    @property
    def lat(self) -> float:
        return self.coordinates[1]


class PolygonGeometry(GeoJSONModel):
    type: Literal["Polygon"] = "Polygon"
    coordinates: List[List[Position]]
    
    @field_validator('coordinates')
    @classmethod
    def outer_ring_required(cls, v: List[List[Position]]) -> List[List[Position]]:
        if not v:
            raise ValueError("polygon has no rings")
        if len(v[0]) < 3:
            raise ValueError(f"outer ring needs at least 3 positions, got {len(v[0])}")
        return v
    
    @property
    def outer_ring(self) -> List[Position]:
        """The exterior ring; holes are ignored."""
        return self.coordinates[0]


Geometry = Annotated[Union[PointGeometry, PolygonGeometry], Field(discriminator='type')]


class Feature(GeoJSONModel):
    type: Literal["Feature"] = "Feature"
    properties: Optional[Dict[str, Any]] = None
    geometry: Geometry
    
    @classmethod
    def with_properties(cls, geometry: Union[PointGeometry, PolygonGeometry],
                        properties: BaseModel) -> "Feature":
        """Build a feature whose property bag comes from a typed model."""
        return cls(geometry=geometry, properties=properties.model_dump(by_alias=True))


class FeatureCollection(GeoJSONModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Feature] = Field(default_factory=list)


# ============================================================================
# Property bags written by geokit
# ============================================================================

class AddressProperties(BaseModel):
    """Properties of the synthetic feature produced by geocoding."""
    address: str


class CellLabels(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    
    s2_cell_token: str = Field(..., alias=CELL_TOKEN_LABEL)
    s2_level: str = Field(..., alias=CELL_LEVEL_LABEL)


class CellProperties(BaseModel):
    """Properties of a generated S2 cell feature."""
    entity_id: str
    labels: CellLabels
