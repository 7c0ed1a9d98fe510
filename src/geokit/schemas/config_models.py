# File: src/geokit/schemas/config_models.py
"""
Configuration models for the geokit package using Pydantic v2.

This module defines the configuration schemas for a covering run and for
the geocoding client, providing type safety and validation for the
command-line options.
"""

from typing import Optional
from pathlib import Path
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic import ConfigDict

from geokit.core.constants import (
    S2_MIN_LEVEL,
    S2_MAX_LEVEL,
    DEFAULT_MIN_LEVEL,
    DEFAULT_MAX_LEVEL,
    DEFAULT_MAX_CELLS,
    GOOGLE_GEOCODING_ENDPOINT,
    DEFAULT_GEOCODING_TIMEOUT,
)


class BaseConfig(BaseModel):
    """Base configuration class with common settings."""
    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True
    )


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class InputMode(str, Enum):
    """Where the input geometry comes from."""
    ADDRESS = "address"
    GEOJSON = "geojson"


class CoveringConfig(BaseConfig):
    """Configuration for a single covering run."""
    
    # Input source (exactly one)
    address: Optional[str] = Field(None, description="Address to geocode to a point")
    geojson: Optional[Path] = Field(None, description="Path to a GeoJSON FeatureCollection file")
    
    # Covering options
    min_level: int = Field(DEFAULT_MIN_LEVEL, ge=S2_MIN_LEVEL, le=S2_MAX_LEVEL, description="Minimum S2 cell level")
    max_level: int = Field(DEFAULT_MAX_LEVEL, ge=S2_MIN_LEVEL, le=S2_MAX_LEVEL, description="Maximum S2 cell level")
    interior: bool = Field(False, description="Restrict covering to fully-contained cells")
    max_cells: int = Field(DEFAULT_MAX_CELLS, ge=1, le=DEFAULT_MAX_CELLS, description="Maximum number of cells per covering")
    
    # Output options
    merge: bool = Field(False, description="Prepend the input features to the output")
    
    @field_validator('address')
    @classmethod
    def blank_address_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v
    
    @field_validator('geojson', mode='before')
    @classmethod
    def blank_path_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
    
    @model_validator(mode='after')
    def check_source_and_levels(self):
        if (self.address is None) == (self.geojson is None):
            raise ValueError("must provide exactly one of --address or --geojson")
        if self.min_level > self.max_level:
            raise ValueError(
                f"min level ({self.min_level}) must not exceed max level ({self.max_level})"
            )
        return self
    
    @property
    def input_mode(self) -> InputMode:
        return InputMode.ADDRESS if self.address is not None else InputMode.GEOJSON


class GeocodingConfig(BaseConfig):
    """Configuration for the Google Geocoding API client."""
    
    api_key: str = Field(..., min_length=1, repr=False, description="Google Maps Platform API key")
    endpoint: str = Field(GOOGLE_GEOCODING_ENDPOINT, description="Geocoding API endpoint")
    timeout: float = Field(DEFAULT_GEOCODING_TIMEOUT, gt=0, description="Request timeout in seconds")
