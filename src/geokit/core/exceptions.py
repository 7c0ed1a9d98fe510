"""
Custom exceptions for the geokit package.

This module defines the exception hierarchy used throughout the geokit
package. Every fatal condition is raised as a GeoKitError subclass and
handled once, by the CLI entry point.
"""

from typing import Optional, Any, Dict


class GeoKitError(Exception):
    """Base exception for all geokit errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(GeoKitError):
    """Raised when the invocation or configuration is invalid."""
    pass


class FileOperationError(GeoKitError):
    """Raised when the input file cannot be read."""
    pass


class DecodeError(GeoKitError):
    """Raised when an input document is not the GeoJSON we expect."""
    pass


class UnsupportedGeometryError(DecodeError):
    """Raised when a feature carries a geometry other than Point or Polygon."""
    
    def __init__(self, message: str, geometry_type: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.geometry_type = geometry_type


class EncodeError(GeoKitError):
    """Raised when the output FeatureCollection cannot be serialized."""
    pass


class GeocodingError(GeoKitError):
    """Raised when the geocoding service fails or returns an unusable answer."""
    pass


class GeospatialError(GeoKitError):
    """Raised when a geometry cannot be turned into a coverable region."""
    pass
