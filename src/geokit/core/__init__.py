"""Core geokit components."""

from .base import BaseProcessor, ProcessingResult
from .exceptions import GeoKitError, ConfigurationError, DecodeError, GeocodingError
from .logging_setup import setup_logging, get_logger

__all__ = [
    'BaseProcessor',
    'ProcessingResult',
    'GeoKitError',
    'ConfigurationError',
    'DecodeError',
    'GeocodingError',
    'setup_logging',
    'get_logger',
]
