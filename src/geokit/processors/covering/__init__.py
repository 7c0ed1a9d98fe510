"""S2 covering processor."""

from .processor import CoveringProcessor
from .resolver import resolve_input_features, geocode_address

__all__ = [
    'CoveringProcessor',
    'resolve_input_features',
    'geocode_address',
]
