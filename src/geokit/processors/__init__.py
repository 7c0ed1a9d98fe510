"""
Processors for geokit.
"""

from .covering import CoveringProcessor

__all__ = ['CoveringProcessor']
