"""Package version information."""

__version__ = "1.0.0"
__author__ = "geokit contributors"
__description__ = "Cover addresses and GeoJSON geometries with S2 cells, emitted as GeoJSON."
