# File: src/geokit/cli/__init__.py
"""
Command-line interface for the geokit package.
"""

from geokit.cli.main import main

__all__ = ["main"]
