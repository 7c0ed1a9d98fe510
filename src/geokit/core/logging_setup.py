"""
Logging setup for the geokit package.

This module provides centralized logging configuration for all
geokit components. Console output goes to stderr because stdout
carries the GeoJSON document.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

from .constants import DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT, LOG_LEVELS, PACKAGE_NAME


class GeoKitFormatter(logging.Formatter):
    """Custom formatter for geokit logging."""
    
    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        super().__init__(fmt or DEFAULT_LOG_FORMAT, datefmt)


def setup_logging(level: Union[str, int] = DEFAULT_LOG_LEVEL,
                 log_file: Optional[Union[str, Path]] = None,
                 format_string: Optional[str] = None,
                 enable_console: bool = True) -> logging.Logger:
    """
    Set up logging for the geokit package.
    
    Args:
        level: Logging level (string or int)
        log_file: Optional path to log file
        format_string: Optional custom format string
        enable_console: Whether to enable console logging on stderr
        
    Returns:
        Configured logger instance
    """
    # Convert string level to int if needed
    if isinstance(level, str):
        level = LOG_LEVELS.get(level.upper(), logging.WARNING)
    
    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(level)
    
    # Clear any existing handlers
    logger.handlers.clear()
    
    formatter = GeoKitFormatter(format_string)
    
    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    # Prevent propagation to avoid duplicate messages
    logger.propagate = False
    
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific component.
    
    Args:
        name: Logger name (will be prefixed with 'geokit.')
        
    Returns:
        Logger instance
    """
    if not name.startswith(f'{PACKAGE_NAME}.'):
        name = f'{PACKAGE_NAME}.{name}'
    
    return logging.getLogger(name)
