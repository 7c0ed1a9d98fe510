"""
Base classes for the geokit package.

This module provides the abstract processor interface and the standard
result object returned by processing operations.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional
import logging
from datetime import datetime
from dataclasses import dataclass, asdict


@dataclass
class ProcessingResult:
    """Standard result object for processing operations."""
    
    success: bool
    processed_count: int = 0
    cell_count: int = 0
    elapsed_time: float = 0.0
    message: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    
    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return asdict(self)


class BaseProcessor(ABC):
    """Abstract base class for all processors."""
    
    def __init__(self, config: Any, logger: Optional[logging.Logger] = None):
        """
        Initialize the processor.
        
        Args:
            config: Configuration model or dictionary
            logger: Optional logger instance
        """
        self.config = self._validate_config(config)
        self.logger = logger or self._setup_logger()
        self._start_time: Optional[datetime] = None
        
    def _setup_logger(self) -> logging.Logger:
        """Set up logger for this processor."""
        logger_name = f"geokit.{self.__class__.__name__}"
        return logging.getLogger(logger_name)
    
    @abstractmethod
    def _validate_config(self, config: Any) -> Any:
        """
        Validate and normalize configuration.
        
        Raises:
            ConfigurationError: If configuration is invalid
        """
        pass
    
    @abstractmethod
    def process(self) -> ProcessingResult:
        """
        Execute the main processing logic.
        
        Returns:
            ProcessingResult object with operation results
        """
        pass
    
    def _start_processing(self):
        """Mark the start of processing for timing."""
        self._start_time = datetime.now()
        self.logger.info(f"Starting {self.__class__.__name__} processing")
    
    def _finish_processing(self, result: ProcessingResult) -> ProcessingResult:
        """Mark the end of processing and calculate elapsed time."""
        if self._start_time:
            end_time = datetime.now()
            result.elapsed_time = (end_time - self._start_time).total_seconds()
        
        self.logger.info(f"Completed {self.__class__.__name__} processing:")
        self.logger.info(f"  Input features: {result.processed_count}")
        self.logger.info(f"  Cells: {result.cell_count}")
        self.logger.info(f"  Elapsed time: {result.elapsed_time:.2f}s")
        
        return result
