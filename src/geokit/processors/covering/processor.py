# File: src/geokit/processors/covering/processor.py
"""
Covering processor: input features in, S2 cell features out.

Runs the whole pipeline for one invocation: resolve the input features,
build a region per geometry, compute its covering, project the cells to
GeoJSON and optionally merge the inputs in front.
"""

from typing import Any, List, Optional
import logging

from pydantic import ValidationError as PydanticValidationError
from s2sphere import CellId

from geokit.core.base import BaseProcessor, ProcessingResult
from geokit.core.exceptions import ConfigurationError
from geokit.schemas.config_models import CoveringConfig
from geokit.schemas.geojson import Feature, FeatureCollection
from geokit.utils.geocoding import GoogleGeocoder
from geokit.utils.geojson_utils import merge_features
from geokit.utils.s2_utils import cells_to_feature_collection, cover_region, geometry_to_region
from geokit.utils.validation import describe_validation_error
from .resolver import resolve_input_features


class CoveringProcessor(BaseProcessor):
    """
    Compute S2 cell coverings for the features of one input.
    
    After process() returns, ``input_features``, ``cell_ids`` and
    ``output`` hold the intermediate and final results.
    """
    
    def __init__(self, config: CoveringConfig, geocoder: Optional[GoogleGeocoder] = None,
                 logger: Optional[logging.Logger] = None):
        super().__init__(config, logger)
        self.covering_config: CoveringConfig = self.config
        self.geocoder = geocoder
        
        self.input_features: List[Feature] = []
        self.cell_ids: List[CellId] = []
        self.output: Optional[FeatureCollection] = None
    
    def _validate_config(self, config: Any) -> CoveringConfig:
        if isinstance(config, CoveringConfig):
            return config
        try:
            return CoveringConfig(**config)
        except PydanticValidationError as e:
            raise ConfigurationError(f"invalid covering configuration: {describe_validation_error(e)}")
    
    def cover_features(self, features: List[Feature]) -> List[CellId]:
        """Concatenate the coverings of every feature, in feature order."""
        config = self.covering_config
        cell_ids: List[CellId] = []
        
        for index, feature in enumerate(features):
            region = geometry_to_region(feature.geometry)
            covering = cover_region(
                region,
                config.min_level,
                config.max_level,
                interior=config.interior,
                max_cells=config.max_cells,
            )
            self.logger.debug(f"Feature {index} ({feature.geometry.type}): {len(covering)} cells")
            cell_ids.extend(covering)
        
        return cell_ids
    
    def process(self) -> ProcessingResult:
        self._start_processing()
        config = self.covering_config
        
        self.input_features = resolve_input_features(config, self.geocoder)
        self.cell_ids = self.cover_features(self.input_features)
        
        output = cells_to_feature_collection(self.cell_ids)
        if config.merge:
            output.features = merge_features(self.input_features, output.features)
        self.output = output
        
        result = ProcessingResult(
            success=True,
            processed_count=len(self.input_features),
            cell_count=len(self.cell_ids),
            message=f"Covered {len(self.input_features)} features with {len(self.cell_ids)} cells",
            metadata={
                "input_mode": config.input_mode.value,
                "interior": config.interior,
                "min_level": config.min_level,
                "max_level": config.max_level,
                "merged": config.merge,
            },
        )
        return self._finish_processing(result)
