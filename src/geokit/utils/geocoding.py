"""
Google Geocoding API client.

Resolves a free-text address into candidate locations. The API key comes
from the GOOGLE_MAPS_API_KEY environment variable or the geokit config
file; it is never part of the source.
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

import requests
from pydantic import ValidationError as PydanticValidationError

from geokit.core.constants import API_KEY_ENV_VAR
from geokit.core.exceptions import ConfigurationError, GeocodingError
from geokit.schemas.config_models import GeocodingConfig
from geokit.utils.config_loader import ConfigLoader
from geokit.utils.validation import describe_validation_error

logger = logging.getLogger(__name__)


@dataclass
class GeocodeResult:
    """A single candidate location returned by the geocoder."""
    lat: float
    lng: float
    formatted_address: Optional[str] = None


class GoogleGeocoder:
    """Thin client for the Google Geocoding API."""
    
    def __init__(self, config: GeocodingConfig):
        self.config = config
    
    def _redact(self, text: str) -> str:
        # requests puts the full URL, key included, into its error messages
        return text.replace(self.config.api_key, "***")
    
    def geocode(self, address: str) -> List[GeocodeResult]:
        """
        Geocode an address.
        
        Args:
            address: Free-text address
            
        Returns:
            Candidate locations; empty when the service finds nothing
            
        Raises:
            GeocodingError: On transport failure or an error status from the service
        """
        params = {"address": address, "key": self.config.api_key}
        logger.info(f"Geocoding address: {address}")
        
        try:
            response = requests.get(self.config.endpoint, params=params, timeout=self.config.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise GeocodingError(f"failed geocoding: {self._redact(str(e))}")
        except ValueError as e:
            raise GeocodingError(f"failed geocoding: invalid response body: {e}")
        
        if not isinstance(payload, dict):
            raise GeocodingError("failed geocoding: unexpected response body")
        
        status = payload.get("status")
        if status == "ZERO_RESULTS":
            return []
        if status != "OK":
            raise GeocodingError(
                f"Geocoding API returned status {status}",
                details={"error_message": payload.get("error_message")} if payload.get("error_message") else None,
            )
        
        results = []
        for item in payload.get("results") or []:
            try:
                location = item["geometry"]["location"]
                results.append(GeocodeResult(
                    lat=float(location["lat"]),
                    lng=float(location["lng"]),
                    formatted_address=item.get("formatted_address"),
                ))
            except (KeyError, TypeError, ValueError) as e:
                raise GeocodingError(f"failed geocoding: malformed result: {e}")
        
        logger.debug(f"Geocoding API returned {len(results)} results")
        return results


def create_geocoder() -> GoogleGeocoder:
    """
    Build a geocoder from the environment and the geokit config file.
    
    Raises:
        ConfigurationError: If no API key is configured
    """
    settings = ConfigLoader.get_geocoding_settings()
    if not settings.get("api_key"):
        raise ConfigurationError(
            f"geocoding requires an API key: set {API_KEY_ENV_VAR} "
            f"or geocoding.api_key in {ConfigLoader.config_path()}"
        )
    
    try:
        config = GeocodingConfig(**settings)
    except PydanticValidationError as e:
        raise ConfigurationError(f"invalid geocoding configuration: {describe_validation_error(e)}")
    
    return GoogleGeocoder(config)
