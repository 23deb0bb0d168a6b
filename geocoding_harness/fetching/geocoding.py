import logging, requests
from typing import Optional, Union
from pydantic import ValidationError
from .models.google_maps_geocoding_response import GMGeocodingPayload
from .response import GeocodingResponse
from .failures import ApiFailure, DecodeFailure, GeocodingFailure, TransportFailure
from ..caching.transient_cache import GeocodingCache, TransientCache
from ..settings import GeocodingSettings

logger = logging.getLogger(__name__)

GeocodingOutcome = Union[GeocodingResponse, GeocodingFailure]

class GoogleMapsGeocoder(requests.Session):
    """Single-attempt client for the Google Geocoding API.

    ``geocode`` and ``reverse_geocode`` return a ``GeocodingResponse`` or one
    of the failure values from ``failures``; nothing is raised across this
    boundary. Inputs are expected to be validated by the caller.
    """
    BASE_URL: str = "https://maps.googleapis.com/maps/api/geocode/json"
    HEADERS: dict[str, str] = {"Accept": "application/json"}
    SUCCESS_STATUSES: tuple[str, ...] = ('OK', 'ZERO_RESULTS',)

    def __init__(self, settings: GeocodingSettings, store: Optional[TransientCache] = None):
        super().__init__()
        self.settings = settings
        self.cache = GeocodingCache(settings.api_key, store)
        self.requests_made: int = 0
        self.cache_hits: int = 0

    def build_forward(self, address: str) -> dict[str, str]:
        return {"address": address.strip(), "key": self.settings.api_key}

    def build_reverse(self, latitude: float, longitude: float) -> dict[str, str]:
        return {"latlng": f"{latitude},{longitude}", "key": self.settings.api_key}

    def execute(self, params: dict[str, str]) -> Union[GMGeocodingPayload, GeocodingFailure]:
        query = params.get("address") or params.get("latlng")
        logger.debug("Requesting geocode for %r", query)
        self.requests_made += 1
        try:
            response = self.get(self.BASE_URL, params=params, headers=self.HEADERS, timeout=self.settings.timeout)
        except requests.RequestException as e:
            logger.warning("Geocoding request for %r failed: %s", query, e)
            return TransportFailure(message=f"Geocoding API request failed: {e}")

        try:
            data = response.json()
        except ValueError:
            logger.warning("Unparseable geocoding response (HTTP %s) for %r", response.status_code, query)
            return DecodeFailure(message="Failed to parse Geocoding API response", http_status=response.status_code)

        try:
            payload = GMGeocodingPayload.model_validate(data)
        except ValidationError as e:
            logger.warning("Geocoding response for %r does not match the expected shape: %s", query, e)
            return DecodeFailure(message=f"Failed to parse Geocoding API response: {e.error_count()} invalid field(s)",
                                 http_status=response.status_code)

        if payload.status not in self.SUCCESS_STATUSES:
            logger.warning("Geocoding API returned %s for %r", payload.status or '<no status>', query)
            return ApiFailure(message=f"Geocoding API returned error: {payload.status}",
                              status=payload.status, error_message=payload.error_message)

        return payload

    def __lookup(self, cache_key: str, params: dict[str, str]) -> GeocodingOutcome:
        if self.settings.enable_cache:
            cached = self.cache.get(cache_key)
            if cached is not None:
                self.cache_hits += 1
                return GeocodingResponse(cached)

        payload = self.execute(params)
        if not isinstance(payload, GMGeocodingPayload):
            return payload

        if self.settings.enable_cache:
            self.cache.put(cache_key, payload, self.settings.cache_expiration)
        return GeocodingResponse(payload)

    def geocode(self, address: str) -> GeocodingOutcome:
        return self.__lookup(self.cache.forward_key(address), self.build_forward(address))

    def reverse_geocode(self, latitude: float, longitude: float) -> GeocodingOutcome:
        return self.__lookup(self.cache.reverse_key(latitude, longitude), self.build_reverse(latitude, longitude))

    def clear_cache(self, identifier: Optional[str] = None) -> bool:
        """Drop one cached lookup by identifier (``"geocode:<address>"``, ``"reverse:<lat>_<lng>"``), or all of them."""
        if identifier is None:
            return self.cache.invalidate()
        return self.cache.invalidate(self.cache.key_for(identifier))
