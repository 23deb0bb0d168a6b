import os
from typing import ClassVar, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

MIN_CACHE_EXPIRATION: int = 300

class GeocodingSettings(BaseModel):
    """Explicit configuration handed to the client; nothing is read from globals afterwards."""
    model_config = ConfigDict(frozen=True)

    API_KEY_ENV: ClassVar[str] = 'GOOGLE_MAPS_API_KEY'
    ENABLE_CACHE_ENV: ClassVar[str] = 'GOOGLE_GEOCODING_ENABLE_CACHE'
    CACHE_DURATION_ENV: ClassVar[str] = 'GOOGLE_GEOCODING_CACHE_DURATION'
    TIMEOUT_ENV: ClassVar[str] = 'GOOGLE_GEOCODING_TIMEOUT'

    api_key: str
    enable_cache: bool = True
    cache_expiration: int = 86400
    timeout: float = 15.0

    @field_validator('api_key')
    @classmethod
    def _api_key_present(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Google Maps API Key is missing. Set it in the environment variables.")
        return value

    @field_validator('cache_expiration')
    @classmethod
    def _cache_expiration_floor(cls, value: int) -> int:
        if value < MIN_CACHE_EXPIRATION:
            raise ValueError(f"Cache duration must be at least {MIN_CACHE_EXPIRATION} seconds, got {value}")
        return value

    @field_validator('timeout')
    @classmethod
    def _timeout_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"Timeout must be positive, got {value}")
        return value

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'GeocodingSettings':
        load_dotenv(dotenv_path)
        api_key = os.getenv(cls.API_KEY_ENV)
        if not api_key:
            raise ValueError("Google Maps API Key is missing. Set it in the environment variables.")

        values: dict[str, object] = {'api_key': api_key}
        enable_cache = os.getenv(cls.ENABLE_CACHE_ENV)
        if enable_cache is not None:
            values['enable_cache'] = enable_cache
        cache_duration = os.getenv(cls.CACHE_DURATION_ENV)
        if cache_duration is not None:
            values['cache_expiration'] = cache_duration
        timeout = os.getenv(cls.TIMEOUT_ENV)
        if timeout is not None:
            values['timeout'] = timeout
        return cls(**values)
