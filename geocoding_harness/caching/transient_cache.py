import hashlib, logging, time
from typing import Any, Callable, Optional
from ..fetching.models.google_maps_geocoding_response import GMGeocodingPayload

logger = logging.getLogger(__name__)

class TransientCache:
    """In-process key/value store whose entries expire after a per-entry TTL."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.__clock = clock
        self.__entries: dict[str, tuple[Any, float]] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self.__entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.__clock() >= expires_at:
            del self.__entries[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl: int) -> None:
        if ttl < 0:
            raise ValueError(f'TTL must be non-negative, got {ttl}')
        now = self.__clock()
        self.__purge_expired(now)
        self.__entries[key] = (value, now + ttl)

    def __purge_expired(self, now: float) -> None:
        expired = [key for key, (_, expires_at) in self.__entries.items() if now >= expires_at]
        for key in expired:
            del self.__entries[key]

    def delete(self, key: str) -> bool:
        return self.__entries.pop(key, None) is not None

    def delete_prefix(self, prefix: str) -> int:
        doomed = [key for key in self.__entries if key.startswith(prefix)]
        for key in doomed:
            del self.__entries[key]
        return len(doomed)

    def __len__(self) -> int:
        return len(self.__entries)

class GeocodingCache:
    """Maps geocoding lookups to previously fetched payloads.

    Keys are ``google_geocoding_`` followed by the md5 of the operation
    identifier (``"geocode:<address>"`` or ``"reverse:<lat>_<lng>"``) with the
    API key appended, so a credential change never serves another key's
    entries. Reverse identifiers use ``str()`` of the values as passed in and
    are not normalised: ``37`` and ``37.0`` are different entries.
    """
    KEY_PREFIX: str = 'google_geocoding_'
    FORWARD_OPERATION: str = 'geocode'
    REVERSE_OPERATION: str = 'reverse'

    def __init__(self, api_key: str, store: Optional[TransientCache] = None):
        self.api_key = api_key
        self.store = store if store is not None else TransientCache()

    @classmethod
    def forward_identifier(cls, address: str) -> str:
        return f'{cls.FORWARD_OPERATION}:{address.strip()}'

    @classmethod
    def reverse_identifier(cls, latitude: float, longitude: float) -> str:
        return f'{cls.REVERSE_OPERATION}:{latitude}_{longitude}'

    def key_for(self, identifier: str) -> str:
        digest = hashlib.md5(f'{identifier}{self.api_key}'.encode('utf-8')).hexdigest()
        return f'{self.KEY_PREFIX}{digest}'

    def forward_key(self, address: str) -> str:
        return self.key_for(self.forward_identifier(address))

    def reverse_key(self, latitude: float, longitude: float) -> str:
        return self.key_for(self.reverse_identifier(latitude, longitude))

    def get(self, key: str) -> Optional[GMGeocodingPayload]:
        payload = self.store.get(key)
        logger.debug("Cache %s for %s", 'hit' if payload is not None else 'miss', key)
        return payload

    def put(self, key: str, payload: GMGeocodingPayload, ttl: int) -> None:
        self.store.set(key, payload, ttl)
        logger.debug("Cached %s for %d seconds", key, ttl)

    def invalidate(self, key: Optional[str] = None) -> bool:
        if key is not None:
            return self.store.delete(key)
        removed = self.store.delete_prefix(self.KEY_PREFIX)
        logger.info("Cleared %d cached geocoding entries", removed)
        return True
