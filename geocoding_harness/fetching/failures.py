from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict

class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str

    def __str__(self) -> str:
        return self.message

class TransportFailure(Failure):
    """Network-level error: connection refused, DNS, timeout. Not retried here."""
    kind: Literal['transport'] = 'transport'

class DecodeFailure(Failure):
    kind: Literal['decode'] = 'decode'
    http_status: Optional[int] = None

class ApiFailure(Failure):
    """The provider answered but rejected the request (OVER_QUERY_LIMIT, REQUEST_DENIED, ...)."""
    kind: Literal['api'] = 'api'
    status: str
    error_message: Optional[str] = None

class ValidationFailure(Failure):
    """Caller input rejected before any network call."""
    kind: Literal['validation'] = 'validation'
    field: str

GeocodingFailure = Union[TransportFailure, DecodeFailure, ApiFailure, ValidationFailure]

def is_failure(value: object) -> bool:
    return isinstance(value, Failure)
