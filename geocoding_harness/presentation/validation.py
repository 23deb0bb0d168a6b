from typing import Union
from ..fetching.failures import ValidationFailure

LATITUDE_RANGE: tuple[float, float] = (-90.0, 90.0)
LONGITUDE_RANGE: tuple[float, float] = (-180.0, 180.0)

def validate_address(address: object) -> Union[str, ValidationFailure]:
    if not isinstance(address, str) or not address.strip():
        return ValidationFailure(message="Please enter an address.", field='address')
    return address.strip()

def _parse_coordinate(value: object, name: str, bounds: tuple[float, float]) -> Union[float, ValidationFailure]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ValidationFailure(message=f"{name.capitalize()} must be a number, got {value!r}.", field=name)

    low, high = bounds
    # NaN fails both comparisons
    if not low <= number <= high:
        return ValidationFailure(message=f"{name.capitalize()} must be between {low:g} and {high:g}.", field=name)
    return number

def validate_coordinates(latitude: object, longitude: object) -> Union[tuple[float, float], ValidationFailure]:
    lat = _parse_coordinate(latitude, 'latitude', LATITUDE_RANGE)
    if isinstance(lat, ValidationFailure):
        return lat
    lng = _parse_coordinate(longitude, 'longitude', LONGITUDE_RANGE)
    if isinstance(lng, ValidationFailure):
        return lng
    return lat, lng

def parse_latlng(text: str) -> Union[tuple[float, float], ValidationFailure]:
    """Split ``"lat,lng"`` operator input and validate both halves."""
    parts = [part.strip() for part in text.split(',')]
    if len(parts) != 2:
        return ValidationFailure(message=f"Expected 'lat,lng', got {text!r}.", field='latlng')
    return validate_coordinates(*parts)

def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True

def looks_like_latlng(text: str) -> bool:
    """True for two comma-separated numbers, in range or not; anything else is an address."""
    parts = [part.strip() for part in text.split(',')]
    return len(parts) == 2 and all(_is_number(part) for part in parts)
