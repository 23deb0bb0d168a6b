from typing import Callable, Optional, TypeVar
from pydantic import BaseModel, ConfigDict
from .models.google_maps_geocoding_response import (
    AddressComponent, GMGeocodingPayload, PlusCode, Result, Viewport,
)

T = TypeVar('T')

BUSINESS_TYPES: frozenset[str] = frozenset({'establishment', 'point_of_interest'})

class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

class GeocodingResponse:
    """Read-only view over one decoded geocoding payload.

    Convenience accessors only ever look at the first result. That is a fixed
    policy: the provider orders results by relevance, and callers that need
    the rest iterate ``all_results()`` or use ``for_each_result()``.

    Every optional field is returned as ``None`` when the payload lacks it,
    never as a zero or empty-string stand-in.
    """

    STRUCTURED_ADDRESS_FIELDS: tuple[str, ...] = (
        'street_number', 'street_name', 'neighborhood', 'sublocality', 'city', 'county',
        'state', 'state_short', 'postal_code', 'country', 'country_short', 'formatted_address',
    )

    def __init__(self, payload: GMGeocodingPayload):
        self.__payload = payload

    @property
    def raw(self) -> GMGeocodingPayload:
        return self.__payload

    def first_result(self) -> Optional[Result]:
        results = self.__payload.results
        return results[0] if results else None

    def all_results(self) -> tuple[Result, ...]:
        return tuple(self.__payload.results)

    def formatted_address(self) -> Optional[str]:
        result = self.first_result()
        return result.formatted_address if result else None

    def coordinates(self) -> Optional[Coordinates]:
        result = self.first_result()
        if result is None or result.geometry is None or result.geometry.location is None:
            return None
        location = result.geometry.location
        return Coordinates(latitude=location.lat, longitude=location.lng)

    def latitude(self) -> Optional[float]:
        coordinates = self.coordinates()
        return coordinates.latitude if coordinates else None

    def longitude(self) -> Optional[float]:
        coordinates = self.coordinates()
        return coordinates.longitude if coordinates else None

    def place_id(self) -> Optional[str]:
        result = self.first_result()
        return result.place_id if result else None

    def plus_code(self) -> Optional[PlusCode]:
        """Top-level plus code (reverse lookups) wins over the first result's own."""
        if self.__payload.plus_code is not None:
            return self.__payload.plus_code
        result = self.first_result()
        return result.plus_code if result else None

    def plus_code_compound(self) -> Optional[str]:
        plus_code = self.plus_code()
        return plus_code.compound_code if plus_code else None

    def plus_code_global(self) -> Optional[str]:
        plus_code = self.plus_code()
        return plus_code.global_code if plus_code else None

    def location_type(self) -> Optional[str]:
        result = self.first_result()
        if result is None or result.geometry is None:
            return None
        return result.geometry.location_type

    def types(self) -> frozenset[str]:
        result = self.first_result()
        return frozenset(result.types) if result else frozenset()

    def address_components(self) -> tuple[AddressComponent, ...]:
        result = self.first_result()
        return tuple(result.address_components) if result else ()

    def address_components_by_types(self, required_types: set[str]) -> list[AddressComponent]:
        # a component matches only if it carries every requested tag
        required = set(required_types)
        return [component for component in self.address_components() if required.issubset(component.types)]

    def __find_component(self, component_type: str) -> Optional[AddressComponent]:
        for component in self.address_components():
            if component_type in component.types:
                return component
        return None

    def address_component(self, component_type: str) -> Optional[str]:
        component = self.__find_component(component_type)
        return component.long_name if component else None

    def address_component_short(self, component_type: str) -> Optional[str]:
        component = self.__find_component(component_type)
        return component.short_name if component else None

    def street_number(self) -> Optional[str]:
        return self.address_component('street_number')

    def street_name(self) -> Optional[str]:
        return self.address_component('route')

    def neighborhood(self) -> Optional[str]:
        return self.address_component('neighborhood')

    def sublocality(self) -> Optional[str]:
        return self.address_component('sublocality')

    def sublocality_level_1(self) -> Optional[str]:
        return self.address_component('sublocality_level_1')

    def city(self) -> Optional[str]:
        return self.address_component('locality')

    def state(self) -> Optional[str]:
        return self.address_component('administrative_area_level_1')

    def state_short(self) -> Optional[str]:
        return self.address_component_short('administrative_area_level_1')

    def county(self) -> Optional[str]:
        return self.address_component('administrative_area_level_2')

    def postal_code(self) -> Optional[str]:
        return self.address_component('postal_code')

    def country(self) -> Optional[str]:
        return self.address_component('country')

    def country_short(self) -> Optional[str]:
        return self.address_component_short('country')

    def viewport(self) -> Optional[Viewport]:
        result = self.first_result()
        if result is None or result.geometry is None:
            return None
        return result.geometry.viewport

    def structured_address(self) -> dict[str, Optional[str]]:
        return {name: getattr(self, name)() for name in self.STRUCTURED_ADDRESS_FIELDS}

    def status(self) -> str:
        return self.__payload.status or ''

    def is_business_location(self) -> bool:
        return not BUSINESS_TYPES.isdisjoint(self.types())

    def is_partial_match(self) -> bool:
        result = self.first_result()
        return bool(result and result.partial_match)

    def for_each_result(self, fn: Callable[[Result], T]) -> list[T]:
        return [fn(result) for result in self.__payload.results]

    def __repr__(self) -> str:
        return f'GeocodingResponse(status={self.status()!r}, results={len(self.__payload.results)})'
