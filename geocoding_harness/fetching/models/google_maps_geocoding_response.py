from pydantic import BaseModel, ConfigDict
from typing import Optional

class GMModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore')

class AddressComponent(GMModel):
    long_name: Optional[str] = None
    short_name: Optional[str] = None
    types: list[str] = []

class Location(GMModel):
    lat: float
    lng: float

class Viewport(GMModel):
    northeast: Location
    southwest: Location

class Geometry(GMModel):
    location: Optional[Location] = None
    location_type: Optional[str] = None
    viewport: Optional[Viewport] = None

class PlusCode(GMModel):
    compound_code: Optional[str] = None
    global_code: Optional[str] = None

class Result(GMModel):
    address_components: list[AddressComponent] = []
    formatted_address: Optional[str] = None
    geometry: Optional[Geometry] = None
    place_id: Optional[str] = None
    plus_code: Optional[PlusCode] = None
    types: list[str] = []
    partial_match: bool = False

class GMGeocodingPayload(GMModel):
    results: list[Result] = []
    status: str = ''
    plus_code: Optional[PlusCode] = None
    error_message: Optional[str] = None
