import pandas as pd
from typing import Optional
from ..fetching.failures import ApiFailure, Failure
from ..fetching.models.google_maps_geocoding_response import Result
from ..fetching.response import GeocodingResponse

MISSING: str = '-'
FIELD_COLNAME: str = 'Field'
VALUE_COLNAME: str = 'Value'
RESULTS_COLNAMES: list[str] = ['formatted_address', 'lat', 'lng', 'location_type', 'place_id', 'types', 'partial_match']

STRUCTURED_ADDRESS_LABELS: dict[str, str] = {
    'street_number': 'Street Number',
    'street_name': 'Street Name',
    'neighborhood': 'Neighborhood',
    'sublocality': 'Sublocality',
    'city': 'City',
    'county': 'County',
    'state': 'State',
    'state_short': 'State (Short)',
    'postal_code': 'Postal Code',
    'country': 'Country',
    'country_short': 'Country (Short)',
}

def _display(value: Optional[object]) -> str:
    if value is None or value == '':
        return MISSING
    if isinstance(value, bool):
        return 'Yes' if value else 'No'
    return str(value)

def location_details_frame(response: GeocodingResponse) -> pd.DataFrame:
    coordinates = response.coordinates()
    viewport = response.viewport()
    rows: list[tuple[str, object]] = [
        ('Status', response.status()),
        ('Formatted Address', response.formatted_address()),
        ('Coordinates', f'{coordinates.latitude}, {coordinates.longitude}' if coordinates else None),
        ('Place ID', response.place_id()),
        ('Plus Code (Global)', response.plus_code_global()),
        ('Plus Code (Compound)', response.plus_code_compound()),
        ('Location Type', response.location_type()),
        ('Types', ', '.join(sorted(response.types()))),
    ]
    structured = response.structured_address()
    rows.extend((label, structured[name]) for name, label in STRUCTURED_ADDRESS_LABELS.items())
    rows.extend([
        ('Viewport Northeast', f'{viewport.northeast.lat}, {viewport.northeast.lng}' if viewport else None),
        ('Viewport Southwest', f'{viewport.southwest.lat}, {viewport.southwest.lng}' if viewport else None),
        ('Partial Match', response.is_partial_match()),
        ('Business Location', response.is_business_location()),
    ])

    return pd.DataFrame({
        FIELD_COLNAME: [label for label, _ in rows],
        VALUE_COLNAME: [_display(value) for _, value in rows],
    })

def _result_row(result: Result) -> dict[str, object]:
    location = result.geometry.location if result.geometry else None
    return {
        'formatted_address': result.formatted_address,
        'lat': location.lat if location else None,
        'lng': location.lng if location else None,
        'location_type': result.geometry.location_type if result.geometry else None,
        'place_id': result.place_id,
        'types': ', '.join(result.types),
        'partial_match': result.partial_match,
    }

def results_frame(response: GeocodingResponse) -> pd.DataFrame:
    return pd.DataFrame(response.for_each_result(_result_row), columns=RESULTS_COLNAMES)

def render_failure(failure: Failure) -> str:
    line = f"Error ({failure.kind}): {failure.message}"
    if isinstance(failure, ApiFailure) and failure.error_message:
        line += f" - {failure.error_message}"
    return line
