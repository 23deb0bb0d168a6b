"""Operator front end: look up an address or coordinate pair and print the parsed fields.

    geocoding-harness geocode "1600 Amphitheatre Parkway, Mountain View, CA"
    geocoding-harness reverse 37.4220 -122.0841
    geocoding-harness shell

Credentials and cache settings come from the environment (or a ``.env`` file),
see ``GeocodingSettings.from_env``.
"""
import argparse, logging, sys
from typing import Callable, Optional, TextIO
from .fetching.failures import is_failure
from .fetching.geocoding import GeocodingOutcome, GoogleMapsGeocoder
from .presentation.table import location_details_frame, render_failure, results_frame
from .presentation.validation import looks_like_latlng, parse_latlng, validate_address, validate_coordinates
from .settings import GeocodingSettings

logger = logging.getLogger(__name__)

SHELL_PROMPT: str = 'geocode> '
SHELL_QUIT: tuple[str, ...] = (':quit', ':q', ':exit')
SHELL_CLEAR: str = ':clear'

def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='geocoding-harness', description="Test the Google Geocoding API from the command line.")
    parser.add_argument('--env-file', default=None, help="Path to a .env file holding GOOGLE_MAPS_API_KEY.")
    parser.add_argument('--no-cache', action='store_true', help="Bypass the response cache.")
    parser.add_argument('--all-results', action='store_true', help="Also list every result, not only the first.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging.")

    commands = parser.add_subparsers(dest='command', required=True)
    geocode = commands.add_parser('geocode', help="Forward geocode an address.")
    geocode.add_argument('address')
    reverse = commands.add_parser('reverse', help="Reverse geocode a latitude/longitude pair.")
    reverse.add_argument('latitude')
    reverse.add_argument('longitude')
    commands.add_parser('shell', help="Interactive lookups sharing one in-process cache.")
    return parser.parse_args(argv)

def print_outcome(outcome: GeocodingOutcome, out: TextIO, all_results: bool = False) -> bool:
    if is_failure(outcome):
        print(render_failure(outcome), file=out)
        return False

    print(location_details_frame(outcome).to_string(index=False), file=out)
    if all_results and outcome.all_results():
        print(file=out)
        print(results_frame(outcome).to_string(index=False), file=out)
    return True

def run_shell(client: GoogleMapsGeocoder, read_line: Callable[[str], str], out: TextIO, all_results: bool = False) -> int:
    print("Enter an address or 'lat,lng'. ':clear' empties the cache, ':quit' exits.", file=out)
    while True:
        try:
            line = read_line(SHELL_PROMPT).strip()
        except EOFError:
            break
        if not line:
            continue
        if line in SHELL_QUIT:
            break
        if line == SHELL_CLEAR:
            client.clear_cache()
            print("Cache cleared.", file=out)
            continue

        if looks_like_latlng(line):
            coordinates = parse_latlng(line)
            outcome = coordinates if is_failure(coordinates) else client.reverse_geocode(*coordinates)
        else:
            address = validate_address(line)
            outcome = address if is_failure(address) else client.geocode(address)
        print_outcome(outcome, out, all_results)
        print(f"[requests: {client.requests_made}, cache hits: {client.cache_hits}]", file=out)
    return 0

def main(argv: Optional[list[str]] = None, out: TextIO = sys.stdout) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        settings = GeocodingSettings.from_env(args.env_file)
    except ValueError as e:
        print(f"Configuration error: {e}", file=out)
        return 1
    if args.no_cache:
        settings = settings.model_copy(update={'enable_cache': False})

    with GoogleMapsGeocoder(settings) as client:
        if args.command == 'geocode':
            address = validate_address(args.address)
            outcome = address if is_failure(address) else client.geocode(address)
        elif args.command == 'reverse':
            coordinates = validate_coordinates(args.latitude, args.longitude)
            outcome = coordinates if is_failure(coordinates) else client.reverse_geocode(*coordinates)
        else:
            return run_shell(client, input, out, args.all_results)

    return 0 if print_outcome(outcome, out, args.all_results) else 1

if __name__ == '__main__':
    sys.exit(main())
