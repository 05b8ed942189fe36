from cep_relay.exceptions.location.location_lookup_error import LocationLookupError
from cep_relay.exceptions.location.location_not_found_error import LocationNotFoundError
from cep_relay.exceptions.location.location_parse_error import LocationParseError
from cep_relay.exceptions.location.location_service_error import LocationServiceError

__all__ = [
    "LocationLookupError",
    "LocationNotFoundError",
    "LocationParseError",
    "LocationServiceError",
]
