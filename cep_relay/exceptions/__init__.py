from cep_relay.exceptions.base import CepRelayError
from cep_relay.exceptions.input import InputError, InvalidPostalCodeError, MalformedInputError
from cep_relay.exceptions.location import (
    LocationLookupError,
    LocationNotFoundError,
    LocationParseError,
    LocationServiceError,
)
from cep_relay.exceptions.upstream import (
    UpstreamDecodeError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamUnreachableError,
)
from cep_relay.exceptions.weather import (
    WeatherAPIKeyError,
    WeatherLookupError,
    WeatherParseError,
    WeatherServiceError,
)

__all__ = [
    "CepRelayError",
    "InputError",
    "InvalidPostalCodeError",
    "MalformedInputError",
    "LocationLookupError",
    "LocationNotFoundError",
    "LocationParseError",
    "LocationServiceError",
    "UpstreamDecodeError",
    "UpstreamError",
    "UpstreamStatusError",
    "UpstreamUnreachableError",
    "WeatherAPIKeyError",
    "WeatherLookupError",
    "WeatherParseError",
    "WeatherServiceError",
]
