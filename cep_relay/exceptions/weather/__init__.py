from cep_relay.exceptions.weather.api_key_error import WeatherAPIKeyError
from cep_relay.exceptions.weather.weather_lookup_error import WeatherLookupError
from cep_relay.exceptions.weather.weather_parse_error import WeatherParseError
from cep_relay.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "WeatherAPIKeyError",
    "WeatherLookupError",
    "WeatherParseError",
    "WeatherServiceError",
]
