from cep_relay.exceptions.weather.weather_service_error import WeatherServiceError


class WeatherParseError(WeatherServiceError):
    """Exception for weather responses that do not match the expected shape."""

    pass
