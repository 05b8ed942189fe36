from cep_relay.exceptions.weather.weather_service_error import WeatherServiceError


class WeatherLookupError(WeatherServiceError):
    """Exception for failed requests to the weather API."""

    pass
