from cep_relay.exceptions.weather.weather_service_error import WeatherServiceError


class WeatherAPIKeyError(WeatherServiceError):
    """Exception for a missing weather API key."""

    pass
