from cep_relay.models.weather.weather import (
    CurrentConditions,
    WeatherApiLocation,
    WeatherApiResponse,
    WeatherReport,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
)

__all__ = [
    "CurrentConditions",
    "WeatherApiLocation",
    "WeatherApiResponse",
    "WeatherReport",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
]
