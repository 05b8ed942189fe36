from fastapi import status

from cep_relay.exceptions.base import CepRelayError


class WeatherServiceError(CepRelayError):
    """Base exception for weather service errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "error fetching temperature"
