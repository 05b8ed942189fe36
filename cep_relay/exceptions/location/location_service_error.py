from fastapi import status

from cep_relay.exceptions.base import CepRelayError


class LocationServiceError(CepRelayError):
    """Base exception for location lookup errors."""

    status_code = status.HTTP_404_NOT_FOUND
    message = "can not find zipcode"
