from fastapi import status

from cep_relay.exceptions.base import CepRelayError


class InputError(CepRelayError):
    """Base exception for rejected request payloads."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
