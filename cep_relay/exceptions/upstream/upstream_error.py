from cep_relay.exceptions.base import CepRelayError


class UpstreamError(CepRelayError):
    """Base exception for errors talking to the relay service."""

    pass
