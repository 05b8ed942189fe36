from cep_relay.exceptions.upstream.upstream_error import UpstreamError


class UpstreamUnreachableError(UpstreamError):
    """Exception for transport failures reaching the relay service."""

    pass
