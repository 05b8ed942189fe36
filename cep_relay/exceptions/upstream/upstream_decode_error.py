from cep_relay.exceptions.upstream.upstream_error import UpstreamError


class UpstreamDecodeError(UpstreamError):
    """Exception for relay responses that are not a valid weather report."""

    pass
