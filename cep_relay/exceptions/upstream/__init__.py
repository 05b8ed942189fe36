from cep_relay.exceptions.upstream.upstream_decode_error import UpstreamDecodeError
from cep_relay.exceptions.upstream.upstream_error import UpstreamError
from cep_relay.exceptions.upstream.upstream_status_error import UpstreamStatusError
from cep_relay.exceptions.upstream.upstream_unreachable_error import UpstreamUnreachableError

__all__ = [
    "UpstreamDecodeError",
    "UpstreamError",
    "UpstreamStatusError",
    "UpstreamUnreachableError",
]
