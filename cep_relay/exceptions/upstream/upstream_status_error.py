import httpx

from cep_relay.exceptions.upstream.upstream_error import UpstreamError


class UpstreamStatusError(UpstreamError):
    """
    Exception for non-200 answers from the relay service.

    The relay's status is propagated unchanged and the body becomes the
    status's standard reason phrase (e.g. ``422`` -> ``"Unprocessable Entity"``).
    Phrases come from httpx's table, which does not follow the renames made
    to ``http.HTTPStatus`` in Python 3.13.
    """

    def __init__(self, status_code: int, reason_phrase: str = ""):
        self.status_code = status_code
        self.message = (
            httpx.codes.get_reason_phrase(status_code) or reason_phrase or str(status_code)
        )
        super().__init__(f"Relay service responded with status {status_code}")
