from fastapi import status


class CepRelayError(Exception):
    """
    Base exception for the CEP relay services.

    Every subclass maps to a fixed HTTP status and a short message that is
    returned to the caller as-is. ``str(exc)`` keeps the internal detail for logs.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "internal error"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
