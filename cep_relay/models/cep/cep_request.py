from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cep_relay.exceptions.input import InvalidPostalCodeError, MalformedInputError
from cep_relay.utils.validation import is_valid_cep


class CepRequest(BaseModel):
    """Postal code lookup request accepted by both services."""

    model_config = ConfigDict(frozen=True)

    cep: str = Field(default="", description="Brazilian postal code, 8 digits")

    @classmethod
    def from_body(cls, body: bytes) -> "CepRequest":
        """
        Decode and validate a raw request body.

        Args:
            body: Raw HTTP request body

        Returns:
            CepRequest holding a valid postal code

        Raises:
            MalformedInputError: If the body is not a JSON object with a string ``cep``
            InvalidPostalCodeError: If ``cep`` is not exactly 8 digits
        """
        try:
            request = cls.model_validate_json(body)
        except ValidationError as e:
            raise MalformedInputError(f"Could not decode request body: {e.error_count()} error(s)")

        if not is_valid_cep(request.cep):
            raise InvalidPostalCodeError(f"Postal code {request.cep!r} is not 8 digits")

        return request
