from cep_relay.exceptions.input.input_error import InputError


class MalformedInputError(InputError):
    """Exception for request bodies that cannot be decoded."""

    message = "invalid input"
