from cep_relay.exceptions.input.input_error import InputError


class InvalidPostalCodeError(InputError):
    """Exception for postal codes that are not exactly 8 digits."""

    message = "invalid zipcode"
