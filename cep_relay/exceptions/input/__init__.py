from cep_relay.exceptions.input.input_error import InputError
from cep_relay.exceptions.input.invalid_postal_code_error import InvalidPostalCodeError
from cep_relay.exceptions.input.malformed_input_error import MalformedInputError

__all__ = ["InputError", "InvalidPostalCodeError", "MalformedInputError"]
