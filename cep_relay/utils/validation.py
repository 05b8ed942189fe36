import re

# ASCII digits only; str.isdigit and \d also accept other Unicode digits.
CEP_PATTERN = re.compile(r"[0-9]{8}")


def is_valid_cep(cep: str) -> bool:
    """Return True when ``cep`` is exactly 8 decimal digits."""
    return isinstance(cep, str) and CEP_PATTERN.fullmatch(cep) is not None
