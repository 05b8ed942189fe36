from cep_relay.exceptions.location.location_lookup_error import LocationLookupError


class LocationNotFoundError(LocationLookupError):
    """Exception for postal codes the location API reports as unknown."""

    pass
