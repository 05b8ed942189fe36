from cep_relay.exceptions.location.location_service_error import LocationServiceError


class LocationLookupError(LocationServiceError):
    """Exception for failed requests to the location API."""

    pass
