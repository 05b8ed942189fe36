from cep_relay.exceptions.location.location_service_error import LocationServiceError


class LocationParseError(LocationServiceError):
    """Exception for location responses without a usable city name."""

    pass
