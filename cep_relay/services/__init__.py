from cep_relay.services.location_service import LocationService
from cep_relay.services.relay_client import RelayClient
from cep_relay.services.temperature_service import TemperatureService

__all__ = ["LocationService", "RelayClient", "TemperatureService"]
