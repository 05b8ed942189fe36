from fastapi import Request
from opentelemetry.trace import Tracer

from cep_relay.services.location_service import LocationService
from cep_relay.services.relay_client import RelayClient
from cep_relay.services.temperature_service import TemperatureService


def get_tracer(request: Request) -> Tracer:
    return request.app.state.tracer


def get_relay_client(request: Request) -> RelayClient:
    return request.app.state.relay_client


def get_location_service(request: Request) -> LocationService:
    return request.app.state.location_service


def get_temperature_service(request: Request) -> TemperatureService:
    return request.app.state.temperature_service
