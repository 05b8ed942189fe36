from contextlib import asynccontextmanager
from typing import Optional

import httpx
import structlog
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from cep_relay import __version__
from cep_relay.api.relay import weather_router
from cep_relay.app_factory import configure_app
from cep_relay.config.config import RelaySettings, get_relay_settings
from cep_relay.services.location_service import LocationService
from cep_relay.services.temperature_service import TemperatureService
from cep_relay.utils.tracing import setup_tracing

logger = structlog.get_logger(__name__)

SERVICE_NAME = "service-b"


def create_relay_app(
    settings: Optional[RelaySettings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    tracer_provider: Optional[TracerProvider] = None,
) -> FastAPI:
    """
    Create the relay service (service B).

    Args:
        settings: Service settings; loaded from the environment when omitted
        http_client: Client shared by the ViaCEP and WeatherAPI lookups; created
            and owned by the application when omitted
        tracer_provider: Tracer provider; built from ``zipkin_endpoint`` when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_relay_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the outbound client and tracer provider for the process lifetime."""
        logger.info(
            "Starting relay service",
            viacep_base_url=settings.viacep_base_url,
            weather_api_base_url=settings.weather_api_base_url,
        )

        client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.http_timeout_seconds)
        )
        provider = tracer_provider or setup_tracing(SERVICE_NAME, settings.zipkin_endpoint)
        tracer = provider.get_tracer(__name__)

        app.state.tracer = tracer
        app.state.location_service = LocationService(client, tracer, settings.viacep_base_url)
        app.state.temperature_service = TemperatureService(
            client, tracer, settings.weather_api_base_url, settings.weather_api_key
        )

        try:
            yield
        finally:
            logger.info("Shutting down relay service")
            if http_client is None:
                await client.aclose()
            if tracer_provider is None:
                provider.shutdown()

    app = FastAPI(
        title="CEP Weather Relay Service",
        description="Resolves Brazilian postal codes to cities and reports their current temperature.",
        version=__version__,
        lifespan=lifespan,
    )

    configure_app(app, SERVICE_NAME)
    app.include_router(weather_router)

    return app
