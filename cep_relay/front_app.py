from contextlib import asynccontextmanager
from typing import Optional

import httpx
import structlog
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from cep_relay import __version__
from cep_relay.api.front import cep_router
from cep_relay.app_factory import configure_app
from cep_relay.config.config import FrontSettings, get_front_settings
from cep_relay.services.relay_client import RelayClient
from cep_relay.utils.tracing import setup_tracing

logger = structlog.get_logger(__name__)

SERVICE_NAME = "service-a"


def create_front_app(
    settings: Optional[FrontSettings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    tracer_provider: Optional[TracerProvider] = None,
) -> FastAPI:
    """
    Create the front service (service A).

    Args:
        settings: Service settings; loaded from the environment when omitted
        http_client: Client used to reach the relay service; created and owned
            by the application when omitted
        tracer_provider: Tracer provider; built from ``zipkin_endpoint`` when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_front_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the outbound client and tracer provider for the process lifetime."""
        logger.info("Starting front service", service_b_url=settings.service_b_url)

        client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.http_timeout_seconds)
        )
        provider = tracer_provider or setup_tracing(SERVICE_NAME, settings.zipkin_endpoint)

        app.state.tracer = provider.get_tracer(__name__)
        app.state.relay_client = RelayClient(client, app.state.tracer, settings.service_b_url)

        try:
            yield
        finally:
            logger.info("Shutting down front service")
            if http_client is None:
                await client.aclose()
            if tracer_provider is None:
                provider.shutdown()

    app = FastAPI(
        title="CEP Front Service",
        description="Validates Brazilian postal codes and relays them to the weather service.",
        version=__version__,
        lifespan=lifespan,
    )

    configure_app(app, SERVICE_NAME)
    app.include_router(cep_router)

    return app
