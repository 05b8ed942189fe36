import httpx
import structlog
from opentelemetry.trace import Tracer

from cep_relay.exceptions.location import (
    LocationLookupError,
    LocationNotFoundError,
    LocationParseError,
)
from cep_relay.models.location.location import ViaCepResponse
from cep_relay.utils.tracing import client_span, record_response_status

logger = structlog.get_logger(__name__)


class LocationService:
    """
    Resolves Brazilian postal codes to city names through the ViaCEP API.

    The HTTP client is shared with the rest of the process and is not
    closed here.
    """

    def __init__(self, http_client: httpx.AsyncClient, tracer: Tracer, base_url: str):
        self.http_client = http_client
        self.tracer = tracer
        self.base_url = base_url.rstrip("/")

    def _build_url(self, cep: str) -> str:
        return f"{self.base_url}/{cep}/json/"

    async def resolve_location(self, cep: str) -> str:
        """
        Get the city name for a postal code.

        Args:
            cep: Validated 8-digit postal code

        Returns:
            City name reported by ViaCEP

        Raises:
            LocationLookupError: If the request fails or returns a non-200 status
            LocationNotFoundError: If ViaCEP flags the postal code as unknown
            LocationParseError: If the response has no string city name
        """
        with self.tracer.start_as_current_span("get_location", attributes={"cep": cep}) as span:
            url = self._build_url(cep)
            logger.info("Fetching location", url=url, cep=cep)

            try:
                with client_span(self.tracer, "GET", url) as http_span:
                    response = await self.http_client.get(url)
                    record_response_status(http_span, response.status_code)
            except httpx.RequestError as e:
                logger.warning("Location request failed", cep=cep, error=str(e))
                raise LocationLookupError(f"Request failed: {str(e)}")

            if response.status_code != 200:
                logger.warning(
                    "Unexpected location response status",
                    cep=cep,
                    status_code=response.status_code,
                )
                raise LocationLookupError(f"Location API responded with status {response.status_code}")

            try:
                payload = response.json()
            except ValueError as e:
                logger.error("Failed to decode location response", cep=cep, error=str(e))
                raise LocationParseError(f"Invalid location data received for {cep}: {str(e)}")

            if not isinstance(payload, dict):
                raise LocationParseError(f"Invalid location data received for {cep}: not an object")

            result = ViaCepResponse.from_payload(payload)
            if result.not_found:
                logger.info("Postal code not found", cep=cep)
                raise LocationNotFoundError(f"Postal code {cep} not found")

            if not isinstance(result.localidade, str):
                logger.error("Failed to parse location from response", cep=cep, payload=payload)
                raise LocationParseError(f"No city name in location data for {cep}")

            location = result.localidade
            span.set_attribute("location", location)
            logger.info("Successfully resolved location", cep=cep, location=location)
            return location
