import httpx
import structlog
from opentelemetry.trace import Tracer
from pydantic import ValidationError

from cep_relay.exceptions.upstream import (
    UpstreamDecodeError,
    UpstreamStatusError,
    UpstreamUnreachableError,
)
from cep_relay.models.cep.cep_request import CepRequest
from cep_relay.models.weather.weather import WeatherReport
from cep_relay.utils.tracing import client_span, inject_trace_headers, record_response_status

logger = structlog.get_logger(__name__)


class RelayClient:
    """Forwards validated postal codes from the front service to the relay service."""

    def __init__(self, http_client: httpx.AsyncClient, tracer: Tracer, service_b_url: str):
        self.http_client = http_client
        self.tracer = tracer
        self.service_b_url = service_b_url

    async def forward(self, request: CepRequest) -> WeatherReport:
        """
        POST the postal code to the relay service and decode its weather report.

        The call runs in its own client span, whose context travels in the
        request headers.

        Args:
            request: Validated postal code request

        Returns:
            WeatherReport decoded from the relay's 200 response

        Raises:
            UpstreamUnreachableError: If the relay service cannot be reached
            UpstreamStatusError: If the relay service answers with a non-200 status
            UpstreamDecodeError: If a 200 body is not a valid weather report
        """
        logger.info("Forwarding postal code", url=self.service_b_url, cep=request.cep)

        try:
            with client_span(self.tracer, "POST", self.service_b_url) as http_span:
                headers = inject_trace_headers({"Content-Type": "application/json"})
                response = await self.http_client.post(
                    self.service_b_url,
                    content=request.model_dump_json(),
                    headers=headers,
                )
                record_response_status(http_span, response.status_code)
        except httpx.RequestError as e:
            logger.error("Relay service unreachable", url=self.service_b_url, error=str(e))
            raise UpstreamUnreachableError(f"Request to relay service failed: {str(e)}")

        if response.status_code != 200:
            logger.warning(
                "Relay service returned an error",
                cep=request.cep,
                status_code=response.status_code,
                response_text=response.text,
            )
            raise UpstreamStatusError(response.status_code, response.reason_phrase)

        try:
            return WeatherReport.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("Failed to decode relay response", cep=request.cep, error=str(e))
            raise UpstreamDecodeError(f"Invalid weather report from relay service: {str(e)}")
