import httpx
import structlog
from opentelemetry.trace import Tracer
from pydantic import ValidationError

from cep_relay.exceptions.weather import WeatherLookupError, WeatherParseError
from cep_relay.models.weather.weather import WeatherApiResponse
from cep_relay.utils.tracing import client_span, record_response_status

logger = structlog.get_logger(__name__)


class TemperatureService:
    """
    Fetches the current temperature of a city from WeatherAPI.com.

    The access key comes from configuration and is sent as the ``key`` query
    parameter; it is never logged.
    """

    def __init__(self, http_client: httpx.AsyncClient, tracer: Tracer, base_url: str, api_key: str):
        self.http_client = http_client
        self.tracer = tracer
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    async def resolve_temperature(self, location: str) -> float:
        """
        Get the current temperature in Celsius for a city.

        The city name is URL-escaped by httpx when encoded as the ``q`` parameter.

        Args:
            location: City name

        Returns:
            Current temperature in Celsius

        Raises:
            WeatherLookupError: If the request fails or returns a non-200 status
            WeatherParseError: If the response does not match the expected shape
        """
        with self.tracer.start_as_current_span(
            "get_temperature", attributes={"location": location}
        ) as span:
            url = f"{self.base_url}/current.json"
            params = {"key": self.api_key, "q": location}
            logger.info("Fetching temperature", url=url, location=location)

            try:
                with client_span(self.tracer, "GET", url) as http_span:
                    response = await self.http_client.get(url, params=params)
                    record_response_status(http_span, response.status_code)
            except httpx.RequestError as e:
                logger.warning("Temperature request failed", location=location, error=str(e))
                raise WeatherLookupError(f"Request failed: {str(e)}")

            if response.status_code != 200:
                logger.warning(
                    "Unexpected temperature response status",
                    location=location,
                    status_code=response.status_code,
                )
                raise WeatherLookupError(f"Weather API responded with status {response.status_code}")

            try:
                data = WeatherApiResponse.model_validate_json(response.content)
            except ValidationError as e:
                logger.error("Failed to parse weather data", location=location, error=str(e))
                raise WeatherParseError(f"Invalid weather data received for {location}: {str(e)}")

            temp_c = data.current.temp_c
            span.set_attribute("temp_c", temp_c)
            logger.info("Successfully fetched temperature", location=location, temp_c=temp_c)
            return temp_c
