import httpx
import pytest
from opentelemetry.trace import StatusCode

from cep_relay.exceptions.weather import (
    WeatherLookupError,
    WeatherParseError,
    WeatherServiceError,
)
from cep_relay.services.temperature_service import TemperatureService
from tests.conftest import WEATHER_API_BASE_URL, WEATHER_API_KEY, span_by_name


class TestTemperatureService:
    """Test cases for the TemperatureService class."""

    def _service(self, external_apis, tracer):
        return TemperatureService(
            external_apis.client(), tracer, WEATHER_API_BASE_URL, WEATHER_API_KEY
        )

    @pytest.mark.asyncio
    async def test_resolve_temperature_success(self, external_apis, tracer, span_exporter):
        service = self._service(external_apis, tracer)

        temp_c = await service.resolve_temperature("São Paulo")

        assert temp_c == 25.0

        request = external_apis.requests[0]
        assert request.url.path == "/v1/current.json"
        assert request.url.params["key"] == WEATHER_API_KEY
        assert request.url.params["q"] == "São Paulo"
        assert "São" not in str(request.url)

        span = span_by_name(span_exporter, "get_temperature")
        assert span.attributes["location"] == "São Paulo"
        assert span.attributes["temp_c"] == 25.0

    @pytest.mark.asyncio
    async def test_resolve_temperature_bad_status(self, external_apis, tracer, span_exporter):
        service = self._service(external_apis, tracer)

        with pytest.raises(WeatherLookupError, match="status 400"):
            await service.resolve_temperature("Atlantis")

        span = span_by_name(span_exporter, "get_temperature")
        assert "temp_c" not in span.attributes
        assert span.status.status_code == StatusCode.ERROR

    @pytest.mark.asyncio
    async def test_resolve_temperature_transport_error(self, external_apis, tracer):
        external_apis.fail_with = httpx.ReadTimeout("timed out")
        service = self._service(external_apis, tracer)

        with pytest.raises(WeatherLookupError, match="Request failed"):
            await service.resolve_temperature("São Paulo")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"current": {"temp_c": 30.0}},
            {"location": {"region": "Rio Grande do Norte"}, "current": {"temp_c": 30.0}},
        ],
    )
    async def test_resolve_temperature_needs_only_current_temp(self, external_apis, tracer, body):
        external_apis.temperatures["Natal"] = (200, body)
        service = self._service(external_apis, tracer)

        assert await service.resolve_temperature("Natal") == 30.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"location": {"name": "Natal"}},
            {"location": {"name": "Natal"}, "current": {"temp_c": "hot"}},
            "not json",
        ],
    )
    async def test_resolve_temperature_unparseable(self, external_apis, tracer, body):
        external_apis.temperatures["Natal"] = (200, body)
        service = self._service(external_apis, tracer)

        with pytest.raises(WeatherParseError, match="Invalid weather data received"):
            await service.resolve_temperature("Natal")

    @pytest.mark.asyncio
    async def test_all_failures_map_to_internal_error(self, external_apis, tracer):
        service = self._service(external_apis, tracer)

        with pytest.raises(WeatherServiceError) as exc_info:
            await service.resolve_temperature("Atlantis")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "error fetching temperature"
