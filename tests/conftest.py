from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from cep_relay.config.config import FrontSettings, RelaySettings
from cep_relay.utils.tracing import setup_tracing

VIACEP_BASE_URL = "https://viacep.test/ws"
WEATHER_API_BASE_URL = "https://weather.test/v1"
SERVICE_B_URL = "http://relay.test/weather"
WEATHER_API_KEY = "test-weather-key"

SAO_PAULO_CEP = "01001000"

VIACEP_SAO_PAULO = {
    "cep": "01001-000",
    "logradouro": "Praça da Sé",
    "complemento": "lado ímpar",
    "bairro": "Sé",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
}

WEATHER_SAO_PAULO = {
    "location": {"name": "Sao Paulo", "region": "Sao Paulo", "country": "Brazil"},
    "current": {"temp_c": 25.0, "temp_f": 77.0},
}


class ExternalAPIs:
    """
    MockTransport handler standing in for ViaCEP and WeatherAPI.

    Responses are keyed by postal code and by city name; every request seen is
    recorded in ``requests``. Unknown postal codes get ViaCEP's ``{"erro": true}``.
    """

    def __init__(self):
        self.locations: Dict[str, Tuple[int, Any]] = {SAO_PAULO_CEP: (200, VIACEP_SAO_PAULO)}
        self.temperatures: Dict[str, Tuple[int, Any]] = {"São Paulo": (200, WEATHER_SAO_PAULO)}
        self.requests: List[httpx.Request] = []
        self.fail_with: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with

        if request.url.host == "viacep.test":
            cep = request.url.path.split("/")[2]
            status_code, body = self.locations.get(cep, (200, {"erro": True}))
        elif request.url.host == "weather.test":
            city = request.url.params.get("q")
            status_code, body = self.temperatures.get(
                city, (400, {"error": {"code": 1006, "message": "No matching location found."}})
            )
        else:
            return httpx.Response(404)

        if isinstance(body, (bytes, str)):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, json=body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def span_exporter():
    """Collect finished spans in memory."""
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter):
    provider = setup_tracing("test-service", exporter=span_exporter)
    yield provider
    provider.shutdown()


@pytest.fixture
def tracer(tracer_provider):
    return tracer_provider.get_tracer("tests")


@pytest.fixture
def external_apis():
    return ExternalAPIs()


@pytest.fixture
def relay_settings():
    return RelaySettings(
        weather_api_key=WEATHER_API_KEY,
        viacep_base_url=VIACEP_BASE_URL,
        weather_api_base_url=WEATHER_API_BASE_URL,
        zipkin_endpoint=None,
        _env_file=None,
    )


@pytest.fixture
def front_settings():
    return FrontSettings(service_b_url=SERVICE_B_URL, zipkin_endpoint=None, _env_file=None)


def span_by_name(exporter: InMemorySpanExporter, name: str):
    spans = [span for span in exporter.get_finished_spans() if span.name == name]
    assert len(spans) == 1, f"expected one {name!r} span, got {len(spans)}"
    return spans[0]
