from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from opentelemetry.trace import SpanKind, StatusCode

from cep_relay.relay_app import create_relay_app
from tests.conftest import SAO_PAULO_CEP, span_by_name


@pytest.fixture
def relay_app(relay_settings, external_apis, tracer_provider):
    return create_relay_app(
        relay_settings, http_client=external_apis.client(), tracer_provider=tracer_provider
    )


@pytest.fixture
def client(relay_app):
    with TestClient(relay_app) as client:
        yield client


class TestRelayWeatherEndpoint:
    """Test cases for POST /weather on the relay service."""

    def test_get_weather_success(self, client, external_apis):
        response = client.post("/weather", json={"cep": SAO_PAULO_CEP})

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {
            "city": "São Paulo",
            "temp_C": 25.0,
            "temp_F": 77.0,
            "temp_K": 298.15,
        }
        assert [request.url.host for request in external_apis.requests] == [
            "viacep.test",
            "weather.test",
        ]

    def test_get_weather_unknown_cep(self, client, external_apis):
        response = client.post("/weather", json={"cep": "00000000"})

        assert response.status_code == 404
        assert response.text == "can not find zipcode"
        assert response.headers["content-type"].startswith("text/plain")
        assert len(external_apis.requests) == 1

    def test_get_weather_location_api_down(self, client, external_apis):
        external_apis.locations[SAO_PAULO_CEP] = (503, "Service Unavailable")

        response = client.post("/weather", json={"cep": SAO_PAULO_CEP})

        assert response.status_code == 404
        assert response.text == "can not find zipcode"

    def test_get_weather_invalid_cep(self, client, external_apis):
        response = client.post("/weather", json={"cep": "123"})

        assert response.status_code == 422
        assert response.text == "invalid zipcode"
        assert external_apis.requests == []

    def test_get_weather_missing_cep(self, client, external_apis):
        response = client.post("/weather", json={})

        assert response.status_code == 422
        assert response.text == "invalid zipcode"
        assert external_apis.requests == []

    def test_get_weather_malformed_body(self, client, external_apis):
        response = client.post(
            "/weather", content=b"\x00not-json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 422
        assert response.text == "invalid input"
        assert external_apis.requests == []

    def test_get_weather_temperature_lookup_fails(self, client, external_apis):
        external_apis.temperatures["São Paulo"] = (
            403,
            {"error": {"code": 2008, "message": "API key has been disabled."}},
        )

        response = client.post("/weather", json={"cep": SAO_PAULO_CEP})

        assert response.status_code == 500
        assert response.text == "error fetching temperature"

    def test_get_weather_is_idempotent(self, client):
        first = client.post("/weather", json={"cep": SAO_PAULO_CEP})
        second = client.post("/weather", json={"cep": SAO_PAULO_CEP})

        assert first.status_code == second.status_code == 200
        assert first.content == second.content

    def test_get_weather_unexpected_error(self, relay_app):
        with TestClient(relay_app, raise_server_exceptions=False) as client:
            relay_app.state.location_service.resolve_location = AsyncMock(
                side_effect=RuntimeError("boom")
            )

            response = client.post("/weather", json={"cep": SAO_PAULO_CEP})

        assert response.status_code == 500
        assert response.text == "internal error"


class TestRelayTracing:
    """Test cases for the spans emitted by the relay service."""

    def test_spans_on_success(self, client, span_exporter):
        client.post("/weather", json={"cep": SAO_PAULO_CEP})

        handler_span = span_by_name(span_exporter, "get_weather")
        location_span = span_by_name(span_exporter, "get_location")
        temperature_span = span_by_name(span_exporter, "get_temperature")

        assert location_span.parent.span_id == handler_span.context.span_id
        assert temperature_span.parent.span_id == handler_span.context.span_id
        assert location_span.attributes["cep"] == SAO_PAULO_CEP
        assert location_span.attributes["location"] == "São Paulo"
        assert temperature_span.attributes["location"] == "São Paulo"
        assert temperature_span.attributes["temp_c"] == 25.0

        http_spans = [
            span for span in span_exporter.get_finished_spans() if span.name == "HTTP GET"
        ]
        assert sorted(span.parent.span_id for span in http_spans) == sorted(
            [location_span.context.span_id, temperature_span.context.span_id]
        )
        assert all(span.kind == SpanKind.CLIENT for span in http_spans)
        assert all(span.attributes["http.response.status_code"] == 200 for span in http_spans)
        assert all("key=" not in span.attributes["url.full"] for span in http_spans)

    def test_handler_span_closed_on_validation_failure(self, client, span_exporter):
        client.post("/weather", json={"cep": "123"})

        handler_span = span_by_name(span_exporter, "get_weather")
        assert handler_span.end_time is not None
        assert handler_span.status.status_code == StatusCode.ERROR
        assert [span.name for span in span_exporter.get_finished_spans()] == ["get_weather"]

    def test_handler_span_joins_caller_trace(self, client, span_exporter):
        trace_id = "4bf92f3577b34da6a3ce929d0e0e4736"
        parent_id = "00f067aa0ba902b7"

        client.post(
            "/weather",
            json={"cep": SAO_PAULO_CEP},
            headers={"traceparent": f"00-{trace_id}-{parent_id}-01"},
        )

        handler_span = span_by_name(span_exporter, "get_weather")
        assert handler_span.context.trace_id == int(trace_id, 16)
        assert handler_span.parent.span_id == int(parent_id, 16)


class TestRelayHealth:
    def test_health(self, client, external_apis):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["service"] == "service-b"
        assert external_apis.requests == []
