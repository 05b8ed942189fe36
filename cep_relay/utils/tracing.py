from contextlib import contextmanager
from typing import Iterator, Mapping, MutableMapping, Optional

import structlog
from opentelemetry import propagate
from opentelemetry.context import Context
from opentelemetry.exporter.zipkin.json import ZipkinExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    SimpleSpanProcessor,
    SpanExporter,
)
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, Tracer

logger = structlog.get_logger(__name__)


def setup_tracing(
    service_name: str,
    zipkin_endpoint: Optional[str] = None,
    exporter: Optional[SpanExporter] = None,
) -> TracerProvider:
    """
    Build a tracer provider for one service.

    The provider is handed to the application explicitly instead of being
    installed as the global provider.

    Args:
        service_name: Value for the ``service.name`` resource attribute
        zipkin_endpoint: Zipkin collector URL; spans are batched to it when set
        exporter: Exporter used synchronously instead of Zipkin (tests)

    Returns:
        Configured TracerProvider; the caller owns its shutdown
    """
    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))

    if exporter is not None:
        provider.add_span_processor(SimpleSpanProcessor(exporter))
    elif zipkin_endpoint:
        provider.add_span_processor(BatchSpanProcessor(ZipkinExporter(endpoint=zipkin_endpoint)))
        logger.info("Exporting spans to Zipkin", service=service_name, endpoint=zipkin_endpoint)
    else:
        logger.warning("No Zipkin endpoint configured, spans will not be exported", service=service_name)

    return provider


def inject_trace_headers(headers: MutableMapping[str, str]) -> MutableMapping[str, str]:
    """Write the current trace context into outbound request headers."""
    propagate.inject(headers)
    return headers


def extract_trace_context(headers: Mapping[str, str]) -> Context:
    """Read the caller's trace context from inbound request headers."""
    return propagate.extract(headers)


@contextmanager
def client_span(tracer: Tracer, method: str, url: str) -> Iterator[Span]:
    """
    Client span around one outbound HTTP call.

    ``url`` must not carry credentials; it is recorded as ``url.full``.
    Headers injected while the span is current make it the parent of the
    downstream server span.
    """
    with tracer.start_as_current_span(
        f"HTTP {method}",
        kind=SpanKind.CLIENT,
        attributes={"http.request.method": method, "url.full": url},
    ) as span:
        yield span


def record_response_status(span: Span, status_code: int):
    span.set_attribute("http.response.status_code", status_code)
    if status_code >= 500:
        span.set_status(Status(StatusCode.ERROR))
