"""
OpenTelemetry Trace Context Management

Client spans around each round trip and W3C trace context propagation in
HTTP headers. The JSON-RPC body is never touched.
"""

import logging
from typing import Any, Dict, Optional

from opentelemetry import propagate, trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

logger = logging.getLogger(__name__)

TRACER_NAME = "seam_rpc"


def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address

    Returns:
        Tracer: Tracer for the service
    """
    provider = TracerProvider(sampler=ALWAYS_ON)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    trace.set_tracer_provider(provider)

    tracer = trace.get_tracer(service_name)
    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")
    return tracer


def inject_trace_headers(headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Inject the current trace context into a header mapping

    Args:
        headers: Mapping to update, a new dict is created if None

    Returns:
        Dict[str, str]: Headers carrying ``traceparent`` (and ``tracestate``)
        when a span is active, otherwise unchanged
    """
    if headers is None:
        headers = {}
    propagate.inject(headers)
    return headers


def create_span(name: str, attributes: Dict[str, Any] = None):
    """Create a client span for one round trip

    Args:
        name: Span name
        attributes: Span attributes

    Returns:
        Context manager yielding the span
    """
    tracer = trace.get_tracer(TRACER_NAME)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.CLIENT,
    )
