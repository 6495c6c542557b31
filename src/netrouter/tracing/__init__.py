"""OpenTelemetry integration for router instrumentation."""

from ._span_logger import REQUEST_EVENT, RESPONSE_EVENT, SpanNetworkLogger

__all__ = [
    "REQUEST_EVENT",
    "RESPONSE_EVENT",
    "SpanNetworkLogger",
]
