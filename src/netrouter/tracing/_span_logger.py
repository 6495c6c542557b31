from typing import Optional

from httpx import Response
from opentelemetry import trace
from opentelemetry.trace import Span

from .._services._request_builder import build_url
from ..models.endpoint import Endpoint

REQUEST_EVENT = "http.request"
RESPONSE_EVENT = "http.response"


class SpanNetworkLogger:
    """Network logger that records requests and responses as span events.

    Events are added to the span that is current when the router notifies
    the logger. Without an active recording span nothing is recorded.
    """

    def __init__(self, record_body_size: bool = True) -> None:
        self._record_body_size = record_body_size

    def _current_span(self) -> Optional[Span]:
        span = trace.get_current_span()
        return span if span.is_recording() else None

    def log_request(self, endpoint: Endpoint) -> None:
        span = self._current_span()
        if span is None:
            return
        url = build_url(endpoint)
        span.add_event(
            REQUEST_EVENT,
            attributes={
                "http.request.method": endpoint.http_method.value,
                "url.full": str(url) if url is not None else "",
                "netrouter.content_type": endpoint.content_type.value,
            },
        )

    def log_response(self, response: Optional[Response], data: Optional[bytes]) -> None:
        span = self._current_span()
        if span is None:
            return
        attributes: dict[str, str | int] = {}
        if response is not None:
            attributes["http.response.status_code"] = response.status_code
            attributes["url.full"] = str(response.request.url)
        if self._record_body_size:
            attributes["http.response.body.size"] = len(data or b"")
        span.add_event(RESPONSE_EVENT, attributes=attributes)
