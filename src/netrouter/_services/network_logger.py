import json
import logging
from typing import Optional, Protocol

from httpx import Response

from .._utils._stringify import stringify_value
from .._utils.constants import LOGGER_NAME
from ..models.endpoint import Endpoint
from ._request_builder import build_headers, build_url

_OUTGOING = "\n - - - - - - - - - - OUTGOING - - - - - - - - - - \n"
_INCOMING = "\n - - - - - - - - - - INCOMING - - - - - - - - - - \n"
_END = "\n - - - - - - - - - -  END - - - - - - - - - - \n"


class NetworkLogger(Protocol):
    """Observer notified by the router around every request.

    Implementations may read what they receive but must not modify it.
    Exceptions raised here are logged by the router and otherwise ignored.
    """

    def log_request(self, endpoint: Endpoint) -> None:
        """Called before the request is sent."""
        ...

    def log_response(self, response: Optional[Response], data: Optional[bytes]) -> None:
        """Called once an HTTP response has been received."""
        ...


class DefaultNetworkLogger:
    """Writes human readable request/response dumps to the ``netrouter`` logger."""

    def __init__(
        self, logger: Optional[logging.Logger] = None, level: int = logging.INFO
    ) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)
        self._level = level

    def log_request(self, endpoint: Endpoint) -> None:
        if not self._logger.isEnabledFor(self._level):
            return
        url = build_url(endpoint)
        if url is None:
            return

        output = (
            f"{url} \n\n"
            f"{endpoint.http_method.value} {url.path}?{url.query.decode('ascii')} HTTP/1.1 \n"
            f"HOST: {url.host}\n"
        )
        for key, value in build_headers(endpoint).items():
            output += f"{key}: {value} \n"
        if endpoint.body_parameters:
            output += "\n{\n"
            for key, value in endpoint.body_parameters.items():
                output += f"    {key}: {stringify_value(value)} \n"
            output += "}"

        self._logger.log(self._level, f"{_OUTGOING}{output}{_END}")

    def log_response(self, response: Optional[Response], data: Optional[bytes]) -> None:
        if not self._logger.isEnabledFor(self._level):
            return
        url = response.request.url if response is not None else None
        status_code = response.status_code if response is not None else ""
        path = url.path if url is not None else ""
        query = url.query.decode("ascii") if url is not None else ""
        host = url.host if url is not None else ""

        output = (
            f"{url or ''} \n\n"
            f"{status_code} {path}?{query} HTTP/1.1 \n"
            f"HOST: {host}\n"
        )
        if data:
            try:
                output += json.dumps(json.loads(data), indent=4, ensure_ascii=False)
            except ValueError:
                pass

        self._logger.log(self._level, f"{_INCOMING}{output}{_END}")


class NullNetworkLogger:
    """Network logger that records nothing."""

    def log_request(self, endpoint: Endpoint) -> None:
        pass

    def log_response(self, response: Optional[Response], data: Optional[bytes]) -> None:
        pass
