import asyncio
import logging
from typing import Any, Generic, Optional, TypeVar

from httpx import (
    URL,
    AsyncBaseTransport,
    AsyncClient,
    BaseTransport,
    Client,
    RequestError,
    Response,
)
from pydantic_core import PydanticSerializationError

from .._config import RouterConfig
from ..models.endpoint import Endpoint
from ..models.errors import NetworkResponse, RequestBuildError
from ..models.results import RequestResult
from ._request_builder import append_path, build_body, build_headers, build_url
from .decoder import JsonResponseDecoder, ResponseDecoder
from .error_handler import DefaultErrorHandler, ErrorHandler
from .network_logger import DefaultNetworkLogger, NetworkLogger

logger = logging.getLogger(__name__)

EP = TypeVar("EP", bound=Endpoint)
T = TypeVar("T")

# Unreadable upload files and body values that cannot be serialized as JSON
BODY_BUILD_ERRORS = (OSError, PydanticSerializationError, ValueError, TypeError)


def describe_transport_error(error: RequestError) -> str:
    return str(error) or type(error).__name__


class Router(Generic[EP]):
    """Sends HTTP requests described by endpoints and decodes their responses.

    Every call performs exactly one request and produces exactly one
    ``RequestResult``: the decoded value, or an error message describing the
    transport failure, the HTTP status category, an empty body or a body
    that could not be decoded. Nothing is retried.

    Args:
        network_logger: Observer notified before sending and after receiving.
            Defaults to ``DefaultNetworkLogger``.
        error_handler: Status code classifier and error messages. Defaults to
            ``DefaultErrorHandler``.
        decoder: Response body decoder. Defaults to ``JsonResponseDecoder``.
        config: Transport settings. Defaults to ``RouterConfig.from_env()``.
        transport: Optional httpx transport for the blocking client.
        async_transport: Optional httpx transport for the async client.

    Examples:
        ```python
        from netrouter import EndpointSpec, Router

        router = Router()
        endpoint = EndpointSpec(
            base_url="https://api.example.com",
            path="/items",
            url_parameters={"q": "shoes"},
        )
        error, items = router.request(endpoint, list[Item])
        ```
    """

    def __init__(
        self,
        network_logger: Optional[NetworkLogger] = None,
        error_handler: Optional[ErrorHandler] = None,
        decoder: Optional[ResponseDecoder] = None,
        config: Optional[RouterConfig] = None,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
    ) -> None:
        self.network_logger: NetworkLogger = network_logger or DefaultNetworkLogger()
        self.error_handler: ErrorHandler = error_handler or DefaultErrorHandler()
        self.decoder: ResponseDecoder = decoder or JsonResponseDecoder()
        self.config = config or RouterConfig.from_env()

        self._transport = transport
        self._async_transport = async_transport
        self._client: Optional[Client] = None
        self._client_async: Optional[AsyncClient] = None

    @property
    def client(self) -> Client:
        if self._client is None:
            client_kwargs: dict[str, Any] = self.config.client_kwargs()
            if self._transport is not None:
                client_kwargs["transport"] = self._transport
            self._client = Client(**client_kwargs)
        return self._client

    @property
    def client_async(self) -> AsyncClient:
        if self._client_async is None:
            client_kwargs: dict[str, Any] = self.config.client_kwargs()
            if self._async_transport is not None:
                client_kwargs["transport"] = self._async_transport
            self._client_async = AsyncClient(**client_kwargs)
        return self._client_async

    def request(self, endpoint: EP, returning: type[T]) -> RequestResult[T]:
        """Send the request described by ``endpoint`` and decode the response.

        A body that cannot be built (an unreadable upload file or a value that
        cannot be serialized as JSON) is reported as an error result without
        sending anything.

        Args:
            endpoint: The route to call.
            returning: The type the response body is decoded into.

        Returns:
            RequestResult[T]: The decoded value or an error message.

        Raises:
            RequestBuildError: If no valid URL can be built from the endpoint.
                Nothing is sent in that case.
        """
        url = self._build_url(endpoint)
        self._log_request(endpoint)
        try:
            body = build_body(endpoint)
        except BODY_BUILD_ERRORS as e:
            logger.debug(f"Could not build body for {url}: {e!r}")
            return RequestResult.err(str(e) or type(e).__name__)

        logger.debug(f"Request: {endpoint.http_method.value} {url}")
        try:
            response = self.client.request(
                endpoint.http_method.value,
                url,
                headers=build_headers(endpoint),
                **body.as_request_kwargs(),
            )
        except RequestError as e:
            logger.debug(f"Transport error for {url}: {e!r}")
            return RequestResult.err(describe_transport_error(e))

        return self._data_completion(response, returning)

    async def request_async(self, endpoint: EP, returning: type[T]) -> RequestResult[T]:
        """Asynchronously send the request described by ``endpoint``.

        Same outcomes as ``request``. Cancelling the awaiting task propagates
        the cancellation instead of producing a result.
        """
        url = self._build_url(endpoint)
        self._log_request(endpoint)
        try:
            body = build_body(endpoint)
        except BODY_BUILD_ERRORS as e:
            logger.debug(f"Could not build body for {url}: {e!r}")
            return RequestResult.err(str(e) or type(e).__name__)

        logger.debug(f"Request: {endpoint.http_method.value} {url}")
        try:
            response = await self.client_async.request(
                endpoint.http_method.value,
                url,
                headers=build_headers(endpoint),
                **body.as_request_kwargs(),
            )
        except RequestError as e:
            logger.debug(f"Transport error for {url}: {e!r}")
            return RequestResult.err(describe_transport_error(e))
        except asyncio.CancelledError:
            logger.debug(f"Request to {url} cancelled")
            raise

        return self._data_completion(response, returning)

    def _build_url(self, endpoint: EP) -> URL:
        url = build_url(endpoint)
        if url is None:
            raise RequestBuildError(url=append_path(endpoint.base_url, endpoint.path))
        return url

    def _data_completion(self, response: Response, returning: type[T]) -> RequestResult[T]:
        data = response.content
        self._log_response(response, data)

        result = self.error_handler.handle_network_response(response)
        if not result.is_success:
            logger.debug(f"Response {response.status_code}: {result.message}")
            return RequestResult.err(result.message or NetworkResponse.FAILED.value)

        if not data:
            return RequestResult.err(self.error_handler.no_data_error_message)

        try:
            value = self.decoder.decode(data, returning)
        except ValueError as e:
            logger.debug(f"Unable to decode response as {returning!r}: {e}")
            return RequestResult.err(self.error_handler.unable_to_decode_error_message)
        return RequestResult.ok(value)

    def _log_request(self, endpoint: EP) -> None:
        try:
            self.network_logger.log_request(endpoint)
        except Exception:
            logger.exception("Network logger failed in log_request")

    def _log_response(self, response: Response, data: bytes) -> None:
        try:
            self.network_logger.log_response(response, data)
        except Exception:
            logger.exception("Network logger failed in log_response")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    async def aclose(self) -> None:
        if self._client_async is not None:
            await self._client_async.aclose()
            self._client_async = None

    def __enter__(self) -> "Router[EP]":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "Router[EP]":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
