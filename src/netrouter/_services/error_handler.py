from typing import Callable, Optional, Protocol

from httpx import Response

from ..models.errors import NetworkResponse
from ..models.results import NetworkResult

NetworkErrorLookup = Callable[[NetworkResponse], str]


class ErrorHandler(Protocol):
    """Classifies HTTP responses and provides the router's error messages.

    Implement this protocol to replace the classification logic entirely; to
    only change the wording use ``DefaultErrorHandler(get_network_error=...)``.
    """

    no_data_error_message: str
    """Returned when a successful response has an empty body."""

    unable_to_decode_error_message: str
    """Returned when the response body could not be decoded."""

    def handle_network_response(self, response: Response) -> NetworkResult: ...


def classify_status(status_code: int) -> NetworkResponse:
    """Map an HTTP status code to its response category.

    400 and 403 are checked before the general 4xx band.
    """
    if 100 <= status_code <= 299:
        return NetworkResponse.SUCCESS
    if status_code == 400:
        return NetworkResponse.BAD_REQUEST
    if status_code == 403:
        return NetworkResponse.AUTHENTICATION_ERROR
    if 400 <= status_code <= 499:
        return NetworkResponse.CLIENT_ERROR
    if 500 <= status_code <= 599:
        return NetworkResponse.SERVER_ERROR
    return NetworkResponse.FAILED


def default_network_error(response_type: NetworkResponse) -> str:
    return response_type.value


class DefaultErrorHandler:
    """The error handler used by a ``Router`` unless another one is given.

    Args:
        get_network_error: Maps a response category to the message returned to
            the caller. Defaults to the ``NetworkResponse`` values.
        no_data_error_message: Message for successful responses without a body.
        unable_to_decode_error_message: Message for undecodable bodies.

    Examples:
        ```python
        messages = {NetworkResponse.SERVER_ERROR: "Try again later"}
        handler = DefaultErrorHandler(
            get_network_error=lambda kind: messages.get(kind, kind.value)
        )
        ```
    """

    def __init__(
        self,
        get_network_error: Optional[NetworkErrorLookup] = None,
        no_data_error_message: str = NetworkResponse.NO_DATA.value,
        unable_to_decode_error_message: str = NetworkResponse.UNABLE_TO_DECODE.value,
    ) -> None:
        self.get_network_error = get_network_error or default_network_error
        self.no_data_error_message = no_data_error_message
        self.unable_to_decode_error_message = unable_to_decode_error_message

    def classify(self, status_code: int) -> NetworkResult:
        response_type = classify_status(status_code)
        if response_type == NetworkResponse.SUCCESS:
            return NetworkResult.success()
        return NetworkResult.failure(self.get_network_error(response_type))

    def handle_network_response(self, response: Response) -> NetworkResult:
        return self.classify(response.status_code)
