from enum import Enum


class NetworkResponse(str, Enum):
    """Response categories and the default error text of each one."""

    SUCCESS = "success"
    """Used for 100-299 HTTP status codes."""

    BAD_REQUEST = "Bad request"
    """Used for the 400 HTTP status code."""

    AUTHENTICATION_ERROR = "You need to be authenticated first."
    """Used for the 403 HTTP status code."""

    CLIENT_ERROR = "Some client error occurred"
    """Used for the other 400-499 HTTP status codes."""

    SERVER_ERROR = "Server error"
    """Used for 500-599 HTTP status codes."""

    FAILED = "Network request failed."
    """Used for any other HTTP status code."""

    NO_DATA = "Response returned with no data to decode."
    """Used when a successful response has an empty body."""

    UNABLE_TO_DECODE = "We could not decode the response."
    """Used when the body cannot be decoded into the requested type."""


class NetRouterError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class RequestBuildError(NetRouterError):
    """Raised when the request URL cannot be assembled from an endpoint.

    No network call is attempted in that case.
    """

    def __init__(self, message: str = "Could not build request", url: str = ""):
        self.url = url
        super().__init__(f"{message}: {url}" if url else message)


class RequestFailedError(NetRouterError):
    """Raised by ``RequestResult.unwrap`` when the request produced an error."""


class BaseUrlMissingError(NetRouterError):
    def __init__(
        self,
        message="Base URL required. Pass it as an argument or set the NETROUTER_BASE_URL environment variable.",
    ):
        super().__init__(message)
