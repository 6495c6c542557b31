"""Declarative HTTP routing: describe endpoints as data, get typed results back."""

from ._config import RouterConfig
from ._services import (
    DefaultErrorHandler,
    DefaultNetworkLogger,
    ErrorHandler,
    JsonResponseDecoder,
    NetworkLogger,
    NullNetworkLogger,
    ResponseDecoder,
    Router,
    classify_status,
)
from ._utils import stringify_value
from .models import (
    ContentType,
    Endpoint,
    EndpointSpec,
    HttpMethod,
    NetRouterError,
    NetworkResponse,
    NetworkResult,
    RequestBuildError,
    RequestFailedError,
    RequestResult,
    UploadingFile,
)

__all__ = [
    "ContentType",
    "DefaultErrorHandler",
    "DefaultNetworkLogger",
    "Endpoint",
    "EndpointSpec",
    "ErrorHandler",
    "HttpMethod",
    "JsonResponseDecoder",
    "NetRouterError",
    "NetworkLogger",
    "NetworkResponse",
    "NetworkResult",
    "NullNetworkLogger",
    "RequestBuildError",
    "RequestFailedError",
    "RequestResult",
    "ResponseDecoder",
    "Router",
    "RouterConfig",
    "UploadingFile",
    "classify_status",
    "stringify_value",
]
