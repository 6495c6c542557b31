from .endpoint import ContentType, Endpoint, EndpointSpec, HttpMethod, UploadingFile
from .errors import (
    BaseUrlMissingError,
    NetRouterError,
    NetworkResponse,
    RequestBuildError,
    RequestFailedError,
)
from .results import NetworkResult, RequestResult

__all__ = [
    "BaseUrlMissingError",
    "ContentType",
    "Endpoint",
    "EndpointSpec",
    "HttpMethod",
    "NetRouterError",
    "NetworkResponse",
    "NetworkResult",
    "RequestBuildError",
    "RequestFailedError",
    "RequestResult",
    "UploadingFile",
]
