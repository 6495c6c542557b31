from ._request_builder import RequestBody, build_body, build_headers, build_url
from .decoder import JsonResponseDecoder, ResponseDecoder
from .error_handler import DefaultErrorHandler, ErrorHandler, classify_status
from .network_logger import DefaultNetworkLogger, NetworkLogger, NullNetworkLogger
from .router import Router

__all__ = [
    "DefaultErrorHandler",
    "DefaultNetworkLogger",
    "ErrorHandler",
    "JsonResponseDecoder",
    "NetworkLogger",
    "NullNetworkLogger",
    "RequestBody",
    "ResponseDecoder",
    "Router",
    "build_body",
    "build_headers",
    "build_url",
    "classify_status",
]
