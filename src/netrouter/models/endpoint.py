from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable


class HttpMethod(str, Enum):
    """HTTP methods a router request can use."""

    CONNECT = "CONNECT"
    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"
    TRACE = "TRACE"


class ContentType(str, Enum):
    """How the request body is encoded."""

    JSON = "json"
    MULTIPART_FORM_DATA = "multipart_form_data"


@dataclass(frozen=True)
class UploadingFile:
    """A file sent as one part of a multipart upload.

    Use instances of this class as values of ``body_parameters`` on an
    endpoint whose content type is ``ContentType.MULTIPART_FORM_DATA``.

    Attributes:
        data: Raw file content.
        file_name: The file name including its extension.
        mime_type: Optional MIME type of the content. Guessed from the file
            name when omitted.
    """

    data: bytes
    file_name: str
    mime_type: Optional[str] = None


BodyValue = Union[
    str, int, float, bool, None, bytes, UploadingFile, Path, list[Any], dict[str, Any]
]


@runtime_checkable
class Endpoint(Protocol):
    """Description of one HTTP route.

    Anything exposing these attributes can be sent by a ``Router``: a plain
    ``EndpointSpec`` record, or a class whose properties compute the values
    per route.
    """

    @property
    def base_url(self) -> str:
        """Base URL shared by a group of routes, e.g. ``https://example.com/api``."""
        ...

    @property
    def path(self) -> str:
        """The end of the target URL, e.g. ``/some/service/``."""
        ...

    @property
    def http_method(self) -> HttpMethod: ...

    @property
    def body_parameters(self) -> Optional[Mapping[str, BodyValue]]:
        """Parameters sent in the request body."""
        ...

    @property
    def url_parameters(self) -> Optional[Mapping[str, Any]]:
        """Parameters sent as the URL query string."""
        ...

    @property
    def base_headers(self) -> Optional[Mapping[str, str]]:
        """Headers shared by a group of routes, e.g. ``Authorization``."""
        ...

    @property
    def additional_headers(self) -> Optional[Mapping[str, str]]:
        """Route specific headers. They override ``base_headers``."""
        ...

    @property
    def content_type(self) -> ContentType: ...


@dataclass(frozen=True)
class EndpointSpec:
    """Immutable record implementing the ``Endpoint`` protocol."""

    base_url: str
    path: str = ""
    http_method: HttpMethod = HttpMethod.GET
    body_parameters: Optional[Mapping[str, BodyValue]] = None
    url_parameters: Optional[Mapping[str, Any]] = None
    base_headers: Optional[Mapping[str, str]] = None
    additional_headers: Optional[Mapping[str, str]] = None
    content_type: ContentType = ContentType.JSON
