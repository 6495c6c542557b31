import logging
import mimetypes
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Optional

import httpx
from pydantic_core import to_jsonable_python

from .._utils._stringify import stringify_value
from ..models.endpoint import ContentType, Endpoint, UploadingFile

logger = logging.getLogger(__name__)

# (field name, (file name, content, mime type))
MultipartPart = tuple[str, tuple[Optional[str], bytes, Optional[str]]]


@dataclass(frozen=True)
class RequestBody:
    """Body of a request, shaped for ``httpx.Client.request``.

    Exactly one of ``json`` and ``files`` is used, depending on the endpoint
    content type.
    """

    content_type: ContentType
    json: Any = None
    files: Optional[list[MultipartPart]] = None

    def as_request_kwargs(self) -> dict[str, Any]:
        if self.content_type == ContentType.MULTIPART_FORM_DATA:
            return {"files": self.files} if self.files else {}
        return {"json": self.json} if self.json is not None else {}


def build_headers(endpoint: Endpoint) -> dict[str, str]:
    """Merge base and additional headers, additional ones winning on conflict."""
    headers: dict[str, str] = {}
    if endpoint.base_headers:
        headers.update(endpoint.base_headers)
    if endpoint.additional_headers:
        headers.update(endpoint.additional_headers)
    return headers


def append_path(base_url: str, path: str) -> str:
    if not path:
        return base_url
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def build_url(endpoint: Endpoint) -> Optional[httpx.URL]:
    """Build the absolute request URL, query string included.

    Returns:
        Optional[httpx.URL]: The URL, or ``None`` when the base URL and path do
        not form a valid absolute URL or a query value cannot be encoded.
    """
    raw_url = append_path(endpoint.base_url, endpoint.path)
    try:
        url = httpx.URL(raw_url)
        if endpoint.url_parameters:
            url = url.copy_merge_params(
                {
                    key: stringify_value(value)
                    for key, value in endpoint.url_parameters.items()
                }
            )
    except (httpx.InvalidURL, TypeError, UnicodeError) as e:
        logger.debug(f"Invalid URL {raw_url!r}: {e}")
        return None

    if not url.is_absolute_url:
        logger.debug(f"URL {raw_url!r} is not absolute")
        return None
    return url


def _file_part(key: str, path: Path) -> MultipartPart:
    mime_type, _ = mimetypes.guess_type(path.name)
    return (key, (path.name, path.read_bytes(), mime_type))


def build_multipart_parts(endpoint: Endpoint) -> list[MultipartPart]:
    """Turn body parameters into multipart form parts.

    Paths are read from disk, ``UploadingFile`` and raw bytes become byte
    parts, everything else is stringified and sent as UTF-8 text. Text that
    cannot be encoded as UTF-8 is left out of the body.

    Raises:
        OSError: If a referenced file cannot be read.
    """
    parts: list[MultipartPart] = []
    for key, value in (endpoint.body_parameters or {}).items():
        if isinstance(value, (Path, PathLike)):
            parts.append(_file_part(key, Path(value)))
        elif isinstance(value, UploadingFile):
            parts.append((key, (value.file_name, value.data, value.mime_type)))
        elif isinstance(value, (bytes, bytearray)):
            parts.append((key, (None, bytes(value), None)))
        else:
            try:
                data = stringify_value(value).encode("utf-8")
            except UnicodeEncodeError:
                logger.debug(f"Dropping multipart field {key!r}: not UTF-8 encodable")
                continue
            parts.append((key, (None, data, None)))
    return parts


def build_body(endpoint: Endpoint) -> RequestBody:
    """Shape the body parameters for the endpoint content type.

    Raises:
        OSError: If a multipart file reference cannot be read.
        ValueError: If a JSON body value cannot be serialized, such as bytes
            that are not valid UTF-8.
    """
    if endpoint.content_type == ContentType.MULTIPART_FORM_DATA:
        return RequestBody(
            content_type=endpoint.content_type,
            files=build_multipart_parts(endpoint),
        )

    json_body = (
        to_jsonable_python(dict(endpoint.body_parameters))
        if endpoint.body_parameters is not None
        else None
    )
    return RequestBody(content_type=endpoint.content_type, json=json_body)
