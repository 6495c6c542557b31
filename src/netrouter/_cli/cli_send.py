import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click

from .._config import RouterConfig
from .._services import DefaultNetworkLogger, NullNetworkLogger, Router
from ..models import (
    BaseUrlMissingError,
    ContentType,
    EndpointSpec,
    HttpMethod,
    RequestBuildError,
)
from ._utils._common import parse_pairs
from ._utils._formatters import format_output


@click.command()
@click.argument("base_url", required=False)
@click.argument("path", required=False, default="")
@click.option(
    "--method",
    "-X",
    type=click.Choice([m.value for m in HttpMethod], case_sensitive=False),
    default=HttpMethod.GET.value,
    show_default=True,
    help="HTTP method",
)
@click.option("--header", "-H", "headers", multiple=True, help="Header as KEY:VALUE")
@click.option("--query", "-q", "queries", multiple=True, help="Query parameter as KEY=VALUE")
@click.option("--field", "-F", "fields", multiple=True, help="Body field as KEY=VALUE")
@click.option(
    "--file",
    "files",
    multiple=True,
    help="File to upload as KEY=PATH (implies --multipart)",
)
@click.option("--multipart", is_flag=True, help="Send the body as multipart form data")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--insecure", is_flag=True, help="Do not verify TLS certificates")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "table"]),
    default="json",
    show_default=True,
    help="Output format for the decoded body",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write output to a file")
@click.option("--verbose", "-v", is_flag=True, help="Log the outgoing request and incoming response")
def send(
    base_url: Optional[str],
    path: str,
    method: str,
    headers: tuple[str, ...],
    queries: tuple[str, ...],
    fields: tuple[str, ...],
    files: tuple[str, ...],
    multipart: bool,
    timeout: Optional[float],
    insecure: bool,
    fmt: str,
    output: Optional[str],
    verbose: bool,
) -> None:
    r"""Send one request and print the decoded JSON response.

    BASE_URL defaults to the NETROUTER_BASE_URL environment variable.

    \b
    Examples:
        netrouter send https://api.example.com /items -q q=shoes
        netrouter send https://api.example.com /items -X POST -F name=boot
        netrouter send https://api.example.com /upload --file avatar=./me.png
    """
    config = RouterConfig.from_env(
        base_url=base_url,
        timeout=timeout,
        verify_ssl=False if insecure else None,
    )
    if not config.base_url:
        raise click.UsageError(BaseUrlMissingError().message)

    body: dict[str, Any] = dict(parse_pairs(fields, "=", "--field"))
    body.update(
        {key: Path(value) for key, value in parse_pairs(files, "=", "--file").items()}
    )

    endpoint = EndpointSpec(
        base_url=config.base_url,
        path=path,
        http_method=HttpMethod(method.upper()),
        body_parameters=body or None,
        url_parameters=parse_pairs(queries, "=", "--query") or None,
        additional_headers=parse_pairs(headers, ":", "--header") or None,
        content_type=(
            ContentType.MULTIPART_FORM_DATA if multipart or files else ContentType.JSON
        ),
    )

    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)
    network_logger = DefaultNetworkLogger() if verbose else NullNetworkLogger()

    with Router(network_logger=network_logger, config=config) as router:
        try:
            result = router.request(endpoint, Any)  # type: ignore[arg-type]
        except RequestBuildError as e:
            click.echo(f"Error: {e.message}", err=True)
            click.get_current_context().exit(2)

    if result.is_err:
        click.echo(f"Error: {result.error}", err=True)
        click.get_current_context().exit(1)

    format_output(result.value, fmt=fmt, output=output)
