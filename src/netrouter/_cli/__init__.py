import click

from ._utils._common import load_environment
from .cli_classify import classify
from .cli_send import send


@click.group()
@click.version_option(package_name="netrouter")
def cli() -> None:
    """Send declaratively described HTTP requests."""
    load_environment()


cli.add_command(send)
cli.add_command(classify)

__all__ = ["cli"]
