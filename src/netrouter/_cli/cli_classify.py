import click

from .._services import DefaultErrorHandler, classify_status


@click.command()
@click.argument("status_code", type=click.IntRange(min=0))
def classify(status_code: int) -> None:
    """Show how an HTTP status code is classified."""
    category = classify_status(status_code)
    result = DefaultErrorHandler().classify(status_code)
    if result.is_success:
        click.echo(f"{status_code}: {category.name} (success)")
    else:
        click.echo(f"{status_code}: {category.name} - {result.message}")
