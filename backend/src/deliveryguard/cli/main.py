"""DeliveryGuard CLI entry point."""

import click

from deliveryguard.config import Settings, configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (overrides DELIVERYGUARD_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """DeliveryGuard — food-delivery submission validation CLI."""
    try:
        settings = Settings.from_env()
        if log_level:
            settings = Settings(log_level=log_level, output_format=settings.output_format)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(settings)
    ctx.obj = settings


# Register subcommands
from deliveryguard.cli.validate_cmd import kinds, validate  # noqa: E402

cli.add_command(validate)
cli.add_command(kinds)
