"""Validation CLI commands — validate submission files and list entity kinds."""

import json
from pathlib import Path

import click

from deliveryguard.config import OUTPUT_FORMATS, Settings
from deliveryguard.entities.loader import SubmissionLoader
from deliveryguard.entities.types import SubmissionFormatError
from deliveryguard.validation.registry import EntityValidatorRegistry, register_entity_validators
from deliveryguard.validation.services import SubmissionReport, ValidationService


def _echo_text(reports: list[SubmissionReport]) -> None:
    for report in reports:
        label = report.submission.label
        if report.format_error:
            click.echo(click.style(f"✗ {label}: {report.format_error}", fg="red"))
        elif report.valid:
            click.echo(click.style(f"✓ {label}: valid", fg="green"))
        else:
            click.echo(
                click.style(f"✗ {label}: {len(report.errors)} invalid field(s)", fg="red")
            )
            for field, messages in report.errors.items():
                for message in messages:
                    click.echo(f"    {field}: {message}")


@click.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Report format (overrides DELIVERYGUARD_OUTPUT_FORMAT).",
)
@click.option(
    "--kind",
    default=None,
    help="Only validate submissions of this entity kind.",
)
@click.pass_obj
def validate(settings: Settings | None, path: Path, output_format: str | None, kind: str | None):
    """Validate entity submissions in a YAML/JSON file or directory."""
    if settings is None:
        try:
            settings = Settings.from_env()
        except ValueError as e:
            raise click.ClickException(str(e)) from e
    output_format = output_format or settings.output_format
    register_entity_validators()

    try:
        submissions = SubmissionLoader(path).load_all()
    except SubmissionFormatError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    if kind:
        submissions = [s for s in submissions if s.kind == kind.lower()]

    if not submissions:
        click.echo(f"Error: No submissions found at {path}", err=True)
        raise SystemExit(1)

    service = ValidationService()
    reports = [service.validate_submission(s) for s in submissions]
    invalid = [r for r in reports if not r.valid]

    if output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in reports], indent=2))
    else:
        _echo_text(reports)
        colour = "red" if invalid else "green"
        click.echo(
            click.style(
                f"\n{len(reports) - len(invalid)} of {len(reports)} submission(s) valid.",
                fg=colour,
                bold=True,
            )
        )

    if invalid:
        raise SystemExit(1)


@click.command()
def kinds():
    """List the entity kinds that can be validated."""
    register_entity_validators()
    for kind in EntityValidatorRegistry.list_registered():
        registered = EntityValidatorRegistry.get(kind)
        click.echo(f"  {kind} ({registered.label})")
