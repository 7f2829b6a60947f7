"""Validate command for checking job files.

Checks a JSON packing job for syntax and schema errors, and warns about
items that are too large for the sheet in either orientation.
"""

from pathlib import Path
from typing import Annotated

import typer

from sheetfit.application.config import (
    ConfigError,
    PackingJobConfiguration,
    load_config,
)


def oversized_items(config: PackingJobConfiguration) -> list[str]:
    """Labels of items that cannot fit the sheet in either orientation."""
    sheet = config.sheet
    labels: list[str] = []
    for item in config.items:
        fits = item.width <= sheet.width and item.height <= sheet.height
        fits_rotated = item.height <= sheet.width and item.width <= sheet.height
        if not (fits or fits_rotated):
            labels.append(item.display_label)
    return labels


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a packing job file.

    Exit codes:
        0 - Job file is valid
        1 - Job file has errors (cannot be used)
        2 - Job file is valid but some items can never fit the sheet

    Example:
        sheetfit validate job.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_config_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    too_big = oversized_items(config)
    if too_big:
        typer.echo("Warnings:")
        for label in too_big:
            typer.echo(f"  '{label}' is larger than the sheet in both orientations")
        raise typer.Exit(code=2)

    typer.echo(
        f"Job is valid: {len(config.items)} item types on a "
        f"{config.sheet.width:g} x {config.sheet.height:g} sheet."
    )


def display_config_error(error: ConfigError) -> None:
    """Print a ConfigError to stderr with its details."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(
                f"  {detail.get('path') or '(root)'}: {detail.get('message')}",
                err=True,
            )
    else:
        typer.echo(f"  {error.message}", err=True)
