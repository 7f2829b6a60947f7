"""Typer CLI for sheet packing and box quotes."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from sheetfit.application.commands import FitSheetCommand
from sheetfit.application.config import (
    ConfigError,
    PackingJobConfiguration,
    load_config,
    load_config_from_dict,
)
from sheetfit.cli.commands import (
    analyze_command,
    display_config_error,
    history_command,
    quote_command,
    validate_command,
)
from sheetfit.domain.errors import PackingInputError
from sheetfit.infrastructure import JsonExporter, PackResultFormatter

app = typer.Typer(
    name="sheetfit",
    help="Lay out box blanks on a stock sheet and price corrugated boxes.",
)

app.command(name="validate")(validate_command)
app.command(name="quote")(quote_command)
app.command(name="history")(history_command)
app.command(name="analyze")(analyze_command)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging")
    ] = False,
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def parse_item_spec(spec: str) -> tuple[str, float, float, int]:
    """Parse an --item value of the form LABEL:WxH[:QTY].

    Examples:
        >>> parse_item_spec("Caja A:30x20:5")
        ('Caja A', 30.0, 20.0, 5)
        >>> parse_item_spec("Lid:40x40")
        ('Lid', 40.0, 40.0, 1)
    """
    parts = spec.split(":")
    if len(parts) not in (2, 3) or "x" not in parts[1].lower():
        raise ValueError(
            f"Invalid item '{spec}'. Expected LABEL:WxH or LABEL:WxH:QTY"
        )
    label = parts[0].strip()
    width_str, _, height_str = parts[1].lower().partition("x")
    try:
        width = float(width_str)
        height = float(height_str)
        quantity = int(parts[2]) if len(parts) == 3 else 1
    except ValueError:
        raise ValueError(
            f"Invalid item '{spec}'. Dimensions must be numbers and quantity an integer"
        )
    return label, width, height, quantity


def _build_job(
    config_file: Path | None,
    sheet_width: float | None,
    sheet_height: float | None,
    item_specs: list[str],
) -> PackingJobConfiguration:
    """Combine a job file with command line overrides.

    Sheet options override the file's sheet and --item entries are added
    after the file's items.
    """
    data: dict[str, Any]
    if config_file is not None:
        data = load_config(config_file).model_dump()
    else:
        if sheet_width is None or sheet_height is None:
            raise ValueError(
                "Provide --config or both --sheet-width and --sheet-height"
            )
        data = {"sheet": {}, "items": []}

    if sheet_width is not None:
        data["sheet"]["width"] = sheet_width
    if sheet_height is not None:
        data["sheet"]["height"] = sheet_height

    int_ids = [item["id"] for item in data["items"] if isinstance(item["id"], int)]
    next_id = max(int_ids, default=0) + 1
    for offset, spec in enumerate(item_specs):
        label, width, height, quantity = parse_item_spec(spec)
        data["items"].append(
            {
                "id": next_id + offset,
                "label": label or None,
                "width": width,
                "height": height,
                "quantity": quantity,
            }
        )

    return load_config_from_dict(data)


@app.command()
def fit(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    sheet_width: Annotated[
        float | None,
        typer.Option("--sheet-width", "-W", help="Stock sheet width"),
    ] = None,
    sheet_height: Annotated[
        float | None,
        typer.Option("--sheet-height", "-H", help="Stock sheet height"),
    ] = None,
    items: Annotated[
        list[str] | None,
        typer.Option("--item", "-i", help="Item as LABEL:WxH[:QTY], repeatable"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Pack items onto a single stock sheet.

    Exit codes:
        0 - All items placed
        1 - Invalid input
        2 - Some items did not fit the sheet

    Example:
        sheetfit fit -W 200 -H 100 -i "Caja A:30x20:5" -i "Caja B:40x40:2"
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=1)

    try:
        job = _build_job(config_file, sheet_width, sheet_height, items or [])
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        result = FitSheetCommand().execute(job)
    except PackingInputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        output = JsonExporter().export(result)
    else:
        output = PackResultFormatter().format(result)

    if output_file is not None:
        output_file.write_text(output + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output_file}")
    else:
        typer.echo(output)

    if result.unplaced:
        typer.echo(
            f"Warning: {len(result.unplaced)} item(s) did not fit the sheet",
            err=True,
        )
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
