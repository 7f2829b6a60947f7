"""Quote pricing, history and analysis commands."""

from pathlib import Path
from typing import Annotated

import typer

from sheetfit.application.commands import QuoteCommand
from sheetfit.domain.errors import PackingInputError
from sheetfit.domain.services.pricing import (
    DEFAULT_WASTE_FACTOR,
    BoxDimensions,
    MaterialCosts,
    MaterialGrade,
    QuoteInput,
)
from sheetfit.infrastructure.formatters import QuoteFormatter, QuoteHistoryFormatter
from sheetfit.infrastructure.llm import DEFAULT_MODEL, DEFAULT_OLLAMA_URL, QuoteAnalyst
from sheetfit.infrastructure.quote_store import (
    STORE_ENV_VAR,
    QuoteHistoryStore,
    QuoteStoreError,
)

StoreOption = Annotated[
    Path | None,
    typer.Option(
        "--store",
        envvar=STORE_ENV_VAR,
        help="Quote history file (default: ~/.sheetfit/quotes.jsonl)",
    ),
]


def quote_command(
    length: Annotated[float, typer.Option("--length", help="Box length in cm")],
    width: Annotated[float, typer.Option("--width", help="Box width in cm")],
    height: Annotated[float, typer.Option("--height", help="Box height in cm")],
    material: Annotated[
        MaterialGrade, typer.Option("--material", "-m", help="Board grade")
    ] = MaterialGrade.A,
    margin: Annotated[
        float, typer.Option("--margin", help="Margin percentage on unit cost")
    ] = 30.0,
    volume: Annotated[int, typer.Option("--volume", help="Units in the project")] = 1000,
    fabrication: Annotated[
        float, typer.Option("--fabrication", help="Fabrication cost per unit")
    ] = 0.50,
    marketing: Annotated[
        float, typer.Option("--marketing", help="Marketing cost per unit")
    ] = 0.20,
    price_a: Annotated[
        float, typer.Option("--price-a", help="Grade A board price per m2")
    ] = 0.85,
    price_b: Annotated[
        float, typer.Option("--price-b", help="Grade B board price per m2")
    ] = 1.20,
    waste_factor: Annotated[
        float, typer.Option("--waste-factor", help="Multiplier on raw board area")
    ] = DEFAULT_WASTE_FACTOR,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, json")
    ] = "text",
    save: Annotated[
        bool, typer.Option("--save", help="Append the quote to the history file")
    ] = False,
    store: StoreOption = None,
) -> None:
    """Price a box and optionally save the quote to history."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=1)

    try:
        quote = QuoteInput(
            dimensions=BoxDimensions(length=length, width=width, height=height),
            material=material,
            material_costs=MaterialCosts(grade_a=price_a, grade_b=price_b),
            fabrication_cost=fabrication,
            marketing_cost=marketing,
            margin_percent=margin,
            volume=volume,
            waste_factor=waste_factor,
        )
    except (PackingInputError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    outcome = QuoteCommand(QuoteHistoryStore(store)).execute(quote, save=save)

    formatter = QuoteFormatter()
    if output_format == "json":
        typer.echo(formatter.to_json(outcome.quote, outcome.breakdown))
    else:
        typer.echo(formatter.format(outcome.quote, outcome.breakdown))

    if outcome.record is not None:
        typer.echo(f"Saved quote {outcome.record.id}", err=True)


def _load_recent(store: Path | None, limit: int):
    try:
        return QuoteHistoryStore(store).recent(limit=limit)
    except QuoteStoreError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)


def history_command(
    limit: Annotated[int, typer.Option("--limit", "-n", min=1, help="Quotes to show")] = 20,
    store: StoreOption = None,
) -> None:
    """List saved quotes, newest first."""
    typer.echo(QuoteHistoryFormatter().format(_load_recent(store, limit)))


def analyze_command(
    limit: Annotated[
        int, typer.Option("--limit", "-n", min=1, help="Quotes to analyze")
    ] = 50,
    store: StoreOption = None,
    model: Annotated[str, typer.Option("--model", help="Ollama model name")] = DEFAULT_MODEL,
    ollama_url: Annotated[
        str, typer.Option("--ollama-url", help="Ollama server URL")
    ] = DEFAULT_OLLAMA_URL,
    timeout: Annotated[
        float, typer.Option("--timeout", help="Generation timeout in seconds")
    ] = 60.0,
) -> None:
    """Review saved quotes with a local LLM (rule-based if unavailable)."""
    records = _load_recent(store, limit)
    if not records:
        typer.echo("No saved quotes to analyze. Save some with 'quote --save'.", err=True)
        raise typer.Exit(code=1)

    analyst = QuoteAnalyst(ollama_url=ollama_url, model=model, timeout=timeout)
    typer.echo(analyst.analyze_sync(records))
