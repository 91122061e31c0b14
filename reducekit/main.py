from __future__ import annotations

import json
from typing import List, Optional

import typer

from reducekit.aggregation import reduce
from reducekit.config import get_settings
from reducekit.errors import EmptySequenceError, UnknownMatcherError
from reducekit.lab import DRIVER_RECORDS, DRIVERS, total_batteries
from reducekit.reporter import print_match_result
from reducekit.runner import RunConfig, available_matchers, run_matcher
from reducekit.utils.logging import configure_logging

app = typer.Typer(help="reducekit: reduce and matcher lessons CLI.")


def _format_number(value: float) -> str:
    """Render a total without losing digits; whole numbers drop the trailing .0."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


@app.callback()
def main() -> None:
    """
    Configure logging from settings before any command runs.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.json_logs} | "
        f"case_folding={settings.case_folding} record_name_field={settings.record_name_field}"
    )


@app.command("sum")
def sum_numbers(
    numbers: List[float] = typer.Argument(
        None,
        help="Numbers to add together. Put -- before negative numbers: sum -- 5 -2.",
    ),
    initial: Optional[float] = typer.Option(
        None,
        "--initial",
        "-i",
        help="Starting value; when omitted the first number seeds the total.",
    ),
) -> None:
    """
    Reduce numbers by addition.
    """
    values = numbers or []
    try:
        if initial is None:
            total = reduce(values, lambda acc, x: acc + x)
        else:
            total = reduce(values, lambda acc, x: acc + x, initial)
    except EmptySequenceError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(_format_number(total))


@app.command()
def batteries() -> None:
    """
    Print the total number of assembled batteries.
    """
    typer.echo(str(total_batteries()))


@app.command()
def matchers() -> None:
    """
    List registered matcher names.
    """
    typer.echo("Available matchers: " + ", ".join(available_matchers()))


@app.command()
def match(
    matcher: str = typer.Argument(..., help="Matcher name (see `matchers`)."),
    target: str = typer.Argument(..., help="Value, or prefix for the prefix matcher."),
    items: List[str] = typer.Argument(
        None, help="Candidates; defaults to the lesson's sample drivers."
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit the raw result as JSON."),
) -> None:
    """
    Run a matcher against the given items and print the matches.
    """
    if items:
        candidates: list = list(items)
    elif matcher == "record":
        candidates = list(DRIVER_RECORDS)
    else:
        candidates = list(DRIVERS)

    try:
        result = run_matcher(RunConfig(matcher=matcher, target=target, items=candidates))
    except UnknownMatcherError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(json.dumps(result, indent=2, default=str))
    else:
        print_match_result(result)

    if result.get("error"):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
