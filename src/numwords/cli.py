"""Command-line interface for numwords."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Optional

import polars as pl
import typer
from rich.console import Console
from rich.table import Table

from numwords.api import KINDS, to_words
from numwords.batch import render_many
from numwords.config import NumWordsSettings, load_settings
from numwords.exceptions import NumWordsError
from numwords.log import configure_logging
from numwords.registry import get_default_registry

app = typer.Typer(
    name="numwords",
    help="Spell numbers as words in dozens of locales",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


# =============================================================================
# Type Aliases
# =============================================================================

ValueArg = Annotated[str, typer.Argument(help="Number to spell (use -- before negative values)")]

LocaleOpt = Annotated[
    Optional[str],
    typer.Option("--locale", "-l", help="Locale code (default from configuration)"),
]

OptionOpt = Annotated[
    Optional[list[str]],
    typer.Option("--option", "-o", help="Render option as key=value (repeatable)"),
]


# =============================================================================
# Helper Functions
# =============================================================================


def parse_option_pairs(pairs: list[str] | None) -> dict[str, Any]:
    """Parse ``key=value`` pairs. "true" and "false" become booleans.

    Raises:
        typer.BadParameter: If a pair has no "=".
    """
    options: dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--option")
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            options[key.strip()] = lowered == "true"
        else:
            options[key.strip()] = value.strip()
    return options


def _settings(ctx: typer.Context) -> NumWordsSettings:
    return ctx.obj if isinstance(ctx.obj, NumWordsSettings) else NumWordsSettings()


def _fail(error: Exception) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _render(ctx: typer.Context, kind: str, value: str, locale: str | None, pairs: list[str] | None) -> None:
    settings = _settings(ctx)
    options = {**settings.options, **parse_option_pairs(pairs)}
    try:
        words = to_words(value, locale or settings.locale, kind, **options)
    except NumWordsError as e:
        _fail(e)
    typer.echo(words)


def _read_frame(path: Path) -> pl.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        # strings keep every digit of large or precise values
        return pl.read_csv(path, infer_schema_length=0)
    if suffix in (".parquet", ".pq"):
        return pl.read_parquet(path)
    raise typer.BadParameter(f"Unsupported file format: {suffix}", param_hint="FILE")


def _write_frame(df: pl.DataFrame, path: Path) -> None:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df.write_csv(path)
    elif suffix in (".parquet", ".pq"):
        df.write_parquet(path)
    else:
        raise typer.BadParameter(f"Unsupported output format: {suffix}", param_hint="--output")


# =============================================================================
# Commands
# =============================================================================


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file (YAML, JSON or TOML)"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"),
    ] = None,
) -> None:
    """Spell numbers as words."""
    try:
        settings = load_settings(config)
        configure_logging(log_level or settings.log_level)
    except (NumWordsError, ValueError) as e:
        _fail(e)
    ctx.obj = settings


@app.command(name="cardinal")
def cardinal_cmd(ctx: typer.Context, value: ValueArg, locale: LocaleOpt = None, option: OptionOpt = None) -> None:
    """Spell a number as a cardinal."""
    _render(ctx, "cardinal", value, locale, option)


@app.command(name="ordinal")
def ordinal_cmd(ctx: typer.Context, value: ValueArg, locale: LocaleOpt = None, option: OptionOpt = None) -> None:
    """Spell a positive integer as an ordinal."""
    _render(ctx, "ordinal", value, locale, option)


@app.command(name="currency")
def currency_cmd(ctx: typer.Context, value: ValueArg, locale: LocaleOpt = None, option: OptionOpt = None) -> None:
    """Spell an amount in the locale's currency."""
    _render(ctx, "currency", value, locale, option)


@app.command(name="languages")
def languages_cmd(
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table")] = False,
) -> None:
    """List the supported locales."""
    capabilities = [language.capabilities for language in get_default_registry()]

    if as_json:
        typer.echo(json.dumps([c.to_dict() for c in capabilities], ensure_ascii=False, indent=2))
        return

    table = Table(title="Supported locales")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Cardinal", justify="center")
    table.add_column("Ordinal", justify="center")
    table.add_column("Currency", justify="center")
    table.add_column("Options", style="dim")

    def mark(flag: bool) -> str:
        return "[green]yes[/green]" if flag else "[red]no[/red]"

    for c in capabilities:
        ordinal = mark(c.ordinal) + (" [yellow](naive)[/yellow]" if c.naive_ordinals else "")
        table.add_row(c.code, c.name, mark(c.cardinal), ordinal, mark(c.currency), ", ".join(c.options))

    console.print(table)


@app.command(name="batch")
def batch_cmd(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="CSV or Parquet file")],
    column: Annotated[str, typer.Option("--column", help="Column holding the numbers")],
    kind: Annotated[str, typer.Option("--kind", "-k", help="cardinal, ordinal or currency")] = "cardinal",
    locale: LocaleOpt = None,
    option: OptionOpt = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", help="Output file (CSV or Parquet); prints CSV when omitted"),
    ] = None,
    alias: Annotated[Optional[str], typer.Option("--alias", help="Name of the new column")] = None,
    null_on_error: Annotated[
        bool,
        typer.Option("--null-on-error", help="Write null for values that cannot be parsed"),
    ] = False,
) -> None:
    """Add a column of words to a CSV or Parquet file."""
    if not file.exists():
        _fail(FileNotFoundError(f"File not found: {file}"))
    if kind not in KINDS:
        raise typer.BadParameter(f"Expected one of: {', '.join(KINDS)}", param_hint="--kind")

    settings = _settings(ctx)
    options = {**settings.options, **parse_option_pairs(option)}

    df = _read_frame(file)
    if column not in df.columns:
        _fail(KeyError(f"Column '{column}' not found. Available: {', '.join(df.columns)}"))

    try:
        words = render_many(
            df.get_column(column).to_list(),
            locale or settings.locale,
            kind,
            settings.batch_workers,
            chunk_size=settings.batch_chunk_size,
            errors="null" if null_on_error else "raise",
            **options,
        )
    except NumWordsError as e:
        _fail(e)

    result = df.with_columns(pl.Series(alias or f"{column}_words", words, dtype=pl.String))
    if output is None:
        typer.echo(result.write_csv(), nl=False)
    else:
        _write_frame(result, output)
        typer.echo(f"Wrote {result.height} rows to {output}")


@app.command(name="version")
def version_cmd() -> None:
    """Show the installed version."""
    from numwords import __version__

    typer.echo(f"numwords {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
