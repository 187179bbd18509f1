"""Batch rendering over polars Series, DataFrames and plain iterables.

Every locale is immutable once built, so one Language object is shared by
all worker threads.

Example:
    >>> import polars as pl
    >>> from numwords.batch import render_column
    >>> df = pl.DataFrame({"amount": [1, 21, None]})
    >>> render_column(df, "amount", "en")["amount_words"].to_list()
    ['one', 'twenty-one', None]
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import Any, Callable, Iterable, Literal

import polars as pl

from numwords.api import KINDS
from numwords.exceptions import ValueParseError
from numwords.registry import get_language

logger = logging.getLogger(__name__)

ErrorMode = Literal["raise", "null"]

DEFAULT_WORKERS = 4
DEFAULT_CHUNK_SIZE = 1024


# =============================================================================
# Renderer
# =============================================================================


def make_renderer(
    locale: str,
    kind: str = "cardinal",
    errors: ErrorMode = "raise",
    **options: Any,
) -> Callable[[Any], str | None]:
    """Build a single-value renderer with options validated up front.

    Args:
        locale: Locale code.
        kind: "cardinal", "ordinal" or "currency".
        errors: "raise" propagates parser errors, "null" turns them into None.
        **options: Render options.

    Returns:
        A function mapping one value to its words. None maps to None.

    Raises:
        ValueError: If ``kind`` or ``errors`` is unknown.
        UnsupportedLocaleError: If the locale is not registered.
        InvalidOptionError: If an option is not accepted by the locale.
    """
    if kind not in KINDS:
        raise ValueError(f"Unknown kind '{kind}'. Expected one of: {', '.join(KINDS)}")
    if errors not in ("raise", "null"):
        raise ValueError(f"Unknown error mode '{errors}'. Expected 'raise' or 'null'")

    language = get_language(locale)
    language.resolve_options(
        options, language.table.currency_options if kind == "currency" else None
    )
    render = getattr(language, kind)

    def renderer(value: Any) -> str | None:
        if value is None:
            return None
        try:
            return render(value, **options)
        except ValueParseError:
            if errors == "null":
                logger.debug("Rendering %r as null", value)
                return None
            raise

    return renderer


# =============================================================================
# Concurrent rendering
# =============================================================================


def _chunks(values: Iterable[Any], size: int) -> Iterable[list[Any]]:
    iterator = iter(values)
    while chunk := list(islice(iterator, size)):
        yield chunk


def render_many(
    values: Iterable[Any],
    locale: str = "en",
    kind: str = "cardinal",
    workers: int = DEFAULT_WORKERS,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    errors: ErrorMode = "raise",
    **options: Any,
) -> list[str | None]:
    """Render an iterable concurrently.

    Values are split into chunks of ``chunk_size`` and each chunk is
    rendered by one of ``workers`` threads. The output keeps the input
    order.

    Args:
        values: Numbers to render. None entries stay None.
        locale: Locale code.
        kind: "cardinal", "ordinal" or "currency".
        workers: Thread count (>= 1).
        chunk_size: Values per task (>= 1).
        errors: "raise" or "null".
        **options: Render options.

    Returns:
        Rendered strings in input order.

    Raises:
        ValueError: If ``workers`` or ``chunk_size`` is below one.
        ValueParseError: If a value is invalid and ``errors`` is "raise".
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    renderer = make_renderer(locale, kind, errors, **options)

    def render_chunk(chunk: list[Any]) -> list[str | None]:
        return [renderer(value) for value in chunk]

    chunks = list(_chunks(values, chunk_size))
    total = sum(len(chunk) for chunk in chunks)
    logger.info(
        "Rendering %d values as %s (%s) with %d workers", total, kind, locale, workers
    )

    results: list[str | None] = []
    with ThreadPoolExecutor(max_workers=workers) as executor:
        for rendered in executor.map(render_chunk, chunks):
            results.extend(rendered)

    logger.info("Rendered %d values", len(results))
    return results


# =============================================================================
# Polars
# =============================================================================


def render_series(
    series: pl.Series,
    locale: str = "en",
    kind: str = "cardinal",
    *,
    errors: ErrorMode = "raise",
    **options: Any,
) -> pl.Series:
    """Render every element of a Series.

    Returns:
        A ``pl.String`` Series with the same name and length. Nulls stay
        null.
    """
    renderer = make_renderer(locale, kind, errors, **options)
    logger.info("Rendering series '%s' (%d rows) as %s (%s)", series.name, series.len(), kind, locale)
    words = [renderer(value) for value in series.to_list()]
    return pl.Series(series.name, words, dtype=pl.String)


def render_column(
    df: pl.DataFrame,
    column: str,
    locale: str = "en",
    kind: str = "cardinal",
    alias: str | None = None,
    *,
    errors: ErrorMode = "raise",
    **options: Any,
) -> pl.DataFrame:
    """Add the rendered words of ``column`` to a DataFrame.

    Args:
        df: Input frame.
        column: Column holding the numbers.
        locale: Locale code.
        kind: "cardinal", "ordinal" or "currency".
        alias: Name of the new column. Defaults to ``<column>_words``.
        errors: "raise" or "null".
        **options: Render options.

    Raises:
        KeyError: If ``column`` is not in the frame.
    """
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found. Available: {', '.join(df.columns)}")
    words = render_series(df.get_column(column), locale, kind, errors=errors, **options)
    return df.with_columns(words.alias(alias or f"{column}_words"))
