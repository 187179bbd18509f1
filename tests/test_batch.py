"""Tests for batch rendering."""

from __future__ import annotations

import logging

import polars as pl
import pytest

from numwords.batch import make_renderer, render_column, render_many, render_series
from numwords.exceptions import InvalidOptionError, InvalidValueError, UnsupportedLocaleError


class TestMakeRenderer:
    def test_renders_and_passes_none(self):
        render = make_renderer("en", "ordinal")
        assert render(3) == "third"
        assert render(None) is None

    def test_null_error_mode(self):
        render = make_renderer("en", errors="null")
        assert render("three") is None

    def test_raise_error_mode(self):
        with pytest.raises(InvalidValueError):
            make_renderer("en")("three")

    def test_options_validated_up_front(self):
        with pytest.raises(InvalidOptionError):
            make_renderer("en", gender="feminine")

    def test_currency_accepts_conjunction_toggle(self):
        render = make_renderer("de", "currency", include_conjunction=False)
        assert render("1.01") == "ein Euro ein Cent"
        with pytest.raises(InvalidOptionError):
            make_renderer("de", "cardinal", include_conjunction=False)

    def test_unknown_locale(self):
        with pytest.raises(UnsupportedLocaleError):
            make_renderer("tlh")

    @pytest.mark.parametrize("kwargs", [{"kind": "roman"}, {"errors": "ignore"}])
    def test_bad_arguments(self, kwargs):
        with pytest.raises(ValueError):
            make_renderer("en", **kwargs)


class TestRenderMany:
    def test_keeps_order_across_chunks(self):
        values = list(range(1, 51))
        expected = [make_renderer("de")(value) for value in values]
        assert render_many(values, "de", workers=4, chunk_size=7) == expected

    def test_generator_input(self):
        assert render_many((n for n in (1, 2)), "fr") == ["un", "deux"]

    def test_options(self):
        assert render_many([2, 5], "pl", gender="feminine") == ["dwie", "pięć"]

    def test_currency(self):
        assert render_many(["1.00", None], "en", "currency") == ["one dollar", None]

    def test_empty(self):
        assert render_many([], "en") == []

    @pytest.mark.parametrize("kwargs", [{"workers": 0}, {"chunk_size": 0}])
    def test_invalid_sizes(self, kwargs):
        with pytest.raises(ValueError):
            render_many([1], "en", **kwargs)

    def test_errors_propagate(self):
        with pytest.raises(InvalidValueError):
            render_many([1, "x", 3], "en", chunk_size=1)

    def test_logs_progress(self, caplog):
        with caplog.at_level(logging.INFO, logger="numwords.batch"):
            render_many([1, 2, 3], "en")
        assert "Rendering 3 values" in caplog.text


class TestPolars:
    def test_render_series(self):
        series = pl.Series("n", [1, None, 3])
        words = render_series(series, "en")
        assert words.name == "n"
        assert words.dtype == pl.String
        assert words.to_list() == ["one", None, "three"]

    def test_render_column(self):
        df = pl.DataFrame({"amount": [1, 21]})
        result = render_column(df, "amount", "es")
        assert result.columns == ["amount", "amount_words"]
        assert result["amount_words"].to_list() == ["uno", "veintiuno"]

    def test_alias_and_kind(self):
        df = pl.DataFrame({"place": [1, 2]})
        result = render_column(df, "place", "en", "ordinal", alias="spelled")
        assert result["spelled"].to_list() == ["first", "second"]

    def test_missing_column(self):
        with pytest.raises(KeyError, match="not found"):
            render_column(pl.DataFrame({"a": [1]}), "b")

    def test_string_column_with_errors_as_null(self):
        df = pl.DataFrame({"raw": ["7", "seven"]})
        result = render_column(df, "raw", errors="null")
        assert result["raw_words"].to_list() == ["seven", None]
