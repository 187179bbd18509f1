"""Tests for the command-line interface."""

from __future__ import annotations

import json

import polars as pl
import pytest
import typer
from typer.testing import CliRunner

from numwords import __version__
from numwords.cli import app, parse_option_pairs


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


@pytest.fixture
def amounts_csv(tmp_path):
    path = tmp_path / "amounts.csv"
    path.write_text("id,amount\na,1\nb,21\nc,\n", encoding="utf-8")
    return path


# =============================================================================
# Helpers
# =============================================================================


class TestParseOptionPairs:
    def test_pairs(self):
        assert parse_option_pairs(["gender=feminine", "and=false", "hundredPairing=TRUE"]) == {
            "gender": "feminine",
            "and": False,
            "hundredPairing": True,
        }

    def test_empty(self):
        assert parse_option_pairs(None) == {}

    def test_missing_equals(self):
        with pytest.raises(typer.BadParameter):
            parse_option_pairs(["gender"])


# =============================================================================
# Commands
# =============================================================================


class TestRenderCommands:
    def test_cardinal(self, runner):
        result = runner.invoke(app, ["cardinal", "1001"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "one thousand and one"

    def test_locale_and_option(self, runner):
        result = runner.invoke(app, ["cardinal", "2", "--locale", "pl", "-o", "gender=feminine"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "dwie"

    def test_negative_value(self, runner):
        result = runner.invoke(app, ["cardinal", "-l", "en-US", "--", "-5"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "minus five"

    def test_ordinal(self, runner):
        result = runner.invoke(app, ["ordinal", "21"])
        assert result.stdout.strip() == "twenty-first"

    def test_currency(self, runner):
        result = runner.invoke(app, ["currency", "2.50", "-l", "de"])
        assert result.stdout.strip() == "zwei Euro und fünfzig Cent"

    def test_unknown_locale(self, runner):
        result = runner.invoke(app, ["cardinal", "5", "-l", "tlh"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_value(self, runner):
        result = runner.invoke(app, ["ordinal", "0"])
        assert result.exit_code == 1

    def test_rejected_option(self, runner):
        result = runner.invoke(app, ["cardinal", "5", "-o", "gender=feminine"])
        assert result.exit_code == 1
        assert "does not accept" in result.output


class TestConfiguration:
    def test_config_file_sets_locale(self, runner, tmp_path):
        config = tmp_path / "numwords.yaml"
        config.write_text("locale: fr\n", encoding="utf-8")
        result = runner.invoke(app, ["--config", str(config), "cardinal", "80"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "quatre-vingts"

    def test_config_file_options(self, runner, tmp_path):
        config = tmp_path / "numwords.yaml"
        config.write_text("locale: en\noptions:\n  include_conjunction: false\n", encoding="utf-8")
        result = runner.invoke(app, ["-c", str(config), "cardinal", "101"])
        assert result.stdout.strip() == "one hundred one"

    def test_environment(self, runner, monkeypatch):
        monkeypatch.setenv("NUMWORDS_LOCALE", "nl")
        result = runner.invoke(app, ["cardinal", "21"])
        assert result.stdout.strip() == "eenentwintig"

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(app, ["-c", str(tmp_path / "absent.yaml"), "cardinal", "1"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_bad_log_level(self, runner):
        result = runner.invoke(app, ["--log-level", "LOUD", "cardinal", "1"])
        assert result.exit_code == 1


class TestLanguagesCommand:
    def test_json(self, runner):
        result = runner.invoke(app, ["languages", "--json"])
        assert result.exit_code == 0
        entries = {entry["code"]: entry for entry in json.loads(result.stdout)}
        assert entries["en"]["ordinal"] is True
        assert entries["tr"]["naive_ordinals"] is True

    def test_table(self, runner):
        result = runner.invoke(app, ["languages"])
        assert result.exit_code == 0
        assert "Supported locales" in result.stdout


class TestBatchCommand:
    def test_stdout(self, runner, amounts_csv):
        result = runner.invoke(app, ["batch", str(amounts_csv), "--column", "amount"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "id,amount,amount_words"
        assert lines[1] == "a,1,one"
        assert lines[2] == "b,21,twenty-one"
        assert lines[3] == "c,,"

    def test_output_file(self, runner, amounts_csv, tmp_path):
        output = tmp_path / "words.parquet"
        result = runner.invoke(
            app,
            ["batch", str(amounts_csv), "--column", "amount", "-k", "ordinal", "--output", str(output), "--alias", "place"],
        )
        assert result.exit_code == 0
        assert "Wrote 3 rows" in result.stdout
        assert pl.read_parquet(output)["place"].to_list() == ["first", "twenty-first", None]

    def test_null_on_error(self, runner, tmp_path):
        path = tmp_path / "mixed.csv"
        path.write_text("amount\n5\nfive\n", encoding="utf-8")
        failed = runner.invoke(app, ["batch", str(path), "--column", "amount"])
        assert failed.exit_code == 1

        result = runner.invoke(app, ["batch", str(path), "--column", "amount", "--null-on-error"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[1:] == ["5,five", "five,"]

    def test_missing_column(self, runner, amounts_csv):
        result = runner.invoke(app, ["batch", str(amounts_csv), "--column", "price"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["batch", str(tmp_path / "absent.csv"), "--column", "amount"])
        assert result.exit_code == 1


def test_version(runner):
    result = runner.invoke(app, ["version"])
    assert result.stdout.strip() == f"numwords {__version__}"
