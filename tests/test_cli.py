"""Tests for the duration-format CLI."""

from __future__ import annotations

from typer.testing import CliRunner

from duration_format.cli import app

runner = CliRunner()


class TestRender:
    def test_renders_given_units(self) -> None:
        result = runner.invoke(app, ["render", "--years", "2", "--months", "9", "--weeks", "3"])
        assert result.exit_code == 0
        assert result.output == "2 years 9 months 3 weeks\n"

    def test_format_and_delimiter(self) -> None:
        """--format picks units and order; --delimiter joins them."""
        result = runner.invoke(
            app,
            ["render", "--days", "2", "--hours", "4", "--format", "hours,days", "--delimiter", ", "],
        )
        assert result.exit_code == 0
        assert result.output == "4 hours, 2 days\n"

    def test_zero_flag(self) -> None:
        result = runner.invoke(app, ["render", "--years", "0", "--months", "9", "--zero"])
        assert result.exit_code == 0
        assert result.output == "0 years 9 months\n"

    def test_unset_units_not_rendered_with_zero(self) -> None:
        """Options that were not given stay unspecified, not zero."""
        result = runner.invoke(app, ["render", "--seconds", "5", "--zero"])
        assert result.output == "5 seconds\n"

    def test_empty_duration_prints_empty_line(self) -> None:
        result = runner.invoke(app, ["render"])
        assert result.exit_code == 0
        assert result.output == "\n"

    def test_unknown_format_unit_rejected(self) -> None:
        result = runner.invoke(app, ["render", "--days", "1", "--format", "days,fortnights"])
        assert result.exit_code == 2
        assert "fortnights" in result.output

    def test_negative_value_rejected(self) -> None:
        result = runner.invoke(app, ["render", "--days", "-1"])
        assert result.exit_code == 2


class TestUnits:
    def test_lists_units_and_tokens(self) -> None:
        result = runner.invoke(app, ["units"])
        assert result.exit_code == 0
        assert "years" in result.output
        assert "xSeconds" in result.output
