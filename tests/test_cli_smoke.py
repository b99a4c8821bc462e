"""
CLI smoke tests - verify commands are wired up and exit with the right codes.
"""
from __future__ import annotations

import pytest
from typer.testing import CliRunner

runner = CliRunner()


class TestCLIStructure:
    """Test that CLI commands are properly registered and accessible."""

    def test_cli_imports_without_error(self):
        from occkit.cli import app
        assert app is not None

    def test_main_help(self):
        from occkit.cli import app
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "occkit" in result.output

    @pytest.mark.parametrize("command", ["parse", "render", "scan"])
    def test_command_help(self, command: str):
        from occkit.cli import app
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0


class TestParseCommand:

    def test_parse_table(self):
        from occkit.cli import app
        result = runner.invoke(app, ["parse", "SPY251219C00650000"])
        assert result.exit_code == 0
        assert "SPY" in result.output
        assert "650.00" in result.output

    def test_parse_json_reports_error(self):
        from occkit.cli import app
        result = runner.invoke(app, ["parse", "--json", "O:SPY251219C00650000", "O:SPY251219X00650000"])
        assert result.exit_code == 1
        assert '"InvalidOptionType"' in result.output
        assert '"O:SPY251219C00650000"' in result.output

    def test_parse_letters_only(self):
        from occkit.cli import app
        result = runner.invoke(app, ["parse", "--json", "--letters-only", "O:AAPL1251219C00100000"])
        assert result.exit_code == 1
        assert '"InvalidUnderlying"' in result.output


class TestRenderCommand:

    def test_render(self):
        from occkit.cli import app
        result = runner.invoke(app, ["render", "-u", "spy", "-e", "2025-12-19", "-t", "call", "-k", "650"])
        assert result.exit_code == 0
        assert result.output.strip() == "O:SPY251219C00650000"

    def test_render_fractional_put(self):
        from occkit.cli import app
        result = runner.invoke(app, ["render", "-u", "F", "-e", "2021-11-19", "-t", "P", "-k", "14.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "O:F211119P00014500"

    @pytest.mark.parametrize("args", [
        ["-u", "SPY", "-e", "2025-12-19", "-t", "call", "-k", "650.0005"],
        ["-u", "SPY", "-e", "12/19/2025", "-t", "call", "-k", "650"],
        ["-u", "SPY", "-e", "2025-12-19", "-t", "straddle", "-k", "650"],
    ])
    def test_render_errors_exit_nonzero(self, args):
        from occkit.cli import app
        result = runner.invoke(app, ["render", *args])
        assert result.exit_code == 1


class TestScanCommand:

    def test_scan_file(self, tmp_path, sample_tickers):
        from occkit.cli import app
        path = tmp_path / "tickers.txt"
        path.write_text("# chain dump\n\n" + "\n".join(sample_tickers) + "\n", encoding="utf-8")
        result = runner.invoke(app, ["scan", str(path)])
        assert result.exit_code == 0
        assert "decoded 4" in result.output
        assert "rejected 3" in result.output
        assert "TooShort" in result.output

    def test_scan_missing_file(self, tmp_path):
        from occkit.cli import app
        result = runner.invoke(app, ["scan", str(tmp_path / "nope.txt")])
        assert result.exit_code != 0
