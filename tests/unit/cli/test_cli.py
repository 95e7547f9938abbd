"""Unit tests for the command line interface."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from src.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep loguru's sinks untouched while commands run."""
    with patch("src.cli.reference_commands.configure_logging") as mock_configure:
        yield mock_configure


class TestListCommand:
    """Test the list command."""

    def test_list_all(self, runner):
        """Should list both sections."""
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "Found 20 references" in result.output

    def test_list_one_section(self, runner):
        """Should list only the requested section."""
        result = runner.invoke(app, ["list", "--section", "features"])

        assert result.exit_code == 0
        assert "Found 10 references" in result.output

    def test_list_unknown_section(self, runner):
        """Should fail for an unknown section."""
        result = runner.invoke(app, ["list", "--section", "nope"])

        assert result.exit_code == 1
        assert "Unknown section" in result.output


class TestRunCommand:
    """Test running references from the command line."""

    def test_run_named_demonstrations(self, runner):
        """Should run and print only the named demonstrations."""
        result = runner.invoke(app, ["run", "features", "arrays", "string-joiner"])

        assert result.exit_code == 0
        assert "Running 2 features reference(s)" in result.output
        assert "015689" in result.output
        assert "[leo:lex:max]" in result.output

    def test_run_whole_section(self, runner):
        """Without names the whole section should run."""
        result = runner.invoke(app, ["run", "collections"])

        assert result.exit_code == 0
        assert "Running 10 collections reference(s)" in result.output

    def test_run_unknown_demonstration(self, runner):
        """Should print an error and exit with code 1."""
        result = runner.invoke(app, ["run", "features", "nope"])

        assert result.exit_code == 1
        assert "Unknown demonstration" in result.output

    def test_run_unknown_section(self, runner):
        """Should print an error and exit with code 1."""
        result = runner.invoke(app, ["run", "nope"])

        assert result.exit_code == 1
        assert "Unknown section" in result.output

    def test_log_level_option(self, runner, quiet_logging):
        """--log-level should be passed to the logging setup."""
        result = runner.invoke(app, ["run", "features", "arrays", "--log-level", "debug"])

        assert result.exit_code == 0
        assert quiet_logging.call_args.kwargs["level"] == "debug"


class TestSectionCommands:
    """Test the per-section shortcuts."""

    @pytest.mark.parametrize("section", ["collections", "features"])
    def test_section_command(self, runner, section):
        """Each section command should run all ten references."""
        result = runner.invoke(app, [section])

        assert result.exit_code == 0
        assert f"Running 10 {section} reference(s)" in result.output

    def test_no_arguments_shows_help(self, runner):
        """Running without a command should print the help."""
        result = runner.invoke(app, [])

        assert "list" in result.output
        assert "features" in result.output
