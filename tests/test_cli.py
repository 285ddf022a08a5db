"""
Tests for CLI interface.
"""

import io
import logging

import pytest
from click.testing import CliRunner
from rich.console import Console
from rich.logging import RichHandler

from logseq.cli.commands import configure_logging
from logseq.cli.main import cli

from conftest import response_message, splunk_line


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def logseq_logger():
    """The package logger, with handlers removed afterwards."""
    log = logging.getLogger("logseq")
    yield log
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)


class TestCLI:
    """Tests for CLI basics."""

    def test_cli_version(self, runner):
        """Test --version flag."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_cli_help(self, runner):
        """Test --help flag."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "--thread-id" in result.output
        assert "--collapse" in result.output
        assert "--host-suffix" in result.output

    def test_no_arguments_prints_usage(self, runner):
        """Test missing arguments print usage and exit cleanly."""
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "a_logger=ApiHttpClient" in result.output

    def test_one_argument_prints_usage(self, runner, export_file):
        """Test a single argument is treated as missing arguments."""
        result = runner.invoke(cli, [str(export_file)])
        assert result.exit_code == 0
        assert "Usage:" in result.output


class TestConvertCommand:
    """Tests for the conversion itself."""

    def test_convert_file(self, runner, export_file, tmp_path):
        """Test converting an export to a diagram file."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, [str(export_file), str(out)])

        assert result.exit_code == 0
        assert "Wrote 3 activities" in result.output
        text = out.read_text()
        assert text.startswith("@startuml")
        assert "pfp -> billing: T:7 GET /x?y=1" in text
        assert "pfp -> pfp: T:3 Found in cache: reporting POST /r" in text

    def test_no_thread_id(self, runner, export_file, tmp_path):
        """Test --no-thread-id drops the prefix."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, ["--no-thread-id", str(export_file), str(out)])

        assert result.exit_code == 0
        assert "pfp -> billing: GET /x?y=1" in out.read_text()

    def test_collapse(self, runner, export_file, tmp_path):
        """Test --collapse drops the call summary from answers."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, ["--collapse", str(export_file), str(out)])

        assert result.exit_code == 0
        assert "billing -> pfp: T:7 HTTP 200 (OK)\n" in out.read_text()

    def test_caller_and_title(self, runner, export_file, tmp_path):
        """Test caller and title options."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(
            cli, ["--caller", "web", "--title", "Checkout", str(export_file), str(out)]
        )

        assert result.exit_code == 0
        text = out.read_text()
        assert "title Checkout" in text
        assert "web -> billing" in text

    def test_quiet(self, runner, export_file, tmp_path):
        """Test --quiet suppresses the summary."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, ["--quiet", str(export_file), str(out)])

        assert result.exit_code == 0
        assert "Wrote" not in result.output
        assert out.exists()

    def test_stdin_to_stdout(self, runner, billing_pair_lines):
        """Test '-' reads stdin and writes stdout."""
        result = runner.invoke(cli, ["-", "-"], input="\n".join(billing_pair_lines) + "\n")

        assert result.exit_code == 0
        assert result.output.startswith("@startuml")
        assert "billing -> pfp: T:7 HTTP 200 (OK), billing GET /x?y=1" in result.output
        assert "Wrote" not in result.output


class TestConvertErrors:
    """Tests for fatal errors."""

    def test_missing_input_file(self, runner, tmp_path):
        """Test a missing input file is an error."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, [str(tmp_path / "missing.json"), str(out)])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not out.exists()

    def test_request_not_found(self, runner, tmp_path):
        """Test an unpaired response fails without writing output."""
        export = tmp_path / "export.json"
        export.write_text(
            splunk_line("2026-01-27T10:00:00Z", response_message("https://billing.intelliflo.com/x")) + "\n"
        )
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, [str(export), str(out)])

        assert result.exit_code == 1
        assert "RequestNotFoundError" in result.output
        assert not out.exists()

    def test_parse_error(self, runner, tmp_path):
        """Test an undecodable line fails the run."""
        export = tmp_path / "export.json"
        export.write_text("not json\n")
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, [str(export), str(out)])

        assert result.exit_code == 1
        assert "ParseError" in result.output
        assert not out.exists()

    def test_bad_host_suffix_option(self, runner, export_file, tmp_path):
        """Test an invalid host suffix is a configuration error."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, ["--host-suffix", "intelliflo.com", str(export_file), str(out)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert not out.exists()

    def test_host_suffix_mismatch(self, runner, export_file, tmp_path):
        """Test a suffix that does not fit the logged hosts fails the run."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, ["--host-suffix", ".example.com", str(export_file), str(out)])

        assert result.exit_code == 1
        assert "HostSuffixMismatchError" in result.output
        assert not out.exists()

    def test_directory_as_input(self, runner, tmp_path):
        """Test a directory given as the export is reported as a read error."""
        out = tmp_path / "diagram.puml"
        result = runner.invoke(cli, [str(tmp_path), str(out)])

        assert result.exit_code == 1
        assert "Error reading" in result.output
        assert "writing" not in result.output
        assert not out.exists()


class TestLogging:
    """Tests for log handler setup."""

    def test_reconfigure_replaces_handler(self, logseq_logger):
        """Test a second call routes records to the new console only."""
        first, second = io.StringIO(), io.StringIO()
        configure_logging(True, Console(file=first, width=200))
        configure_logging(True, Console(file=second, width=200))

        handlers = [h for h in logseq_logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1

        logging.getLogger("logseq.application").debug("paired response")
        assert "paired response" in second.getvalue()
        assert first.getvalue() == ""

    def test_quiet_level_after_verbose(self, logseq_logger):
        """Test a later non-verbose call raises the level back."""
        configure_logging(True, Console(file=io.StringIO()))
        configure_logging(False, Console(file=io.StringIO()))
        assert logseq_logger.level == logging.WARNING

    def test_repeated_invocations_keep_one_handler(self, runner, export_file, tmp_path, logseq_logger):
        """Test running the command twice does not stack handlers."""
        for name in ("one.puml", "two.puml"):
            result = runner.invoke(cli, ["-v", str(export_file), str(tmp_path / name)])
            assert result.exit_code == 0

        assert len([h for h in logseq_logger.handlers if isinstance(h, RichHandler)]) == 1
