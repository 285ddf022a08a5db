"""
CLI command implementations.

Wires the infrastructure adapters to the application use cases.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from logseq.application.convert_logs import ConvertLogsUseCase
from logseq.core.config import ConverterConfig
from logseq.core.exceptions import LogSeqError
from logseq.infrastructure import (
    FileOutputSink,
    FileStreamSource,
    StdinStreamSource,
    StreamOutputSink,
)

__all__ = ["SPLUNK_QUERY_HINT", "print_usage", "configure_logging", "convert_command"]


SPLUNK_QUERY_HINT = (
    "index=* a_rid=<guid> AND "
    "(a_logger=ApiHttpClient OR a_logger=CacheForRequestHandler)"
)


def print_usage(console: Console) -> None:
    """Print the short usage text shown when arguments are missing."""
    console.print(f"Splunk query: {escape(SPLUNK_QUERY_HINT)}", highlight=False)
    console.print("Usage:", highlight=False)
    console.print(escape("logseq [OPTIONS] <logFile> <outputFile>"), highlight=False)
    console.print(
        "[dim]Use '-' for either file to read stdin or write stdout. "
        "Run 'logseq --help' for options.[/dim]"
    )


def configure_logging(verbose: bool, console: Console) -> None:
    """
    Send library log records to a Rich handler on the given console.

    Safe to call more than once: the handler from an earlier call is
    replaced, so records always reach the latest console.
    """
    log = logging.getLogger("logseq")
    for handler in list(log.handlers):
        if isinstance(handler, RichHandler):
            log.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def create_source(file_path: str):
    """Create the source adapter for a path, '-' meaning stdin."""
    if file_path == "-":
        return StdinStreamSource()
    return FileStreamSource(file_path)


def create_sink(file_path: str):
    """Create the sink adapter for a path, '-' meaning stdout."""
    if file_path == "-":
        return StreamOutputSink()
    return FileOutputSink(file_path)


def convert_command(
    log_file: str,
    output_file: str,
    config: ConverterConfig,
    quiet: bool,
    console: Console,
    error_console: Console,
) -> int:
    """
    Convert a Splunk export into a sequence diagram.

    Returns:
        Exit code
    """
    try:
        source = create_source(log_file)
    except OSError as e:
        error_console.print(f"[red]Error reading {escape(log_file)}:[/red] {escape(str(e))}")
        return 1

    try:
        use_case = ConvertLogsUseCase(
            source=source,
            sink=create_sink(output_file),
            config=config,
        )
        result = use_case.execute()

    except UnicodeDecodeError as e:
        error_console.print(f"[red]Error reading {escape(log_file)}:[/red] {escape(str(e))}")
        return 1
    except LogSeqError as e:
        error_console.print(
            f"[red]{type(e).__name__}:[/red] {escape(str(e))}", highlight=False
        )
        return 1
    except OSError as e:
        # Open failures on either file; the message names the path
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    # Keep stdout clean when the diagram itself goes there
    if not quiet and output_file != "-":
        console.print(
            f"[green]Wrote {result.activity_count} activities to[/green] {escape(output_file)}"
        )
        console.print(
            f"[dim]{result.relevant_entries} of {result.total_entries} entries relevant, "
            f"{result.resolved_responses} responses paired, "
            f"{result.cache_hits} cache hits[/dim]"
        )

    return 0
