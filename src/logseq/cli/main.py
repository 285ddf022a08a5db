"""
Main CLI entry point for logseq.
"""

import click
from rich.console import Console
from rich.markup import escape

from logseq import __version__
from logseq.core.config import (
    DEFAULT_CALLER_IDENTITY,
    DEFAULT_HOST_SUFFIX,
    DEFAULT_TITLE,
    ConverterConfig,
)
from logseq.core.exceptions import ConfigurationError

console = Console()
error_console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__, prog_name="logseq")
@click.argument("log_file", required=False)
@click.argument("output_file", required=False)
@click.option(
    "--thread-id/--no-thread-id", "print_thread_id", default=True,
    help="Prefix each message with the logging thread id (default: on)"
)
@click.option(
    "--collapse/--no-collapse", "collapse", default=False,
    help="Draw each call next to its response, in actual execution order"
)
@click.option(
    "--caller", default=DEFAULT_CALLER_IDENTITY, show_default=True,
    help="Participant name of the calling website"
)
@click.option(
    "--host-suffix", default=DEFAULT_HOST_SUFFIX, show_default=True,
    help="Domain suffix stripped from hosts to name services"
)
@click.option(
    "--title", default=DEFAULT_TITLE, show_default=True,
    help="Diagram title"
)
@click.option("--verbose", "-v", is_flag=True, help="Log correlation details to stderr")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def cli(
    ctx: click.Context,
    log_file: str | None,
    output_file: str | None,
    print_thread_id: bool,
    collapse: bool,
    caller: str,
    host_suffix: str,
    title: str,
    verbose: bool,
    quiet: bool,
) -> None:
    """
    logseq - Splunk export to PlantUML sequence diagram

    Reads a Splunk JSON export of HTTP client log lines, pairs each
    response with the call that caused it, and writes the interactions
    as a PlantUML sequence diagram.

    Examples:

    \b
        logseq export.json diagram.puml
        logseq --no-thread-id --collapse export.json diagram.puml
        cat export.json | logseq - -
    """
    from logseq.cli.commands import configure_logging, convert_command, print_usage

    if not log_file or not output_file:
        print_usage(console)
        ctx.exit(0)

    configure_logging(verbose, error_console)

    try:
        config = ConverterConfig(
            print_thread_id=print_thread_id,
            collapse_to_actual_execution_order=collapse,
            caller_identity=caller,
            host_suffix=host_suffix,
            title=title,
        )
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error:[/red] {escape(str(e))}", highlight=False)
        ctx.exit(1)

    exit_code = convert_command(
        log_file=log_file,
        output_file=output_file,
        config=config,
        quiet=quiet,
        console=console,
        error_console=error_console,
    )
    ctx.exit(exit_code)


if __name__ == "__main__":
    cli()
