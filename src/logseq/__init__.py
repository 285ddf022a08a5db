"""
logseq - Turn Splunk HTTP client logs into PlantUML sequence diagrams.

The HTTP client logs "About to call API at ..." when it issues a call and
"Calling API at ... gave status code ..." when the call completes. logseq
pairs each completion with the call that caused it and draws the result.

Usage:
    from logseq import convert, ConverterConfig

    with open("export.json") as f:
        markup = convert(f, ConverterConfig(print_thread_id=False))
"""

__version__ = "0.1.0"

from typing import Iterable

from logseq.core.models import (
    LogEntry,
    RequestInfo,
    Activity,
    CorrelationResult,
)
from logseq.core.config import ConverterConfig
from logseq.core.exceptions import (
    LogSeqError,
    ParseError,
    ConfigurationError,
    MalformedUrlError,
    HostSuffixMismatchError,
    UnknownStatusCodeError,
    RequestNotFoundError,
)
from logseq.parsers import SplunkJSONParser
from logseq.application import CorrelateLogsUseCase, ConvertLogsUseCase
from logseq.rendering import render_plantuml

__all__ = [
    # Version
    "__version__",
    # Core models
    "LogEntry",
    "RequestInfo",
    "Activity",
    "CorrelationResult",
    "ConverterConfig",
    # Exceptions
    "LogSeqError",
    "ParseError",
    "ConfigurationError",
    "MalformedUrlError",
    "HostSuffixMismatchError",
    "UnknownStatusCodeError",
    "RequestNotFoundError",
    # Components
    "SplunkJSONParser",
    "CorrelateLogsUseCase",
    "ConvertLogsUseCase",
    "render_plantuml",
    # Convenience functions
    "parse_lines",
    "correlate",
    "convert",
]


def parse_lines(lines: Iterable[str]) -> list[LogEntry]:
    """
    Parse Splunk export lines into entries.

    Raises:
        ParseError: If a line cannot be decoded or a blank line sits between records
    """
    return list(SplunkJSONParser().parse_stream(iter(lines)))


def correlate(
    entries: Iterable[LogEntry],
    config: ConverterConfig | None = None,
) -> CorrelationResult:
    """
    Correlate parsed entries into activities, oldest first.

    Example:
        result = correlate(parse_lines(lines))
        for activity in result.activities:
            print(activity.message)
    """
    return CorrelateLogsUseCase(config).execute(entries)


def convert(
    lines: Iterable[str],
    config: ConverterConfig | None = None,
) -> str:
    """
    Convert Splunk export lines straight to PlantUML markup.

    Args:
        lines: Raw export lines
        config: Conversion settings

    Returns:
        The rendered diagram
    """
    config = config or ConverterConfig()
    result = correlate(parse_lines(lines), config)
    return render_plantuml(result.activities, config.title)
